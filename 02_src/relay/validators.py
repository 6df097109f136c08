"""Input validators for admin commands."""

import math
from urllib.parse import urlsplit

ALLOWED_MEDIA_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "mp4", "pdf")


def is_valid_media_url(url) -> bool:
    """Check that url is absolute and points at an allowed media file."""
    if not isinstance(url, str) or not url:
        return False

    try:
        parts = urlsplit(url)
    except ValueError:
        return False

    if not parts.scheme or not parts.netloc:
        return False

    path = parts.path.lower()
    return any(path.endswith("." + ext) for ext in ALLOWED_MEDIA_EXTENSIONS)


def is_valid_coordinate(lat, lon) -> bool:
    """Check that (lat, lon) is a finite point on the globe."""
    try:
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError):
        return False

    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False

    return -90 <= lat <= 90 and -180 <= lon <= 180

"""Tests for validators."""

import pytest

from relay.validators import is_valid_coordinate, is_valid_media_url


class TestIsValidMediaUrl:
    """Tests for is_valid_media_url()."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://x.com/a.jpg",
            "https://x.com/a.PNG",
            "http://example.com/files/report.pdf",
            "https://cdn.example.com/clip.mp4?token=abc",
            "https://example.com/anim.GIF",
            "https://example.com/photo.jpeg",
        ],
    )
    def test_allowed_extensions(self, url):
        """Test that absolute URLs with allowed extensions pass."""
        assert is_valid_media_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "https://x.com/a.exe",
            "https://x.com/a",
            "https://x.com/jpg",
            "https://x.com/?file=a.jpg",
        ],
    )
    def test_disallowed_paths(self, url):
        """Test that paths without an allowed extension fail."""
        assert is_valid_media_url(url) is False

    @pytest.mark.parametrize(
        "url",
        ["not a url", "", "/relative/a.jpg", "x.com/a.jpg", "http://[::1/a.jpg", None, 42],
    )
    def test_malformed_never_raises(self, url):
        """Test that malformed input returns False instead of raising."""
        assert is_valid_media_url(url) is False


class TestIsValidCoordinate:
    """Tests for is_valid_coordinate()."""

    @pytest.mark.parametrize(
        "lat, lon",
        [(90, 180), (-90, -180), (0, 0), (41.31, 69.24), ("41.3", "69.2")],
    )
    def test_valid(self, lat, lon):
        """Test points inside the globe bounds."""
        assert is_valid_coordinate(lat, lon) is True

    @pytest.mark.parametrize(
        "lat, lon",
        [
            (91, 0),
            (-90.5, 0),
            (0, 180.01),
            (0, -181),
            (float("nan"), 0),
            (0, float("inf")),
            ("abc", 0),
            (None, 0),
        ],
    )
    def test_invalid(self, lat, lon):
        """Test out-of-range and non-numeric points."""
        assert is_valid_coordinate(lat, lon) is False

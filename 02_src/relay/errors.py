"""Exception hierarchy for the relay bot."""


class RelayError(Exception):
    """Base class for all relay errors."""


class ConfigError(RelayError):
    """Required configuration is missing or malformed."""


class TelegramAPIError(RelayError):
    """Bot API call failed (transport error or ``ok: false`` response)."""

    def __init__(self, description: str, error_code: int | None = None):
        super().__init__(description)
        self.description = description
        self.error_code = error_code


class DeliveryError(RelayError):
    """A queued action could not be delivered. The admin has been notified."""


class QueueFullError(RelayError):
    """A queued action was dropped because the dispatch queue is full."""


def describe_error(exc: BaseException) -> str:
    """Plain-text description of an error for admin diagnostics."""
    description = getattr(exc, "description", None)
    if description:
        return str(description)
    return str(exc) or type(exc).__name__

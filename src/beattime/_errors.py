"""Exception hierarchy for Internet Time conversion."""


class BeatTimeError(Exception):
    """Base exception for beattime errors.

    ``str(err)`` is a short category message such as ``"invalid precision"``;
    ``internal()`` names the offending value and type.
    """

    def __init__(self, user_message: str, internal_details: str = "") -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message

    def internal(self) -> str:
        return self.internal_details


class InvalidPrecisionError(BeatTimeError, ValueError):
    """Raised when a precision is not a non-negative integer."""


class InvalidTimestampError(BeatTimeError, ValueError):
    """Raised when a timestamp is not an integer millisecond count."""


class InvalidBeatValueError(BeatTimeError, ValueError):
    """Raised when a scaled beat value falls outside one day."""


ERR_MSG_INVALID_PRECISION = "invalid precision"
ERR_MSG_INVALID_TIMESTAMP = "invalid timestamp"
ERR_MSG_INVALID_BEAT_VALUE = "beat value out of range"

"""Domain error types."""


class ValidationError(Exception):
    """Raised when client input is missing or malformed."""


class PayloadTooLarge(Exception):
    """Raised when an uploaded audio payload exceeds the size bound."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f'Audio payload is {size} bytes, limit is {limit} bytes')
        self.size = size
        self.limit = limit


class UpstreamError(Exception):
    """Raised when the completion or transcription provider fails or is unreachable."""


class StorageUnavailable(Exception):
    """Raised by durable message stores when the backing storage cannot be reached."""

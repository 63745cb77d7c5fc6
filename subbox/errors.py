from typing import Optional

# Every error carries the reason code and HTTP status it is rendered with (see main.py)

class SubboxError(Exception):
    """Base exception for all errors surfaced through the error envelope."""
    code = "ERR_UNSPECIFIED"
    status_code = 500

class ConfigurationError(SubboxError):
    """Raised when a required setting is missing."""

class AuthMissingError(SubboxError):
    """Raised when the YouTube credential query parameters are absent."""
    code = "AUTH_YOUTUBE_MISSING"
    status_code = 403

class YouTubeAPIError(SubboxError):
    """
    Exception raised for YouTube Data API errors.

    Covers transport and HTTP failures as well as payloads that do not
    have the expected shape.

    Attributes:
        message: Error description
        original_error: Exception raised by the client library, if any
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

class ChannelNotFoundError(YouTubeAPIError):
    """The upstream call succeeded but no channel matched the requested id."""
    code = "ERR_YT_CHANNEL_MISSING"
    status_code = 404

    def __init__(self, channel_id: str):
        super().__init__(f"Channel not found: {channel_id}")
        self.channel_id = channel_id

class FeedAggregationError(SubboxError):
    """A single channel pipeline failed, which aborts the whole feed."""
    code = "ERR_FETCHING"

    def __init__(self, channel_id: Optional[str], original_error: Exception):
        super().__init__(f"Fetching uploads of channel {channel_id} failed: {original_error}")
        self.channel_id = channel_id
        self.original_error = original_error

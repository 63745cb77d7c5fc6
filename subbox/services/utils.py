from googleapiclient.errors import HttpError

from ..errors import ChannelNotFoundError, FeedAggregationError, YouTubeAPIError

def newest_first(videos):
    """
    Sorts videos by upload time, newest first.
    ISO-8601 timestamps from YouTube share one format (UTC, "Z"), so comparing
    the strings is comparing the instants. Videos without a timestamp go last;
    equal timestamps keep their input order.
    """
    return sorted(videos, key=lambda v: v.uploaded_at or "", reverse=True)

def error_detail(error) -> dict:
    """
    Builds the `detail` object of an error envelope.

    Only the exception type and message are exposed, plus status and reason
    for HTTP errors from YouTube. The request URI (which carries the API key),
    response bodies and transport objects never end up in a response.
    """
    if error is None:
        return {}

    detail = {"type": type(error).__name__, "message": str(error)}

    if isinstance(error, ChannelNotFoundError):
        detail["channelId"] = error.channel_id
    elif isinstance(error, FeedAggregationError):
        detail["channelId"] = error.channel_id
        detail["cause"] = error_detail(error.original_error)
    elif isinstance(error, YouTubeAPIError):
        original = error.original_error
        if isinstance(original, HttpError):
            detail["status"] = original.resp.status
            detail["reason"] = original.reason

    return detail

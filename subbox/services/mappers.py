from typing import Optional

from ..models import Channel, Thumbnails, Video
from .records import ChannelRecord, PlaylistItemRecord, SubscriptionRecord, ThumbnailDetails

THUMBNAIL_SIZES = ("default", "medium", "high", "maxres", "standard")

def thumbnails_from_record(details: Optional[ThumbnailDetails]) -> Thumbnails:
    """Copies the URL of every known size, None where YouTube has none."""
    urls = {}
    for size in THUMBNAIL_SIZES:
        thumb = getattr(details, size, None) if details else None
        urls[size] = thumb.url if thumb else None
    return Thumbnails(**urls)

def channel_from_subscription(record: SubscriptionRecord) -> Channel:
    snippet = record.snippet
    if snippet is None:
        return Channel(icon=thumbnails_from_record(None))

    resource = snippet.resource_id
    return Channel(
        id=resource.channel_id if resource else None,
        name=snippet.title,
        icon=thumbnails_from_record(snippet.thumbnails),
    )

def channel_from_channel_record(record: ChannelRecord) -> Channel:
    snippet = record.snippet
    details = record.content_details
    playlists = details.related_playlists if details else None

    return Channel(
        id=record.id,
        name=snippet.title if snippet else None,
        icon=thumbnails_from_record(snippet.thumbnails if snippet else None),
        upload_playlist_id=playlists.uploads if playlists else None,
    )

def video_from_playlist_item(record: PlaylistItemRecord) -> Video:
    # uploaded_by is attached by the caller, a playlist item does not carry the channel
    snippet = record.snippet
    if snippet is None:
        return Video(thumbnails=thumbnails_from_record(None))

    resource = snippet.resource_id
    return Video(
        id=resource.video_id if resource else None,
        title=snippet.title,
        description=snippet.description,
        uploaded_at=snippet.published_at,
        thumbnails=thumbnails_from_record(snippet.thumbnails),
    )

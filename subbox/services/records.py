from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

# Shapes of the Data API items, limited to what the `fields` filters in youtube.py request.
# YouTube omits keys freely, so everything is optional.

class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

class Thumbnail(Record):
    url: Optional[str] = None

class ThumbnailDetails(Record):
    default: Optional[Thumbnail] = None
    medium: Optional[Thumbnail] = None
    high: Optional[Thumbnail] = None
    maxres: Optional[Thumbnail] = None
    standard: Optional[Thumbnail] = None

class ResourceId(Record):
    channel_id: Optional[str] = None
    video_id: Optional[str] = None

# subscriptions.list

class SubscriptionSnippet(Record):
    title: Optional[str] = None
    resource_id: Optional[ResourceId] = None
    thumbnails: Optional[ThumbnailDetails] = None

class SubscriptionRecord(Record):
    snippet: Optional[SubscriptionSnippet] = None

# channels.list

class ChannelSnippet(Record):
    title: Optional[str] = None
    thumbnails: Optional[ThumbnailDetails] = None

class RelatedPlaylists(Record):
    uploads: Optional[str] = None

class ChannelContentDetails(Record):
    related_playlists: Optional[RelatedPlaylists] = None

class ChannelRecord(Record):
    id: Optional[str] = None
    snippet: Optional[ChannelSnippet] = None
    content_details: Optional[ChannelContentDetails] = None

# playlistItems.list

class PlaylistItemSnippet(Record):
    title: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[str] = None
    resource_id: Optional[ResourceId] = None
    thumbnails: Optional[ThumbnailDetails] = None

class PlaylistItemRecord(Record):
    snippet: Optional[PlaylistItemSnippet] = None

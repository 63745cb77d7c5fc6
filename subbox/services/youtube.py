import asyncio
import logging
import math
from functools import partial

import google_auth_httplib2
import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from pydantic import ValidationError

from ..config import settings
from ..errors import ChannelNotFoundError, ConfigurationError, YouTubeAPIError
from ..models import Page
from .mappers import channel_from_channel_record, channel_from_subscription, video_from_playlist_item
from .records import ChannelRecord, PlaylistItemRecord, SubscriptionRecord

logger = logging.getLogger(__name__)

# Upper limit of maxResults for every list call of the Data API
PAGE_SIZE = 50

SUBSCRIPTION_FIELDS = "items(snippet(resourceId/channelId,thumbnails,title)),nextPageToken,pageInfo"
CHANNEL_FIELDS = "items(contentDetails/relatedPlaylists/uploads,id,snippet(thumbnails,title))"
PLAYLIST_ITEM_FIELDS = (
    "items(snippet(description,publishedAt,resourceId/videoId,thumbnails,title)),nextPageToken,pageInfo"
)

class YouTubeClient:
    """
    Request-scoped handle on the YouTube Data API.

    Wraps a discovery resource together with a factory for HTTP transports.
    httplib2 transports are not thread-safe, so every call gets its own one,
    which lets concurrent calls of one request share the client.
    """

    def __init__(self, resource, http_factory):
        self.resource = resource
        self._http_factory = http_factory

    async def execute(self, request):
        """Runs a prepared API request in a worker thread."""
        try:
            return await asyncio.to_thread(request.execute, http=self._http_factory())
        except HttpError as e:
            logger.error(f"YouTube API returned HTTP {e.resp.status}: {e.reason}")
            raise YouTubeAPIError(f"YouTube API request failed with HTTP {e.resp.status}", e) from e
        except (httplib2.HttpLib2Error, GoogleAuthError, OSError) as e:
            logger.error(f"YouTube API request failed: {type(e).__name__}")
            raise YouTubeAPIError(f"YouTube API request failed: {type(e).__name__}", e) from e

def _new_http(credentials=None):
    http = httplib2.Http(timeout=settings.UPSTREAM_TIMEOUT)
    if credentials is not None:
        return google_auth_httplib2.AuthorizedHttp(credentials, http=http)
    return http

def get_youtube_client(credentials) -> YouTubeClient:
    """Client acting on behalf of the user (needed for subscriptions)."""
    resource = build('youtube', 'v3', credentials=credentials, cache_discovery=False)
    return YouTubeClient(resource, partial(_new_http, credentials))

def get_api_client(api_key=None) -> YouTubeClient:
    """Client for public reads (channels, playlists), authenticated by API key."""
    api_key = api_key or settings.YOUTUBE_API_KEY
    if not api_key:
        # Without a key the client library falls back to application default credentials
        raise ConfigurationError("YOUTUBE_API_KEY is not configured")
    resource = build('youtube', 'v3', developerKey=api_key, cache_discovery=False)
    return YouTubeClient(resource, _new_http)

def _items(response):
    if not isinstance(response, dict) or not response:
        raise YouTubeAPIError("YouTube API returned an empty or malformed response")
    items = response.get("items", [])
    if not isinstance(items, list):
        raise YouTubeAPIError("YouTube API returned a malformed item list")
    return items

def _records(items, record_type):
    try:
        return [record_type.model_validate(item) for item in items]
    except ValidationError as e:
        raise YouTubeAPIError(f"YouTube API returned a malformed {record_type.__name__}", e) from e

async def fetch_page(youtube: YouTubeClient, list_request, record_type, mapper, page_token=None) -> Page:
    """
    Fetches one page of a list endpoint and maps its items.

    `list_request` is a bound `list` method of the discovery resource with
    everything but the page token filled in. Exactly one upstream call is
    made; items keep the order YouTube returned them in.
    """
    response = await youtube.execute(list_request(pageToken=page_token))
    records = _records(_items(response), record_type)
    return Page(
        items=[mapper(record) for record in records],
        next_page_token=response.get("nextPageToken") or None,
    )

async def fetch_subscription_page(youtube: YouTubeClient, page_token=None) -> Page:
    """Fetches a page of channels the authenticated user subscribed to."""
    list_request = partial(
        youtube.resource.subscriptions().list,
        part="snippet",
        mine=True,
        maxResults=PAGE_SIZE,
        order="alphabetical",
        fields=SUBSCRIPTION_FIELDS,
    )
    return await fetch_page(youtube, list_request, SubscriptionRecord, channel_from_subscription, page_token)

async def fetch_all_subscriptions(youtube: YouTubeClient, max_items: int) -> list:
    """
    Fetches the channels the authenticated user subscribed to.

    The cap is applied per page: at most ceil(max_items / 50) pages are
    requested and the last one is kept whole, so up to 49 channels more
    than `max_items` can be returned. Subscriptions without a channel id
    are dropped.
    """
    remaining_pages = math.ceil(max_items / PAGE_SIZE)
    channels = []
    page_token = None

    while True:
        remaining_pages -= 1
        page = await fetch_subscription_page(youtube, page_token)
        for channel in page.items:
            if channel.id:
                channels.append(channel)
            else:
                logger.warning(f"Skipping subscription without channel id: {channel.name}")
        page_token = page.next_page_token
        if not page_token or remaining_pages <= 0:
            break

    logger.info(f"Fetched {len(channels)} subscriptions")
    return channels

async def fetch_channel(youtube: YouTubeClient, channel_id: str):
    """Fetches channel info including the id of its uploads playlist."""
    request = youtube.resource.channels().list(
        part="snippet,contentDetails",
        id=channel_id,
        fields=CHANNEL_FIELDS,
    )
    response = await youtube.execute(request)
    if not isinstance(response, dict):
        raise YouTubeAPIError("YouTube API returned a malformed response")

    # With a fields filter YouTube drops "items" entirely when nothing matched
    items = response.get("items") or []
    if not isinstance(items, list):
        raise YouTubeAPIError("YouTube API returned a malformed item list")
    if not items:
        logger.warning(f"Channel {channel_id} not found")
        raise ChannelNotFoundError(channel_id)

    return channel_from_channel_record(_records(items[:1], ChannelRecord)[0])

async def fetch_playlist_items(youtube: YouTubeClient, playlist_id: str, page_token=None) -> Page:
    """Fetches a page of (max. 50) videos in a playlist."""
    list_request = partial(
        youtube.resource.playlistItems().list,
        part="snippet",
        playlistId=playlist_id,
        maxResults=PAGE_SIZE,
        fields=PLAYLIST_ITEM_FIELDS,
    )
    return await fetch_page(youtube, list_request, PlaylistItemRecord, video_from_playlist_item, page_token)

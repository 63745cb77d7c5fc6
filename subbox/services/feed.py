import asyncio
import logging

from ..errors import FeedAggregationError, YouTubeAPIError
from .utils import newest_first
from .youtube import fetch_all_subscriptions, fetch_channel, fetch_playlist_items

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 100
DEFAULT_CONCURRENCY = 5

async def fetch_channel_uploads(api_client, channel_id):
    """Resolves a channel and returns the first page of its uploads, tagged with the channel."""
    channel = await fetch_channel(api_client, channel_id)
    if not channel.upload_playlist_id:
        raise YouTubeAPIError(f"Channel {channel_id} has no uploads playlist")

    uploads = await fetch_playlist_items(api_client, channel.upload_playlist_id)
    return [video.model_copy(update={"uploaded_by": channel}) for video in uploads.items]

async def build_feed(user_client, api_client, max_subscriptions,
                     result_limit=DEFAULT_RESULT_LIMIT, concurrency=DEFAULT_CONCURRENCY):
    """
    Builds the feed of the user, newest videos first.

    Subscriptions are read with the user's client, channels and uploads with
    the API key client. At most `concurrency` channels are processed at once.
    The first failing channel cancels the others and fails the whole feed.
    """
    subscriptions = await fetch_all_subscriptions(user_client, max_subscriptions)
    if not subscriptions:
        return []

    semaphore = asyncio.Semaphore(concurrency)

    async def process(channel):
        async with semaphore:
            try:
                return await fetch_channel_uploads(api_client, channel.id)
            except YouTubeAPIError as e:
                raise FeedAggregationError(channel.id, e) from e

    tasks = [asyncio.create_task(process(channel)) for channel in subscriptions]
    try:
        results = await asyncio.gather(*tasks)
    except FeedAggregationError as e:
        logger.error(f"Aborting feed of {len(subscriptions)} channels: {e}")
        raise
    finally:
        # No-op on success, cancels the still running siblings after a failure
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    videos = [video for uploads in results for video in uploads]
    logger.info(f"Collected {len(videos)} videos from {len(subscriptions)} channels")
    return newest_first(videos)[:result_limit]

import logging

from fastapi import FastAPI, Depends, Request, Response
from fastapi.responses import JSONResponse

from subbox.auth import youtube_credentials
from subbox.config import settings
from subbox.errors import SubboxError, YouTubeAPIError
from subbox.models import Channel, DataCollectionResponse, DataResponse, ErrorResponse, Video
from subbox.services.feed import build_feed
from subbox.services.utils import error_detail
from subbox.services.youtube import (
    get_youtube_client,
    get_api_client,
    fetch_all_subscriptions,
    fetch_channel,
    fetch_playlist_items
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Subbox REST API")

def error_response(error, code: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(error=code, detail=error_detail(error))
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))

@app.exception_handler(SubboxError)
async def subbox_error_handler(request: Request, exc: SubboxError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed ({exc.code}): {exc}")
    return error_response(exc, exc.code, exc.status_code)

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    # The message of an unknown exception may contain anything, only expose its type
    body = ErrorResponse(error=SubboxError.code, detail={"type": type(exc).__name__})
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))

# A client is built for every request, user credentials must never outlive it

def user_client(credentials=Depends(youtube_credentials)):
    return get_youtube_client(credentials)

def api_client():
    return get_api_client(settings.YOUTUBE_API_KEY)

@app.get("/", status_code=204)
def index():
    # Confirms the router is up
    return Response(status_code=204)

@app.get("/subscriptions", response_model=DataCollectionResponse[Channel])
async def get_subscriptions(youtube=Depends(user_client)):
    channels = await fetch_all_subscriptions(youtube, settings.MAX_SUBSCRIPTIONS)
    return DataCollectionResponse[Channel].of(channels)

@app.get("/subscriptions/feed", response_model=DataCollectionResponse[Video])
async def get_subscription_feed(youtube=Depends(user_client), public=Depends(api_client)):
    videos = await build_feed(
        youtube,
        public,
        settings.MAX_SUBSCRIPTIONS,
        result_limit=settings.FEED_RESULT_LIMIT,
        concurrency=settings.FEED_CONCURRENCY
    )
    return DataCollectionResponse[Video].of(videos)

@app.get("/channel/{channel_id}/info", response_model=DataResponse[Channel])
async def get_channel_info(channel_id: str, public=Depends(api_client)):
    channel = await fetch_channel(public, channel_id)
    return DataResponse[Channel](data=channel)

@app.get("/channel/{channel_id}/videos", response_model=DataCollectionResponse[Video])
async def get_channel_videos(channel_id: str, public=Depends(api_client)):
    # Only the first page of uploads, deeper pagination is not offered
    channel = await fetch_channel(public, channel_id)
    if not channel.upload_playlist_id:
        raise YouTubeAPIError(f"Channel {channel_id} has no uploads playlist")
    uploads = await fetch_playlist_items(public, channel.upload_playlist_id)
    return DataCollectionResponse[Video].of(uploads.items)

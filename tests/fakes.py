from unittest.mock import MagicMock
from subbox.services.youtube import YouTubeClient

THUMBNAIL_SIZES = ("default", "medium", "high", "maxres", "standard")

def thumbnails(prefix, sizes=THUMBNAIL_SIZES):
    return {size: {"url": f"https://yt3.ggpht.com/{prefix}/{size}.jpg"} for size in sizes}

def subscription_item(channel_id, title=None):
    return {
        "snippet": {
            "title": title or f"Channel {channel_id}",
            "resourceId": {"channelId": channel_id},
            "thumbnails": thumbnails(channel_id),
        }
    }

def subscription_page(channel_ids, next_page_token=None):
    page = {
        "items": [subscription_item(cid) for cid in channel_ids],
        "pageInfo": {"totalResults": len(channel_ids), "resultsPerPage": 50},
    }
    if next_page_token:
        page["nextPageToken"] = next_page_token
    return page

def channel_response(channel_id):
    return {
        "items": [{
            "id": channel_id,
            "snippet": {"title": f"Channel {channel_id}", "thumbnails": thumbnails(channel_id, ("default",))},
            "contentDetails": {"relatedPlaylists": {"uploads": f"UU{channel_id}"}},
        }]
    }

def playlist_item(video_id, published_at):
    return {
        "snippet": {
            "title": f"Video {video_id}",
            "description": f"Description of {video_id}",
            "publishedAt": published_at,
            "resourceId": {"videoId": video_id},
            "thumbnails": thumbnails(video_id, ("default", "high")),
        }
    }

def playlist_response(items, next_page_token=None):
    response = {"items": items, "pageInfo": {"totalResults": len(items), "resultsPerPage": 50}}
    if next_page_token:
        response["nextPageToken"] = next_page_token
    return response

def _request(payload):
    request = MagicMock()
    if isinstance(payload, Exception):
        request.execute.side_effect = payload
    else:
        request.execute.return_value = payload
    return request

def make_resource(subscription_pages=(), channels=None, playlists=None):
    """
    Builds a stand-in for the googleapiclient discovery resource.

    subscription_pages are returned one per subscriptions().list() call,
    channels and playlists are looked up by the id passed to list().
    A payload that is an exception is raised by execute() instead.
    """
    resource = MagicMock()
    pages = iter(subscription_pages)
    channels = channels or {}
    playlists = playlists or {}

    resource.subscriptions.return_value.list.side_effect = lambda **kwargs: _request(next(pages))
    resource.channels.return_value.list.side_effect = lambda **kwargs: _request(channels.get(kwargs["id"], {}))
    resource.playlistItems.return_value.list.side_effect = (
        lambda **kwargs: _request(playlists.get(kwargs["playlistId"], playlist_response([])))
    )
    return resource

def make_client(resource):
    return YouTubeClient(resource, lambda: None)

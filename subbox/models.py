from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

class DTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

class Thumbnails(DTO):
    """Image URLs for every size YouTube knows about. Missing sizes stay None."""
    default: Optional[str] = None
    medium: Optional[str] = None
    high: Optional[str] = None
    maxres: Optional[str] = None
    standard: Optional[str] = None

class Channel(DTO):
    id: Optional[str] = None
    name: Optional[str] = None
    icon: Optional[Thumbnails] = None
    upload_playlist_id: Optional[str] = None  # only set once resolved via channels.list

class Video(DTO):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    uploaded_at: Optional[str] = None  # ISO-8601, as delivered by YouTube
    uploaded_by: Optional[Channel] = None
    thumbnails: Optional[Thumbnails] = None

class Page(DTO, Generic[T]):
    items: List[T]
    next_page_token: Optional[str] = None

# Response envelopes

class EmptyResponse(DTO):
    okay: bool = True

class DataResponse(EmptyResponse, Generic[T]):
    data: T

class DataCollectionResponse(EmptyResponse, Generic[T]):
    data: List[T]
    item_count: int

    @classmethod
    def of(cls, items):
        items = list(items)
        return cls(data=items, item_count=len(items))

class ErrorResponse(EmptyResponse):
    okay: bool = False
    error: str
    detail: Optional[dict] = None

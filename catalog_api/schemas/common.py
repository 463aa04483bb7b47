from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")

class Pagination(BaseModel):
    current_page: int
    per_page: int
    total: int
    last_page: int

class MessageResponse(BaseModel):
    success: bool = True
    message: str

class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: T

class CollectionResponse(BaseModel, Generic[T]):
    success: bool = True
    data: List[T]

class PageResponse(CollectionResponse[T], Generic[T]):
    pagination: Pagination

class BulkResults(BaseModel):
    successful: int = 0
    failed: int = 0
    errors: List[str] = []

class BulkResponse(MessageResponse):
    results: BulkResults

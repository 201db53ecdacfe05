from datetime import datetime
from pydantic import BaseModel


class BerkasResponse(BaseModel):
    id: str
    title: str
    filepath: str
    uploadat: datetime

    class Config:
        from_attributes = True


class BerkasSaved(BaseModel):
    success: bool = True
    data: BerkasResponse
    message: str


class BerkasPage(BaseModel):
    """One page of the download list, plus the page-button window."""
    items: list[BerkasResponse]
    total: int
    page: int
    per_page: int
    total_pages: int
    start_index: int
    pages: list[int | str]


class BerkasPreview(BaseModel):
    id: str
    title: str
    filename: str
    extension: str
    mime_type: str
    kind: str  # pdf | image | office | text | none
    src: str | None
    download_url: str
    uploadat: datetime

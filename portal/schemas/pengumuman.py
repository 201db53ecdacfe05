from datetime import datetime
from pydantic import BaseModel


class PengumumanResponse(BaseModel):
    id: str
    title: str
    file_path: str | None
    uploadat: datetime

    class Config:
        from_attributes = True


class PengumumanResult(BaseModel):
    success: bool = True
    data: PengumumanResponse
    message: str

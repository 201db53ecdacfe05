from pydantic import BaseModel


class DosenResponse(BaseModel):
    id: str
    nama: str
    nik: str
    jenis_dosen: str
    foto: str | None

    class Config:
        from_attributes = True


class DosenResult(BaseModel):
    success: bool = True
    data: DosenResponse
    message: str

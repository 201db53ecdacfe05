"""Pengumuman (announcements): file upload with title and upload time, newest first, delete."""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, UploadFile, File, Form, status
from sqlalchemy.orm import Session
from portal.config import get_settings
from portal.database import get_db
from portal.errors import api_error
from portal.models.pengumuman import Pengumuman
from portal.schemas.pengumuman import PengumumanResponse, PengumumanResult
from portal.services.uploads import PENGUMUMAN, save_upload, commit_record, delete_record

router = APIRouter(prefix="/api/pengumuman", tags=["pengumuman"])


def parse_uploadat(value: str | None) -> datetime:
    """ISO-8601 string from the form, or now. Stored as naive UTC."""
    if not value or not value.strip():
        return datetime.utcnow()
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise api_error(
            status.HTTP_400_BAD_REQUEST,
            "Tanggal tidak valid",
            "uploadat harus berformat ISO-8601",
        ) from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@router.post("", response_model=PengumumanResult, status_code=status.HTTP_201_CREATED)
async def create_pengumuman(
    db: Session = Depends(get_db),
    file: UploadFile | None = File(None),
    title: str | None = Form(None),
    uploadat: str | None = Form(None),
):
    if file is None or not file.filename:
        raise api_error(status.HTTP_400_BAD_REQUEST, "File tidak ditemukan", "Tidak ada file yang diupload")
    # validate before anything touches the disk
    date = parse_uploadat(uploadat)
    stored = await save_upload(file, PENGUMUMAN, get_settings().pengumuman_max_bytes)
    item = Pengumuman(title=title or "untitled", file_path=stored.public_path, uploadat=date)
    commit_record(db, item, stored, "pengumuman")
    return PengumumanResult(data=PengumumanResponse.model_validate(item), message="File berhasil diupload")


@router.get("", response_model=list[PengumumanResponse])
def list_pengumuman(db: Session = Depends(get_db)):
    return db.query(Pengumuman).order_by(Pengumuman.uploadat.desc()).all()


@router.delete("", response_model=PengumumanResult)
def delete_pengumuman(id: str | None = None, db: Session = Depends(get_db)):
    if not id or not id.strip():
        raise api_error(status.HTTP_400_BAD_REQUEST, "ID tidak valid", "ID pengumuman harus disertakan")
    item = db.query(Pengumuman).filter(Pengumuman.id == id).first()
    if not item:
        raise api_error(
            status.HTTP_404_NOT_FOUND,
            "Pengumuman tidak ditemukan",
            "Data pengumuman tidak ada di database",
        )
    data = PengumumanResponse.model_validate(item)
    delete_record(db, item, item.file_path, "pengumuman")
    return PengumumanResult(data=data, message="Pengumuman berhasil dihapus")

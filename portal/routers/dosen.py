"""Dosen (lecturers): photo upload with name/NIK/category, list by name, delete."""
from fastapi import APIRouter, Depends, UploadFile, File, Form, status
from sqlalchemy.orm import Session
from portal.config import get_settings
from portal.database import get_db
from portal.errors import api_error
from portal.models.dosen import Dosen, DEFAULT_JENIS_DOSEN
from portal.schemas.dosen import DosenResponse, DosenResult
from portal.services.uploads import DOSEN, save_upload, commit_record, delete_record

router = APIRouter(prefix="/api/dosen", tags=["dosen"])


@router.post("", response_model=DosenResult, status_code=status.HTTP_201_CREATED)
async def create_dosen(
    db: Session = Depends(get_db),
    file: UploadFile | None = File(None),
    nama: str | None = Form(None),
    nik: str | None = Form(None),
    jenis_dosen: str | None = Form(None),
):
    if file is None or not file.filename:
        raise api_error(status.HTTP_400_BAD_REQUEST, "File tidak ditemukan", "Tidak ada file yang diupload")
    stored = await save_upload(file, DOSEN, get_settings().dosen_max_bytes)
    item = Dosen(
        nama=nama or "untitled",
        nik=nik or "",
        jenis_dosen=jenis_dosen or DEFAULT_JENIS_DOSEN,
        foto=stored.public_path,
    )
    commit_record(db, item, stored, "dosen")
    return DosenResult(data=DosenResponse.model_validate(item), message="Data dosen berhasil disimpan")


@router.get("", response_model=list[DosenResponse])
def list_dosen(db: Session = Depends(get_db)):
    return db.query(Dosen).order_by(Dosen.nama.asc()).all()


@router.delete("", response_model=DosenResult)
def delete_dosen(id: str | None = None, db: Session = Depends(get_db)):
    """Delete by ?id=. The photo is removed if possible; the row is deleted either way."""
    if not id or not id.strip():
        raise api_error(status.HTTP_400_BAD_REQUEST, "ID tidak valid", "ID dosen harus disertakan")
    item = db.query(Dosen).filter(Dosen.id == id).first()
    if not item:
        raise api_error(status.HTTP_404_NOT_FOUND, "Dosen tidak ditemukan", "Data dosen tidak ada di database")
    data = DosenResponse.model_validate(item)
    delete_record(db, item, item.foto, "dosen")
    return DosenResult(data=data, message="Data dosen berhasil dihapus")

"""
Berkas (downloadable documents): upload, list/search, paginated list and viewer preview.
Files are stored under public/berkas/ and served from /berkas/<name>.
"""
from fastapi import APIRouter, Depends, Request, UploadFile, File, Form, Query, status
from sqlalchemy.orm import Session
from portal.config import get_settings
from portal.database import get_db
from portal.errors import api_error
from portal.models.berkas import Berkas
from portal.schemas.berkas import BerkasResponse, BerkasSaved, BerkasPage, BerkasPreview
from portal.services.pagination import paginate
from portal.services.preview import build_preview
from portal.services.uploads import BERKAS, save_upload, commit_record

router = APIRouter(prefix="/api/berkas", tags=["berkas"])


def _query(db: Session, name: str | None):
    q = db.query(Berkas)
    if name:
        q = q.filter(Berkas.title.ilike(f"%{name}%"))
    return q.order_by(Berkas.uploadat.asc())


def _get_or_404(db: Session, berkas_id: str) -> Berkas:
    item = db.query(Berkas).filter(Berkas.id == berkas_id).first()
    if not item:
        raise api_error(status.HTTP_404_NOT_FOUND, "Berkas tidak ditemukan", "Data berkas tidak ada di database")
    return item


@router.post("", response_model=BerkasSaved, status_code=status.HTTP_201_CREATED)
async def upload_berkas(
    db: Session = Depends(get_db),
    file: UploadFile | None = File(None),
    title: str | None = Form(None),
):
    if file is None or not file.filename:
        raise api_error(status.HTTP_400_BAD_REQUEST, "File tidak ditemukan", "Tidak ada file yang diupload")
    stored = await save_upload(file, BERKAS, get_settings().berkas_max_bytes)
    item = Berkas(title=title or "untitled", filepath=stored.public_path)
    commit_record(db, item, stored, "berkas")
    return BerkasSaved(data=BerkasResponse.model_validate(item), message="File berhasil diupload")


@router.get("", response_model=list[BerkasResponse])
def list_berkas(name: str | None = None, db: Session = Depends(get_db)):
    """All files; ?name= narrows to titles containing it (case-insensitive)."""
    return _query(db, name).all()


@router.get("/page", response_model=BerkasPage)
def page_berkas(
    page: int = Query(1),
    per_page: int = Query(5, ge=1, le=100),
    name: str | None = None,
    db: Session = Depends(get_db),
):
    """Download list page: one slice of files plus the page buttons to render."""
    result = paginate(_query(db, name).all(), page, per_page)
    result["items"] = [BerkasResponse.model_validate(x) for x in result["items"]]
    return result


@router.get("/{berkas_id}", response_model=BerkasResponse)
def get_berkas(berkas_id: str, db: Session = Depends(get_db)):
    return _get_or_404(db, berkas_id)


@router.get("/{berkas_id}/preview", response_model=BerkasPreview)
def preview_berkas(berkas_id: str, request: Request, db: Session = Depends(get_db)):
    item = _get_or_404(db, berkas_id)
    return build_preview(
        id=item.id,
        title=item.title,
        filepath=item.filepath,
        uploadat=item.uploadat,
        origin=str(request.base_url),
    )

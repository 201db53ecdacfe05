"""Shared helpers for multipart uploads stored under the public directory (berkas, dosen, pengumuman)."""
import logging
import random
import time
from pathlib import Path
from typing import NamedTuple
from fastapi import UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from portal.config import get_settings
from portal.errors import api_error

logger = logging.getLogger(__name__)

BERKAS = "berkas"
DOSEN = "dosen"
PENGUMUMAN = "pengumuman"
PUBLIC_SUBDIRS = (BERKAS, DOSEN, PENGUMUMAN)

CHUNK_SIZE = 64 * 1024


class StoredFile(NamedTuple):
    name: str
    path: Path
    size: int
    public_path: str


def upload_dir(kind: str) -> Path:
    return get_settings().public_root / kind


def ensure_upload_dir(directory: Path) -> None:
    if directory.is_dir():
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Error creating directory %s: %s", directory, e)
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Error saving file",
            "Gagal membuat direktori upload",
            e,
        ) from e
    logger.info("Directory created: %s", directory)


def unique_filename(original: str | None) -> str:
    """<epoch millis>-<random>-<original name>. Unique with high probability, not guaranteed."""
    base = Path((original or "").replace("\\", "/")).name or "file"
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}-{base}"


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove partial upload %s: %s", path, e)


def _reject_too_large(file: UploadFile, max_bytes: int):
    logger.warning("Upload %r rejected: larger than %d bytes", file.filename, max_bytes)
    raise api_error(
        413,
        "File terlalu besar",
        f"Ukuran file maksimal {max_bytes // (1024 * 1024)}MB",
    )


async def save_upload(file: UploadFile, kind: str, max_bytes: int) -> StoredFile:
    """
    Copy an uploaded part into public/<kind>/ under a generated name.
    Starlette has already spooled the whole multipart body, so the ceiling is
    enforced here rather than while parsing: the reported size is checked first,
    then bytes are counted while copying. Over the ceiling fails with 413 and
    nothing is left on disk.
    """
    if file.size is not None and file.size > max_bytes:
        _reject_too_large(file, max_bytes)
    directory = upload_dir(kind)
    ensure_upload_dir(directory)
    name = unique_filename(file.filename)
    path = directory / name
    size = 0
    try:
        with path.open("wb") as f:
            while chunk := await file.read(CHUNK_SIZE):
                size += len(chunk)
                if size > max_bytes:
                    break
                f.write(chunk)
    except OSError as e:
        logger.error("Error writing upload %s: %s", path, e)
        _discard(path)
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "File gagal tersimpan",
            "File tidak dapat disimpan ke server",
            e,
        ) from e

    if size > max_bytes:
        _discard(path)
        _reject_too_large(file, max_bytes)

    if not path.is_file():
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "File tidak ditemukan setelah upload",
            "File gagal tersimpan di server",
        )
    return StoredFile(name=name, path=path, size=size, public_path=f"/{kind}/{name}")


def resolve_public_file(relative_path: str) -> Path | None:
    """Map a public path like /dosen/x.jpg to a file under public_dir. None if it escapes the root."""
    root = get_settings().public_root.resolve()
    try:
        full = (root / relative_path.lstrip("/")).resolve()
        full.relative_to(root)
    except (ValueError, OSError):
        return None
    return full


def remove_public_file(relative_path: str | None) -> bool:
    """Best-effort unlink. Failures are logged, never raised."""
    if not relative_path:
        return False
    path = resolve_public_file(relative_path)
    if path is None:
        logger.warning("Refusing to delete path outside public dir: %s", relative_path)
        return False
    if not path.is_file():
        return False
    try:
        path.unlink()
    except OSError as e:
        logger.error("Error deleting file %s: %s", path, e)
        return False
    logger.info("File deleted: %s", path)
    return True


def commit_record(db: Session, item, stored: StoredFile, label: str) -> None:
    """Insert the row for a freshly stored file. If the insert fails the stored file is removed."""
    try:
        db.add(item)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error saving %s record for %s", label, stored.name)
        remove_public_file(stored.public_path)
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Error saving file",
            f"Data {label} gagal disimpan ke database",
            e,
        ) from e
    # committed: from here on the row references the file, so it stays
    db.refresh(item)
    logger.info("%s saved: filename=%s path=%s size=%d", label, stored.name, stored.path, stored.size)


def delete_record(db: Session, item, public_path: str | None, label: str) -> None:
    """Unlink the stored file (best-effort), then delete the row regardless."""
    item_id = item.id
    if public_path and not remove_public_file(public_path):
        logger.warning("File for %s %s not removed: %s", label, item_id, public_path)
    try:
        db.delete(item)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error deleting %s %s", label, item_id)
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Error deleting content",
            f"Terjadi kesalahan saat menghapus {label}",
            e,
        ) from e

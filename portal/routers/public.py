"""Serve stored uploads from the public directory: /berkas/<name>, /dosen/<name>, /pengumuman/<name>."""
from fastapi import APIRouter, status
from fastapi.responses import FileResponse
from portal.errors import api_error
from portal.services.preview import file_extension, mime_type_for
from portal.services.uploads import BERKAS, DOSEN, PENGUMUMAN, resolve_public_file

router = APIRouter(tags=["public"])


def _serve(kind: str, filename: str) -> FileResponse:
    path = resolve_public_file(f"/{kind}/{filename}")
    # must stay inside its own subdirectory
    if path is None or path.parent.name != kind or not path.is_file():
        raise api_error(status.HTTP_404_NOT_FOUND, "File tidak ditemukan", f"/{kind}/{filename}")
    return FileResponse(path, media_type=mime_type_for(file_extension(path.name)))


@router.get("/berkas/{filename}")
def get_berkas_file(filename: str):
    return _serve(BERKAS, filename)


@router.get("/dosen/{filename}")
def get_dosen_file(filename: str):
    return _serve(DOSEN, filename)


@router.get("/pengumuman/{filename}")
def get_pengumuman_file(filename: str):
    return _serve(PENGUMUMAN, filename)

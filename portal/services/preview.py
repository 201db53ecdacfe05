"""
Viewer dispatch: file extension -> MIME type and the widget used to preview it.
pdf/text render in an iframe, images in <img>, Office formats through the
external office viewer, everything else falls back to "Preview tidak tersedia".
"""
from datetime import datetime
from urllib.parse import quote

from portal.config import get_settings

PDF = "pdf"
IMAGE = "image"
OFFICE = "office"
TEXT = "text"
NONE = "none"

MIME_TYPES = {
    "pdf": "application/pdf",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "txt": "text/plain",
}
DEFAULT_MIME_TYPE = "application/octet-stream"

IMAGE_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp"}
OFFICE_EXTENSIONS = {"doc", "docx", "xls", "xlsx", "ppt", "pptx"}


def file_extension(filepath: str) -> str:
    name = filepath.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def mime_type_for(ext: str) -> str:
    return MIME_TYPES.get(ext.lower(), DEFAULT_MIME_TYPE)


def preview_kind(ext: str) -> str:
    ext = ext.lower()
    if ext == "pdf":
        return PDF
    if ext in IMAGE_EXTENSIONS:
        return IMAGE
    if ext in OFFICE_EXTENSIONS:
        return OFFICE
    if ext == "txt":
        return TEXT
    return NONE


def office_viewer_src(origin: str, filepath: str) -> str:
    absolute = origin.rstrip("/") + filepath
    return f"{get_settings().office_viewer_url}?src={quote(absolute, safe='')}"


def build_preview(
    *,
    id: str,
    title: str,
    filepath: str,
    uploadat: datetime,
    origin: str,
) -> dict:
    """Everything the viewer page needs to pick and fill its preview widget."""
    ext = file_extension(filepath)
    kind = preview_kind(ext)
    if kind == OFFICE:
        src = office_viewer_src(origin, filepath)
    elif kind == NONE:
        src = None
    else:
        src = filepath
    return {
        "id": id,
        "title": title,
        "filename": filepath.rsplit("/", 1)[-1] or title,
        "extension": ext,
        "mime_type": mime_type_for(ext),
        "kind": kind,
        "src": src,
        "download_url": filepath,
        "uploadat": uploadat,
    }

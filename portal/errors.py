"""
JSON error bodies shaped as {error, message[, details]}.
Routers raise api_error(...); main registers the handlers below.
"""
import logging
import traceback
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from portal.config import get_settings

logger = logging.getLogger(__name__)


def api_error(status_code: int, error: str, message: str, exc: BaseException | None = None) -> HTTPException:
    detail = {"error": error, "message": message}
    if exc is not None and get_settings().is_development:
        detail["details"] = "".join(traceback.format_exception(exc))
    return HTTPException(status_code=status_code, detail=detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        body = exc.detail
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        body = {
            "error": "Method not allowed",
            "message": f"Method {request.method} tidak diizinkan",
        }
    else:
        body = {"error": str(exc.detail), "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # a "file" field that is missing or not an upload counts as no file part
    if any(tuple(e.get("loc", ()))[:2] == ("body", "file") for e in errors):
        body = {"error": "File tidak ditemukan", "message": "Tidak ada file yang diupload"}
    else:
        first = errors[0] if errors else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query"))
        body = {
            "error": "Permintaan tidak valid",
            "message": f"{field}: {first.get('msg', 'invalid')}" if field else first.get("msg", "invalid"),
        }
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = {"error": "Internal server error", "message": str(exc) or "Terjadi kesalahan pada server"}
    if get_settings().is_development:
        body["details"] = "".join(traceback.format_exception(exc))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from portal.config import get_settings
from portal.database import init_db
from portal.errors import http_exception_handler, unhandled_exception_handler, validation_exception_handler
from portal.routers import berkas, dosen, pengumuman, public
from portal.services.uploads import PUBLIC_SUBDIRS, ensure_upload_dir, upload_dir

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    for kind in PUBLIC_SUBDIRS:
        ensure_upload_dir(upload_dir(kind))
    init_db()
    logger.info("Serving uploads from %s", get_settings().public_root)
    yield


app = FastAPI(title="Portal Ilkom API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.include_router(berkas.router)
app.include_router(dosen.router)
app.include_router(pengumuman.router)
app.include_router(public.router)


@app.get("/")
def root():
    return {"message": "Portal Ilkom API", "docs": "/docs"}

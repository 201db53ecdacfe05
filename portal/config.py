from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache

BASE_DIR = Path(__file__).resolve().parent.parent

MIB = 1024 * 1024


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./portal.db"

    # Static root served to the browser (empty = <project>/public)
    public_dir: str = ""

    # Upload ceilings per content type
    berkas_max_bytes: int = 1 * MIB
    dosen_max_bytes: int = 5 * MIB  # foto dosen
    pengumuman_max_bytes: int = 10 * MIB

    # "development" adds tracebacks to 500 responses
    environment: str = "production"
    log_level: str = "INFO"

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:3000"

    # Embeds Word/Excel/PowerPoint files in the viewer
    office_viewer_url: str = "https://view.officeapps.live.com/op/embed.aspx"

    class Config:
        env_file = ".env"

    @property
    def public_root(self) -> Path:
        if self.public_dir:
            return Path(self.public_dir)
        return BASE_DIR / "public"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Lecturer record: name, NIK, category and a photo stored under public/dosen/."""
import uuid
from sqlalchemy import Column, String
from portal.database import Base

DEFAULT_JENIS_DOSEN = "Dosen Ilkom"


class Dosen(Base):
    __tablename__ = "dosen"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    nama = Column(String(255), nullable=False, default="untitled", index=True)
    nik = Column(String(64), nullable=False, default="")
    jenis_dosen = Column(String(100), nullable=False, default=DEFAULT_JENIS_DOSEN)
    foto = Column(String(512), nullable=True)  # public path, e.g. /dosen/<stored name>

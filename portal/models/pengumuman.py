import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from portal.database import Base


class Pengumuman(Base):
    __tablename__ = "pengumuman"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False, default="untitled")
    file_path = Column(String(512), nullable=True)  # public path, e.g. /pengumuman/<stored name>
    uploadat = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)

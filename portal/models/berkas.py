import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from portal.database import Base


class Berkas(Base):
    __tablename__ = "berkas"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False, default="untitled")
    filepath = Column(String(512), nullable=False)  # public path, e.g. /berkas/<stored name>
    uploadat = Column(DateTime, nullable=False, default=datetime.utcnow)

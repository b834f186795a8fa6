# models/song.py
from sqlalchemy import BigInteger, Column, DateTime, String
from sqlalchemy.sql import func

from models.database import Base

class Song(Base):
    __tablename__ = "songs"

    # Same id as the resource this metadata describes, never generated here
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    artist = Column(String(100), nullable=False)
    album = Column(String(100), nullable=False)
    duration = Column(String(5), nullable=False)
    year = Column(String(4), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

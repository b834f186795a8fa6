# models/resource.py
from sqlalchemy import BigInteger, Column, DateTime, Integer, LargeBinary
from sqlalchemy.sql import func

from models.database import Base

class Resource(Base):
    __tablename__ = "resources"

    # SQLite only autoincrements INTEGER primary keys
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    data = Column(LargeBinary, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

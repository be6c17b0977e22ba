from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func
from app.db import Base


class KeyValueEntry(Base):
    __tablename__ = "kv_store"

    key = Column(String(64), primary_key=True)

    # Serialized JSON blob, stored as-is
    value = Column(Text, nullable=False)

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

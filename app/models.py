from datetime import datetime, timezone

from database import Base
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, func


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Link(Base):
    __tablename__ = "Link"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column("createdAt", DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    description = Column(Text, nullable=False)
    url = Column(Text, nullable=False)


class Comment(Base):
    __tablename__ = "Comment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column("createdAt", DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    body = Column(Text, nullable=False)
    link_id = Column("linkId", Integer, ForeignKey("Link.id"), nullable=False, index=True)

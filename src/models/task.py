"""Task model."""

from datetime import datetime, timezone
from sqlalchemy import Column, Text, Integer, BigInteger, DateTime, Boolean
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Task(Base):
    __tablename__ = "tasks"
    # never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    # SQLite only autoincrements a column declared INTEGER
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    done = Column(Boolean, nullable=False, default=False)

    # Stored as naive UTC
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    def __repr__(self) -> str:
        return f"<Task id={self.id} title={self.title!r} done={self.done}>"

"""Module model for course activities (forum, quiz, page...)."""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from logstore.db.base import Base


class Module(Base):
    """Course module database model."""

    __tablename__ = "modules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(64))  # e.g. "forum", "quiz"
    course_id: Mapped[int] = mapped_column(Integer, ForeignKey("courses.id"), index=True)
    name: Mapped[str] = mapped_column(String(1333))
    intro: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("ix_modules_type_id", "type", "id"),)

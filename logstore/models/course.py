"""Course model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from logstore.db.base import Base


class Course(Base):
    """Course database model - the context activities are localized against."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fullname: Mapped[str] = mapped_column(String(255))
    shortname: Mapped[str] = mapped_column(String(255))

    # Forced course language, None means the site default
    lang: Mapped[str | None] = mapped_column(String(30), nullable=True)

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from careerpath.db.base import Base
from careerpath.db.types import UTCDateTime


class ProfileCard(Base):
    __tablename__ = "profile_cards"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    bio: Mapped[str] = mapped_column(String(200), nullable=False)
    skills: Mapped[str] = mapped_column(Text, nullable=False)  # JSON array as text
    profile_image: Mapped[str | None] = mapped_column(Text)
    theme: Mapped[str] = mapped_column(String(16), nullable=False, default="blue")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

"""Profile Card Store - CRUD over the ``profile_cards`` table.

Interface Contract:
- create(data) -> CreatedProfileCard
- get(card_id) -> ProfileCardRead | NotFound
- update(card_id, patch) -> ProfileCardRead | NotFound
- delete(card_id) -> Deleted | NotFound
- list(limit, offset) -> ProfileCardPage

A missing id is reported as a ``NotFound`` value, never raised. Skills are
kept as a JSON-encoded string column and decoded on every read.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from careerpath.core.errors import NotFound
from careerpath.models.profile_card import ProfileCard
from careerpath.schemas.profile_card import (
    ProfileCardCreate,
    ProfileCardRead,
    ProfileCardUpdate,
)

# columns that may not be cleared through a patch
_REQUIRED_COLUMNS = {"name", "bio", "skills", "theme"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def encode_skills(skills: list[str]) -> str:
    return json.dumps(skills, ensure_ascii=False)


def decode_skills(raw: str) -> list[str]:
    return list(json.loads(raw))


def to_read_model(row: ProfileCard) -> ProfileCardRead:
    return ProfileCardRead(
        id=row.id,
        name=row.name,
        bio=row.bio,
        skills=decode_skills(row.skills),
        profile_image=row.profile_image,
        theme=row.theme,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


@dataclass
class CreatedProfileCard:
    card: ProfileCardRead
    share_url: str


@dataclass
class Deleted:
    id: str


@dataclass
class ProfileCardPage:
    cards: list[ProfileCardRead]
    total: int


class ProfileCardStore:
    """Persistence for shareable profile cards."""

    def __init__(
        self,
        session: Session,
        *,
        public_base_url: str,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Args:
            session: request-scoped SQLAlchemy session; the store commits it.
            public_base_url: origin used to build share links.
            clock: timestamp source, swappable in tests.
        """
        self._s = session
        self._base_url = public_base_url.rstrip("/")
        self._clock = clock

    def share_url(self, card_id: str) -> str:
        return f"{self._base_url}/profile/{card_id}"

    def create(self, data: ProfileCardCreate) -> CreatedProfileCard:
        now = self._clock()
        row = ProfileCard(
            id=str(uuid.uuid4()),
            name=data.name,
            bio=data.bio,
            skills=encode_skills(data.skills),
            profile_image=data.profile_image,
            theme=data.theme,
            created_at=now,
            updated_at=now,
        )
        self._s.add(row)
        self._s.commit()
        logger.debug("profile card {} created", row.id)
        return CreatedProfileCard(card=to_read_model(row), share_url=self.share_url(row.id))

    def _find(self, card_id: str) -> ProfileCard | None:
        return self._s.get(ProfileCard, card_id)

    def get(self, card_id: str) -> ProfileCardRead | NotFound:
        row = self._find(card_id)
        if row is None:
            return NotFound(id=card_id)
        return to_read_model(row)

    def update(self, card_id: str, patch: ProfileCardUpdate) -> ProfileCardRead | NotFound:
        row = self._find(card_id)
        if row is None:
            return NotFound(id=card_id)

        changes = patch.model_dump(exclude_unset=True)
        for column, value in changes.items():
            if value is None and column in _REQUIRED_COLUMNS:
                continue
            if column == "skills":
                value = encode_skills(value)
            setattr(row, column, value)
        row.updated_at = self._clock()

        self._s.commit()
        logger.debug("profile card {} updated ({})", card_id, ", ".join(sorted(changes)) or "no fields")
        return to_read_model(row)

    def delete(self, card_id: str) -> Deleted | NotFound:
        row = self._find(card_id)
        if row is None:
            return NotFound(id=card_id)
        self._s.delete(row)
        self._s.commit()
        logger.debug("profile card {} deleted", card_id)
        return Deleted(id=card_id)

    def count(self) -> int:
        return self._s.execute(select(func.count()).select_from(ProfileCard)).scalar_one()

    def list(self, limit: int = 20, offset: int = 0) -> ProfileCardPage:
        rows = self._s.execute(
            select(ProfileCard)
            .order_by(ProfileCard.created_at, ProfileCard.id)
            .limit(limit)
            .offset(offset)
        ).scalars().all()
        return ProfileCardPage(cards=[to_read_model(r) for r in rows], total=self.count())

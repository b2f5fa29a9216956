"""
Certification catalog.

The catalog is bundled as JSON next to the package, validated once at start
up and then shared read-only by the recommendation and search code.
"""
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterator, Sequence

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from careerpath.schemas.certification import Certification

_CATALOG_ADAPTER = TypeAdapter(list[Certification])


class CatalogError(ValueError):
    """Raised when the bundled catalog does not have the expected shape."""


class Catalog(Sequence[Certification]):
    """Immutable, ordered collection of certifications."""

    def __init__(self, certifications: Sequence[Certification]):
        self._items: tuple[Certification, ...] = tuple(certifications)
        self._by_id = {c.id: c for c in self._items}
        if len(self._by_id) != len(self._items):
            counts = Counter(c.id for c in self._items)
            dupes = sorted(k for k, n in counts.items() if n > 1)
            raise CatalogError(f"Duplicate certification ids: {', '.join(dupes)}")
        for c in self._items:
            missing = [p for p in c.prerequisites if p not in self._by_id]
            if missing:
                raise CatalogError(f"{c.id}: unknown prerequisites {missing}")

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Certification]:
        return iter(self._items)

    def get(self, cert_id: str) -> Certification | None:
        return self._by_id.get(cert_id)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "Catalog":
        try:
            items = _CATALOG_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise CatalogError(f"Invalid certification catalog: {exc}") from exc
        return cls(items)


def load_catalog(path: Path) -> Catalog:
    if not path.exists():
        raise CatalogError(f"Missing catalog at {path}")
    catalog = Catalog.from_json(path.read_bytes())
    logger.info("Loaded {} certifications from {}", len(catalog), path)
    return catalog

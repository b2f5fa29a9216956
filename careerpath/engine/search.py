# careerpath/engine/search.py
from typing import Iterable, List

from careerpath.schemas.certification import Certification, SearchFilters


def _matches_query(c: Certification, q: str) -> bool:
    return (
        q in c.name.lower()
        or q in c.provider.lower()
        or any(q in s.lower() for s in c.skills)
    )


def search(catalog: Iterable[Certification], filters: SearchFilters) -> List[Certification]:
    """Filter the catalog; every given filter must match. Catalog order is kept."""
    items = list(catalog)

    if filters.area:
        area = filters.area.lower()
        items = [c for c in items if (c.area or "").lower() == area]
    if filters.level:
        items = [c for c in items if c.level == filters.level]
    if filters.role:
        role = filters.role.lower()
        items = [c for c in items if role in {r.lower() for r in c.roles}]
    if filters.query:
        q = filters.query.lower()
        items = [c for c in items if _matches_query(c, q)]

    return items[:filters.limit]

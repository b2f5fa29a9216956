# careerpath/api/certification_routes.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from careerpath.api.deps import get_catalog
from careerpath.engine.catalog import Catalog
from careerpath.engine.search import search
from careerpath.schemas.certification import Level, SearchFilters, SearchResponse

router = APIRouter(prefix="/api/certifications", tags=["Certifications"])

@router.get("", response_model=SearchResponse, summary="Search the certification catalog")
def search_certifications(
    area: Optional[str] = None,
    level: Optional[Level] = None,
    role: Optional[str] = None,
    query: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    catalog: Catalog = Depends(get_catalog),
):
    filters = SearchFilters(area=area, level=level, role=role, query=query, limit=limit)
    return SearchResponse(items=search(catalog, filters))

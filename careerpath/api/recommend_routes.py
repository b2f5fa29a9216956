# careerpath/api/recommend_routes.py
import traceback
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from careerpath.api.deps import get_catalog
from careerpath.core.config import settings
from careerpath.core.errors import ValidationFailure, validate_payload
from careerpath.engine.catalog import Catalog
from careerpath.engine.recommend import recommend
from careerpath.schemas.certification import RecommendationResponse, UserProfile

router = APIRouter(prefix="/api", tags=["Recommendations"])


def _unwrap_profile(payload: Dict[str, Any]) -> Any:
    # accepts the profile itself or {"profile": {...}}
    inner = payload.get("profile")
    return inner if isinstance(inner, dict) else payload


@router.post("/recommend", response_model=RecommendationResponse, summary="Top certifications for a profile")
def recommend_certifications(
    payload: Dict[str, Any] = Body(...),
    catalog: Catalog = Depends(get_catalog),
):
    profile = validate_payload(UserProfile, _unwrap_profile(payload))
    if isinstance(profile, ValidationFailure):
        return JSONResponse(status_code=422, content={"error": profile.error, "details": profile.details})

    try:
        items = recommend(catalog, profile, limit=settings.RECOMMEND_TOP_N)
    except Exception as e:
        logger.exception("recommendation failed")
        body = {"error": str(e), "name": type(e).__name__}
        if settings.DEBUG:
            body["trace"] = traceback.format_exc()
        return JSONResponse(status_code=400, content=body)

    return RecommendationResponse(items=items)

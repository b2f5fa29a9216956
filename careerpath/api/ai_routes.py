# careerpath/api/ai_routes.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from careerpath.api.deps import get_explain_service
from careerpath.schemas.explain import ExplainIn, ExplainOut
from careerpath.services.explain import ExplainService
from careerpath.services.llm_service import LLMServiceError

router = APIRouter(prefix="/api/ai", tags=["AI"])

@router.post("/explain", response_model=ExplainOut)
def explain(payload: ExplainIn, service: ExplainService = Depends(get_explain_service)):
    try:
        answer = service.explain(payload.profile, payload.recommendations.items, payload.question)
    except LLMServiceError as e:
        logger.warning("explain failed: {}", e)
        return JSONResponse(status_code=400, content={"error": str(e)})
    return ExplainOut(answer=answer)

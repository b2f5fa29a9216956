# careerpath/main.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from loguru import logger

from careerpath.core.config import settings
from careerpath.core.errors import InputValidationError, UpstreamFetchError
from careerpath.core.logging import configure_logging
from careerpath.db.base import Base
from careerpath.db.session import engine
from careerpath.engine.catalog import load_catalog

# Import models so SQLAlchemy knows about them (for create_all)
from careerpath.models.profile_card import ProfileCard  # noqa: F401

# Routers
from careerpath.api.routes import router as api_router
from careerpath.api.recommend_routes import router as recommend_router
from careerpath.api.certification_routes import router as certification_router
from careerpath.api.eval_routes import router as eval_router
from careerpath.api.profile_card_routes import router as profile_card_router
from careerpath.api.study_plan_routes import router as study_plan_router
from careerpath.api.ai_routes import router as ai_router


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = [
            {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
            for e in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content=jsonable_encoder({"error": "ValidationError", "details": details}),
        )

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(request: Request, exc: InputValidationError):
        return JSONResponse(status_code=422, content={"error": exc.message, "details": exc.details})

    @app.exception_handler(UpstreamFetchError)
    async def upstream_handler(request: Request, exc: UpstreamFetchError):
        logger.warning("{} {} -> upstream failure: {}", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=502, content={"error": exc.message, "upstreamStatus": exc.status})


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

    # Root -> redirect to Swagger UI
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    # CORS
    origins = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Ensure tables exist (uses the database from .env)
    Base.metadata.create_all(bind=engine)

    # Catalog is read once and shared read-only by every request
    app.state.catalog = load_catalog(settings.CATALOG_PATH)

    _register_error_handlers(app)

    app.include_router(api_router)            # /health
    app.include_router(recommend_router)      # /api/recommend
    app.include_router(certification_router)  # /api/certifications
    app.include_router(eval_router)           # /api/eval/*
    app.include_router(profile_card_router)   # /api/profile-cards
    app.include_router(study_plan_router)     # /api/study-plan
    app.include_router(ai_router)             # /api/ai/explain

    logger.info("{} ready ({} certifications, env={})", settings.APP_NAME, len(app.state.catalog), settings.APP_ENV)
    return app


app = create_app()

## Main application entry point
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.settings import Settings, settings as default_settings
from app.logging_config import setup_logging
from app.errors import APIError, LLMUnavailableError
from app.db.base import Base
from app.db.session import make_engine, make_session_factory
from app.agents.llm.client import build_llm_client
from app.generation.routes import router as generation_router
from app.leads.routes import router as leads_router
from app.masterclasses.routes import router as masterclasses_router
from app.courses.routes import router as courses_router

# Registers the tables on Base.metadata
from app.db.models import course_enrollment, lead, masterclass  # noqa: F401

logger = logging.getLogger(__name__)


def create_app(settings: Settings = default_settings) -> FastAPI:
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = make_engine(settings.database_url)
        if settings.auto_create_tables:
            Base.metadata.create_all(engine)
        app.state.session_factory = make_session_factory(engine)
        app.state.llm = build_llm_client(settings)
        logger.info("Started with LLM provider %s", settings.LLM_PROVIDER)
        try:
            yield
        finally:
            if app.state.llm is not None:
                app.state.llm.close()
            engine.dispose()

    app = FastAPI(title="ScalerAI", lifespan=lifespan)

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        if isinstance(exc, LLMUnavailableError) and exc.detail:
            logger.warning("AI service error on %s %s: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(exc.payload(), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    app.include_router(generation_router)
    app.include_router(leads_router)
    app.include_router(masterclasses_router)
    app.include_router(courses_router)
    return app


app = create_app()

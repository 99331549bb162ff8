from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from firmdesk.core.config import settings
from firmdesk.core.diagnostics import Diagnostics
from firmdesk.core.logging import configure_logging, logger
from firmdesk.api.router import api_router
from firmdesk.db.session import engine
from firmdesk.db.base import Base
from firmdesk.services.seed import seed_demo

def create_app() -> FastAPI:
    configure_logging(settings.ENV, settings.LOG_LEVEL)
    app = FastAPI(title="Firmdesk", version="0.1.0")
    app.state.diagnostics = Diagnostics(max_entries=settings.DIAGNOSTICS_MAX_ENTRIES)

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup():
        # Ensure tables exist for dev-only convenience; in prod rely on alembic
        if settings.ENV == "dev":
            Base.metadata.create_all(bind=engine)
        if settings.SEED_DEMO and settings.ENV == "dev":
            seed_demo()

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV)
    return app

app = create_app()

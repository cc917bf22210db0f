from fastapi import FastAPI

from app.luxestay.api import api_router
from app.luxestay.core.config import settings
from app.luxestay.core.errors import setup_exception_handlers
from app.luxestay.core.logging import configure_logging
from app.luxestay.middleware.observability import ObservabilityMiddleware
from app.luxestay.middleware.trace import TraceIdMiddleware


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME)
    app.add_middleware(TraceIdMiddleware)
    app.add_middleware(ObservabilityMiddleware)
    setup_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()

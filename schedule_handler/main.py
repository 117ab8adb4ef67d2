import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from schedule_handler.core.config import get_settings
from schedule_handler.core.errors import ScheduleError
from schedule_handler.core.logging import setup_logging
from schedule_handler.routers import auth, sessions, stats, system, upload, users

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"


def _validation_message(exc: RequestValidationError) -> str:
    """
    Résume les erreurs pydantic en un message lisible côté UI.
    """
    missing, invalid = [], []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        (missing if err.get("type") == "missing" else invalid).append(field)

    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    if invalid == ["status"]:
        return "Invalid status"
    if invalid == ["role"]:
        return 'Invalid role. Must be "admin" or "user"'
    return f"Invalid fields: {', '.join(invalid)}"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ScheduleError)
    async def schedule_error_handler(request: Request, exc: ScheduleError):
        if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            # Le détail (chemin, fichier) reste dans les logs
            logger.error("%s %s -> %s", request.method, request.url.path, exc.message)
            return JSONResponse(status_code=exc.status_code, content={"detail": INTERNAL_ERROR_DETAIL})
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 400 plutôt que le 422 par défaut de FastAPI
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"detail": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Erreur inattendue sur %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": INTERNAL_ERROR_DETAIL},
        )


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API de gestion des demandes de session (upload PDF, validation admin, comptes)",
    )

    # Middleware CORS
    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],  # fallback si mal configuré
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(system.router)
    app.include_router(auth.router)
    app.include_router(upload.router)
    app.include_router(sessions.router)
    app.include_router(stats.router)
    app.include_router(users.router)

    # Redirect root → docs
    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    logger.info("%s %s démarrée (env=%s, data=%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV, settings.DATA_PATH)
    return app


app = create_app()

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from users_api.api.errors import not_found_response
from users_api.api.routers.health import router as health_router
from users_api.api.routers.users import router as users_router
from users_api.logging import configure_logging
from users_api.services.errors import ConflictError, NotFoundError
from users_api.settings import Settings, load_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    active_settings = settings or load_settings()
    configure_logging(debug=active_settings.debug, level=active_settings.log_level)

    if active_settings.db_backend == "postgres":
        from users_api.infra.db.session import create_schema

        create_schema()

    app = FastAPI(title=active_settings.app_name, version=active_settings.app_version)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return not_found_response(exc)

    @app.exception_handler(ConflictError)
    async def handle_conflict(_: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(HTTPException)
    async def passthrough_http(_: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()

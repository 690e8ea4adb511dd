import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskdesk.app.config import get_settings
from taskdesk.app.core.errors import TaskStoreError
from taskdesk.app.core.logging_config import configure_logging
from taskdesk.app.core.workspace import data_root
from taskdesk.app.deps import get_mongo_database, selected_backend
from taskdesk.routes import auth, tasks

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Taskdesk",
        version="1.0.0",
        docs_url="/docs",
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def on_startup() -> None:
        configure_logging(get_settings().app_log_level)
        backend = selected_backend()
        if backend == "mongo":
            from taskdesk.adapters.mongo_client import check_connection

            check_connection(get_mongo_database())
        else:
            root = data_root()
            logger.info("data directory %s", root, extra={"backend": backend})

    @app.exception_handler(TaskStoreError)
    async def task_store_error_handler(request: Request, exc: TaskStoreError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    app.include_router(auth.router)
    app.include_router(tasks.router)

    @app.get("/healthz")
    async def healthz() -> dict:
        return {"status": "ok", "backend": get_settings().backend}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.app_log_level)
    uvicorn.run("taskdesk.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()

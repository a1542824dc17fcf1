import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .logging_config import setup_logging
from .Catalog.exceptions import CatalogError
from .Catalog.model.database import Database
from .Catalog.router.products import router as products_router
from .Catalog.services.image_optimizer import ImageOptimizer, OptimizerConfig
from .Catalog.storage import ArtifactStore, LocalArtifactStore, build_artifact_store

logger = logging.getLogger(__name__)


def create_app(
        settings: Settings | None = None,
        database: Database | None = None,
        artifact_store: ArtifactStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_dir, settings.log_level)

    app = FastAPI(title="Perfumaria API", version="1.0.0")
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url, echo=settings.db_echo)
    app.state.artifact_store = artifact_store or build_artifact_store(settings)
    app.state.optimizer = ImageOptimizer(
        OptimizerConfig(max_width=settings.image_max_width, quality=settings.image_quality)
    )
    logger.info("Хранилище изображений: %s", app.state.artifact_store.name)

    # Подключение к БД при старте, закрытие при остановке
    @app.on_event("startup")
    async def startup_event():
        await app.state.database.connect()

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.artifact_store.close()
        await app.state.database.close()

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        if exc.status_code >= 500:
            logger.error("%s %s: %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
        else:
            logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s: необработанная ошибка", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Erro interno do servidor"})

    # Подключаем статические файлы (для изображений)
    store = app.state.artifact_store
    if isinstance(store, LocalArtifactStore):
        os.makedirs(store.upload_dir, exist_ok=True)
        app.mount(f"/{store.subdir}", StaticFiles(directory=store.upload_dir), name="images")

    # Подключаем роутеры
    app.include_router(products_router, prefix="/api")

    @app.get("/")
    async def read_root():
        return {"message": "Welcome to Perfumaria API"}

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app

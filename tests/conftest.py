from __future__ import annotations

import io
from pathlib import Path

import pytest
import pytest_asyncio
from PIL import Image
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.Catalog.model.database import Database
from app.Catalog.model.repository import ProductRepository
from app.Catalog.services.image_optimizer import ImageOptimizer
from app.Catalog.services.ingestion import ProductIngestionService
from app.Catalog.storage.local import LocalArtifactStore

SQLITE_URL = "sqlite+aiosqlite://"


def make_image(width: int, height: int, fmt: str = "PNG", mode: str = "RGB") -> bytes:
    image = Image.new(mode, (width, height), "red")
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def make_database() -> Database:
    return Database(SQLITE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    return tmp_path / "public"


@pytest.fixture
def settings(tmp_path: Path, public_dir: Path) -> Settings:
    return Settings(
        database_url=SQLITE_URL,
        public_dir=str(public_dir),
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def local_store(public_dir: Path) -> LocalArtifactStore:
    return LocalArtifactStore(public_dir, "images")


@pytest_asyncio.fixture
async def session():
    database = make_database()
    await database.connect()
    async with database.session_factory() as db_session:
        yield db_session
    await database.close()


@pytest.fixture
def repository(session) -> ProductRepository:
    return ProductRepository(session)


@pytest.fixture
def service(repository: ProductRepository, local_store: LocalArtifactStore) -> ProductIngestionService:
    return ProductIngestionService(repository, ImageOptimizer(), local_store)

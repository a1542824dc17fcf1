# app/config.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .Catalog.exceptions import ConfigurationError

load_dotenv()

STORAGE_BACKENDS = ("local", "remote")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    user = os.getenv("POSTGRES_USER")
    pswd = os.getenv("POSTGRES_PASSWORD")
    host = os.getenv("POSTGRES_HOST", "postgres")
    port = os.getenv("POSTGRES_PORT", "5432")
    database = os.getenv("POSTGRES_DB", "perfumaria")
    return f"postgresql+asyncpg://{user}:{pswd}@{host}:{port}/{database}"


@dataclass
class Settings:
    database_url: str
    db_echo: bool = False
    storage_backend: str = "local"
    public_dir: str = "./public"
    images_subdir: str = "images"
    blob_api_url: str = "https://blob.vercel-storage.com"
    blob_token: str = ""
    image_max_width: int = 1200
    image_quality: int = 80
    max_upload_size: int = 5 * 1024 * 1024
    require_image_on_create: bool = False
    log_dir: str = "./logs"
    log_level: str = "INFO"

    def validate(self) -> "Settings":
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown STORAGE_BACKEND {self.storage_backend!r}, expected one of {STORAGE_BACKENDS}"
            )
        if self.storage_backend == "remote" and not self.blob_token:
            raise ConfigurationError("BLOB_READ_WRITE_TOKEN is required for the remote storage backend")
        if self.image_max_width <= 0:
            raise ConfigurationError("IMAGE_MAX_WIDTH must be positive")
        if not 1 <= self.image_quality <= 100:
            raise ConfigurationError("IMAGE_QUALITY must be between 1 and 100")
        return self


def get_settings() -> Settings:
    settings = Settings(
        database_url=_database_url(),
        db_echo=_env_bool("DB_ECHO", False),
        storage_backend=os.getenv("STORAGE_BACKEND", "local").strip().lower(),
        public_dir=os.getenv("PUBLIC_DIR", "./public"),
        images_subdir=os.getenv("IMAGES_SUBDIR", "images").strip("/"),
        blob_api_url=os.getenv("BLOB_API_URL", "https://blob.vercel-storage.com"),
        blob_token=os.getenv("BLOB_READ_WRITE_TOKEN", ""),
        image_max_width=_env_int("IMAGE_MAX_WIDTH", 1200),
        image_quality=_env_int("IMAGE_QUALITY", 80),
        max_upload_size=_env_int("MAX_UPLOAD_SIZE", 5 * 1024 * 1024),
        require_image_on_create=_env_bool("REQUIRE_IMAGE_ON_CREATE", False),
        log_dir=os.getenv("LOG_DIR", "./logs"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    return settings.validate()

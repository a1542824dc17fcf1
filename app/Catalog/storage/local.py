# app/Catalog/storage/local.py
import logging
from pathlib import Path

from fastapi.concurrency import run_in_threadpool

from ..exceptions import StorageError
from .base import ArtifactStore, is_store_local

logger = logging.getLogger(__name__)


class LocalArtifactStore(ArtifactStore):
    """Файлы в <public_dir>/<subdir>; локатор — путь относительно public_dir ("images/<name>")."""

    name = "local"

    def __init__(self, public_dir: str | Path, subdir: str = "images"):
        self.public_dir = Path(public_dir).resolve()
        self.subdir = subdir.strip("/")
        self.upload_dir = self.public_dir / self.subdir

    def ensure_dir(self) -> Path:
        # Идемпотентно, безопасно при параллельных вызовах
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    async def save(self, data: bytes, suggested_name: str) -> str:
        file_name = Path(suggested_name).name
        if not file_name:
            raise StorageError("Nome de arquivo inválido")
        try:
            target = await run_in_threadpool(self._write, data, file_name)
        except OSError as exc:
            logger.error("Не удалось записать файл %s: %s", file_name, exc)
            raise StorageError("Falha ao salvar imagem") from exc
        logger.info("Изображение сохранено: %s", target)
        return f"{self.subdir}/{file_name}"

    def _write(self, data: bytes, file_name: str) -> Path:
        target = self.ensure_dir() / file_name
        with open(target, "wb") as f:
            f.write(data)
        return target

    def resolve(self, locator: str) -> Path | None:
        if not is_store_local(locator):
            return None
        path = (self.public_dir / locator.lstrip("/")).resolve()
        if not path.is_relative_to(self.public_dir):
            logger.warning("Локатор %r указывает за пределы %s, пропускаем", locator, self.public_dir)
            return None
        return path

    async def delete(self, locator: str) -> None:
        path = self.resolve(locator)
        if path is None:
            return
        try:
            await run_in_threadpool(path.unlink, missing_ok=True)
        except OSError as exc:
            logger.error("Не удалось удалить файл %s: %s", path, exc)
            raise StorageError("Falha ao remover imagem") from exc
        logger.info("Изображение удалено: %s", path)

    def exists(self, locator: str) -> bool:
        path = self.resolve(locator)
        return path is not None and path.is_file()

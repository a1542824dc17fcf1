# app/Catalog/storage/remote.py
import logging

import httpx

from ..exceptions import StorageError
from .base import ArtifactStore

logger = logging.getLogger(__name__)


class RemoteArtifactStore(ArtifactStore):
    """Публичное blob-хранилище (API в стиле Vercel Blob). Локатор — абсолютный URL из ответа."""

    name = "remote"
    timestamped_names = True

    def __init__(
        self,
        api_url: str,
        token: str,
        content_type: str = "image/webp",
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.content_type = content_type
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def save(self, data: bytes, suggested_name: str) -> str:
        headers = {
            "authorization": f"Bearer {self.token}",
            "x-content-type": self.content_type,
            "x-add-random-suffix": "0",
        }
        try:
            response = await self._client.put(f"{self.api_url}/{suggested_name}", content=data, headers=headers)
            response.raise_for_status()
            url = response.json().get("url")
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Ошибка загрузки %s в blob-хранилище: %s", suggested_name, exc)
            raise StorageError("Falha ao enviar imagem") from exc

        if not url:
            logger.error("Blob-хранилище не вернуло url для %s", suggested_name)
            raise StorageError("Falha ao enviar imagem")
        logger.info("Изображение загружено: %s", url)
        return url

    async def delete(self, locator: str) -> None:
        # Удаление блобов не поддерживается, старые артефакты остаются в хранилище
        logger.warning("Удаление из blob-хранилища не выполняется: %s", locator)

    async def close(self) -> None:
        await self._client.aclose()

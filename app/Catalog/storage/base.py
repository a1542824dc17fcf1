# app/Catalog/storage/base.py
from abc import ABC, abstractmethod

from ..utils.naming import artifact_name

URL_SCHEMES = ("http://", "https://")


def is_store_local(locator: str | None) -> bool:
    # Пустой локатор — изображения нет; URL — артефакт во внешнем хранилище
    if not locator:
        return False
    return not locator.lower().startswith(URL_SCHEMES)


class ArtifactStore(ABC):
    """Хранилище оптимизированных изображений товаров. Возвращает локатор, который пишется в Product.image."""

    name = "base"
    timestamped_names = False

    def name_for(self, product_id: str, source_file_name: str, extension: str) -> str:
        return artifact_name(product_id, source_file_name, extension, timestamp=self.timestamped_names)

    @abstractmethod
    async def save(self, data: bytes, suggested_name: str) -> str:
        ...

    @abstractmethod
    async def delete(self, locator: str) -> None:
        ...

    async def close(self) -> None:
        return None

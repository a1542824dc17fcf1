# app/Catalog/services/ingestion.py
import logging
from dataclasses import dataclass
from typing import Any

from fastapi.concurrency import run_in_threadpool

from ..exceptions import NotFoundError, StorageError, ValidationError
from ..model.product import Product
from ..model.repository import ProductRepository
from ..storage.base import ArtifactStore, is_store_local
from ..utils.form_utils import parse_bool, parse_price, require_text
from .image_optimizer import ImageOptimizer

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 5 * 1024 * 1024  # 5 МБ


@dataclass
class UploadedImage:
    data: bytes
    file_name: str = ""


@dataclass
class ProductForm:
    name: str | None = None
    description: str | None = None
    price: str | None = None
    on_promotion: str | bool | None = None
    image: UploadedImage | None = None


class ProductIngestionService:
    """Создание, изменение и удаление товаров вместе с их изображениями.

    Порядок операций:
    - create: сначала запись с пустым image (нужен id для имени файла), затем оптимизация,
      сохранение артефакта и обновление локатора. При ошибке запись остаётся с пустым image.
    - update: новый артефакт сохраняется до удаления старого.
    - delete: удаление локального артефакта best-effort, запись удаляется в любом случае.
    """

    def __init__(
        self,
        repository: ProductRepository,
        optimizer: ImageOptimizer,
        store: ArtifactStore,
        require_image: bool = False,
        max_file_size: int = MAX_FILE_SIZE,
    ):
        self.repository = repository
        self.optimizer = optimizer
        self.store = store
        self.require_image = require_image
        self.max_file_size = max_file_size

    async def list_products(self, search: str | None = None) -> list[Product]:
        if search and search.strip():
            return await self.repository.search(search)
        return await self.repository.find_all()

    async def get(self, product_id: str) -> Product:
        product = await self.repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError()
        return product

    async def create(self, form: ProductForm) -> Product:
        fields = self._validate(form)
        image = self._image_or_none(form.image)

        if image is None:
            if self.require_image:
                raise ValidationError("Dados incompletos ou imagem não fornecida")
            product = await self.repository.create({**fields, "image": ""})
            logger.info("Товар %s создан без изображения", product.id)
            return product

        product = await self.repository.create({**fields, "image": ""})
        logger.info("Товар %s создан, обработка изображения %r", product.id, image.file_name)
        try:
            locator = await self._store_image(product.id, image)
            return await self.repository.update(product.id, {"image": locator})
        except Exception:
            logger.exception("Товар %s остался без изображения", product.id)
            raise

    async def update(self, product_id: str, form: ProductForm) -> Product:
        product = await self.get(product_id)
        fields = self._validate(form)
        image = self._image_or_none(form.image)

        if image is not None:
            previous = product.image
            locator = await self._store_image(product_id, image)
            if locator != previous and is_store_local(previous):
                await self._discard(product_id, previous)
            fields["image"] = locator

        updated = await self.repository.update(product_id, fields)
        logger.info("Товар %s обновлён", product_id)
        return updated

    async def delete(self, product_id: str) -> None:
        product = await self.get(product_id)
        if is_store_local(product.image):
            await self._discard(product_id, product.image)
        await self.repository.delete(product_id)
        logger.info("Товар %s удалён", product_id)

    def _validate(self, form: ProductForm) -> dict[str, Any]:
        return {
            "name": require_text(form.name, "nome"),
            "description": require_text(form.description, "descricao"),
            "price": parse_price(form.price),
            "on_promotion": parse_bool(form.on_promotion),
        }

    def _image_or_none(self, image: UploadedImage | None) -> UploadedImage | None:
        # Отсутствующий или пустой файл — изображение не передано
        if image is None or not image.data:
            return None
        if len(image.data) > self.max_file_size:
            raise ValidationError(f"Imagem muito grande. Tamanho máximo: {self.max_file_size // (1024 * 1024)} MB")
        return image

    async def _store_image(self, product_id: str, image: UploadedImage) -> str:
        data = await run_in_threadpool(self.optimizer.optimize, image.data, image.file_name)
        name = self.store.name_for(product_id, image.file_name, self.optimizer.extension)
        return await self.store.save(data, name)

    async def _discard(self, product_id: str, locator: str) -> None:
        try:
            await self.store.delete(locator)
        except StorageError:
            logger.exception("Не удалось удалить изображение %s товара %s", locator, product_id)

# app/Catalog/router/products.py
import logging

from fastapi import APIRouter, Depends, UploadFile, File, Form, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ValidationError
from ..model.database import get_db
from ..model.repository import ProductRepository
from ..schema.product import ProductResponse, ProductUpdateResponse, MessageResponse, ErrorResponse
from ..services.ingestion import ProductForm, ProductIngestionService, UploadedImage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_ingestion_service(request: Request, db: AsyncSession = Depends(get_db)) -> ProductIngestionService:
    state = request.app.state
    return ProductIngestionService(
        repository=ProductRepository(db),
        optimizer=state.optimizer,
        store=state.artifact_store,
        require_image=state.settings.require_image_on_create,
        max_file_size=state.settings.max_upload_size,
    )


async def read_upload(image: UploadFile | None, max_size: int) -> UploadedImage | None:
    # Пустое поле или файл нулевой длины — изображения нет
    if image is None:
        return None

    # Проверка размера до чтения в память
    image.file.seek(0, 2)  # в конец
    size = image.file.tell()
    image.file.seek(0)  # в начало
    if size > max_size:
        logger.warning("Файл %r слишком большой: %s байт", image.filename, size)
        raise ValidationError(f"Imagem muito grande. Tamanho máximo: {max_size // (1024 * 1024)} MB")

    data = await image.read()
    if not data:
        return None
    return UploadedImage(data=data, file_name=image.filename or "")


@router.get("", response_model=list[ProductResponse], description="Список товаров, опционально с поиском по названию.")
async def get_products(search: str | None = None, service: ProductIngestionService = Depends(get_ingestion_service)):
    return await service.list_products(search)


@router.get("/{product_id}", response_model=ProductResponse, responses=ERRORS, description="Товар по {ID}.")
async def get_product(product_id: str, service: ProductIngestionService = Depends(get_ingestion_service)):
    return await service.get(product_id)


@router.post("", response_model=ProductResponse, status_code=201, responses=ERRORS,
             description="Создание товара, изображение опционально.")
async def create_product(
        nome: str | None = Form(None),
        descricao: str | None = Form(None),
        preco: str | None = Form(None),
        promocao: str | None = Form(None),
        imagem: UploadFile | None = File(None),
        service: ProductIngestionService = Depends(get_ingestion_service)
):
    form = ProductForm(
        name=nome,
        description=descricao,
        price=preco,
        on_promotion=promocao,
        image=await read_upload(imagem, service.max_file_size),
    )
    return await service.create(form)


@router.put("/{product_id}", response_model=ProductUpdateResponse, responses=ERRORS,
            description="Изменение товара. Без нового изображения локатор сохраняется.")
async def edit_product(
        product_id: str,
        nome: str | None = Form(None),
        descricao: str | None = Form(None),
        preco: str | None = Form(None),
        promocao: str | None = Form(None),
        imagem: UploadFile | None = File(None),
        service: ProductIngestionService = Depends(get_ingestion_service)
):
    form = ProductForm(
        name=nome,
        description=descricao,
        price=preco,
        on_promotion=promocao,
        image=await read_upload(imagem, service.max_file_size),
    )
    product = await service.update(product_id, form)
    return {"message": "Produto atualizado com sucesso", "product": ProductResponse.model_validate(product)}


@router.delete("/{product_id}", response_model=MessageResponse, responses=ERRORS,
               description="Удаление товара вместе с локальным изображением.")
async def delete_product(product_id: str, service: ProductIngestionService = Depends(get_ingestion_service)):
    await service.delete(product_id)
    return {"message": "Produto excluído com sucesso"}

# app/Catalog/schema/product.py
from pydantic import AliasChoices, BaseModel, Field


def _field(name: str, alias: str, *args):
    # Наружу поля отдаются под именами, которые ждёт фронтенд (nome, preco, ...)
    return Field(*args, validation_alias=AliasChoices(name, alias), serialization_alias=alias)


class ProductResponse(BaseModel):
    id: str
    name: str = _field("name", "nome")
    description: str = _field("description", "descricao")
    price: float = _field("price", "preco")
    on_promotion: bool = _field("on_promotion", "promocao")
    image: str = _field("image", "imagem", "")

    class Config:
        from_attributes = True


class ProductUpdateResponse(BaseModel):
    message: str
    product: ProductResponse


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str

# app/Catalog/model/repository.py
from typing import Any

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from ..exceptions import NotFoundError
from .product import Product

EDITABLE_FIELDS = {"name", "description", "price", "on_promotion", "image"}


class ProductRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fields: dict[str, Any]) -> Product:
        product = Product(**{key: value for key, value in fields.items() if key in EDITABLE_FIELDS})
        if product.image is None:
            product.image = ""
        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)
        return product

    async def find_by_id(self, product_id: str) -> Product | None:
        result = await self.session.execute(select(Product).where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def update(self, product_id: str, fields: dict[str, Any]) -> Product:
        product = await self.find_by_id(product_id)
        if product is None:
            raise NotFoundError()

        for key, value in fields.items():
            if key in EDITABLE_FIELDS:
                setattr(product, key, value)

        await self.session.commit()
        await self.session.refresh(product)
        return product

    async def delete(self, product_id: str) -> None:
        product = await self.find_by_id(product_id)
        if product is None:
            raise NotFoundError()

        await self.session.delete(product)
        await self.session.commit()

    async def find_all(self) -> list[Product]:
        result = await self.session.execute(select(Product))
        return list(result.scalars().all())

    async def search(self, term: str) -> list[Product]:
        # Поиск по подстроке в названии без учёта регистра
        # % и _ в запросе ищутся буквально
        escaped = term.strip().lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{escaped}%"
        result = await self.session.execute(
            select(Product).where(func.lower(Product.name).like(pattern, escape="\\"))
        )
        return list(result.scalars().all())

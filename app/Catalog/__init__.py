"""
Perfumaria catalog: products and their images
"""

from .model.database import Base
from .router.products import router as products_router

__all__ = ["Base", "products_router"]
__version__ = "1.0.0"

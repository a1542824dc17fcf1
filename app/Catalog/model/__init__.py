from .database import Base, Database, get_db
from .product import Product
from .repository import ProductRepository

__all__ = [
    'Base', 'Database', 'get_db', 'Product', 'ProductRepository'
]
__version__ = '1.0.0'

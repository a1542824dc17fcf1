from .image_optimizer import ImageOptimizer, OptimizerConfig
from .ingestion import ProductForm, ProductIngestionService, UploadedImage

__all__ = [
    "ImageOptimizer",
    "OptimizerConfig",
    "ProductForm",
    "ProductIngestionService",
    "UploadedImage",
]

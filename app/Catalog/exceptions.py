# app/Catalog/exceptions.py


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    status_code = 400


class NotFoundError(CatalogError):
    status_code = 404

    def __init__(self, message: str = "Produto não encontrado"):
        super().__init__(message)


class ImageProcessingError(CatalogError):
    status_code = 500


class StorageError(CatalogError):
    status_code = 500


class ConfigurationError(CatalogError):
    pass

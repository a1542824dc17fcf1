from .base import ArtifactStore, is_store_local
from .local import LocalArtifactStore
from .remote import RemoteArtifactStore

__all__ = [
    "ArtifactStore", "LocalArtifactStore", "RemoteArtifactStore", "is_store_local", "build_artifact_store"
]


def build_artifact_store(settings) -> ArtifactStore:
    # Бэкенд выбирается конфигурацией (STORAGE_BACKEND)
    if settings.storage_backend == "remote":
        return RemoteArtifactStore(settings.blob_api_url, settings.blob_token)
    return LocalArtifactStore(settings.public_dir, settings.images_subdir)

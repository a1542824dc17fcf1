# app/Catalog/services/image_optimizer.py
import io
import logging
from dataclasses import dataclass

from PIL import Image, ImageOps, UnidentifiedImageError

from ..exceptions import ImageProcessingError

logger = logging.getLogger(__name__)


@dataclass
class OptimizerConfig:
    max_width: int = 1200
    quality: int = 80
    format: str = "WEBP"
    extension: str = "webp"


class ImageOptimizer:
    """Приводит загруженное изображение к единому виду: ширина не больше max_width, WEBP, фиксированное качество.

    Увеличение не выполняется: узкие изображения сохраняют исходную ширину.
    """

    def __init__(self, config: OptimizerConfig | None = None) -> None:
        self.config = config or OptimizerConfig()

    @property
    def extension(self) -> str:
        return self.config.extension

    def optimize(self, raw: bytes, source_file_name: str = "") -> bytes:
        if not raw:
            raise ImageProcessingError("Falha ao processar imagem: arquivo vazio")

        try:
            with Image.open(io.BytesIO(raw)) as source:
                source.load()
                image = ImageOps.exif_transpose(source)
        except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as exc:
            logger.error("Не удалось декодировать изображение %r: %s", source_file_name, exc)
            raise ImageProcessingError("Falha ao processar imagem") from exc

        image = self._resize(image)
        image = self._convert_mode(image)

        buffer = io.BytesIO()
        try:
            image.save(buffer, format=self.config.format, quality=self.config.quality)
        except (OSError, ValueError, KeyError) as exc:
            logger.error("Не удалось закодировать изображение %r в %s: %s", source_file_name, self.config.format, exc)
            raise ImageProcessingError("Falha ao processar imagem") from exc

        data = buffer.getvalue()
        logger.debug(
            "Изображение %r оптимизировано: %s -> %s байт, размер %sx%s",
            source_file_name, len(raw), len(data), image.width, image.height,
        )
        return data

    def _resize(self, image: Image.Image) -> Image.Image:
        width, height = image.size
        if width <= self.config.max_width:
            return image
        target_height = max(round(height * self.config.max_width / width), 1)
        logger.debug("Уменьшение %sx%s до %sx%s", width, height, self.config.max_width, target_height)
        return image.resize((self.config.max_width, target_height), Image.Resampling.LANCZOS)

    @staticmethod
    def _convert_mode(image: Image.Image) -> Image.Image:
        if image.mode in ("RGB", "RGBA"):
            return image
        has_alpha = image.mode in ("LA", "PA") or (image.mode == "P" and "transparency" in image.info)
        return image.convert("RGBA" if has_alpha else "RGB")

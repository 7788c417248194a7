"""Загрузка изображений с диска и запись обратно на место.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование и базовые свойства.
- Каналы не приводятся к RGBA: изображение читается как есть (кроме
  прозрачности, заданной палитрой или отдельным каналом альфы), решение о
  пропуске принимает вызывающий код.
- Любая ошибка декодера превращается в `ValueError`.
- Запись: сначала всё изображение кодируется в память, затем файл
  перезаписывается одним вызовом.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from replace_color.models.image_model import ImageData

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска.

        Каналы не приводятся к RGBA принудительно. Исключение: палитровые и
        серые изображения с прозрачностью (`P`/`L`/`RGB` с `transparency`,
        а также `LA`/`PA`) разворачиваются в RGBA, как при чтении PNG с альфой.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c массивом пикселей формы (height, width, channels),
            размерами, режимом и форматом.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан или не декодируется.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            with Image.open(path) as pil_image:
                pil_image.load()
                fmt = pil_image.format
                if self._has_alpha_to_expand(pil_image):
                    pil_image = pil_image.convert("RGBA")
                mode = pil_image.mode
                channels = len(pil_image.getbands())
                pixels = np.array(pil_image)
        except UnidentifiedImageError as exc:
            raise ValueError(f"Not an image: {path}") from exc
        except Exception as exc:
            # decoder plugins raise IndexError, EOFError, struct.error, ... on corrupt data
            raise ValueError(f"Unable to decode {path}: {exc!r}") from exc

        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        height, width = pixels.shape[:2]

        logger.debug("Loaded %s: %dx%d, mode=%s, format=%s", path, width, height, mode, fmt)
        return ImageData(
            path=path,
            pixels=pixels,
            width=width,
            height=height,
            channels=channels,
            mode=mode,
            format=fmt,
        )

    def save_image(self, image_data: ImageData) -> None:
        """Перезаписывает исходный файл содержимым `image_data.pixels`.

        Формат определяется по расширению файла, при неизвестном расширении
        используется формат, в котором файл был прочитан.

        Raises:
            ValueError: если формат не определить или кодировщик отказал.
            OSError: если файл не удалось записать.
        """
        path = image_data.path
        fmt = self._format_for_path(path) or image_data.format
        if fmt is None:
            raise ValueError(f"Cannot determine output format for {path}")

        pixels = np.ascontiguousarray(image_data.pixels, dtype=np.uint8)
        pil_image = Image.frombytes(image_data.mode, (image_data.width, image_data.height), pixels.tobytes())

        buffer = io.BytesIO()
        try:
            pil_image.save(buffer, format=fmt)
        except (KeyError, OSError) as exc:
            # KeyError: unknown format name or unsupported mode for the encoder
            raise ValueError(f"Unable to encode {path} as {fmt}: {exc}") from exc

        path.write_bytes(buffer.getvalue())
        logger.debug("Wrote %s (%s, %d bytes)", path, fmt, buffer.tell())

    # ---- Helpers ----
    @staticmethod
    def _has_alpha_to_expand(pil_image: Image.Image) -> bool:
        if pil_image.mode in ("LA", "PA"):
            return True
        return pil_image.mode in ("P", "L", "RGB") and "transparency" in pil_image.info

    @staticmethod
    def _format_for_path(path: Path) -> Optional[str]:
        return Image.registered_extensions().get(path.suffix.lower())

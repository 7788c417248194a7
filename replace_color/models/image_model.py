"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class ImageData:
    """Декодированное изображение и его метаданные.

    Поле `pixels` неизменяемо как ссылка, но сам массив изменяется на месте
    при замене цвета.

    Fields:
        path: Путь к исходному файлу.
        pixels: Массив uint8 формы (height, width, channels).
        width: Ширина, px.
        height: Высота, px.
        channels: Число каналов (полос) в режиме PIL.
        mode: Режим PIL, например "RGBA".
        format: Формат, определённый Pillow при чтении ("PNG", "TIFF", ...).
    """
    path: Path
    pixels: np.ndarray
    width: int
    height: int
    channels: int
    mode: str
    format: Optional[str]

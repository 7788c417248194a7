from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

YELLOW = (0xFF, 0xFF, 0x00, 0xFF)
YELLOW_HALF = (0xFF, 0xFF, 0x00, 0x80)
CLEAR = (0, 0, 0, 0)


def rgba_array(rows: Sequence[Sequence[Tuple[int, int, int, int]]]) -> np.ndarray:
    return np.array(rows, dtype=np.uint8)


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Пишет изображение из массива пикселей в tmp_path и возвращает путь."""

    def _write(name: str, pixels: np.ndarray, mode: str = "RGBA") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.frombytes(mode, (pixels.shape[1], pixels.shape[0]), np.ascontiguousarray(pixels).tobytes()).save(path)
        return path

    return _write


def read_pixels(path: Path) -> np.ndarray:
    with Image.open(path) as img:
        return np.array(img)

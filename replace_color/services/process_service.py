from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from replace_color.models.color_model import ColorTuple, pack


class ProcessService:
    def replace_color(
        self,
        pixels: np.ndarray,
        source: ColorTuple,
        target: ColorTuple,
        collect_colors: bool = False,
    ) -> Tuple[int, Optional[Tuple[ColorTuple, ...]]]:
        """
        Точная замена цвета на месте в массиве (H, W, 4) uint8.

        Пиксель совпадает, только если равны все четыре компоненты.
        Возвращает (число заменённых пикселей, цвета после замены или None).
        """
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an (H, W, 4) array, got shape {pixels.shape}")

        src = np.array(source, dtype=pixels.dtype)
        dst = np.array(target, dtype=pixels.dtype)

        mask = np.all(pixels == src, axis=-1)
        converted = int(np.count_nonzero(mask))
        if converted:
            pixels[mask] = dst

        colors = self.distinct_colors(pixels) if collect_colors else None
        return converted, colors

    def distinct_colors(self, pixels: np.ndarray) -> Tuple[ColorTuple, ...]:
        """
        Уникальные цвета массива (H, W, 4), по возрастанию упакованного значения.
        """
        flat = pixels.reshape(-1, 4)
        if flat.size == 0:
            return ()
        unique = np.unique(flat, axis=0)
        colors = [ColorTuple(*(int(c) for c in row)) for row in unique]
        colors.sort(key=pack)
        return tuple(colors)

"""Цвета: упакованное 32-битное значение и кортеж компонент RGBA.

Принципы:
- SRP: только преобразования и форматирование, без ввода-вывода.
- Чистый код: обычные функции без состояния.

Раскладка битов (не совпадает с обычным RGBA big/little-endian):
    red   = биты 31..24
    green = биты 23..16
    blue  = биты 15..8
    alpha = биты 7..0
"""
from __future__ import annotations

import re
from typing import NamedTuple

MAX_PACKED = 0xFFFFFFFF

_HEX_RE = re.compile(r"^(?:0[xX])?([0-9a-fA-F]+)$")


class ColorTuple(NamedTuple):
    """Цвет пикселя; порядок полей совпадает с каналами Pillow (RGBA)."""
    red: int
    green: int
    blue: int
    alpha: int


def unpack(numeric: int) -> ColorTuple:
    """Распаковывает 32-битное значение в `ColorTuple`.

    Raises:
        ValueError: если значение не помещается в 32 бита без знака.
    """
    if not 0 <= numeric <= MAX_PACKED:
        raise ValueError(f"Color value does not fit in 32 bits: {numeric:#x}")
    return ColorTuple(
        red=(numeric >> 24) & 0xFF,
        green=(numeric >> 16) & 0xFF,
        blue=(numeric >> 8) & 0xFF,
        alpha=numeric & 0xFF,
    )


def pack(color: ColorTuple) -> int:
    """Обратное к `unpack`."""
    return (color.blue << 8) | (color.green << 16) | (color.red << 24) | color.alpha


def color_to_string(color: ColorTuple) -> str:
    """Человекочитаемый вид: `RGBA = (0xRR, 0xGG, 0xBB, 0xAA)`."""
    return "RGBA = ({})".format(", ".join(f"0x{c:02x}" for c in color))


def parse_hex_color(text: str) -> int:
    """Разбирает шестнадцатеричную строку (префикс `0x` необязателен).

    Returns:
        Упакованный цвет в диапазоне 0..0xFFFFFFFF.

    Raises:
        ValueError: пустая строка, не-hex символы, знак или значение шире 32 бит.
    """
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Not a hexadecimal color: {text!r}")
    numeric = int(match.group(1), 16)
    if numeric > MAX_PACKED:
        raise ValueError(f"Color value does not fit in 32 bits: {text!r}")
    return numeric

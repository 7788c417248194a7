from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from replace_color.models.color_model import ColorTuple


@dataclass(frozen=True)
class RunConfig:
    """Проверенные параметры запуска, полученные из командной строки."""
    directory: Path
    filename_suffix: str
    from_color: ColorTuple
    to_color: ColorTuple
    show_colors: bool = False
    verbose: bool = False

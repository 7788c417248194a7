"""Отчёты о конвертации: по файлу и итог по всему запуску."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from replace_color.models.color_model import ColorTuple


class FileStatus(Enum):
    CONVERTED = "converted"
    UNCHANGED = "unchanged"
    UNREADABLE = "unreadable"
    WRONG_CHANNELS = "wrong_channels"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class FileReport:
    """Результат обработки одного файла.

    Размеры и режим заполнены, только если файл удалось декодировать.
    `colors_found` равно None, если сбор цветов выключен или до сканирования
    дело не дошло.
    """
    path: Path
    status: FileStatus
    width: Optional[int] = None
    height: Optional[int] = None
    channels: Optional[int] = None
    mode: Optional[str] = None
    converted_pixels: int = 0
    colors_found: Optional[Tuple[ColorTuple, ...]] = None
    error: Optional[str] = None

    @property
    def decoded(self) -> bool:
        return self.status is not FileStatus.UNREADABLE

    @property
    def touched(self) -> bool:
        return self.status is FileStatus.CONVERTED


@dataclass(frozen=True)
class RunTotals:
    """Накопитель итогов; `add` возвращает новое значение, не мутируя старое."""
    files_found: int = 0
    files_touched: int = 0
    pixels_converted: int = 0
    files_unreadable: int = 0
    files_skipped: int = 0
    files_write_failed: int = 0

    def add(self, report: FileReport) -> RunTotals:
        status = report.status
        return replace(
            self,
            files_touched=self.files_touched + (1 if report.touched else 0),
            pixels_converted=self.pixels_converted + (report.converted_pixels if report.touched else 0),
            files_unreadable=self.files_unreadable + (1 if status is FileStatus.UNREADABLE else 0),
            files_skipped=self.files_skipped + (1 if status is FileStatus.WRONG_CHANNELS else 0),
            files_write_failed=self.files_write_failed + (1 if status is FileStatus.WRITE_FAILED else 0),
        )

"""Контроллер запуска: оркестрация сервисов и вывода.

SOLID:
- SRP: класс управляет последовательностью шагов (без логики обработки пикселей).
- DIP: зависит от сервисов как от ролей; их можно подменить в тестах.
Clean Code:
- Ошибки отдельного файла превращаются в статус отчёта, запуск продолжается.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from replace_color.models.report_model import FileReport, FileStatus, RunTotals
from replace_color.models.run_config import RunConfig
from replace_color.services.file_service import FileService
from replace_color.services.image_service import ImageService
from replace_color.services.process_service import ProcessService
from replace_color.ui.console_view import ConsoleView

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Проводит один запуск замены цвета по дереву каталогов.

    Ответственности:
    - Поиск файлов через `FileService`.
    - Загрузка и запись через `ImageService`.
    - Замена пикселей через `ProcessService`.
    - Свёртка отчётов по файлам в `RunTotals` и вывод через `ConsoleView`.
    """
    config: RunConfig
    view: Optional[ConsoleView] = None

    _file_service: FileService = FileService()
    _image_service: ImageService = ImageService()
    _process_service: ProcessService = ProcessService()

    def run(self) -> RunTotals:
        """Обрабатывает все найденные файлы по очереди и возвращает итоги."""
        if self.view is not None:
            self.view.show_header(self.config)

        files = self._file_service.find_files(self.config.directory, self.config.filename_suffix)
        logger.info("Found %d files matching *%s in %s", len(files), self.config.filename_suffix, self.config.directory)
        if self.view is not None:
            self.view.show_files_found(len(files))

        totals = RunTotals(files_found=len(files))
        for file_path in files:
            report = self.process_file(file_path)
            if self.view is not None:
                self.view.show_file_report(report)
            totals = totals.add(report)

        if self.view is not None:
            self.view.show_summary(totals)
        return totals

    def process_file(self, file_path: str | Path) -> FileReport:
        """Декодирует, заменяет цвет и при необходимости перезаписывает один файл."""
        path = Path(file_path)
        try:
            image_data = self._image_service.load_image(path)
        except (ValueError, OSError) as exc:
            logger.info("Unable to read %s: %s", path, exc)
            return FileReport(path=path, status=FileStatus.UNREADABLE, error=str(exc))

        decoded = dict(
            path=path,
            width=image_data.width,
            height=image_data.height,
            channels=image_data.channels,
            mode=image_data.mode,
        )
        # CMYK, RGBX, RGBa also have 4 bands but are not RGBA pixels
        if image_data.mode != "RGBA":
            logger.info("Skipping %s: %d channels (mode %s)", path, image_data.channels, image_data.mode)
            return FileReport(status=FileStatus.WRONG_CHANNELS, **decoded)

        converted, colors = self._process_service.replace_color(
            image_data.pixels,
            self.config.from_color,
            self.config.to_color,
            collect_colors=self.config.show_colors,
        )
        if converted == 0:
            return FileReport(status=FileStatus.UNCHANGED, converted_pixels=0, colors_found=colors, **decoded)

        try:
            self._image_service.save_image(image_data)
        except (ValueError, OSError) as exc:
            logger.warning("Unable to write %s: %s", path, exc)
            return FileReport(
                status=FileStatus.WRITE_FAILED,
                converted_pixels=converted,
                colors_found=colors,
                error=str(exc),
                **decoded,
            )

        return FileReport(status=FileStatus.CONVERTED, converted_pixels=converted, colors_found=colors, **decoded)

from __future__ import annotations

import sys
from typing import Optional, TextIO

from replace_color.models.color_model import color_to_string
from replace_color.models.report_model import FileReport, FileStatus, RunTotals
from replace_color.models.run_config import RunConfig


class ConsoleView:
    """Текстовый вывод хода работы: заголовок, строка на файл, итог."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout is looked up on every write
        return self._stream if self._stream is not None else sys.stdout

    # public API (called from controller)
    def show_header(self, config: RunConfig) -> None:
        self._write(f"Converting from : {color_to_string(config.from_color)}")
        self._write(f"             to : {color_to_string(config.to_color)}")
        self._write(f"  Searching for : *{config.filename_suffix}")
        self._write(f"             in : {config.directory}")

    def show_files_found(self, count: int) -> None:
        self._write(f"Found {count} files, now converting ...")

    def show_file_report(self, report: FileReport) -> None:
        self._write(self.format_file_report(report))

    def show_summary(self, totals: RunTotals) -> None:
        self._write("")
        self._write(f"Converted a total of {totals.pixels_converted} pixels in {totals.files_touched} files")
        skipped = totals.files_unreadable + totals.files_skipped + totals.files_write_failed
        if skipped:
            self._write(
                f"Skipped {skipped} files: {totals.files_unreadable} unreadable, "
                f"{totals.files_skipped} not RGBA, {totals.files_write_failed} not writable"
            )

    # ---- Formatting ----
    @staticmethod
    def format_file_report(report: FileReport) -> str:
        line = f"Processing {report.path}"
        if not report.decoded:
            return line + " - unable to read, skipping..."

        line += (
            f", width = {report.width}, height = {report.height}"
            f", channels = {report.channels}, mode = {report.mode}"
        )
        if report.status is FileStatus.WRONG_CHANNELS:
            if report.channels == 4:
                return line + " - need RGBA pixels, skipping..."
            return line + " - need 4 channels, skipping..."

        line += f": converted {report.converted_pixels} pixels"
        if report.status is FileStatus.WRITE_FAILED:
            line += f" - unable to write ({report.error}), skipping..."
        if report.colors_found is not None:
            line += ", colors found: " + ", ".join(color_to_string(c) for c in report.colors_found)
        return line

    def _write(self, text: str) -> None:
        print(text, file=self.stream)

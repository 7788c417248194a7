from __future__ import annotations

from replace_color.controllers.app_controller import AppController
from replace_color.models.report_model import RunTotals
from replace_color.models.run_config import RunConfig
from replace_color.ui.console_view import ConsoleView


class ReplaceColorApp:
    def __init__(self, config: RunConfig) -> None:
        self._view = ConsoleView()
        self._controller = AppController(config=config, view=self._view)

    def run(self) -> RunTotals:
        return self._controller.run()

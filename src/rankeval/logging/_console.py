# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Rich console output for rendered log lines.
"""

from logging import Handler, LogRecord

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)
"The console used for rankeval's terminal log output (standard error)."


class ConsoleHandler(Handler):
    """
    Log handler that prints records, already rendered by structlog (possibly
    with ANSI colors), to the rankeval :data:`console`.
    """

    @property
    def supports_color(self) -> bool:
        "Whether colored log lines will display properly."
        return console.is_terminal and not console.no_color

    def emit(self, record: LogRecord) -> None:
        try:
            line = self.format(record)
            # one line per event
            console.print(Text.from_ansi(line), soft_wrap=True)
        except Exception:
            self.handleError(record)

"""Console logger for pocket analysis workflows."""

import datetime
import inspect
import os
import time
from pathlib import Path
from typing import Optional, Tuple

from rich.console import Console


class PocketLogger:
    """
    Rich console logger.

    Lines look like ``[Date Time] (dt) (module:line) LEVEL message``:
    info is green, warnings orange, errors red and debug yellow.
    """

    _STYLES = {
        "INFO": "green",
        "WARN": "orange1",
        "ERROR": "bold red",
        "DEBUG": "yellow",
    }

    def __init__(
        self,
        debug_enabled: bool = True,
        console: Optional[Console] = None,
        show_init: bool = False
    ) -> None:
        self.console = console or Console(stderr=True)
        self.start_time = time.time()
        self.debug_enabled = debug_enabled

        if show_init:
            started = datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')
            self.console.print(f"[bold cyan]Pocket logger initialized at {started}[/bold cyan]")

    def _caller_location(self) -> Tuple[str, str]:
        """Dotted module name and line number of the code that called the logger."""
        frame = inspect.currentframe()
        # _caller_location <- _log <- info/warning/... <- caller
        caller = frame
        for _ in range(3):
            caller = caller.f_back if caller is not None else None
        if caller is None:
            return "unknown_file", "?"

        path = Path(caller.f_code.co_filename).resolve()
        package_root = Path(__file__).resolve().parent.parent.parent
        try:
            rel_path = path.relative_to(package_root)
            module = ".".join(list(rel_path.parent.parts) + [rel_path.stem])
        except ValueError:
            module = path.stem
        return module, str(caller.f_lineno)

    def _log(self, message: str, level: str) -> None:
        module, lineno = self._caller_location()
        now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        dt = time.time() - self.start_time
        style = self._STYLES[level]

        prefix = f"[#637e96][{now}] ({dt:.2f}s) ({module}:{lineno})[/#637e96]"
        self.console.print(
            f"{prefix} [{style}]{level:<5}[/{style}] [white]{message}[/white]",
            highlight=False
        )

    def info(self, message: str) -> None:
        self._log(message, "INFO")

    def warning(self, message: str) -> None:
        self._log(message, "WARN")

    def error(self, message: str) -> None:
        self._log(message, "ERROR")

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._log(message, "DEBUG")

    def set_debug(self, enabled: bool) -> None:
        """Enable or disable debug logging."""
        self.debug_enabled = enabled


# Global logger instance
# Debug output is controlled by POCKET_PRESCREENING_DEBUG (0 or 1)
debug_enabled = os.environ.get("POCKET_PRESCREENING_DEBUG", "1") == "1"
logger = PocketLogger(debug_enabled=debug_enabled)

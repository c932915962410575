from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .settings import Settings


def setup_logging(settings: Settings) -> None:
    """Route all log records through a single rich handler on stderr."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("dmnex").setLevel(level)

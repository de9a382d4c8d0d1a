"""
Logging setup for cargo-config.

- Console (stderr) via rich: WARNING by default, DEBUG with --verbose.
- Rotating file under the platformdirs user log dir, INFO and above.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

from cargo_config.config import APP_NAME


def setup_logging(verbose: bool = False) -> logging.Logger:
    console_level = logging.DEBUG if verbose else logging.WARNING

    log_dir = Path(user_log_dir(APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "cli.log"

    logger = logging.getLogger("cargo_config")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Clear existing handlers if any (idempotent setup)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = RichHandler(console=Console(stderr=True), show_path=False)
    ch.setLevel(console_level)
    logger.addHandler(ch)

    fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(logging.INFO)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(fh)

    logger.debug("Log file: %s", log_file)
    return logger

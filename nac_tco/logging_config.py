import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
HANDLER_NAME = "nac_tco.console"


def setup_logging(name: str, level: str = "INFO", fmt: Optional[str] = None) -> logging.Logger:
    """Standardized logging setup for the API process."""

    formatter = logging.Formatter(fmt=fmt or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # create_app may run more than once per process (tests)
    if not any(h.get_name() == HANDLER_NAME for h in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    return logging.getLogger(name)

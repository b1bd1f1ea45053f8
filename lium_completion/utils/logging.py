import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None):
    """
    Setup logging for the completion helper.

    The shell shim throws stderr away, so during a tab press the log file is
    the only place records end up. A log file that cannot be opened is
    reported on stderr and skipped; completion never fails because of it.
    """
    logger = logging.getLogger("lium_completion")
    logger.setLevel(level)

    # Prevent adding handlers if they already exist
    if not logger.handlers:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            try:
                file_handler = logging.FileHandler(log_file)
            except OSError as e:
                logger.warning(f"Cannot open log file {log_file}: {e}")
            else:
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

    return logger


def get_logger(name: str):
    """
    Get a logger with the given name under the 'lium_completion' namespace.
    """
    if name.startswith("lium_completion."):
        return logging.getLogger(name)
    return logging.getLogger(f"lium_completion.{name}")

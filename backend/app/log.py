"""
Console logging setup for the command line renderer.
"""

import logging


class ColoredFormatter(logging.Formatter):
    COLORS = {
        'DEBUG': '\033[0;96m',    # Cyan
        'INFO': '',
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[1;31m'  # Bold Red
    }
    RESET = '\033[0m'

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        return f"{log_color}{message}{self.RESET}"


def config_logger(level: int = logging.INFO) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)

    # Repeat calls only adjust the level
    if any(isinstance(h.formatter, ColoredFormatter) for h in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter('[%(asctime)s] %(levelname)s: %(message)s'))
    logger.addHandler(handler)

from logging import DEBUG, INFO, StreamHandler, getLogger

from colorlog import ColoredFormatter

_COLORED_FORMATTER = ColoredFormatter(
    "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s",
    log_colors={
        "DEBUG": "cyan",
        "INFO": "white",
        "WARNING": "yellow",
        "ERROR": "bold_red",
        "CRITICAL": "red"
    }
)

class ColoredStreamHandler(StreamHandler):
    def __init__(self):
        super().__init__()
        self.setFormatter(_COLORED_FORMATTER)


def configure_logging(level: int = INFO, *, verbose: bool = False) -> None:
    """Attach the colored handler to the package logger once."""
    logger = getLogger("brickgame")
    logger.setLevel(DEBUG if verbose else level)
    if not any(isinstance(handler, ColoredStreamHandler) for handler in logger.handlers):
        logger.addHandler(ColoredStreamHandler())

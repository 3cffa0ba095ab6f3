import logging
from colorlog import ColoredFormatter
from app.core.settings import settings

LOG_FORMAT = (
    "%(log_color)s[%(asctime)s] [%(levelname)-8s] "
    "%(reset)s%(blue)s%(name)s:%(reset)s %(message)s"
)

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def _build_handler() -> logging.Handler:
    formatter = ColoredFormatter(
        LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        reset=True,
        log_colors=LOG_COLORS,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    return handler


logger = logging.getLogger("customer_dashboard")
logger.setLevel(settings.LOG_LEVEL.upper())
# reimportar el módulo (tests, reload) no debe duplicar salida
if not logger.handlers:
    logger.addHandler(_build_handler())
logger.propagate = False

import sys
import logging

LOG_FORMAT = '%(asctime)s [%(levelname)s]  %(name)s: %(message)s'
LOG_DATEFMT = '%Y-%m-%dT%H:%M:%S'

logger = logging.getLogger(vars(sys.modules[__name__])['__package__'])
logger.setLevel(logging.INFO)
logger.addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    """Настройка root-логгера для приложения; библиотека сама её не вызывает."""
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Дочерний логгер модуля, например get_logger('converter.scaling')."""
    return logger.getChild(name)

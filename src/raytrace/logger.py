import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    package_logger = logging.getLogger("raytrace")
    package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. get_logger("image") -> raytrace.image."""
    return logging.getLogger("raytrace").getChild(name)

"""Loggers of the cloudinarypy package, one per component."""

import logging

PACKAGE_LOGGER = 'cloudinarypy'

# Components with their own logger, see setup_logging()
COMPONENTS = ('client', 'request', 'upload', 'admin')


def get_logger(component: str) -> logging.Logger:
    """Logger for a package component.
    
    ``get_logger('upload')`` and ``get_logger('cloudinarypy.upload')`` name
    the same logger. Records propagate to the root logger, so
    ``logging.basicConfig()`` is enough to see them; until the root logger
    has a handler the level stays at WARNING.
    
    Args:
        component: Component name, with or without the package prefix
        
    Returns:
        The component logger
    """
    if component != PACKAGE_LOGGER and not component.startswith(PACKAGE_LOGGER + '.'):
        component = f"{PACKAGE_LOGGER}.{component}"
    
    logger = logging.getLogger(component)
    logger.propagate = True
    if logger.level == logging.NOTSET and not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)
    return logger


def set_level(level: int) -> None:
    """Sets one level on the package logger and every component logger."""
    for name in (PACKAGE_LOGGER,) + COMPONENTS:
        get_logger(name).setLevel(level)

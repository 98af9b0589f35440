"""
Configuracion de loguru para el CLI.
"""
import sys

from loguru import logger

from harmonica_sync.shared.exceptions.domain import ConfigurationException

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def configure_logging(level: str = "INFO", log_file: str = "") -> None:
    """
    Reemplaza el sink por defecto de loguru.

    Args:
        level: Nivel minimo de log (DEBUG, INFO, WARNING...)
        log_file: Ruta opcional de un archivo de log adicional con rotacion

    Raises:
        ConfigurationException: si LOG_LEVEL no es un nivel de loguru
    """
    level = level.upper()
    # Validar antes de quitar sinks para que el error siga siendo visible
    try:
        logger.level(level)
    except ValueError as e:
        raise ConfigurationException(f"Invalid LOG_LEVEL: {level}") from e

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)

    if log_file:
        logger.add(
            log_file,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention="10 days",
            level=level
        )

"""
Configuración de fixtures para pytest.
"""
import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Captura los mensajes emitidos por loguru durante el test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)

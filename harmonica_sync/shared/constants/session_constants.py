"""
Constantes relacionadas con sesiones de Harmonica.
Define estados, roles de mensajes y valores por defecto del sync.
"""
import re
from enum import Enum


class SessionStatus(str, Enum):
    """Estados de sesión reconocidos por la API de Harmonica."""
    ACTIVE = "active"
    COMPLETED = "completed"


class MessageRole(str, Enum):
    """Autor de un mensaje dentro de la respuesta de un participante."""
    USER = "user"
    ASSISTANT = "assistant"


# Orden en que se consultan los estados por cada búsqueda
SEARCH_STATUSES = (SessionStatus.COMPLETED, SessionStatus.ACTIVE)

# Tamaño de página fijo por combinación búsqueda/estado
SEARCH_PAGE_SIZE = 50

# Token de idempotencia embebido en los nombres de archivo: hst_<hex> justo antes de .md
SESSION_FILE_ID_PATTERN = re.compile(r"(hst_[a-f0-9]+)\.md$")

DEFAULT_API_URL = "https://app.harmonica.chat"
DEFAULT_OUTPUT_DIR = "sessions"
DEFAULT_FILENAME_PATTERN = "{{date}}-{{id}}.md"
DEFAULT_CONFIG_FILENAME = "harmonica.config.json"
DEFAULT_TEMPLATE_FILENAME = "session-template.md"

SLUG_MAX_LENGTH = 60

"""
Utilidades puras para construir nombres de archivo de sesiones.

Se mantienen libres de I/O para poder testearlas fácilmente.
"""
import re

from harmonica_sync.shared.constants.session_constants import SLUG_MAX_LENGTH

_APOSTROPHES = re.compile(r"['’]")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def format_date(timestamp: str) -> str:
    """
    Extrae la parte de fecha de un timestamp ISO8601.

    "2026-02-24T10:30:00Z" -> "2026-02-24"
    """
    return timestamp.split("T")[0]


def slugify(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """
    Convierte un texto a un slug seguro para nombres de archivo.

    Los apóstrofes se eliminan ("what's" -> "whats"); cada secuencia de
    caracteres fuera de [a-z0-9] colapsa a un único guion y los guiones en
    los extremos se eliminan antes de truncar.
    """
    slug = _NON_SLUG_CHARS.sub("-", _APOSTROPHES.sub("", text.lower()))
    return slug.strip("-")[:max_length]


def resolve_filename(pattern: str, *, date: str, session_id: str, slug: str) -> str:
    """Sustituye los placeholders {{date}}, {{id}} y {{slug}} del patrón."""
    return (
        pattern
        .replace("{{date}}", date)
        .replace("{{id}}", session_id)
        .replace("{{slug}}", slug)
    )


def pluralize(count: int, singular: str, plural: str = "") -> str:
    """Retorna "1 session" / "2 sessions"."""
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"

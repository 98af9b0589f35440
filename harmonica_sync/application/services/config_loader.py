"""
Carga y validación de harmonica.config.json.
"""
import json
from pathlib import Path

from pydantic import ValidationError

from harmonica_sync.application.dto.config_dto import SyncConfigDTO
from harmonica_sync.shared.exceptions.domain import ConfigurationException


def _format_validation_error(error: ValidationError) -> str:
    """Resume los errores de pydantic en una línea legible."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def load_sync_config(config_path: Path) -> SyncConfigDTO:
    """
    Lee y valida el archivo de configuración.

    Raises:
        ConfigurationException: si el archivo no existe, no es JSON válido,
            o no cumple el esquema (sync.search debe ser una lista no vacía).
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationException(
            f"Config file not found: {config_path}. "
            f"Run 'harmonica-sync --init' to create one.",
            config_path=str(config_path),
        )

    raw = config_path.read_text(encoding="utf-8")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationException(
            f"Invalid JSON in config file: {config_path}",
            config_path=str(config_path),
        ) from e

    try:
        return SyncConfigDTO.model_validate(parsed)
    except ValidationError as e:
        raise ConfigurationException(
            f"Invalid config file {config_path}: {_format_validation_error(e)}",
            config_path=str(config_path),
        ) from e

"""
DTOs del archivo harmonica.config.json.
Las claves del JSON van en camelCase; los atributos en snake_case.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from harmonica_sync.shared.constants.session_constants import (
    DEFAULT_FILENAME_PATTERN,
    DEFAULT_OUTPUT_DIR,
)


class SyncSectionDTO(BaseModel):
    """Qué sesiones buscar y cómo filtrarlas."""

    search: List[str] = Field(
        ...,
        min_length=1,
        description="Queries de búsqueda; cada una se consulta para cada estado"
    )
    keywords: Optional[List[str]] = Field(
        None,
        description="Si hay keywords, al menos una debe aparecer en topic/goal/context"
    )
    min_participants: int = Field(
        1,
        ge=0,
        alias="minParticipants",
        description="Mínimo de participantes para sincronizar la sesión"
    )
    require_summary: bool = Field(
        True,
        alias="requireSummary",
        description="Omitir sesiones sin resumen generado"
    )

    class Config:
        """Configuración de Pydantic."""
        populate_by_name = True


class OutputSectionDTO(BaseModel):
    """Dónde y cómo escribir los markdowns."""

    dir: str = Field(DEFAULT_OUTPUT_DIR, description="Directorio de salida")
    filename: str = Field(
        DEFAULT_FILENAME_PATTERN,
        description="Patrón con placeholders {{date}}, {{id}} y {{slug}}"
    )
    template: Optional[str] = Field(None, description="Template Mustache alternativo")


class SyncConfigDTO(BaseModel):
    """Configuración completa de una corrida de sync."""

    sync: SyncSectionDTO
    output: OutputSectionDTO

"""
Modelos de los payloads de la API de Harmonica.

Los timestamps se conservan como string ISO8601 tal cual llegan: el nombre
de archivo usa la parte de fecha literal, sin conversiones de zona horaria.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class _ApiModel(BaseModel):
    class Config:
        """Configuración de Pydantic."""
        extra = "ignore"


class SessionSummary(_ApiModel):
    """Sesión tal como aparece en el listado/búsqueda."""

    id: str
    topic: str
    goal: str = ""
    status: str
    participant_count: int = 0
    created_at: str
    updated_at: Optional[str] = None

    @field_validator("goal", "participant_count", mode="before")
    @classmethod
    def _null_as_default(cls, value, info):
        # La API puede mandar null en campos no identificativos
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class SessionDetail(SessionSummary):
    """Detalle completo de una sesión."""

    critical: Optional[str] = None
    context: Optional[str] = None
    summary: Optional[str] = None


class ParticipantMessage(_ApiModel):
    id: Optional[str] = None
    role: str
    content: str
    created_at: Optional[str] = None


class ParticipantResponse(_ApiModel):
    """Conversación de un participante con la sesión."""

    participant_id: Optional[str] = None
    participant_name: Optional[str] = None
    active: bool = False
    messages: list[ParticipantMessage] = Field(default_factory=list)


class SessionSummaryResult(_ApiModel):
    session_id: Optional[str] = None
    summary: Optional[str] = None
    generated_at: Optional[str] = None


class Pagination(_ApiModel):
    total: int = 0
    limit: int = 0
    offset: int = 0


class SessionListResult(_ApiModel):
    data: list[SessionSummary] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

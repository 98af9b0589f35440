"""
DTOs que recibe el template de sesión.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class TemplateMessageDTO(BaseModel):
    content: str


class TemplateParticipantDTO(BaseModel):
    """Participante con al menos un mensaje propio, numerado desde 1."""

    number: int = Field(..., ge=1)
    messages: List[TemplateMessageDTO]


class TemplateDataDTO(BaseModel):
    """Proyección de una sesión lista para renderizar."""

    topic: str
    date: str
    id: str
    participant_count: int
    status: str
    goal: str
    critical: Optional[str] = None
    context: Optional[str] = None
    summary: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    responses: bool = Field(False, description="True si algún participante tiene mensajes")
    participants: List[TemplateParticipantDTO] = Field(default_factory=list)

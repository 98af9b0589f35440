"""
Proyección de una sesión de Harmonica a los datos del template.
"""
from typing import Optional, Sequence

from harmonica_sync.application.dto.template_dto import (
    TemplateDataDTO,
    TemplateMessageDTO,
    TemplateParticipantDTO,
)
from harmonica_sync.infrastructure.external.harmonica.types import (
    ParticipantResponse,
    SessionDetail,
)
from harmonica_sync.shared.constants.session_constants import MessageRole
from harmonica_sync.shared.utils.text_utils import format_date


def project_participants(responses: Sequence[ParticipantResponse]) -> list[TemplateParticipantDTO]:
    """
    Conserva solo los mensajes escritos por cada participante (role=user).

    Los participantes sin mensajes propios se descartan y el resto se
    numera de forma contigua desde 1.
    """
    participants: list[TemplateParticipantDTO] = []
    for response in responses:
        messages = [
            TemplateMessageDTO(content=m.content)
            for m in response.messages
            if m.role == MessageRole.USER.value
        ]
        if not messages:
            continue
        participants.append(
            TemplateParticipantDTO(number=len(participants) + 1, messages=messages)
        )
    return participants


def build_template_data(
    session: SessionDetail,
    summary: Optional[str],
    responses: Sequence[ParticipantResponse],
    matched_queries: Sequence[str],
) -> TemplateDataDTO:
    participants = project_participants(responses)

    return TemplateDataDTO(
        topic=session.topic,
        date=format_date(session.created_at),
        id=session.id,
        participant_count=session.participant_count,
        status=session.status,
        goal=session.goal,
        critical=session.critical,
        context=session.context,
        summary=summary,
        tags=list(matched_queries),
        responses=bool(participants),
        participants=participants,
    )

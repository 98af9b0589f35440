"""
Caso de uso de sincronización Harmonica -> markdown.

Diseño (resumen):
- Escanea el directorio de salida para saber qué sesiones ya existen
- Busca sesiones por cada query y estado, agregando las queries que las encontraron
- Descarta las ya sincronizadas
- Por cada candidata: detalle -> filtros -> resumen -> respuestas -> render -> escritura

Estrategia de errores:
- Una búsqueda fallida solo omite esa combinación query/estado.
- Si falla el detalle, se omite esa sesión y se sigue con la siguiente.
- Resumen y respuestas fallidos cuentan como "no disponibles".
- Template inexistente es fatal y se propaga.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from harmonica_sync.application.dto.config_dto import SyncConfigDTO
from harmonica_sync.application.services.session_projection import build_template_data
from harmonica_sync.application.services.template_renderer import (
    TemplateRenderer,
    build_template_locator,
)
from harmonica_sync.core.config import Settings, settings as default_settings
from harmonica_sync.domain.entities.candidate_session import CandidateSession
from harmonica_sync.infrastructure.external.harmonica.harmonica_client import (
    HarmonicaApiError,
    HarmonicaClient,
)
from harmonica_sync.infrastructure.external.harmonica.types import (
    ParticipantResponse,
    SessionDetail,
)
from harmonica_sync.infrastructure.repositories.session_file_repository import SessionFileRepository
from harmonica_sync.shared.constants.session_constants import SEARCH_PAGE_SIZE, SEARCH_STATUSES
from harmonica_sync.shared.exceptions.domain import MissingCredentialException
from harmonica_sync.shared.utils.text_utils import (
    format_date,
    pluralize,
    resolve_filename,
    slugify,
)


@dataclass(frozen=True)
class SyncResult:
    synced: int
    candidates: int
    skipped: int = 0
    failed: int = 0
    written_files: list[Path] = field(default_factory=list)


def _display_path(path: Path) -> str:
    try:
        return os.path.relpath(path) or str(path)
    except ValueError:
        return str(path)


def matches_keywords(session: SessionDetail, keywords: list[str]) -> bool:
    """
    True si alguna keyword aparece (sin distinguir mayúsculas) en
    topic + goal + context.
    """
    haystack = f"{session.topic} {session.goal} {session.context or ''}".lower()
    return any(kw.lower() in haystack for kw in keywords)


class SessionSyncUseCase:
    """
    Orquestador de una corrida completa de sync.
    """

    def __init__(
        self,
        *,
        client: HarmonicaClient,
        renderer: TemplateRenderer,
        page_size: int = SEARCH_PAGE_SIZE,
    ) -> None:
        self._client = client
        self._renderer = renderer
        self._page_size = page_size

    def run(self, config: SyncConfigDTO, base_dir: Path) -> SyncResult:
        """
        Ejecuta la sincronización. Las rutas relativas de la config se
        resuelven contra base_dir (el directorio del archivo de config).
        """
        base_dir = Path(base_dir)
        repository = SessionFileRepository(base_dir / config.output.dir)
        template_path = base_dir / config.output.template if config.output.template else None

        existing_ids = repository.load_existing_ids()
        logger.info(
            f"Found {len(existing_ids)} existing sessions in {_display_path(repository.output_dir)}"
        )

        session_map = self.search_candidates(config.sync.search)
        logger.info(f"Found {len(session_map)} sessions matching search queries")

        candidates = [c for session_id, c in session_map.items() if session_id not in existing_ids]
        logger.info(f"{len(candidates)} new candidates to process")

        if not candidates:
            logger.info("Nothing to sync.")
            return SyncResult(synced=0, candidates=0)

        written: list[Path] = []
        skipped = 0
        failed = 0

        for candidate in candidates:
            try:
                details = self._client.get_detail(candidate.id)
            except HarmonicaApiError as e:
                logger.warning(f"Failed to fetch session {candidate.id}: {e}")
                failed += 1
                continue

            path = self._process_candidate(
                candidate,
                details,
                config=config,
                repository=repository,
                template_path=template_path,
            )
            if path is None:
                skipped += 1
            else:
                written.append(path)

        synced = len(written)
        logger.success(f"Sync complete. {pluralize(synced, 'session')} synced.")
        return SyncResult(
            synced=synced,
            candidates=len(candidates),
            skipped=skipped,
            failed=failed,
            written_files=written,
        )

    def search_candidates(self, queries: list[str]) -> dict[str, CandidateSession]:
        """
        Ejecuta cada query contra cada estado y agrega los resultados por ID.

        El dict conserva el orden de primera aparición de cada sesión.
        """
        session_map: dict[str, CandidateSession] = {}

        for query in queries:
            for status in SEARCH_STATUSES:
                try:
                    result = self._client.search(query=query, status=status, limit=self._page_size)
                except HarmonicaApiError as e:
                    logger.warning(f'Search for "{query}" ({status.value}) failed: {e}')
                    continue

                for session in result.data:
                    candidate = session_map.get(session.id)
                    if candidate is None:
                        candidate = CandidateSession(summary=session)
                        session_map[session.id] = candidate
                    candidate.add_query(query)

        return session_map

    def _process_candidate(
        self,
        candidate: CandidateSession,
        details: SessionDetail,
        *,
        config: SyncConfigDTO,
        repository: SessionFileRepository,
        template_path: Optional[Path],
    ) -> Optional[Path]:
        """
        Aplica filtros, renderiza y escribe una sesión.
        Retorna la ruta escrita, o None si algún filtro la descartó.
        """
        label = f"{details.topic} ({details.id})"

        keywords = config.sync.keywords
        if keywords and not matches_keywords(details, keywords):
            logger.info(f"Skipping: {label} - no keyword match")
            return None

        min_participants = config.sync.min_participants
        if details.participant_count < min_participants:
            logger.info(
                f"Skipping: {label} - {details.participant_count} participants (min: {min_participants})"
            )
            return None

        summary = self._fetch_summary(details.id)
        if config.sync.require_summary and not summary:
            logger.info(f"Skipping: {label} - no summary")
            return None

        responses = self._fetch_responses(details.id)

        logger.info(f"Syncing: {label} - {details.participant_count} participants")

        template_data = build_template_data(details, summary, responses, candidate.matched_queries)
        markdown = self._renderer.render(template_data, template_path)

        filename = resolve_filename(
            config.output.filename,
            date=format_date(details.created_at),
            session_id=details.id,
            slug=slugify(details.topic),
        )
        path = repository.write(filename, markdown)
        logger.info(f"  Written: {filename}")
        return path

    def _fetch_summary(self, session_id: str) -> Optional[str]:
        # Sin resumen (404 incluido) no es un error: solo afecta al filtro
        try:
            return self._client.get_summary(session_id).summary
        except HarmonicaApiError as e:
            logger.debug(f"No summary for {session_id}: {e}")
            return None

    def _fetch_responses(self, session_id: str) -> list[ParticipantResponse]:
        try:
            return self._client.get_responses(session_id)
        except HarmonicaApiError as e:
            logger.debug(f"No responses for {session_id}: {e}")
            return []


def build_client(settings: Settings) -> HarmonicaClient:
    """
    Construye el cliente desde settings.

    Raises:
        MissingCredentialException: si HARMONICA_API_KEY no está definida
    """
    if not settings.HARMONICA_API_KEY:
        raise MissingCredentialException("HARMONICA_API_KEY")
    return HarmonicaClient(settings.HARMONICA_API_KEY, base_url=settings.effective_api_url)


def sync(
    config: SyncConfigDTO,
    base_dir: Path,
    *,
    settings: Optional[Settings] = None,
    client: Optional[HarmonicaClient] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> SyncResult:
    """
    Punto de entrada del sync: arma dependencias y ejecuta una corrida.

    La credencial se valida antes de cualquier request o escritura.
    """
    settings = settings or default_settings

    if client is None:
        client = build_client(settings)
    if renderer is None:
        renderer = TemplateRenderer(build_template_locator(settings))

    use_case = SessionSyncUseCase(client=client, renderer=renderer)
    return use_case.run(config, base_dir)

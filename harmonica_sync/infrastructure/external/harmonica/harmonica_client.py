"""
Cliente mínimo de la API REST v1 de Harmonica (sin SDKs externos).

Requisitos cubiertos:
- requests
- autenticación Bearer estática
- errores HTTP normalizados a HarmonicaApiError

Sin reintentos ni paginación: cada llamada pide una única página.
"""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from harmonica_sync.shared.constants.session_constants import DEFAULT_API_URL, SessionStatus

from .types import (
    ParticipantResponse,
    SessionDetail,
    SessionListResult,
    SessionSummaryResult,
)

M = TypeVar("M", bound=BaseModel)


class HarmonicaApiError(RuntimeError):
    """Error de integración con Harmonica."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_message(resp: requests.Response) -> str:
    """
    Extrae el mensaje de error del body JSON ({"error": {"message": ...}}).

    Si el body no es JSON o no trae mensaje, usa "HTTP <status>".
    """
    try:
        body = resp.json()
    except ValueError:
        body = {}

    error = body.get("error") if isinstance(body, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return message or f"HTTP {resp.status_code}"


class HarmonicaClient:
    """
    Cliente HTTP de Harmonica. Cada método retorna el payload ya validado.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_API_URL,
        session: Optional[requests.Session] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def search(
        self,
        *,
        query: Optional[str] = None,
        status: Optional[SessionStatus] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> SessionListResult:
        """
        Busca sesiones. Los filtros vacíos no se envían.
        """
        params: dict[str, Any] = {}
        if status:
            params["status"] = SessionStatus(status).value
        if query:
            params["q"] = query
        if limit:
            params["limit"] = limit
        if offset:
            params["offset"] = offset

        return self._get("/sessions", SessionListResult, params=params)

    def get_detail(self, session_id: str) -> SessionDetail:
        return self._get(f"/sessions/{session_id}", SessionDetail)

    def get_responses(self, session_id: str) -> list[ParticipantResponse]:
        payload = self._request_json(f"/sessions/{session_id}/responses")
        data = payload.get("data") if isinstance(payload, dict) else None
        try:
            return [ParticipantResponse.model_validate(item) for item in data or []]
        except ValidationError as e:
            raise HarmonicaApiError(
                f"Harmonica API error: invalid responses payload for {session_id}"
            ) from e

    def get_summary(self, session_id: str) -> SessionSummaryResult:
        return self._get(f"/sessions/{session_id}/summary", SessionSummaryResult)

    def _get(self, path: str, model: Type[M], *, params: Optional[dict[str, Any]] = None) -> M:
        payload = self._request_json(path, params=params)
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise HarmonicaApiError(
                f"Harmonica API error: invalid {model.__name__} payload from {path}"
            ) from e

    def _request_json(self, path: str, *, params: Optional[dict[str, Any]] = None) -> Any:
        """
        GET contra /api/v1 con Bearer token.

        - 2xx: retorna el JSON del body
        - resto: HarmonicaApiError con el mensaje del servidor o "HTTP <status>"
        """
        url = f"{self._base_url}/api/v1{path}"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        try:
            resp = self._session.get(
                url,
                params=params or None,
                headers=headers,
                timeout=self._timeout_s,
            )
        except requests.RequestException as e:
            raise HarmonicaApiError(f"Harmonica API error: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise HarmonicaApiError(
                f"Harmonica API error: {_error_message(resp)}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise HarmonicaApiError(
                f"Harmonica API error: invalid JSON from {path}",
                status_code=resp.status_code,
            ) from e

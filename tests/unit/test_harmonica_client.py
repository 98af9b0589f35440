"""
Tests unitarios para HarmonicaClient.

La sesión de requests se reemplaza por un Mock para inspeccionar
URL, parámetros y headers sin red.
"""
from unittest.mock import Mock

import pytest
import requests

from harmonica_sync.infrastructure.external.harmonica.harmonica_client import (
    HarmonicaApiError,
    HarmonicaClient,
)
from harmonica_sync.shared.constants.session_constants import SessionStatus

SESSION_PAYLOAD = {
    "id": "hst_abc123",
    "topic": "Topic",
    "goal": "Goal",
    "status": "completed",
    "participant_count": 2,
    "created_at": "2026-02-24T10:30:00Z",
    "updated_at": "2026-02-24T11:00:00Z",
}


def _response(status_code: int = 200, payload=None, json_error: bool = False) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = payload
    return resp


class TestHarmonicaClient:

    @pytest.fixture
    def http(self):
        return Mock(spec=requests.Session)

    @pytest.fixture
    def client(self, http):
        return HarmonicaClient("hm_live_key", base_url="https://example.test///", session=http)

    def test_base_url_trailing_slashes_are_stripped(self, client):
        """Verifica que se quiten las barras finales de la URL base."""
        assert client.base_url == "https://example.test"

    def test_search_sends_filters_and_auth_headers(self, client, http):
        """Verifica que search envíe filtros, Bearer y Content-Type."""
        http.get.return_value = _response(payload={
            "data": [SESSION_PAYLOAD],
            "pagination": {"total": 1, "limit": 50, "offset": 0},
        })

        result = client.search(query="dao", status=SessionStatus.ACTIVE, limit=50)

        assert [s.id for s in result.data] == ["hst_abc123"]
        assert result.pagination.total == 1
        args, kwargs = http.get.call_args
        assert args[0] == "https://example.test/api/v1/sessions"
        assert kwargs["params"] == {"status": "active", "q": "dao", "limit": 50}
        assert kwargs["headers"]["Authorization"] == "Bearer hm_live_key"
        assert kwargs["headers"]["Content-Type"] == "application/json"

    def test_search_omits_empty_filters(self, client, http):
        """Verifica que sin filtros no se envíe query string."""
        http.get.return_value = _response(payload={"data": []})

        client.search(query="", offset=0)

        assert http.get.call_args.kwargs["params"] is None

    def test_search_tolerates_null_goal_and_participant_count(self, client, http):
        """Verifica que goal y participant_count nulos no descarten la página."""
        http.get.return_value = _response(payload={"data": [
            {**SESSION_PAYLOAD, "id": "hst_1", "goal": None},
            {**SESSION_PAYLOAD, "id": "hst_2", "participant_count": None},
            SESSION_PAYLOAD,
        ]})

        result = client.search(query="dao")

        assert [s.id for s in result.data] == ["hst_1", "hst_2", "hst_abc123"]
        assert result.data[0].goal == ""
        assert result.data[1].participant_count == 0
        assert result.data[2].goal == "Goal"

    def test_get_detail_tolerates_null_goal(self, client, http):
        """Verifica que el detalle con goal nulo se parsee con goal vacío."""
        http.get.return_value = _response(payload={**SESSION_PAYLOAD, "goal": None})

        detail = client.get_detail("hst_abc123")

        assert detail.goal == ""

    def test_get_detail_parses_optional_fields(self, client, http):
        """Verifica que los campos opcionales del detalle queden en None si faltan."""
        http.get.return_value = _response(payload={**SESSION_PAYLOAD, "context": "ctx"})

        detail = client.get_detail("hst_abc123")

        assert http.get.call_args.args[0] == "https://example.test/api/v1/sessions/hst_abc123"
        assert detail.context == "ctx"
        assert detail.critical is None
        assert detail.summary is None

    def test_get_responses_returns_data_list(self, client, http):
        """Verifica que get_responses devuelva la lista bajo data."""
        http.get.return_value = _response(payload={"data": [
            {"participant_id": "p1", "participant_name": None, "active": True, "messages": [
                {"id": "m1", "role": "user", "content": "hi", "created_at": "2026-02-24T10:31:00Z"},
            ]},
        ]})

        responses = client.get_responses("hst_abc123")

        assert http.get.call_args.args[0].endswith("/sessions/hst_abc123/responses")
        assert responses[0].messages[0].content == "hi"

    def test_get_summary(self, client, http):
        """Verifica que get_summary consulte el endpoint de resumen."""
        http.get.return_value = _response(payload={
            "session_id": "hst_abc123", "summary": "Done", "generated_at": "2026-02-25T00:00:00Z",
        })

        result = client.get_summary("hst_abc123")

        assert http.get.call_args.args[0].endswith("/sessions/hst_abc123/summary")
        assert result.summary == "Done"

    def test_error_uses_server_message(self, client, http):
        """Verifica que el error use el mensaje del cuerpo de la respuesta."""
        http.get.return_value = _response(404, payload={"error": {"message": "Session not found"}})

        with pytest.raises(HarmonicaApiError, match="Harmonica API error: Session not found") as exc:
            client.get_detail("hst_missing")
        assert exc.value.status_code == 404

    def test_error_without_json_body_uses_status(self, client, http):
        """Verifica que sin cuerpo JSON el error use el código HTTP."""
        http.get.return_value = _response(502, json_error=True)

        with pytest.raises(HarmonicaApiError, match="HTTP 502"):
            client.get_summary("hst_abc123")

    def test_error_with_unexpected_body_uses_status(self, client, http):
        """Verifica que un cuerpo con forma inesperada use el código HTTP."""
        http.get.return_value = _response(500, payload=["boom"])

        with pytest.raises(HarmonicaApiError, match="HTTP 500"):
            client.get_detail("hst_abc123")

    def test_transport_errors_are_wrapped(self, client, http):
        """Verifica que los errores de transporte se envuelvan en HarmonicaApiError."""
        http.get.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(HarmonicaApiError, match="unreachable") as exc:
            client.search(query="x")
        assert exc.value.status_code is None

    def test_invalid_payload_is_wrapped(self, client, http):
        """Verifica que un payload inválido se reporte como HarmonicaApiError."""
        http.get.return_value = _response(payload={"id": "hst_1"})

        with pytest.raises(HarmonicaApiError, match="invalid SessionDetail payload"):
            client.get_detail("hst_1")

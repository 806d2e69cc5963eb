"""Tests for the tool registry and its error mapping."""

import httpx
import pytest
import respx
from pydantic import ValidationError

from deputados import tools
from deputados.config import CAMARA_BASE_URL
from deputados.exceptions import CamaraApiError, ToolError
from deputados.schemas import DeputadoInput, FetchDocumentResult, RankingInput, RankingResult
from deputados.tools import TOOLS, call_tool


def test_registry_ids():
    assert list(TOOLS) == [
        "LISTAR_DEPUTADOS",
        "EVENTOS_DEPUTADO",
        "DESPESAS_DEPUTADO",
        "FRENTES_DEPUTADO",
        "RANKING_DESPESAS",
        "FETCH_DOCUMENT",
    ]
    assert all(t.description for t in TOOLS.values())


@respx.mock
def test_listar_deputados_returns_records_unchanged():
    dados = [{"id": 204554, "nome": "Fulana", "siglaPartido": "PX", "extra": None}]
    respx.get(f"{CAMARA_BASE_URL}/deputados").mock(return_value=httpx.Response(200, json={"dados": dados}))

    result = call_tool("LISTAR_DEPUTADOS")

    assert result.deputados == dados
    assert result.to_wire() == {"deputados": dados}


@pytest.mark.parametrize(
    "tool_id, path, message",
    [
        ("LISTAR_DEPUTADOS", "/deputados", "Failed to fetch deputies: HTTP Error: 500"),
        ("EVENTOS_DEPUTADO", "/deputados/1/eventos", "Failed to fetch deputy events: HTTP Error: 500"),
        ("DESPESAS_DEPUTADO", "/deputados/1/despesas", "Failed to fetch deputy expenses: HTTP Error: 500"),
        ("FRENTES_DEPUTADO", "/deputados/1/frentes", "Failed to fetch deputy fronts: HTTP Error: 500"),
    ],
)
@respx.mock
def test_upstream_status_becomes_tool_error(tool_id, path, message):
    respx.get(f"{CAMARA_BASE_URL}{path}").mock(return_value=httpx.Response(500))

    with pytest.raises(ToolError) as exc_info:
        call_tool(tool_id, {"deputadoId": "1"})
    assert str(exc_info.value) == message
    assert isinstance(exc_info.value.__cause__, CamaraApiError)


@respx.mock
def test_transport_error_becomes_tool_error():
    respx.get(f"{CAMARA_BASE_URL}/deputados/1/frentes").mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(ToolError, match="^Failed to fetch deputy fronts: refused$"):
        tools.frentes_deputado(DeputadoInput(deputado_id="1"))


@respx.mock
def test_integer_deputy_id_is_accepted():
    route = respx.get(f"{CAMARA_BASE_URL}/deputados/204554/eventos").mock(
        return_value=httpx.Response(200, json={"dados": [{"id": 1}]})
    )

    result = call_tool("EVENTOS_DEPUTADO", {"deputadoId": 204554})

    assert result.eventos == [{"id": 1}]
    assert route.called


def test_unknown_tool():
    with pytest.raises(KeyError):
        call_tool("NAO_EXISTE")


@pytest.mark.parametrize(
    "tool_id, payload",
    [
        ("EVENTOS_DEPUTADO", {}),
        ("EVENTOS_DEPUTADO", {"deputadoId": ""}),
        ("RANKING_DESPESAS", {"ano": 2024}),
        ("RANKING_DESPESAS", {"deputadoIdAtual": "1", "ano": "ontem"}),
        ("FETCH_DOCUMENT", {"url": "https://example.org", "type": "pdf"}),
        ("FETCH_DOCUMENT", {}),
    ],
)
def test_invalid_payload(tool_id, payload):
    with pytest.raises(ValidationError):
        call_tool(tool_id, payload)


def test_ranking_tool_wraps_roster_failure(monkeypatch):
    def fail(deputado_id_atual, ano=None):
        raise CamaraApiError(503)

    monkeypatch.setattr(tools, "rank_by_expenses", fail)

    with pytest.raises(ToolError, match="^Failed to fetch expenses ranking: HTTP Error: 503$"):
        tools.ranking_despesas(RankingInput(deputado_id_atual="1"))


def test_ranking_tool_passes_year(monkeypatch):
    seen = {}

    def fake(deputado_id_atual, ano=None):
        seen.update(deputado_id_atual=deputado_id_atual, ano=ano)
        return RankingResult(ranking=[], posicao_deputado_atual=0, total_deputados=0)

    monkeypatch.setattr(tools, "rank_by_expenses", fake)

    call_tool("RANKING_DESPESAS", {"deputadoIdAtual": 204554, "ano": 2023})

    assert seen == {"deputado_id_atual": "204554", "ano": 2023}


def test_fetch_document_tool_never_raises(monkeypatch):
    calls = []

    def fake(url, kind="document"):
        calls.append((url, kind))
        return FetchDocumentResult(success=False, error="HTTP Error: 404 Not Found")

    monkeypatch.setattr(tools, "fetch_document", fake)

    result = call_tool("FETCH_DOCUMENT", {"url": "https://example.org/x"})

    assert result.success is False
    assert calls == [("https://example.org/x", "document")]

"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from deputados import tools
from deputados.api import create_app
from deputados.camara_client import CamaraApiClient
from deputados.exceptions import CamaraApiError
from deputados.schemas import (
    DocumentLink,
    FetchDocumentResult,
    ParsedContent,
    RankingEntry,
    RankingResult,
)


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_list_tools(client):
    resp = client.get("/api/tools")
    assert resp.status_code == 200
    ids = [t["id"] for t in resp.json()]
    assert len(ids) == 6
    assert "RANKING_DESPESAS" in ids
    assert all(t["description"] for t in resp.json())


def test_listar_deputados(client, monkeypatch):
    dados = [{"id": 1, "nome": "A", "siglaUf": "SP"}]
    monkeypatch.setattr(CamaraApiClient, "list_deputados", lambda self: dados)

    resp = client.post("/api/tools/LISTAR_DEPUTADOS")

    assert resp.status_code == 200
    assert resp.json() == {"deputados": dados}


def test_eventos_with_integer_id(client, monkeypatch):
    seen = []

    def fake(self, deputado_id):
        seen.append(deputado_id)
        return [{"id": 70001}]

    monkeypatch.setattr(CamaraApiClient, "list_eventos", fake)

    resp = client.post("/api/tools/EVENTOS_DEPUTADO", json={"deputadoId": 204554})

    assert resp.status_code == 200
    assert resp.json() == {"eventos": [{"id": 70001}]}
    assert seen == ["204554"]


def test_upstream_failure_is_502(client, monkeypatch):
    def fail(self, deputado_id, ano=None, *, timeout=None):
        raise CamaraApiError(500)

    monkeypatch.setattr(CamaraApiClient, "list_despesas", fail)

    resp = client.post("/api/tools/DESPESAS_DEPUTADO", json={"deputadoId": "1"})

    assert resp.status_code == 502
    assert resp.json() == {"detail": "Failed to fetch deputy expenses: HTTP Error: 500"}


def test_unknown_tool_is_404(client):
    resp = client.post("/api/tools/NAO_EXISTE", json={})
    assert resp.status_code == 404


def test_bad_payload_is_422(client):
    resp = client.post("/api/tools/FRENTES_DEPUTADO", json={"deputadoId": ""})
    assert resp.status_code == 422
    assert resp.json()["detail"][0]["loc"] == ["deputadoId"]


def test_ranking_uses_camel_case(client, monkeypatch):
    def fake(deputado_id_atual, ano=None):
        entry = RankingEntry(
            deputado_id="3",
            nome_deputado="C",
            sigla_partido="PX",
            total_despesas=100.0,
            posicao=1,
            is_deputado_atual=True,
        )
        return RankingResult(ranking=[entry], posicao_deputado_atual=1, total_deputados=1)

    monkeypatch.setattr(tools, "rank_by_expenses", fake)

    resp = client.post("/api/tools/RANKING_DESPESAS", json={"deputadoIdAtual": "3"})

    assert resp.status_code == 200
    assert resp.json() == {
        "ranking": [{
            "deputadoId": "3",
            "nomeDeputado": "C",
            "siglaPartido": "PX",
            "totalDespesas": 100.0,
            "posicao": 1,
            "isDeputadoAtual": True,
        }],
        "posicaoDeputadoAtual": 1,
        "totalDeputados": 1,
    }


def test_fetch_document_failure_is_200_without_parsed_content(client, monkeypatch):
    monkeypatch.setattr(
        tools,
        "fetch_document",
        lambda url, kind="document": FetchDocumentResult(success=False, error="HTTP Error: 404 Not Found"),
    )

    resp = client.post("/api/tools/FETCH_DOCUMENT", json={"url": "https://example.org/x", "type": "registro"})

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": "HTTP Error: 404 Not Found"}


def test_fetch_document_success_payload(client, monkeypatch):
    parsed = ParsedContent(
        text="Foo Bar",
        metadata={"title": "Foo"},
        links=[DocumentLink(text="Bar", url="/x")],
    )
    monkeypatch.setattr(
        tools,
        "fetch_document",
        lambda url, kind="document": FetchDocumentResult(
            success=True,
            content_type="text/html",
            title="Foo",
            parsed_content=parsed,
            raw_content="<html>...</html>",
        ),
    )

    resp = client.post("/api/tools/FETCH_DOCUMENT", json={"url": "https://example.org/x"})

    body = resp.json()
    assert body["contentType"] == "text/html"
    assert body["parsedContent"] == {
        "text": "Foo Bar",
        "metadata": {"title": "Foo"},
        "tables": [],
        "links": [{"text": "Bar", "url": "/x"}],
    }
    assert body["rawContent"] == "<html>...</html>"
    assert "error" not in body

"""
Tool registry: the typed operations offered to the front-end.

Each tool takes a validated input model and returns an output model. The
HTTP layer (``deputados.api``) and the CLI only go through this module.

Adding a new tool:
    1. Write a function ``(input_model) -> output_model`` below.
    2. Add one entry to TOOLS.
    3. It then appears in GET /api/tools and ``deputados tools``.
"""

import logging
from dataclasses import dataclass
from typing import Callable

import httpx

from .camara_client import CamaraApiClient
from .documents import fetch_document
from .exceptions import CamaraApiError, ToolError
from .ranking import rank_by_expenses
from .schemas import (
    CamelModel,
    DeputadoInput,
    DeputadosOutput,
    DespesasOutput,
    EmptyInput,
    EventosOutput,
    FetchDocumentInput,
    FetchDocumentResult,
    FrentesOutput,
    RankingInput,
    RankingResult,
)

logger = logging.getLogger(__name__)


def _fail(what: str, exc: Exception) -> ToolError:
    logger.error("Error fetching %s: %s", what, exc)
    return ToolError(f"Failed to fetch {what}: {str(exc) or 'Unknown error'}")


# Upstream errors a tool turns into ToolError; ValueError covers bad JSON
_UPSTREAM_ERRORS = (CamaraApiError, httpx.HTTPError, ValueError)


def listar_deputados(_: EmptyInput | None = None) -> DeputadosOutput:
    try:
        with CamaraApiClient() as client:
            return DeputadosOutput(deputados=client.list_deputados())
    except _UPSTREAM_ERRORS as exc:
        raise _fail("deputies", exc) from exc


def eventos_deputado(inp: DeputadoInput) -> EventosOutput:
    try:
        with CamaraApiClient() as client:
            return EventosOutput(eventos=client.list_eventos(inp.deputado_id))
    except _UPSTREAM_ERRORS as exc:
        raise _fail("deputy events", exc) from exc


def despesas_deputado(inp: DeputadoInput) -> DespesasOutput:
    try:
        with CamaraApiClient() as client:
            return DespesasOutput(despesas=client.list_despesas(inp.deputado_id))
    except _UPSTREAM_ERRORS as exc:
        raise _fail("deputy expenses", exc) from exc


def frentes_deputado(inp: DeputadoInput) -> FrentesOutput:
    try:
        with CamaraApiClient() as client:
            return FrentesOutput(frentes=client.list_frentes(inp.deputado_id))
    except _UPSTREAM_ERRORS as exc:
        raise _fail("deputy fronts", exc) from exc


def ranking_despesas(inp: RankingInput) -> RankingResult:
    try:
        return rank_by_expenses(inp.deputado_id_atual, inp.ano)
    except _UPSTREAM_ERRORS as exc:
        raise _fail("expenses ranking", exc) from exc


def fetch_document_tool(inp: FetchDocumentInput) -> FetchDocumentResult:
    return fetch_document(inp.url, inp.type)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Tool:
    id: str
    fn: Callable[[CamelModel], CamelModel]
    input_model: type[CamelModel]
    output_model: type[CamelModel]
    description: str


TOOLS: dict[str, Tool] = {
    t.id: t
    for t in [
        Tool(
            "LISTAR_DEPUTADOS", listar_deputados, EmptyInput, DeputadosOutput,
            "Get list of deputies from Brazilian Chamber",
        ),
        Tool(
            "EVENTOS_DEPUTADO", eventos_deputado, DeputadoInput, EventosOutput,
            "Get events for a specific deputy",
        ),
        Tool(
            "DESPESAS_DEPUTADO", despesas_deputado, DeputadoInput, DespesasOutput,
            "Get expenses for a specific deputy",
        ),
        Tool(
            "FRENTES_DEPUTADO", frentes_deputado, DeputadoInput, FrentesOutput,
            "Get parliamentary fronts for a specific deputy",
        ),
        Tool(
            "RANKING_DESPESAS", ranking_despesas, RankingInput, RankingResult,
            "Get ranking of deputies by total expenses with current deputy position",
        ),
        Tool(
            "FETCH_DOCUMENT", fetch_document_tool, FetchDocumentInput, FetchDocumentResult,
            "Fetch and parse document content from external URLs",
        ),
    ]
}


def call_tool(tool_id: str, payload: dict | None = None) -> CamelModel:
    """
    Validate ``payload`` against the tool's input model and run it.

    Raises ``KeyError`` for an unknown tool, ``pydantic.ValidationError``
    for a bad payload and ``ToolError`` when the upstream call fails.
    """
    tool = TOOLS[tool_id]
    inp = tool.input_model.model_validate(payload or {})
    return tool.fn(inp)

"""Request/response models of the tool facade.

Attribute names are snake_case; the wire format uses the camelCase names
the front-end already consumes (``deputadoId``, ``parsedContent``...).
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .config import DocumentKind


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Drop unset optional fields from the wire payload
    wire_exclude_none: ClassVar[bool] = False

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready camelCase dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=self.wire_exclude_none)


def _id_to_str(value: Any) -> Any:
    # The API hands ids out as integers; callers pass them back either way.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# ── Inputs ────────────────────────────────────────────────────────────────


class EmptyInput(CamelModel):
    pass


class DeputadoInput(CamelModel):
    deputado_id: str = Field(min_length=1, description="Deputy ID")

    @field_validator("deputado_id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return _id_to_str(value)


class RankingInput(CamelModel):
    deputado_id_atual: str = Field(description="Current deputy ID to highlight position")
    ano: int | None = Field(default=None, description="Year to filter expenses (current year by default)")

    @field_validator("deputado_id_atual", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return _id_to_str(value)


class FetchDocumentInput(CamelModel):
    url: str = Field(min_length=1, description="Document URL to fetch")
    type: DocumentKind = Field(default="document", description="Type of document")


# ── Outputs ───────────────────────────────────────────────────────────────


class DeputadosOutput(CamelModel):
    deputados: list[dict[str, Any]]


class EventosOutput(CamelModel):
    eventos: list[dict[str, Any]]


class DespesasOutput(CamelModel):
    despesas: list[dict[str, Any]]


class FrentesOutput(CamelModel):
    frentes: list[dict[str, Any]]


class RankingEntry(CamelModel):
    deputado_id: str
    nome_deputado: str
    sigla_partido: str | None = None
    total_despesas: float
    posicao: int
    is_deputado_atual: bool


class RankingResult(CamelModel):
    ranking: list[RankingEntry]
    posicao_deputado_atual: int
    total_deputados: int


class DocumentLink(CamelModel):
    text: str
    url: str


class ParsedContent(CamelModel):
    text: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
    tables: list[list[list[str]]] = Field(default_factory=list)
    links: list[DocumentLink] = Field(default_factory=list)


class FetchDocumentResult(CamelModel):
    success: bool
    content_type: str | None = None
    title: str | None = None
    parsed_content: ParsedContent | None = None
    raw_content: str | None = None
    error: str | None = None

    wire_exclude_none: ClassVar[bool] = True

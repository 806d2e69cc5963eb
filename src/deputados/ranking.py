"""
Rank deputies by total CEAP expenses for one year.

Endpoints used:
  GET /deputados?ordem=ASC&ordenarPor=nome        — roster (provider default page)
  GET /deputados/{id}/despesas?ano={year}         — expenses per deputy

Strategy:
  - Keep only the first RANKING_ROSTER_CAP deputies of the alphabetical
    roster. Deputies past the cap are never ranked, whatever they spent.
  - Fetch every deputy's expenses through a bounded thread pool
    (settings.ranking_max_workers) and sum valorLiquido per deputy.
  - A failed expense fetch counts as a total of 0; the deputy stays ranked.
  - Sort descending (stable), number positions from 1, return the top
    RANKING_TOP_N plus the highlighted deputy when it falls outside.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import polars as pl

from .camara_client import CamaraApiClient
from .config import RANKING_ROSTER_CAP, RANKING_TOP_N, settings
from .schemas import RankingEntry, RankingResult
from .transforms import flatten_deputado, flatten_despesa

logger = logging.getLogger(__name__)


def total_despesas(records: list[dict]) -> float:
    """Sum of net values; records without valorLiquido count as zero."""
    return sum(flatten_despesa(r)["valor_liquido"] for r in records if r)


def _fetch_total(client: CamaraApiClient, deputado_id: str, ano: int) -> float:
    # Any failure for one deputy, fetch or malformed payload, zeroes only that total
    try:
        despesas = client.list_despesas(
            deputado_id, ano, timeout=settings.ranking_fetch_timeout_s
        )
        return total_despesas(despesas)
    except Exception as exc:
        logger.warning("Error fetching expenses for deputy %s: %s", deputado_id, exc)
        return 0.0


def build_ranking(
    totals: list[tuple[dict, float]],
    deputado_id_atual: str,
    *,
    top_n: int = RANKING_TOP_N,
) -> RankingResult:
    """
    Sort ``(roster row, total)`` pairs and cut the top ``top_n`` window.

    Parameters
    ----------
    totals : list[tuple[dict, float]]
        Flattened roster rows (see ``flatten_deputado``) with their totals,
        in roster order. Equal totals keep this order.
    deputado_id_atual : str
        Deputy to flag; appended after the window when ranked below it.
    """
    ordered = sorted(totals, key=lambda pair: pair[1], reverse=True)
    ranked = [
        RankingEntry(
            deputado_id=row["deputado_id"],
            nome_deputado=row["nome"],
            sigla_partido=row["sigla_partido"],
            total_despesas=total,
            posicao=i,
            is_deputado_atual=row["deputado_id"] == deputado_id_atual,
        )
        for i, (row, total) in enumerate(ordered, 1)
    ]

    atual = next((e for e in ranked if e.is_deputado_atual), None)
    window = ranked[:top_n]
    if atual is not None and atual.posicao > top_n:
        window.append(atual)

    return RankingResult(
        ranking=window,
        posicao_deputado_atual=atual.posicao if atual is not None else 0,
        total_deputados=len(ranked),
    )


def rank_by_expenses(
    deputado_id_atual: str,
    ano: int | None = None,
    *,
    client: CamaraApiClient | None = None,
) -> RankingResult:
    """
    Expense ranking for ``ano`` (default: current year).

    Raises ``CamaraApiError`` / ``httpx.HTTPError`` when the roster itself
    cannot be fetched; per-deputy failures only zero that deputy's total.
    """
    if ano is None:
        ano = date.today().year

    own_client = client is None
    if own_client:
        client = CamaraApiClient()
    try:
        roster = [
            flatten_deputado(r)
            for r in client.list_deputados(itens=None)[:RANKING_ROSTER_CAP]
            if r
        ]
        logger.info(
            "Ranking %d deputies for %d (max %d concurrent requests)",
            len(roster), ano, settings.ranking_max_workers,
        )
        with ThreadPoolExecutor(max_workers=settings.ranking_max_workers) as pool:
            totals = list(
                pool.map(
                    lambda row: _fetch_total(client, row["deputado_id"], ano),
                    roster,
                )
            )
    finally:
        if own_client:
            client.close()

    return build_ranking(list(zip(roster, totals)), str(deputado_id_atual))


def ranking_frame(result: RankingResult) -> pl.DataFrame:
    """Ranking window as a DataFrame, one row per entry."""
    return pl.DataFrame(
        [e.model_dump() for e in result.ranking],
        schema={
            "deputado_id": pl.Utf8,
            "nome_deputado": pl.Utf8,
            "sigla_partido": pl.Utf8,
            "total_despesas": pl.Float64,
            "posicao": pl.Int64,
            "is_deputado_atual": pl.Boolean,
        },
    )

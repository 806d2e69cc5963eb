"""
Terminal front-end for the Chamber of Deputies tools.

Usage:
    deputados listar --uf SP --partido PT     # roster, filtered client-side
    deputados eventos 204554                  # one deputy's events
    deputados despesas 204554                 # expenses with pt-BR totals
    deputados frentes 204554                  # parliamentary fronts
    deputados ranking 204554 --ano 2024       # expense ranking
    deputados documento URL --tipo registro   # fetch and parse a document
    deputados tools                           # list the RPC tools
    deputados serve --port 8000               # run the HTTP API
"""

import argparse
import logging
import sys

import polars as pl

from .config import DOCUMENT_KINDS, settings
from .documents import display_title, fetch_document, should_embed
from .exceptions import ToolError
from .ranking import ranking_frame, total_despesas
from .schemas import DeputadoInput, RankingInput
from .tools import (
    TOOLS,
    despesas_deputado,
    eventos_deputado,
    frentes_deputado,
    listar_deputados,
    ranking_despesas,
)
from .transforms import flatten_deputado, flatten_despesa, flatten_evento, flatten_frente
from .utils import configure_utf8, format_brl, format_data


def _print_rows(rows: list[dict], columns: list[str]) -> None:
    if not rows:
        print("  (nenhum registro encontrado)")
        return
    df = pl.DataFrame(rows, infer_schema_length=None).select(columns)
    with pl.Config(tbl_rows=-1, tbl_cols=-1, fmt_str_lengths=60, tbl_hide_dataframe_shape=True):
        print(df)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_listar(args: argparse.Namespace) -> None:
    rows = [flatten_deputado(r) for r in listar_deputados().deputados if r]
    if args.uf:
        rows = [r for r in rows if (r["sigla_uf"] or "").upper() == args.uf.upper()]
    if args.partido:
        rows = [r for r in rows if (r["sigla_partido"] or "").upper() == args.partido.upper()]
    print(f"{len(rows)} deputados")
    _print_rows(rows, ["deputado_id", "nome", "sigla_partido", "sigla_uf", "email"])


def cmd_eventos(args: argparse.Namespace) -> None:
    eventos = eventos_deputado(DeputadoInput(deputado_id=args.deputado_id)).eventos
    rows = []
    for rec in eventos:
        ev = flatten_evento(rec)
        rows.append({
            "inicio":    format_data(ev["data_hora_inicio"], with_time=True),
            "tipo":      ev["descricao_tipo"],
            "descricao": ev["descricao"],
            "local":     ev["local_nome"] or ev["local_externo"],
            "orgaos":    ", ".join(ev["orgaos"]),
            "registro":  ev["url_registro"],
        })
    print(f"{len(rows)} eventos encontrados")
    _print_rows(rows, ["inicio", "tipo", "descricao", "local", "orgaos", "registro"])


def cmd_despesas(args: argparse.Namespace) -> None:
    despesas = despesas_deputado(DeputadoInput(deputado_id=args.deputado_id)).despesas
    rows = []
    for rec in despesas:
        d = flatten_despesa(rec)
        rows.append({
            "data":       format_data(d["data_documento"]),
            "tipo":       d["tipo_despesa"],
            "fornecedor": d["nome_fornecedor"],
            "liquido":    format_brl(d["valor_liquido"]),
            "glosa":      format_brl(d["valor_glosa"]) if d["valor_glosa"] else "",
            "documento":  d["url_documento"],
        })
    print(f"{len(rows)} despesas encontradas, total: {format_brl(total_despesas(despesas))}")
    _print_rows(rows, ["data", "tipo", "fornecedor", "liquido", "glosa", "documento"])


def cmd_frentes(args: argparse.Namespace) -> None:
    rows = [flatten_frente(r) for r in frentes_deputado(DeputadoInput(deputado_id=args.deputado_id)).frentes]
    print(f"{len(rows)} frentes parlamentares")
    _print_rows(rows, ["frente_id", "titulo", "id_legislatura", "uri"])


def cmd_ranking(args: argparse.Namespace) -> None:
    result = ranking_despesas(RankingInput(deputado_id_atual=args.deputado_id, ano=args.ano))
    df = ranking_frame(result).with_columns(
        pl.col("total_despesas").map_elements(format_brl, return_dtype=pl.Utf8).alias("total"),
        pl.when(pl.col("is_deputado_atual")).then(pl.lit("◀")).otherwise(pl.lit("")).alias("atual"),
    )
    with pl.Config(tbl_rows=-1, fmt_str_lengths=60, tbl_hide_dataframe_shape=True):
        print(df.select(["posicao", "nome_deputado", "sigla_partido", "total", "atual"]))
    if result.posicao_deputado_atual:
        print(f"Posição do deputado: {result.posicao_deputado_atual}º de {result.total_deputados}")
    else:
        print(f"Deputado {args.deputado_id} fora dos {result.total_deputados} considerados")


def cmd_documento(args: argparse.Namespace) -> None:
    if should_embed(args.url, args.tipo):
        print(f"{display_title(args.tipo)}: documento PDF, abra diretamente:\n  {args.url}")
        return

    result = fetch_document(args.url, args.tipo)
    if not result.success:
        print(f"ERROR: {result.error}")
        sys.exit(1)

    parsed = result.parsed_content
    print(display_title(args.tipo, result))
    print(f"  content-type: {result.content_type}")
    for key, value in parsed.metadata.items():
        print(f"  {key[:1].upper()}{key[1:]}: {value}")
    for i, table in enumerate(parsed.tables, 1):
        print(f"\nTabela {i} ({len(table)} linhas)")
        for row in table:
            print("  | " + " | ".join(row))
    if parsed.links:
        print(f"\nLinks ({len(parsed.links)})")
        for link in parsed.links:
            print(f"  {link.text or '(sem texto)'} → {link.url}")
    print(f"\n{parsed.text}")


def cmd_tools(args: argparse.Namespace) -> None:
    print("Available tools:\n")
    for tool in TOOLS.values():
        print(f"  {tool.id:<20} {tool.description}")


def cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run(
        "deputados.api:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deputados",
        description="Browse Chamber of Deputies data (dadosabertos.camara.leg.br).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("listar", help="List deputies (first page, by name).")
    p.add_argument("--uf", default=None, help="Filter by state, e.g. SP.")
    p.add_argument("--partido", default=None, help="Filter by party acronym.")
    p.set_defaults(func=cmd_listar)

    for name, func, help_text in [
        ("eventos", cmd_eventos, "Events of one deputy."),
        ("despesas", cmd_despesas, "CEAP expenses of one deputy."),
        ("frentes", cmd_frentes, "Parliamentary fronts of one deputy."),
    ]:
        p = sub.add_parser(name, help=help_text)
        p.add_argument("deputado_id", help="Deputy ID.")
        p.set_defaults(func=func)

    p = sub.add_parser("ranking", help="Expense ranking with one deputy highlighted.")
    p.add_argument("deputado_id", help="Deputy ID to highlight.")
    p.add_argument("--ano", type=int, default=None, help="Year (default: current year).")
    p.set_defaults(func=cmd_ranking)

    p = sub.add_parser("documento", help="Fetch and parse an external document.")
    p.add_argument("url", help="Document URL.")
    p.add_argument("--tipo", choices=DOCUMENT_KINDS, default="document", help="Document kind.")
    p.set_defaults(func=cmd_documento)

    p = sub.add_parser("tools", help="List available tools.")
    p.set_defaults(func=cmd_tools)

    p = sub.add_parser("serve", help="Run the HTTP API.")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_utf8()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except ToolError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
pt-BR display helpers shared by the CLI tables.

Usage:
    from deputados.utils import format_brl, format_data
    format_brl(1234.5)                       # "R$ 1.234,50"
    format_data("2024-03-05T10:00", True)    # "05/03/2024 10:00"
"""

import sys
from datetime import datetime


def configure_utf8() -> None:
    """Force UTF-8 stdout on Windows to avoid cp1252 encoding errors.

    Accented deputy names and "R$" amounts are printed as-is. Safe to call
    multiple times.
    """
    encoding = (sys.stdout.encoding or "").lower()
    if encoding != "utf-8" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")


def format_brl(value: float | int | None) -> str:
    """Format a number as Brazilian reais; None counts as zero."""
    amount = float(value or 0)
    sign = "-" if amount < 0 else ""
    # 1,234.56 → 1.234,56
    text = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"


def format_data(value: str | None, with_time: bool = False) -> str:
    """Format an ISO date/datetime string as dd/mm/aaaa [hh:mm].

    The API sends ``2024-03-05`` for receipts and ``2024-03-05T10:00`` for
    events; both parse with ``datetime.fromisoformat``.
    """
    if not value:
        return "Data não informada"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return "Data inválida"
    return parsed.strftime("%d/%m/%Y %H:%M" if with_time else "%d/%m/%Y")


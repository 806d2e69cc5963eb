"""
Fetch an external document linked by Chamber data and extract its content.

Endpoint shape: any URL (expense receipt, event registry, front page).

``fetch_document`` never raises: HTTP, timeout and transport failures come
back as ``FetchDocumentResult(success=False, error=...)``.
"""

import logging

import httpx

from .config import (
    DOCUMENT_ACCEPT,
    DOCUMENT_TIMEOUT_S,
    RAW_CONTENT_LIMIT,
    USER_AGENT,
)
from .extractor import default_title, extract_document
from .schemas import FetchDocumentResult

logger = logging.getLogger(__name__)

# Titles used when neither the document nor the caller provides one;
# one entry per DOCUMENT_KINDS value
KIND_TITLES: dict[str, str] = {
    "document": "Documento Parlamentar",
    "registro": "Registro Completo",
    "frente": "Detalhes da Frente",
}


def is_pdf_url(url: str) -> bool:
    return "pdf" in url.lower()


def should_embed(url: str, kind: str) -> bool:
    """PDF receipts are shown as-is instead of being fetched and parsed."""
    return kind == "document" and is_pdf_url(url)


def display_title(kind: str, result: FetchDocumentResult | None = None) -> str:
    if result is not None and result.title:
        return result.title
    return KIND_TITLES.get(kind, "Documento")


def cap_raw_content(content: str, limit: int = RAW_CONTENT_LIMIT) -> str:
    if len(content) > limit:
        return content[:limit] + "..."
    return content


def fetch_document(
    url: str,
    kind: str = "document",
    *,
    timeout: float = DOCUMENT_TIMEOUT_S,
) -> FetchDocumentResult:
    """
    GET ``url`` once and parse it according to its content type.

    Parameters
    ----------
    url : str
        Absolute document URL.
    kind : str
        ``document``, ``registro`` or ``frente``; XML receipts of kind
        ``document`` get ``tipoDocumento``/``valor`` metadata.
    timeout : float
        Seconds before the request is abandoned (default 15).
    """
    logger.info("Fetching document: %s", url)
    headers = {"User-Agent": USER_AGENT, "Accept": DOCUMENT_ACCEPT}
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True, headers=headers) as client:
            resp = client.get(url)
    except httpx.TimeoutException:
        logger.warning("Timeout fetching document %s", url)
        return FetchDocumentResult(
            success=False,
            error=f"Timeout after {timeout:g}s fetching {url}",
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Error fetching document %s: %s", url, exc)
        return FetchDocumentResult(
            success=False,
            error=str(exc) or "Unknown error occurred",
        )

    if not resp.is_success:
        return FetchDocumentResult(
            success=False,
            error=f"HTTP Error: {resp.status_code} {resp.reason_phrase}".rstrip(),
        )

    content_type = resp.headers.get("content-type", "")
    content = resp.text
    detected, parsed = extract_document(content, content_type, kind)

    return FetchDocumentResult(
        success=True,
        content_type=content_type,
        title=parsed.metadata.get("title") or default_title(detected),
        parsed_content=parsed,
        raw_content=cap_raw_content(content),
    )

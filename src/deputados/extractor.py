"""
Best-effort text extraction from HTML/XML documents linked by Chamber data
(expense receipts, event registries, parliamentary front pages).

The markup is tokenized with BeautifulSoup over Python's tolerant
``html.parser``; nothing here validates structure. Extraction never raises:
any failure while walking the tree falls back to plain tag stripping.

Output caps (``TEXT_LIMIT``) are part of the response contract.
"""

import logging
import re

from bs4 import BeautifulSoup

from .config import TEXT_LIMIT
from .schemas import DocumentLink, ParsedContent

logger = logging.getLogger(__name__)

KIND_XML = "xml"
KIND_HTML = "html"
KIND_TEXT = "text"

DEFAULT_TITLES = {
    KIND_XML: "XML Document",
    KIND_HTML: "HTML Document",
    KIND_TEXT: "Text Document",
}

# Elements dropped before reading text, tables and links
HTML_NOISE_TAGS = ["script", "style", "nav", "header", "footer"]
XML_NOISE_TAGS = ["script", "style"]

# Single character class, no nested quantifiers: linear on any input
_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")
# Whitespace plus a byte-order mark some servers prepend to XML bodies
_LEADING_JUNK = "\ufeff \t\r\n\f\v"


def detect_kind(content: str, content_type: str = "") -> str:
    """Classify a payload as xml, html or text from its header and body."""
    content_type = (content_type or "").lower()
    if "xml" in content_type or content.lstrip(_LEADING_JUNK).startswith("<?xml"):
        return KIND_XML
    if "html" in content_type:
        return KIND_HTML
    return KIND_TEXT


def default_title(kind: str) -> str:
    return DEFAULT_TITLES.get(kind, DEFAULT_TITLES[KIND_TEXT])


def strip_tags(markup: str, repl: str = "") -> str:
    return _TAG_RE.sub(repl, markup)


def collapse_whitespace(text: str, limit: int = TEXT_LIMIT) -> str:
    return _WS_RE.sub(" ", text).strip()[:limit]


def fallback_content(content: str) -> ParsedContent:
    """Tag-stripped, collapsed and capped text with nothing else."""
    return ParsedContent(text=collapse_whitespace(strip_tags(content, " ")))


# ── Tree walkers ──────────────────────────────────────────────────────────


def _soup(content: str, noise_tags: list[str]) -> BeautifulSoup:
    soup = BeautifulSoup(content, "html.parser")
    for tag in soup.find_all(noise_tags):
        tag.decompose()
    return soup


def _title(soup: BeautifulSoup) -> str:
    tag = soup.find("title")
    if tag is None:
        return ""
    # html.parser may hand <title> back as raw text, nested tags included
    return strip_tags(tag.get_text()).strip()


def _text(soup: BeautifulSoup) -> str:
    return collapse_whitespace(soup.get_text(" "))


def _tables(soup: BeautifulSoup) -> list[list[list[str]]]:
    tables: list[list[list[str]]] = []
    for table in soup.find_all("table"):
        rows: list[list[str]] = []
        for tr in table.find_all("tr"):
            # Rows of a nested table belong to that table only
            if tr.find_parent("table") is not table:
                continue
            row = [
                cell.get_text().strip()
                for cell in tr.find_all(["th", "td"], recursive=False)
            ]
            if row:
                rows.append(row)
        if rows:
            tables.append(rows)
    return tables


def _links(soup: BeautifulSoup) -> list[DocumentLink]:
    return [
        DocumentLink(url=a["href"], text=a.get_text().strip())
        for a in soup.find_all("a", href=True)
    ]


def _element_text(soup: BeautifulSoup, name: str) -> str | None:
    # html.parser lower-cases element names
    tag = soup.find(name.lower())
    return tag.get_text().strip() if tag is not None else None


# ── Public parsers ────────────────────────────────────────────────────────


def parse_xml(content: str, doc_kind: str = "document") -> ParsedContent:
    """Title, text and links of an XML payload; receipt fields for documents."""
    try:
        soup = _soup(content, XML_NOISE_TAGS)
        metadata: dict[str, str] = {}
        title = _title(soup)
        if title:
            metadata["title"] = title
        if doc_kind == "document":
            for field in ("tipoDocumento", "valor"):
                value = _element_text(soup, field)
                if value is not None:
                    metadata[field] = value
        return ParsedContent(
            text=_text(soup),
            metadata=metadata,
            links=_links(soup),
        )
    except Exception as exc:
        logger.warning("XML parsing error, falling back to text: %s", exc)
        return fallback_content(content)


def parse_html(content: str) -> ParsedContent:
    """Title, text, tables and links of an HTML page, without page chrome."""
    try:
        soup = _soup(content, HTML_NOISE_TAGS)
        metadata: dict[str, str] = {}
        title = _title(soup)
        if title:
            metadata["title"] = title
        return ParsedContent(
            text=_text(soup),
            metadata=metadata,
            tables=_tables(soup),
            links=_links(soup),
        )
    except Exception as exc:
        logger.warning("HTML parsing error, falling back to text: %s", exc)
        return fallback_content(content)


def parse_text(content: str) -> ParsedContent:
    return ParsedContent(text=collapse_whitespace(content))


def extract_document(
    content: str,
    content_type: str = "",
    doc_kind: str = "document",
) -> tuple[str, ParsedContent]:
    """
    Detect the payload kind and run the matching parser.

    Returns ``(kind, parsed)`` where kind is one of ``KIND_XML``,
    ``KIND_HTML`` or ``KIND_TEXT``.
    """
    kind = detect_kind(content, content_type)
    if kind == KIND_XML:
        parsed = parse_xml(content, doc_kind)
    elif kind == KIND_HTML:
        parsed = parse_html(content)
    else:
        parsed = parse_text(content)
    return kind, parsed

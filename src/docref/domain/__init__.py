"""Reference grammars, url resolution and the reference graph closure."""

from src.docref.domain.css_refs import extract_css_refs, logical_css_url, rewrite_css_refs
from src.docref.domain.entities import DocumentRef, EditPolicy, ReferenceMap
from src.docref.domain.graph import infect_refs
from src.docref.domain.html_refs import (
    extract_html_links,
    extract_html_refs,
    extract_html_style_refs,
    rewrite_html_links,
    rewrite_html_refs,
    rewrite_html_style_refs,
)
from src.docref.domain.mime import DEFAULT_MIME_TABLE, mime_for
from src.docref.domain.rules import HTML_LINK_RULES, HTML_RESOURCE_RULES, detect_document_kind
from src.docref.domain.uri import is_absolute, resolve_against

__all__ = [
    "DEFAULT_MIME_TABLE",
    "detect_document_kind",
    "DocumentRef",
    "EditPolicy",
    "extract_css_refs",
    "extract_html_links",
    "extract_html_refs",
    "extract_html_style_refs",
    "HTML_LINK_RULES",
    "HTML_RESOURCE_RULES",
    "infect_refs",
    "is_absolute",
    "logical_css_url",
    "mime_for",
    "ReferenceMap",
    "resolve_against",
    "rewrite_css_refs",
    "rewrite_html_links",
    "rewrite_html_refs",
    "rewrite_html_style_refs",
]

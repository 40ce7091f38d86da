"""Extract and rewrite resource references in HTML and CSS documents."""

from src.docref.domain import (
    DEFAULT_MIME_TABLE,
    extract_css_refs,
    extract_html_links,
    extract_html_refs,
    extract_html_style_refs,
    infect_refs,
    is_absolute,
    mime_for,
    resolve_against,
    rewrite_css_refs,
    rewrite_html_links,
    rewrite_html_refs,
    rewrite_html_style_refs,
)

__all__ = [
    "DEFAULT_MIME_TABLE",
    "extract_css_refs",
    "extract_html_links",
    "extract_html_refs",
    "extract_html_style_refs",
    "infect_refs",
    "is_absolute",
    "mime_for",
    "resolve_against",
    "rewrite_css_refs",
    "rewrite_html_links",
    "rewrite_html_refs",
    "rewrite_html_style_refs",
]

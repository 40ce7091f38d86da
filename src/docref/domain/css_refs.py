import re
from typing import Mapping

from src.docref.domain.entities import EditPolicy
from src.docref.domain.mime import DEFAULT_MIME_TABLE, mime_for
from src.docref.domain.uri import is_absolute, resolve_against
from src.docref.domain.rules import CSS_URL_PATTERN

_WHITESPACE = re.compile(r"\s+")


def logical_css_url(token: str) -> str:
    """Turn a matched ``url(...)`` token into the url it points at.

    The steps run in a fixed order: drop whitespace, unwrap ``url(``/``)``,
    drop one pair of matching quotes, then turn backslashes into slashes.
    """
    url = _WHITESPACE.sub("", token)[4:-1]
    if len(url) >= 2 and url[0] == url[-1] and url[0] in "'\"":
        url = url[1:-1]
    return url.replace("\\", "/")


def extract_css_refs(text: str, document_key: str | None = None) -> list[str]:
    refs: list[str] = []
    for match in CSS_URL_PATTERN.finditer(text):
        url = logical_css_url(match.group(0))
        if document_key and not is_absolute(url):
            url = resolve_against(document_key, url)
        if url:
            refs.append(url)
    return refs


def rewrite_css_refs(
    text: str,
    document_key: str | None,
    edit: EditPolicy,
    mime_table: Mapping[str, str] = DEFAULT_MIME_TABLE,
) -> str:
    def replace(match: re.Match[str]) -> str:
        url = logical_css_url(match.group(0))
        if not url:
            return match.group(0)
        absolute = is_absolute(url)
        if document_key and not absolute:
            url = resolve_against(document_key, url)
        new_url = edit(url, mime_for(url, mime_table), absolute)
        return f"url({new_url})" if new_url else match.group(0)

    return CSS_URL_PATTERN.sub(replace, text)

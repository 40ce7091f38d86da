from typing import Iterator, Mapping

from bs4 import BeautifulSoup, Tag
from bs4.element import Stylesheet

from src.docref.domain.css_refs import extract_css_refs, rewrite_css_refs
from src.docref.domain.entities import EditPolicy
from src.docref.domain.mime import DEFAULT_MIME_TABLE, mime_for
from src.docref.domain.rules import DEFAULT_HTML_PARSER, HTML_LINK_RULES, HTML_RESOURCE_RULES, RefRule
from src.docref.domain.uri import is_absolute, resolve_against

HtmlDocument = str | BeautifulSoup


def load_document(doc: HtmlDocument, parser: str = DEFAULT_HTML_PARSER) -> BeautifulSoup:
    if isinstance(doc, BeautifulSoup):
        return doc
    return BeautifulSoup(doc, parser)


def _iter_rule_values(soup: BeautifulSoup, rules: tuple[RefRule, ...]) -> Iterator[tuple[Tag, RefRule, str]]:
    # Rule order first, then document order within each rule.
    for rule in rules:
        for elem in soup.select(rule.selector):
            value = elem.get(rule.attr)
            if value is None:
                continue
            if isinstance(value, list):
                value = " ".join(value)
            yield elem, rule, value


def _extract(soup: BeautifulSoup, rules: tuple[RefRule, ...], document_key: str | None) -> list[str]:
    refs: list[str] = []
    for _, _, url in _iter_rule_values(soup, rules):
        if document_key and not is_absolute(url):
            url = resolve_against(document_key, url)
        if url:
            refs.append(url)
    return refs


def _rewrite(
    soup: BeautifulSoup,
    rules: tuple[RefRule, ...],
    document_key: str | None,
    edit: EditPolicy,
    mime_table: Mapping[str, str],
) -> str:
    for elem, rule, url in _iter_rule_values(soup, rules):
        absolute = is_absolute(url)
        if document_key and not absolute:
            url = resolve_against(document_key, url)
        new_url = edit(url, mime_for(url, mime_table), absolute)
        if new_url:
            elem[rule.attr] = new_url
    return str(soup)


def extract_html_refs(doc: HtmlDocument, document_key: str | None = None, parser: str = DEFAULT_HTML_PARSER) -> list[str]:
    """Resource urls (stylesheets, icons, images, scripts, frames) in rule order."""
    return _extract(load_document(doc, parser), HTML_RESOURCE_RULES, document_key)


def rewrite_html_refs(
    doc: HtmlDocument,
    document_key: str | None,
    edit: EditPolicy,
    parser: str = DEFAULT_HTML_PARSER,
    mime_table: Mapping[str, str] = DEFAULT_MIME_TABLE,
) -> str:
    """Rewrite resource urls through ``edit`` and return the re-serialized document.

    Serialization goes through the parser, so markup outside the touched
    attributes may be normalized.
    """
    return _rewrite(load_document(doc, parser), HTML_RESOURCE_RULES, document_key, edit, mime_table)


def extract_html_links(doc: HtmlDocument, document_key: str | None = None, parser: str = DEFAULT_HTML_PARSER) -> list[str]:
    return _extract(load_document(doc, parser), HTML_LINK_RULES, document_key)


def rewrite_html_links(
    doc: HtmlDocument,
    document_key: str | None,
    edit: EditPolicy,
    parser: str = DEFAULT_HTML_PARSER,
    mime_table: Mapping[str, str] = DEFAULT_MIME_TABLE,
) -> str:
    return _rewrite(load_document(doc, parser), HTML_LINK_RULES, document_key, edit, mime_table)


def extract_html_style_refs(doc: HtmlDocument, document_key: str | None = None, parser: str = DEFAULT_HTML_PARSER) -> list[str]:
    """``url(...)`` references inside ``<style>`` bodies, in document order."""
    refs: list[str] = []
    for style in load_document(doc, parser).find_all("style"):
        refs.extend(extract_css_refs(style.string or "", document_key))
    return refs


def rewrite_html_style_refs(
    doc: HtmlDocument,
    document_key: str | None,
    edit: EditPolicy,
    parser: str = DEFAULT_HTML_PARSER,
    mime_table: Mapping[str, str] = DEFAULT_MIME_TABLE,
) -> str:
    soup = load_document(doc, parser)
    for style in soup.find_all("style"):
        text = style.string or ""
        new_text = rewrite_css_refs(text, document_key, edit, mime_table)
        if new_text != text:
            style.string = Stylesheet(new_text)
    return str(soup)

import re
from dataclasses import dataclass
from typing import Literal, Pattern

DocumentKind = Literal["html", "css"]

DEFAULT_HTML_PARSER = "lxml"

# Matches url(...) tokens; the quote group must close with the same quote.
CSS_URL_PATTERN: Pattern[str] = re.compile(r"""url\s*\(\s*(['"]?)([^"'\)]*)\1\s*\)""", re.I)


@dataclass(frozen=True)
class RefRule:
    selector: str
    attr: str


# Elements that load an asset. Anchors are navigation, not dependencies, so they stay out.
HTML_RESOURCE_RULES: tuple[RefRule, ...] = (
    RefRule('link[rel="stylesheet"]', "href"),
    RefRule('link[rel="shortcut icon"]', "href"),
    RefRule("img", "src"),
    RefRule("script", "src"),
    RefRule("iframe", "src"),
)

HTML_LINK_RULES: tuple[RefRule, ...] = (RefRule("a", "href"),)

DOCUMENT_SUFFIXES: dict[str, DocumentKind] = {
    ".html": "html",
    ".htm": "html",
    ".xhtml": "html",
    ".css": "css",
}


def detect_document_kind(name: str) -> DocumentKind | None:
    lowered = name.lower()
    for suffix, kind in DOCUMENT_SUFFIXES.items():
        if lowered.endswith(suffix):
            return kind
    return None

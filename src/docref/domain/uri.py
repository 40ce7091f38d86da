import posixpath
import re

ABSOLUTE_URL_PATTERN = re.compile(r"^(([a-z0-9]+:)|(//)|#)", re.I)


def is_absolute(url: str | None) -> bool:
    # Empty urls count as absolute so callers never try to resolve them.
    return not url or ABSOLUTE_URL_PATTERN.match(url) is not None


def resolve_against(document_key: str, url: str | None) -> str:
    """Resolve ``url`` relative to the directory of ``document_key``.

    Root-relative urls (leading ``/``) are already resolved and come back as is.
    """
    if not url:
        return ""
    if url.startswith("/"):
        return url
    joined = posixpath.normpath(posixpath.join(posixpath.dirname(document_key), url))
    if url.endswith("/") and not joined.endswith("/"):
        joined += "/"
    return joined

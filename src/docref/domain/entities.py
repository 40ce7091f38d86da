from dataclasses import dataclass
from typing import Callable

from src.docref.domain.rules import DocumentKind

# (url, mime, is_absolute) -> replacement url, or a falsy value to leave the reference alone
EditPolicy = Callable[[str, str, bool], str | None]

ReferenceMap = dict[str, list[str]]


@dataclass(frozen=True)
class DocumentRef:
    key: str
    location: str
    kind: DocumentKind

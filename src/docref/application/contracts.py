from dataclasses import dataclass
from typing import Any

from src.docref.domain.entities import DocumentRef


@dataclass(frozen=True)
class LoadedDocument:
    ref: DocumentRef
    text: str


@dataclass(frozen=True)
class ReferenceReportRecord:
    root: str
    total_documents: int
    total_references: int
    absolute_count: int
    relative_count: int
    infected: bool
    references: dict[str, list[str]]
    links: dict[str, list[str]]
    duration_ms: int
    generated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root,
            "total_documents": self.total_documents,
            "total_references": self.total_references,
            "absolute_count": self.absolute_count,
            "relative_count": self.relative_count,
            "infected": self.infected,
            "references": {key: list(refs) for key, refs in self.references.items()},
            "links": {key: list(refs) for key, refs in self.links.items()},
            "duration_ms": self.duration_ms,
            "generated_at": self.generated_at,
        }

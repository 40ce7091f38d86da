from typing import Protocol, Sequence, runtime_checkable

from src.docref.application.contracts import LoadedDocument, ReferenceReportRecord
from src.docref.domain.entities import DocumentRef


@runtime_checkable
class DocumentSourcePort(Protocol):
    label: str

    def discover(self) -> Sequence[DocumentRef]: ...
    """Discover documents without reading their bodies."""

    def load(self, ref: DocumentRef) -> LoadedDocument: ...
    """Read one discovered document."""


@runtime_checkable
class DocumentSinkPort(Protocol):
    def write_document(self, ref: DocumentRef, text: str) -> None: ...
    """Persist one rewritten document."""

    def close(self) -> None: ...
    """Release resources."""


@runtime_checkable
class ReferenceReportSinkPort(Protocol):
    def write_report(self, report: ReferenceReportRecord) -> None: ...
    """Persist the aggregate reference report."""

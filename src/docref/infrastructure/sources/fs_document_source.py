from pathlib import Path

from src.config.logger_config import logger
from src.docref.application.contracts import LoadedDocument
from src.docref.application.ports import DocumentSourcePort
from src.docref.domain.entities import DocumentRef
from src.docref.domain.rules import detect_document_kind


class FileSystemDocumentSource(DocumentSourcePort):
    def __init__(self, input_dir: str | Path) -> None:
        self.input_dir = Path(input_dir)
        self.label = str(self.input_dir)

    def discover(self) -> list[DocumentRef]:
        refs: list[DocumentRef] = []
        for path in sorted(self.input_dir.rglob("*")):
            if not path.is_file():
                continue
            kind = detect_document_kind(path.name)
            if kind is None:
                continue
            # Keys are root-relative POSIX paths so they line up with resolved urls.
            key = path.relative_to(self.input_dir).as_posix()
            refs.append(DocumentRef(key=key, location=str(path), kind=kind))
        logger.info("Document source discovered {} documents from {}", len(refs), self.label)
        return refs

    def load(self, ref: DocumentRef) -> LoadedDocument:
        text = Path(ref.location).read_text(encoding="utf-8", errors="replace")
        return LoadedDocument(ref=ref, text=text)

from pathlib import Path

from src.config.logger_config import logger
from src.docref.application.ports import DocumentSinkPort
from src.docref.domain.entities import DocumentRef


class FileSystemDocumentSink(DocumentSinkPort):
    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._written = 0
        self._closed = False

    def write_document(self, ref: DocumentRef, text: str) -> None:
        if self._closed:
            raise RuntimeError("FileSystemDocumentSink is closed.")
        target = self.output_dir / ref.key
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        self._written += 1

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.info("Document sink closed: output_dir={}, written={}", str(self.output_dir), self._written)

from dataclasses import dataclass
from time import perf_counter

from tqdm import tqdm

from src.config.logger_config import logger
from src.docref.application.contracts import LoadedDocument
from src.docref.application.ports import DocumentSinkPort, DocumentSourcePort
from src.docref.domain.css_refs import rewrite_css_refs
from src.docref.domain.entities import EditPolicy
from src.docref.domain.html_refs import load_document, rewrite_html_links, rewrite_html_refs, rewrite_html_style_refs
from src.docref.domain.rules import DEFAULT_HTML_PARSER


@dataclass(frozen=True)
class RewriteConfig:
    rewrite_links: bool = False
    rewrite_styles: bool = True
    html_parser: str = DEFAULT_HTML_PARSER
    show_progress: bool = True


@dataclass(frozen=True)
class RewriteSummary:
    total_documents: int
    rewritten_count: int
    unchanged_count: int
    edited_references: int
    duration_ms: int


class DocumentRewritePipeline:
    def __init__(self, source: DocumentSourcePort, sink: DocumentSinkPort, edit: EditPolicy) -> None:
        self.source = source
        self.sink = sink
        self.edit = edit

    def run(self, config: RewriteConfig) -> RewriteSummary:
        started = perf_counter()
        refs = self.source.discover()
        logger.info(
            "Document rewrite started: source={}, discovered_documents={}, rewrite_links={}, rewrite_styles={}, html_parser={}",
            self.source.label,
            len(refs),
            config.rewrite_links,
            config.rewrite_styles,
            config.html_parser,
        )

        rewritten_count = 0
        edited_references = 0
        try:
            for ref in tqdm(
                refs,
                total=len(refs),
                desc="Document rewrite",
                unit="doc",
                leave=True,
                disable=not config.show_progress,
            ):
                loaded = self.source.load(ref)
                text, edits = self._rewrite(loaded, config)
                self.sink.write_document(ref, text)
                edited_references += edits
                if edits:
                    rewritten_count += 1
                logger.debug("Document rewritten: key={}, kind={}, edits={}", ref.key, ref.kind, edits)
        finally:
            self.sink.close()

        summary = RewriteSummary(
            total_documents=len(refs),
            rewritten_count=rewritten_count,
            unchanged_count=len(refs) - rewritten_count,
            edited_references=edited_references,
            duration_ms=int((perf_counter() - started) * 1000),
        )
        logger.info(
            "Document rewrite completed: source={}, duration_ms={}, total_documents={}, rewritten_count={}, edited_references={}",
            self.source.label,
            summary.duration_ms,
            summary.total_documents,
            summary.rewritten_count,
            summary.edited_references,
        )
        return summary

    def _rewrite(self, loaded: LoadedDocument, config: RewriteConfig) -> tuple[str, int]:
        edits = 0

        def counting_edit(url: str, mime: str, absolute: bool) -> str | None:
            nonlocal edits
            new_url = self.edit(url, mime, absolute)
            if new_url:
                edits += 1
            return new_url

        ref = loaded.ref
        if ref.kind == "css":
            return rewrite_css_refs(loaded.text, ref.key, counting_edit), edits
        if ref.kind != "html":
            raise ValueError(f"Unsupported document kind: {ref.kind}")

        soup = load_document(loaded.text, config.html_parser)
        text = rewrite_html_refs(soup, ref.key, counting_edit)
        if config.rewrite_styles:
            text = rewrite_html_style_refs(soup, ref.key, counting_edit)
        if config.rewrite_links:
            text = rewrite_html_links(soup, ref.key, counting_edit)
        return text, edits

from dataclasses import dataclass
from datetime import datetime, timezone
from time import perf_counter

from tqdm import tqdm

from src.config.logger_config import logger
from src.docref.application.contracts import LoadedDocument, ReferenceReportRecord
from src.docref.application.ports import DocumentSourcePort, ReferenceReportSinkPort
from src.docref.domain.css_refs import extract_css_refs
from src.docref.domain.entities import ReferenceMap
from src.docref.domain.graph import infect_refs
from src.docref.domain.html_refs import extract_html_links, extract_html_refs, extract_html_style_refs, load_document
from src.docref.domain.rules import DEFAULT_HTML_PARSER
from src.docref.domain.uri import is_absolute


@dataclass(frozen=True)
class ScanConfig:
    include_links: bool = False
    include_styles: bool = True
    infect: bool = True
    html_parser: str = DEFAULT_HTML_PARSER
    show_progress: bool = True


@dataclass(frozen=True)
class ScanSummary:
    total_documents: int
    total_references: int
    absolute_count: int
    relative_count: int
    references: ReferenceMap
    links: ReferenceMap
    duration_ms: int
    generated_at: str


class ReferenceScanPipeline:
    def __init__(self, source: DocumentSourcePort, report_sink: ReferenceReportSinkPort) -> None:
        self.source = source
        self.report_sink = report_sink

    def run(self, config: ScanConfig) -> ScanSummary:
        started = perf_counter()
        refs = self.source.discover()
        logger.info(
            "Reference scan started: source={}, discovered_documents={}, include_links={}, include_styles={}, infect={}, html_parser={}",
            self.source.label,
            len(refs),
            config.include_links,
            config.include_styles,
            config.infect,
            config.html_parser,
        )

        references: ReferenceMap = {}
        links: ReferenceMap = {}
        for ref in tqdm(
            refs,
            total=len(refs),
            desc="Reference scan",
            unit="doc",
            leave=True,
            disable=not config.show_progress,
        ):
            loaded = self.source.load(ref)
            doc_refs, doc_links = self._extract(loaded, config)
            references[ref.key] = doc_refs
            if config.include_links:
                links[ref.key] = doc_links
            logger.debug(
                "Document scanned: key={}, kind={}, references={}, links={}",
                ref.key,
                ref.kind,
                len(doc_refs),
                len(doc_links),
            )

        if config.infect:
            infect_refs(references)

        # Totals describe the lists as reported, after any closure.
        total_references = sum(len(urls) for urls in references.values())
        absolute_count = sum(1 for urls in references.values() for url in urls if is_absolute(url))

        duration_ms = int((perf_counter() - started) * 1000)
        summary = ScanSummary(
            total_documents=len(refs),
            total_references=total_references,
            absolute_count=absolute_count,
            relative_count=total_references - absolute_count,
            references=references,
            links=links,
            duration_ms=duration_ms,
            generated_at=datetime.now(timezone.utc).isoformat(),
        )
        self.report_sink.write_report(
            ReferenceReportRecord(
                root=self.source.label,
                total_documents=summary.total_documents,
                total_references=summary.total_references,
                absolute_count=summary.absolute_count,
                relative_count=summary.relative_count,
                infected=config.infect,
                references=summary.references,
                links=summary.links,
                duration_ms=summary.duration_ms,
                generated_at=summary.generated_at,
            )
        )
        logger.info(
            "Reference scan completed: source={}, duration_ms={}, total_documents={}, total_references={}, absolute_count={}, relative_count={}",
            self.source.label,
            summary.duration_ms,
            summary.total_documents,
            summary.total_references,
            summary.absolute_count,
            summary.relative_count,
        )
        return summary

    @staticmethod
    def _extract(loaded: LoadedDocument, config: ScanConfig) -> tuple[list[str], list[str]]:
        ref = loaded.ref
        if ref.kind == "css":
            return extract_css_refs(loaded.text, ref.key), []
        if ref.kind != "html":
            raise ValueError(f"Unsupported document kind: {ref.kind}")

        soup = load_document(loaded.text, config.html_parser)
        doc_refs = extract_html_refs(soup, ref.key)
        if config.include_styles:
            doc_refs.extend(extract_html_style_refs(soup, ref.key))
        doc_links = extract_html_links(soup, ref.key) if config.include_links else []
        return doc_refs, doc_links

from src.config.logger_config import logger
from src.config.settings import HTML_PARSER
from src.docref.application.policies import rebase_policy
from src.docref.application.use_cases.rewrite_documents import (
    RewriteDocumentsCommand,
    RewriteDocumentsResult,
    RewriteDocumentsUseCase,
)
from src.docref.application.use_cases.scan_documents import (
    ScanDocumentsCommand,
    ScanDocumentsResult,
    ScanDocumentsUseCase,
)
from src.docref.application.workflows.rewrite_pipeline import DocumentRewritePipeline
from src.docref.application.workflows.scan_pipeline import ReferenceScanPipeline
from src.docref.domain.entities import EditPolicy
from src.docref.infrastructure.sinks.fs_document_sink import FileSystemDocumentSink
from src.docref.infrastructure.sinks.report_sink import JsonReferenceReportSink
from src.docref.infrastructure.sources.fs_document_source import FileSystemDocumentSource


def run_scan(
    input_dir: str,
    report_path: str,
    include_links: bool = False,
    include_styles: bool = True,
    infect: bool = True,
    html_parser: str = HTML_PARSER,
    show_progress: bool = True,
) -> ScanDocumentsResult:
    pipeline = ReferenceScanPipeline(
        source=FileSystemDocumentSource(input_dir),
        report_sink=JsonReferenceReportSink(report_path),
    )
    return ScanDocumentsUseCase(pipeline=pipeline).execute(
        ScanDocumentsCommand(
            include_links=include_links,
            include_styles=include_styles,
            infect=infect,
            html_parser=html_parser,
            show_progress=show_progress,
        )
    )


def run_rewrite(
    input_dir: str,
    output_dir: str,
    edit: EditPolicy | None = None,
    rebase_url: str = "",
    rewrite_links: bool = False,
    rewrite_styles: bool = True,
    html_parser: str = HTML_PARSER,
    show_progress: bool = True,
) -> RewriteDocumentsResult:
    if edit is None:
        if not rebase_url:
            raise ValueError("run_rewrite needs an edit policy or a rebase_url")
        edit = rebase_policy(rebase_url)
        logger.info("Using rebase policy: rebase_url={}", rebase_url)

    pipeline = DocumentRewritePipeline(
        source=FileSystemDocumentSource(input_dir),
        sink=FileSystemDocumentSink(output_dir),
        edit=edit,
    )
    return RewriteDocumentsUseCase(pipeline=pipeline).execute(
        RewriteDocumentsCommand(
            rewrite_links=rewrite_links,
            rewrite_styles=rewrite_styles,
            html_parser=html_parser,
            show_progress=show_progress,
        )
    )

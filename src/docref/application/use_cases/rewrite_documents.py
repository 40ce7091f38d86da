from dataclasses import dataclass

from src.config.logger_config import logger
from src.docref.application.workflows.rewrite_pipeline import DocumentRewritePipeline, RewriteConfig, RewriteSummary
from src.docref.domain.rules import DEFAULT_HTML_PARSER


@dataclass(frozen=True)
class RewriteDocumentsCommand:
    rewrite_links: bool = False
    rewrite_styles: bool = True
    html_parser: str = DEFAULT_HTML_PARSER
    show_progress: bool = True


@dataclass(frozen=True)
class RewriteDocumentsResult:
    total_documents: int
    rewritten_count: int
    unchanged_count: int
    edited_references: int


class RewriteDocumentsUseCase:
    def __init__(self, pipeline: DocumentRewritePipeline) -> None:
        self.pipeline = pipeline

    def execute(self, command: RewriteDocumentsCommand) -> RewriteDocumentsResult:
        logger.info(
            "Rewrite use case started: rewrite_links={}, rewrite_styles={}",
            command.rewrite_links,
            command.rewrite_styles,
        )
        summary: RewriteSummary = self.pipeline.run(
            RewriteConfig(
                rewrite_links=command.rewrite_links,
                rewrite_styles=command.rewrite_styles,
                html_parser=command.html_parser,
                show_progress=command.show_progress,
            )
        )
        return RewriteDocumentsResult(
            total_documents=summary.total_documents,
            rewritten_count=summary.rewritten_count,
            unchanged_count=summary.unchanged_count,
            edited_references=summary.edited_references,
        )

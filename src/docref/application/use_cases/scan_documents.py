from dataclasses import dataclass

from src.config.logger_config import logger
from src.docref.application.workflows.scan_pipeline import ReferenceScanPipeline, ScanConfig, ScanSummary
from src.docref.domain.entities import ReferenceMap
from src.docref.domain.rules import DEFAULT_HTML_PARSER


@dataclass(frozen=True)
class ScanDocumentsCommand:
    include_links: bool = False
    include_styles: bool = True
    infect: bool = True
    html_parser: str = DEFAULT_HTML_PARSER
    show_progress: bool = True


@dataclass(frozen=True)
class ScanDocumentsResult:
    total_documents: int
    total_references: int
    absolute_count: int
    relative_count: int
    references: ReferenceMap
    links: ReferenceMap


class ScanDocumentsUseCase:
    def __init__(self, pipeline: ReferenceScanPipeline) -> None:
        self.pipeline = pipeline

    def execute(self, command: ScanDocumentsCommand) -> ScanDocumentsResult:
        logger.info(
            "Scan use case started: include_links={}, include_styles={}, infect={}",
            command.include_links,
            command.include_styles,
            command.infect,
        )
        summary: ScanSummary = self.pipeline.run(
            ScanConfig(
                include_links=command.include_links,
                include_styles=command.include_styles,
                infect=command.infect,
                html_parser=command.html_parser,
                show_progress=command.show_progress,
            )
        )
        return ScanDocumentsResult(
            total_documents=summary.total_documents,
            total_references=summary.total_references,
            absolute_count=summary.absolute_count,
            relative_count=summary.relative_count,
            references=summary.references,
            links=summary.links,
        )

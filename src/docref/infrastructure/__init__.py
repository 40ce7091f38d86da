"""Filesystem adapters for document discovery, rewriting and reporting."""

from src.docref.infrastructure.sinks.fs_document_sink import FileSystemDocumentSink
from src.docref.infrastructure.sinks.report_sink import JsonReferenceReportSink
from src.docref.infrastructure.sources.fs_document_source import FileSystemDocumentSource

__all__ = ["FileSystemDocumentSink", "FileSystemDocumentSource", "JsonReferenceReportSink"]

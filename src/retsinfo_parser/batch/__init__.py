"""Batch runner exports."""

from retsinfo_parser.batch.runner import (
    document_json_path,
    fetch_documents,
    job_record,
    write_document_json,
    write_job_report,
)

__all__ = [
    "document_json_path",
    "fetch_documents",
    "job_record",
    "write_document_json",
    "write_job_report",
]

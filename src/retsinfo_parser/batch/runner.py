"""Batch fetch + parse over many documents with per-document failure reporting."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Iterable, Optional

from retsinfo_parser.api import JobResult, fetch_and_parse
from retsinfo_parser.models import to_dict
from retsinfo_parser.portal.client import PortalClient

logger = logging.getLogger(__name__)


def document_json_path(out_dir: Path, document_id: int) -> Path:
    return out_dir / "json" / f"{document_id}.json"


def write_document_json(job: JobResult, out_dir: Path) -> Path:
    path = document_json_path(out_dir, job.document_id)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(job.parse.document), f, ensure_ascii=False, indent=2)
    return path


def job_record(job: JobResult) -> dict:
    """One JSONL report line for a job."""
    record: dict = {"document_id": job.document_id, "ok": job.ok, "error": job.error}
    if job.parse is not None:
        record["diagnostics"] = len(job.parse.report.diagnostics)
        record["counts_parsed"] = job.parse.report.counts_parsed
        record["valid"] = job.parse.report.is_valid()
    return record


def fetch_documents(
    document_ids: Iterable[int],
    client: Optional[PortalClient] = None,
    out_dir: Optional[Path] = None,
    delay: float = 0.0,
) -> list[JobResult]:
    """
    Fetch and parse each document in turn.

    A failing document is recorded in its JobResult and never stops the batch.
    When out_dir is given, every parsed document is written to
    `<out_dir>/json/<id>.json`.
    """
    client = client or PortalClient()
    jobs: list[JobResult] = []
    for i, document_id in enumerate(document_ids):
        if i and delay > 0:
            time.sleep(delay)
        job = fetch_and_parse(document_id, client=client)
        if job.ok:
            logger.info("Parsed document %s", document_id)
            if out_dir is not None:
                write_document_json(job, out_dir)
        else:
            logger.error("Document %s failed: %s", document_id, job.error)
        jobs.append(job)
    return jobs


def write_job_report(jobs: Iterable[JobResult], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for job in jobs:
            f.write(json.dumps(job_record(job), ensure_ascii=False) + "\n")

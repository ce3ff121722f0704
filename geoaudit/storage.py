"""In-memory audit report store, keyed by sequential id."""

import itertools
from datetime import datetime, timezone

from .models import AuditReport


class ReportStore:
    def __init__(self):
        self._reports: dict[int, AuditReport] = {}
        self._ids = itertools.count(1)

    def create(self, report: AuditReport) -> AuditReport:
        saved = report.model_copy(update={
            "id": next(self._ids),
            "created_at": datetime.now(timezone.utc),
        })
        self._reports[saved.id] = saved
        return saved

    def get(self, report_id: int) -> AuditReport | None:
        return self._reports.get(report_id)

    def list_all(self) -> list[AuditReport]:
        return list(self._reports.values())

    def list_by_url(self, url: str) -> list[AuditReport]:
        return [r for r in self._reports.values() if r.url == url]

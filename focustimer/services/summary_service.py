"""
Summary Service - Review of stored cycles.

Architecture Decision: Template Pattern
Report text comes from a Jinja2 template so the layout can change without
touching the aggregation code.
"""

import datetime
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader
from pydantic import BaseModel, Field

from focustimer.domain.models import CycleKind, CycleRecord
from focustimer.i18n import tr
from focustimer.infra.repository import CycleRepository
from focustimer.utils import get_resource_path


class CycleSummary(BaseModel):
    """Aggregated figures for a set of cycles"""

    day: Optional[datetime.date] = None
    completed_work_intervals: int = 0
    interrupted_work_intervals: int = 0
    focus_seconds: float = 0.0
    break_seconds: float = 0.0
    app_usage: List[Tuple[str, int]] = Field(default_factory=list)  # (app, samples), most used first


class SummaryService:
    """
    Builds summaries over cycles stored in a CycleRepository.
    """

    def __init__(self, repository: CycleRepository, template_dir: Optional[Path] = None):
        self.repository = repository
        if template_dir is None:
            template_dir = get_resource_path("resources/templates")
        self.template_dir = template_dir

        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True
        )
        self.env.filters['format_duration'] = self._format_duration
        self.env.globals['tr'] = tr

    @staticmethod
    def _format_duration(seconds: float) -> str:
        """Format seconds as HH:MM:SS"""
        hours, remainder = divmod(int(seconds), 3600)
        minutes, seconds = divmod(remainder, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    def summarize(self, records: Iterable[CycleRecord],
                  day: Optional[datetime.date] = None) -> CycleSummary:
        """Aggregate finalized records. Open records are ignored."""
        summary = CycleSummary(day=day)
        apps = Counter()

        for record in records:
            if record.actual_duration is None:
                continue

            if record.kind == CycleKind.WORK:
                summary.focus_seconds += record.actual_duration
                if record.was_completed:
                    summary.completed_work_intervals += 1
                else:
                    summary.interrupted_work_intervals += 1
                apps.update(sample.app_name for sample in record.app_activities)
            else:
                summary.break_seconds += record.actual_duration

        summary.app_usage = apps.most_common()
        return summary

    def summarize_day(self, day: datetime.date) -> CycleSummary:
        """Summary of all cycles that started on the given local calendar day"""
        records = [r for r in self.repository.list_all()
                   if r.start_time.astimezone().date() == day]
        return self.summarize(records, day=day)

    def render(self, summary: CycleSummary, template_name: str = "daily_summary.txt",
               top_apps: int = 5) -> str:
        """Render a summary as text"""
        template = self.env.get_template(template_name)
        return template.render(summary=summary, top_apps=summary.app_usage[:top_apps])

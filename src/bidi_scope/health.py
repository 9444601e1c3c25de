"""Health check mirroring the editor plugin's ``:checkhealth`` report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Tuple

from bidi_scope import __version__
from bidi_scope.runtime import telemetry
from bidi_scope.text import find_runs, to_visual

Status = Literal["ok", "warn", "error"]

SAMPLE_LINE = "Hello سلام دنیا World"
SAMPLE_VISUAL = "دنیا سلام"


@dataclass(slots=True)
class HealthReport:
    title: str = "bidi-scope"
    entries: List[Tuple[Status, str]] = field(default_factory=list)

    def add(self, status: Status, message: str) -> None:
        self.entries.append((status, message))

    @property
    def ok(self) -> bool:
        return all(status != "error" for status, _ in self.entries)

    def lines(self) -> List[str]:
        return [f"{self.title}"] + [f"- {status.upper()} {msg}" for status, msg in self.entries]


def _check_pipeline(report: HealthReport) -> None:
    runs = find_runs(SAMPLE_LINE)
    if len(runs) != 1:
        report.add("error", f"run finder returned {len(runs)} runs for the sample line")
        return
    visual = to_visual(runs[0].text)
    if visual != SAMPLE_VISUAL:
        report.add("error", f"visual order mismatch: {visual!r}")
        return
    report.add("ok", "text pipeline self-test passed")


def _check_telemetry(report: HealthReport) -> None:
    try:
        telemetry.get_logger("bidi_scope.health")
    except Exception as exc:  # telelog surfaces config problems as plain exceptions
        report.add("warn", f"telemetry logger unavailable: {exc}")
        return
    report.add("ok", "telemetry logger ready")


def check() -> HealthReport:
    report = HealthReport()
    report.add("ok", f"bidi-scope {__version__} loaded")
    _check_pipeline(report)
    _check_telemetry(report)
    telemetry.record_event(
        "health.check", data={"ok": report.ok, "entries": len(report.entries)}
    )
    return report


__all__ = ["HealthReport", "check"]

from loadgrid.reporting.api import build_conflict_report_context, export_conflict_report, find_resource
from loadgrid.reporting.contexts import ConflictReportContext

__all__ = [
    "ConflictReportContext",
    "build_conflict_report_context",
    "export_conflict_report",
    "find_resource",
]

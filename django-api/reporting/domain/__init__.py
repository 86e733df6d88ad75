from reporting.domain.reports import EXPORT_HEADERS, EventExport, EventSummary, ExportRow

__all__ = [
    "EXPORT_HEADERS",
    "EventExport",
    "EventSummary",
    "ExportRow",
]

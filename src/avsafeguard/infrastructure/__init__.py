"""Infrastructure layer - output formatting and export."""

from .formatters import (
    JsonExporter,
    ReportFormatter,
    SummaryFormatter,
    architectural_provisions,
)

__all__ = [
    "JsonExporter",
    "ReportFormatter",
    "SummaryFormatter",
    "architectural_provisions",
]

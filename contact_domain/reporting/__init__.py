"""Reporting — потребители ContactMethod с исчерпывающим разбором вариантов."""

from .report import (
    ContactReport,
    build_contact_report,
    count_methods_by_kind,
    describe_contact_method,
    is_confirmed,
)

__all__ = [
    "ContactReport",
    "build_contact_report",
    "count_methods_by_kind",
    "describe_contact_method",
    "is_confirmed",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Normalize raw engine diagnostics into canonical `CompilationIssue` records.

`normalize_diagnostic` never raises: a malformed or partially populated raw
diagnostic falls back to the sentinel location and empty strings for whatever
is missing, so one bad record can't abort rendering of the whole batch.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from fschost.core.diagnostics import (
	CompilationIssue,
	CompilationIssueType,
	LongDiagnostic,
)
from fschost.core.location import EMPTY_LOCATION, Location

CODE_PREFIX = "FS"


def _issue_type(raw: Any) -> CompilationIssueType:
	# A raw diagnostic without a severity flag is treated as an error.
	if getattr(raw, "is_error", True):
		return CompilationIssueType.ERROR
	return CompilationIssueType.WARNING


def _as_int(value: Any) -> int:
	try:
		return int(value)
	except (TypeError, ValueError, OverflowError):
		return 0


def _as_text(value: Any) -> str:
	if value is None:
		return ""
	return value if isinstance(value, str) else str(value)


def format_code(error_number: Any) -> str:
	"""
	Fixed-width catalog tag, e.g. 39 -> "FS0039".

	Errors and warnings share one numbering space. Returns "" when the number is
	missing or not a finite integer.
	"""
	try:
		return f"{CODE_PREFIX}{int(error_number):04d}"
	except (TypeError, ValueError, OverflowError):
		return ""


def _location_and_file(loc: Any) -> Tuple[Location, str]:
	# An engine location without an emptiness marker is judged by its range.
	if loc is None or getattr(loc, "is_empty", False):
		return EMPTY_LOCATION, ""
	rng = getattr(loc, "range", None)
	location = Location(
		start_line=_as_int(getattr(rng, "start_line", 0)),
		start_column=_as_int(getattr(rng, "start_column", 0)),
		end_line=_as_int(getattr(rng, "end_line", 0)),
		end_column=_as_int(getattr(rng, "end_column", 0)),
	)
	if location.is_empty:
		return EMPTY_LOCATION, ""
	return location, _as_text(getattr(loc, "file", ""))


def _from_long(raw: LongDiagnostic) -> CompilationIssue:
	details = getattr(raw, "details", None)
	canonical = getattr(details, "canonical", None)
	location, file = _location_and_file(getattr(details, "location", None))
	return CompilationIssue(
		text=_as_text(getattr(details, "message", "")),
		issue_type=_issue_type(raw),
		location=location,
		subcategory=_as_text(getattr(canonical, "subcategory", "")),
		code=format_code(getattr(canonical, "error_number", None)),
		file=file,
	)


def normalize_diagnostic(raw: Any) -> CompilationIssue:
	"""Convert one Short/Long raw diagnostic into a CompilationIssue."""
	if isinstance(raw, LongDiagnostic):
		return _from_long(raw)
	# Short shape (and anything unrecognized): text only, no position/code.
	return CompilationIssue(
		text=_as_text(getattr(raw, "text", "")),
		issue_type=_issue_type(raw),
	)


def normalize_all(raws: Iterable[Any]) -> List[CompilationIssue]:
	"""Normalize a batch, preserving order and duplicates."""
	return [normalize_diagnostic(raw) for raw in raws]


__all__ = ["CODE_PREFIX", "format_code", "normalize_diagnostic", "normalize_all"]

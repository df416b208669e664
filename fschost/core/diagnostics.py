# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic shapes seen by the hosted compiler front end.

Two families live here:

* raw engine diagnostics, as the in-process compiler emits them into the
  collecting sink. They come in a `Short` shape (error flag + text) and a
  `Long` shape (error flag + location/file + canonical number/subcategory).
* the canonical `CompilationIssue` record that both raw shapes are normalized
  into before rendering (see `fschost.normalize`).

Everything is created fresh per compile call and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .location import EMPTY_LOCATION, Location


@dataclass(frozen=True)
class Range:
	"""Line/column range as reported by the engine."""

	start_line: int = 0
	start_column: int = 0
	end_line: int = 0
	end_column: int = 0


@dataclass(frozen=True)
class DiagnosticLocation:
	"""Engine-side location: a range plus the file it belongs to."""

	range: Range = field(default_factory=Range)
	file: str = ""

	@property
	def is_empty(self) -> bool:
		# An all-zero range carries no usable position even if a file is known.
		return self.range == Range()


@dataclass(frozen=True)
class CanonicalInformation:
	"""Catalog numbering shared by errors and warnings."""

	error_number: int
	subcategory: str = ""


@dataclass(frozen=True)
class DiagnosticDetails:
	message: str
	canonical: CanonicalInformation
	location: Optional[DiagnosticLocation] = None


@dataclass(frozen=True)
class ShortDiagnostic:
	"""Minimal engine diagnostic: only severity and text."""

	is_error: bool
	text: str


@dataclass(frozen=True)
class LongDiagnostic:
	"""Full engine diagnostic with location and catalog metadata."""

	is_error: bool
	details: DiagnosticDetails


RawDiagnostic = Union[ShortDiagnostic, LongDiagnostic]


class CompilationIssueType(Enum):
	WARNING = "warning"
	ERROR = "error"


@dataclass(frozen=True)
class CompilationIssue:
	"""
	Canonical diagnostic record.

	Identity is purely by value; duplicates are kept in emission order. `code`
	is the fixed-width catalog tag (e.g. "FS0039") or "" when the raw
	diagnostic had none.
	"""

	text: str
	issue_type: CompilationIssueType
	location: Location = EMPTY_LOCATION
	subcategory: str = ""
	code: str = ""
	file: str = ""

	@property
	def is_error(self) -> bool:
		return self.issue_type is CompilationIssueType.ERROR


@dataclass
class CompilationOutput:
	"""Raw diagnostics harvested from one in-process compile call."""

	errors: List[RawDiagnostic] = field(default_factory=list)
	warnings: List[RawDiagnostic] = field(default_factory=list)

	def ordered(self) -> List[RawDiagnostic]:
		"""All diagnostics, errors first, each group in emission order."""
		return [*self.errors, *self.warnings]


__all__ = [
	"Range",
	"DiagnosticLocation",
	"CanonicalInformation",
	"DiagnosticDetails",
	"ShortDiagnostic",
	"LongDiagnostic",
	"RawDiagnostic",
	"CompilationIssueType",
	"CompilationIssue",
	"CompilationOutput",
]

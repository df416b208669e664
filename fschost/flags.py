# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Compatibility-flag scanning for hosted compiler invocations.

The flags only change how diagnostics are rendered; they are never consumed or
removed from argv (the engine sees them too). Recognized flags are kept in a
small declarative table so adding a rendering switch is a one-line change.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

PROGRAM_PLACEHOLDER = "fsc"


@dataclass(frozen=True)
class CompatFlag:
	"""A rendering switch accepted as `/<name>` or `--<name>` (any case)."""

	attr: str
	switch: str
	pattern: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

	def __post_init__(self) -> None:
		object.__setattr__(self, "pattern", re.compile(rf"(?:/|--){re.escape(self.switch)}", re.IGNORECASE))

	def matches(self, arg: str) -> bool:
		return self.pattern.fullmatch(arg) is not None


COMPAT_FLAGS = (
	CompatFlag(attr="error_ranges", switch="test:ErrorRanges"),
	CompatFlag(attr="vs_errors", switch="vserrors"),
)


@dataclass(frozen=True)
class FormatFlags:
	"""Rendering switches found in argv."""

	error_ranges: bool = False
	vs_errors: bool = False


def scan_flags(argv: Iterable[str]) -> FormatFlags:
	"""Return which compatibility flags appear anywhere in `argv`."""
	args = list(argv)
	found = {flag.attr: any(flag.matches(arg) for arg in args) for flag in COMPAT_FLAGS}
	return FormatFlags(**found)


@functools.lru_cache(maxsize=None)
def program_path_regex(program_name: str) -> "re.Pattern[str]":
	return re.compile(rf"{re.escape(program_name)}(?:\.exe)?$", re.IGNORECASE)


def looks_like_program_path(arg: str, program_name: str = PROGRAM_PLACEHOLDER) -> bool:
	"""True when `arg` ends with `program_name` or `program_name.exe` (any case)."""
	return program_path_regex(program_name).search(arg) is not None


def ensure_program_arg(
	argv: Optional[Sequence[str]],
	program_name: str = PROGRAM_PLACEHOLDER,
) -> List[str]:
	"""
	Make sure argv[0] is a program path, as the engine discards argv[0].

	A missing/empty argv becomes `[program_name]`; an argv whose first entry does
	not look like the compiler gets `program_name` prepended.
	"""
	if not argv:
		return [program_name]
	args = list(argv)
	if not looks_like_program_path(args[0], program_name):
		return [program_name, *args]
	return args


__all__ = [
	"PROGRAM_PLACEHOLDER",
	"CompatFlag",
	"COMPAT_FLAGS",
	"FormatFlags",
	"scan_flags",
	"program_path_regex",
	"looks_like_program_path",
	"ensure_program_arg",
]

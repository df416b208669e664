# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Test helpers: a scripted stand-in for the external compiler engine.

`ScriptedEngine` follows the engine contract from `fschost.engine` and replays
a fixed behavior on every call: console writes, emitted diagnostics, then an
exit request or an exception. The diagnostic builders keep test bodies short.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from fschost.core.diagnostics import (
	CanonicalInformation,
	DiagnosticDetails,
	DiagnosticLocation,
	LongDiagnostic,
	Range,
	RawDiagnostic,
	ShortDiagnostic,
)
from fschost.engine import DiagnosticsSink, Exiter, StopProcessing


def short_diag(text: str, is_error: bool = True) -> ShortDiagnostic:
	return ShortDiagnostic(is_error=is_error, text=text)


def long_diag(
	number: int,
	message: str,
	*,
	is_error: bool = True,
	subcategory: str = "typecheck",
	file: str = "test.fs",
	span: Optional[Tuple[int, int, int, int]] = (3, 5, 3, 9),
) -> LongDiagnostic:
	"""Build a Long diagnostic; `span=None` means no location."""
	location = None
	if span is not None:
		location = DiagnosticLocation(range=Range(*span), file=file)
	details = DiagnosticDetails(
		message=message,
		canonical=CanonicalInformation(error_number=number, subcategory=subcategory),
		location=location,
	)
	return LongDiagnostic(is_error=is_error, details=details)


@dataclass(frozen=True)
class EngineCall:
	argv: List[str]
	reference_resolver: Any
	propagate_nested_exit: bool


class ScriptedEngine:
	"""
	Engine replaying one script per call.

	Order of effects: write `stdout`/`stderr`, emit `diagnostics`, raise `raises`
	if set, then call `exiter.exit(exit_code)` if `exit_code` is set. With
	`swallow_stop` the engine catches its own StopProcessing and returns
	normally after exiting.
	"""

	def __init__(
		self,
		*,
		stdout: str = "",
		stderr: str = "",
		diagnostics: Sequence[RawDiagnostic] = (),
		exit_code: Optional[int] = None,
		raises: Optional[BaseException] = None,
		swallow_stop: bool = False,
	) -> None:
		self.stdout = stdout
		self.stderr = stderr
		self.diagnostics = list(diagnostics)
		self.exit_code = exit_code
		self.raises = raises
		self.swallow_stop = swallow_stop
		self.calls: List[EngineCall] = []

	def __call__(
		self,
		argv: Sequence[str],
		reference_resolver: Any,
		propagate_nested_exit: bool,
		exiter: Exiter,
		sink: DiagnosticsSink,
	) -> None:
		self.calls.append(EngineCall(list(argv), reference_resolver, propagate_nested_exit))
		if self.stdout:
			sys.stdout.write(self.stdout)
		if self.stderr:
			sys.stderr.write(self.stderr)
		for diag in self.diagnostics:
			sink.emit(diag)
		if self.raises is not None:
			raise self.raises
		if self.exit_code is None:
			return
		if self.swallow_stop:
			try:
				exiter.exit(self.exit_code)
			except StopProcessing:
				return
		exiter.exit(self.exit_code)


__all__ = ["short_diag", "long_diag", "EngineCall", "ScriptedEngine"]

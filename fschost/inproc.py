# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
In-process invocation adapter.

Runs one engine call and turns it into `(ok, CompilationOutput)`. The engine
expects to terminate the host process when it finishes; here every way it can
finish is mapped onto a small closed set of outcomes:

  Stopped(code)    the exit capability (or `sys.exit`) unwound the engine
  ReportedFailure  the engine raised `ReportedError` (bare or wrapped once)
  Returned(code)   the engine returned normally; code is whatever the exit
                   capability last recorded (0 if never called)

`resolve_exit_code` is the single rule turning an outcome into an exit code.
Any other exception is not an outcome and propagates to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union

from fschost.core.diagnostics import CompilationOutput
from fschost.engine import (
	CollectingSink,
	CompileEngine,
	InProcExiter,
	StopProcessing,
	is_reported_error,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stopped:
	code: int


@dataclass(frozen=True)
class ReportedFailure:
	pass


@dataclass(frozen=True)
class Returned:
	code: int


TerminationOutcome = Union[Stopped, ReportedFailure, Returned]


def resolve_exit_code(outcome: TerminationOutcome) -> int:
	"""Map a termination outcome to the process-style exit code."""
	if isinstance(outcome, ReportedFailure):
		return 1
	if isinstance(outcome, (Stopped, Returned)):
		return outcome.code
	raise TypeError(f"unknown termination outcome: {outcome!r}")


def _system_exit_code(exc: SystemExit) -> int:
	# Same convention as the interpreter: None -> 0, int -> itself, else 1.
	if exc.code is None:
		return 0
	if isinstance(exc.code, int):
		return exc.code
	return 1


class InProcCompiler:
	"""Drive a compile engine in-process without letting it exit the host."""

	def __init__(self, engine: CompileEngine, reference_resolver: Any = None) -> None:
		self.engine = engine
		self.reference_resolver = reference_resolver

	def run(self, argv: Sequence[str]) -> Tuple[TerminationOutcome, CompilationOutput]:
		"""Invoke the engine once and report how it terminated."""
		sink = CollectingSink()
		exiter = InProcExiter()
		outcome: TerminationOutcome
		try:
			self.engine(list(argv), self.reference_resolver, False, exiter, sink)
			outcome = Returned(exiter.exit_code)
		except StopProcessing:
			outcome = Stopped(exiter.exit_code)
		except SystemExit as exc:
			outcome = Stopped(_system_exit_code(exc))
		except Exception as exc:
			if not is_reported_error(exc):
				raise
			outcome = ReportedFailure()
		logger.debug("engine terminated: %r", outcome)
		output = CompilationOutput(errors=sink.captured_errors, warnings=sink.captured_warnings)
		return outcome, output

	def compile(self, argv: Sequence[str]) -> Tuple[bool, CompilationOutput]:
		"""Return `(ok, output)`; ok is True iff the resolved exit code is 0."""
		outcome, output = self.run(argv)
		return resolve_exit_code(outcome) == 0, output


__all__ = [
	"Stopped",
	"ReportedFailure",
	"Returned",
	"TerminationOutcome",
	"resolve_exit_code",
	"InProcCompiler",
]

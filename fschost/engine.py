# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Contract between the hosted front end and the in-process compiler engine.

The engine itself is external. This module pins down the narrow surface the
front end relies on:

  engine(argv, reference_resolver, propagate_nested_exit, exiter, sink) -> None

* `exiter` is the only way the engine may "exit": `exiter.exit(code)` records
  the code and raises `StopProcessing` instead of ending the process.
* `sink` collects raw diagnostics (`ShortDiagnostic` / `LongDiagnostic`) as the
  engine emits them; nothing is printed.
* `ReportedError` (possibly wrapped once in `WrappedError`) means "a failure was
  already reported as a diagnostic".

It also knows how to resolve an engine from a `module:attr` reference, which is
how the CLI is configured.
"""

from __future__ import annotations

import importlib
from typing import Any, Callable, List, Optional, Protocol, Sequence

from fschost.core.diagnostics import RawDiagnostic


class StopProcessing(Exception):
	"""Raised by the exit capability to unwind the engine without exiting."""


class ReportedError(Exception):
	"""Engine signal: compilation failed and the failure was already reported."""


class WrappedError(Exception):
	"""Engine signal wrapping another exception together with a source range."""

	def __init__(self, inner: BaseException, range: Any = None) -> None:
		super().__init__(inner)
		self.inner = inner
		self.range = range


class EngineLoadError(ValueError):
	"""An engine reference could not be resolved to a callable."""


class Exiter(Protocol):
	def exit(self, code: int) -> None:
		"""Record `code` and unwind; never returns normally."""
		...


class DiagnosticsSink(Protocol):
	def emit(self, diagnostic: RawDiagnostic) -> None:
		...


class CompileEngine(Protocol):
	def __call__(
		self,
		argv: Sequence[str],
		reference_resolver: Any,
		propagate_nested_exit: bool,
		exiter: Exiter,
		sink: DiagnosticsSink,
	) -> None:
		...


class InProcExiter:
	"""Exit capability that records the requested code instead of exiting."""

	def __init__(self) -> None:
		self.exit_code = 0

	def exit(self, code: int) -> None:
		self.exit_code = code
		raise StopProcessing()


class CollectingSink:
	"""Diagnostics sink that keeps errors and warnings in emission order."""

	def __init__(self) -> None:
		self.captured_errors: List[RawDiagnostic] = []
		self.captured_warnings: List[RawDiagnostic] = []

	def emit(self, diagnostic: RawDiagnostic) -> None:
		if getattr(diagnostic, "is_error", True):
			self.captured_errors.append(diagnostic)
		else:
			self.captured_warnings.append(diagnostic)


def is_reported_error(exc: BaseException) -> bool:
	"""True for `ReportedError`, bare or wrapped exactly one level deep."""
	if isinstance(exc, ReportedError):
		return True
	return isinstance(exc, WrappedError) and isinstance(exc.inner, ReportedError)


def load_engine(ref: Optional[str]) -> CompileEngine:
	"""
	Resolve `module:attr` (attr may be dotted) to an engine callable.

	An object that is not callable itself but exposes a callable `compile`
	attribute is accepted; its `compile` is returned.
	"""
	if not ref:
		raise EngineLoadError("no compiler engine configured (use --engine MODULE:ATTR or FSCHOST_ENGINE)")
	module_name, sep, attr_path = ref.partition(":")
	if not sep or not module_name or not attr_path:
		raise EngineLoadError(f"invalid engine reference '{ref}' (expected MODULE:ATTR)")
	try:
		obj: Any = importlib.import_module(module_name)
	except Exception as err:
		# Covers import errors and faults raised by the module body (e.g. SyntaxError).
		raise EngineLoadError(f"cannot import engine module '{module_name}': {err}") from err
	for part in attr_path.split("."):
		try:
			obj = getattr(obj, part)
		except AttributeError as err:
			raise EngineLoadError(f"engine module '{module_name}' has no attribute '{attr_path}'") from err
	if not callable(obj):
		compile_fn: Optional[Callable[..., None]] = getattr(obj, "compile", None)
		if compile_fn is None or not callable(compile_fn):
			raise EngineLoadError(f"engine '{ref}' is not callable")
		obj = compile_fn
	return obj


__all__ = [
	"StopProcessing",
	"ReportedError",
	"WrappedError",
	"EngineLoadError",
	"Exiter",
	"DiagnosticsSink",
	"CompileEngine",
	"InProcExiter",
	"CollectingSink",
	"is_reported_error",
	"load_engine",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Hosted (in-process) compiler front end for test harnesses.

`FscCompiler` runs compilations as if its argv had been given to the compiler
executable, but without spawning a process:

  command line -> argv -> flags -> [console capture: engine call] -> issues -> lines

The output text is the same a command-line run would have produced: console
writes first, then one line per diagnostic (errors before warnings) in the
format selected by the compatibility flags.

Console capture swaps the process-wide `sys.stdout`/`sys.stderr`, so calls are
not thread-safe. Hosts that compile from several threads must hold
`compile_lock` around each call (`serialized_compile_from_command_line` does
this). The working directory is changed and intentionally not restored.
"""

from __future__ import annotations

import logging
import os
import threading
import traceback
from typing import Any, List, Optional, Sequence, Tuple

from fschost.capture import ConsoleCapture
from fschost.cmdline import parse_command_line
from fschost.engine import CompileEngine
from fschost.flags import PROGRAM_PLACEHOLDER, ensure_program_arg, scan_flags
from fschost.inproc import InProcCompiler
from fschost.normalize import normalize_all
from fschost.render import render_issues

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MARKER = "Internal compiler error"

compile_lock = threading.Lock()


def describe_fault(exc: BaseException) -> str:
	"""Full traceback text of `exc` flattened onto a single line."""
	text = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
	return text.rstrip("\r\n").replace("\n", " ").replace("\r", " ")


class FscCompiler:
	"""In-process stand-in for the compiler executable."""

	def __init__(
		self,
		engine: CompileEngine,
		reference_resolver: Any = None,
		program_name: str = PROGRAM_PLACEHOLDER,
	) -> None:
		self.program_name = program_name
		self._compiler = InProcCompiler(engine, reference_resolver)

	def compile_from_args(self, argv: Optional[Sequence[str]]) -> Tuple[int, List[str]]:
		"""
		Compile as if `argv` were the executable's argv.

		argv[0] is discarded by the engine; when it does not look like the
		compiler path a placeholder is prepended. Returns `(exit_code, lines)`
		where exit_code is 0 on success and 1 on any engine-reported failure.
		Console output is not captured here.
		"""
		args = ensure_program_arg(argv, self.program_name)
		flags = scan_flags(args)
		logger.debug("compiling in-process: argv=%r flags=%r", args, flags)
		ok, output = self._compiler.compile(args)
		exit_code = 0 if ok else 1
		lines = render_issues(normalize_all(output.ordered()), flags)
		logger.debug("in-process compile finished: exit_code=%d issues=%d", exit_code, len(lines))
		return exit_code, lines

	def compile_from_command_line(
		self,
		working_directory: str | os.PathLike[str],
		command_line: str,
	) -> Tuple[int, List[str], List[str]]:
		"""
		Switch to `working_directory`, then compile `command_line` with console
		output captured.

		Returns `(exit_code, lines, stderr_lines)`: captured stdout lines followed
		by the rendered diagnostics, and captured stderr lines separately. Any
		unexpected exception (including a failed directory switch) yields exit
		code 1 and a two-line internal-error report.
		"""
		argv = parse_command_line(command_line)
		fault: Optional[Exception] = None
		exit_code = 1
		issue_lines: List[str] = []
		with ConsoleCapture() as capture:
			try:
				os.chdir(working_directory)
				exit_code, issue_lines = self.compile_from_args(argv)
			except Exception as exc:
				fault = exc
		if fault is not None:
			logger.warning("internal error during in-process compile: %s", fault)
			return 1, [INTERNAL_ERROR_MARKER, describe_fault(fault)], []
		return exit_code, [*capture.stdout_lines(), *issue_lines], capture.stderr_lines()


def serialized_compile_from_command_line(
	compiler: FscCompiler,
	working_directory: str | os.PathLike[str],
	command_line: str,
) -> Tuple[int, List[str], List[str]]:
	"""`compile_from_command_line` while holding `compile_lock`."""
	with compile_lock:
		return compiler.compile_from_command_line(working_directory, command_line)


__all__ = [
	"INTERNAL_ERROR_MARKER",
	"compile_lock",
	"describe_fault",
	"FscCompiler",
	"serialized_compile_from_command_line",
]

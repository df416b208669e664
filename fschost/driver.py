# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
CLI for running one hosted compile and printing its report.

  python -m fschost -C tests/case1 --engine mycompiler.driver:compile '--vserrors a.fs'

Report lines go to stdout, captured compiler stderr to stderr, and the process
exits with the compile's exit code. With --json a single object
`{"exit_code", "lines", "stderr"}` is printed instead.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from fschost.engine import EngineLoadError, load_engine
from fschost.hosted import FscCompiler

ENGINE_ENV_VAR = "FSCHOST_ENGINE"


def main(argv: list[str] | None = None) -> int:
	"""Run the hosted compiler CLI; returns the exit code (2 on configuration errors)."""
	parser = argparse.ArgumentParser(description="Run a compiler engine in-process and print its diagnostics")
	parser.add_argument("command_line", help="Compiler command line (a single string, double quotes group spaces)")
	parser.add_argument(
		"-C",
		"--directory",
		type=Path,
		default=Path("."),
		help="Working directory to switch to before compiling (default: current directory)",
	)
	parser.add_argument(
		"--engine",
		default=None,
		help=f"Engine callable as MODULE:ATTR (default: ${ENGINE_ENV_VAR})",
	)
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit exit_code/lines/stderr as a JSON object",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr")
	args = parser.parse_args(argv)

	if args.verbose:
		logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s")

	try:
		engine = load_engine(args.engine or os.environ.get(ENGINE_ENV_VAR))
	except EngineLoadError as err:
		print(f"fschost: error: {err}", file=sys.stderr)
		return 2

	compiler = FscCompiler(engine)
	exit_code, lines, err_lines = compiler.compile_from_command_line(args.directory, args.command_line)

	if args.json:
		print(json.dumps({"exit_code": exit_code, "lines": lines, "stderr": err_lines}))
		return exit_code
	for line in lines:
		print(line)
	for line in err_lines:
		print(line, file=sys.stderr)
	return exit_code


__all__ = ["ENGINE_ENV_VAR", "main"]

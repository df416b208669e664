# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
fschost: run a compiler engine in-process and reproduce its console report.

Pipeline:
  cmdline   -> argv tokenizer
  flags     -> compatibility-flag scan + argv[0] placeholder
  capture   -> stdout/stderr redirection around the engine call
  inproc    -> engine invocation, exit interception, diagnostic harvesting
  normalize -> raw Short/Long diagnostics -> CompilationIssue
  render    -> legacy text formats (default / --test:ErrorRanges / --vserrors)

The CLI entrypoint is `fschost.driver:main`.
"""

from fschost.hosted import FscCompiler, serialized_compile_from_command_line

__all__ = ["FscCompiler", "serialized_compile_from_command_line"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Scoped capture of `sys.stdout` / `sys.stderr`.

The engine may print banners or ad hoc messages straight to the console; while
a `ConsoleCapture` is held those writes land in private buffers instead. The
previous streams are always put back on release, including when the wrapped
code raises.

`sys.stdout`/`sys.stderr` are process-wide: only one capture may be held at a
time. Callers that compile from several threads must serialize around it
(see `fschost.hosted.compile_lock`).
"""

from __future__ import annotations

import io
import re
import sys
from types import TracebackType
from typing import List, Optional, TextIO, Type

_LINE_BREAKS = re.compile(r"[\r\n]")


def split_lines(text: str) -> List[str]:
	"""Split on CR and LF, dropping empty segments."""
	return [line for line in _LINE_BREAKS.split(text) if line]


class ConsoleCapture:
	"""Redirect stdout/stderr into in-memory buffers for one invocation."""

	def __init__(self) -> None:
		self._out = io.StringIO()
		self._err = io.StringIO()
		self._saved: Optional[tuple[TextIO, TextIO]] = None

	@property
	def active(self) -> bool:
		return self._saved is not None

	def acquire(self) -> None:
		if self._saved is not None:
			raise RuntimeError("console capture already acquired")
		self._saved = (sys.stdout, sys.stderr)
		sys.stdout = self._out
		sys.stderr = self._err

	def release(self) -> None:
		if self._saved is None:
			return
		sys.stdout, sys.stderr = self._saved
		self._saved = None

	def __enter__(self) -> "ConsoleCapture":
		self.acquire()
		return self

	def __exit__(
		self,
		exc_type: Optional[Type[BaseException]],
		exc: Optional[BaseException],
		tb: Optional[TracebackType],
	) -> None:
		self.release()

	@property
	def stdout_text(self) -> str:
		return self._out.getvalue()

	@property
	def stderr_text(self) -> str:
		return self._err.getvalue()

	def stdout_lines(self) -> List[str]:
		return split_lines(self.stdout_text)

	def stderr_lines(self) -> List[str]:
		return split_lines(self.stderr_text)


__all__ = ["split_lines", "ConsoleCapture"]

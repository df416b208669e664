# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Split a single command-line string into an argv list.

Quoting rules are deliberately small: a double quote toggles "inside quotes"
and is dropped, a space outside quotes ends the current token, and nothing can
be escaped. An unterminated quote keeps the rest of the string quoted, so that
trailing span never reaches a separator and is not emitted.
"""

from __future__ import annotations

from typing import List

_QUOTE = '"'
_SEPARATOR = " "


def parse_command_line(command_line: str) -> List[str]:
	"""
	Tokenize `command_line` into non-empty arguments.

	Examples:
	  'a b c'          -> ['a', 'b', 'c']
	  '"a b" c'        -> ['a b', 'c']
	  '/out:"x y".dll' -> ['/out:x y.dll']
	  'a "b c'         -> ['a']
	"""
	args: List[str] = []
	current: List[str] = []
	in_quote = False
	# Trailing separator flushes the last token.
	for ch in f"{command_line}{_SEPARATOR}":
		if ch == _QUOTE:
			in_quote = not in_quote
		elif ch == _SEPARATOR and not in_quote:
			if current:
				args.append("".join(current))
				current = []
		else:
			current.append(ch)
	return args


__all__ = ["parse_command_line"]

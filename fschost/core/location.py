# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source location carried by a canonical compilation issue.

Unlike a parser span, a Location never holds `None`: every field is an int and
the all-zero value (`EMPTY_LOCATION`) stands for "no location known". Rendering
relies on this so it can format positions without any branching.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
	"""Start/end position of an issue (all zero when unknown)."""

	start_line: int = 0
	start_column: int = 0
	end_line: int = 0
	end_column: int = 0

	@property
	def is_empty(self) -> bool:
		return self == EMPTY_LOCATION


EMPTY_LOCATION = Location()


__all__ = ["Location", "EMPTY_LOCATION"]

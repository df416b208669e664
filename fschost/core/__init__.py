# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
fschost.core: shared data model for captured compiler diagnostics.

Modules:
  - location: Location + the all-zero EMPTY_LOCATION sentinel
  - diagnostics: raw engine diagnostic shapes and the canonical CompilationIssue
"""

__all__ = [
	"location",
	"diagnostics",
]

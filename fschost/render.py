# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Render canonical issues as legacy compiler output lines.

Three historical location formats exist and are reproduced exactly, chosen by
the compatibility flags found in argv (first match wins):

  --vserrors         (3,5,3,9): typecheck error FS0039: not defined
  --test:ErrorRanges (3,5-3,9): error FS0039: not defined
  (default)          (3,5): error FS0039: not defined

In vserrors mode the kind is prefixed by the subcategory even when it is empty,
which yields a double space. Consumers match this text byte for byte.
"""

from __future__ import annotations

from typing import Iterable, List

from fschost.core.diagnostics import CompilationIssue
from fschost.flags import FormatFlags


def render_location(issue: CompilationIssue, flags: FormatFlags) -> str:
	loc = issue.location
	if flags.vs_errors:
		return f"({loc.start_line},{loc.start_column},{loc.end_line},{loc.end_column})"
	if flags.error_ranges:
		return f"({loc.start_line},{loc.start_column}-{loc.end_line},{loc.end_column})"
	return f"({loc.start_line},{loc.start_column})"


def render_kind(issue: CompilationIssue, flags: FormatFlags) -> str:
	kind = issue.issue_type.value
	if flags.vs_errors:
		return f"{issue.subcategory} {kind}"
	return kind


def render_issue(issue: CompilationIssue, flags: FormatFlags) -> str:
	return f"{render_location(issue, flags)}: {render_kind(issue, flags)} {issue.code}: {issue.text}"


def render_issues(issues: Iterable[CompilationIssue], flags: FormatFlags) -> List[str]:
	return [render_issue(issue, flags) for issue in issues]


__all__ = ["render_location", "render_kind", "render_issue", "render_issues"]

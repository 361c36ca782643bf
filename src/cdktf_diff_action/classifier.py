"""Classify captured cdktf diff output into a result code and summary.

Rules are evaluated in priority order and the first match wins. Error
detection runs first so an error phrase is never masked by a stray
``Plan:`` line elsewhere in the output.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import NamedTuple

from cdktf_diff_core.constants import (
    EXIT_CODE_SUMMARY,
    NO_CHANGES_PHRASE,
    PLAN_ERROR_PHRASE,
    PLANNING_FAILED_PHRASE,
    UNDETERMINED_SUMMARY,
    UNKNOWN_ERROR_SUMMARY,
)
from cdktf_diff_core.models.result import ClassificationResult, ResultCode

ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*[mGK]")
# "Error: " as a word, not the tail of a JavaScript "TypeError: "
ERROR_LINE_PATTERN = re.compile(r"(?<![A-Za-z])Error: .*")
PLAN_LINE_PATTERN = re.compile(r"Plan:.*")


class DiffOutput(NamedTuple):
    """Cleaned output plus the exit code of the process that produced it."""

    text: str
    exit_code: int | None


class ClassificationRule(NamedTuple):
    """A named (predicate, handler) pair."""

    name: str
    matches: Callable[[DiffOutput], bool]
    build: Callable[[DiffOutput], ClassificationResult]


def strip_ansi(text: str) -> str:
    """Remove ANSI color and erase sequences, leaving other text untouched."""
    # Removing one sequence can splice two fragments into a new one.
    while True:
        cleaned = ANSI_ESCAPE_PATTERN.sub("", text)
        if cleaned == text:
            return cleaned
        text = cleaned


def _first_line_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match is None:
        return None
    return match.group(0).rstrip() or None


def _is_failure(output: DiffOutput) -> bool:
    if output.exit_code is not None and output.exit_code != 0:
        return True
    return PLANNING_FAILED_PHRASE in output.text or PLAN_ERROR_PHRASE in output.text


def _failure_result(output: DiffOutput) -> ClassificationResult:
    summary = _first_line_match(ERROR_LINE_PATTERN, output.text)
    if summary is None:
        phrase_matched = PLANNING_FAILED_PHRASE in output.text or PLAN_ERROR_PHRASE in output.text
        if output.exit_code and not phrase_matched:
            summary = EXIT_CODE_SUMMARY.format(exit_code=output.exit_code)
        else:
            summary = UNKNOWN_ERROR_SUMMARY
    return ClassificationResult(code=ResultCode.ERROR, summary=summary)


def _has_no_changes(output: DiffOutput) -> bool:
    return NO_CHANGES_PHRASE in output.text


def _no_changes_result(output: DiffOutput) -> ClassificationResult:
    return ClassificationResult(code=ResultCode.NO_CHANGE, summary=NO_CHANGES_PHRASE)


def _has_plan(output: DiffOutput) -> bool:
    return _first_line_match(PLAN_LINE_PATTERN, output.text) is not None


def _plan_result(output: DiffOutput) -> ClassificationResult:
    summary = _first_line_match(PLAN_LINE_PATTERN, output.text)
    assert summary is not None
    return ClassificationResult(code=ResultCode.CHANGED, summary=summary)


def _undetermined_result(output: DiffOutput) -> ClassificationResult:
    return ClassificationResult(code=ResultCode.ERROR, summary=UNDETERMINED_SUMMARY)


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("failed", _is_failure, _failure_result),
    ClassificationRule("no_changes", _has_no_changes, _no_changes_result),
    ClassificationRule("changed", _has_plan, _plan_result),
    ClassificationRule("undetermined", lambda _: True, _undetermined_result),
)


def classify(raw_text: str, exit_code: int | None = None) -> ClassificationResult:
    """Classify raw diff output. Never raises for unrecognized text."""
    output = DiffOutput(text=strip_ansi(raw_text), exit_code=exit_code)
    for rule in CLASSIFICATION_RULES:
        if rule.matches(output):
            return rule.build(output)
    # The final rule always matches
    raise AssertionError("no classification rule matched")

"""Shared constants for cdktf-diff."""

from __future__ import annotations

# Page size agreed between the job resolver and the jobs API adapter
JOBS_PAGE_SIZE = 100

# GitHub REST API
DEFAULT_GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"

# Diff command
DIFF_COMMAND = "CI=1 npx cdktf diff"
SKIP_SYNTH_FLAG = "--skip-synth"
RAW_OUTPUT_FILENAME = "cdktf-diff.txt"

# Phrases emitted by terraform/cdktf
PLANNING_FAILED_PHRASE = "Planning failed."
PLAN_ERROR_PHRASE = "encountered an error while generating this plan"
NO_CHANGES_PHRASE = "No changes. Your infrastructure matches the configuration."

# Fixed summaries
UNKNOWN_ERROR_SUMMARY = "Unknown error occurred"
UNDETERMINED_SUMMARY = "Could not determine if diff ran successfully"
EXIT_CODE_SUMMARY = "Diff command exited with code {exit_code}"

from __future__ import annotations

import dataclasses
import json

from ..models import PRSummary, PullRequest


def format_summary_json(summary: PRSummary) -> str:
    return json.dumps(dataclasses.asdict(summary), indent=2)


def format_prs_json(prs: list[PullRequest]) -> str:
    return json.dumps([dataclasses.asdict(pr) for pr in prs], indent=2)

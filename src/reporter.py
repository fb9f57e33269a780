"""Violation filtering and the text printed for a finished scan."""

from __future__ import annotations

from src.scan.models import ViolationType
from src.schemas import InstanceDetail, ViolationDetail

BEST_PRACTICE_TAG = "best-practice"


def filter_violations(
    violations: list[ViolationType], extraneous: bool = False
) -> list[ViolationType]:
    """Drop best-practice violations unless *extraneous* is set."""
    if extraneous:
        return list(violations)
    return [v for v in violations if BEST_PRACTICE_TAG not in v.tags]


def join_targets(target: list[str | list[str]]) -> str:
    """Comma-join selectors. A shadow DOM path renders as its selectors joined by ``,``."""
    return ", ".join(t if isinstance(t, str) else ",".join(t) for t in target)


def count_instances(violations: list[ViolationType]) -> int:
    return sum(len(v.nodes) for v in violations)


def to_detail(violation: ViolationType) -> ViolationDetail:
    return ViolationDetail(
        id=violation.id,
        impact=violation.impact,
        tags=", ".join(violation.tags),
        description=violation.description,
        help=f"{violation.help} (Reference: {violation.help_url})",
        instances=[
            InstanceDetail(
                html=node.html,
                targets=join_targets(node.target),
                summary=node.failure_summary,
            )
            for node in violation.nodes
        ],
    )


def render_report(url: str, violations: list[ViolationType], verbose: bool = False) -> list[str]:
    """Lines to print for already filtered *violations*.

    The first line is the count summary; verbose mode adds one indented
    JSON block per violation.
    """
    if not violations:
        return [f"No violations found for: {url}"]

    lines = [f"Found {count_instances(violations)} violations for: {url}"]
    if verbose:
        lines.extend(to_detail(v).model_dump_json(indent=2) for v in violations)
    return lines

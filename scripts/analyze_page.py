"""Analyze a saved HTML page against pillar check results.

Reads the page HTML and the pillar auditors' check scores from disk, runs
extraction, scoring and recommendation generation, and prints the result
as JSON on stdout. Logs go to stderr.

Usage:
    # Full JSON analysis
    python scripts/analyze_page.py page.html pillars.json --url https://example.com/blog/post

    # Without page-type reweighting
    python scripts/analyze_page.py page.html pillars.json --no-dynamic-scoring

    # Short human-readable summary
    python scripts/analyze_page.py page.html pillars.json --summary

pillars.json maps pillar -> metric -> score, e.g.
    {"RETRIEVAL": {"ttfb": 5, "mainContent": 2}, "STRUCTURE": {"listicleFormat": 0}}
"""

import argparse
import json
import sys
from pathlib import Path

from readiness.fixes.artifacts import AuditArtifacts
from readiness.logging import setup_logging
from readiness.pipeline import PageAnalysis, analyze_page


def print_summary(analysis: PageAnalysis, limit: int = 5) -> None:
    scoring = analysis.scoring
    content = analysis.content

    print("=" * 70)
    print("AI SEARCH READINESS")
    print("=" * 70)
    print(f"Page type:     {content.page_type.value}")
    print(f"Business type: {content.business_type.value}")
    print(f"Topic:         {content.primary_topic}")
    print(f"Score:         {scoring.total:g}/100 ({scoring.score_range.label})")
    print()

    for entry in scoring.breakdown:
        print(f"  {entry.pillar.value:<14} {entry.earned:>5g} / {entry.max:g}")
    print()

    if not scoring.recommendations:
        print("No recommendations - every check passed.")
        return

    print(f"Top recommendations ({len(scoring.recommendations)} total):")
    for i, rec in enumerate(scoring.recommendations[:limit], 1):
        print(f"  {i}. [{rec.pillar}] {rec.metric} (+{rec.gain:g})")
        print(f"     {rec.fix}")


def main(
    html_path: Path,
    pillars_path: Path,
    url: str | None = None,
    artifacts_path: Path | None = None,
    dynamic_scoring: bool = True,
    summary: bool = False,
) -> int:
    setup_logging()

    html = html_path.read_text(encoding="utf-8", errors="replace")
    pillar_results = json.loads(pillars_path.read_text(encoding="utf-8"))
    if not isinstance(pillar_results, dict):
        print(f"Expected a JSON object in {pillars_path}", file=sys.stderr)
        return 2

    artifacts = None
    if artifacts_path is not None:
        artifacts = AuditArtifacts.from_dict(json.loads(artifacts_path.read_text(encoding="utf-8")))

    analysis = analyze_page(
        html,
        url,
        pillar_results,
        artifacts=artifacts,
        enable_dynamic_scoring=dynamic_scoring,
    )

    if summary:
        print_summary(analysis)
    else:
        print(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Analyze a page for AI search readiness")
    parser.add_argument("html", type=Path, help="Path to the saved page HTML")
    parser.add_argument("pillars", type=Path, help="Path to the pillar results JSON")
    parser.add_argument("--url", type=str, help="Source URL of the page")
    parser.add_argument("--artifacts", type=Path, help="Path to audit artifacts JSON")
    parser.add_argument(
        "--no-dynamic-scoring",
        action="store_true",
        help="Score against fixed pillar budgets only",
    )
    parser.add_argument("--summary", action="store_true", help="Print a short text summary")
    args = parser.parse_args()

    sys.exit(
        main(
            html_path=args.html,
            pillars_path=args.pillars,
            url=args.url,
            artifacts_path=args.artifacts,
            dynamic_scoring=not args.no_dynamic_scoring,
            summary=args.summary,
        )
    )

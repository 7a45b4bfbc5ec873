from __future__ import annotations

from typing import List

from models import SearchResult

NO_RESULTS_TEXT = "No combos found under your budget. Try increasing it."

TIER_LABELS = {
    "great": "Great value",
    "good": "Good value",
    "fair": "Fair value",
}


def format_result_line(result: SearchResult) -> str:
    combo = result.combo
    return (
        f"${combo.total_price:.2f} • {result.distance:.1f} mi • "
        f"~{result.walk_minutes} min walk • Value {combo.score:.2f}"
    )


def build_report(college: str, budget: float, results: List[SearchResult]) -> str:
    lines = [
        "## YGrubs Pickup Picks",
        "",
        f"- Residential college: {college}",
        f"- Budget: ${budget:.2f}",
        "",
        "> Note: prices and menus may change. Please confirm with the restaurant.",
        "",
    ]

    if not results:
        lines.append(NO_RESULTS_TEXT)
        return "\n".join(lines)

    lines.append("### Results")
    for idx, r in enumerate(results, start=1):
        lines += [
            f"#### {idx}. {r.restaurant}",
            f"- Address: {r.address or 'Not provided'}",
            f"- Combo: {r.combo_name} ({r.combo.template.value})",
            f"- {format_result_line(r)}",
            f"- Tier: {TIER_LABELS.get(r.tier, r.tier)}",
            "",
        ]

    return "\n".join(lines).rstrip() + "\n"

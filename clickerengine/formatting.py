from __future__ import annotations

from clickerengine.report import SessionReport


def format_text_report(report: SessionReport) -> str:
    """Format a session report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + " Clicker Session Report " + "=" * 30)
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Terminal: {report.terminal_description}")
    lines.append(f"Result: {report.outcome} at {report.total_time:.1f}s")
    lines.append("")

    lines.append("FINAL STATE:")
    lines.append(f"  Cookies: {report.final_resource_count}")
    lines.append(f"  Click power: {report.final_click_power}")
    tier = report.final_tier_index
    lines.append(f"  Auto tier: {'none' if tier < 0 else f'Lv{tier + 1}'}")
    lines.append(f"  Clicks: {report.total_clicks}")
    lines.append(f"  Earned: {report.total_earned}")
    lines.append("")

    # Tier unlocks
    if report.tier_unlock_times:
        lines.append("AUTO PRODUCTION:")
        for index, t in sorted(report.tier_unlock_times.items()):
            label = f"Lv{index + 1}"
            lines.append(f"  * {label:.<30s} {t:.1f}s")
        lines.append("")

    # Purchase summary
    lines.append("PURCHASES:")
    lines.append(f"  Total: {len(report.purchases)}")
    lines.append(f"  Upgrades: {len(report.upgrade_times)}")
    lines.append(f"  Rate: {report.purchases_per_minute:.1f}/min")
    lines.append(f"  Max gap: {report.max_purchase_gap:.1f}s")
    lines.append(f"  Mean gap: {report.mean_purchase_gap:.1f}s")

    return "\n".join(lines)

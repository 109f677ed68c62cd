from __future__ import annotations

import csv
import json
from pathlib import Path

from clickerengine.report import SessionReport


def export_csv(report: SessionReport, path: str | Path) -> None:
    """Export session data as CSV files.

    Creates two files:
      - {path}_snapshots.csv
      - {path}_purchases.csv
    """
    base = str(path)

    with open(f"{base}_snapshots.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "time",
            "resource_count",
            "click_power",
            "auto_tier_index",
            "measured_cps",
            "effective_rate",
        ])
        for s in report.snapshots:
            writer.writerow([
                s.time,
                s.resource_count,
                s.click_power,
                s.auto_tier_index,
                s.measured_cps,
                s.effective_rate,
            ])

    with open(f"{base}_purchases.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "kind", "cost", "tier_index", "resource_after"])
        for p in report.purchases:
            writer.writerow([p.time, p.kind, p.cost, p.tier_index, p.resource_after])


def export_json(report: SessionReport, path: str | Path) -> None:
    """Export the session summary and purchase log as JSON."""
    data = {
        "strategy": report.strategy_description,
        "terminal": report.terminal_description,
        "outcome": report.outcome,
        "total_time": report.total_time,
        "final": {
            "resource_count": report.final_resource_count,
            "click_power": report.final_click_power,
            "tier_index": report.final_tier_index,
            "total_clicks": report.total_clicks,
            "total_earned": report.total_earned,
        },
        # JSON object keys must be strings
        "tier_unlock_times": {str(k): v for k, v in report.tier_unlock_times.items()},
        "upgrade_times": report.upgrade_times,
        "purchase_count": len(report.purchases),
        "purchases_per_minute": report.purchases_per_minute,
        "max_purchase_gap": report.max_purchase_gap,
        "mean_purchase_gap": report.mean_purchase_gap,
        "purchases": [
            {
                "time": p.time,
                "kind": p.kind,
                "cost": p.cost,
                "tier_index": p.tier_index,
            }
            for p in report.purchases
        ],
    }
    with open(str(path), "w") as f:
        json.dump(data, f, indent=2)

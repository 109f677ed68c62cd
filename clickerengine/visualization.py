from __future__ import annotations

from clickerengine.report import SessionReport
from clickerengine.strategy import AUTO, UPGRADE


def plot_session(
    report: SessionReport,
    output_path: str | None = None,
) -> None:
    """Generate a 4-panel matplotlib visualization of a session.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install clickerengine[viz]"
        )

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"Clicker Session — {report.strategy_description}", fontsize=14)

    # 1. Cookies over time
    ax1 = axes[0][0]
    series = report.resource_series()
    if series:
        times, values = zip(*series)
        ax1.plot(times, values, label="cookies")
    ax1.set_xlabel("Time (s)")
    ax1.set_ylabel("Cookies")
    ax1.set_title("Cookies Held")
    ax1.grid(True, alpha=0.3)

    # 2. Effective rate over time
    ax2 = axes[0][1]
    series = report.rate_series()
    if series:
        times, rates = zip(*series)
        ax2.plot(times, rates)
    ax2.set_xlabel("Time (s)")
    ax2.set_ylabel("Cookies / s")
    ax2.set_title("Effective Production Rate")
    ax2.grid(True, alpha=0.3)

    # 3. Purchase timeline
    ax3 = axes[1][0]
    if report.purchases:
        for kind, y, marker in ((UPGRADE, 0, "o"), (AUTO, 1, "^")):
            times = [p.time for p in report.purchases if p.kind == kind]
            if times:
                ax3.scatter(times, [y] * len(times), s=20, marker=marker, alpha=0.7)
        ax3.set_yticks([0, 1])
        ax3.set_yticklabels(["upgrade", "auto tier"])
        ax3.set_xlabel("Time (s)")
        ax3.set_title("Purchase Timeline")
        ax3.grid(True, alpha=0.3)

    # 4. Purchase gap histogram
    ax4 = axes[1][1]
    if report.purchase_gaps:
        ax4.hist(report.purchase_gaps, bins=min(30, len(report.purchase_gaps)), alpha=0.7)
        ax4.axvline(
            report.mean_purchase_gap,
            color="red",
            linestyle="--",
            label=f"Mean: {report.mean_purchase_gap:.1f}s",
        )
        ax4.set_xlabel("Gap (s)")
        ax4.set_ylabel("Count")
        ax4.set_title("Purchase Gap Distribution")
        ax4.legend()
        ax4.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
    else:
        plt.show()

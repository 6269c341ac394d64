# queue_search/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..core.log import get_logger

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

log = get_logger("benchmarks.plots")

def _load_rows(path: Path = RESULTS_JSON) -> List[Dict[str, Any]]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m queue_search.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) for r in rows]

    # Positions for bars and ticks
    x = list(range(len(algos)))
    ax.bar(x, [0 if v is None else v for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=30, ha="right")

    top = max((v for v in vals if v is not None), default=0) or 1
    for xi, v in zip(x, vals):
        if v is None:
            label, y = "n/a", 0
        elif isinstance(v, float) and v < 0.01:
            label, y = f"{v:.4f}", v
        elif isinstance(v, float):
            label, y = f"{v:.3f}", v
        else:
            label, y = f"{v}", v
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Algorithm | Cost | Nodes Expanded | Max Frontier | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('max_queue_size'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

_CHARTS = [
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("max_queue_size", "Max Frontier Size (lower is better)", "nodes", "frontier.png"),
    ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ("cost", "Path Cost (lower is better)", "cost", "cost.png"),
]

def main(results: Path = RESULTS_JSON, out_dir: Optional[Path] = None) -> List[Path]:
    out_dir = out_dir or OUT_DIR
    rows = _load_rows(results)

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    log.info("wrote %s", md_path)

    written = [md_path]
    for metric, title, ylabel, filename in _CHARTS:
        fig, ax = plt.subplots(figsize=(7, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        path = out_dir / filename
        path.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        log.info("wrote %s", path)
        written.append(path)
    return written

if __name__ == "__main__":
    main()

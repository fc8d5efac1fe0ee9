import json
from typing import Any, Dict, List, Optional

from comment_scanner.core.aggregator import Aggregator

RULE = "=" * 43


def build_report(
    agg: Aggregator,
    stats: dict,
    *,
    errors: Optional[List[str]] = None,
    metadata: Optional[Dict[str, Any]] = None,
    include_files: bool = False,
) -> dict:
    report: Dict[str, Any] = {
        "summary": agg.as_dict(),
        "statistics": stats,
        "errors": list(errors or []),
    }

    if include_files:
        report["files"] = [
            {
                "path": f.path,
                "extension": f.extension,
                "non_blank": f.counters.non_blank_lines,
                "commented": f.counters.commented_lines,
                "code": f.counters.code_lines,
                "density": round(f.counters.density, 4),
            }
            for f in agg.files
        ]

    if metadata is not None:
        report["metadata"] = metadata

    return report


def render_text(report: dict) -> str:
    summary = report["summary"]
    lines = []

    if "files" in report:
        width = max([len(f["path"]) for f in report["files"]] + [4])
        lines.append(RULE)
        lines.append(f"{'File':<{width}} {'Non-blank':>10} {'Commented':>10} {'Density':>8}")
        for f in report["files"]:
            lines.append(
                f"{f['path']:<{width}} {f['non_blank']:>10} "
                f"{f['commented']:>10} {f['density']:>8.1%}"
            )

    lines.append(RULE)
    lines.append("Results ")
    lines.append("")
    lines.append(f"Total non-blank lines : {summary['non_blank_lines']}")
    lines.append(f"Total commented lines : {summary['commented_lines']}")
    lines.append(f"Comment density       : {summary['comment_density']:.1%}")

    if report.get("errors"):
        lines.append("")
        lines.append(f"Skipped {len(report['errors'])} unreadable file(s)")

    return "\n".join(lines)


def render(report: dict, as_json: bool) -> str:
    return json.dumps(report, indent=2) if as_json else render_text(report)

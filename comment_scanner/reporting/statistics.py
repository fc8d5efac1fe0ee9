from statistics import mean, median

from comment_scanner.core.aggregator import Aggregator


def compute_statistics(agg: Aggregator) -> dict:
    scanned = [f.counters for f in agg.files if f.counters.non_blank_lines]
    if not scanned:
        return {}

    densities = [c.density for c in scanned]
    sizes = [c.non_blank_lines for c in scanned]

    return {
        "comment_density": round(agg.totals.density, 4),
        "mean_file_density": round(mean(densities), 4),
        "median_file_density": round(median(densities), 4),
        "mean_non_blank_lines": mean(sizes),
        "median_non_blank_lines": median(sizes),
        "files_without_comments": sum(1 for c in scanned if not c.commented_lines),
    }

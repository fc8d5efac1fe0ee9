from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from comment_scanner.core.models import FileScanResult, ScanCounters


@dataclass
class Aggregator:
    totals: ScanCounters = field(default_factory=ScanCounters)
    files: List[FileScanResult] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.files)

    def add(self, result: FileScanResult) -> None:
        self.totals = self.totals + result.counters
        self.files.append(result)

    def merge(self, other: "Aggregator") -> "Aggregator":
        return Aggregator(
            totals=self.totals + other.totals,
            files=self.files + other.files,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "files": self.total_files,
            "non_blank_lines": self.totals.non_blank_lines,
            "commented_lines": self.totals.commented_lines,
            "code_lines": self.totals.code_lines,
            "comment_density": round(self.totals.density, 4),
        }


def aggregate(results: Iterable[FileScanResult]) -> Aggregator:
    agg = Aggregator()
    for result in results:
        agg.add(result)
    return agg

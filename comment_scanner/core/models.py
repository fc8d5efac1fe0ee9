from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class LineKind(Enum):
    BLANK = "blank"
    CODE = "code"
    COMMENT = "comment"


class CommentReason(Enum):
    SINGLE_LINE = "single_line"
    INLINE_BLOCK = "inline_block"
    BLOCK_START = "block_start"
    BLOCK_BODY = "block_body"
    BLOCK_END = "block_end"


@dataclass(frozen=True)
class LineClassification:
    kind: LineKind
    reason: Optional[CommentReason] = None
    pattern: Optional[str] = None

    @property
    def is_commented(self) -> bool:
        return self.kind is LineKind.COMMENT

    @property
    def is_blank(self) -> bool:
        return self.kind is LineKind.BLANK

    @classmethod
    def comment(cls, reason: CommentReason, pattern: Optional[str] = None) -> "LineClassification":
        return cls(kind=LineKind.COMMENT, reason=reason, pattern=pattern)


BLANK = LineClassification(LineKind.BLANK)
CODE = LineClassification(LineKind.CODE)


@dataclass
class ScanCounters:
    non_blank_lines: int = 0
    commented_lines: int = 0

    def record(self, classification: LineClassification) -> None:
        if classification.is_blank:
            return
        self.non_blank_lines += 1
        if classification.is_commented:
            self.commented_lines += 1

    def __add__(self, other: "ScanCounters") -> "ScanCounters":
        if not isinstance(other, ScanCounters):
            return NotImplemented
        return ScanCounters(
            non_blank_lines=self.non_blank_lines + other.non_blank_lines,
            commented_lines=self.commented_lines + other.commented_lines,
        )

    @property
    def code_lines(self) -> int:
        return self.non_blank_lines - self.commented_lines

    @property
    def density(self) -> float:
        if not self.non_blank_lines:
            return 0.0
        return self.commented_lines / self.non_blank_lines

    def as_dict(self) -> Dict[str, int]:
        return {
            "non_blank_lines": self.non_blank_lines,
            "commented_lines": self.commented_lines,
        }


@dataclass
class FileScanResult:
    path: str
    extension: str
    counters: ScanCounters

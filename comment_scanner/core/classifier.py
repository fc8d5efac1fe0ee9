from typing import List, Optional

from comment_scanner.core.models import BLANK, CODE, CommentReason, LineClassification
from comment_scanner.core.patterns import PatternProfile
from comment_scanner.core.tracker import BlockCommentTracker


def is_blank(line: str) -> bool:
    return not line.strip()


class LineClassifier:
    """
    Classifies the lines of a single file, in order.

    Block patterns take precedence over single-line patterns: a line that
    sits inside an open block, or opens one, is never tested against the
    single-line prefixes.
    """

    def __init__(self, profile: PatternProfile) -> None:
        self.profile = profile
        self.trackers: List[BlockCommentTracker] = [
            BlockCommentTracker(pattern) for pattern in profile.block_patterns
        ]

    @property
    def active_tracker(self) -> Optional[BlockCommentTracker]:
        for tracker in self.trackers:
            if tracker.inside:
                return tracker
        return None

    def classify(self, line: str) -> LineClassification:
        stripped = line.strip()
        if not stripped:
            return BLANK

        active = self.active_tracker
        if active is not None:
            return active.advance(stripped)

        for tracker in self.trackers:
            if tracker.opens(stripped):
                return tracker.advance(stripped)

        for pattern in self.profile.single_line_patterns:
            if pattern.match(stripped):
                return LineClassification.comment(CommentReason.SINGLE_LINE, pattern.pattern)

        return CODE

from enum import Enum
from typing import Optional

from comment_scanner.core.models import CommentReason, LineClassification
from comment_scanner.core.patterns import BlockPattern


class BlockState(Enum):
    OUTSIDE_BLOCK = "outside_block"
    INSIDE_BLOCK = "inside_block"


class BlockCommentTracker:
    """
    Open/closed state of one block-comment pattern within one file.

    Lines passed in are expected to be stripped and non-blank.
    """

    def __init__(self, pattern: BlockPattern) -> None:
        self.pattern = pattern
        self.state = BlockState.OUTSIDE_BLOCK

    @property
    def inside(self) -> bool:
        return self.state is BlockState.INSIDE_BLOCK

    def opens(self, line: str) -> bool:
        return self.pattern.match_begin(line) is not None

    def advance(self, line: str) -> Optional[LineClassification]:
        """
        Apply one line to the state machine.

        Returns the comment classification for the line, or None when the
        tracker is outside a block and the line does not open one.
        """
        source = self.pattern.source

        if self.inside:
            if self.pattern.search_end(line) is not None:
                self.state = BlockState.OUTSIDE_BLOCK
                return LineClassification.comment(CommentReason.BLOCK_END, source)
            return LineClassification.comment(CommentReason.BLOCK_BODY, source)

        match = self.pattern.match_begin(line)
        if match is None:
            return None

        # end searched only after the begin match, so "'''" alone opens
        if self.pattern.search_end(line[match.end():]) is not None:
            return LineClassification.comment(CommentReason.INLINE_BLOCK, source)

        self.state = BlockState.INSIDE_BLOCK
        return LineClassification.comment(CommentReason.BLOCK_START, source)

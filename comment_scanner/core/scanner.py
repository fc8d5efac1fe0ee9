"""
File Scanner

Drives the line classifier over one file's lines in a single forward pass
and accumulates the file's counters. Lines are consumed one at a time, so
arbitrarily large files are streamed without buffering.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Tuple

from comment_scanner.core.classifier import LineClassifier
from comment_scanner.core.models import CommentReason, LineClassification, ScanCounters
from comment_scanner.core.patterns import PatternProfile

LOGGER_NAME = "comment_scanner.scanner"
logger = logging.getLogger(LOGGER_NAME)

TRACE_MESSAGES = {
    CommentReason.SINGLE_LINE: "Found pattern %s (single-line comment)",
    CommentReason.INLINE_BLOCK: "Found pattern %s (inline comment block)",
    CommentReason.BLOCK_START: "Found pattern %s (start of comment block)",
    CommentReason.BLOCK_BODY: "Inside comment block %s",
    CommentReason.BLOCK_END: "Found pattern %s (end of comment block)",
}


def iter_classifications(
    lines: Iterable[str],
    profile: PatternProfile,
) -> Iterator[Tuple[str, LineClassification]]:
    """
    Yield each line together with its classification, using fresh block
    state for this sequence of lines.
    """
    classifier = LineClassifier(profile)
    for line in lines:
        yield line, classifier.classify(line)

    if classifier.active_tracker is not None:
        logger.debug(
            "Reached end of input inside comment block %s",
            classifier.active_tracker.pattern.source,
        )


class FileScanner:
    def __init__(self, profile: PatternProfile) -> None:
        self.profile = profile

    def scan(self, lines: Iterable[str], *, name: str = "<lines>") -> ScanCounters:
        counters = ScanCounters()
        trace = logger.isEnabledFor(logging.DEBUG)

        if trace:
            logger.debug("Searching %s for %s comment patterns", name, self.profile.extension)

        for line, classification in iter_classifications(lines, self.profile):
            counters.record(classification)
            if trace and not classification.is_blank:
                _trace_line(line, classification)

        return counters


def _trace_line(line: str, classification: LineClassification) -> None:
    logger.debug("| %s", line.rstrip("\r\n"))
    if classification.is_commented:
        logger.debug("| | " + TRACE_MESSAGES[classification.reason], classification.pattern)


def classify_file(lines: Iterable[str], profile: PatternProfile) -> ScanCounters:
    """
    Count the non-blank and commented lines of one file.
    """
    return FileScanner(profile).scan(lines)

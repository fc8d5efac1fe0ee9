"""
Language Pattern Profiles

A profile describes the comment syntax of one file extension: regular
expressions for single-line comment prefixes and begin/end pairs for
block comments. Profiles are built and validated once, before scanning,
and are shared read-only afterwards.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from comment_scanner.core.errors import PatternConfigError

LOGGER_NAME = "comment_scanner.patterns"
logger = logging.getLogger(LOGGER_NAME)

DEFAULT_BLOCK_DELIMITER = ";"


# =============================================================================
# Models
# =============================================================================

@dataclass(frozen=True)
class BlockPattern:
    begin: re.Pattern
    end: re.Pattern

    @property
    def source(self) -> str:
        return f"{self.begin.pattern} ... {self.end.pattern}"

    def match_begin(self, line: str) -> Optional[re.Match]:
        return self.begin.match(line)

    def search_end(self, text: str) -> Optional[re.Match]:
        return self.end.search(text)


@dataclass(frozen=True)
class PatternProfile:
    extension: str
    single_line_patterns: FrozenSet[re.Pattern] = field(default_factory=frozenset)
    block_patterns: Tuple[BlockPattern, ...] = ()

    def describe(self) -> Dict[str, Any]:
        return {
            "extension": self.extension,
            "single_line": sorted(p.pattern for p in self.single_line_patterns),
            "block": [
                {"begin": b.begin.pattern, "end": b.end.pattern}
                for b in self.block_patterns
            ],
        }


# =============================================================================
# Compilation & validation
# =============================================================================

def compile_pattern(source: Any, *, extension: str) -> re.Pattern:
    """
    Compile one pattern string, rejecting empty or malformed input.
    """
    if not isinstance(source, str) or not source:
        raise PatternConfigError(
            f"{extension}: pattern must be a non-empty string, got {source!r}"
        )
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternConfigError(
            f"{extension}: invalid regular expression {source!r}: {exc}"
        ) from exc


def parse_block_pattern(
    text: str,
    *,
    delimiter: str = DEFAULT_BLOCK_DELIMITER,
) -> Tuple[str, str]:
    """
    Split a legacy ``"begin;end"`` block definition into its two halves.

    Example:
        parse_block_pattern("'''" + ";" + "'''") -> ("'''", "'''")
    """
    if not delimiter:
        raise PatternConfigError("block delimiter must be a non-empty string")

    parts = text.split(delimiter)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise PatternConfigError(
            f"block pattern {text!r} must be 'begin{delimiter}end'"
        )
    return parts[0], parts[1]


def build_block_pattern(
    entry: Any,
    *,
    extension: str,
    delimiter: str = DEFAULT_BLOCK_DELIMITER,
) -> BlockPattern:
    """
    Build a BlockPattern from a pair, a ``{"begin", "end"}`` mapping, or a
    delimited string.
    """
    if isinstance(entry, str):
        begin, end = parse_block_pattern(entry, delimiter=delimiter)
    elif isinstance(entry, Mapping):
        unknown = set(entry) - {"begin", "end"}
        if unknown or "begin" not in entry or "end" not in entry:
            raise PatternConfigError(
                f"{extension}: block pattern needs exactly 'begin' and 'end', "
                f"got keys {sorted(entry)}"
            )
        begin, end = entry["begin"], entry["end"]
    elif isinstance(entry, (tuple, list)) and len(entry) == 2:
        begin, end = entry
    else:
        raise PatternConfigError(
            f"{extension}: unsupported block pattern definition {entry!r}"
        )

    return BlockPattern(
        begin=compile_pattern(begin, extension=extension),
        end=compile_pattern(end, extension=extension),
    )


def normalize_extension(extension: Any) -> str:
    if not isinstance(extension, str) or len(extension) < 2 or not extension.startswith("."):
        raise PatternConfigError(
            f"extension must look like '.py', got {extension!r}"
        )
    return extension.lower()


def build_profile(
    extension: str,
    single_line: Iterable[str] = (),
    block: Iterable[Any] = (),
    *,
    delimiter: str = DEFAULT_BLOCK_DELIMITER,
) -> PatternProfile:
    """
    Build and validate the profile for one extension.

    Raises:
        PatternConfigError if any pattern is missing or malformed
    """
    ext = normalize_extension(extension)

    if isinstance(single_line, str):
        single_line = [single_line]
    if isinstance(block, (str, Mapping)):
        block = [block]

    singles = frozenset(compile_pattern(p, extension=ext) for p in single_line)
    blocks = tuple(
        build_block_pattern(b, extension=ext, delimiter=delimiter)
        for b in block
    )

    if not singles and not blocks:
        raise PatternConfigError(f"{ext}: profile defines no comment patterns")

    return PatternProfile(
        extension=ext,
        single_line_patterns=singles,
        block_patterns=blocks,
    )


def build_profiles(
    table: Mapping[str, Mapping[str, Any]],
    *,
    delimiter: str = DEFAULT_BLOCK_DELIMITER,
) -> Dict[str, PatternProfile]:
    """
    Build every profile of an ``{extension -> patterns}`` table.

    Each table entry holds optional ``single_line`` and ``block`` lists.
    """
    if not table:
        raise PatternConfigError("no language profiles configured")

    profiles: Dict[str, PatternProfile] = {}
    for extension, patterns in table.items():
        if not isinstance(patterns, Mapping):
            raise PatternConfigError(
                f"{extension}: expected a table of patterns, got {patterns!r}"
            )
        unknown = set(patterns) - {"single_line", "block"}
        if unknown:
            raise PatternConfigError(
                f"{extension}: unknown pattern keys {sorted(unknown)}"
            )

        profile = build_profile(
            extension,
            patterns.get("single_line", ()),
            patterns.get("block", ()),
            delimiter=delimiter,
        )
        profiles[profile.extension] = profile

    logger.debug("Built %d language profiles", len(profiles))
    return profiles

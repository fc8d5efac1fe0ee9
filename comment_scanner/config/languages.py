from typing import Any, Dict

C_STYLE: Dict[str, Any] = {
    "single_line": [r"^//"],
    "block": [{"begin": r"/\*", "end": r"\*/"}],
}

HASH_STYLE: Dict[str, Any] = {
    "single_line": [r"^#"],
}

DASH_STYLE: Dict[str, Any] = {
    "single_line": [r"^--"],
    "block": [{"begin": r"/\*", "end": r"\*/"}],
}

MARKUP_STYLE: Dict[str, Any] = {
    "block": [{"begin": r"<!--", "end": r"-->"}],
}

CSS_STYLE: Dict[str, Any] = {
    "block": [{"begin": r"/\*", "end": r"\*/"}],
}

DEFAULT_LANGUAGES: Dict[str, Dict[str, Any]] = {
    ".py": {
        "single_line": [r"^#"],
        "block": [
            {"begin": r"'''", "end": r"'''"},
            {"begin": r'"""', "end": r'"""'},
        ],
    },
    ".c": C_STYLE,
    ".h": C_STYLE,
    ".cpp": C_STYLE,
    ".hpp": C_STYLE,
    ".cs": C_STYLE,
    ".java": C_STYLE,
    ".js": C_STYLE,
    ".ts": C_STYLE,
    ".go": C_STYLE,
    ".rs": C_STYLE,
    ".kt": C_STYLE,
    ".scala": C_STYLE,
    ".swift": C_STYLE,
    ".php": {
        "single_line": [r"^//", r"^#(?!\[)"],
        "block": [{"begin": r"/\*", "end": r"\*/"}],
    },
    ".sh": HASH_STYLE,
    ".rb": {
        "single_line": [r"^#"],
        "block": [{"begin": r"=begin", "end": r"^=end"}],
    },
    ".yml": HASH_STYLE,
    ".yaml": HASH_STYLE,
    ".toml": HASH_STYLE,
    ".sql": DASH_STYLE,
    ".lua": {
        "single_line": [r"^--"],
        "block": [{"begin": r"--\[\[", "end": r"\]\]"}],
    },
    ".html": MARKUP_STYLE,
    ".xml": MARKUP_STYLE,
    ".css": CSS_STYLE,
}

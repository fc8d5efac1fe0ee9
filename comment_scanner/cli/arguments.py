import argparse

EPILOG = """examples:
  comment-scanner scan                     # scan the current directory
  comment-scanner scan /path/to/search     # scan a specific directory
  comment-scanner scan /path/to/search -d  # also print a per-line trace
"""

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="comment-scanner",
        description="Count non-blank and commented lines across a source tree",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan a directory for commented lines")
    scan.add_argument("path", nargs="?", default=".", help="Directory to search (default: current directory)")
    scan.add_argument("-d", "--debug", action="store_true", help="Print per-line trace to stderr")
    scan.add_argument("--verbose", action="store_true", help="Log per-file progress")
    scan.add_argument("--json", action="store_true", help="Output JSON")
    scan.add_argument("--per-file", action="store_true", help="Include per-file counts")
    scan.add_argument("--output", help="Write output to file")
    scan.add_argument("--config", help="TOML configuration file")
    scan.add_argument("--ext", action="append", metavar="EXT", help="Only scan this extension (repeatable)")
    scan.add_argument("--exclude", action="append", metavar="NAME", help="Skip directories with this name (repeatable)")
    scan.add_argument("--workers", type=int, help="Scan files with N worker threads")

    languages = sub.add_parser("languages", help="List configured comment patterns")
    languages.add_argument("--config", help="TOML configuration file")
    languages.add_argument("--json", action="store_true", help="Output JSON")

    return parser

import json
import logging
import sys
from pathlib import Path

from .arguments import build_parser
from .runner import run_scan
from comment_scanner.config.loader import describe_profiles, find_config_file, load_config, split_overrides
from comment_scanner.core.errors import CommentScannerError
from comment_scanner.reporting.report import render

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def render_languages(profiles: dict, as_json: bool) -> str:
    described = describe_profiles(profiles)
    if as_json:
        return json.dumps(described, indent=2)

    lines = []
    for entry in described:
        blocks = ", ".join(f"{b['begin']} ... {b['end']}" for b in entry["block"])
        lines.append(
            f"{entry['extension']:<8} single: {' '.join(entry['single_line']) or '-'}"
            f"  block: {blocks or '-'}"
        )
    return "\n".join(lines)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(getattr(args, "debug", False), getattr(args, "verbose", False))
    config_path, overrides = split_overrides(args)

    try:
        if args.command == "scan":
            if config_path is None:
                config_path = find_config_file(Path(args.path))
            config = load_config(config_path, overrides=overrides)
            report = run_scan(args.path, config, include_files=args.per_file)
            output = render(report, args.json)
        else:
            config = load_config(config_path)
            output = render_languages(config.profiles, args.json)
    except CommentScannerError as exc:
        parser.exit(2, f"error: {exc}\n")

    if getattr(args, "output", None):
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output)
        except OSError as exc:
            parser.exit(2, f"error: cannot write {args.output}: {exc}\n")
    else:
        print(output)

    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

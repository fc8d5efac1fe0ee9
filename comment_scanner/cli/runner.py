import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from comment_scanner.config.loader import LoadedConfig, find_config_file, load_config
from comment_scanner.core.aggregator import Aggregator, aggregate
from comment_scanner.core.errors import FileReadError
from comment_scanner.core.models import FileScanResult
from comment_scanner.core.patterns import PatternProfile
from comment_scanner.core.scanner import FileScanner
from comment_scanner.reporting.report import build_report
from comment_scanner.reporting.statistics import compute_statistics
from comment_scanner.utils.discovery import iter_lines, iter_source_files, validate_scan_root

LOGGER_NAME = "comment_scanner.runner"
logger = logging.getLogger(LOGGER_NAME)


def scan_path(path: Path, profile: PatternProfile, *, root: Optional[Path] = None) -> FileScanResult:
    name = str(path.relative_to(root)) if root else str(path)
    counters = FileScanner(profile).scan(iter_lines(path), name=name)
    logger.info(
        "Scanned %s: %d non-blank, %d commented",
        name, counters.non_blank_lines, counters.commented_lines,
    )
    return FileScanResult(path=name, extension=profile.extension, counters=counters)


def collect_results(
    root: Path,
    files: List[Path],
    profiles: Dict[str, PatternProfile],
    *,
    workers: int = 1,
) -> Tuple[Aggregator, List[str]]:
    """
    Scan every file and fold the per-file counters into run totals.

    Unreadable files are logged, recorded as errors and skipped.
    """
    errors: List[str] = []

    def scan_one(path: Path) -> Aggregator:
        try:
            return aggregate([scan_path(path, profiles[path.suffix.lower()], root=root)])
        except FileReadError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            errors.append(str(exc))
            return Aggregator()

    if workers > 1 and len(files) > 1:
        # partials are merged in discovery order, not completion order
        partials: List[Optional[Aggregator]] = [None] * len(files)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(scan_one, path): i for i, path in enumerate(files)}
            for future in as_completed(futures):
                partials[futures[future]] = future.result()
    else:
        partials = [scan_one(path) for path in files]

    agg = Aggregator()
    for partial in partials:
        agg = agg.merge(partial)
    return agg, errors


def run_scan(
    path: str,
    config: Optional[LoadedConfig] = None,
    *,
    include_files: bool = False,
) -> dict:
    root = validate_scan_root(Path(path))

    if config is None:
        config = load_config(find_config_file(root))

    profiles = config.selected_profiles()
    settings = config.settings

    started = time.time()
    files = list(iter_source_files(root, profiles, exclude_dirs=settings.exclude_dirs))
    logger.info("Found %d files to scan under %s", len(files), root)

    agg, errors = collect_results(root, files, profiles, workers=settings.workers)

    metadata = {
        "root": str(root),
        "extensions": sorted(profiles),
        "workers": settings.workers,
        "elapsed_seconds": round(time.time() - started, 4),
    }
    return build_report(
        agg,
        compute_statistics(agg),
        errors=sorted(errors),
        metadata=metadata,
        include_files=include_files,
    )

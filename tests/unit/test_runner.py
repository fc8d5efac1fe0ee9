from pathlib import Path

import pytest

from comment_scanner.cli.runner import collect_results, run_scan
from comment_scanner.config.loader import load_config
from comment_scanner.core.errors import DiscoveryError
from comment_scanner.core.models import ScanCounters


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """
    Create a small mixed-language repository.
    """
    repo = tmp_path / "repo"
    (repo / "src").mkdir(parents=True)
    (repo / "build").mkdir()

    (repo / "src" / "app.py").write_text(
        "'''\nApp module.\n'''\n\nimport sys\n# run\nsys.exit(0)\n",
        encoding="utf-8",
    )
    (repo / "src" / "lib.c").write_text(
        "/* lib */\nint f(void) {\n    // body\n    return 1;\n}\n/* open\n",
        encoding="utf-8",
    )
    (repo / "build" / "gen.py").write_text("# generated\n", encoding="utf-8")
    (repo / "README.md").write_text("# Title\n", encoding="utf-8")

    return repo


def test_run_scan_totals(repo: Path):
    report = run_scan(str(repo))
    assert report["summary"] == {
        "files": 2,
        "non_blank_lines": 12,
        "commented_lines": 7,
        "code_lines": 5,
        "comment_density": round(7 / 12, 4),
    }
    assert report["errors"] == []
    assert report["metadata"]["root"] == str(repo.resolve())


def test_run_scan_per_file(repo: Path):
    report = run_scan(str(repo), include_files=True)
    paths = [Path(f["path"]).as_posix() for f in report["files"]]
    assert paths == ["src/app.py", "src/lib.c"]


def test_run_scan_extension_filter(repo: Path):
    config = load_config(overrides={"extensions": [".c"]})
    report = run_scan(str(repo), config)
    assert report["summary"]["files"] == 1
    assert report["summary"]["non_blank_lines"] == 6


def test_run_scan_reads_config_file_from_root(repo: Path):
    (repo / "comment-scanner.toml").write_text(
        '[scanner]\nextensions = [".py"]\n', encoding="utf-8"
    )
    report = run_scan(str(repo))
    assert report["metadata"]["extensions"] == [".py"]
    assert report["summary"]["files"] == 1


def test_threaded_scan_matches_sequential(repo: Path):
    for i in range(6):
        (repo / "src" / f"mod{i}.py").write_text("# c\n" * i + "x = 1\n", encoding="utf-8")

    sequential = run_scan(str(repo), load_config(overrides={"workers": 1}), include_files=True)
    threaded = run_scan(str(repo), load_config(overrides={"workers": 4}), include_files=True)

    assert threaded["summary"] == sequential["summary"]
    assert threaded["files"] == sequential["files"]


def test_unreadable_file_is_skipped(repo: Path):
    profiles = load_config().profiles
    files = [repo / "src" / "app.py", repo / "src" / "missing.py"]
    agg, errors = collect_results(repo, files, profiles)
    assert agg.total_files == 1
    assert agg.totals == ScanCounters(6, 4)
    assert len(errors) == 1
    assert "missing.py" in errors[0]


def test_run_scan_missing_root(tmp_path: Path):
    with pytest.raises(DiscoveryError):
        run_scan(str(tmp_path / "nope"))


def test_threaded_collect_keeps_discovery_order_and_skips_unreadable(repo: Path):
    profiles = load_config().profiles
    files = [repo / "src" / "lib.c", repo / "src" / "missing.py", repo / "src" / "app.py"]
    agg, errors = collect_results(repo, files, profiles, workers=3)
    assert [Path(f.path).as_posix() for f in agg.files] == ["src/lib.c", "src/app.py"]
    assert agg.totals == ScanCounters(12, 7)
    assert len(errors) == 1

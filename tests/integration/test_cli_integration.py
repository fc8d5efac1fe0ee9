import json
import subprocess
import sys
import tempfile
from pathlib import Path

def run_cli(*args):
    cmd = [sys.executable, "-m", "comment_scanner.cli.main", *args]
    return subprocess.run(cmd, capture_output=True, text=True)

def make_repo(root: Path) -> None:
    (root / "a.py").write_text("# one\n'''\ntwo\n'''\nx = 1\n\n", encoding="utf-8")
    (root / "b.js").write_text("/* c */\nlet y = 2;\n", encoding="utf-8")

def test_cli_scan_prints_totals():
    with tempfile.TemporaryDirectory() as d:
        repo = Path(d)
        make_repo(repo)

        result = run_cli("scan", str(repo))
        assert result.returncode == 0
        assert "Total non-blank lines : 7" in result.stdout
        assert "Total commented lines : 5" in result.stdout

def test_cli_scan_json_output_file():
    with tempfile.TemporaryDirectory() as d:
        repo = Path(d)
        make_repo(repo)
        out = repo / "report.json"

        result = run_cli("scan", str(repo), "--json", "--per-file", "--output", str(out))
        assert result.returncode == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["summary"]["files"] == 2
        assert len(data["files"]) == 2

def test_cli_debug_trace_goes_to_stderr():
    with tempfile.TemporaryDirectory() as d:
        repo = Path(d)
        make_repo(repo)

        result = run_cli("scan", str(repo), "--debug")
        assert result.returncode == 0
        assert "start of comment block" in result.stderr
        assert "start of comment block" not in result.stdout

def test_cli_bad_config_exits_with_error():
    with tempfile.TemporaryDirectory() as d:
        repo = Path(d)
        config = repo / "bad.toml"
        config.write_text('[languages.".py"]\nsingle_line = ["(oops"]\n', encoding="utf-8")

        result = run_cli("scan", str(repo), "--config", str(config))
        assert result.returncode == 2
        assert "error:" in result.stderr

def test_cli_missing_directory_exits_with_error():
    with tempfile.TemporaryDirectory() as d:
        result = run_cli("scan", str(Path(d) / "missing"))
        assert result.returncode == 2
        assert "does not exist" in result.stderr

def test_cli_languages_lists_profiles():
    result = run_cli("languages", "--json")
    assert result.returncode == 0
    extensions = [entry["extension"] for entry in json.loads(result.stdout)]
    assert ".py" in extensions

def test_cli_unwritable_output_exits_with_error():
    with tempfile.TemporaryDirectory() as d:
        repo = Path(d)
        make_repo(repo)
        out = repo / "missing" / "report.txt"

        result = run_cli("scan", str(repo), "--output", str(out))
        assert result.returncode == 2
        assert "error: cannot write" in result.stderr
        assert "Traceback" not in result.stderr

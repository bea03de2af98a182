"""Integration tests for the command-line interface.

These tests run the CLI in a subprocess and cover:
- Text, Markdown and JSON output
- .gitignore discovery and -i/--ignore patterns
- Depth limits
- Output file writing
- Settings files
- Error exit codes
- Version information
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest

# Only run when --run-cli-tests is given; these tests start a new interpreter per case
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "project"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "node_modules" / "pkg").mkdir(parents=True)
    (base_dir / "build").mkdir()
    (base_dir / "empty").mkdir()

    (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "src" / "main.pyc").write_bytes(b"compiled python")
    (base_dir / "docs" / "README.md").write_text("# Test Project\n")
    (base_dir / "server.log").write_text("DEBUG: test log\n")
    (base_dir / "node_modules" / "pkg" / "index.js").write_text("export default {}\n")
    (base_dir / "build" / "output.min.js").write_text("console.log('test')\n")

    (base_dir / ".gitignore").write_text("# generated\n*.pyc\nbuild/\nnode_modules\n")
    return base_dir


NO_SETTINGS = Path(__file__).parent / "no-such-settings.json"


def run_cli(*args, settings=None, tmp_path=None):
    settings_file = NO_SETTINGS
    if settings is not None:
        settings_file = Path(tmp_path) / "settings.json"
        settings_file.write_text(json.dumps(settings))
    cmd = [sys.executable, "-m", "filetreegen.cli.main", "-c", str(settings_file), *map(str, args)]
    return subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8")


def test_text_output_respects_gitignore(temp_project):
    result = run_cli(temp_project)
    assert result.returncode == 0, result.stderr
    assert result.stdout == (
        "project\n"
        "    ├── docs\n"
        "    │   └── README.md\n"
        "    ├── src\n"
        "    │   ├── utils\n"
        "    │   │   └── helpers.py\n"
        "    │   └── main.py\n"
        "    ├── .gitignore\n"
        "    └── server.log\n"
    )


def test_ignore_patterns(temp_project):
    result = run_cli("-i", "*.log", "-i", "docs/", temp_project)
    assert result.returncode == 0, result.stderr
    assert "server.log" not in result.stdout
    assert "docs" not in result.stdout
    assert "main.py" in result.stdout


def test_no_gitignore_shows_ignored_entries(temp_project):
    result = run_cli("-G", temp_project)
    assert result.returncode == 0, result.stderr
    for name in ("node_modules", "index.js", "build", "main.pyc"):
        assert name in result.stdout
    assert "empty" not in result.stdout


def test_max_depth(temp_project):
    result = run_cli("-d", "1", temp_project)
    assert result.returncode == 0, result.stderr
    assert result.stdout == "project\n    ├── .gitignore\n    └── server.log\n"


def test_markdown_output(temp_project):
    result = run_cli("-f", "markdown", "-d", "2", temp_project)
    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines[:3] == ["# File Tree: project", "", "- 📁 docs"]
    assert "  - 📄 README.md" in lines


def test_json_output_to_file(temp_project, tmp_path):
    output = tmp_path / "tree.json"
    result = run_cli("-f", "json", "-o", output, temp_project)
    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    assert f"File tree saved to {output}" in result.stderr

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["name"] == "project"
    assert [child["name"] for child in data["children"]] == ["docs", "src", ".gitignore", "server.log"]


def test_settings_file(temp_project, tmp_path):
    result = run_cli(temp_project, settings={"defaultFormat": "json", "excludePatterns": ["*.log"]}, tmp_path=tmp_path)
    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert "server.log" not in [child["name"] for child in data["children"]]


def test_missing_directory(tmp_path):
    result = run_cli(tmp_path / "missing")
    assert result.returncode == 1
    assert "Error:" in result.stderr


def test_file_as_directory(temp_project):
    result = run_cli(temp_project / "server.log")
    assert result.returncode == 1
    assert "not a directory" in result.stderr


def test_invalid_format():
    result = run_cli("-f", "xml", ".")
    assert result.returncode == 2


def test_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("filetreegen ")


def test_broken_pipe(temp_project):
    cli = subprocess.Popen(
        [sys.executable, "-m", "filetreegen.cli.main", "-G", str(temp_project)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert cli.stdout is not None
    cli.stdout.close()
    _, stderr = cli.communicate()
    assert b"Traceback" not in stderr

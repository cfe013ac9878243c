"""Integration tests for the command-line interface.

This integration test suite runs the CLI in a subprocess and covers:
- Plain tree output and the summary line
- Ignore files, include/exclude globs and directory-only mode
- Depth limits and symlink loops
- JSON and XML output, output files
- The configuration file and its precedence
- Exit codes for bad roots, bad globs and bad options
"""

import json
import os
import shlex
import subprocess
import sys

import pytest

# Skip all tests in this module unless --run-cli-tests is given
# This prevents these slow tests from running during normal test runs
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def home(tmp_path):
    """An empty home directory so the user's own configuration is never read."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "proj"
    base_dir.mkdir()

    (base_dir / "src").mkdir()
    (base_dir / "src" / "utils").mkdir()
    (base_dir / "docs").mkdir()
    (base_dir / "build").mkdir()
    (base_dir / ".git").mkdir()

    (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "src" / "main.pyc").write_bytes(b"compiled python")
    (base_dir / "docs" / "README.md").write_text("# Test Project\n")
    (base_dir / "build" / "output.js").write_text("console.log('test')\n")
    (base_dir / "server.log").write_text("DEBUG: test log\n")
    (base_dir / ".git" / "HEAD").write_text("ref: refs/heads/main\n")

    (base_dir / ".gitignore").write_text("*.pyc\nbuild/\n")
    (base_dir / ".dockerignore").write_text("*.log\n")

    return base_dir


def run_cli(args, home, cwd=None, timeout=10):
    """Run the fstree CLI with the given arguments.

    Args:
        args: List of CLI arguments
        home: Directory used as HOME (and USERPROFILE)
        cwd: Working directory
        timeout: Maximum time to wait for command to complete

    Returns:
        CompletedProcess object with stdout/stderr as text
    """
    cmd = [sys.executable, "-m", "fstree.cli.main"] + [str(arg) for arg in args]
    env = dict(os.environ, HOME=str(home), USERPROFILE=str(home))
    return subprocess.run(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        cwd=cwd,
        env=env,
        timeout=timeout,
    )


def write_config(home, data):
    config_dir = home / ".config" / "fstree"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(json.dumps(data), encoding="utf-8")


def test_cli_basic_tree(temp_project, home):
    result = run_cli(["--sort", "name", temp_project], home)

    assert result.returncode == 0, result.stderr
    assert result.stdout == (
        "proj/\n"
        "├── .dockerignore\n"
        "├── .gitignore\n"
        "├── docs/\n"
        "│   └── README.md\n"
        "├── server.log\n"
        "└── src/\n"
        "    ├── main.py\n"
        "    └── utils/\n"
        "        └── helpers.py\n"
    )


def test_cli_show_all(temp_project, home):
    result = run_cli(["-a", "--sort", "name", temp_project], home)

    assert result.returncode == 0
    assert ".git/" in result.stdout
    assert "build/" in result.stdout
    assert "main.pyc" in result.stdout


def test_cli_extra_ignore_file(temp_project, home):
    result = run_cli(["--ignore", ".dockerignore", temp_project], home)

    assert result.returncode == 0
    assert "server.log" not in result.stdout
    assert "main.py" in result.stdout


def test_cli_include_keeps_parent_directories(temp_project, home):
    result = run_cli(["-i", "*.py", "--sort", "name", temp_project], home)

    assert result.returncode == 0
    assert result.stdout == (
        "proj/\n" "├── docs/\n" "└── src/\n" "    ├── main.py\n" "    └── utils/\n" "        └── helpers.py\n"
    )


def test_cli_directory_only_with_summary(temp_project, home):
    result = run_cli(["--dir", "-r", "--sort", "name", temp_project], home)

    assert result.returncode == 0
    assert result.stdout == ("proj/\n" "├── docs/\n" "└── src/\n" "    └── utils/\n" "\n" "4 directories, 0 files\n")


def test_cli_depth_limit(temp_project, home):
    result = run_cli(["-d", "1", "--dir", "--sort", "name", temp_project], home)

    assert result.returncode == 0
    assert result.stdout == "proj/\n├── docs/\n└── src/\n"


def test_cli_summary_with_sizes(temp_project, home):
    result = run_cli(["-r", "-s", "-e", "*", temp_project], home)

    assert result.returncode == 0
    assert result.stdout.endswith("\n4 directories, 0 files, 0B total\n")


def test_cli_json_output(temp_project, home):
    result = run_cli(["--format", "json", "-r", temp_project], home)

    assert result.returncode == 0
    document = json.loads(result.stdout)
    assert document["tree"]["type"] == "directory"
    assert document["statistics"]["directories"] == 4
    assert document["statistics"]["files"] == 6


def test_cli_xml_output_to_file(temp_project, home, tmp_path):
    output = tmp_path / "tree.xml"

    result = run_cli(["--format", "xml", "-o", output, temp_project], home)

    assert result.returncode == 0
    assert result.stdout == ""
    content = output.read_text(encoding="utf-8")
    assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<tree>\n')
    assert "\x1b" not in content


def test_cli_symlink_loop(temp_project, home):
    try:
        os.symlink(temp_project, temp_project / "src" / "loop", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    result = run_cli(["-L", "-r", temp_project], home)

    assert result.returncode == 0
    assert f"loop -> {temp_project}" in result.stdout
    assert result.stdout.endswith("4 directories, 7 files\n")


def test_cli_relative_root(temp_project, home):
    result = run_cli(["--dir", "-d", "1", "--sort", "name"], home, cwd=temp_project)

    assert result.returncode == 0
    assert result.stdout == "./\n├── docs/\n└── src/\n"


def test_cli_config_file(temp_project, home):
    write_config(home, {"summary": True, "max-depth": 1, "directory": True, "sort": "name"})

    result = run_cli([temp_project], home)
    assert result.returncode == 0
    assert result.stdout == "proj/\n├── docs/\n└── src/\n\n3 directories, 0 files\n"

    # Command-line values win over the file
    result = run_cli(["-d", "2", temp_project], home)
    assert "utils/" in result.stdout

    result = run_cli(["--no-config", temp_project], home)
    assert "directories" not in result.stdout


def test_cli_invalid_config_file_warns(temp_project, home):
    config_dir = home / ".config" / "fstree"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text("{broken")

    result = run_cli([temp_project], home)

    assert result.returncode == 0
    assert "Warning: Failed to parse config file at" in result.stderr
    assert result.stdout.startswith("proj/\n")


def test_cli_missing_root(tmp_path, home):
    result = run_cli([tmp_path / "missing"], home)

    assert result.returncode == 1
    assert result.stderr.startswith("Error: ")
    assert result.stdout == ""


def test_cli_invalid_glob(temp_project, home):
    result = run_cli(["-e", "{a,b", temp_project], home)

    assert result.returncode == 1
    assert "Invalid glob pattern '{a,b'" in result.stderr


def test_cli_invalid_option(temp_project, home):
    result = run_cli(["--sort", "size", temp_project], home)

    assert result.returncode == 2


def test_cli_version(home):
    result = run_cli(["--version"], home)

    assert result.returncode == 0
    assert result.stdout.startswith("fstree ")


@pytest.mark.skipif(sys.platform == "win32", reason="Requires a POSIX shell pipeline")
def test_cli_closed_pipe(temp_project, home):
    """Test that a reader going away early does not produce a traceback."""
    cmd = f"{shlex.quote(sys.executable)} -m fstree.cli.main -a {shlex.quote(str(temp_project))} | head -n 1"
    env = dict(os.environ, HOME=str(home))

    result = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, env=env)

    assert result.stdout == "proj/\n"
    assert "Traceback" not in result.stderr


def test_cli_output_is_utf8(tmp_path, home):
    root = tmp_path / "ünïcode"
    root.mkdir()
    (root / "café.txt").write_text("x")

    result = run_cli([root], home)

    assert result.returncode == 0
    assert result.stdout == "ünïcode/\n└── café.txt\n"

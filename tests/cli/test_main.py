"""Unit tests for the CLI main module."""

import json
from unittest.mock import patch

import pytest

from fstree.cli.config_file import FileConfig
from fstree.cli.main import color_allowed, main
from fstree.exceptions import ConfigError


@pytest.fixture(autouse=True)
def no_signal_setup():
    """Keep the test process's own signal handlers in place."""
    with patch("fstree.cli.main.setup_signal_handling"):
        yield


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "tree.txt"


def test_main_writes_tree_to_file(project, output_file):
    main(["--no-config", "--sort", "name", "-o", str(output_file), str(project)])

    assert output_file.read_text(encoding="utf-8") == (
        "project/\n├── a.txt\n└── sub/\n    ├── b.py\n    └── c.log\n"
    )


def test_main_summary_and_sizes(project, output_file):
    main(["--no-config", "--sort", "name", "-r", "-s", "-o", str(output_file), str(project)])

    content = output_file.read_text(encoding="utf-8")
    assert "├── a.txt (10B)\n" in content
    assert content.endswith("\n\n2 directories, 3 files, 60B total\n")


def test_main_json_output(project, output_file):
    main(["--no-config", "--format", "json", "-r", "-o", str(output_file), str(project)])

    document = json.loads(output_file.read_text(encoding="utf-8"))
    assert document["tree"]["name"] == "project"
    assert document["statistics"] == {"directories": 2, "files": 3, "bytes": 60}


def test_main_writes_to_stdout(project, capfd):
    with patch("fstree.cli.main.color_allowed", return_value=False):
        main(["--no-config", "--sort", "name", "-d", "1", str(project)])

    assert capfd.readouterr().out == "project/\n├── a.txt\n└── sub/\n"


def test_main_uses_config_file(project, output_file):
    with patch("fstree.cli.main.load_file_config", return_value=FileConfig(summary=True)) as mock_load:
        main(["-o", str(output_file), str(project)])

    mock_load.assert_called_once_with()
    assert output_file.read_text(encoding="utf-8").endswith("2 directories, 3 files\n")


def test_main_no_config_skips_loading(project, output_file):
    with patch("fstree.cli.main.load_file_config") as mock_load:
        main(["--no-config", "-o", str(output_file), str(project)])

    mock_load.assert_not_called()


def test_main_config_error_is_warning(project, output_file, capsys):
    error = ConfigError("Expecting value", "/home/user/.config/fstree/config.json")
    with patch("fstree.cli.main.load_file_config", side_effect=error):
        main(["-o", str(output_file), str(project)])

    assert (
        "Warning: Failed to parse config file at '/home/user/.config/fstree/config.json': Expecting value"
        in capsys.readouterr().err
    )
    assert output_file.read_text(encoding="utf-8").startswith("project/\n")


def test_main_missing_root(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--no-config", str(tmp_path / "missing")])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_main_invalid_glob(project, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--no-config", "-i", "[abc", str(project)])

    assert exc_info.value.code == 1
    assert "Error: Invalid glob pattern '[abc': unclosed character class" in capsys.readouterr().err


def test_main_negative_depth(project, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--no-config", "-d", "-2", str(project)])

    assert exc_info.value.code == 1
    assert "--max-depth must not be negative" in capsys.readouterr().err


def test_main_permission_error(project, capsys):
    with patch("fstree.cli.main.render_tree", side_effect=PermissionError("Permission denied: 'project'")):
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-config", str(project)])

    assert exc_info.value.code == 126
    assert "Error: Permission denied" in capsys.readouterr().err


def test_main_syntax_error_exits_2(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--format", "yaml"])

    assert exc_info.value.code == 2


def test_main_broken_pipe_is_silent(project, output_file, capsys):
    with patch("fstree.cli.main.SafeWriter.write", side_effect=BrokenPipeError()):
        main(["--no-config", "-o", str(output_file), str(project)])

    assert capsys.readouterr().err == ""


def test_main_exit_code_after_signal(project, output_file):
    with patch("fstree.cli.main.signal_handler") as mock_handler:
        mock_handler.exit_code.return_value = 141
        with pytest.raises(SystemExit) as exc_info:
            main(["--no-config", "-o", str(output_file), str(project)])

    assert exc_info.value.code == 141


@pytest.mark.parametrize(
    "to_file,environ,isatty,expected",
    [
        (False, {}, True, True),
        (False, {}, False, False),
        (True, {}, True, False),
        (False, {"NO_COLOR": ""}, True, False),
        (False, {"NO_COLOR": "1"}, True, False),
    ],
)
def test_color_allowed(to_file, environ, isatty, expected):
    assert color_allowed(to_file, environ=environ, isatty=isatty) is expected

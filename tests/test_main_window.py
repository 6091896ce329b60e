"""Tests for the host window and the command line entry point."""

import pytest
from PyQt6.QtWidgets import QMessageBox

from conftest import FakePicker
from filegrid.__main__ import build_parser, grid_config_from_args, main
from filegrid.controller.command import CreateFileGridCommand
from filegrid.controller.result import GridFailure, GridSuccess
from filegrid.errors import DirectoryAccessError, ValidationError
from filegrid.view.main_window import MainWindow
from filegrid.view.scene import SceneGraph


@pytest.fixture
def window(qtbot):
    window = MainWindow(SceneGraph())
    qtbot.addWidget(window)
    return window


def test_command_registers_menu(window):
    """Registering the command adds a File Grid menu before Help."""
    command = CreateFileGridCommand(window.graph, FakePicker(None))
    command.register(window)

    titles = [action.text() for action in window.menuBar().actions()]
    assert titles.index("File Grid") == titles.index("&Help") - 1
    assert window.actions_by_id["createFileGrid"].text() == "Create File Grid"


def test_duplicate_action_rejected(window):
    """Action ids are unique."""
    window.add_action("x", "X", lambda: None)
    with pytest.raises(ValueError):
        window.add_action("x", "Again", lambda: None)


def test_menu_with_unknown_action_rejected(window):
    """Menus may only list registered actions."""
    with pytest.raises(ValueError):
        window.add_menu("Broken", ["nope"])


def test_menu_action_runs_command(window, sample_dir, monkeypatch):
    """Triggering the menu action runs the command with the picked directory."""
    command = CreateFileGridCommand(window.graph, FakePicker(sample_dir))
    started = []
    monkeypatch.setattr(command, "start", started.append)
    command.register(window)

    window.actions_by_id["createFileGrid"].trigger()

    assert started == [sample_dir]


def test_success_goes_to_status_bar(window, tmp_path, monkeypatch):
    """Successful runs are reported without a dialog."""
    shown = []
    monkeypatch.setattr(QMessageBox, "warning", lambda *args: shown.append(args))

    window.show_outcome(GridSuccess(directory=tmp_path, placed=3))

    assert window.statusBar().currentMessage() == f"Placed 3 files from {tmp_path}"
    assert shown == []


def test_failure_shows_modal_message(window, monkeypatch):
    """Failures open a warning with the combined message."""
    shown = []
    monkeypatch.setattr(QMessageBox, "warning", lambda *args: shown.append(args))

    outcome = GridFailure(DirectoryAccessError(None, "No directory selected"))
    window.show_outcome(outcome)

    assert len(shown) == 1
    assert shown[0][2] == "Error creating file grid: Directory access error: No directory selected"


def test_cli_builds_grid_config():
    """Geometry options map onto GridConfig."""
    args = build_parser().parse_args(
        ["--columns", "4", "--cell-width", "120", "--origin", "0", "10", "--vertical-gap", "5"]
    )

    config = grid_config_from_args(args)

    assert config.columns_count == 4
    assert config.cell_width == 120.0
    assert (config.origin_x, config.origin_y) == (0.0, 10.0)
    assert config.vertical_gap == 5.0
    assert config.cell_height == 100.0


def test_cli_rejects_zero_columns():
    """--columns 0 is a usage error."""
    with pytest.raises(ValidationError):
        grid_config_from_args(build_parser().parse_args(["--columns", "0"]))
    with pytest.raises(SystemExit) as excinfo:
        main(["--columns", "0"])
    assert excinfo.value.code == 2


def test_cli_rejects_non_directory(tmp_path, capsys):
    """A path that is not a directory exits with status 1."""
    target = tmp_path / "file.txt"
    target.write_text("x")

    assert main([str(target)]) == 1
    assert "is not a directory" in capsys.readouterr().err


def test_cli_hides_dotfiles_only_when_asked():
    """Dotfiles are listed unless --hide-hidden is given."""
    parser = build_parser()

    assert parser.parse_args([]).hide_hidden is False
    assert parser.parse_args(["--hide-hidden"]).hide_hidden is True

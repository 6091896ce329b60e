"""Main entry point for filegrid."""

import argparse
import logging
import sys
from pathlib import Path

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from filegrid.controller.command import CreateFileGridCommand
from filegrid.errors import ValidationError
from filegrid.layout.engine import GridConfig, GridLayoutEngine
from filegrid.model.scanner import DirectoryScanner
from filegrid.view.main_window import MainWindow, QtDirectoryPicker
from filegrid.view.scene import SceneGraph
from filegrid.view.style import DEFAULT_FILL_COLOR, DEFAULT_STROKE_COLOR, VertexStyle


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="filegrid",
        description="Lay out the files of a directory as a grid of labeled rectangles",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to lay out right away (default: pick one from the File Grid menu)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=3,
        metavar="N",
        help="Number of grid columns (default: 3)",
    )
    parser.add_argument(
        "--cell-width",
        type=float,
        default=200.0,
        metavar="W",
        help="Width of each rectangle (default: 200)",
    )
    parser.add_argument(
        "--cell-height",
        type=float,
        default=100.0,
        metavar="H",
        help="Height of each rectangle (default: 100)",
    )
    parser.add_argument(
        "--horizontal-gap",
        type=float,
        default=30.0,
        metavar="G",
        help="Space between columns (default: 30)",
    )
    parser.add_argument(
        "--vertical-gap",
        type=float,
        default=30.0,
        metavar="G",
        help="Space between rows (default: 30)",
    )
    parser.add_argument(
        "--origin",
        type=float,
        nargs=2,
        default=(50.0, 50.0),
        metavar=("X", "Y"),
        help="Position of the first rectangle (default: 50 50)",
    )
    parser.add_argument(
        "--fill-color",
        default=DEFAULT_FILL_COLOR,
        help=f"Rectangle fill color (default: {DEFAULT_FILL_COLOR})",
    )
    parser.add_argument(
        "--stroke-color",
        default=DEFAULT_STROKE_COLOR,
        help=f"Rectangle border color (default: {DEFAULT_STROKE_COLOR})",
    )
    parser.add_argument(
        "--hide-hidden",
        action="store_true",
        help="Skip hidden files (starting with '.')",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep filesystem enumeration order instead of sorting by name",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def grid_config_from_args(args: argparse.Namespace) -> GridConfig:
    """Build and validate the grid configuration from parsed arguments.

    Raises:
        ValidationError: If the geometry is invalid
    """
    origin_x, origin_y = args.origin
    config = GridConfig(
        origin_x=origin_x,
        origin_y=origin_y,
        cell_width=args.cell_width,
        cell_height=args.cell_height,
        horizontal_gap=args.horizontal_gap,
        vertical_gap=args.vertical_gap,
        columns_count=args.columns,
    )
    config.validate()
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = grid_config_from_args(args)
    except ValidationError as e:
        parser.error(str(e))

    if args.path is not None and not args.path.is_dir():
        print(f"Error: Path '{args.path}' is not a directory", file=sys.stderr)
        return 1

    app = QApplication(sys.argv[:1])

    graph = SceneGraph()
    window = MainWindow(graph)

    start_dir = args.path.resolve() if args.path is not None else None
    command = CreateFileGridCommand(
        graph,
        picker=QtDirectoryPicker(window, start_dir=start_dir),
        scanner=DirectoryScanner(show_hidden=not args.hide_hidden, sort_entries=not args.no_sort),
        engine=GridLayoutEngine(config),
        style=VertexStyle(fill_color=args.fill_color, stroke_color=args.stroke_color),
    )
    command.completed.connect(window.show_outcome)
    command.register(window)

    window.show()

    if start_dir is not None:
        # Run once the event loop is up so failures can show a dialog
        QTimer.singleShot(0, lambda: command.start(start_dir))

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

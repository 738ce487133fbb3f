"""Typer-based CLI entry point."""

from __future__ import annotations

import logging
import sys
from functools import wraps
from typing import Optional

import typer
from PySide6.QtCore import QPointF
from rich import print

from .errors import BoundingBoxError
from .geometry import RectGeometry
from .interaction_config import InteractionConfig

app = typer.Typer(help="Move and resize rectangles by dragging their borders")


def _handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BoundingBoxError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _build_config(
    handle_size: float,
    directions: Optional[str],
    x_extent: Optional[tuple[float, float]] = None,
    y_extent: Optional[tuple[float, float]] = None,
) -> InteractionConfig:
    config = InteractionConfig()
    config.set_handle_size(handle_size)
    if directions is not None:
        config.set_directions(code.strip() for code in directions.split(",") if code.strip())
    if x_extent is not None:
        config.set_x_extent(x_extent)
    if y_extent is not None:
        config.set_y_extent(y_extent)
    return config


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log interaction details")) -> None:
    """Interactive bounding box tools."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
@_handle_errors
def classify(
    x: float,
    y: float,
    rect: tuple[float, float, float, float] = typer.Option(..., help="Element as X Y WIDTH HEIGHT"),
    handle_size: float = typer.Option(3.0, help="Hit-zone thickness of every edge"),
    directions: Optional[str] = typer.Option(None, help="Comma separated allowed modes, e.g. n,s,M"),
) -> None:
    """Print which interaction mode a pointer at X, Y would start."""

    config = _build_config(handle_size, directions)
    handle = config.hit_tester().classify(QPointF(x, y), RectGeometry(*rect))
    print(f"[green]{handle.value or 'none'}")


@app.command()
@_handle_errors
def demo(
    handle_size: float = typer.Option(6.0, help="Hit-zone thickness of every edge"),
    x_extent: Optional[tuple[float, float]] = typer.Option(None, help="Allowed X range as MIN MAX"),
    y_extent: Optional[tuple[float, float]] = typer.Option(None, help="Allowed Y range as MIN MAX"),
) -> None:
    """Open a window with a rectangle that can be moved and resized."""

    from PySide6.QtCore import QRectF
    from PySide6.QtWidgets import QApplication, QGraphicsScene, QGraphicsView

    from .controller import InteractionController
    from .cursor import WidgetCursorHint
    from .graphics_item import InteractiveRectItem

    config = _build_config(handle_size, None, x_extent, y_extent)

    app_instance = QApplication.instance() or QApplication(sys.argv)
    scene = QGraphicsScene(0, 0, 800, 600)
    view = QGraphicsView(scene)
    view.setWindowTitle("boundingbox demo")

    controller = InteractionController(config, cursor_hint=WidgetCursorHint(view.viewport()))
    controller.on("resizeend", lambda element, d, i: print(f"[cyan]resized to {RectGeometry.of(element)}"))
    controller.on("dragend", lambda element, d, i: print(f"[cyan]moved to {RectGeometry.of(element)}"))
    scene.addItem(InteractiveRectItem(QRectF(100, 100, 200, 150), controller))

    view.resize(820, 620)
    view.show()
    raise typer.Exit(app_instance.exec())


if __name__ == "__main__":
    app()

"""Headless smoke tests for the pygame viewer (SDL dummy video driver)."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from pathviz.app.config import ViewerConfig
from pathviz.app.viewer import GRID_MARGIN, Viewer
from pathviz.core.types import CellType


@pytest.fixture
def viewer():
    v = Viewer(ViewerConfig(width=10, height=8, cell_size=20, seed=3))
    yield v
    pygame.quit()


def pixel_of(viewer, x, y):
    rows = min(viewer.session.grid.height, viewer.visible_rows)
    return (GRID_MARGIN + x * viewer.cell_size + 1,
            GRID_MARGIN + (rows - 1 - y) * viewer.cell_size + 1)


class TestViewer:

    def test_grid_grows_to_fill_window(self, viewer):
        grid = viewer.session.grid
        assert grid.width >= 10
        assert grid.height >= 8
        assert grid.height == viewer.visible_rows

    def test_cell_at_round_trips(self, viewer):
        assert viewer.cell_at(*pixel_of(viewer, 3, 0)) == (3, 0)
        assert viewer.cell_at(*pixel_of(viewer, 0, 5)) == (0, 5)
        assert viewer.cell_at(0, 0) is None

    def test_click_toggles_obstacle(self, viewer):
        viewer._click_grid(pixel_of(viewer, 4, 4))
        assert viewer.session.grid.type_at((4, 4)) is CellType.OBSTACLE

    def test_run_to_completion(self, viewer):
        viewer._toggle_run()
        assert viewer.running
        for _ in range(10_000):
            if not viewer.running:
                break
            viewer._do_step()
        assert viewer.state == "Done"

    def test_resize_never_shrinks(self, viewer):
        before = (viewer.session.grid.width, viewer.session.grid.height)
        viewer._layout(400, 300)
        assert (viewer.session.grid.width, viewer.session.grid.height) == before

    def test_draw_does_not_crash(self, viewer):
        viewer._maze()
        viewer._draw()

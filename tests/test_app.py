import pygame
import pytest

from fdfview.app import WIN_HEIGHT, WIN_WIDTH, Viewer, main
from fdfview.color import WHITE
from fdfview.heightmap import MapError


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("0 0 0\n0 0 0\n0 0 0\n")
    return path


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_main_without_file_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_with_too_many_arguments(capsys):
    assert main(["a.fdf", "b.fdf"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_with_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Error reading the file." in capsys.readouterr().err


def test_viewer_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        Viewer(tmp_path / "missing.fdf")


def test_viewer_loads_map_at_grid_positions(map_file):
    viewer = Viewer(map_file)
    assert (viewer.heightmap.width, viewer.heightmap.height) == (3, 3)
    for i, row in enumerate(viewer.heightmap.rows):
        for j, point in enumerate(row):
            assert (point.x, point.y) == (j, i)


def test_viewer_defaults_non_positive_size(map_file):
    viewer = Viewer(map_file, width=0, height=-5)
    assert (viewer.width, viewer.height) == (WIN_WIDTH, WIN_HEIGHT)
    assert (viewer.canvas.width, viewer.canvas.height) == (WIN_WIDTH, WIN_HEIGHT)


def test_viewer_render_centres_the_map(map_file):
    viewer = Viewer(map_file)
    canvas = viewer.render()
    assert canvas is viewer.canvas
    assert canvas.get_pixel(WIN_WIDTH // 2, WIN_HEIGHT // 2) == WHITE


def test_viewer_run_stops_on_close(map_file, headless, monkeypatch):
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
    viewer = Viewer(map_file, width=100, height=100)
    viewer.run()
    assert viewer.canvas.get_pixel(50, 50) == WHITE
    assert not pygame.display.get_init()


def test_viewer_run_stops_on_escape(map_file, headless, monkeypatch):
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    monkeypatch.setattr(pygame.event, "get", lambda: [escape])
    viewer = Viewer(map_file, width=100, height=100)
    viewer.run()
    assert viewer.canvas.get_pixel(50, 50) == WHITE


def test_main_runs_viewer_and_succeeds(map_file, headless, monkeypatch):
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
    assert main([str(map_file)]) == 0
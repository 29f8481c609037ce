import dataclasses

import pygame
import pytest

from fdfview.drawing import EDGE_COLOR, VERTEX_COLOR, Canvas, round_half_up
from fdfview.mapfile import parse_map
from fdfview.viewer import Action, Viewer, main


def make_viewer(text):
    return Viewer(parse_map(text), Canvas())


def pixel_under(canvas, point):
    return canvas.get_pixel(round_half_up(point.x), round_half_up(point.y))


def test_single_vertex_drawn_at_translation():
    viewer = make_viewer("0\n")
    canvas = viewer.render()
    transform = viewer.transform
    assert canvas.get_pixel(transform.tx, transform.ty) == VERTEX_COLOR
    assert sum(1 for pixel in canvas.pixels if pixel) == 1


def test_row_neighbours_are_joined_by_edge():
    viewer = make_viewer("0 0\n")
    canvas = viewer.render()
    assert pixel_under(canvas, viewer.height_map.iso[1]) == VERTEX_COLOR
    assert EDGE_COLOR in canvas.pixels


def test_column_neighbours_are_joined_by_edge():
    viewer = make_viewer("0\n0\n")
    canvas = viewer.render()
    assert len(viewer.height_map.iso) == 2
    assert EDGE_COLOR in canvas.pixels


def test_render_replaces_previous_frame():
    viewer = make_viewer("0\n")
    viewer.render()
    old = viewer.height_map.iso[0]
    viewer.apply(Action.RIGHT)
    new = viewer.height_map.iso[0]
    assert pixel_under(viewer.canvas, new) == VERTEX_COLOR
    assert pixel_under(viewer.canvas, old) == 0


@pytest.mark.parametrize(
    "action, dx, dy",
    [
        (Action.LEFT, -3, 0),
        (Action.RIGHT, 3, 0),
        (Action.UP, 0, -3),
        (Action.DOWN, 0, 3),
    ],
)
def test_moves_shift_translation(action, dx, dy):
    viewer = make_viewer("0 1\n")
    before = dataclasses.replace(viewer.transform)
    viewer.apply(action)
    assert viewer.transform.tx == before.tx + dx
    assert viewer.transform.ty == before.ty + dy
    assert viewer.transform.scale == before.scale


def test_zoom_in_rescales_vertices():
    viewer = make_viewer("0 0\n")
    start = viewer.transform.scale
    viewer.apply(Action.ZOOM_IN)
    assert viewer.transform.scale == start + 1
    assert viewer.height_map.vertices[1].x == viewer.transform.scale
    assert viewer.transform.prev == viewer.transform.scale


def test_zoom_out_stops_at_one():
    viewer = make_viewer("0\n")
    viewer.transform.scale = 1
    viewer.apply(Action.ZOOM_OUT)
    assert viewer.transform.scale == 1


def test_zoom_in_stops_at_limit():
    viewer = make_viewer("0\n")
    viewer.transform.scale = 1000
    viewer.apply(Action.ZOOM_IN)
    assert viewer.transform.scale == 1000


def test_quit_stops_running():
    viewer = make_viewer("0\n")
    viewer.apply(Action.QUIT)
    assert viewer.running is False


@pytest.mark.parametrize(
    "key, action",
    [
        (pygame.K_ESCAPE, Action.QUIT),
        (pygame.K_LEFT, Action.LEFT),
        (pygame.K_RIGHT, Action.RIGHT),
        (pygame.K_UP, Action.UP),
        (pygame.K_DOWN, Action.DOWN),
        (pygame.K_RSHIFT, Action.ZOOM_IN),
        (pygame.K_RCTRL, Action.ZOOM_OUT),
    ],
)
def test_key_bindings(key, action):
    viewer = make_viewer("0\n")
    assert viewer.handle_key(key) is action


def test_escape_key_stops_running():
    viewer = make_viewer("0\n")
    viewer.handle_key(pygame.K_ESCAPE)
    assert viewer.running is False


def test_unbound_key_changes_nothing():
    viewer = make_viewer("0 1\n")
    before = dataclasses.replace(viewer.transform)
    assert viewer.handle_key(pygame.K_a) is None
    assert viewer.transform == before
    assert viewer.running is True


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"], ["map.txt"]])
def test_main_rejects_bad_arguments(argv, capsys):
    assert main(argv) == 1
    assert "expected argument: one .fdf file" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "opening map failed" in capsys.readouterr().err


def test_main_reports_non_rectangular_map(tmp_path, capsys):
    path = tmp_path / "bad.fdf"
    path.write_text("0 0\n0\n")
    assert main([str(path)]) == 1
    assert "map must be rectangle" in capsys.readouterr().err
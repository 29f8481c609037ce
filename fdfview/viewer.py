"""Interactive window showing a height map in isometric projection."""

from __future__ import annotations

import enum
import sys
from array import array

import pygame

from .drawing import VERTEX_COLOR, Canvas, draw_line
from .mapfile import HeightMap, MapError, load_map
from .projection import to_iso

_MOVE_STEP = 3
_MIN_SCALE = 1
_MAX_SCALE = 1000
_FRAME_RATE = 60


class Action(enum.Enum):
    """What a key press asks the viewer to do."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    ZOOM_IN = enum.auto()
    ZOOM_OUT = enum.auto()
    QUIT = enum.auto()


_KEY_ACTIONS = {
    pygame.K_ESCAPE: Action.QUIT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.UP,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_RSHIFT: Action.ZOOM_IN,
    pygame.K_RCTRL: Action.ZOOM_OUT,
}

_MOVES = {
    Action.LEFT: (-_MOVE_STEP, 0),
    Action.RIGHT: (_MOVE_STEP, 0),
    Action.UP: (0, -_MOVE_STEP),
    Action.DOWN: (0, _MOVE_STEP),
}


class Viewer:
    """Draws a height map as a wireframe and reacts to view changes."""

    def __init__(self, height_map: HeightMap, canvas: Canvas | None = None) -> None:
        self.height_map = height_map
        self.canvas = canvas if canvas is not None else Canvas()
        self.running = True

    @property
    def transform(self):
        return self.height_map.transform

    def render(self) -> Canvas:
        """Project the map, blank the canvas, draw vertices and then edges."""
        iso = to_iso(self.height_map)
        canvas = self.canvas
        canvas.clear()
        for point in iso:
            canvas.put_pixel(point, VERTEX_COLOR)
        row_length = self.height_map.line_len
        for index, point in enumerate(iso):
            if index % row_length:
                draw_line(canvas, point, iso[index - 1])
            if index >= row_length:
                draw_line(canvas, point, iso[index - row_length])
        return canvas

    def apply(self, action: Action) -> None:
        """Change the view as ``action`` asks and redraw, or stop on QUIT."""
        if action is Action.QUIT:
            self.running = False
            return
        transform = self.transform
        if action in _MOVES:
            dx, dy = _MOVES[action]
            transform.tx += dx
            transform.ty += dy
        elif action is Action.ZOOM_IN and transform.scale < _MAX_SCALE:
            transform.scale += 1
        elif action is Action.ZOOM_OUT and transform.scale > _MIN_SCALE:
            transform.scale -= 1
        self.render()

    def handle_key(self, key: int) -> Action | None:
        """Apply the action bound to a pygame key code; return it, or None."""
        action = _KEY_ACTIONS.get(key)
        if action is not None:
            self.apply(action)
        return action

    def _surface(self) -> pygame.Surface:
        opaque = array("I", (pixel | 0xFF000000 for pixel in self.canvas.pixels))
        if sys.byteorder == "little":
            opaque.byteswap()
        size = (self.canvas.width, self.canvas.height)
        return pygame.image.frombuffer(opaque.tobytes(), size, "ARGB").copy()

    def run(self) -> None:
        """Open the window and show the map until it is closed or Escape is released."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.canvas.width, self.canvas.height))
            pygame.display.set_caption("fdf")
            self.running = True
            self.render()
            frame = self._surface()
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYUP:
                        action = self.handle_key(event.key)
                        if action not in (None, Action.QUIT):
                            frame = self._surface()
                    if not self.running:
                        break
                screen.blit(frame, (0, 0))
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load the .fdf file named on the command line and show it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1 or ".fdf" not in args[0]:
        print("expected argument: one .fdf file", file=sys.stderr)
        return 1
    try:
        height_map = load_map(args[0])
    except OSError as exc:
        print(f"opening map failed: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    Viewer(height_map).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
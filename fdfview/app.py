"""The interactive viewer window and its command-line entry point."""

from __future__ import annotations

import struct
import sys

import pygame

from fdfview.controls import Key, key_press, key_release
from fdfview.mapfile import HeightMap, MapError, load_map
from fdfview.raster import WIN_HEIGHT, WIN_WIDTH, FrameBuffer
from fdfview.renderer import draw_map
from fdfview.view import View

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_q: Key.Q,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_z: Key.Z,
    pygame.K_x: Key.X,
    pygame.K_e: Key.E,
    pygame.K_r: Key.R,
    pygame.K_d: Key.D,
    pygame.K_f: Key.F,
    pygame.K_c: Key.C,
    pygame.K_v: Key.V,
    pygame.K_UP: Key.UP_ARROW,
    pygame.K_DOWN: Key.DOWN_ARROW,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_BACKSPACE: Key.DELETE,
}


def _argb_bytes(framebuffer: FrameBuffer) -> bytes:
    """Pack the buffer as opaque ARGB, four bytes per pixel, row by row."""
    row_format = f">{framebuffer.width}I"
    return b"".join(
        struct.pack(row_format, *((c & 0xFFFFFF) | 0xFF000000 for c in row))
        for row in framebuffer.pixels
    )


def _handle_events(view: View) -> bool:
    """Apply pending window events; return True when the window should close."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return True
        key = _PYGAME_KEYS.get(getattr(event, "key", None))
        if key is None:
            continue
        if event.type == pygame.KEYDOWN and key_press(view, key):
            return True
        if event.type == pygame.KEYUP:
            key_release(view, key)
    return False


def run(heightmap: HeightMap) -> View:
    """Show ``heightmap`` in a window until it is closed; return the final view."""
    view = View(heightmap)
    framebuffer = FrameBuffer(WIN_WIDTH, WIN_HEIGHT)
    size = (WIN_WIDTH, WIN_HEIGHT)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("fdf")
        while not _handle_events(view):
            view.step()
            view.normalise()
            framebuffer.clear()
            draw_map(view, framebuffer)
            image = pygame.image.frombuffer(_argb_bytes(framebuffer), size, "ARGB")
            screen.blit(image, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()
    return view


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line and view it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: you should enter a map as arguement", file=sys.stderr)
        return 1
    try:
        heightmap = load_map(args[0])
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    run(heightmap)
    return 0


if __name__ == "__main__":
    sys.exit(main())
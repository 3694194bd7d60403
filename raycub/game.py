"""Game setup, the event loop and the command-line entry point."""

from __future__ import annotations

import sys
from array import array
from typing import Mapping, Optional, Sequence

import pygame
from PIL import Image

from raycub.cubfile import load_scene
from raycub.model import (
    PI,
    USAGE,
    CubError,
    Key,
    Player,
    Scene,
    Setting,
    Texture,
    TextureId,
)
from raycub.player import FrameClock, key_press, key_release
from raycub.render import Frame, render_frame

MAX_TEXTURE_SIZE = 1024
MAX_WIDTH = 4096
MAX_HEIGHT = 2160
MIN_FOV = 45
MAX_FOV = 90
TITLE = "Cub3D"
READY = "Game initialized successfully"

_SPAWN_ANGLES = {
    "N": 3 * PI / 2,
    "S": PI / 2,
    "E": 0.0,
    "W": PI,
}

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
}


def check_settings() -> tuple[int, int]:
    """Validate the field of view and resolution; return the window size."""
    if Setting.FOV > MAX_FOV or Setting.FOV < MIN_FOV:
        raise CubError("FOV must be between 45 and 90 degrees")
    if Setting.WIDTH > MAX_WIDTH or Setting.HEIGHT > MAX_HEIGHT:
        raise CubError("WIDTH/HEIGHT too big max is 4096x2160")
    return int(Setting.WIDTH), int(Setting.HEIGHT)


def load_texture(path: Optional[str]) -> Texture:
    """Load the image at ``path`` as a wall texture."""
    if not path:
        raise CubError("Loading textures failed")
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
    except OSError:
        raise CubError("Cannot load texture: ", path) from None
    width, height = rgb.size
    if width > MAX_TEXTURE_SIZE or height > MAX_TEXTURE_SIZE:
        raise CubError("Texture too large")
    pixels = [(r << 16) | (g << 8) | b for r, g, b in rgb.getdata()]
    return Texture(width, height, pixels, path)


def _load_textures(scene: Scene) -> dict[TextureId, Texture]:
    textures: dict[TextureId, Texture] = {}
    for tex_id in (TextureId.NORTH, TextureId.SOUTH, TextureId.EAST, TextureId.WEST):
        try:
            textures[tex_id] = load_texture(scene.texture_paths.get(tex_id))
        except CubError as exc:
            raise CubError("Loading textures failed") from exc
    return textures


def spawn_player(scene: Scene) -> Player:
    """Place a player on the last start marker of the map, facing its direction."""
    cell_x, cell_y = 0, 0
    for y, row in enumerate(scene.rows):
        for x, cell in enumerate(row):
            if cell in _SPAWN_ANGLES:
                cell_x, cell_y = x, y
    marker = ""
    if cell_y < len(scene.rows) and cell_x < len(scene.rows[cell_y]):
        marker = scene.rows[cell_y][cell_x]
    grid = Setting.GRID_SIZE
    return Player(
        x=float(cell_x * grid + grid // 2),
        y=float(cell_y * grid + grid // 2),
        angle=_SPAWN_ANGLES.get(marker, 0.0),
    )


def _frame_bytes(frame: Frame) -> bytes:
    packed = array("I", frame.pixels)
    if sys.byteorder == "little":
        packed.byteswap()
    raw = packed.tobytes()
    rgb = bytearray(len(frame.pixels) * 3)
    rgb[0::3] = raw[1::4]
    rgb[1::3] = raw[2::4]
    rgb[2::3] = raw[3::4]
    return bytes(rgb)


class Game:
    """A running view of one scene: player state, textures and frame buffer."""

    def __init__(
        self,
        scene: Scene,
        textures: Mapping[TextureId, Texture],
        player: Optional[Player] = None,
        clock: Optional[FrameClock] = None,
    ) -> None:
        missing = set(TextureId) - set(textures)
        if missing:
            raise CubError("Loading textures failed")
        self.scene = scene
        self.textures = dict(textures)
        self.player = player if player is not None else spawn_player(scene)
        self.clock = clock if clock is not None else FrameClock()
        self.frame = Frame()
        self.running = True

    def handle_event(self, event: "pygame.event.Event") -> bool:
        """React to one window event; return False once the game should stop."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            key = _PYGAME_KEYS.get(event.key)
            if key is not None and key_press(self.player, key):
                self.running = False
        elif event.type == pygame.KEYUP:
            key = _PYGAME_KEYS.get(event.key)
            if key is not None:
                key_release(self.player, key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.player.clear_moves()
        return self.running

    def step(self) -> Frame:
        """Advance one frame and render it."""
        return render_frame(
            self.frame, self.player, self.scene, self.textures, self.clock
        )

    def run(self) -> int:
        """Open the window and loop until the player quits."""
        pygame.init()
        try:
            size = (self.frame.width, self.frame.height)
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(TITLE)
            while self.running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        break
                if not self.running:
                    break
                self.step()
                surface = pygame.image.frombuffer(_frame_bytes(self.frame), size, "RGB")
                screen.blit(surface, (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()
        return 0


def _report(exc: CubError) -> None:
    chain: list[CubError] = []
    current: Optional[BaseException] = exc
    while isinstance(current, CubError):
        chain.append(current)
        current = current.__cause__
    for error in reversed(chain):
        print(f"Error\n{error}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Error\n{USAGE}", file=sys.stderr)
        return 1
    try:
        scene = load_scene(args[0])
        check_settings()
        textures = _load_textures(scene)
        game = Game(scene, textures)
    except CubError as exc:
        _report(exc)
        return 1
    print(READY)
    return game.run()


if __name__ == "__main__":
    sys.exit(main())
"""Pygame GUI frontend — fully self-contained.

Includes a level-select menu and gameplay with sprite rendering.
Sprites are loaded from ``assets/images`` when present; otherwise
tiles are drawn as flat shapes.  No terminal interaction required.
"""

from __future__ import annotations

import enum
from pathlib import Path

import pygame

from backend.engine.gameplay import Intent, LevelSession, SessionEvent, SessionView
from backend.models.board import Direction, Tile
from backend.models.level import LevelCatalog

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PEACH = (250, 179, 135)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 560, 640
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX_W = WIN_W - 2 * MARGIN
BOARD_MAX_H = WIN_H - BOARD_TOP - 110
TILE_MAX = 64
BANNER_MS = 2000

SPRITE_NAMES = (
    "wall",
    "target",
    "box",
    "box_on_target",
    "ground",
    "player_up",
    "player_down",
    "player_left",
    "player_right",
)

_TILE_SPRITES: dict[Tile, str] = {
    Tile.WALL: "wall",
    Tile.TARGET: "target",
    Tile.BOX: "box",
    Tile.BOX_ON_TARGET: "box_on_target",
}


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Asset provider
# ---------------------------------------------------------------------------
def load_sprites(images_dir: Path) -> dict[str, pygame.Surface]:
    """Load every available sprite PNG; missing files are simply skipped."""
    sprites: dict[str, pygame.Surface] = {}
    if not images_dir.is_dir():
        return sprites
    for name in SPRITE_NAMES:
        path = images_dir / f"{name}.png"
        if path.is_file():
            sprites[name] = pygame.image.load(str(path)).convert_alpha()
    return sprites


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, catalog: LevelCatalog, level_index: int, assets_dir: Path) -> None:
        self._catalog = catalog
        self._sel_level = level_index if catalog.has_level(level_index) else 0

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Sokoban")
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._sprites = load_sprites(assets_dir / "images")
        self._scaled: dict[str, pygame.Surface] = {}
        self._scaled_px = 0

        self._screen = _Screen.MENU
        self._session: LevelSession | None = None
        self._view: SessionView | None = None
        self._banner = ""
        self._banner_until = 0

        self._build_menu_btns()

    # ── menu buttons ────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw, bh, gap = 220, 42, 8
        self._level_btns: list[_Btn] = []
        y = 190
        for i, level in enumerate(self._catalog):
            self._level_btns.append(
                _Btn((_cx(bw), y, bw, bh), level.name or f"Level {i + 1}", self._f_btn_sm)
            )
            y += bh + gap

        y += 24
        self._play_btn = _Btn(
            (_cx(bw), y, bw, 50),
            "P L A Y",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw), y + 64, bw, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )
        self._menu_all: list[_Btn] = [*self._level_btns, self._play_btn, self._quit_btn]

    # ── helpers ─────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int]:
        """Return (tile_px, origin_x, origin_y) for the current grid."""
        grid = self._view.grid  # type: ignore[union-attr]
        tile_px = min(
            TILE_MAX,
            BOARD_MAX_W // max(1, grid.width),
            BOARD_MAX_H // max(1, grid.height),
        )
        ox = _cx(grid.width * tile_px)
        return tile_px, ox, BOARD_TOP

    def _sprite(self, name: str, tile_px: int) -> pygame.Surface | None:
        if name not in self._sprites:
            return None
        if tile_px != self._scaled_px:
            self._scaled = {
                n: pygame.transform.smoothscale(s, (tile_px, tile_px))
                for n, s in self._sprites.items()
            }
            self._scaled_px = tile_px
        return self._scaled[name]

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)

        _blit_center(
            self._surf,
            self._f_big.render("S O K O B A N", True, COL_TEXT),
            80,
        )
        _blit_center(
            self._surf,
            self._f_body.render("Select level", True, COL_SUBTEXT),
            150,
        )

        for i, btn in enumerate(self._level_btns):
            btn.bg = COL_GREEN if i == self._sel_level else COL_SURFACE0
            btn.fg = COL_BASE if i == self._sel_level else COL_TEXT
            btn.draw(self._surf)

        self._play_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

    def _draw_tile(self, tile: Tile, rect: pygame.Rect, tile_px: int) -> None:
        ground = self._sprite("ground", tile_px)
        if ground is not None:
            self._surf.blit(ground, rect.topleft)
        elif tile is not Tile.WALL:
            pygame.draw.rect(self._surf, COL_MANTLE, rect)

        if tile is Tile.EMPTY:
            return
        sprite = self._sprite(_TILE_SPRITES[tile], tile_px)
        if sprite is not None:
            self._surf.blit(sprite, rect.topleft)
            return

        inset = rect.inflate(-tile_px // 4, -tile_px // 4)
        if tile is Tile.WALL:
            pygame.draw.rect(self._surf, COL_SURFACE1, rect)
        elif tile is Tile.TARGET:
            pygame.draw.circle(self._surf, COL_YELLOW, rect.center, tile_px // 6, width=3)
        elif tile is Tile.BOX:
            pygame.draw.rect(self._surf, COL_PEACH, inset, border_radius=4)
        elif tile is Tile.BOX_ON_TARGET:
            pygame.draw.rect(self._surf, COL_GREEN, inset, border_radius=4)

    def _draw_player(self, rect: pygame.Rect, direction: Direction, tile_px: int) -> None:
        sprite = self._sprite(f"player_{direction.value}", tile_px)
        if sprite is not None:
            self._surf.blit(sprite, rect.topleft)
            return

        pygame.draw.circle(self._surf, COL_BLUE, rect.center, tile_px // 3)
        dx, dy = direction.delta
        nose = (rect.centerx + dx * tile_px // 4, rect.centery + dy * tile_px // 4)
        pygame.draw.circle(self._surf, COL_BASE, nose, max(2, tile_px // 10))

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        view = self._view
        assert view is not None
        tpx, ox, oy = self._tile_layout()

        title = view.level_name or f"Level {view.level_index + 1}"
        _blit_center(
            self._surf,
            self._f_title.render(
                f"{title}  ({view.level_index + 1}/{view.level_count})", True, COL_TEXT
            ),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Targets left: {view.pending_targets}", True, COL_YELLOW
            ),
            44,
        )

        for y, row in enumerate(view.grid.rows):
            for x, tile in enumerate(row):
                rect = pygame.Rect(ox + x * tpx, oy + y * tpx, tpx, tpx)
                self._draw_tile(tile, rect, tpx)

        player = view.player
        self._draw_player(
            pygame.Rect(ox + player.x * tpx, oy + player.y * tpx, tpx, tpx),
            player.direction,
            tpx,
        )

        footer_y = oy + view.grid.height * tpx + 16
        if self._banner and pygame.time.get_ticks() < self._banner_until:
            _blit_center(
                self._surf,
                self._f_title.render(self._banner, True, COL_GREEN),
                footer_y,
            )
        footer_y += 36

        _blit_center(
            self._surf,
            self._f_small.render(
                "Arrows / WASD  move     Z  undo     Y  redo"
                "     R  restart     Esc  menu",
                True,
                COL_OVERLAY0,
            ),
            footer_y,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for i, b in enumerate(self._level_btns):
                if b.hit(ev.pos):
                    self._sel_level = i
                    return True
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key in (pygame.K_UP, pygame.K_w):
                self._sel_level = max(0, self._sel_level - 1)
            elif ev.key in (pygame.K_DOWN, pygame.K_s):
                self._sel_level = min(len(self._catalog) - 1, self._sel_level + 1)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    _KEY_INTENTS: dict[int, Intent] = {
        pygame.K_UP: Intent.UP,
        pygame.K_w: Intent.UP,
        pygame.K_DOWN: Intent.DOWN,
        pygame.K_s: Intent.DOWN,
        pygame.K_LEFT: Intent.LEFT,
        pygame.K_a: Intent.LEFT,
        pygame.K_RIGHT: Intent.RIGHT,
        pygame.K_d: Intent.RIGHT,
        pygame.K_z: Intent.UNDO,
        pygame.K_u: Intent.UNDO,
        pygame.K_y: Intent.REDO,
        pygame.K_r: Intent.RESET,
    }

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        session = self._session
        assert session is not None
        if ev.type != pygame.KEYDOWN:
            return True
        if ev.key in (pygame.K_ESCAPE, pygame.K_m):
            self._screen = _Screen.MENU
            return True

        intent = self._KEY_INTENTS.get(ev.key)
        if intent is None:
            return True
        self._view = session.handle_intent(intent)
        self._announce(self._view.event)
        return True

    def _announce(self, event: SessionEvent) -> None:
        if event is SessionEvent.LEVEL_COMPLETE:
            self._banner = "★  Level complete!  ★"
        elif event is SessionEvent.ALL_LEVELS_COMPLETE:
            self._banner = "★  You completed all levels!  ★"
        else:
            return
        self._banner_until = pygame.time.get_ticks() + BANNER_MS

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        self._session = LevelSession(self._catalog, self._sel_level)
        self._view = self._session.view()
        self._banner = ""
        self._screen = _Screen.PLAYING

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(catalog: LevelCatalog, level_index: int = 0, assets_dir: Path = Path("assets")) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(catalog, level_index, assets_dir)
    app.run_loop()

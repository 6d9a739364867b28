"""
Rendering helpers for the Tetris front end.

- Layout dims derived from CONFIG["CELL_SIZE"].
- Pre-rendered cell sprites per color tag (solid, ghost outline, flash, dim).
- Pre-rendered static background: board well, HUD row layout with section rules, banner plate.
- HUD text surfaces cached; re-rendered only when values change.
- Board cache with all locked blocks, rebuilt only when the board value changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS, COLOR_TAGS, offsets
from tetris import SessionState, Snapshot

# Colors per color tag
COLORS: Dict[str, Tuple[int,int,int]] = {
    "cyan": (102,224,255),
    "blue": (106,119,255),
    "orange": (255,158,94),
    "yellow": (255,224,102),
    "green": (94,224,142),
    "purple": (200,119,255),
    "red": (255,102,119),
    "gray": (140,145,170),
}
FLASH = (245,245,255)

# Panel text rows: title, score, level, lines | best, holder | "Next:"
HUD_ROWS = 7
HUD_ROW_H = 24
HUD_PAD = 12
HUD_BREAKS = (4, 6)

BANNERS = {
    SessionState.MENU: "ENTER / SPACE to start",
    SessionState.PAUSED: "PAUSED (P to resume)",
    SessionState.GAME_OVER: "GAME OVER (ENTER to restart)",
}


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 220
    board_w, board_h = COLS * cell, ROWS * cell
    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=margin + board_w + margin + panel_w + margin,
        total_h=margin + board_h + margin,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin, panel_y=margin,
    )


@dataclass
class HudCache:
    values: Optional[tuple] = None
    lines: Optional[list] = None
    next_kind: Optional[str] = None
    preview: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key = None

    # ---------- Static background (board well, HUD sections, banner plate) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        well = pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)
        pygame.draw.rect(self.bg, (14,18,44), well)
        # only interior grid lines; the well border is drawn once on top
        for x in range(1, COLS):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, (30,38,72), (X, well.top), (X, well.bottom - 1))
        for y in range(1, ROWS):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, (30,38,72), (well.left, Y), (well.right - 1, Y))
        pygame.draw.rect(self.bg, (70,82,130), well.inflate(2, 2), 1)

        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel)
        pygame.draw.rect(self.bg, (50,60,100), panel, 1)
        self.hud_rows = [panel.top + HUD_PAD + i*HUD_ROW_H for i in range(HUD_ROWS)]
        for row in HUD_BREAKS:
            Y = self.hud_rows[row] - HUD_PAD // 2
            pygame.draw.line(self.bg, (50,60,100), (panel.left + 8, Y), (panel.right - 8, Y))

        self.pv_cell = max(14, int(d.cell*0.75))
        self.pv_x = panel.left + HUD_PAD
        self.pv_y = self.hud_rows[-1] + HUD_ROW_H + 4
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

        self.banner_plate = pygame.Surface((d.board_w, 3*d.cell), pygame.SRCALPHA)
        self.banner_plate.fill((5,6,18,200))

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.dim_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for tag, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[tag] = s
            dim = pygame.Surface((c-2, c-2))
            dim.fill(tuple(v // 3 for v in col))
            self.dim_surf[tag] = dim
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[tag] = g
        self.flash_surf = pygame.Surface((c-2, c-2))
        self.flash_surf.fill(FLASH)

    def cell_pos(self, bx: int, by: int, inset: int = 1) -> Tuple[int, int]:
        return (self.dims.board_x + bx*self.dims.cell + inset,
                self.dims.board_y + by*self.dims.cell + inset)

    # ---------- Board cache ----------
    def rebuild_board_surface(self, snap: Snapshot):
        """Rebuilds the locked-blocks surface; clearing rows follow the blink phase."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        clearing = set(snap.clearing_rows)
        for y, row in enumerate(snap.board):
            for x, tag in enumerate(row):
                if tag is None:
                    continue
                if y in clearing:
                    if snap.clear_phase == 1:
                        sprite = self.flash_surf
                    elif snap.clear_phase == 2:
                        sprite = self.dim_surf[tag]
                    else:
                        continue
                else:
                    sprite = self.cell_surf[tag]
                self.board_surface.blit(sprite, (x*c + 1, y*c + 1))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        key = (snap.board, snap.clearing_rows, snap.clear_phase)
        if key != self._board_key:
            self.rebuild_board_surface(snap)
            self._board_key = key
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if snap.active_color:
            for bx, by in snap.ghost_cells:
                screen.blit(self.ghost_surf[snap.active_color], self.cell_pos(bx, by, 4))
            for bx, by in snap.active_cells:
                screen.blit(self.cell_surf[snap.active_color], self.cell_pos(bx, by))
        self.draw_panel_hud(screen, snap)
        banner = BANNERS.get(snap.state)
        if banner:
            plate = self.banner_plate.get_rect(center=(self.dims.board_x + self.dims.board_w // 2,
                                                      self.dims.board_y + self.dims.board_h // 2))
            screen.blit(self.banner_plate, plate)
            msg = self.big_font.render(banner, True, (255,220,220))
            rect = msg.get_rect(center=(self.dims.board_x + self.dims.board_w // 2,
                                        self.dims.board_y + self.dims.board_h // 2))
            screen.blit(msg, rect)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        hs = snap.high_score
        values = (snap.score, snap.level, snap.lines, hs.score, hs.name, hs.country)
        if values != self.hud.values:
            self.hud.values = values
            holder = hs.name or "-"
            if hs.country:
                holder = f"{holder} ({hs.country})"
            self.hud.lines = [
                f.render("Classic Tetris", True, (197,202,233)),
                f.render(f"Score: {snap.score}", True, (200,210,240)),
                f.render(f"Level: {snap.level}", True, (200,210,240)),
                f.render(f"Lines: {snap.lines}", True, (200,210,240)),
                f.render(f"Best: {hs.score}", True, (200,210,240)),
                f.render(holder, True, (165,175,215)),
                f.render("Next:", True, (200,210,240)),
            ]
        if snap.next_kind != self.hud.next_kind:
            self.hud.next_kind = snap.next_kind
            self.hud.preview = self._preview(snap.next_kind)
        for surf, y in zip(self.hud.lines, self.hud_rows):
            screen.blit(surf, (d.panel_x + HUD_PAD, y))
        if self.hud.preview:
            screen.blit(self.hud.preview, (self.pv_x, self.pv_y))

    def _preview(self, kind: Optional[str]) -> Optional[pygame.Surface]:
        if kind is None:
            return None
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        for x, y in offsets(kind, 0):
            block = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
            block.fill(COLORS[COLOR_TAGS[kind]])
            s.blit(block, (x*self.pv_cell + 1, y*self.pv_cell + 1))
        return s

import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from tetris import Game
from tetris_render import HUD_ROW_H, HUD_ROWS, RenderAssets, compute_dims
from tests.test_game import FakeClock, SequenceRandom


class RenderAssetsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.font.init()

    def setUp(self):
        self.dims = compute_dims()
        font = pygame.font.Font(None, 22)
        self.render = RenderAssets(self.dims, font, pygame.font.Font(None, 30))
        self.screen = pygame.Surface((self.dims.total_w, self.dims.total_h))

    def test_preview_sits_below_hud_rows(self):
        rows = self.render.hud_rows
        self.assertEqual(len(rows), HUD_ROWS)
        self.assertEqual(rows[1] - rows[0], HUD_ROW_H)
        self.assertGreater(self.render.pv_y, rows[-1] + HUD_ROW_H)
        self.assertLess(self.render.pv_y + 4 * self.render.pv_cell, self.dims.panel_y + self.dims.board_h)

    def test_draws_menu_and_playing_frames(self):
        game = Game(rng=SequenceRandom("IT"), clock=FakeClock())
        self.render.draw(self.screen, game.snapshot())
        game.start_game()
        self.render.draw(self.screen, game.snapshot())
        self.assertEqual(self.render.hud.next_kind, "T")
        x, y = self.render.cell_pos(3, 1)
        self.assertEqual(self.screen.get_at((x + 2, y + 2))[:3], (102, 224, 255))


if __name__ == "__main__":
    unittest.main()

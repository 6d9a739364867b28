import logging
import pygame
from tetris import Game, SessionState
from tetris_config import CONFIG
from tetris_overlay import NewRecordForm
from tetris_render import RenderAssets, compute_dims
from tetris_storage import JsonFileStore


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def handle_key(game, key):
    if game.state in (SessionState.MENU, SessionState.GAME_OVER):
        if key in (pygame.K_SPACE, pygame.K_RETURN):
            game.start_game()
        return
    if key in (pygame.K_p, pygame.K_ESCAPE):
        game.toggle_pause(); return
    if game.state is not SessionState.PLAYING:
        return
    if key == pygame.K_LEFT: game.move_left()
    elif key == pygame.K_RIGHT: game.move_right()
    elif key == pygame.K_UP: game.rotate_cw()
    elif key == pygame.K_z: game.rotate_ccw()
    elif key == pygame.K_DOWN: game.soft_drop()
    elif key == pygame.K_SPACE: game.hard_drop()


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Classic Tetris - 7-bag, lock delay")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 30)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    game = Game(store=JsonFileStore(CONFIG["HIGH_SCORE_PATH"]), clock=pygame.time.get_ticks)
    form = NewRecordForm()

    while True:
        clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); return
            if e.type != pygame.KEYDOWN:
                continue
            if form.active:
                result = form.handle(e)
                if result and result[0] == "submit":
                    game.submit_record(result[1], result[2])
                elif result:
                    game.dismiss_record()
                continue
            handle_key(game, e.key)

        game.tick(pygame.time.get_ticks())

        if game.new_record and not form.active:
            form.open()

        snap = game.snapshot()
        render.draw(screen, snap)
        form.draw(screen, font, snap.high_score.score, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()


import pygame

MAX_LEN = 24


class NewRecordForm:
    """Name/country entry shown after a game ends with a new high score.

    Tab switches field, Enter submits, Esc skips. handle() returns
    ("submit", name, country), ("skip", "", "") or None while editing.
    """
    def __init__(self):
        self.active = False
        self.fields = [["Name", ""], ["Country", ""]]
        self.index = 0

    def open(self):
        self.active = True
        self.fields = [["Name", ""], ["Country", ""]]
        self.index = 0

    def close(self):
        self.active = False

    def handle(self, e):
        if not self.active or e.type != pygame.KEYDOWN:
            return None
        if e.key == pygame.K_ESCAPE:
            self.close(); return ("skip", "", "")
        if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.close(); return ("submit", self.fields[0][1], self.fields[1][1])
        if e.key in (pygame.K_TAB, pygame.K_UP, pygame.K_DOWN):
            self.index = (self.index + 1) % len(self.fields); return None
        field = self.fields[self.index]
        if e.key == pygame.K_BACKSPACE:
            field[1] = field[1][:-1]
        elif e.unicode and e.unicode.isprintable() and len(field[1]) < MAX_LEN:
            field[1] += e.unicode
        return None

    def draw(self, screen, font, score, w, h):
        if not self.active: return
        s = pygame.Surface((w - 80, 170), pygame.SRCALPHA); s.fill((20, 25, 40, 235))
        top = h // 2 - 85
        screen.blit(s, (40, top))
        screen.blit(font.render(f"NEW RECORD: {score}", True, (255, 230, 140)), (60, top + 16))
        y = top + 52
        for i, (label, value) in enumerate(self.fields):
            col = (255, 255, 255) if i == self.index else (200, 210, 235)
            cursor = "_" if i == self.index else ""
            screen.blit(font.render(f"{label}: {value}{cursor}", True, col), (60, y)); y += 30
        screen.blit(font.render("Tab switch • Enter save • Esc skip", True, (165, 175, 215)), (60, y + 10))

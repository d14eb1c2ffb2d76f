"""Pygame front-end: draws a SudokuGame and turns mouse and keyboard input into commands."""

import logging

import pygame

from .config import Difficulty, GameConfig
from .game import SudokuGame
from .grid import SIZE
from .storage import JsonFileStore, autosaver, load_game, save_game

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class SudokuApp:
    WINDOW_WIDTH = 780
    WINDOW_HEIGHT = 600

    # Color Palette
    BG_COLOR = (245, 247, 250)
    GRID_BG = (255, 255, 255)
    BLACK = (30, 30, 30)
    GRAY = (180, 190, 200)
    PRIMARY = (79, 70, 229)
    PRIMARY_LIGHT = (129, 140, 248)
    PRIMARY_DARK = (55, 48, 163)
    SUCCESS = (34, 197, 94)
    ERROR = (239, 68, 68)
    WARNING = (251, 191, 36)
    SELECTION = (224, 231, 255)
    TEXT_GRAY = (100, 116, 139)
    SUBGRID_LINE = (203, 213, 225)
    CONFLICT_HIGHLIGHT = (255, 200, 200)

    # Grid positioning
    GRID_SIZE = 468
    CELL_SIZE = GRID_SIZE // SIZE
    GRID_X = 30
    GRID_Y = 80

    PANEL_X = GRID_X + GRID_SIZE + 30
    PANEL_WIDTH = 220
    BUTTON_Y = 200
    BUTTON_HEIGHT = 40
    BUTTON_SPACING = 10

    SAVE_EVERY_SECONDS = 5

    def __init__(self, game=None, store=None, config=None):
        self.config = config or GameConfig.from_env()
        self.store = store if store is not None else JsonFileStore(self.config.save_path)
        self.save_callback = autosaver(self.store, self.config.save_key)

        if game is None:
            game = load_game(self.store, self.config.save_key, config=self.config)
            if game is not None:
                logger.info("Resumed saved game from %s", self.config.save_path)
        if game is None:
            game = SudokuGame.new(config=self.config)
        self.game = game
        self.game.autosave = self.save_callback

        self.screen = None
        self.fonts = {}
        self.message = ""
        self.message_timer = 0

        # Key Mapping for Numpad support
        self.key_mapping = {
            pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3, pygame.K_4: 4, pygame.K_5: 5,
            pygame.K_6: 6, pygame.K_7: 7, pygame.K_8: 8, pygame.K_9: 9,
            pygame.K_KP1: 1, pygame.K_KP2: 2, pygame.K_KP3: 3, pygame.K_KP4: 4, pygame.K_KP5: 5,
            pygame.K_KP6: 6, pygame.K_KP7: 7, pygame.K_KP8: 8, pygame.K_KP9: 9
        }
        self.erase_keys = {pygame.K_DELETE, pygame.K_BACKSPACE, pygame.K_0, pygame.K_KP0}
        self.moves = {
            pygame.K_UP: (-1, 0), pygame.K_DOWN: (1, 0),
            pygame.K_LEFT: (0, -1), pygame.K_RIGHT: (0, 1),
        }

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def new_game(self, difficulty=None):
        """Generates a fresh puzzle, showing a wait message while the search runs."""
        difficulty = Difficulty.from_any(difficulty or self.game.difficulty)
        if self.screen is not None:
            self.screen.fill(self.BG_COLOR)
            text = self.fonts["large"].render(f"Generating {difficulty.value} puzzle...", True, self.PRIMARY)
            self.screen.blit(text, text.get_rect(center=(self.WINDOW_WIDTH // 2, self.WINDOW_HEIGHT // 2)))
            pygame.display.flip()
        self.game.restart(difficulty)
        self.show_message(f"New {difficulty.value} game")

    def undo(self):
        if not self.game.undo():
            self.show_message("Nothing to undo")

    def hint(self):
        hint = self.game.hint()
        if hint is not None:
            self.show_message(hint.reason)

    def solve(self):
        if self.game.solve_instantly():
            self.show_message("Solved")

    def toggle_notes(self):
        self.game.toggle_note_mode()
        self.show_message("Notes on" if self.game.note_mode else "Notes off")

    def show_message(self, text, frames=120):
        self.message = text
        self.message_timer = frames

    def buttons(self):
        """(label, rect, action) for every panel button, top to bottom."""
        entries = [
            ("New Game", self.new_game),
            ("Undo", self.undo),
            ("Notes", self.toggle_notes),
            ("Hint", self.hint),
            ("Solve", self.solve),
        ]
        out = []
        for i, (label, action) in enumerate(entries):
            y = self.BUTTON_Y + i * (self.BUTTON_HEIGHT + self.BUTTON_SPACING)
            out.append((label, pygame.Rect(self.PANEL_X, y, self.PANEL_WIDTH, self.BUTTON_HEIGHT), action))

        diff_y = self.BUTTON_Y + len(entries) * (self.BUTTON_HEIGHT + self.BUTTON_SPACING) + 20
        width = (self.PANEL_WIDTH - 2 * self.BUTTON_SPACING) // 3
        for i, difficulty in enumerate(Difficulty):
            x = self.PANEL_X + i * (width + self.BUTTON_SPACING)
            rect = pygame.Rect(x, diff_y, width, 34)
            out.append((difficulty.value.upper(), rect, lambda d=difficulty: self.new_game(d)))
        return out

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def cell_at(self, pos):
        x, y = pos
        if (self.GRID_X <= x < self.GRID_X + self.CELL_SIZE * SIZE and
                self.GRID_Y <= y < self.GRID_Y + self.CELL_SIZE * SIZE):
            return (y - self.GRID_Y) // self.CELL_SIZE, (x - self.GRID_X) // self.CELL_SIZE
        return None

    def handle_click(self, pos):
        """Processes mouse clicks for grid selection and panel buttons."""
        cell = self.cell_at(pos)
        if cell is not None:
            self.game.select(*cell)
            return
        for _, rect, action in self.buttons():
            if rect.collidepoint(pos):
                action()
                return

    def handle_key(self, key, mods=0):
        """Processes keyboard input for digits, erasing, navigation and shortcuts."""
        if key == pygame.K_z and mods & pygame.KMOD_CTRL:
            self.undo()
            return
        shortcuts = {
            pygame.K_u: self.undo,
            pygame.K_n: self.toggle_notes,
            pygame.K_h: self.hint,
            pygame.K_s: self.solve,
        }
        if key in shortcuts:
            shortcuts[key]()
            return

        if key in self.moves:
            if self.game.selected is None:
                self.game.select(0, 0)
                return
            row, col = self.game.selected
            d_row, d_col = self.moves[key]
            row, col = row + d_row, col + d_col
            if 0 <= row < SIZE and 0 <= col < SIZE:
                self.game.select(row, col)
            return

        if self.game.selected is None:
            return
        row, col = self.game.selected
        if key in self.erase_keys:
            self.game.clear_cell(row, col)
        elif key in self.key_mapping:
            self.game.set_value(row, col, self.key_mapping[key])

    def handle_tick(self):
        """One second of wall-clock time; persists the clock every few seconds."""
        if self.game.tick() and self.game.elapsed_seconds % self.SAVE_EVERY_SECONDS == 0:
            save_game(self.store, self.game, self.config.save_key)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw_grid(self):
        """Draws cell backgrounds, selection, conflicts and the grid lines."""
        game = self.game
        conflicts = game.conflicts()
        pygame.draw.rect(self.screen, self.GRID_BG,
                         (self.GRID_X, self.GRID_Y, self.CELL_SIZE * SIZE, self.CELL_SIZE * SIZE))

        for row in range(SIZE):
            for col in range(SIZE):
                rect = (self.GRID_X + col * self.CELL_SIZE, self.GRID_Y + row * self.CELL_SIZE,
                        self.CELL_SIZE, self.CELL_SIZE)
                if game.selected is not None:
                    sel_row, sel_col = game.selected
                    if (row, col) == game.selected:
                        pygame.draw.rect(self.screen, self.PRIMARY_LIGHT, rect)
                    elif row == sel_row or col == sel_col or (row // 3, col // 3) == (sel_row // 3, sel_col // 3):
                        pygame.draw.rect(self.screen, self.SELECTION, rect)
                if (row, col) in conflicts:
                    pygame.draw.rect(self.screen, self.CONFLICT_HIGHLIGHT, rect)

        for i in range(SIZE + 1):
            thickness = 3 if i % 3 == 0 else 1
            color = self.BLACK if i % 3 == 0 else self.SUBGRID_LINE
            offset = i * self.CELL_SIZE
            pygame.draw.line(self.screen, color, (self.GRID_X, self.GRID_Y + offset),
                             (self.GRID_X + self.CELL_SIZE * SIZE, self.GRID_Y + offset), thickness)
            pygame.draw.line(self.screen, color, (self.GRID_X + offset, self.GRID_Y),
                             (self.GRID_X + offset, self.GRID_Y + self.CELL_SIZE * SIZE), thickness)

    def draw_numbers(self):
        """Renders digits, and notes as a small 3x3 layout inside empty cells."""
        game = self.game
        third = self.CELL_SIZE // 3
        for row in range(SIZE):
            for col in range(SIZE):
                x = self.GRID_X + col * self.CELL_SIZE
                y = self.GRID_Y + row * self.CELL_SIZE
                value = game.board[row][col]
                if value:
                    if game.is_given(row, col):
                        color = self.BLACK
                    else:
                        color = self.ERROR if game.has_conflict(row, col) else self.PRIMARY
                    text = self.fonts["large"].render(str(value), True, color)
                    self.screen.blit(text, text.get_rect(center=(x + self.CELL_SIZE // 2, y + self.CELL_SIZE // 2)))
                    continue
                for num in sorted(game.notes[row][col]):
                    note_row, note_col = divmod(num - 1, 3)
                    text = self.fonts["tiny"].render(str(num), True, self.TEXT_GRAY)
                    center = (x + note_col * third + third // 2, y + note_row * third + third // 2)
                    self.screen.blit(text, text.get_rect(center=center))

    def draw_panel(self):
        """Draws stats, buttons and the current message."""
        game = self.game
        title = self.fonts["title"].render("Sudoku", True, self.PRIMARY_DARK)
        self.screen.blit(title, title.get_rect(center=(self.WINDOW_WIDTH // 2, 40)))

        minutes, seconds = divmod(game.elapsed_seconds, 60)
        stats = [
            f"TIME  {minutes:02d}:{seconds:02d}",
            f"MISTAKES  {game.mistakes}",
            f"LEVEL  {game.difficulty.value.upper()}",
            f"NOTES  {'ON' if game.note_mode else 'OFF'}",
        ]
        for i, line in enumerate(stats):
            text = self.fonts["small"].render(line, True, self.TEXT_GRAY)
            self.screen.blit(text, (self.PANEL_X, self.GRID_Y + i * 28))

        for label, rect, _ in self.buttons():
            active = (label == game.difficulty.value.upper()) or (label == "Notes" and game.note_mode)
            color = self.PRIMARY_DARK if active else self.PRIMARY
            if label == "Undo" and not game.can_undo:
                color = self.GRAY
            pygame.draw.rect(self.screen, color, rect, border_radius=8)
            text = self.fonts["small"].render(label, True, (255, 255, 255))
            self.screen.blit(text, text.get_rect(center=rect.center))

        if game.is_solved:
            self.message, self.message_timer = "Solved!", 1
        if self.message and self.message_timer > 0:
            color = self.SUCCESS if game.is_solved else self.TEXT_GRAY
            text = self.fonts["medium"].render(self.message, True, color)
            self.screen.blit(text, (self.GRID_X, self.GRID_Y + self.CELL_SIZE * SIZE + 15))
            self.message_timer -= 1

    def run(self):
        """Main game loop."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.WINDOW_WIDTH, self.WINDOW_HEIGHT))
        pygame.display.set_caption("Sudoku")
        self.fonts = {
            "title": pygame.font.Font(None, 48),
            "large": pygame.font.Font(None, 42),
            "medium": pygame.font.Font(None, 32),
            "small": pygame.font.Font(None, 24),
            "tiny": pygame.font.Font(None, 18),
        }
        pygame.time.set_timer(TICK_EVENT, 1000)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key, event.mod)
                elif event.type == TICK_EVENT:
                    self.handle_tick()

            self.screen.fill(self.BG_COLOR)
            self.draw_grid()
            self.draw_numbers()
            self.draw_panel()
            pygame.display.flip()
            clock.tick(30)

        save_game(self.store, self.game, self.config.save_key)
        pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    SudokuApp().run()


if __name__ == "__main__":
    main()

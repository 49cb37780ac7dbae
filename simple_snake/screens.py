"""Scene drawing for each screen, expressed through the display adapter."""

import pygame

from .config import (
    BORDER_COLOR,
    DARK_BG,
    FOOD_COLOR,
    GAME_OVER_COLOR,
    GRID_LINE,
    SCORE_COLOR,
    SNAKE_BODY_COLOR,
    SNAKE_HEAD_COLOR,
    TITLE_COLOR,
    WHITE,
)

MENU_OPTIONS = ("New Game", "Exit")


def _centered(size, center) -> pygame.Rect:
    rect = pygame.Rect((0, 0), size)
    rect.center = center
    return rect


def _blit_text(display, text, color, center, bold=False) -> pygame.Rect:
    surface, size = display.render_text(text, color, bold)
    rect = _centered(size, center)
    display.blit(surface, rect)
    return rect


def draw_background(display, grid):
    display.clear(DARK_BG)
    display.draw_rect(grid.area, BORDER_COLOR, filled=False)


def menu_labels(selected: int):
    """Option labels with a marker on the selected one"""
    return [
        ("> " if i == selected else "  ") + option
        for i, option in enumerate(MENU_OPTIONS)
    ]


def draw_menu(display, session):
    grid = session.grid
    draw_background(display, grid)
    cx, cy = grid.area.center
    _blit_text(display, "SNAKE", TITLE_COLOR, (cx, cy - 3 * grid.spacing), bold=True)

    # Left-align the options on the first one so the marker does not shift them
    first = None
    for i, label in enumerate(menu_labels(session.menu_option)):
        surface, size = display.render_text(label, WHITE, bold=i == session.menu_option)
        rect = _centered(size, (cx, cy + 2 * i * grid.spacing))
        if first is None:
            first = rect
        rect.left = first.left
        display.blit(surface, rect)
    display.present_frame()


def draw_playfield(display, session):
    """Border, optional grid lines, food, snake and score; not presented"""
    grid = session.grid
    game_round = session.round
    draw_background(display, grid)

    if session.show_grid:
        for rect in grid.cells:
            display.draw_rect(rect, GRID_LINE, filled=False)

    display.draw_rect(grid.cell_rect(game_round.food), FOOD_COLOR)
    body = list(game_round.snake.body)
    for cell in body[1:]:
        display.draw_rect(grid.cell_rect(cell), SNAKE_BODY_COLOR)
    display.draw_rect(grid.cell_rect(body[0]), SNAKE_HEAD_COLOR)

    surface, size = display.render_text(f"Score: {game_round.score}", SCORE_COLOR, bold=True)
    rect = pygame.Rect((grid.spacing, 0), size)
    rect.centery = grid.spacing // 2
    display.blit(surface, rect)


def draw_frame(display, session):
    draw_playfield(display, session)
    display.present_frame()


def draw_paused(display, session):
    draw_playfield(display, session)
    cx, cy = session.grid.area.center
    _blit_text(display, "Paused", TITLE_COLOR, (cx, cy), bold=True)
    _blit_text(display, "Press SPACE to continue", SCORE_COLOR, (cx, cy + 2 * session.grid.spacing))
    display.present_frame()


def draw_game_over(display, session):
    grid = session.grid
    draw_background(display, grid)
    cx, cy = grid.area.center
    _blit_text(display, "You lost! Press any key to continue...", GAME_OVER_COLOR, (cx, cy), bold=True)
    _blit_text(display, f"Score: {session.round.score}", SCORE_COLOR, (cx, cy + 2 * grid.spacing))
    display.present_frame()

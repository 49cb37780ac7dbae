"""pygame window adapter: the only place that draws to the screen."""

import logging
from typing import Optional, Tuple

import pygame

from .config import CAPTION, FONT_SIZE

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class PygameDisplay:
    """Window surface plus the font used for all text"""

    def __init__(self, width: int, height: int, font_path: Optional[str] = None, font_size: int = FONT_SIZE):
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(CAPTION)
        self.font = self._load_font(font_path, font_size)

    @staticmethod
    def _load_font(font_path: Optional[str], font_size: int) -> pygame.font.Font:
        if font_path is None:
            return pygame.font.Font(None, font_size)
        try:
            return pygame.font.Font(font_path, font_size)
        except OSError as e:
            logger.warning("Could not load font %s (%s), using the default font", font_path, e)
            return pygame.font.Font(None, font_size)

    def clear(self, color: Color):
        self.screen.fill(color)

    def draw_rect(self, rect: pygame.Rect, color: Color, filled: bool = True):
        """Filled rectangle, or a one pixel outline"""
        pygame.draw.rect(self.screen, color, rect, 0 if filled else 1)

    def render_text(self, text: str, color: Color, bold: bool = False) -> Tuple[pygame.Surface, Tuple[int, int]]:
        """Rasterize text; the caller positions it from the returned size"""
        self.font.set_bold(bold)
        surface = self.font.render(text, True, color)
        return surface, surface.get_size()

    def blit(self, surface: pygame.Surface, rect: pygame.Rect):
        self.screen.blit(surface, rect)

    def present_frame(self):
        pygame.display.flip()

"""Game constants and run-time settings."""

from dataclasses import dataclass
from typing import Optional

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
SPACING = 20  # Margin around the game area, also the score bar height
CELL_SIZE = 20
CAPTION = "Simple Snake"

# Timer intervals (milliseconds per tick)
NORMAL_SPEED_MS = 200
FAST_SPEED_MS = 50

START_LENGTH = 5
FONT_SIZE = 24

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DARK_BG = (10, 12, 20)
BORDER_COLOR = (255, 70, 100)
GRID_LINE = (40, 50, 70)

SNAKE_HEAD_COLOR = (80, 255, 120)
SNAKE_BODY_COLOR = (60, 120, 220)
FOOD_COLOR = (255, 200, 50)

SCORE_COLOR = (180, 180, 220)
TITLE_COLOR = (100, 200, 255)
GAME_OVER_COLOR = (255, 80, 100)


@dataclass
class Settings:
    """Values a single run of the game is configured with"""
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    spacing: int = SPACING
    cell_size: int = CELL_SIZE
    normal_speed_ms: int = NORMAL_SPEED_MS
    fast_speed_ms: int = FAST_SPEED_MS
    font_path: Optional[str] = None
    font_size: int = FONT_SIZE
    seed: Optional[int] = None
    headless: bool = False
    demo_ticks: int = 100

    @classmethod
    def from_args(cls, args) -> "Settings":
        """Build settings from a parsed argparse namespace"""
        return cls(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            normal_speed_ms=args.normal_speed,
            fast_speed_ms=args.fast_speed,
            font_path=args.font,
            seed=args.seed,
            headless=args.headless,
            demo_ticks=args.demo_ticks,
        )

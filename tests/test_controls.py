"""Tests for the per-screen keyboard mapping."""

import pygame
import pytest

from simple_snake.controls import Action, Command, InputRouter
from simple_snake.events import KeyDown, KeyUp, Quit, Tick
from simple_snake.snake import Direction


@pytest.fixture
def router():
    return InputRouter()


class TestMenu:
    """Tests for InputRouter.menu()."""

    @pytest.mark.parametrize("key", [pygame.K_UP, pygame.K_DOWN, pygame.K_j, pygame.K_k])
    def test_navigation_keys_toggle(self, router, key):
        assert router.menu(KeyDown(key)) == Command(Action.MENU_TOGGLE)

    def test_return_confirms(self, router):
        assert router.menu(KeyDown(pygame.K_RETURN)) == Command(Action.MENU_CONFIRM)

    @pytest.mark.parametrize("event", [Quit(), KeyDown(pygame.K_ESCAPE)])
    def test_escape_and_close_exit(self, router, event):
        assert router.menu(event) == Command(Action.EXIT)

    @pytest.mark.parametrize("event", [Tick(), KeyUp(pygame.K_UP), KeyDown(pygame.K_a)])
    def test_other_events_ignored(self, router, event):
        assert router.menu(event) is None


class TestPlaying:
    """Tests for InputRouter.playing()."""

    @pytest.mark.parametrize("key,direction", [
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_h, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_l, Direction.RIGHT),
        (pygame.K_UP, Direction.UP),
        (pygame.K_k, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_j, Direction.DOWN),
    ])
    def test_direction_keys(self, router, key, direction):
        assert router.playing(KeyDown(key)) == Command(Action.TURN, direction)

    def test_tick(self, router):
        assert router.playing(Tick()) == Command(Action.TICK)

    def test_holding_return_speeds_up(self, router):
        assert router.playing(KeyDown(pygame.K_RETURN)) == Command(Action.SPEED_FAST)
        assert router.playing(KeyUp(pygame.K_RETURN)) == Command(Action.SPEED_NORMAL)

    def test_grid_toggle(self, router):
        assert router.playing(KeyDown(pygame.K_g)) == Command(Action.TOGGLE_GRID)

    def test_space_pauses(self, router):
        assert router.playing(KeyDown(pygame.K_SPACE)) == Command(Action.PAUSE)

    @pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_q])
    def test_escape_forfeits(self, router, key):
        assert router.playing(KeyDown(key)) == Command(Action.FORFEIT)

    def test_window_close_exits(self, router):
        assert router.playing(Quit()) == Command(Action.EXIT)

    @pytest.mark.parametrize("event", [KeyDown(pygame.K_a), KeyUp(pygame.K_LEFT)])
    def test_unmapped_keys_ignored(self, router, event):
        assert router.playing(event) is None


class TestPausedAndGameOver:
    """Tests for InputRouter.paused() and game_over()."""

    def test_space_resumes(self, router):
        assert router.paused(KeyDown(pygame.K_SPACE)) == Command(Action.RESUME)

    def test_paused_ignores_ticks_and_steering(self, router):
        assert router.paused(Tick()) is None
        assert router.paused(KeyDown(pygame.K_LEFT)) is None

    @pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_q])
    def test_paused_escape_forfeits(self, router, key):
        assert router.paused(KeyDown(key)) == Command(Action.FORFEIT)

    def test_paused_window_close_exits(self, router):
        assert router.paused(Quit()) == Command(Action.EXIT)

    def test_paused_tracks_return_key(self, router):
        """Return is still followed while paused so the speed is right on resume."""
        assert router.paused(KeyDown(pygame.K_RETURN)) == Command(Action.SPEED_FAST)
        assert router.paused(KeyUp(pygame.K_RETURN)) == Command(Action.SPEED_NORMAL)

    @pytest.mark.parametrize("key", [pygame.K_a, pygame.K_SPACE, pygame.K_RETURN, pygame.K_q])
    def test_any_key_continues_after_game_over(self, router, key):
        assert router.game_over(KeyDown(key)) == Command(Action.CONTINUE)

    @pytest.mark.parametrize("event", [Quit(), KeyDown(pygame.K_ESCAPE)])
    def test_game_over_escape_exits(self, router, event):
        assert router.game_over(event) == Command(Action.EXIT)

    def test_game_over_ignores_key_release_and_ticks(self, router):
        assert router.game_over(KeyUp(pygame.K_a)) is None
        assert router.game_over(Tick()) is None

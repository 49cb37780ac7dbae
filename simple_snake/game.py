"""
Game session and the screen state machine driving it.

`Game.run` is the root loop: it runs the loop of the active screen, which
blocks on events until it requests a transition, then moves to the state
the transition table names. Everything a screen mutates lives on Session.
"""

import logging
import random
from typing import Optional

from . import screens
from .config import Settings
from .controls import Action, InputRouter
from .engine import Round, TickOutcome
from .grid import Grid, build_grid
from .snake import Snake
from .states import GameState, GameTransition, next_state

logger = logging.getLogger(__name__)


class Session:
    """All mutable state of one game session"""

    def __init__(self, settings: Settings, grid: Grid, rng: random.Random):
        self.settings = settings
        self.grid = grid
        self.rng = rng
        self.state = GameState.STARTING
        self.round: Optional[Round] = None
        self.outcome: Optional[TickOutcome] = None
        self.menu_option = 0
        self.fast = False
        self.show_grid = False
        self.rounds_played = 0

    @property
    def speed_ms(self) -> int:
        return self.settings.fast_speed_ms if self.fast else self.settings.normal_speed_ms

    def new_round(self):
        self.round = Round(self.grid, self.rng)
        self.outcome = None
        self.fast = False
        self.rounds_played += 1
        logger.info("Round %d started, food at %s", self.rounds_played, self.round.food)


class Game:
    """Screen state machine over a display and an event source"""

    def __init__(self, settings: Settings, display, events, rng: Optional[random.Random] = None,
                 router: Optional[InputRouter] = None):
        self.display = display
        self.events = events
        self.router = router or InputRouter()
        grid = build_grid(settings.width, settings.height, settings.spacing, settings.cell_size)
        # Fail on a grid too small for the starting snake before any screen is shown
        Snake.spawn(grid)
        self.session = Session(settings, grid, rng or random.Random(settings.seed))
        self.loops = {
            GameState.STARTING: self.starting_loop,
            GameState.PLAYING: self.playing_loop,
            GameState.PAUSED: self.paused_loop,
            GameState.GAMEOVER: self.game_over_loop,
        }

    def step(self, transition: GameTransition) -> bool:
        """Apply a transition to the current state; False once the session ends"""
        session = self.session
        current = session.state
        target = next_state(current, transition)
        logger.info("%s --%s--> %s", current.name, transition.name, target.name if target else "EXIT")
        if target is None:
            return False
        if current is GameState.STARTING and target is GameState.PLAYING:
            session.new_round()
        session.state = target
        return True

    def run(self):
        """Run screens until one of them exits"""
        try:
            while self.step(self.loops[self.session.state]()):
                pass
        finally:
            self.events.stop_timer()
        if self.session.round is not None:
            logger.info("Session over after %d round(s), last score %d",
                        self.session.rounds_played, self.session.round.score)

    def starting_loop(self) -> GameTransition:
        """Menu with "New Game" and "Exit" options"""
        session = self.session
        session.menu_option = 0
        screens.draw_menu(self.display, session)

        while True:
            command = self.router.menu(self.events.next_event())
            if command is None:
                continue
            if command.action is Action.EXIT:
                return GameTransition.EXIT
            if command.action is Action.MENU_TOGGLE:
                session.menu_option = 1 - session.menu_option
                screens.draw_menu(self.display, session)
            elif command.action is Action.MENU_CONFIRM:
                if session.menu_option == 1:
                    return GameTransition.EXIT
                return GameTransition.PLAY

    def playing_loop(self) -> GameTransition:
        """
        The running round. Leaves to:
            - PAUSED on the pause key
            - GAMEOVER on a collision or a forfeit
            - EXIT when the window is closed
        """
        session = self.session
        self.events.start_timer(session.speed_ms)
        screens.draw_frame(self.display, session)
        try:
            while True:
                command = self.router.playing(self.events.next_event())
                if command is None:
                    continue
                action = command.action

                if action is Action.TICK:
                    outcome = session.round.advance()
                    if outcome.ends_round:
                        session.outcome = outcome
                        return GameTransition.LOSE
                    screens.draw_frame(self.display, session)
                elif action is Action.TURN:
                    session.round.steer(command.direction)
                elif action in (Action.SPEED_FAST, Action.SPEED_NORMAL):
                    fast = action is Action.SPEED_FAST
                    if fast != session.fast:
                        session.fast = fast
                        self.events.start_timer(session.speed_ms)
                elif action is Action.TOGGLE_GRID:
                    session.show_grid = not session.show_grid
                    screens.draw_frame(self.display, session)
                elif action is Action.PAUSE:
                    return GameTransition.PAUSE
                elif action is Action.FORFEIT:
                    return GameTransition.LOSE
                elif action is Action.EXIT:
                    return GameTransition.EXIT
        finally:
            self.events.stop_timer()

    def paused_loop(self) -> GameTransition:
        """Frozen round; Return is still tracked so resuming picks the right speed"""
        screens.draw_paused(self.display, self.session)
        while True:
            command = self.router.paused(self.events.next_event())
            if command is None:
                continue
            if command.action is Action.RESUME:
                return GameTransition.PLAY
            if command.action in (Action.SPEED_FAST, Action.SPEED_NORMAL):
                self.session.fast = command.action is Action.SPEED_FAST
            elif command.action is Action.FORFEIT:
                return GameTransition.LOSE
            elif command.action is Action.EXIT:
                return GameTransition.EXIT

    def game_over_loop(self) -> GameTransition:
        screens.draw_game_over(self.display, self.session)
        while True:
            command = self.router.game_over(self.events.next_event())
            if command is None:
                continue
            if command.action is Action.CONTINUE:
                return GameTransition.PLAY
            if command.action is Action.EXIT:
                return GameTransition.EXIT

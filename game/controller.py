"""Turn sequencing for a tic-tac-toe session."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ai.base_ai import BaseAI
from ai.difficulty import Difficulty, DifficultyPolicy
from engine.marks import Cell, Mark
from engine.rules import GameResult, Line, Status, is_legal_move
from game.config import GameConfig, Mode
from game.session import Session

LOGGER = logging.getLogger(__name__)


class EventKind(str, Enum):
    """Notifications emitted for the presentation layer."""

    RESET = "reset"
    TURN_CHANGE = "turn_change"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameEvent:
    """Something the presentation layer should render."""

    kind: EventKind
    player: Optional[Mark] = None
    line: Optional[Line] = None
    label: str = ""


@dataclass(frozen=True)
class MoveOutcome:
    """Answer to a move request.

    ``next_actor`` is None once the game is over. ``computer_move`` holds the
    cell the computer played when the controller answered on its behalf.
    """

    accepted: bool
    result: GameResult
    next_actor: Optional[Mark]
    computer_move: Optional[int] = None


GameListener = Callable[[GameEvent], None]


class GameController:
    """Owns a Session and applies moves for both players.

    With ``auto_computer`` the computer replies inside apply_human_move and
    reset_game. Without it, the caller decides when to call
    apply_computer_move, which lets a front-end pause before the reply.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        session: Optional[Session] = None,
        policy: Optional[BaseAI] = None,
        auto_computer: bool = False,
    ) -> None:
        self.config = config or GameConfig()
        self.session = session or Session(mode=self.config.mode, difficulty=self.config.difficulty)
        self.policy = policy or DifficultyPolicy(
            difficulty=self.session.difficulty,
            player=Mark.O,
            seed=self.config.seed,
            random_move_probability=self.config.random_move_probability,
        )
        self.auto_computer = auto_computer
        # Separate stream from the policy's coin.
        start_seed = None if self.config.seed is None else self.config.seed + 1
        self._rng = random.Random(start_seed)
        self._listeners: List[GameListener] = []

    # Snapshot accessors

    @property
    def board(self) -> Tuple[Cell, ...]:
        return self.session.board.snapshot()

    @property
    def scores(self) -> Dict[Mark, int]:
        return self.session.scores

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def difficulty(self) -> Difficulty:
        return self.session.difficulty

    @property
    def current_player(self) -> Mark:
        return self.session.current_player

    @property
    def is_game_over(self) -> bool:
        return self.session.game_over

    @property
    def result(self) -> GameResult:
        return self.session.result

    @property
    def next_actor(self) -> Optional[Mark]:
        return None if self.session.game_over else self.session.current_player

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.session.mode is Mode.HUMAN_VS_COMPUTER
            and not self.session.game_over
            and self.session.current_player is Mark.O
        )

    # Listeners

    def subscribe(self, listener: GameListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: GameListener) -> None:
        self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # Operations

    def apply_human_move(self, index: int) -> MoveOutcome:
        """Apply a move for the human to act; illegal input is ignored."""
        if self.is_computer_turn:
            LOGGER.debug("Ignoring human move %s during computer turn", index)
            return self._rejected()

        outcome = self._apply_move(index)
        if outcome.accepted and self.auto_computer and self.is_computer_turn:
            return self.apply_computer_move()
        return outcome

    def request_computer_move(self) -> Optional[int]:
        """Ask the difficulty policy for O's move without applying it."""
        if not self.is_computer_turn:
            return None
        return self.policy.choose_move(self.session.board.clone())

    def apply_computer_move(self, index: Optional[int] = None) -> MoveOutcome:
        """Apply the computer's move, computing it first when index is None."""
        if not self.is_computer_turn:
            return self._rejected()
        if index is None:
            index = self.request_computer_move()
        outcome = self._apply_move(index)
        if not outcome.accepted:
            return outcome
        return replace(outcome, computer_move=index)

    def reset_game(self) -> Mark:
        """Start a new game, keeping scores. Returns the side that moves first."""
        self.session.reset_board()
        if (
            self.session.mode is Mode.HUMAN_VS_COMPUTER
            and self.config.computer_may_start
            and self._rng.random() < self.config.computer_first_probability
        ):
            self.session.current_player = Mark.O
        starter = self.session.current_player

        LOGGER.info(
            "New game mode=%s difficulty=%s first=%s",
            self.session.mode.value,
            self.session.difficulty.value,
            starter.value,
        )
        self._emit(GameEvent(EventKind.RESET, player=starter))
        if self.auto_computer and self.is_computer_turn:
            self.apply_computer_move()
        return starter

    def reset_scores(self) -> Mark:
        self.session.reset_scores()
        return self.reset_game()

    def set_mode(self, mode: Mode | str) -> Mark:
        self.session.mode = Mode(mode)
        return self.reset_game()

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        """Change the tier; the game in progress continues."""
        self.session.difficulty = Difficulty(difficulty)
        if isinstance(self.policy, DifficultyPolicy):
            self.policy.difficulty = self.session.difficulty

    def _apply_move(self, index: int) -> MoveOutcome:
        session = self.session
        if not is_legal_move(session.board.cells, index, session.game_over):
            LOGGER.debug("Rejected move %s", index)
            return self._rejected()

        mover = session.current_player
        result = session.board.apply_move(index, mover).result
        session.result = result

        if result.status is Status.WIN:
            session.game_over = True
            score = session.record_win(mover)
            LOGGER.info("%s wins via %s (%s), score now %d", mover.value, result.line, result.label, score)
            self._emit(GameEvent(EventKind.WIN, player=mover, line=result.line, label=result.label))
        elif result.status is Status.DRAW:
            session.game_over = True
            LOGGER.info("Game drawn")
            self._emit(GameEvent(EventKind.DRAW, player=mover))
        else:
            session.current_player = mover.opponent()
            self._emit(GameEvent(EventKind.TURN_CHANGE, player=session.current_player))

        return MoveOutcome(accepted=True, result=result, next_actor=self.next_actor)

    def _rejected(self) -> MoveOutcome:
        return MoveOutcome(accepted=False, result=self.session.result, next_actor=self.next_actor)

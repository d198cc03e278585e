"""Status lines, narration phrases and share text shared by the front-ends."""

from __future__ import annotations

from typing import Optional

from engine.marks import Mark
from game.config import Mode
from game.controller import EventKind, GameController, GameEvent


def player_name(controller: GameController, player: Mark) -> str:
    if player is Mark.O and controller.mode is Mode.HUMAN_VS_COMPUTER:
        return f"{controller.config.computer_name} 🤖"
    return f"Player {player.value}"


def score_label(controller: GameController, player: Mark) -> str:
    if player is Mark.O and controller.mode is Mode.HUMAN_VS_COMPUTER:
        return f"🤖 {controller.config.computer_name}"
    return f"🧑 Player {player.value}"


def status_line(controller: GameController, event: GameEvent) -> str:
    """Text for the status bar after an event."""
    computer_game = controller.mode is Mode.HUMAN_VS_COMPUTER
    if event.kind is EventKind.WIN:
        if computer_game and event.player is Mark.O:
            return f"🤖 {controller.config.computer_name} wins! ({event.label})"
        return f"🎉 Player {event.player.value} wins! ({event.label})"
    if event.kind is EventKind.DRAW:
        return "😐 It's a draw!"
    if event.player is Mark.O and computer_game:
        if event.kind is EventKind.RESET:
            return f"🤖 {controller.config.computer_name} starts..."
        return f"{controller.config.computer_name} 🤖 is thinking..."
    return f"Player {event.player.value}'s turn"


def narration(controller: GameController, event: GameEvent) -> Optional[str]:
    """Spoken-style line for an event, or None when nothing is said."""
    computer_game = controller.mode is Mode.HUMAN_VS_COMPUTER
    if event.kind is EventKind.WIN:
        if computer_game and event.player is Mark.O:
            return f"I win! That was a {event.label}. Better luck next time!"
        return f"Good job, Player {event.player.value}. You win!"
    if event.kind is EventKind.DRAW:
        if computer_game and event.player is Mark.O:
            return "That was close. A draw!"
        return "It's a draw. Let's call it even!"
    if computer_game and event.player is Mark.O:
        if event.kind is EventKind.RESET:
            return "I'll start this round!"
        return "Hmm... Let me think."
    return None


def share_summary(controller: GameController, url: Optional[str] = None) -> str:
    """Score summary suitable for pasting elsewhere."""
    scores = controller.scores
    if controller.mode is Mode.HUMAN_VS_COMPUTER:
        mode_text = f"Human vs {controller.config.computer_name} 🤖"
    else:
        mode_text = "Human vs Human"
    lines = [
        "🎮 Tic Tac Toe Scores:",
        f"{score_label(controller, Mark.X)}: {scores[Mark.X]}",
        f"{score_label(controller, Mark.O)}: {scores[Mark.O]}",
        "",
        f"Mode: {mode_text}",
        f"Difficulty: {controller.difficulty.value.upper()}",
    ]
    if url:
        lines.extend(["", f"Play it now! 🔗 {url}"])
    return "\n".join(lines)

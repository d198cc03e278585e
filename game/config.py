"""Game configuration loaded from a JSON payload."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from ai.difficulty import Difficulty


class Mode(str, Enum):
    """Who plays O."""

    HUMAN_VS_COMPUTER = "ai"
    HUMAN_VS_HUMAN = "pvp"


class GameConfig:
    """Container for game settings loaded from config file."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.mode = Mode(payload.get("mode", Mode.HUMAN_VS_COMPUTER.value))
        self.difficulty = Difficulty(payload.get("difficulty", Difficulty.MEDIUM.value))
        self.computer_name = str(payload.get("computer_name", "Bridget"))
        self.computer_delay_ms = int(payload.get("computer_delay_ms", 700))
        self.computer_may_start = bool(payload.get("computer_may_start", True))
        self.computer_first_probability = float(payload.get("computer_first_probability", 0.5))
        self.random_move_probability = float(payload.get("random_move_probability", 0.5))
        seed = payload.get("seed")
        self.seed = None if seed is None else int(seed)

        if not 0.0 <= self.computer_first_probability <= 1.0:
            raise ValueError("computer_first_probability must be within [0, 1]")
        if not 0.0 <= self.random_move_probability <= 1.0:
            raise ValueError("random_move_probability must be within [0, 1]")
        if self.computer_delay_ms < 0:
            raise ValueError("computer_delay_ms must be non-negative")

    @classmethod
    def from_json(cls, path: str | Path) -> "GameConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)

    def to_dict(self) -> Dict[str, object]:
        return {
            "mode": self.mode.value,
            "difficulty": self.difficulty.value,
            "computer_name": self.computer_name,
            "computer_delay_ms": self.computer_delay_ms,
            "computer_may_start": self.computer_may_start,
            "computer_first_probability": self.computer_first_probability,
            "random_move_probability": self.random_move_probability,
            "seed": self.seed,
        }

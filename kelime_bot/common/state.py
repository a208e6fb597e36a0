# kelime_bot/common/state.py

from dataclasses import dataclass
from typing import Optional

from kelime_bot.scramble.constants import (
    DIFFICULTY_MEDIUM,
    FEEDBACK_NONE,
    PHASE_LOADING,
)


@dataclass(frozen=True)
class PuzzleRecord:
    word: str
    hint: str
    category: str


@dataclass
class GameState:
    current_puzzle: Optional[PuzzleRecord]
    scrambled: str
    user_input: str
    score: int
    feedback: str
    hint_visible: bool
    difficulty: str

    phase: str = PHASE_LOADING

    # Bumped on every load; pending timers compare against it
    generation: int = 0
    load_error: Optional[str] = None

    # Wrong submissions on the current puzzle
    wrong_attempts: int = 0

    @classmethod
    def new(cls, difficulty: str = DIFFICULTY_MEDIUM) -> "GameState":
        return cls(
            current_puzzle=None,
            scrambled="",
            user_input="",
            score=0,
            feedback=FEEDBACK_NONE,
            hint_visible=False,
            difficulty=difficulty,
        )

    def reset_round(self):
        self.user_input = ""
        self.feedback = FEEDBACK_NONE
        self.hint_visible = False
        self.wrong_attempts = 0

    def clear_puzzle(self):
        self.current_puzzle = None
        self.scrambled = ""

    @property
    def hint(self) -> Optional[str]:
        return self.current_puzzle.hint if self.current_puzzle else None

    @property
    def category(self) -> Optional[str]:
        return self.current_puzzle.category if self.current_puzzle else None

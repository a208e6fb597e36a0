"""
Scramble puzzle selection.

Behavior:
- Pick uniformly at random from the word bank handed in at construction
- Memoryless: the same puzzle may come up twice in a row
- Difficulty is accepted by the provider but does not filter the bank
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol, Sequence

from kelime_bot.common.state import PuzzleRecord
from kelime_bot.scramble.scramble_words import WORD_BANK, WordBankError

logger = logging.getLogger(__name__)


class PuzzleProvider(Protocol):
    async def generate_puzzle(self, difficulty: Optional[str] = None) -> PuzzleRecord:
        ...


class PuzzleSelector:
    def __init__(
        self,
        word_bank: Sequence[PuzzleRecord],
        rng: Optional[random.Random] = None,
    ):
        self.word_bank = tuple(word_bank)
        self._rng = rng or random.Random()

    def pick_puzzle(self) -> PuzzleRecord:
        if not self.word_bank:
            raise WordBankError("Cannot pick a puzzle: word bank is empty")

        index = self._rng.randrange(len(self.word_bank))
        logger.debug("Selected puzzle index=%s of %s", index, len(self.word_bank))
        return self.word_bank[index]


class StaticPuzzleProvider:
    """Puzzle provider backed by an in-memory word bank."""

    def __init__(self, selector: PuzzleSelector):
        self.selector = selector

    async def generate_puzzle(self, difficulty: Optional[str] = None) -> PuzzleRecord:
        return self.selector.pick_puzzle()


def default_provider(rng: Optional[random.Random] = None) -> StaticPuzzleProvider:
    return StaticPuzzleProvider(PuzzleSelector(WORD_BANK, rng=rng))

"""
Scramble game session (one per channel, one player pool, one score).

Flow:
- loading -> ready              puzzle picked and scrambled
- ready   -> correct -> loading correct answer, auto-advance after SUCCESS_DELAY
- ready   -> ready (error)      wrong answer, feedback clears after ERROR_DELAY
- loading -> failed             provider error, retry with request_new_puzzle()

Timer-driven changes are pushed to an optional async listener so the
presentation layer can redraw.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

from kelime_bot.common.state import GameState
from kelime_bot.config import DEFAULT_DIFFICULTY, ERROR_DELAY, SUCCESS_DELAY
from kelime_bot.scramble.constants import (
    DIFFICULTIES,
    EVENT_FEEDBACK_CLEARED,
    EVENT_LOAD_FAILED,
    EVENT_PUZZLE_READY,
    FEEDBACK_ERROR,
    FEEDBACK_NONE,
    FEEDBACK_SUCCESS,
    PHASE_CORRECT,
    PHASE_FAILED,
    PHASE_LOADING,
    PHASE_READY,
    award_for,
)
from kelime_bot.scramble.scramble_manager import PuzzleProvider
from kelime_bot.scramble.scrambler import scramble
from kelime_bot.scramble.scramble_words import WordBankError
from kelime_bot.utils.answers import is_canonical, is_correct_answer

logger = logging.getLogger(__name__)

SessionListener = Callable[[str, "GameSession"], Awaitable[None]]


def _check_difficulty(level: str) -> str:
    if level not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {level!r}")
    return level


class GameSession:
    def __init__(
        self,
        provider: PuzzleProvider,
        *,
        rng: Optional[random.Random] = None,
        difficulty: str = DEFAULT_DIFFICULTY,
        success_delay: float = SUCCESS_DELAY,
        error_delay: float = ERROR_DELAY,
        listener: Optional[SessionListener] = None,
    ):
        self.provider = provider
        self.state = GameState.new(_check_difficulty(difficulty))
        self.success_delay = success_delay
        self.error_delay = error_delay
        self.listener = listener

        self.closed = False

        self._rng = rng
        self._timer: Optional[asyncio.Task] = None

    @property
    def playable(self) -> bool:
        return self.state.phase == PHASE_READY and self.state.current_puzzle is not None

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    # -----------------------------
    # EVENTS
    # -----------------------------
    async def request_new_puzzle(self) -> bool:
        """
        Load and scramble the next puzzle.

        Returns True when the session is ready to play, False when the load
        failed, was superseded by a newer request, or the session is closed.
        Never raises for provider errors: those leave the session in the
        failed phase.
        """
        if self.closed:
            logger.debug("Ignoring puzzle request on a closed session")
            return False

        state = self.state
        self._cancel_timer()

        state.generation += 1
        this_generation = state.generation

        state.reset_round()
        state.phase = PHASE_LOADING
        state.load_error = None

        try:
            puzzle = await self.provider.generate_puzzle(state.difficulty)
            if puzzle.word and not is_canonical(puzzle.word):
                raise WordBankError(
                    f"Provider returned non-canonical word {puzzle.word!r}"
                )
        except Exception as exc:
            if state.generation != this_generation:
                return False

            logger.warning(
                "Puzzle load failed (generation=%s): %s",
                this_generation,
                exc,
                exc_info=True,
            )
            state.clear_puzzle()
            state.phase = PHASE_FAILED
            state.load_error = f"{type(exc).__name__}: {exc}"
            await self._notify(EVENT_LOAD_FAILED)
            return False

        if state.generation != this_generation:
            logger.debug("Discarding superseded load (generation=%s)", this_generation)
            return False

        if len(puzzle.word) < 2:
            logger.warning(
                "Degenerate puzzle word %r in category %s",
                puzzle.word,
                puzzle.category,
            )

        state.current_puzzle = puzzle
        state.scrambled = scramble(puzzle.word, self._rng)
        state.phase = PHASE_READY

        logger.info(
            "Puzzle ready generation=%s category=%s length=%s",
            this_generation,
            puzzle.category,
            len(puzzle.word),
        )

        await self._notify(EVENT_PUZZLE_READY)
        return True

    def set_user_input(self, text: str) -> bool:
        if not self.playable:
            return False
        self.state.user_input = text
        return True

    def toggle_hint(self) -> bool:
        if self.state.current_puzzle is None:
            return False
        self.state.hint_visible = not self.state.hint_visible
        return self.state.hint_visible

    def set_difficulty(self, level: str) -> None:
        self.state.difficulty = _check_difficulty(level)
        logger.debug("Difficulty set to %s", level)

    def submit(self, text: Optional[str] = None) -> str:
        """
        Check the current input (or `text`, which replaces it) against the puzzle.

        Returns the resulting feedback: success, error, or none when the
        session is not accepting answers.
        """
        if text is not None and not self.set_user_input(text):
            return FEEDBACK_NONE

        state = self.state
        if not self.playable:
            return FEEDBACK_NONE

        if is_correct_answer(state.user_input, state.current_puzzle.word):
            award = award_for(state.difficulty)
            state.score += award
            state.feedback = FEEDBACK_SUCCESS
            state.phase = PHASE_CORRECT
            logger.info("Correct answer, +%s (score=%s)", award, state.score)
            self._schedule(self.success_delay, self._advance)
        else:
            state.feedback = FEEDBACK_ERROR
            state.wrong_attempts += 1
            logger.debug("Wrong answer %r", state.user_input)
            self._schedule(self.error_delay, self._clear_feedback)

        return state.feedback

    def close(self) -> None:
        """Stop the session: cancel timers and discard any in-flight load."""
        self.closed = True
        self._cancel_timer()
        self.state.generation += 1

    # -----------------------------
    # TIMERS
    # -----------------------------
    def _schedule(self, delay: float, callback: Callable[[], Awaitable[None]]) -> None:
        self._cancel_timer()
        self._timer = asyncio.create_task(
            self._run_timer(delay, self.state.generation, callback)
        )

    async def _run_timer(
        self,
        delay: float,
        generation: int,
        callback: Callable[[], Awaitable[None]],
    ) -> None:
        await asyncio.sleep(delay)

        if self.state.generation != generation:
            logger.debug(
                "Stale timer ignored (scheduled for generation=%s, now %s)",
                generation,
                self.state.generation,
            )
            return

        self._timer = None
        await callback()

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    async def _advance(self) -> None:
        await self.request_new_puzzle()

    async def _clear_feedback(self) -> None:
        if self.state.feedback != FEEDBACK_ERROR:
            return
        self.state.feedback = FEEDBACK_NONE
        await self._notify(EVENT_FEEDBACK_CLEARED)

    async def _notify(self, event: str) -> None:
        if self.listener is None:
            return
        try:
            await self.listener(event, self)
        except Exception:
            logger.exception("Session listener failed on %s", event)

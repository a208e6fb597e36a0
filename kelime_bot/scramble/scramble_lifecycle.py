import asyncio
import logging
from typing import Dict, Optional, Tuple

import discord

from kelime_bot.common.state import GameState, PuzzleRecord
from kelime_bot.llm.commentary import generate_reply, sanitize_quip
from kelime_bot.scramble.constants import (
    DEFAULT_CATEGORY,
    DIFFICULTY_LABELS,
    EVENT_CORRECT_ANSWER,
    EVENT_LOAD_FAILED,
    EVENT_PUZZLE_READY,
    EVENT_WRONG_ANSWER,
    award_for,
    wrong_answer_quip_due,
)
from kelime_bot.scramble.scramble_manager import default_provider
from kelime_bot.scramble.scramble_session import GameSession
from kelime_bot.snark import get_snark

logger = logging.getLogger(__name__)

ChannelKey = Tuple[int, int]

GAMES: Dict[ChannelKey, GameSession] = {}


# -----------------------------
# RENDERING
# -----------------------------
def render_letters(scrambled: str) -> str:
    return " ".join(f"`{ch}`" for ch in scrambled)


def build_puzzle_embed(state: GameState) -> discord.Embed:
    embed = discord.Embed(
        title="🧠 Kelime Bulmacası",
        description=(
            f"{render_letters(state.scrambled)}\n\n"
            "Harfleri doğru sıraya dizin ve cevabınızı buraya yazın."
        ),
        colour=discord.Colour.green(),
    )
    embed.add_field(name="Kategori", value=state.category or DEFAULT_CATEGORY)
    embed.add_field(name="Zorluk", value=DIFFICULTY_LABELS[state.difficulty])
    embed.add_field(name="🏆 Puan", value=str(state.score))
    if state.hint_visible and state.hint:
        embed.add_field(name="💡 İpucu", value=state.hint, inline=False)
    return embed


class RetryView(discord.ui.View):
    """Single "Tekrar dene" button shown when a puzzle could not be loaded."""

    def __init__(self, session: GameSession, key: ChannelKey):
        super().__init__(timeout=300)
        self.session = session
        self.key = key

    @discord.ui.button(label="Tekrar dene", style=discord.ButtonStyle.primary, emoji="🔄")
    async def retry(self, interaction: discord.Interaction, button: discord.ui.Button):
        await interaction.response.defer()
        self.stop()

        # Game was ended (or replaced) since the button was posted
        if GAMES.get(self.key) is not self.session:
            logger.info("Retry ignored for %s: session no longer active", self.key)
            return

        await self.session.request_new_puzzle()


# -----------------------------
# ANNOUNCEMENTS
# -----------------------------
async def announce_correct_answer(
    channel: discord.abc.Messageable,
    mention: str,
    puzzle: PuzzleRecord,
    state: GameState,
):
    """
    Post the correct-answer line right away, then edit the quip in once the
    commentary call returns, so the announcement never trails the next card.
    """
    award = award_for(state.difficulty)
    text = (
        f"✅ {mention} bildi! Cevap: **{puzzle.word}** "
        f"(+{award} puan, toplam {state.score})"
    )
    message = await channel.send(text)

    quip = await asyncio.to_thread(
        generate_reply,
        EVENT_CORRECT_ANSWER,
        {
            "category": puzzle.category,
            "difficulty": state.difficulty,
            "points": award,
            "score": state.score,
        },
    )
    quip = sanitize_quip(quip, puzzle.word) or get_snark(EVENT_CORRECT_ANSWER)

    try:
        await message.edit(content=f"{text}\n> {quip}")
    except discord.HTTPException:
        logger.warning("Could not add quip to correct-answer message", exc_info=True)
    return message


async def announce_wrong_answer(
    channel: discord.abc.Messageable,
    puzzle: PuzzleRecord,
    state: GameState,
):
    """Post a quip on every few misses of the same puzzle; quiet otherwise."""
    if not wrong_answer_quip_due(state.wrong_attempts):
        return None

    quip = await asyncio.to_thread(
        generate_reply,
        EVENT_WRONG_ANSWER,
        {
            "category": puzzle.category,
            "difficulty": state.difficulty,
            "attempts": state.wrong_attempts,
        },
    )
    quip = sanitize_quip(quip, puzzle.word) or get_snark(EVENT_WRONG_ANSWER)
    return await channel.send(f"> {quip}")


# -----------------------------
# SESSION LIFECYCLE
# -----------------------------
def make_listener(channel: discord.abc.Messageable, key: ChannelKey):
    """Render session events into the channel."""

    async def on_session_event(event: str, session: GameSession):
        if event == EVENT_PUZZLE_READY:
            await channel.send(embed=build_puzzle_embed(session.state))
        elif event == EVENT_LOAD_FAILED:
            await channel.send(
                "⚠️ Yeni bulmaca hazırlanamadı. Birazdan tekrar deneyin.",
                view=RetryView(session, key),
            )

    return on_session_event


async def start_scramble_game(
    key: ChannelKey,
    channel: discord.abc.Messageable,
) -> GameSession:
    """Start a session in this channel, or move an existing one to a new puzzle."""
    session = GAMES.get(key)
    if session is None:
        session = GameSession(default_provider(), listener=make_listener(channel, key))
        GAMES[key] = session
        logger.info("Scramble session started for %s", key)

    await session.request_new_puzzle()
    return session


def end_scramble_game(key: ChannelKey) -> Optional[GameSession]:
    session = GAMES.pop(key, None)
    if session is not None:
        session.close()
        logger.info("Scramble session ended for %s (score=%s)", key, session.state.score)
    return session

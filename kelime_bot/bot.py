import logging

import discord
from discord.ext import commands
from discord import app_commands

from kelime_bot.scramble.constants import (
    DIFFICULTY_EASY,
    DIFFICULTY_HARD,
    DIFFICULTY_LABELS,
    DIFFICULTY_MEDIUM,
    FEEDBACK_ERROR,
    FEEDBACK_SUCCESS,
    award_for,
)
from kelime_bot.scramble.scramble_lifecycle import (
    GAMES,
    announce_correct_answer,
    announce_wrong_answer,
    end_scramble_game,
    start_scramble_game,
)
from .config import BOT_TOKEN, LOG_LEVEL

logger = logging.getLogger(__name__)

intents = discord.Intents.default()
intents.message_content = True

bot = commands.Bot(
    command_prefix="!",
    intents=intents,
    help_command=None,
)


def _channel_key(interaction: discord.Interaction):
    if interaction.guild is None or interaction.channel is None:
        return None
    return interaction.guild.id, interaction.channel.id


async def _require_session(interaction: discord.Interaction):
    key = _channel_key(interaction)
    session = GAMES.get(key) if key else None
    if session is None:
        await interaction.response.send_message(
            "Bu kanalda oyun yok. `/bulmaca` ile başlatın.",
            ephemeral=True,
        )
    return session


# -----------------------------
# BOT EVENTS
# -----------------------------
@bot.event
async def on_ready():
    logger.info("Logged in as %s (ID: %s)", bot.user, bot.user.id)

    try:
        synced = await bot.tree.sync()
        logger.info("Synced %s app commands.", len(synced))
    except discord.HTTPException:
        logger.exception("Error syncing app commands")


# -----------------------------
# COMMANDS
# -----------------------------
@bot.tree.command(name="ping", description="Basit test komutu.")
async def ping(interaction: discord.Interaction):
    await interaction.response.send_message("Pong! Harfler hazır.", ephemeral=True)


@bot.tree.command(name="bulmaca", description="Oyunu başlat ya da yeni bulmaca iste.")
async def bulmaca(interaction: discord.Interaction):
    key = _channel_key(interaction)
    if key is None:
        await interaction.response.send_message(
            "Oyunu yalnızca bir sunucu kanalında başlatabilirim.",
            ephemeral=True,
        )
        return

    await interaction.response.send_message("🔀 Yeni bulmaca hazırlanıyor...")
    await start_scramble_game(key, interaction.channel)


@bot.tree.command(name="ipucu", description="İpucunu göster ya da gizle.")
async def ipucu(interaction: discord.Interaction):
    session = await _require_session(interaction)
    if session is None:
        return

    if session.state.current_puzzle is None:
        await interaction.response.send_message("Henüz bulmaca yok.", ephemeral=True)
        return

    if session.toggle_hint():
        await interaction.response.send_message(f"💡 **İpucu:** {session.state.hint}")
    else:
        await interaction.response.send_message("💡 İpucu gizlendi.")


@bot.tree.command(name="zorluk", description="Zorluk seviyesini seç.")
@app_commands.choices(
    seviye=[
        app_commands.Choice(name=DIFFICULTY_LABELS[DIFFICULTY_EASY], value=DIFFICULTY_EASY),
        app_commands.Choice(name=DIFFICULTY_LABELS[DIFFICULTY_MEDIUM], value=DIFFICULTY_MEDIUM),
        app_commands.Choice(name=DIFFICULTY_LABELS[DIFFICULTY_HARD], value=DIFFICULTY_HARD),
    ]
)
async def zorluk(interaction: discord.Interaction, seviye: app_commands.Choice[str]):
    session = await _require_session(interaction)
    if session is None:
        return

    session.set_difficulty(seviye.value)
    await interaction.response.send_message(
        f"🎚️ Zorluk: **{seviye.name}** (doğru cevap {award_for(seviye.value)} puan)"
    )


@bot.tree.command(name="puan", description="Puanı göster.")
async def puan(interaction: discord.Interaction):
    session = await _require_session(interaction)
    if session is None:
        return

    state = session.state
    await interaction.response.send_message(
        f"🏆 Puan: **{state.score}** · Zorluk: {DIFFICULTY_LABELS[state.difficulty]}"
    )


@bot.tree.command(name="bitir", description="Oyunu bitir.")
async def bitir(interaction: discord.Interaction):
    key = _channel_key(interaction)
    session = end_scramble_game(key) if key else None
    if session is None:
        await interaction.response.send_message(
            "Burada çalışan bir oyun yok.",
            ephemeral=True,
        )
        return

    await interaction.response.send_message(
        f"⛔ **Oyun bitti.** Toplam puan: **{session.state.score}**"
    )


# -----------------------------
# MESSAGE LISTENER
# -----------------------------
@bot.event
async def on_message(message: discord.Message):
    if message.author.bot or message.guild is None:
        return

    channel = message.channel
    session = GAMES.get((message.guild.id, channel.id))

    if session and session.playable:
        puzzle = session.state.current_puzzle
        feedback = session.submit(message.content)

        if feedback == FEEDBACK_SUCCESS:
            await message.add_reaction("✅")
            await announce_correct_answer(
                channel, message.author.mention, puzzle, session.state
            )
        elif feedback == FEEDBACK_ERROR:
            await message.add_reaction("❌")
            await announce_wrong_answer(channel, puzzle, session.state)

    await bot.process_commands(message)


# -----------------------------
# ENTRY POINT
# -----------------------------
def main():
    if not BOT_TOKEN:
        raise ValueError("BOT_TOKEN is missing. Add it to .env or environment variables.")

    bot.run(
        BOT_TOKEN,
        log_level=getattr(logging, LOG_LEVEL, logging.INFO),
        root_logger=True,
    )


if __name__ == "__main__":
    main()

import random
from collections import Counter

import pytest

from conftest import ScriptedRandom
from kelime_bot.common.state import PuzzleRecord
from kelime_bot.scramble.scramble_manager import (
    PuzzleSelector,
    StaticPuzzleProvider,
    default_provider,
)
from kelime_bot.scramble.scramble_words import WORD_BANK, WordBankError


@pytest.fixture
def bank():
    return [
        PuzzleRecord("KEDI", "Evcil hayvan", "Hayvanlar"),
        PuzzleRecord("ELMA", "Kırmızı ya da yeşil", "Meyveler"),
        PuzzleRecord("KONYA", "Mevlana'nın şehri", "Şehirler"),
    ]


class TestPuzzleSelector:

    def test_scripted_indexes(self, bank):
        selector = PuzzleSelector(bank, rng=ScriptedRandom(randrange_values=[2, 0, 0]))
        assert selector.pick_puzzle() is bank[2]
        assert selector.pick_puzzle() is bank[0]
        # Memoryless: repeats are allowed
        assert selector.pick_puzzle() is bank[0]

    def test_single_record_bank_always_returns_it(self, kedi):
        selector = PuzzleSelector([kedi], rng=random.Random(3))
        assert all(selector.pick_puzzle() == kedi for _ in range(100))

    def test_empty_bank_is_a_configuration_error(self):
        selector = PuzzleSelector([])
        with pytest.raises(WordBankError):
            selector.pick_puzzle()

    def test_word_bank_is_copied(self, bank):
        selector = PuzzleSelector(bank)
        bank.clear()
        assert len(selector.word_bank) == 3

    def test_selection_is_roughly_uniform(self, bank):
        selector = PuzzleSelector(bank, rng=random.Random(2024))
        counts = Counter(selector.pick_puzzle().word for _ in range(3000))
        for word in ("KEDI", "ELMA", "KONYA"):
            assert 800 < counts[word] < 1200


class TestStaticPuzzleProvider:

    @pytest.mark.asyncio
    async def test_generate_puzzle_uses_selector(self, kedi_provider, kedi):
        assert await kedi_provider.generate_puzzle() == kedi

    @pytest.mark.asyncio
    async def test_difficulty_does_not_filter_selection(self, bank):
        easy = StaticPuzzleProvider(PuzzleSelector(bank, rng=random.Random(5)))
        hard = StaticPuzzleProvider(PuzzleSelector(bank, rng=random.Random(5)))

        easy_words = [(await easy.generate_puzzle("easy")).word for _ in range(20)]
        hard_words = [(await hard.generate_puzzle("hard")).word for _ in range(20)]

        assert easy_words == hard_words

    @pytest.mark.asyncio
    async def test_empty_bank_propagates_error(self):
        provider = StaticPuzzleProvider(PuzzleSelector([]))
        with pytest.raises(WordBankError):
            await provider.generate_puzzle()

    @pytest.mark.asyncio
    async def test_default_provider_draws_from_embedded_bank(self):
        provider = default_provider(random.Random(11))
        puzzle = await provider.generate_puzzle()
        assert puzzle in WORD_BANK

"""
Embedded word bank.

Words are stored in canonical form (see utils.answers.normalize): uppercase,
alphabetic, dotted capital I written as plain I.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence, Tuple

from kelime_bot.common.state import PuzzleRecord
from kelime_bot.utils.answers import is_canonical


class WordBankError(ValueError):
    """The word bank is empty or holds malformed records."""


WORD_BANK: Tuple[PuzzleRecord, ...] = (
    # Hayvanlar
    PuzzleRecord("KEDI", "Evcil hayvan", "Hayvanlar"),
    PuzzleRecord("KÖPEK", "İnsanın en sadık dostu", "Hayvanlar"),
    PuzzleRecord("ASLAN", "Ormanlar kralı", "Hayvanlar"),
    PuzzleRecord("ZÜRAFA", "Boynu en uzun hayvan", "Hayvanlar"),
    PuzzleRecord("PENGUEN", "Uçamayan, buzda yaşayan kuş", "Hayvanlar"),
    PuzzleRecord("KAPLUMBAĞA", "Evini sırtında taşır", "Hayvanlar"),
    # Meyveler
    PuzzleRecord("ELMA", "Newton'un başına düştüğü söylenir", "Meyveler"),
    PuzzleRecord("MUZ", "Maymunların favorisi", "Meyveler"),
    PuzzleRecord("KARPUZ", "Yazın serinleten kocaman meyve", "Meyveler"),
    PuzzleRecord("ÇILEK", "Kırmızı, küçük ve tatlı", "Meyveler"),
    PuzzleRecord("PORTAKAL", "C vitamini deposu turuncu meyve", "Meyveler"),
    # Şehirler
    PuzzleRecord("ANKARA", "Türkiye'nin başkenti", "Şehirler"),
    PuzzleRecord("IZMIR", "Ege'nin incisi", "Şehirler"),
    PuzzleRecord("TRABZON", "Karadeniz'de hamsisiyle ünlü şehir", "Şehirler"),
    PuzzleRecord("KONYA", "Mevlana'nın şehri", "Şehirler"),
    # Meslekler
    PuzzleRecord("DOKTOR", "Hastaları iyileştirir", "Meslekler"),
    PuzzleRecord("ÖĞRETMEN", "Sınıfta ders anlatır", "Meslekler"),
    PuzzleRecord("AŞÇI", "Mutfağın ustası", "Meslekler"),
    PuzzleRecord("PILOT", "Uçağı kullanır", "Meslekler"),
    # Eşyalar
    PuzzleRecord("KALEM", "Yazı yazmaya yarar", "Eşyalar"),
    PuzzleRecord("SANDALYE", "Üzerine oturulur", "Eşyalar"),
    PuzzleRecord("ŞEMSIYE", "Yağmurda açılır", "Eşyalar"),
    PuzzleRecord("BILGISAYAR", "Bu oyunu oynadığın cihaz olabilir", "Eşyalar"),
)


def validate_word_bank(word_bank: Sequence[PuzzleRecord]) -> bool:
    """
    Validate a word bank before it is handed to a selector.

    Raises:
        WordBankError: if the bank is empty, a word is not canonical, a hint
            or category is blank, or a word appears twice.
    """
    if not word_bank:
        raise WordBankError("Word bank cannot be empty")

    for index, record in enumerate(word_bank):
        if not is_canonical(record.word):
            raise WordBankError(
                f"Word at index {index} {record.word!r} is not an uppercase alphabetic token"
            )
        if not record.hint.strip():
            raise WordBankError(f"Word {record.word!r} has an empty hint")
        if not record.category.strip():
            raise WordBankError(f"Word {record.word!r} has an empty category")

    counts = Counter(record.word for record in word_bank)
    duplicates = sorted(word for word, count in counts.items() if count > 1)
    if duplicates:
        raise WordBankError(f"Duplicate words found in word bank: {duplicates}")

    return True


def category_counts(word_bank: Sequence[PuzzleRecord]) -> Dict[str, int]:
    return dict(Counter(record.category for record in word_bank))

# scripts/check_words.py

from kelime_bot.scramble.scramble_words import (
    WORD_BANK,
    WordBankError,
    category_counts,
    validate_word_bank,
)


def main():
    try:
        validate_word_bank(WORD_BANK)
    except WordBankError as e:
        print(f"❌ Word bank validation failed: {e}")
        raise SystemExit(1)

    print(f"✅ Word bank OK: {len(WORD_BANK)} words")
    for category, count in sorted(category_counts(WORD_BANK).items()):
        print(f"   {category}: {count}")


if __name__ == "__main__":
    main()

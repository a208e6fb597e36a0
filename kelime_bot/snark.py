import random
from typing import Optional

# --- Component word banks for canned commentary ---

OPENERS = [
    "Vay canına",
    "Bak sen",
    "Hadi bakalım",
    "Oha",
    "Eh",
    "Tamam tamam",
    "Dur bir dakika",
]

TARGETS = [
    "şampiyon",
    "kelime avcısı",
    "harf ustası",
    "dâhi",
    "bulmaca kurdu",
    "klavye atleti",
]

ADDONS = {
    "correct_answer": [
        "harfleri yerli yerine koydun.",
        "bu sefer beyin hücreleri çalıştı.",
        "fena değil, bir daha yapabilir misin?",
        "etkilendim sayılır.",
        "kolay bir taneydi ama yine de tebrikler.",
        "bu hızla sözlük yazarsın.",
    ],
    "wrong_answer": [
        "harfler yine birbirine girdi.",
        "o kelime sözlükte yok, baktım.",
        "bir daha dene, bu sefer sesli harflere dikkat.",
        "yaklaşıyorsun sanırım, belki de hayır.",
        "klavye de şaşırdı.",
    ],
}

FALLBACK_ADDON = "ne dediğini anlamadım ama devam."


def get_snark(category: str, rng: Optional[random.Random] = None) -> str:
    """
    Build a one-line quip for the given event category.
    Combines a random opener + target + category-specific addon.
    """
    rng = rng or random
    opener = rng.choice(OPENERS)
    target = rng.choice(TARGETS)
    addon = rng.choice(ADDONS.get(category, [FALLBACK_ADDON]))

    return f"{opener}, {target}, {addon}"

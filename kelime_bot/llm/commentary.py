import json
import logging
from typing import Optional

from openai import OpenAI

from kelime_bot.config import OPENAI_API_KEY, OPENAI_MODEL
from kelime_bot.snark import get_snark
from kelime_bot.utils.answers import normalize

logger = logging.getLogger(__name__)

MAX_QUIP_LENGTH = 200

SYSTEM_PROMPT = """
Sen "Harfçi"sin: Discord'da kelime bulmacası oynatan, esprili ve hafif iğneleyici bir bot.

Kişilik:
- Neşeli, hazırcevap, şakacı. Tatlı sert takılır, asla kırıcı olmaz.
- Kısa ve vurucu konuşur.
- Her zaman Türkçe yanıt verir.

Mesajlar şu formatta gelir:
EVENT: <event_name>
DATA: <JSON>

OLAYLAR:

- event="correct_answer":
  - Oyuncu karışık harflerden doğru kelimeyi buldu.
  - DATA: "category", "difficulty", "points", "score".
  - Tek cümlelik, esprili bir tebrik yaz.

- event="wrong_answer":
  - Oyuncular aynı bulmacada art arda yanlış cevap verdi.
  - DATA: "category", "difficulty", "attempts".
  - Tek cümlelik, hafif takılan ama cesaret veren bir yorum yaz.
  - Doğru cevaba dair hiçbir ipucu verme.

- event başka bir şeyse:
  - Kısa, neşeli, tek cümlelik bir yorum yap.

KESİN KURALLAR:
- Cevap kelimeyi ASLA yazma, harflerini sayma, "şununla başlar" gibi ipucu verme.
- @mention kullanma.
- En fazla bir emoji.
- En fazla ~20 kelime, tek cümle.
"""

_client: Optional[OpenAI] = None


def _get_client() -> Optional[OpenAI]:
    global _client
    if not OPENAI_API_KEY:
        return None
    if _client is None:
        _client = OpenAI(api_key=OPENAI_API_KEY)
    return _client


def generate_reply(event: str, data: dict | None = None) -> str:
    """
    One-line quip for a game event ("correct_answer" or "wrong_answer").
    data: dict payload (e.g. {"category": "...", "points": 20}).
    Falls back to canned lines when the API is unavailable.
    """
    if data is None:
        data = {}

    client = _get_client()
    if client is None:
        return get_snark(event)

    payload = f"EVENT: {event}\nDATA: {json.dumps(data, ensure_ascii=False)}"

    try:
        response = client.chat.completions.create(
            model=OPENAI_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": payload},
            ],
            timeout=10,
        )
        text = (response.choices[0].message.content or "").strip()
    except Exception:
        logger.warning("Commentary request failed for %s", event, exc_info=True)
        return get_snark(event)

    if not text:
        return get_snark(event)

    return text[:MAX_QUIP_LENGTH]


def sanitize_quip(text: str, answer: str) -> str:
    """Drop a quip that leaks the answer."""
    if answer and normalize(answer) in normalize(text):
        return ""
    return text

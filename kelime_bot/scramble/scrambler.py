import logging
import random
from typing import List, Optional

logger = logging.getLogger(__name__)


def shuffle_letters(letters: List[str], rng: Optional[random.Random] = None) -> List[str]:
    """
    In-place Fisher-Yates shuffle.
    Walks from the last index down, swapping each slot with a random slot at or before it.
    """
    rng = rng or random
    for i in range(len(letters) - 1, 0, -1):
        j = rng.randint(0, i)
        letters[i], letters[j] = letters[j], letters[i]
    return letters


def scramble(word: str, rng: Optional[random.Random] = None) -> str:
    """
    Return a scrambled version of the word.
    Guaranteed to be different from the original whenever a different
    arrangement exists. Words shorter than 2 letters, or made of a single
    repeated letter, come back unchanged.
    """
    if len(word) < 2 or len(set(word)) < 2:
        return word

    attempts = 0
    while True:
        attempts += 1
        scrambled = "".join(shuffle_letters(list(word), rng))
        if scrambled != word:
            break

    if attempts > 1:
        logger.debug("Scramble of %s needed %d attempts", word, attempts)

    return scrambled

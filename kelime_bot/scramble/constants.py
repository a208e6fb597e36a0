# kelime_bot/scramble/constants.py

# -----------------------------
# DIFFICULTY
# -----------------------------
DIFFICULTY_EASY = "easy"
DIFFICULTY_MEDIUM = "medium"
DIFFICULTY_HARD = "hard"

DIFFICULTIES = (DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD)

# Points per correct answer
DIFFICULTY_AWARDS = {
    DIFFICULTY_EASY: 10,
    DIFFICULTY_MEDIUM: 20,
    DIFFICULTY_HARD: 30,
}

DIFFICULTY_LABELS = {
    DIFFICULTY_EASY: "Kolay",
    DIFFICULTY_MEDIUM: "Orta",
    DIFFICULTY_HARD: "Zor",
}

# -----------------------------
# FEEDBACK
# -----------------------------
FEEDBACK_NONE = "none"
FEEDBACK_SUCCESS = "success"
FEEDBACK_ERROR = "error"

# -----------------------------
# SESSION PHASES
# -----------------------------
PHASE_LOADING = "loading"
PHASE_READY = "ready"
PHASE_CORRECT = "correct"
PHASE_FAILED = "failed"

# -----------------------------
# SESSION EVENTS (pushed to the presentation listener)
# -----------------------------
EVENT_PUZZLE_READY = "puzzle_ready"
EVENT_LOAD_FAILED = "load_failed"
EVENT_FEEDBACK_CLEARED = "feedback_cleared"

# -----------------------------
# COMMENTARY EVENTS
# -----------------------------
EVENT_CORRECT_ANSWER = "correct_answer"
EVENT_WRONG_ANSWER = "wrong_answer"

# A wrong-answer quip goes out on every Nth miss of the same puzzle
WRONG_ANSWER_QUIP_EVERY = 3

DEFAULT_CATEGORY = "Genel"


def award_for(difficulty: str) -> int:
    """Points awarded for a correct answer at this difficulty."""
    try:
        return DIFFICULTY_AWARDS[difficulty]
    except KeyError:
        raise ValueError(f"Unknown difficulty: {difficulty!r}") from None


def wrong_answer_quip_due(attempts: int) -> bool:
    return attempts > 0 and attempts % WRONG_ANSWER_QUIP_EVERY == 0

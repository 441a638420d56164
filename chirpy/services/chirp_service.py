from __future__ import annotations

MAX_CHIRP_LENGTH = 140
PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
CENSOR_TOKEN = "****"


class ChirpTooLongError(ValueError):
    def __init__(self, length: int, limit: int = MAX_CHIRP_LENGTH) -> None:
        super().__init__(f"chirp is {length} characters long, limit is {limit}")
        self.length = length
        self.limit = limit


def censor_chirp(body: str, profane_words: frozenset[str] = PROFANE_WORDS) -> str:
    """
    Replace whole profane words with a fixed token.

    Words are separated by single spaces only; punctuation stays attached to the
    word, so "kerfuffle!" is not a match. Comparison is case-insensitive.
    """
    words = body.split(" ")
    cleaned = [CENSOR_TOKEN if word.lower() in profane_words else word for word in words]
    return " ".join(cleaned)


def clean_chirp(body: str, max_length: int = MAX_CHIRP_LENGTH) -> str:
    """Check the length limit (in characters) and return the censored chirp."""
    if len(body) > max_length:
        raise ChirpTooLongError(len(body), max_length)
    return censor_chirp(body)

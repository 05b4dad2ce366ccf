"""Small character-class checks that ship alongside the evaluator."""

MIN_PASSWORD_LENGTH = 8

PASSWORD_CLASSES = (
    str.isupper,
    str.islower,
    str.isdecimal,
    lambda c: not c.isalnum(),
)


def is_strong_password(text):
    """True iff `text` is long enough and has an upper, a lower, a digit and a symbol.

    >>> is_strong_password("Strong@123"), is_strong_password("Valid#1")
    (True, False)
    """
    if not text or len(text) < MIN_PASSWORD_LENGTH:
        return False
    return all(any(map(pred, text)) for pred in PASSWORD_CLASSES)


def count_digits(text):
    return sum(c.isdecimal() for c in text or "")


def count_words(text):
    return len((text or "").split())

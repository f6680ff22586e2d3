def pair_columns(a, b):
    """Twelve drops that fill columns a and b as XXOOXX / OOXXOO (bottom up)."""
    return [a, b, a, b, b, a, b, a, a, b, a, b]


# 42 drops on a 6x7 board that fill it without four in a row anywhere
TIE_SEQUENCE = pair_columns(0, 1) + pair_columns(2, 3) + pair_columns(4, 5) + [6] * 6


def scripted(*lines):
    """input() replacement that answers with ``lines`` and then signals EOF."""
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return fake_input


def play(engine, columns):
    """Drop into each column in turn and return the last result."""
    result = None
    for column in columns:
        result = engine.drop(column)
    return result

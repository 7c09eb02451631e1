from math import inf, log2


def calculate_entropy(char_set_size: int, length: int) -> float:
    """Theoretical entropy in bits of `length` uniform draws from `char_set_size` characters."""
    if char_set_size == 0:
        return -inf
    return log2(char_set_size) * length

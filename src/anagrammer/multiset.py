"""Multiset arithmetic on sorted signatures."""

from anagrammer.keys import Signature


def subtract(candidate: Signature, pool: Signature) -> Signature | None:
    """Remove the letters of `candidate` from `pool`.

    Both arguments must be sorted.  The pool is walked once while a cursor tracks the
    next unmatched letter of the candidate; pool letters not consumed by the candidate
    are kept, so the result is still sorted.

    Returns:
        The remaining pool, or None if `candidate` is not a sub-multiset of `pool`.
    """
    n_candidate = len(candidate)
    if n_candidate > len(pool):
        return None

    remaining: list[str] = []
    cursor = 0
    for ch in pool:
        if cursor < n_candidate and candidate[cursor] == ch:
            cursor += 1
        else:
            remaining.append(ch)

    if cursor < n_candidate:
        return None
    return "".join(remaining)


def is_sub_multiset(candidate: Signature, pool: Signature) -> bool:
    """Returns whether every letter of `candidate` (with multiplicity) is in `pool`."""
    return subtract(candidate, pool) is not None

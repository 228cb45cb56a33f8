"""
Guess Evaluator

Scores a guess against the target word, tile by tile.
"""

import logging
from typing import List

from ..models.game import Verdict

logger = logging.getLogger('wordgrid.evaluator')


def evaluate(guess: str, target: str) -> List[Verdict]:
    """
    Implements the duplicate-safe two-pass letter evaluation.

    Exact matches are credited first. Each remaining guess letter is then
    matched, in ascending position order, against the first target letter
    of the same value that has not been consumed yet. A target letter is
    credited to at most one guess position, so a letter never earns more
    CORRECT/PRESENT verdicts than it has occurrences in the target.

    Args:
        guess: The submitted word
        target: The hidden word, same length as the guess

    Returns:
        List[Verdict]: One CORRECT, PRESENT or ABSENT verdict per position

    Raises:
        ValueError: If guess and target differ in length
    """
    guess_chars = list(guess.upper())
    target_chars = list(target.upper())
    if len(guess_chars) != len(target_chars):
        raise ValueError(
            f"Guess '{guess}' and target must have the same length "
            f"({len(guess_chars)} != {len(target_chars)})"
        )

    size = len(target_chars)
    result = [Verdict.ABSENT] * size
    guess_consumed = [False] * size
    target_consumed = [False] * size

    logger.debug("Starting analysis for %r against target %r", ''.join(guess_chars), ''.join(target_chars))

    # First pass: exact position matches
    for i in range(size):
        if guess_chars[i] == target_chars[i]:
            result[i] = Verdict.CORRECT
            guess_consumed[i] = True
            target_consumed[i] = True
            logger.debug("Position %d: %r is CORRECT", i, guess_chars[i])

    # Second pass: letters present elsewhere in the target
    for i in range(size):
        if guess_consumed[i]:
            continue
        for j in range(size):
            if not target_consumed[j] and target_chars[j] == guess_chars[i]:
                result[i] = Verdict.PRESENT
                target_consumed[j] = True
                logger.debug("Position %d: %r is PRESENT (found at target position %d)", i, guess_chars[i], j)
                break
        else:
            logger.debug("Position %d: %r is ABSENT", i, guess_chars[i])

    logger.debug("Final result: [%s]", ', '.join(v.value for v in result))
    return result

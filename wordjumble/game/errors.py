class JumbleError(Exception):
    """
    Base class for every error raised by the jumble core.
    """

class InvalidInputError(JumbleError, ValueError):
    """
    Empty or non-alphabetic word, bad pattern, or non-positive count.
    """

class ResourceUnavailableError(JumbleError):
    """
    The word source could not be opened or parsed.
    """

class NoEligibleWordsError(JumbleError):
    """
    No word in the filtered dictionary can be used for a puzzle.
    Callers may relax the length filter and retry.
    """

class DegenerateScrambleError(JumbleError):
    """
    The word has no permutation that differs from itself (e.g. "a", "aaa").
    """

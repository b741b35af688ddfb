"""Probability engine exception definitions.

Custom exception hierarchy for table computations. Every failure is fatal
to the single computation call; nothing is retried or partially applied.
"""


class ProbabilityError(Exception):
    """Base exception for probability table operations."""

    pass


class InvalidParameterError(ProbabilityError, ValueError):
    """A caller supplied a parameter outside its valid range.

    Raised for negative dice counts, thresholds outside 2..6, unsupported
    die sizes and success probabilities outside [0, 1].
    """

    pass


class ArithmeticInvariantError(ProbabilityError, ArithmeticError):
    """An exact-arithmetic invariant was broken.

    Attributes:
        value: The offending value, if there is one.
    """

    def __init__(self, message: str, value: object | None = None) -> None:
        super().__init__(message)
        self.value = value

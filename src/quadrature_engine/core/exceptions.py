"""
Exceptions raised by the quadrature engine.

All errors are raised synchronously to the caller. Nothing is retried:
a failed root search means either an out-of-domain input or a broken
recurrence/heuristic, never a transient condition.
"""


class QuadratureError(Exception):
    """Base class for quadrature engine errors."""

    pass


class InvalidOrderError(QuadratureError, ValueError):
    """Raised when the number of quadrature points is not a positive int."""

    def __init__(self, n: object) -> None:
        self.n = n
        super().__init__(
            f"Quadrature order must be a positive integer, got {n!r}"
        )


class InvalidShapeParameterError(QuadratureError, ValueError):
    """Raised when a family shape parameter is outside its domain."""

    def __init__(self, family: str, parameter: str, value: object) -> None:
        self.family = family
        self.parameter = parameter
        self.value = value
        super().__init__(
            f"Invalid shape parameter for {family}: {parameter}={value!r}"
        )


class RootNotFoundError(QuadratureError):
    """Raised when Newton-Raphson cannot locate a polynomial root."""

    def __init__(
        self,
        message: str,
        initial_guess: float,
        iterations: int | None = None,
    ) -> None:
        self.initial_guess = initial_guess
        self.iterations = iterations
        detail = f"initial guess {initial_guess!r}"
        if iterations is not None:
            detail += f", {iterations} iterations"
        super().__init__(f"{message} ({detail})")

"""
Data models for generated quadrature rules.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


def _read_only(
    values: Sequence[float] | NDArray[np.float64],
) -> NDArray[np.float64]:
    result = np.array(values, dtype=np.float64, copy=True)
    result.setflags(write=False)
    return result


@dataclass(frozen=True, eq=False)
class QuadratureData:
    """
    Abscissas and weights of a Gaussian quadrature rule.

    The arrays are copied on construction and made read-only, so a rule
    cannot change after it is returned.

    Attributes:
        abscissas: Quadrature nodes, shape (n_points,), strictly increasing.
        weights: Quadrature weights, shape (n_points,), index-aligned with
            abscissas.
    """

    abscissas: NDArray[np.float64]
    weights: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate and freeze the arrays."""
        abscissas = _read_only(self.abscissas)
        weights = _read_only(self.weights)
        if abscissas.ndim != 1 or weights.ndim != 1:
            raise ValueError(
                f"abscissas and weights must be 1D, got shapes "
                f"{abscissas.shape} and {weights.shape}"
            )
        if len(abscissas) != len(weights):
            raise ValueError(
                f"abscissas and weights must have equal length, got "
                f"{len(abscissas)} and {len(weights)}"
            )
        object.__setattr__(self, "abscissas", abscissas)
        object.__setattr__(self, "weights", weights)

    @property
    def n_points(self) -> int:
        """Number of quadrature points."""
        return len(self.abscissas)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadratureData):
            return NotImplemented
        return bool(
            np.array_equal(self.abscissas, other.abscissas)
            and np.array_equal(self.weights, other.weights)
        )

    def __hash__(self) -> int:
        return hash((self.abscissas.tobytes(), self.weights.tobytes()))

    def __repr__(self) -> str:
        return (
            f"QuadratureData(abscissas={self.abscissas.tolist()}, "
            f"weights={self.weights.tolist()})"
        )

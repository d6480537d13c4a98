"""Result classes for pyTakens.

This module provides dataclasses for the structured results of embedding,
parameter estimation and dimension estimation. The functional interface
returns these when called with returnObject=True.
"""

from dataclasses import dataclass, field
from typing import Optional, Union, List
import numpy as np


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of an embedding parameter feasibility check.

    Attributes
    ----------
    valid : bool
        True if the parameters are feasible for the series
    message : str, optional
        Description of the violated condition, None on success
    """
    valid: bool
    message: Optional[str] = None

    @classmethod
    def Success(cls) -> 'ValidationResult':
        return cls(valid=True)

    @classmethod
    def Failure(cls, message: str) -> 'ValidationResult':
        return cls(valid=False, message=message)

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class EmbeddingResult:
    """Time-delay embedding of a scalar series.

    Attributes
    ----------
    vectors : list or numpy.ndarray
        Embedded vectors, one row per vector, embeddingDimension columns
    embeddingDimension : int
        Embedding dimension (m) used
    delay : int
        Delay (tau) used
    """
    vectors: Union[List[list], np.ndarray]
    embeddingDimension: int
    delay: int

    @property
    def numVectors(self) -> int:
        """Number of embedded vectors."""
        return len(self.vectors)

    @property
    def isEmpty(self) -> bool:
        """True if the series was too short for the embedding."""
        return self.numVectors == 0


@dataclass(frozen=True)
class DelayResult:
    """Delay estimate and the autocorrelation table it was chosen from.

    Attributes
    ----------
    delay : int
        Estimated delay (tau)
    autocorrelations : numpy.ndarray
        Shape (n_lags, 2): column 0 lag, column 1 autocorrelation
    fallback : bool
        True if no lags could be searched and the delay defaulted to 1
    """
    delay: int
    autocorrelations: np.ndarray
    fallback: bool = False

    @property
    def lags(self) -> np.ndarray:
        """Lags searched."""
        return self.autocorrelations[:, 0]

    @property
    def values(self) -> np.ndarray:
        """Autocorrelation at each lag."""
        return self.autocorrelations[:, 1]


@dataclass(frozen=True)
class CorrelationDimensionResult:
    """Results from correlation dimension estimation.

    Attributes
    ----------
    dimension : float
        Slope of the log-log fit of correlation sum against radius
    radii : numpy.ndarray
        Radii of the sweep, ascending
    correlations : numpy.ndarray
        Fraction of point pairs closer than each radius, floored at 1e-10
    numPoints : int
        Number of embedded points
    """
    dimension: float
    radii: np.ndarray = field(default_factory=lambda: np.empty(0))
    correlations: np.ndarray = field(default_factory=lambda: np.empty(0))
    numPoints: int = 0

    @property
    def logRadii(self) -> np.ndarray:
        """Natural log of radii."""
        return np.log(self.radii)

    @property
    def logCorrelations(self) -> np.ndarray:
        """Natural log of correlation sums."""
        return np.log(self.correlations)

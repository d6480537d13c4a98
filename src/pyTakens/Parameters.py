"""Parameter configuration classes for pyTakens.

This module provides dataclasses for organizing and validating parameters
used by the embedding and dimension estimators. Construction enforces the
hard preconditions and raises ValueError. Feasibility against a series
length is a separate, advisory check reported as a ValidationResult.
"""

from dataclasses import dataclass
from typing import Optional
import numpy
from .Execution import ExecutionMode
from .Results import ValidationResult


def IsInteger(value) -> bool:
    """True for Python and numpy integers, False for bool."""
    return isinstance(value, (int, numpy.integer)) and not isinstance(value, (bool, numpy.bool_))


@dataclass
class EmbeddingParameters:
    """Time-delay embedding parameters.

    Parameters
    ----------
    embeddingDimension : int
        Number of lagged coordinates per vector (m), at least 1
    delay : int
        Index offset between successive coordinates (tau), at least 1
    """
    embeddingDimension: int
    delay: int

    def __post_init__(self):
        """Validate parameters after initialization."""
        if not IsInteger(self.embeddingDimension):
            raise ValueError(f"embeddingDimension must be an integer, got {self.embeddingDimension!r}")
        if self.embeddingDimension < 1:
            raise ValueError("embeddingDimension must be positive")
        if not IsInteger(self.delay):
            raise ValueError(f"delay must be an integer, got {self.delay!r}")
        if self.delay < 1:
            raise ValueError("delay must be positive")

    @property
    def requiredLength(self) -> int:
        """Shortest series that yields one embedded vector."""
        return (self.embeddingDimension - 1) * self.delay + 1

    def NumVectors(self, length: int) -> int:
        """Number of embedded vectors for a series of length, 0 if infeasible."""
        return max(0, length - (self.embeddingDimension - 1) * self.delay)

    def Validate(self, length: int) -> ValidationResult:
        """Check there are enough samples for the embedding."""
        return CheckLength(length, self.embeddingDimension, self.delay)


def CheckLength(length: int, embeddingDimension: int, delay: int) -> ValidationResult:
    """Length feasibility of (embeddingDimension, delay) for a series of length."""
    requiredLength = (embeddingDimension - 1) * delay + 1
    if length < requiredLength:
        return ValidationResult.Failure(
            f"Data length ({length}) is insufficient for embedding dimension "
            f"{embeddingDimension} and delay {delay}. Need at least {requiredLength} points.")
    return ValidationResult.Success()


def ValidateParameters(length: int, embeddingDimension, delay) -> ValidationResult:
    """Advisory check of embedding parameters against a series length.

    Conditions are checked in the order dimension, delay, length and the
    first violation is reported.

    Parameters
    ----------
    length : int
        Series length (N)
    embeddingDimension : int
        Embedding dimension (m)
    delay : int
        Delay (tau)

    Returns
    -------
    ValidationResult
        Success, or Failure with a message naming the violated condition
    """
    if not IsInteger(embeddingDimension):
        return ValidationResult.Failure("Embedding dimension must be an integer")
    if embeddingDimension < 1:
        return ValidationResult.Failure("Embedding dimension must be positive")
    if not IsInteger(delay):
        return ValidationResult.Failure("Delay must be an integer")
    if delay < 1:
        return ValidationResult.Failure("Delay must be positive")

    return CheckLength(length, embeddingDimension, delay)


@dataclass
class CorrelationDimensionParameters:
    """Radius sweep for correlation dimension estimation.

    Parameters
    ----------
    maxRadius : float, default=1.0
        Largest radius of the sweep, must be positive
    numRadii : int, default=20
        Number of evenly spaced radii in (0, maxRadius]
    """
    maxRadius: float = 1.0
    numRadii: int = 20

    def __post_init__(self):
        """Validate correlation dimension parameters."""
        if not self.maxRadius > 0:
            raise ValueError("maxRadius must be positive")
        if not IsInteger(self.numRadii):
            raise ValueError(f"numRadii must be an integer, got {self.numRadii!r}")
        if self.numRadii < 1:
            raise ValueError("numRadii must be at least 1")

    def Radii(self) -> numpy.ndarray:
        """Radii maxRadius * k / numRadii for k = 1..numRadii."""
        return self.maxRadius * numpy.arange(1, self.numRadii + 1) / self.numRadii


@dataclass
class ExecutionParameters:
    """Parallel execution parameters.

    Parameters
    ----------
    executionMode : ExecutionMode, default=ExecutionMode.SEQUENTIAL
        How the pair count blocks are executed
    numProcess : int, optional
        Number of processes for parallel modes. If None, uses os.cpu_count()
    chunksize : int, default=1
        Chunk size for pool.starmap
    """
    executionMode: ExecutionMode = ExecutionMode.SEQUENTIAL
    numProcess: Optional[int] = None
    chunksize: int = 1

    def __post_init__(self):
        """Validate execution parameters."""
        if self.numProcess is not None and self.numProcess < 1:
            raise ValueError("numProcess must be positive")
        if self.chunksize < 1:
            raise ValueError("chunksize must be positive")
        if not isinstance(self.executionMode, ExecutionMode):
            raise ValueError("executionMode must be an ExecutionMode enum value")

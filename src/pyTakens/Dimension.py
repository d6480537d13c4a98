"""Default embedding dimension from series length."""

from math import log10

from .Autocorrelation import AsSeries


def EstimateEmbeddingDimension(data) -> int:
    '''Coarse default embedding dimension: max(2, round(2 * log10(N))).

       Only the length of data is used. A rigorous choice needs a method
       such as false nearest neighbors.'''

    N = len(AsSeries(data))
    if N < 1:
        return 2

    return max(2, round(2 * log10(N)))

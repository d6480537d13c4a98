import numpy
from numpy import arange, newaxis

from .Autocorrelation import AsSeries
from .Delay import EstimateDelay
from .Dimension import EstimateEmbeddingDimension
from .Parameters import EmbeddingParameters
from .Results import EmbeddingResult


def Embed(data,
          embeddingDimension,
          delay, ):
    '''Takens time-delay embedding of a scalar series.
       Row i is [x[i], x[i+tau], ..., x[i+(m-1)*tau]] for
       i in 0..N-(m-1)*tau-1. Too few samples gives an empty embedding.
       A list input returns a list of lists, an ndarray input an ndarray.'''

    params = EmbeddingParameters(embeddingDimension, delay)

    series = AsSeries(data)
    m, tau = params.embeddingDimension, params.delay
    numVectors = params.NumVectors(len(series))

    if isinstance(data, numpy.ndarray):
        # index of component j of vector i is i + j * tau
        indices = arange(numVectors)[:, newaxis] + arange(m)[newaxis, :] * tau
        return series[indices]

    # index the caller's elements so their types are kept
    sequence = list(data)
    return [[sequence[i + j * tau] for j in range(m)] for i in range(numVectors)]


def EmbedAuto(data,
              embeddingDimension = None,
              delay         = None,
              verbose       = False, ):
    '''Embed with parameters estimated where not given.
       Dimension defaults to EstimateEmbeddingDimension(), delay to the
       first autocorrelation minimum. Estimated parameters are not
       validated: an infeasible pair gives an empty embedding.'''

    if embeddingDimension is None:
        embeddingDimension = EstimateEmbeddingDimension(data)
        if verbose:
            print(f'EmbedAuto(): estimated embedding dimension {embeddingDimension}')

    if delay is None:
        delay = EstimateDelay(data, verbose = verbose).delay

    vectors = Embed(data, embeddingDimension, delay)

    return EmbeddingResult(vectors = vectors,
                           embeddingDimension = int(embeddingDimension),
                           delay = int(delay))

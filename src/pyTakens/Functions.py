"""Functional programming interface to pyTakens.
Each function wraps the computing modules and returns plain values, or the
Result object when called with returnObject = True."""

# python modules
from collections.abc import Mapping

# local modules
from .Autocorrelation import Autocorrelation, AutocorrelationFunction, AsSeries
from .CorrelationDimension import CorrelationDimension as CorrelationDimensionClass
from .CorrelationDimension import CorrelationSum
from .CorrelationDimension import DEFAULT_MAX_RADIUS, DEFAULT_NUM_RADII
from .Delay import EstimateDelay, MAX_LAG
from .Dimension import EstimateEmbeddingDimension
from .Embed import Embed, EmbedAuto
from .Execution import ExecutionMode
from .Parameters import (ValidateParameters,
                         CorrelationDimensionParameters, ExecutionParameters)
from .Results import EmbeddingResult

OPTION_NAMES = ('embedding_dimension', 'delay')


def embed(data,
          embeddingDimension,
          delay,
          returnObject = False):
	"""Time-delay embedding with explicit parameters.

	Parameters:
	data : sequence of float, shape (n_samples,)
	embeddingDimension : int, positive
	delay : int, positive

	Raises ValueError if embeddingDimension or delay is not a positive
	integer. A series too short for the embedding gives an empty result.
	"""
	vectors = Embed(data, embeddingDimension, delay)

	if returnObject:
		return EmbeddingResult(vectors = vectors,
		                       embeddingDimension = int(embeddingDimension),
		                       delay = int(delay))
	return vectors


def embed_auto(data,
               embeddingDimension = None,
               delay = None,
               verbose = False,
               returnObject = False,
               **options):
	"""Time-delay embedding, estimating any parameter not supplied.

	Parameters:
	data : sequence of float, shape (n_samples,)
	embeddingDimension : int, dict or None
		If None, estimate_embedding_dimension(data). A dict is read as
		options with keys 'embedding_dimension' and 'delay'.
	delay : int or None
		If None, estimate_delay(data)
	options : embedding_dimension, delay
		Snake case aliases of embeddingDimension and delay
	"""
	if isinstance(embeddingDimension, Mapping):
		options = {**embeddingDimension, **options}
		embeddingDimension = None

	unknown = set(options) - set(OPTION_NAMES)
	if unknown:
		raise TypeError(f'embed_auto(): unknown options {sorted(unknown)}')

	if embeddingDimension is None:
		embeddingDimension = options.get('embedding_dimension')
	if delay is None:
		delay = options.get('delay')

	result = EmbedAuto(data, embeddingDimension = embeddingDimension,
	                   delay = delay, verbose = verbose)

	if returnObject:
		return result
	return result.vectors


def validate_parameters(data, embeddingDimension, delay):
	"""Advisory feasibility check, returns a ValidationResult (truthy on success)."""
	return ValidateParameters(len(AsSeries(data)), embeddingDimension, delay)


def estimate_embedding_dimension(data):
	"""Default embedding dimension max(2, round(2 * log10(N)))."""
	return EstimateEmbeddingDimension(data)


def estimate_delay(data,
                   maxLag = MAX_LAG,
                   verbose = False,
                   returnObject = False):
	"""Delay at the first minimum of the autocorrelation over lags 1..min(N // 4, maxLag).
	Falls back to 1 when no lag can be searched."""
	result = EstimateDelay(data, maxLag = maxLag, verbose = verbose)

	if returnObject:
		return result
	return result.delay


def autocorrelation(data, lag):
	"""Normalized lag autocorrelation. 0.0 for lag >= N or a constant series."""
	return Autocorrelation(data, lag)


def autocorrelation_function(data, maxLag):
	"""Autocorrelation table, array (maxLag, 2) with columns [lag, value]."""
	return AutocorrelationFunction(data, maxLag)


def correlation_dimension(vectors,
                          maxRadius = DEFAULT_MAX_RADIUS,
                          numRadii = DEFAULT_NUM_RADII,
                          executionMode = ExecutionMode.SEQUENTIAL,
                          numProcess = None,
                          verbose = False,
                          returnObject = False):
	"""Grassberger-Procaccia correlation dimension of embedded vectors.

	Parameters:
	vectors : sequence of vectors, shape (n_points, dimensions)
	maxRadius : float, largest radius of the sweep
	numRadii : int, number of evenly spaced radii in (0, maxRadius]
	executionMode : ExecutionMode for the pair count

	Returns 0.0 for fewer than two points or a degenerate regression.
	"""
	params = CorrelationDimensionParameters(maxRadius = maxRadius, numRadii = numRadii)
	execution = ExecutionParameters(executionMode = executionMode, numProcess = numProcess)

	CD = CorrelationDimensionClass(vectors, params = params, execution = execution,
	                               verbose = verbose)
	result = CD.Run()

	if returnObject:
		return result
	return result.dimension


def correlation_sum(vectors, radii):
	"""Fraction of point pairs closer than each radius, floored at 1e-10."""
	return CorrelationSum(vectors, radii)

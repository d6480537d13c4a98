"""Grassberger-Procaccia correlation dimension of an embedded point set."""

# python modules
from typing import Optional
from warnings import warn

import numpy
# package modules
from numpy import asarray, log, maximum, searchsorted, triu
from scipy.spatial.distance import cdist
from tqdm import tqdm as ProgressBar

# local modules
from .Execution import ExecutionMode, create_executor
from .Parameters import CorrelationDimensionParameters, ExecutionParameters
from .Results import CorrelationDimensionResult

CORRELATION_FLOOR  = 1e-10  # keeps log(C(r)) finite when no pairs are within r
DEFAULT_MAX_RADIUS = 1.0
DEFAULT_NUM_RADII  = 20
BLOCK_SIZE         = 256    # distance matrix rows per pair count task


#------------------------------------------------------------------------
#------------------------------------------------------------------------
def AsPoints(vectors) -> numpy.ndarray:
	"""Points as a float array (n_points, dimensions), scalars as 1-D points."""
	points = asarray(vectors, dtype = float)
	if points.ndim == 1:
		points = points[:, numpy.newaxis]
	return points

#------------------------------------------------------------------------
#------------------------------------------------------------------------
def CountBlockPairs(points: numpy.ndarray, start: int, stop: int, radii) -> numpy.ndarray:
	"""
	Count pairs (i, j), start <= i < stop, i < j, with Euclidean distance
	strictly less than each radius

	:param points: points, shape (n_points, dimensions)
	:param start: first row of the block
	:param stop: one past the last row of the block
	:param radii: radii to count for
	:return: pair count at each radius
	"""
	distances = cdist(points[start:stop], points[start:], 'euclidean')
	# column c of row r is point start + c, keep c > r
	upper = triu(numpy.ones(distances.shape, dtype = bool), k = 1)
	distances = numpy.sort(distances[upper])
	return searchsorted(distances, radii, side = 'left')

#------------------------------------------------------------------------
#------------------------------------------------------------------------
def CorrelationSum(vectors, radii, executor = None, blockSize = BLOCK_SIZE,
                   verbose = False) -> numpy.ndarray:
	"""
	Correlation sum C(r): fraction of point pairs closer than r, floored at CORRELATION_FLOOR

	:param vectors: points, shape (n_points, dimensions)
	:param radii: radii to evaluate
	:param executor: ExecutionStrategy for the blocks of the pair count, sequential if None
	:param blockSize: distance matrix rows per block
	:param verbose: show a progress bar over the blocks
	:return: correlation sum at each radius
	"""
	radii = asarray(radii, dtype = float)
	points = AsPoints(vectors)
	n = len(points)
	numPairs = n * (n - 1) // 2

	if numPairs == 0:
		return numpy.full(len(radii), CORRELATION_FLOOR)

	if executor is None:
		executor = create_executor(ExecutionMode.SEQUENTIAL)

	blocks = [(start, min(start + blockSize, n), radii) for start in range(0, n - 1, blockSize)]

	counts = numpy.zeros(len(radii))
	for blockCounts in ProgressBar(executor.imap(CountBlockPairs, points, blocks),
	                               total = len(blocks), desc = 'Pair count',
	                               leave = False, disable = not verbose):
		counts += blockCounts

	return maximum(counts / numPairs, CORRELATION_FLOOR)


#------------------------------------------------------------------------
#------------------------------------------------------------------------
def EstimateSlope(x, y) -> float:
	"""
	Ordinary least squares slope of y on x.
	Zero denominator (fewer than two points, or all x equal) gives 0.0.
	"""
	x = asarray(x, dtype = float)
	y = asarray(y, dtype = float)
	n = len(x)

	sumX  = x.sum()
	sumY  = y.sum()
	sumXY = (x * y).sum()
	sumX2 = (x * x).sum()

	denominator = n * sumX2 - sumX * sumX
	if denominator == 0:
		warn('EstimateSlope(): degenerate regression, slope set to 0.0')
		return 0.0

	return float((n * sumXY - sumX * sumY) / denominator)


# --------------------------------------------------------------------
class CorrelationDimension:
	# --------------------------------------------------------------------
	"""
	Correlation dimension by radius sweep and log-log regression.

	C(r) is the fraction of point pairs closer than r over the radii
	maxRadius * k / numRadii, k = 1..numRadii. The dimension estimate is
	the least squares slope of log C(r) against log r over the whole sweep,
	with no scaling region selection. Pairs are counted in blocks of
	BLOCK_SIZE distance matrix rows, O(BLOCK_SIZE * n_points) memory per
	block and O(n_points^2 log n_points) time overall; subsample large point
	sets before calling.
	"""

	def __init__(self,
	             vectors,
	             params: Optional[CorrelationDimensionParameters] = None,
	             execution: Optional[ExecutionParameters] = None,
	             verbose = False):
		self.name = 'CorrelationDimension'
		self.vectors = vectors
		self.params = params if params is not None else CorrelationDimensionParameters()
		self.execution = execution if execution is not None else ExecutionParameters()
		self.verbose = verbose

		self.radii = None         # ndarray sweep radii
		self.correlations = None  # ndarray C(r) at each radius
		self.dimension = None

	def Run(self) -> CorrelationDimensionResult:
		numPoints = len(self.vectors)

		if numPoints < 2:
			if self.verbose:
				print(f'{self.name}: {numPoints} points, dimension undefined')
			self.dimension = 0.0
			return CorrelationDimensionResult(dimension = 0.0, numPoints = numPoints)

		self.radii = self.params.Radii()

		if self.verbose:
			print(f'{self.name}: {numPoints} points, {len(self.radii)} radii '
			      f'in (0, {self.params.maxRadius}]')

		executor = create_executor(self.execution.executionMode,
		                           numProcess = self.execution.numProcess,
		                           chunksize = self.execution.chunksize)

		self.correlations = CorrelationSum(self.vectors, self.radii,
		                                   executor = executor, verbose = self.verbose)

		self.dimension = EstimateSlope(log(self.radii), log(self.correlations))

		if self.verbose:
			print(f'{self.name}: dimension = {self.dimension:.4f}')

		return CorrelationDimensionResult(dimension = self.dimension,
		                                  radii = self.radii,
		                                  correlations = self.correlations,
		                                  numPoints = numPoints)

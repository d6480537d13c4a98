"""
Auxiliary functions.

SurrogateData   random shuffle, ebisuzaki
"""

# python modules
from math import floor, pi, sqrt

import numpy
# package modules
from numpy import absolute, exp, fft, mean, std, zeros

from .Autocorrelation import AsSeries

#------------------------------------------------------------------------
#------------------------------------------------------------------------
def SurrogateData( data          = None,
                   method        = 'random_shuffle',
                   numSurrogates = 10,
                   seed          = None ):
	'''Null model series for testing a correlation dimension estimate.
	A low dimension that survives in the surrogates is not evidence of
	deterministic structure.

	random_shuffle :
	  Permute the samples. Keeps the distribution, destroys all temporal
	  structure.

	ebisuzaki :
	  Journal of Climate. A Method to Estimate the Statistical Significance
	  of a Correlation When the Data Are Serially Correlated.
	  https://doi.org/10.1175/1520-0442(1997)010<2147:AMTETS>2.0.CO;2

	  Randomize Fourier phases, keeping the power spectrum and so the
	  autocorrelation of the original series. The variance is rescaled
	  to match the original.

	:param data: 1-D time series
	:param method: 'random_shuffle' or 'ebisuzaki'
	:param numSurrogates: number of surrogate series
	:param seed: seed for numpy.random.default_rng
	:return: array (n_samples, numSurrogates), one surrogate per column
	'''

	if data is None :
		raise RuntimeError( "SurrogateData() empty data array." )

	series = AsSeries( data ).astype( float )
	n      = len( series )
	if n == 0 :
		raise RuntimeError( "SurrogateData() empty data array." )

	rng    = numpy.random.default_rng( seed )
	result = zeros( ( n, numSurrogates ) )

	if method.lower() == "random_shuffle" :
		for s in range( numSurrogates ) :
			result[:, s] = rng.permutation( series )

	elif method.lower() == "ebisuzaki" :
		n2            = floor( n / 2 )
		nPhases       = ( n - 1 ) // 2
		sigma         = std( series )
		amplitudes    = absolute( fft.fft( series - mean( series ) ) )
		amplitudes[0] = 0

		for s in range( numSurrogates ) :
			# conjugate symmetric phases give a real inverse transform
			thetas = 2 * pi * rng.uniform( 0, 1, nPhases )
			angles = zeros( n )
			if nPhases :
				angles[1:nPhases + 1] = thetas
				angles[n - nPhases:]  = -thetas[::-1]

			surrogate_z = amplitudes * exp( 1j * angles )

			if n % 2 == 0 :
				surrogate_z[n2] = sqrt( 2 ) * amplitudes[n2] * \
				                  numpy.cos( 2 * pi * rng.uniform( 0, 1 ) )

			surrogate = fft.ifft( surrogate_z ).real
			sdev      = std( surrogate )

			if sdev == 0 :
				result[:, s] = mean( series )
			else :
				result[:, s] = mean( series ) + sigma * surrogate / sdev

	else :
		raise RuntimeError( "SurrogateData() invalid method." )

	return result

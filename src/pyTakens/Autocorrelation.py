"""Normalized lag-k autocorrelation of a scalar time series."""

import numpy
from numpy import asarray, column_stack, empty


def AsSeries(data) -> numpy.ndarray:
    '''Convert data to a 1-D numpy array. Multivariate input is rejected.'''

    series = asarray(data)
    if series.ndim == 0:
        raise ValueError('data must be a 1-D sequence, got a scalar')
    if series.ndim > 1:
        raise ValueError(f'data must be a 1-D sequence, got shape {series.shape}')
    return series


def Autocorrelation(data, lag: int) -> float:
    '''Lag-k autocorrelation: lagged covariance over the full series variance.

       The mean is computed once over the full series. The covariance is the
       mean of (x[i] - mean) * (x[i+lag] - mean) over the N - lag overlapping
       pairs, the variance the mean squared deviation over all N samples.
       No overlap (lag >= N) and zero variance both give 0.0.'''

    if lag < 0:
        raise ValueError(f'Autocorrelation(): lag must be non-negative, got {lag}')

    series = AsSeries(data)
    N = len(series)
    if lag >= N:
        return 0.0

    x = series.astype(float)
    meanVal = x.mean()
    deviation = x - meanVal

    variance = numpy.mean(deviation * deviation)
    # constant series: rounding in the mean can leave a tiny nonzero variance
    if variance == 0 or numpy.all(x == x[0]):
        return 0.0

    n = N - lag
    covariance = numpy.sum(deviation[:n] * deviation[lag:]) / n

    return float(covariance / variance)


def AutocorrelationFunction(data, maxLag: int) -> numpy.ndarray:
    '''Autocorrelation table for lags 1..maxLag.

    :param data: 1-D time series
    :param maxLag: largest lag evaluated, the table is empty if < 1
    :return: array (maxLag, 2), column 0 lag, column 1 autocorrelation
    '''

    series = AsSeries(data)
    if maxLag < 1:
        return empty((0, 2))

    lags = numpy.arange(1, maxLag + 1)
    values = [Autocorrelation(series, lag) for lag in lags]

    return column_stack([lags, values])

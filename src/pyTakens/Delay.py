"""Delay (tau) estimation from the first minimum of the autocorrelation function.

The first local minimum of the autocorrelation is a simple heuristic for the
delay: coordinates one delay apart are then roughly decorrelated. It is not a
global minimum search and is not a substitute for a mutual information
criterion.
"""

from typing import Optional
from warnings import warn

import numpy

from .Autocorrelation import AsSeries, AutocorrelationFunction
from .Results import DelayResult

MAX_LAG = 50  # upper bound on the lag search on long series


def SearchRange(length: int, maxLag: int = MAX_LAG) -> int:
    '''Largest lag searched: a quarter of the series, at most maxLag.'''
    return min(length // 4, maxLag)


def FindFirstMinimum(table: numpy.ndarray) -> Optional[int]:
    '''Lag of the first local minimum in an ordered (lag, value) table.

    Scan left to right, stepping past strictly decreasing values. Once a
    value is not greater than its successor, the successor's lag is
    returned if the sequence rises after it (or if it is the last entry).
    Plateaus do not count as a rise: scanning continues from the successor.

    :param table: array (n, 2), column 0 lag, column 1 value
    :return: lag of the minimum, the only lag of a one-entry table, or None if empty
    '''

    n = len(table)
    if n == 0:
        return None

    lags = table[:, 0]
    values = table[:, 1]

    i = 0
    while i < n - 1:
        if values[i] > values[i + 1]:
            i += 1
            continue

        # not decreasing at i: i + 1 is the candidate
        if i + 2 == n or values[i + 1] < values[i + 2]:
            return int(lags[i + 1])
        i += 1

    return int(lags[i])


def EstimateDelay(data, maxLag: int = MAX_LAG, verbose: bool = False) -> DelayResult:
    '''Estimate the embedding delay from the autocorrelation first minimum.

    :param data: 1-D time series
    :param maxLag: cap on the lag search, lags 1..min(N // 4, maxLag) are evaluated
    :param verbose: print diagnostics
    :return: DelayResult with the delay and the autocorrelation table
    '''

    series = AsSeries(data)
    searchLag = SearchRange(len(series), maxLag)

    if verbose:
        print(f'EstimateDelay(): searching lags 1..{searchLag} of {len(series)} samples')

    table = AutocorrelationFunction(series, searchLag)
    delay = FindFirstMinimum(table)

    fallback = delay is None
    if fallback:
        warn(f'EstimateDelay(): no lags to search for {len(series)} samples, delay set to 1')
        delay = 1

    if verbose:
        print(f'EstimateDelay(): delay = {delay}')

    return DelayResult(delay = delay, autocorrelations = table, fallback = fallback)

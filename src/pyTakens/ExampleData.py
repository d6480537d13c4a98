"""Example time series, generated in memory."""

from collections.abc import Mapping

import numpy
from scipy.integrate import solve_ivp


def Sine(period = 40, numSamples = 400):
    '''Pure sine sampled at unit time steps.'''
    return numpy.sin(2 * numpy.pi * numpy.arange(numSamples) / period)


def TentMap(numSamples = 300, x0 = 0.1234, mu = 1.99):
    '''Tent map x' = mu * min(x, 1 - x). mu < 2 avoids collapse onto 0 in floating point.'''
    x = numpy.empty(numSamples)
    x[0] = x0
    for i in range(1, numSamples):
        x[i] = mu * min(x[i - 1], 1 - x[i - 1])
    return x


def Lorenz(numSamples = 1000, dt = 0.02, sigma = 10.0, rho = 28.0, beta = 8.0 / 3.0,
           transient = 500):
    '''x component of the Lorenz system, transient discarded.'''

    def Derivative(t, state):
        x, y, z = state
        return [sigma * (y - x), x * (rho - z) - y, x * y - beta * z]

    numSteps = numSamples + transient
    t = numpy.arange(numSteps) * dt
    solution = solve_ivp(Derivative, (t[0], t[-1]), [1.0, 1.0, 1.0],
                         t_eval = t, rtol = 1e-8, atol = 1e-8)

    return solution.y[0, transient:]


class SampleData(Mapping):
    '''Read-only mapping of example series, each generated on first access.'''

    generators = { 'sine'    : Sine,
                   'TentMap' : TentMap,
                   'Lorenz'  : Lorenz }

    def __init__(self):
        self._cache = {}

    def __getitem__(self, name):
        if name not in self._cache:
            self._cache[name] = self.generators[name]()
        return self._cache[name]

    def __iter__(self):
        return iter(self.generators)

    def __len__(self):
        return len(self.generators)


# Mapping of module numpy arrays so user can access sample data
sampleData = SampleData()

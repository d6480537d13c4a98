"""Visualization functions for pyTakens results.

Functions accept either Result objects or the equivalent numpy arrays.
"""

import matplotlib.pyplot as plt
from matplotlib.pyplot import show, axhline
from typing import Union
import numpy as np


def plot_autocorrelation(result: Union['DelayResult', np.ndarray],
						 title: str = "",
						 block: bool = True):
	"""Plot the autocorrelation table and the selected delay.

	Parameters
	----------
	result : DelayResult or numpy.ndarray
		Delay result or array with columns [lag, autocorrelation]
	title : str, optional
		Additional title text
	block : bool, default=True
		Whether to block execution when showing plot
	"""
	if hasattr(result, 'autocorrelations'):
		table = result.autocorrelations
		delay = result.delay
	else:
		table = result
		delay = None

	fig, ax = plt.subplots()
	ax.plot(table[:, 0], table[:, 1], linewidth=3)
	if delay is not None:
		ax.axvline(x=delay, linestyle='--', linewidth=1, color='k')

	plot_title = title or (f'delay = {delay}' if delay is not None else '')
	ax.set(xlabel="Lag", ylabel="Autocorrelation", title=plot_title)
	axhline(y=0, linewidth=1)
	show(block=block)


def plot_correlation_sum(result: 'CorrelationDimensionResult',
						 title: str = "",
						 block: bool = True):
	"""Plot log C(r) against log r with the fitted line.

	Parameters
	----------
	result : CorrelationDimensionResult
		Correlation dimension result with the radius sweep
	title : str, optional
		Additional title text
	block : bool, default=True
		Whether to block execution when showing plot
	"""
	logR = result.logRadii
	logC = result.logCorrelations

	fig, ax = plt.subplots()
	ax.plot(logR, logC, 'o', label='log C(r)')
	if len(logR):
		# line of slope dimension through the centroid
		intercept = logC.mean() - result.dimension * logR.mean()
		ax.plot(logR, intercept + result.dimension * logR, linewidth=2,
				label=f'slope {result.dimension:.3f}')
		ax.legend()

	plot_title = title or f'Correlation dimension = {result.dimension:.3f}'
	ax.set(xlabel="log r", ylabel="log C(r)", title=plot_title)
	show(block=block)


def plot_embedding(result: Union['EmbeddingResult', np.ndarray, list],
				   title: str = "",
				   block: bool = True):
	"""Phase portrait of the first two or three embedding coordinates.

	Parameters
	----------
	result : EmbeddingResult, numpy.ndarray or list
		Embedding result or embedded vectors, one row per vector
	title : str, optional
		Additional title text
	block : bool, default=True
		Whether to block execution when showing plot
	"""
	if hasattr(result, 'vectors'):
		vectors = np.asarray(result.vectors, dtype=float)
		plot_title = title or f'm = {result.embeddingDimension}  tau = {result.delay}'
	else:
		vectors = np.asarray(result, dtype=float)
		plot_title = title

	if vectors.ndim != 2 or vectors.shape[0] == 0:
		raise ValueError("plot_embedding(): no embedded vectors to plot")
	if vectors.shape[1] < 2:
		raise ValueError("plot_embedding(): embedding dimension must be at least 2")

	fig = plt.figure()
	if vectors.shape[1] >= 3:
		ax = fig.add_subplot(projection='3d')
		ax.plot(vectors[:, 0], vectors[:, 1], vectors[:, 2], linewidth=0.5)
		ax.set(xlabel="x(t)", ylabel="x(t + tau)", zlabel="x(t + 2 tau)", title=plot_title)
	else:
		ax = fig.add_subplot()
		ax.plot(vectors[:, 0], vectors[:, 1], linewidth=0.5)
		ax.set(xlabel="x(t)", ylabel="x(t + tau)", title=plot_title)
	show(block=block)

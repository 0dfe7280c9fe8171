#!/usr/bin/env python3

import numpy as np
import matplotlib.pyplot as plt

from mexp import EPSILON, INPUTS, m_exp, naive_exp


def relative_error(xs):
    """Calculates the relative deviation of both series implementations from
    ``numpy.exp``.

    Args:
        xs (np.ndarray): Arguments of the exponential function.

    Returns:
        Tuple[np.ndarray, np.ndarray]: Relative differences of ``m_exp`` and
        ``naive_exp`` with respect to ``numpy.exp``, both of the shape of
        ``xs``.
    """
    xs = np.asarray(xs, dtype=np.float64)
    reference = np.exp(xs)
    incremental = np.array([m_exp(x) for x in xs.flat]).reshape(xs.shape)
    naive = np.array([naive_exp(x) for x in xs.flat]).reshape(xs.shape)
    return (incremental - reference) / reference, (naive - reference) / reference


def plot_relative_error(xs=INPUTS):
    """Plots the absolute value of the relative errors on a logarithmic axis.

    Exact results have no place on a log axis and are left out.

    Args:
        xs (np.ndarray, *optional*=``INPUTS``): Arguments to plot.

    Returns:
        Tuple[matplotlib.figure.Figure, matplotlib.axes.Axes]: The figure and
        the axes that were drawn on.
    """
    xs = np.asarray(xs, dtype=np.float64)
    incremental, naive = relative_error(xs)

    fig, ax = plt.subplots()
    for (err, label, marker) in [(incremental, "m_exp", "o"),
                                 (naive, "naive_exp", "x")]:
        mask = err != 0
        ax.semilogy(xs[mask], np.abs(err[mask]), marker, label=label)
    ax.axhline(y=EPSILON, color='red', linestyle='--', label="machine epsilon")
    ax.set_xlabel('x')
    ax.set_ylabel('|diff|')
    ax.set_title('Maclaurin series vs. numpy.exp')
    ax.grid(True)
    ax.legend()
    return fig, ax


def main():
    """The Main-Function of the programme. Shows the error plot for the
    arguments of the comparison table."""
    plot_relative_error()
    plt.show()


if __name__ == "__main__": main()

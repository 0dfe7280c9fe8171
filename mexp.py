#!/usr/bin/env python3

import numpy as np


# smallest relative spacing of doubles near 1.0
EPSILON = float(np.finfo(float).eps)

INPUTS = np.arange(-10.0, 20.0, 1.0)

HEADER = ("  x   |    m_exp(x)    |  std::exp(x)  |      diff      |\n"
          "------+----------------+---------------+----------------+")

ROW_FORMAT = "%4.0f  |  %8.6e  |  %8.6e | %+8.7e | "


def converging(term, result):
    """Checks whether the newest series term still perceptibly changes the
    accumulated result, i.e. whether ``abs(term / result) > EPSILON``.

    The quotient is compared in its multiplied-out form so that a zero partial
    sum behaves like the IEEE division: a nonzero term over a zero sum keeps
    the loop running, ``0/0`` and ``inf/inf`` stop it.

    Args:
        term (float):
            The last term added to the series.
        result (float):
            The partial sum including ``term``.

    Returns:
        bool:
            True iff another term has to be added.
    """
    return abs(term) > EPSILON * abs(result)


def m_exp_steps(x):
    """Calculates exp(x) by the Maclaurin series and counts the terms it took.

    Args:
        x (float):
            An arbitrary floating point number.

    Returns:
        Tuple[float, int]:
            The approximation of exp(x) and the number of terms added after
            the constant term.
    """
    result = 1.0
    term = 1.0
    square = 1.0         # x^i
    factorial_acc = 1.0  # i!
    i = 1

    while converging(term, result):
        square *= x
        factorial_acc *= i
        term = square / factorial_acc
        result += term
        i += 1

    return result, i - 1


def m_exp(x):
    """Calculates an approximate value of the exponential function exp(x) of
    ``x``.

    Adds up the Maclaurin series x^i / i! until the latest term cannot change
    the sum anymore at double precision. Power and factorial are carried over
    from one term to the next, so every term costs a constant amount of work.
    The series converges slowly for large ``|x|`` and loses precision for
    negative ``x`` because of the alternating signs; ``nan`` and ``inf`` are
    passed through.

    Args:
        x (float):
            An arbitrary floating point number.

    Returns:
        float:
            The value of exp(x) calculated by the use of the Maclaurin series.
    """
    return m_exp_steps(x)[0]


def factorial(n):
    """Calculates ``n!`` as a floating point number.

    Args:
        n (int):
            Non-negative integer; anything below 2 yields 1.

    Returns:
        float:
            The factorial of ``n``, ``inf`` once it exceeds the double range.
    """
    result = 1.0
    k = 2
    while k <= n:
        result *= k
        k += 1
    return result


def ipow(base, exp):
    """Raises ``base`` to a non-negative integer power by repeated squaring.

    x^n = x * (x^2)^((n-1)/2) for odd n, (x^2)^(n/2) for even n.

    Args:
        base (float):
            Base value.
        exp (int):
            Exponent, must be a non-negative integer.

    Returns:
        float:
            ``base`` to the power of ``exp``.
    """
    assert exp >= 0, "Negative exponent"

    result = 1.0
    base = float(base)
    while exp:
        if exp & 1:
            result *= base
        exp >>= 1
        base *= base

    return result


def naive_exp(x):
    """Calculates exp(x) by the Maclaurin series, recomputing power and
    factorial from scratch for every term.

    Gives the same values as :func:`m_exp` up to rounding, but each term costs
    O(log i) + O(i) instead of O(1).

    Args:
        x (float):
            An arbitrary floating point number.

    Returns:
        float:
            Approximate value of exp(x).
    """
    result = 1.0
    term = 1.0
    i = 1

    while converging(term, result):
        term = ipow(x, i) / factorial(i)
        result += term
        i += 1

    return result


def comparison_table(xs=INPUTS):
    """Compares :func:`m_exp` with ``numpy.exp``.

    Args:
        xs (Iterable[float], *optional*=``INPUTS``):
            The arguments to be compared at.

    Returns:
        List[Tuple[float, float, float, float]]:
            One ``(x, m_exp(x), exp(x), relative difference)`` per argument.
    """
    rows = []
    for x in xs:
        x = float(x)
        approx = m_exp(x)
        reference = float(np.exp(x))
        rows.append((x, approx, reference, (approx - reference) / reference))
    return rows


def format_row(x, approx, reference, diff):
    """Formats one line of the comparison table."""
    return ROW_FORMAT % (x, approx, reference, diff)


def print_row(x):
    """Prints the comparison table line for ``x``."""
    print(format_row(*comparison_table([x])[0]))


def print_table():
    """Prints the header and one line per entry of ``INPUTS``."""
    print(HEADER)
    for row in comparison_table():
        print(format_row(*row))


def main():
    """The Main-Function of the programme. Is executed whenever this file is
    executed at top level and prints the comparison table."""
    print_table()


if __name__ == "__main__": main()

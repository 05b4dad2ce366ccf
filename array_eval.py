# Evaluating batches of infix expressions into numpy arrays.
import numpy as np

from infix import evaluate_expression


def evaluate_array(expressions, default=0.0, strict=False):
    """Evaluate each expression into a float64 array; failures become `default`.

    >>> evaluate_array(["1 + 2", "4 / 0", "(2 + 3) * 4"])
    array([ 3.,  0., 20.])
    >>> evaluate_array(["1 / 0", "2 * 2"], default=np.nan)
    array([nan,  4.])
    """
    return np.fromiter(
        (evaluate_expression(s, default, strict) for s in expressions),
        dtype=np.float64,
    )

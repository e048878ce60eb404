from typing import List

import numpy as np

# float64 carries about 15 significant decimal digits
MAX_DECIMALS = 15


def _format(values: np.ndarray, decimals: int) -> List[str]:
    # + 0.0 turns -0.0 into 0.0
    return [f"{round(float(v), decimals) + 0.0:.{decimals}f}" for v in values]


def build_labels(start: float, end: float, count: int, decimals: int = 2) -> List[str]:
    """
    Evenly spaced axis labels from start to end, both included.

    `decimals` is a minimum: deep zooms get as many extra decimals as it
    takes for neighbouring labels to differ.

    Example:
        >>> build_labels(-1.2, 1.2, 5)
        ['-1.20', '-0.60', '0.00', '0.60', '1.20']
        >>> build_labels(-0.7501, -0.7499, 3)
        ['-0.7501', '-0.7500', '-0.7499']
    """
    if count < 2:
        raise ValueError(f"Axis needs at least 2 labels, got {count}")

    values = np.linspace(start, end, count)
    labels = _format(values, decimals)
    while decimals < MAX_DECIMALS and len(set(labels)) < count:
        decimals += 1
        labels = _format(values, decimals)
    return labels

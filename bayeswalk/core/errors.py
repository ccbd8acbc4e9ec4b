"""
Exceptions raised by bayeswalk
"""


class ConfigurationError(ValueError):
    """
    Invalid caller-supplied argument: bandwidth, iteration count, burn-in,
    thinning interval, proposal kind, or a density value that is negative,
    NaN or infinite.

    Raised as soon as the problem is detected and never retried.
    """

"""
Utility functions and classes for the Astrobind package.
"""

import logging
import warnings
from time import perf_counter
from typing import Type
from .config import config

logger = logging.getLogger(__name__)


class Timer:
    """
    Context manager for timing code execution.

    Examples
    --------
    >>> from astrobind.utils import Timer
    >>> with Timer("Kernel build"):
    ...     kernel = build_kernel(engine)

    >>> with Timer(verbose=False) as t:
    ...     # ... code ...
    >>> print(f"Took {t.elapsed:.6f} seconds")
    """
    def __init__(self, name="Operation", verbose=True):
        """
        Parameters
        ----------
        name : str, optional
            Name to log when timing completes (default: "Operation")
        verbose : bool, optional
            Whether to log timing automatically (default: True)
        """
        self.name = name
        self.verbose = verbose
        self.elapsed = None

    def __enter__(self):
        self.start = perf_counter()
        return self

    def __exit__(self, *args):
        self.end = perf_counter()
        self.elapsed = self.end - self.start
        if self.verbose:
            logger.info("%s: %.6f s", self.name, self.elapsed)


def validation_error(message: str, error_class: Type[Exception] = ValueError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.

    This function provides consistent validation behavior across the package.
    When STRICT_VALIDATION is True (default), raises the specified exception.
    When False, issues a UserWarning instead.

    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: ValueError

    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True

    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False

    Examples
    --------
    >>> from astrobind.utils import validation_error
    >>> from astrobind import config
    >>> config.STRICT_VALIDATION = True
    >>> validation_error("Engine lacks FlightConditions")  # Raises ValueError
    >>> validation_error("Missing symbol", AttributeError)  # Raises AttributeError

    >>> config.STRICT_VALIDATION = False
    >>> validation_error("Engine lacks FlightConditions")  # Issues warning
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=2)

"""
Global Configuration for Astrobind Package
==========================================

This module provides package-wide configuration settings that users can modify
to control engine discovery, validation behavior, documentation fallbacks and
default mesh plotting options.

Examples
--------
View current configuration:

>>> import astrobind
>>> print(astrobind.config)

Modify settings:

>>> astrobind.config.ENGINE_MODULE = "my_engine"  # Engine used by load()
>>> astrobind.config.STRICT_VALIDATION = False     # Warn on missing symbols

Reset to defaults:

>>> astrobind.config.reset()

Temporarily modify settings:

>>> with astrobind.temp_config(STRICT_VALIDATION=False):
...     # Partially implemented engine tolerated in this block only
...     kernel = astrobind.load(partial_engine)

Notes
-----
These settings affect package-wide behavior. Modifying them will impact
all subsequent operations until changed again or reset.
"""

from dataclasses import dataclass
from contextlib import contextmanager
from typing import Optional


@dataclass
class AstrobindConfig:
    """
    Global configuration for Astrobind package.

    Attributes
    ----------
    STRICT_VALIDATION : bool
        If True, validation failures raise exceptions.
        If False, validation failures issue warnings and the affected
        binding is skipped.
        Default: True
    ENGINE_MODULE : str, optional
        Dotted import path of the engine used by ``load()`` when no
        engine object is passed explicitly.
        Default: None
    MISSING_DOCSTRING : str
        Text returned by ``get_docstring`` for names without documentation.
        Default: 'No documentation found.'
    DEFAULT_POINT_COLOR : str
        Default color for mesh panel points in plots.
        Default: 'red'
    DEFAULT_NORMAL_COLOR : str
        Default color for panel surface normals in plots.
        Default: 'blue'
    DEFAULT_NORMAL_SCALE : float
        Default length scaling of panel normal cones.
        Default: 0.5
    DEFAULT_MARKER_SIZE : int
        Default marker size for mesh panel points.
        Default: 2
    """

    # Validation behavior
    STRICT_VALIDATION: bool = True

    # Engine discovery
    ENGINE_MODULE: Optional[str] = None

    # Documentation
    MISSING_DOCSTRING: str = 'No documentation found.'

    # Plotting defaults
    DEFAULT_POINT_COLOR: str = 'red'
    DEFAULT_NORMAL_COLOR: str = 'blue'
    DEFAULT_NORMAL_SCALE: float = 0.5
    DEFAULT_MARKER_SIZE: int = 2

    def reset(self):
        """
        Reset all configuration values to package defaults.

        Examples
        --------
        >>> import astrobind
        >>> astrobind.config.STRICT_VALIDATION = False  # Modify
        >>> astrobind.config.reset()  # Back to defaults
        >>> astrobind.config.STRICT_VALIDATION
        True
        """
        defaults = AstrobindConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))

    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["AstrobindConfig:"]
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        lines.append("  Engine:")
        lines.append(f"    ENGINE_MODULE = {self.ENGINE_MODULE!r}")
        lines.append("  Documentation:")
        lines.append(f"    MISSING_DOCSTRING = '{self.MISSING_DOCSTRING}'")
        lines.append("  Plotting:")
        lines.append(f"    DEFAULT_POINT_COLOR = '{self.DEFAULT_POINT_COLOR}'")
        lines.append(f"    DEFAULT_NORMAL_COLOR = '{self.DEFAULT_NORMAL_COLOR}'")
        lines.append(f"    DEFAULT_NORMAL_SCALE = {self.DEFAULT_NORMAL_SCALE}")
        lines.append(f"    DEFAULT_MARKER_SIZE = {self.DEFAULT_MARKER_SIZE}")
        return "\n".join(lines)


# Global configuration instance
config = AstrobindConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.

    Configuration is automatically restored when the context exits,
    even if an exception occurs.

    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.

    Examples
    --------
    >>> import astrobind
    >>> with astrobind.temp_config(ENGINE_MODULE="my_engine"):
    ...     kernel = astrobind.load()
    >>> # Original config restored here
    >>> astrobind.config.ENGINE_MODULE is None
    True

    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise AttributeError(
                f"AstrobindConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)

    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)

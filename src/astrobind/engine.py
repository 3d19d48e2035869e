"""
Engine Discovery and Validation
===============================

The engine is any importable namespace carrying the wrapped library's
classes and functions under their own names. This module lists the symbols
each exposure area relies on, imports engines by dotted name and checks that
an engine provides what an area needs.
"""

import importlib
import logging
import types
from typing import Dict, List, Optional, Tuple

from .config import config
from .utils import validation_error

logger = logging.getLogger(__name__)

ENGINE_SYMBOLS: Dict[str, Tuple[str, ...]] = {
    "aerodynamics": (
        "AerodynamicCoefficientsIndependentVariables",
        "AerodynamicCoefficientInterface",
        "AerodynamicCoefficientGenerator36",
        "getDefaultHypersonicLocalInclinationMachPoints",
        "getDefaultHypersonicLocalInclinationAngleOfAttackPoints",
        "getDefaultHypersonicLocalInclinationAngleOfSideslipPoints",
        "HypersonicLocalInclinationAnalysis",
        "FlightConditions",
        "AtmosphericFlightConditions",
        "AerodynamicGuidance",
    ),
    "shape": (
        "BodyShapeSettings",
        "SphericalBodyShapeSettings",
        "OblateSphericalBodyShapeSettings",
        "sphericalBodyShapeSettings",
        "fromSpiceSphericalBodyShapeSettings",
        "oblateSphericalBodyShapeSettings",
    ),
}


def load_engine(name: Optional[str] = None) -> types.ModuleType:
    """
    Import the engine module.

    Parameters
    ----------
    name : str, optional
        Dotted module path. Defaults to ``config.ENGINE_MODULE``.

    Returns
    -------
    ModuleType
        The imported engine

    Raises
    ------
    ValueError
        If no engine name is given and none is configured
    ImportError
        If the engine module cannot be imported
    """
    name = name or config.ENGINE_MODULE
    if not name:
        raise ValueError(
            "No engine specified. Pass an engine module name or set "
            "astrobind.config.ENGINE_MODULE"
        )
    logger.info("Loading engine '%s'", name)
    return importlib.import_module(name)


def missing_symbols(engine, area: str) -> List[str]:
    """Names of ``area``'s symbols that ``engine`` lacks."""
    if area not in ENGINE_SYMBOLS:
        raise ValueError(
            f"Unknown exposure area '{area}'. "
            f"Valid options: {sorted(ENGINE_SYMBOLS)}"
        )
    return [symbol for symbol in ENGINE_SYMBOLS[area] if not hasattr(engine, symbol)]


def check_engine(engine, area: str) -> bool:
    """
    Check that ``engine`` provides every symbol of ``area``.

    Returns
    -------
    bool
        True if the engine is complete for this area. Incomplete engines
        raise AttributeError, or warn and return False when
        ``config.STRICT_VALIDATION`` is off.
    """
    missing = missing_symbols(engine, area)
    if missing:
        validation_error(
            f"Engine {getattr(engine, '__name__', engine)!r} cannot expose "
            f"'{area}': missing {missing}",
            AttributeError
        )
        return False
    return True

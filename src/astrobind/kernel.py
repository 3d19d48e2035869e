"""
Kernel Assembly
===============

Builds the module tree through which scripts reach the engine::

    kernel
    ├── astro
    │   └── aerodynamics
    └── numerical_simulation
        └── environment_setup
            └── shape

Examples
--------
>>> import astrobind
>>> kernel = astrobind.load("my_engine")
>>> settings = kernel.numerical_simulation.environment_setup.shape.spherical(6378.0e3)
>>> aero = kernel.astro.aerodynamics
>>> aero.get_default_local_inclination_mach_points()
"""

import logging
import types
from typing import Optional

from .aerodynamics import expose_aerodynamics
from .binding import create_module, def_submodule
from .engine import check_engine, load_engine
from .shape_setup import expose_shape_setup
from .utils import Timer

logger = logging.getLogger(__name__)


def build_kernel(engine, name: str = "kernel") -> types.ModuleType:
    """
    Expose every supported area of ``engine`` in a new module tree.

    Areas the engine does not fully provide raise AttributeError, or are
    left empty with a warning when ``config.STRICT_VALIDATION`` is off.

    Parameters
    ----------
    engine : module or object
        Engine namespace
    name : str, optional
        Name of the root module (default: "kernel")

    Returns
    -------
    ModuleType
        Root module of the tree
    """
    kernel = create_module(name, "Bindings of the astrodynamics engine.")

    with Timer(f"Building {name}"):
        astro = def_submodule(kernel, "astro", "Astrodynamics models.")
        aerodynamics = def_submodule(astro, "aerodynamics",
                                     "Aerodynamic coefficients, flight conditions and guidance.")
        if check_engine(engine, "aerodynamics"):
            expose_aerodynamics(aerodynamics, engine)

        numerical_simulation = def_submodule(kernel, "numerical_simulation",
                                             "Numerical simulation setup.")
        environment_setup = def_submodule(numerical_simulation, "environment_setup",
                                          "Settings for environment models.")
        shape = def_submodule(environment_setup, "shape", "Body shape model settings.")
        if check_engine(engine, "shape"):
            expose_shape_setup(shape, engine)

    return kernel


def load(engine=None, name: Optional[str] = None) -> types.ModuleType:
    """
    Build the kernel for ``engine``.

    Parameters
    ----------
    engine : module, object or str, optional
        Engine namespace, or dotted name of the engine module. Defaults to
        the module named by ``config.ENGINE_MODULE``.
    name : str, optional
        Name of the root module (default: "kernel")

    Returns
    -------
    ModuleType
        Root module of the kernel
    """
    if engine is None or isinstance(engine, str):
        engine = load_engine(engine)
    return build_kernel(engine, name or "kernel")

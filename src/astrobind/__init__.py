"""
Astrobind: Python Bindings for an Astrodynamics Engine

A Python package republishing the aerodynamics, flight-condition and body
shape APIs of a native astrodynamics simulation engine under Python names,
with named and defaulted arguments and documentation.
"""

# Configuration
from .config import config, temp_config
from .logging_config import setup_logging

# Kernel assembly
from .kernel import build_kernel, load
from .engine import load_engine, check_engine, ENGINE_SYMBOLS

# Binding building blocks
from .binding import (
    arg, class_, enum_, def_function, def_submodule, create_module,
    get_override, BoundObject, BoundEnum,
)

# Exposure functions and mesh helpers
from .aerodynamics import expose_aerodynamics, get_total_surface_area, get_vehicle_mesh
from .shape_setup import expose_shape_setup
from .mesh import (
    local_inclination_mesh_to_dataframe,
    save_local_inclination_mesh,
    plot_local_inclination_mesh,
)

# Package metadata
__version__ = "0.1.0"

# Define what gets imported with "from astrobind import *"
__all__ = [
    # Configuration
    "config",
    "temp_config",
    "setup_logging",
    # Kernel
    "build_kernel",
    "load",
    "load_engine",
    "check_engine",
    "ENGINE_SYMBOLS",
    # Binding
    "arg",
    "class_",
    "enum_",
    "def_function",
    "def_submodule",
    "create_module",
    "get_override",
    "BoundObject",
    "BoundEnum",
    # Exposure
    "expose_aerodynamics",
    "expose_shape_setup",
    # Mesh helpers
    "get_total_surface_area",
    "get_vehicle_mesh",
    "local_inclination_mesh_to_dataframe",
    "save_local_inclination_mesh",
    "plot_local_inclination_mesh",
]

"""
Documentation registry for bound names.

Bound classes, properties and functions look their documentation up here by
their Python name (``"Class"``, ``"Class.attribute"`` or ``"function"``).
"""

from .config import config

DOCSTRINGS = {
    # ---------- aerodynamics ----------
    "AerodynamicCoefficientsIndependentVariables": """
Enumeration of the variables on which aerodynamic coefficients may depend.

The order in which these are passed to an aerodynamic coefficient interface
defines the meaning of each entry of its independent variable vector.
""",
    "AerodynamicCoefficientInterface": """
Base class holding the current aerodynamic force and moment coefficients of a
body, updated from the current values of the independent variables.
""",
    "AerodynamicCoefficientInterface.reference_area":
        "Reference area with which the aerodynamic force coefficients are non-dimensionalized [m^2].",
    "AerodynamicCoefficientInterface.current_force_coefficients":
        "Force coefficients computed at the last call to ``update_coefficients``.",
    "AerodynamicCoefficientInterface.current_moment_coefficients":
        "Moment coefficients computed at the last call to ``update_coefficients``.",
    "AerodynamicCoefficientInterface.current_coefficients":
        "Concatenated force and moment coefficients (6 entries).",
    "AerodynamicCoefficientInterface.update_coefficients": """
Update the current coefficients from the independent variables.

Parameters
----------
independent_variables : list[float]
    Current values of the independent variables, in the order defined by
    the interface.
time : float
    Current time [s].
""",
    "AerodynamicCoefficientGenerator36": """
Aerodynamic coefficient interface whose coefficients are pre-computed on a
three-dimensional grid of independent variables (6 coefficients per point).
""",
    "get_default_local_inclination_mach_points": """
Default Mach number grid for a local inclination analysis.

Parameters
----------
mach_regime : str, default="Full"
    Regime for which the points are generated.
""",
    "get_default_local_inclination_angle_of_attack_points":
        "Default angle of attack grid for a local inclination analysis [rad].",
    "get_default_local_inclination_sideslip_angle_points":
        "Default sideslip angle grid for a local inclination analysis [rad].",
    "HypersonicLocalInclinationAnalysis": """
Aerodynamic coefficient generator using local inclination (panel) methods
on a meshed vehicle shape.

Parameters
----------
independent_variable_points : list[list[float]]
    Mach number, angle of attack and sideslip angle grids.
body_shape : SurfaceGeometry
    Vehicle shape, possibly made of several parts.
number_of_lines : list[int]
    Number of mesh lines per vehicle part.
number_of_points : list[int]
    Number of mesh points per line per vehicle part.
invert_orders : list[bool]
    Whether the panel orientation of each part is inverted.
selected_methods : list[list[int]]
    Compression and expansion method selection per part.
reference_area : float
    Reference area [m^2].
reference_length : float
    Reference length [m].
moment_reference_point : numpy.ndarray
    Point about which moments are computed [m].
save_pressure_coefficients : bool, default=False
    Whether panel pressure coefficients are retained after the analysis.
""",
    "get_local_inclination_total_vehicle_area": """
Total surface area of a local inclination analysis vehicle, taken as the sum
of the absolute areas of its parts [m^2].
""",
    "get_local_inclination_mesh": """
Panel points and surface normals of a local inclination analysis mesh.

Returns
-------
tuple[list[numpy.ndarray], list[numpy.ndarray]]
    Points and normals of every panel, in part/line/point order.
""",
    "FlightConditions": """
Current altitude, position and aerodynamic angles of a body relative to the
body it flies around.
""",
    "FlightConditions.update_conditions":
        "Update all current conditions to ``current_time`` [s].",
    "FlightConditions.get_aerodynamic_angle_calculator":
        "Calculator of the aerodynamic angles of the body, or None if not set.",
    "FlightConditions.aerodynamic_angle_calculator":
        "Calculator of the aerodynamic angles of the body (None if not set).",
    "FlightConditions.current_altitude": "Current altitude above the body shape [m].",
    "FlightConditions.current_longitude": "Current longitude [rad].",
    "FlightConditions.current_geodetic_latitude": "Current geodetic latitude [rad].",
    "FlightConditions.current_time": "Time of the last update of the conditions [s].",
    "FlightConditions.current_body_centered_body_fixed_state":
        "Current Cartesian state in the body-fixed frame of the central body [m, m/s].",
    "AtmosphericFlightConditions": """
Flight conditions of a body flying through an atmosphere, adding freestream
and aerodynamic coefficient quantities. Obtained from the environment, not
constructed directly.
""",
    "AtmosphericFlightConditions.current_density": "Current freestream density [kg/m^3].",
    "AtmosphericFlightConditions.current_temperature": "Current freestream temperature [K].",
    "AtmosphericFlightConditions.current_dynamic_pressure": "Current dynamic pressure [Pa].",
    "AtmosphericFlightConditions.current_pressure": "Current freestream static pressure [Pa].",
    "AtmosphericFlightConditions.current_airspeed": "Current airspeed [m/s].",
    "AtmosphericFlightConditions.current_mach_number": "Current Mach number [-].",
    "AtmosphericFlightConditions.current_airspeed_velocity":
        "Current airspeed-based velocity vector in the body-fixed frame [m/s].",
    "AtmosphericFlightConditions.current_speed_of_sound": "Current freestream speed of sound [m/s].",
    "AtmosphericFlightConditions.current_aerodynamic_coefficient_independent_variables":
        "Current values of the independent variables of the aerodynamic coefficients.",
    "AtmosphericFlightConditions.current_control_surface_aerodynamic_coefficient_independent_variables":
        "Current independent variables of the control surface coefficients, per control surface.",
    "AtmosphericFlightConditions.aerodynamic_coefficient_interface":
        "Aerodynamic coefficient interface used by these flight conditions.",
    "AerodynamicGuidance": """
Base class for user-defined aerodynamic guidance.

Subclass it and implement ``updateGuidance(current_time)``, setting
``angle_of_attack``, ``bank_angle`` and ``sideslip_angle``.
""",
    # ---------- shape setup ----------
    "BodyShapeSettings": "Base class for providing settings for body shape model.",
    "SphericalBodyShapeSettings": """
Class for defining model settings for a strictly spherical body shape.

Instances are created through the ``spherical`` factory function.
""",
    "SphericalBodyShapeSettings.radius": "Radius of spherical shape model [m].",
    "OblateSphericalBodyShapeSettings": """
Class for defining model settings for an oblate spherical body shape.

Instances are created through the ``oblate_spherical`` factory function.
""",
    "OblateSphericalBodyShapeSettings.equatorial_radius":
        "Equatorial radius of the oblate spherical shape model [m].",
    "OblateSphericalBodyShapeSettings.flattening":
        "Flattening of the oblate spherical shape model [-].",
    "spherical": """
Factory function for creating spherical body shape model settings.

Parameters
----------
radius : float
    Radius of the body [m].

Returns
-------
SphericalBodyShapeSettings
""",
    "spherical_spice": """
Factory function for creating spherical body shape model settings whose
radius is retrieved from Spice kernels.

Returns
-------
BodyShapeSettings
""",
    "oblate_spherical": """
Factory function for creating oblate spherical body shape model settings.

Parameters
----------
equatorial_radius : float
    Equatorial radius of the body [m].
flattening : float
    Flattening of the body [-].

Returns
-------
OblateSphericalBodyShapeSettings
""",
}


def get_docstring(name: str) -> str:
    """Documentation of ``name``, or ``config.MISSING_DOCSTRING``."""
    doc = DOCSTRINGS.get(name)
    if doc is None:
        return config.MISSING_DOCSTRING
    return doc.strip()

'''Exposure of the engine's aerodynamics: coefficient interfaces, local
inclination analysis, flight conditions and aerodynamic guidance'''

import logging
import types
from typing import List, Protocol, Sequence, Tuple

import numpy as np

from .binding import arg, class_, def_function, enum_, get_override
from .docstrings import get_docstring

logger = logging.getLogger(__name__)


class VehiclePart(Protocol):
    """Meshed part of a local inclination analysis vehicle."""
    def getTotalArea(self) -> float: ...


class LocalInclinationAnalysis(Protocol):
    """Engine-side local inclination analysis, as used by the mesh helpers."""
    def getNumberOfVehicleParts(self) -> int: ...

    def getVehiclePart(self, index: int) -> VehiclePart: ...

    def getMeshPoints(self) -> Sequence[np.ndarray]: ...

    def getPanelSurfaceNormals(self) -> Sequence[np.ndarray]: ...


# ========== MESH HELPERS ==========
def get_total_surface_area(analysis: LocalInclinationAnalysis) -> float:
    """
    Total surface area of all vehicle parts of a local inclination analysis.

    Part areas may be signed (inverted panel orientation), so the absolute
    value of each part contributes.
    """
    total_area = 0.0
    for i in range(analysis.getNumberOfVehicleParts()):
        total_area += abs(analysis.getVehiclePart(i).getTotalArea())
    return total_area


def interior_cells(analysis: LocalInclinationAnalysis
                   ) -> List[Tuple[np.ndarray, np.ndarray]]:
    """
    Interior mesh points and panel normals of every vehicle part.

    For a part whose mesh is an (n_lines, n_points) grid of 3-vectors, the
    interior cells are the first n_lines - 1 lines and first n_points - 1
    points of each line, one per panel.

    Returns
    -------
    list of (points, normals)
        One pair of arrays of shape (n_lines - 1, n_points - 1, 3) per part

    Raises
    ------
    ValueError
        If points and normals do not describe the same parts and panels
    """
    mesh_points = analysis.getMeshPoints()
    surface_normals = analysis.getPanelSurfaceNormals()
    if len(mesh_points) != len(surface_normals):
        raise ValueError(
            f"Mesh has {len(mesh_points)} parts but "
            f"{len(surface_normals)} sets of panel surface normals"
        )

    cells = []
    for part, (points, normals) in enumerate(zip(mesh_points, surface_normals)):
        points = np.asarray(points, dtype=float)
        normals = np.asarray(normals, dtype=float)
        if points.size == 0:
            cells.append((np.empty((0, 0, 3)), np.empty((0, 0, 3))))
            continue
        if points.ndim != 3 or points.shape[2] != 3:
            raise ValueError(
                f"Mesh points of part {part} must be a grid of 3-vectors, "
                f"got shape {points.shape}"
            )
        n_lines = max(points.shape[0] - 1, 0)
        n_points = max(points.shape[1] - 1, 0)
        if (normals.ndim != 3 or normals.shape[0] < n_lines
                or normals.shape[1] < n_points or normals.shape[2] != 3):
            raise ValueError(
                f"Panel surface normals of part {part} (shape {normals.shape}) "
                f"do not cover its {n_lines}x{n_points} panels"
            )
        cells.append((points[:n_lines, :n_points], normals[:n_lines, :n_points]))
    return cells


def get_vehicle_mesh(analysis: LocalInclinationAnalysis
                     ) -> Tuple[List[np.ndarray], List[np.ndarray]]:
    """
    Flatten the mesh of a local inclination analysis into panel lists.

    Returns
    -------
    tuple of (points, normals)
        Equal-length lists of 3-vectors, one entry per interior mesh cell,
        ordered by part, then line, then point
    """
    points_list = []
    normals_list = []
    for points, normals in interior_cells(analysis):
        points_list.extend(points.reshape(-1, 3).copy())
        normals_list.extend(normals.reshape(-1, 3).copy())
    return points_list, normals_list


# ========== GUIDANCE TRAMPOLINE ==========
def make_guidance_trampoline(guidance_base: type) -> type:
    """
    Engine guidance subclass forwarding ``updateGuidance`` to Python.

    The returned class is instantiated with the Python-side guidance object
    as owner; when the engine updates the guidance, the owner's
    ``updateGuidance`` override is called. A call reaching the engine while
    that override runs (e.g. through ``super().updateGuidance``) is a call
    of the pure virtual base and raises RuntimeError.
    """
    class PyAerodynamicGuidance(guidance_base):
        def __init__(self, owner):
            super().__init__()
            self._owner = owner
            self._in_override = False

        def updateGuidance(self, currentTime):
            override = None
            if not self._in_override:
                override = get_override(self._owner, "updateGuidance")
            if override is None:
                raise RuntimeError(
                    'Tried to call pure virtual function '
                    '"AerodynamicGuidance::updateGuidance"'
                )
            self._in_override = True
            try:
                override(currentTime)
            finally:
                self._in_override = False

    return PyAerodynamicGuidance


# ========== EXPOSURE ==========
def expose_aerodynamics(m: types.ModuleType, engine) -> types.ModuleType:
    """
    Publish the engine's aerodynamics classes and functions in ``m``.

    Parameters
    ----------
    m : ModuleType
        Module receiving the bindings
    engine : module or object
        Engine namespace carrying the aerodynamics symbols

    Returns
    -------
    ModuleType
        ``m``, for chaining
    """
    # Local imports avoid a cycle: mesh helpers accept bound objects
    from .mesh import (local_inclination_mesh_to_dataframe,
                       plot_local_inclination_mesh,
                       save_local_inclination_mesh)

    variables = engine.AerodynamicCoefficientsIndependentVariables
    (enum_(m, "AerodynamicCoefficientsIndependentVariables",
           get_docstring("AerodynamicCoefficientsIndependentVariables"))
        .value("mach_number_dependent", variables.mach_number_dependent)
        .value("angle_of_attack_dependent", variables.angle_of_attack_dependent)
        .value("sideslip_angle_dependent", variables.angle_of_sideslip_dependent)
        .value("altitude_dependent", variables.altitude_dependent)
        .value("time_dependent", variables.time_dependent)
        .value("control_surface_deflection_dependent",
               variables.control_surface_deflection_dependent)
        .value("undefined_independent_variable", variables.undefined_independent_variable)
        .export_values())

    interface = engine.AerodynamicCoefficientInterface
    (class_(m, "AerodynamicCoefficientInterface", interface,
            doc=get_docstring("AerodynamicCoefficientInterface"))
        .def_property_readonly("reference_area", interface.getReferenceArea,
                               doc=get_docstring("AerodynamicCoefficientInterface.reference_area"))
        .def_property_readonly("current_force_coefficients", interface.getCurrentForceCoefficients,
                               doc=get_docstring("AerodynamicCoefficientInterface.current_force_coefficients"))
        .def_property_readonly("current_moment_coefficients", interface.getCurrentMomentCoefficients,
                               doc=get_docstring("AerodynamicCoefficientInterface.current_moment_coefficients"))
        .def_property_readonly("current_coefficients", interface.getCurrentAerodynamicCoefficients,
                               doc=get_docstring("AerodynamicCoefficientInterface.current_coefficients"))
        .def_("update_coefficients", interface.updateCurrentCoefficients,
              arg("independent_variables"),
              arg("time"),
              doc=get_docstring("AerodynamicCoefficientInterface.update_coefficients")))

    class_(m, "AerodynamicCoefficientGenerator36", engine.AerodynamicCoefficientGenerator36,
           bases=(interface,),
           doc=get_docstring("AerodynamicCoefficientGenerator36"))

    def_function(m, "get_default_local_inclination_mach_points",
                 engine.getDefaultHypersonicLocalInclinationMachPoints,
                 arg("mach_regime", "Full"),
                 doc=get_docstring("get_default_local_inclination_mach_points"))

    def_function(m, "get_default_local_inclination_angle_of_attack_points",
                 engine.getDefaultHypersonicLocalInclinationAngleOfAttackPoints,
                 doc=get_docstring("get_default_local_inclination_angle_of_attack_points"))

    def_function(m, "get_default_local_inclination_sideslip_angle_points",
                 engine.getDefaultHypersonicLocalInclinationAngleOfSideslipPoints,
                 doc=get_docstring("get_default_local_inclination_sideslip_angle_points"))

    (class_(m, "HypersonicLocalInclinationAnalysis", engine.HypersonicLocalInclinationAnalysis,
            bases=(engine.AerodynamicCoefficientGenerator36,),
            doc=get_docstring("HypersonicLocalInclinationAnalysis"))
        .def_init(arg("independent_variable_points"),
                  arg("body_shape"),
                  arg("number_of_lines"),
                  arg("number_of_points"),
                  arg("invert_orders"),
                  arg("selected_methods"),
                  arg("reference_area"),
                  arg("reference_length"),
                  arg("moment_reference_point"),
                  arg("save_pressure_coefficients", False)))

    def_function(m, "get_local_inclination_total_vehicle_area", get_total_surface_area,
                 arg("local_inclination_analysis_object"),
                 doc=get_docstring("get_local_inclination_total_vehicle_area"))

    def_function(m, "get_local_inclination_mesh", get_vehicle_mesh,
                 arg("local_inclination_analysis_object"),
                 doc=get_docstring("get_local_inclination_mesh"))

    def_function(m, "get_local_inclination_mesh_dataframe", local_inclination_mesh_to_dataframe,
                 arg("local_inclination_analysis_object"),
                 arg("independent_variable_indices", None),
                 doc=local_inclination_mesh_to_dataframe.__doc__)

    def_function(m, "save_local_inclination_mesh", save_local_inclination_mesh,
                 arg("local_inclination_analysis_object"),
                 arg("file_path"),
                 arg("independent_variable_indices", None),
                 doc=save_local_inclination_mesh.__doc__)

    def_function(m, "plot_local_inclination_mesh", plot_local_inclination_mesh,
                 arg("local_inclination_analysis_object"),
                 arg("show_normals", True),
                 arg("point_color", None),
                 arg("normal_color", None),
                 arg("normal_scale", None),
                 arg("marker_size", None),
                 doc=plot_local_inclination_mesh.__doc__)

    conditions = engine.FlightConditions
    (class_(m, "FlightConditions", conditions,
            doc=get_docstring("FlightConditions"))
        .def_init(arg("shape_model"),
                  arg("aerodynamic_angle_calculator", None))
        .def_("get_aerodynamic_angle_calculator", conditions.getAerodynamicAngleCalculator,
              doc=get_docstring("FlightConditions.get_aerodynamic_angle_calculator"))
        .def_("update_conditions", conditions.updateConditions,
              arg("current_time"),
              doc=get_docstring("FlightConditions.update_conditions"))
        .def_property_readonly("aerodynamic_angle_calculator", conditions.getAerodynamicAngleCalculator,
                               doc=get_docstring("FlightConditions.aerodynamic_angle_calculator"))
        .def_property_readonly("current_altitude", conditions.getCurrentAltitude,
                               doc=get_docstring("FlightConditions.current_altitude"))
        .def_property_readonly("current_longitude", conditions.getCurrentLongitude,
                               doc=get_docstring("FlightConditions.current_longitude"))
        .def_property_readonly("current_geodetic_latitude", conditions.getCurrentGeodeticLatitude,
                               doc=get_docstring("FlightConditions.current_geodetic_latitude"))
        .def_property_readonly("current_time", conditions.getCurrentTime,
                               doc=get_docstring("FlightConditions.current_time"))
        .def_property_readonly("current_body_centered_body_fixed_state",
                               conditions.getCurrentBodyCenteredBodyFixedState,
                               doc=get_docstring("FlightConditions.current_body_centered_body_fixed_state")))

    atmospheric = engine.AtmosphericFlightConditions
    binder = class_(m, "AtmosphericFlightConditions", atmospheric,
                    bases=(conditions,),
                    doc=get_docstring("AtmosphericFlightConditions"))
    for name, getter in (
            ("current_density", atmospheric.getCurrentDensity),
            ("current_temperature", atmospheric.getCurrentFreestreamTemperature),
            ("current_dynamic_pressure", atmospheric.getCurrentDynamicPressure),
            ("current_pressure", atmospheric.getCurrentPressure),
            ("current_airspeed", atmospheric.getCurrentAirspeed),
            ("current_mach_number", atmospheric.getCurrentMachNumber),
            ("current_airspeed_velocity", atmospheric.getCurrentAirspeedBasedVelocity),
            ("current_speed_of_sound", atmospheric.getCurrentSpeedOfSound),
            ("current_aerodynamic_coefficient_independent_variables",
             atmospheric.getAerodynamicCoefficientIndependentVariables),
            ("current_control_surface_aerodynamic_coefficient_independent_variables",
             atmospheric.getControlSurfaceAerodynamicCoefficientIndependentVariables),
            ("aerodynamic_coefficient_interface", atmospheric.getAerodynamicCoefficientInterface)):
        binder.def_property_readonly(name, getter,
                                     doc=get_docstring(f"AtmosphericFlightConditions.{name}"))

    guidance = engine.AerodynamicGuidance
    (class_(m, "AerodynamicGuidance", guidance,
            doc=get_docstring("AerodynamicGuidance"),
            trampoline=make_guidance_trampoline(guidance))
        .def_init()
        .def_("updateGuidance", guidance.updateGuidance,
              arg("current_time"))
        .def_readwrite("angle_of_attack", "currentAngleOfAttack_")
        .def_readwrite("bank_angle", "currentBankAngle_")
        .def_readwrite("sideslip_angle", "currentAngleOfSideslip_"))

    logger.debug("Exposed aerodynamics in %s", m.__name__)
    return m

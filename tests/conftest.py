"""
Shared fixtures: a small in-memory engine implementing the engine contract
with simple closed-form behavior, and kernels built on top of it.
"""

import enum
import types

import numpy as np
import pytest

from astrobind import build_kernel, config


# ========== FAKE ENGINE ==========
class AerodynamicCoefficientsIndependentVariables(enum.Enum):
    mach_number_dependent = 0
    angle_of_attack_dependent = 1
    angle_of_sideslip_dependent = 2
    altitude_dependent = 3
    time_dependent = 4
    control_surface_deflection_dependent = 5
    undefined_independent_variable = 6


class AerodynamicCoefficientInterface:
    def __init__(self, referenceArea=1.0):
        self._reference_area = referenceArea
        self._coefficients = np.zeros(6)
        self.last_update = None

    def getReferenceArea(self):
        return self._reference_area

    def getCurrentForceCoefficients(self):
        return self._coefficients[:3].copy()

    def getCurrentMomentCoefficients(self):
        return self._coefficients[3:].copy()

    def getCurrentAerodynamicCoefficients(self):
        return self._coefficients.copy()

    def updateCurrentCoefficients(self, independentVariables, time):
        self.last_update = (list(independentVariables), time)
        mach = independentVariables[0]
        self._coefficients = np.array([0.1 * mach, 0.0, 0.2 * mach, 0.0, 0.01 * mach, 0.0])


class AerodynamicCoefficientGenerator36(AerodynamicCoefficientInterface):
    pass


class VehiclePart:
    def __init__(self, area):
        self._area = area

    def getTotalArea(self):
        return self._area


class FakeSurfaceGeometry:
    """Stand-in vehicle shape: signed area of each part."""
    def __init__(self, part_areas):
        self.part_areas = list(part_areas)


def make_grid(n_lines, n_points, part):
    """Mesh point grid with point (j, k) located at (j, k, part)."""
    grid = np.zeros((n_lines, n_points, 3))
    for j in range(n_lines):
        for k in range(n_points):
            grid[j, k] = (j, k, part)
    return grid


class HypersonicLocalInclinationAnalysis(AerodynamicCoefficientGenerator36):
    def __init__(self, independentVariablePoints, bodyShape, numberOfLines,
                 numberOfPoints, invertOrders, selectedMethods, referenceArea,
                 referenceLength, momentReferencePoint, savePressureCoefficients):
        super().__init__(referenceArea)
        self.independent_variable_points = independentVariablePoints
        self.reference_length = referenceLength
        self.moment_reference_point = momentReferencePoint
        self.save_pressure_coefficients = savePressureCoefficients
        self.invert_orders = invertOrders
        self.selected_methods = selectedMethods
        self._parts = [VehiclePart(area) for area in bodyShape.part_areas]
        self._mesh_points = [
            make_grid(lines, points, part)
            for part, (lines, points) in enumerate(zip(numberOfLines, numberOfPoints))
        ]
        # One normal per panel, pointing along +z for even parts, -z for odd
        self._normals = [
            np.tile([0.0, 0.0, 1.0 if part % 2 == 0 else -1.0],
                    (max(lines - 1, 0), max(points - 1, 0), 1))
            for part, (lines, points) in enumerate(zip(numberOfLines, numberOfPoints))
        ]

    def getNumberOfVehicleParts(self):
        return len(self._parts)

    def getVehiclePart(self, index):
        return self._parts[index]

    def getMeshPoints(self):
        return self._mesh_points

    def getPanelSurfaceNormals(self):
        return self._normals

    def getPressureCoefficientList(self, independentVariables):
        if not self.save_pressure_coefficients:
            raise RuntimeError("Pressure coefficients were not saved")
        offset = float(sum(independentVariables))
        return [
            (np.arange((grid.shape[0] - 1) * (grid.shape[1] - 1), dtype=float)
             .reshape(grid.shape[0] - 1, grid.shape[1] - 1) + offset).tolist()
            for grid in self._mesh_points
        ]


def getDefaultHypersonicLocalInclinationMachPoints(machRegime):
    if machRegime == "Full":
        return [3.0, 4.0, 5.0, 8.0, 10.0, 20.0]
    if machRegime == "Low":
        return [3.0, 4.0, 5.0]
    if machRegime == "High":
        return [8.0, 10.0, 20.0]
    raise ValueError(f"Mach regime {machRegime} not found")


def getDefaultHypersonicLocalInclinationAngleOfAttackPoints():
    return np.deg2rad(np.arange(0.0, 45.0, 5.0))


def getDefaultHypersonicLocalInclinationAngleOfSideslipPoints():
    return [0.0, np.deg2rad(1.0)]


class AerodynamicAngleCalculator:
    pass


class FlightConditions:
    def __init__(self, shapeModel, aerodynamicAngleCalculator):
        self.shape_model = shapeModel
        self._angle_calculator = aerodynamicAngleCalculator
        self._time = np.nan
        self._altitude = np.nan
        self._latitude = np.nan
        self._longitude = np.nan
        self._state = np.full(6, np.nan)

    def getAerodynamicAngleCalculator(self):
        return self._angle_calculator

    def updateConditions(self, currentTime):
        self._time = currentTime
        self._altitude = 100.0e3 - currentTime
        self._latitude = 0.25
        self._longitude = 1.5
        self._state = np.arange(6, dtype=float) + currentTime

    def getCurrentAltitude(self):
        return self._altitude

    def getCurrentLongitude(self):
        return self._longitude

    def getCurrentGeodeticLatitude(self):
        return self._latitude

    def getCurrentTime(self):
        return self._time

    def getCurrentBodyCenteredBodyFixedState(self):
        return self._state


class AtmosphericFlightConditions(FlightConditions):
    def __init__(self, shapeModel, coefficientInterface):
        super().__init__(shapeModel, AerodynamicAngleCalculator())
        self._interface = coefficientInterface

    def getCurrentDensity(self):
        return 1.0e-3

    def getCurrentFreestreamTemperature(self):
        return 200.0

    def getCurrentAirspeed(self):
        return 3000.0

    def getCurrentSpeedOfSound(self):
        return 300.0

    def getCurrentMachNumber(self):
        return self.getCurrentAirspeed() / self.getCurrentSpeedOfSound()

    def getCurrentDynamicPressure(self):
        return 0.5 * self.getCurrentDensity() * self.getCurrentAirspeed() ** 2

    def getCurrentPressure(self):
        return 57.4

    def getCurrentAirspeedBasedVelocity(self):
        return np.array([3000.0, 0.0, 0.0])

    def getAerodynamicCoefficientIndependentVariables(self):
        return [self.getCurrentMachNumber(), 0.1, 0.0]

    def getControlSurfaceAerodynamicCoefficientIndependentVariables(self):
        return {"elevon": [self.getCurrentMachNumber(), 0.1, 0.05]}

    def getAerodynamicCoefficientInterface(self):
        return self._interface


class AerodynamicGuidance:
    def __init__(self):
        self.currentAngleOfAttack_ = 0.0
        self.currentAngleOfSideslip_ = 0.0
        self.currentBankAngle_ = 0.0

    def updateGuidance(self, currentTime):
        raise NotImplementedError

    def getAerodynamicAngles(self, currentTime):
        """Engine-side use of guidance: update, then read the angles."""
        self.updateGuidance(currentTime)
        return (self.currentAngleOfAttack_,
                self.currentAngleOfSideslip_,
                self.currentBankAngle_)


class BodyShapeSettings:
    pass


class SphericalBodyShapeSettings(BodyShapeSettings):
    def __init__(self, radius):
        self._radius = radius

    def getRadius(self):
        return self._radius

    def resetRadius(self, radius):
        self._radius = radius


class OblateSphericalBodyShapeSettings(BodyShapeSettings):
    def __init__(self, equatorialRadius, flattening):
        self._equatorial_radius = equatorialRadius
        self._flattening = flattening

    def getEquatorialRadius(self):
        return self._equatorial_radius

    def resetEquatorialRadius(self, equatorialRadius):
        self._equatorial_radius = equatorialRadius

    def getFlattening(self):
        return self._flattening

    def resetFlattening(self, flattening):
        self._flattening = flattening


def sphericalBodyShapeSettings(radius):
    return SphericalBodyShapeSettings(radius)


def fromSpiceSphericalBodyShapeSettings():
    return BodyShapeSettings()


def oblateSphericalBodyShapeSettings(equatorialRadius, flattening):
    return OblateSphericalBodyShapeSettings(equatorialRadius, flattening)


_ENGINE_SYMBOLS = [
    AerodynamicCoefficientsIndependentVariables,
    AerodynamicCoefficientInterface,
    AerodynamicCoefficientGenerator36,
    HypersonicLocalInclinationAnalysis,
    getDefaultHypersonicLocalInclinationMachPoints,
    getDefaultHypersonicLocalInclinationAngleOfAttackPoints,
    getDefaultHypersonicLocalInclinationAngleOfSideslipPoints,
    FlightConditions,
    AtmosphericFlightConditions,
    AerodynamicGuidance,
    BodyShapeSettings,
    SphericalBodyShapeSettings,
    OblateSphericalBodyShapeSettings,
    sphericalBodyShapeSettings,
    fromSpiceSphericalBodyShapeSettings,
    oblateSphericalBodyShapeSettings,
]


def make_engine(name="fake_astro_engine", exclude=()):
    """Engine module carrying every contract symbol not in ``exclude``."""
    engine = types.ModuleType(name)
    for symbol in _ENGINE_SYMBOLS:
        if symbol.__name__ not in exclude:
            setattr(engine, symbol.__name__, symbol)
    return engine


# ========== FIXTURES ==========
@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts and ends with default configuration."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def engine():
    return make_engine()


@pytest.fixture
def kernel(engine):
    return build_kernel(engine)


@pytest.fixture
def aero(kernel):
    return kernel.astro.aerodynamics


@pytest.fixture
def shape(kernel):
    return kernel.numerical_simulation.environment_setup.shape


@pytest.fixture
def analysis(aero):
    """Two-part vehicle: 4x5 grid (area -3.0) and 3x3 grid (area 2.5)."""
    return aero.HypersonicLocalInclinationAnalysis(
        independent_variable_points=[[5.0, 10.0], [0.0, 0.1], [0.0]],
        body_shape=FakeSurfaceGeometry([-3.0, 2.5]),
        number_of_lines=[4, 3],
        number_of_points=[5, 3],
        invert_orders=[False, True],
        selected_methods=[[1, 1], [1, 1]],
        reference_area=2.0,
        reference_length=1.5,
        moment_reference_point=np.array([0.5, 0.0, 0.0]),
        save_pressure_coefficients=True,
    )


@pytest.fixture
def engine_factory():
    return make_engine


@pytest.fixture
def surface_geometry():
    return FakeSurfaceGeometry

'''Exposure of the engine's body shape settings and their factory functions'''

import logging
import types

from .binding import arg, class_, def_function
from .docstrings import get_docstring

logger = logging.getLogger(__name__)


def expose_shape_setup(m: types.ModuleType, engine) -> types.ModuleType:
    """
    Publish the engine's body shape settings in ``m``.

    Parameters
    ----------
    m : ModuleType
        Module receiving the bindings
    engine : module or object
        Engine namespace carrying the shape settings symbols

    Returns
    -------
    ModuleType
        ``m``, for chaining
    """
    class_(m, "BodyShapeSettings", engine.BodyShapeSettings,
           doc=get_docstring("BodyShapeSettings"))

    spherical = engine.SphericalBodyShapeSettings
    (class_(m, "SphericalBodyShapeSettings", spherical,
            bases=(engine.BodyShapeSettings,),
            doc=get_docstring("SphericalBodyShapeSettings"))
        .def_property("radius", spherical.getRadius, spherical.resetRadius,
                      doc=get_docstring("SphericalBodyShapeSettings.radius")))

    oblate = engine.OblateSphericalBodyShapeSettings
    (class_(m, "OblateSphericalBodyShapeSettings", oblate,
            bases=(engine.BodyShapeSettings,),
            doc=get_docstring("OblateSphericalBodyShapeSettings"))
        .def_property("equatorial_radius", oblate.getEquatorialRadius, oblate.resetEquatorialRadius,
                      doc=get_docstring("OblateSphericalBodyShapeSettings.equatorial_radius"))
        .def_property("flattening", oblate.getFlattening, oblate.resetFlattening,
                      doc=get_docstring("OblateSphericalBodyShapeSettings.flattening")))

    def_function(m, "spherical", engine.sphericalBodyShapeSettings,
                 arg("radius"),
                 doc=get_docstring("spherical"))

    def_function(m, "spherical_spice", engine.fromSpiceSphericalBodyShapeSettings,
                 doc=get_docstring("spherical_spice"))

    def_function(m, "oblate_spherical", engine.oblateSphericalBodyShapeSettings,
                 arg("equatorial_radius"),
                 arg("flattening"),
                 doc=get_docstring("oblate_spherical"))

    logger.debug("Exposed shape setup in %s", m.__name__)
    return m

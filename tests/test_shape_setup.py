"""
Test suite for body shape settings bindings.
"""

import pytest


class TestSpherical:
    """Test spherical shape settings."""

    def test_factory(self, shape):
        settings = shape.spherical(radius=6378.0e3)
        assert type(settings) is shape.SphericalBodyShapeSettings
        assert isinstance(settings, shape.BodyShapeSettings)
        assert settings.radius == 6378.0e3

    def test_radius_writable(self, shape):
        settings = shape.spherical(1.0)
        settings.radius = 2.0
        assert settings.radius == 2.0
        assert settings._native.getRadius() == 2.0

    def test_missing_radius(self, shape):
        with pytest.raises(TypeError, match="spherical"):
            shape.spherical()

    def test_spice(self, shape):
        settings = shape.spherical_spice()
        assert type(settings) is shape.BodyShapeSettings

    def test_spice_takes_no_keywords(self, shape):
        with pytest.raises(TypeError, match="Keyword arguments are not supported"):
            shape.spherical_spice(radius=1.0)

    def test_no_constructor(self, shape):
        with pytest.raises(TypeError, match="No constructor defined"):
            shape.SphericalBodyShapeSettings(1.0)


class TestOblateSpherical:
    """Test oblate spherical shape settings."""

    def test_factory(self, shape):
        settings = shape.oblate_spherical(equatorial_radius=6378.0e3, flattening=1 / 298.257)
        assert type(settings) is shape.OblateSphericalBodyShapeSettings
        assert settings.equatorial_radius == 6378.0e3
        assert settings.flattening == pytest.approx(1 / 298.257)

    def test_properties_writable(self, shape):
        settings = shape.oblate_spherical(6378.0e3, 0.003)
        settings.equatorial_radius = 3396.0e3
        settings.flattening = 0.006
        assert settings.equatorial_radius == 3396.0e3
        assert settings.flattening == 0.006

    def test_positional_order(self, shape):
        settings = shape.oblate_spherical(10.0, 0.1)
        assert settings.equatorial_radius == 10.0
        assert settings.flattening == 0.1


class TestDocumentation:
    """Test documentation of shape bindings."""

    def test_function_doc(self, shape):
        assert shape.spherical.__doc__.startswith("spherical(radius)")
        assert "radius : float" in shape.spherical.__doc__

    def test_class_doc(self, shape):
        assert shape.BodyShapeSettings.__doc__
        assert shape.BodyShapeSettings.__doc__ != "No documentation found."

    def test_property_doc(self, shape):
        assert shape.OblateSphericalBodyShapeSettings.flattening.__doc__

"""Test the physical constants and default values (tsys.constants)."""

from tsys.constants import *
from tsys.fluxmodel import get_reference_frequency
from tsys.parameters import params as PARAMS


def test_constant_values():
    """The constants should have the published values."""

    assert KB == 1.380469e-23
    assert JY_PER_J == 1e26
    assert TCMB == 2.728
    assert NU1 == 1e6


def test_default_values():
    """Default sky temperature is the CMB, and the default reference
    frequency is 1 MHz."""

    assert PARAMS['tsky'] == 2.728
    assert get_reference_frequency() == 1e6

"""Test the module that converts between apparent temperature and apparent
flux density (tsys.aperture).

"""

import numpy as np
import pytest

from tsys.aperture import *
from tsys.constants import KB, JY_PER_J


def test_apparent_flux():
    """Compare against a manual calculation for a 13.5 m dish."""

    d = 13.5
    area = np.pi * d ** 2 / 4

    # Transparent atmosphere, perfect efficiency
    s = apparent_flux(10., d)
    np.testing.assert_allclose(s, 2 * KB * JY_PER_J * 10. / area, rtol=1e-14)

    # 1 K from a 13.5 m dish is roughly 19 Jy
    assert 19 < apparent_flux(1., d) < 20

    # Lower efficiency and higher opacity both increase the flux density
    s2 = apparent_flux(10., d, eta=0.7, tau=0.05, airmass=2.)
    expected = 2 * KB * JY_PER_J * 10. / (0.7 * area * np.exp(-0.1))
    np.testing.assert_allclose(s2, expected, rtol=1e-14)
    assert s2 > s


def test_apparent_temperature():
    """Compare against a manual calculation."""

    d = 64.
    area = np.pi * d ** 2 / 4

    t = apparent_temperature(15., d, eta=0.6, tau=0.02, airmass=1.5)
    expected = 15. * 0.6 * area * np.exp(-0.03) / (2 * KB * JY_PER_J)
    np.testing.assert_allclose(t, expected, rtol=1e-14)


@pytest.mark.parametrize("eta,tau,airmass", [(1., 0., 1.),
                                             (0.65, 0.04, 1.8),
                                             (0.3, 0.2, 0.)])
def test_round_trip(eta, tau, airmass):
    """apparent_temperature is the inverse of apparent_flux."""

    k = np.array([0.1, 2.728, 50., 300.])
    for d in (6., 13.5, 100.):
        s = apparent_flux(k, d, eta=eta, tau=tau, airmass=airmass)
        k2 = apparent_temperature(s, d, eta=eta, tau=tau, airmass=airmass)
        np.testing.assert_allclose(k2, k, rtol=1e-12)


def test_division_by_zero():
    """Zero diameter or zero efficiency gives inf instead of an error."""

    assert np.isinf(apparent_flux(10., 0.))
    assert np.isinf(apparent_flux(10., 13.5, eta=0.))
    assert apparent_temperature(10., 0.) == 0.

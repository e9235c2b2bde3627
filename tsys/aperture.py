""" This module contains functions for converting between the apparent black
body temperature and the apparent spectral flux density of a source.

**Description:**

    For an antenna with diameter ``D`` and aperture efficiency ``eta``, the
    effective collecting area is:

        A = eta * pi * D^2 / 4

    and a source seen through an atmosphere with zenith opacity ``tau`` at a
    given ``airmass`` is attenuated by:

        att = exp(-tau * airmass)

    The flux density ``S`` (in units [Jy]) and the apparent temperature ``T``
    (in units [K]) are then related by:

        S = 2 * k * T / (A * att)

    where ``k`` is the Boltzmann constant.

"""

import numpy as np

from tsys.constants import KB, JY_PER_J


def apparent_flux(k, diameter, eta=1., tau=0., airmass=1.):
    """Calculate apparent flux density from apparent temperature.

    Args:
        k (float): apparent black body temperature, in units [K]
        diameter (float): antenna diameter, in units [m]
        eta (float, optional, default is 1): aperture efficiency
        tau (float, optional, default is 0): atmospheric opacity at zenith,
            in units [nepers]. The default is a totally transparent
            atmosphere.
        airmass (float, optional, default is 1): airmass. The default is the
            airmass at zenith.

    Returns:
        float: apparent spectral flux density, in units [Jy]

    """

    with np.errstate(divide='ignore', invalid='ignore'):
        area = _effective_area(diameter, eta)
        att = _attenuation(tau, airmass)
        return (2 * KB * JY_PER_J * np.asarray(k, dtype=float)) / (area * att)


def apparent_temperature(s, diameter, eta=1., tau=0., airmass=1.):
    """Calculate apparent temperature from apparent flux density.

    This is the inverse of ``apparent_flux``.

    Args:
        s (float): apparent spectral flux density, in units [Jy]
        diameter (float): antenna diameter, in units [m]
        eta (float, optional, default is 1): aperture efficiency
        tau (float, optional, default is 0): atmospheric opacity at zenith,
            in units [nepers]
        airmass (float, optional, default is 1): airmass

    Returns:
        float: apparent black body temperature, in units [K]

    """

    with np.errstate(divide='ignore', invalid='ignore'):
        area = _effective_area(diameter, eta)
        att = _attenuation(tau, airmass)
        return np.asarray(s, dtype=float) * area * att / (2 * KB * JY_PER_J)


def _effective_area(diameter, eta):
    """Effective collecting area, in units [m^2]."""

    return eta * np.pi * np.asarray(diameter, dtype=float) ** 2 / 4


def _attenuation(tau, airmass):
    """Fraction of the signal that is transmitted through the atmosphere."""

    return np.exp(-np.multiply(tau, airmass, dtype=float))

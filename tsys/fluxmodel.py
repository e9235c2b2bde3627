""" This module contains functions for evaluating calibrator flux density
models.

**Description:**

    The spectral flux density of a calibrator is described by a polynomial in
    the logarithm of frequency:

        log10(S) = c0 + c1 * x + c2 * x^2 + ...,  where x = log10(hz / nu1)

    The coefficients ``[c0, c1, c2, ...]`` are the flux model, and ``nu1`` is
    the frequency (in units [Hz]) that the model is based on. Models
    published in the literature use different values of ``nu1`` (e.g., 1 MHz
    or 1 GHz), so the same source can have very different coefficients.

    If ``hz`` or ``nu1`` is not given, the process-wide reference frequency
    is used instead. This defaults to ``tsys.constants.NU1`` (1 MHz) and it
    can be changed with ``set_reference_frequency``. Passing ``nu1``
    explicitly is safer, especially from multiple threads.

"""

import threading

import numpy as np
import matplotlib.pyplot as plt
import scipy.constants as sc
from numpy.polynomial import polynomial as P

from tsys.constants import NU1


# Published flux models ------------------------------------------------------

# These J1939-6342 (a.k.a. 1934-638) models are from different epochs, so the
# flux densities are similar, but not identical.

# From MeerKAT, nu1 = 1 MHz
J1939_6342_MEERKAT = (-30.7667, 26.4908, -7.0977, 0.605334)

# From ATCA, nu1 = 1 GHz
J1939_6342_ATCA = (1.186, 0.1191, -1.191)


# Reference frequency --------------------------------------------------------

_nu1 = NU1
_nu1_lock = threading.Lock()


def get_reference_frequency():
    """Get the default reference frequency for flux models.

    Returns:
        float: reference frequency in units [Hz]

    """

    with _nu1_lock:
        return _nu1


def set_reference_frequency(hz):
    """Set the default reference frequency for flux models.

    This value is used by ``model_flux`` for the observing frequency and/or
    the model frequency whenever they are not given. It stays in effect for
    the rest of the process.

    Args:
        hz (float): new reference frequency in units [Hz], must be positive

    Returns:
        float: the previous reference frequency, in units [Hz]

    """

    global _nu1

    assert hz > 0, "Reference frequency must be positive."

    with _nu1_lock:
        previous, _nu1 = _nu1, float(hz)

    return previous


# Flux model -----------------------------------------------------------------

def model_flux(model, hz=None, nu1=None):
    """Calculate the spectral flux density from a calibrator flux model.

    Note:

        No checks are done on the frequencies. If ``hz`` or ``nu1`` is zero
        or negative, the result will be ``nan``.

    Example:

        At the model frequency, only the constant term survives:

        >>> float(model_flux([1., 2., 3.], 1e9, 1e9))
        10.0

    Args:
        model: flux model coefficients, ``[c0, c1, c2, ...]``, where ``c0``
            is the constant term
        hz (float or ndarray, optional): frequency in units [Hz], defaults to
            the reference frequency
        nu1 (float, optional): frequency that the model is based on, in
            units [Hz], defaults to the reference frequency

    Returns:
        float or ndarray: spectral flux density

    """

    if hz is None:
        hz = get_reference_frequency()
    if nu1 is None:
        nu1 = get_reference_frequency()

    hz = np.asarray(hz, dtype=float)

    with np.errstate(all='ignore'):
        x = np.log10(hz / nu1)
        log_flux = P.polyval(x, np.asarray(model, dtype=float))
        flux = np.power(10., log_flux)

    return flux


# Plotting -------------------------------------------------------------------

_plot_params = {'dpi': 300, 'bbox_inches': 'tight'}

_freq_units = {
    'hz': 1.,
    'khz': sc.kilo,
    'mhz': sc.mega,
    'ghz': sc.giga,
}


def plot_flux_model(model, fmin, fmax, nu1=None, units='MHz', npts=201,
                    fig_name=None, ax=None, **kw):
    """Plot the spectrum of a calibrator flux model.

    Note: If ``fig_name`` is provided, this function will save the plot
    to the specified file and then close the plot. The Matplotlib axis
    object will not be returned in this case.

    Args:
        model: flux model coefficients, ``[c0, c1, c2, ...]``
        fmin (float): minimum frequency to plot, in the given units
        fmax (float): maximum frequency to plot, in the given units
        nu1 (float, optional): frequency that the model is based on, in
            units [Hz], defaults to the reference frequency
        units (str, optional, default is 'MHz'): frequency units, one of
            'Hz', 'kHz', 'MHz' or 'GHz'
        npts (int, optional, default is 201): number of points to plot
        fig_name (str): figure filename
        ax: Matplotlib axis
        kw: keyword arguments passed on to ``ax.plot``

    Returns:
        Matplotlib axis, or ``None`` if ``fig_name`` is provided

    """

    try:
        scale = _freq_units[units.lower()]
    except KeyError:
        raise ValueError('Units not recognized.')

    freq = np.logspace(np.log10(fmin), np.log10(fmax), npts)
    flux = model_flux(model, freq * scale, nu1)

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.get_figure()
    ax.loglog(freq, flux, **kw)
    ax.set_xlabel('Frequency ({})'.format(units))
    ax.set_ylabel('Flux density (Jy)')
    ax.set_xlim([freq[0], freq[-1]])
    if kw.get('label') is not None:
        ax.legend(loc=0, fontsize=8)

    if fig_name is not None:
        fig.savefig(fig_name, **_plot_params)
        plt.close(fig)
        return
    else:
        return ax

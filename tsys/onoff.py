""" This module contains functions for calculating the calibrator temperature
or the system temperature from ON/OFF power measurements.

**Description:**

    The output power of a linear radiometer is proportional to the total
    temperature that it sees. With the telescope pointed ON and OFF a
    calibrator:

        pon  = G (Tsky + Tsys + Tcal)
        poff = G (Tsky + Tsys)

    where ``G`` is the gain and ``Tsky`` is the apparent temperature of the
    "blank sky" at the OFF position. The gain cancels in the ratio:

         pon - poff        Tcal
        ------------ = -------------
            poff        Tsky + Tsys

    which can be solved for either ``Tcal`` (``tcal_onoff``) or ``Tsys``
    (``tsys_onoff``).

    If ``clip=True``, calculated temperatures below 0 K are clamped to 0 K.
    These values are not physical, but they can be caused by noisy
    measurements. There is never an upper limit.

    Division by zero (e.g., ``poff == 0`` or ``pon == poff``) does not raise
    an error. The result is ``inf`` or ``nan`` instead.

"""

import numpy as np

from tsys.aperture import apparent_temperature
from tsys.constants import TCMB
from tsys.misc.terminal import header, pvalf, pvale
from tsys.parameters import params as PARAMS


def onoff_ratio(pon, poff):
    """Calculate the ON/OFF ratio, ``(pon - poff) / poff``.

    Args:
        pon (float or ndarray): power measured ON the calibrator
        poff (float or ndarray): power measured OFF the calibrator

    Returns:
        float or ndarray: ON/OFF ratio, equal to ``Tcal / (Tsky + Tsys)``

    """

    pon = np.asarray(pon, dtype=float)
    poff = np.asarray(poff, dtype=float)

    with np.errstate(divide='ignore', invalid='ignore'):
        return (pon - poff) / poff


def tcal_onoff(pon, poff, tsys, tsky=TCMB, clip=True):
    """Calculate the apparent temperature of the calibrator.

    Uses:

                pon - poff
        Tcal = ------------ * (Tsky + Tsys)
                   poff

    Args:
        pon (float or ndarray): power measured ON the calibrator
        poff (float or ndarray): power measured OFF the calibrator, in the
            same units as ``pon``
        tsys (float): system temperature, in units [K]
        tsky (float, optional): apparent temperature of the blank sky at the
            OFF position, in units [K], default is the CMB temperature
        clip (bool, optional, default is True): clamp values below 0 K

    Returns:
        float or ndarray: calibrator temperature, in units [K]

    """

    y = onoff_ratio(pon, poff)

    with np.errstate(invalid='ignore'):
        tcal = y * (tsky + tsys)

    return _clip_temperature(tcal, clip)


def tsys_onoff(pon, poff, tcal, diameter=None, tsky=TCMB, clip=True, **kw):
    """Calculate the system temperature.

    Uses:

                          poff
        Tsys = Tcal * ------------ - Tsky
                       pon - poff

    If ``diameter`` is given, the third argument is instead taken to be the
    apparent flux density of the calibrator in units [Jy], and the
    calculation is passed on to ``tsys_onoff_from_flux``. In this case,
    any other keyword arguments (``eta``, ``tau``, ``airmass``, ``verbose``)
    are passed along as well. The flux density can only be given
    positionally here; to pass it by name (``scal=...``), call
    ``tsys_onoff_from_flux`` directly.

    Args:
        pon (float or ndarray): power measured ON the calibrator
        poff (float or ndarray): power measured OFF the calibrator, in the
            same units as ``pon``
        tcal (float): apparent temperature of the calibrator, in units [K]
        diameter (float, optional): antenna diameter, in units [m]
        tsky (float, optional): apparent temperature of the blank sky at the
            OFF position, in units [K], default is the CMB temperature
        clip (bool, optional, default is True): clamp values below 0 K

    Returns:
        float or ndarray: system temperature, in units [K]

    """

    if diameter is not None:
        return tsys_onoff_from_flux(pon, poff, tcal, diameter,
                                    tsky=tsky, clip=clip, **kw)

    if kw:
        msg = "Unexpected keyword argument(s) without diameter: {}"
        raise TypeError(msg.format(", ".join(sorted(kw))))

    y = onoff_ratio(pon, poff)

    with np.errstate(divide='ignore', invalid='ignore'):
        tsys = np.asarray(tcal, dtype=float) / y - tsky

    return _clip_temperature(tsys, clip)


def tsys_onoff_from_flux(pon, poff, scal, diameter, **kw):
    """Calculate the system temperature from the calibrator flux density.

    The calibrator flux density is first converted into an apparent
    temperature using ``tsys.aperture.apparent_temperature``, and then the
    system temperature is calculated using ``tsys_onoff``.

    Args:
        pon (float or ndarray): power measured ON the calibrator
        poff (float or ndarray): power measured OFF the calibrator, in the
            same units as ``pon``
        scal (float): apparent flux density of the calibrator, in units [Jy]
        diameter (float): antenna diameter, in units [m]

    Keyword Args:
        eta: aperture efficiency
        tau: atmospheric opacity at zenith, in units [nepers]
        airmass: airmass
        tsky: apparent temperature of the blank sky, in units [K]
        clip: clamp values below 0 K
        verbose: print the results to the terminal

    Raises:
        TypeError: if a keyword argument is not one of the above

    Returns:
        float or ndarray: system temperature, in units [K]

    """

    unknown = set(kw) - set(PARAMS)
    if unknown:
        msg = "Unexpected keyword argument(s): {}"
        raise TypeError(msg.format(", ".join(sorted(unknown))))

    # Unpack keyword arguments
    eta = kw.get('eta', PARAMS['eta'])
    tau = kw.get('tau', PARAMS['tau'])
    airmass = kw.get('airmass', PARAMS['airmass'])
    tsky = kw.get('tsky', PARAMS['tsky'])
    clip = kw.get('clip', PARAMS['clip'])
    verbose = kw.get('verbose', PARAMS['verbose'])

    # Calibrator temperature
    tcal = apparent_temperature(scal, diameter, eta=eta, tau=tau,
                                airmass=airmass)

    # System temperature
    tsys = tsys_onoff(pon, poff, tcal, tsky=tsky, clip=clip)

    if verbose:
        header('ON/OFF calibration')
        _print_value(pvale, 'Scal', scal, 'Jy')
        _print_value(pvalf, 'Tcal', tcal, 'K')
        _print_value(pvalf, 'Tsky', tsky, 'K')
        _print_value(pvalf, 'Tsys', tsys, 'K')
        print("")

    return tsys


def _clip_temperature(temperature, clip):
    """Clamp temperatures below 0 K if ``clip`` is set. No upper limit."""

    lower = 0. if clip else -np.inf

    return np.clip(temperature, lower, np.inf)


def _print_value(print_fn, name, val, units):
    """Print a scalar, or the mean of an array."""

    if np.ndim(val) == 0:
        print_fn(name, val, units)
    else:
        print_fn(name, np.nanmean(val), units,
                 'mean of {} values'.format(np.size(val)))

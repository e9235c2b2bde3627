""" This module contains a dictionary of parameters (``params``) that is
used by ``tsys.onoff.tsys_onoff_from_flux`` to control how the calibrator
flux density is converted into a temperature and how the system temperature
is then calculated.

Note:

    This dictionary just contains the default values. You can overwrite these
    values by passing keyword arguments to ``tsys_onoff_from_flux``. For
    example, the default aperture efficiency is 1. You can change this
    parameter by passing ``eta=0.7``.

All of the different parameters are described below along with their default
values.

**Parameters:**

    - Antenna and atmosphere:
        - ``eta = 1.`` : Aperture efficiency (dimensionless). Physically this
          should be between 0 and 1, but it is not checked.
        - ``tau = 0.`` : Zenith atmospheric opacity in units [nepers]. The
          default value is a totally transparent atmosphere.
        - ``airmass = 1.`` : Airmass (dimensionless). The default value is
          the airmass at zenith.
    - ON/OFF calibration:
        - ``tsky = 2.728`` : Apparent temperature of the "blank sky" at the
          OFF position in units [K]. Defaults to the CMB temperature.
        - ``clip = True`` : If ``True``, calculated temperatures below 0 K
          are clamped to 0 K. There is never an upper limit.
    - Output:
        - ``verbose = False`` : Print the calculated values to the terminal?

"""

from tsys.constants import TCMB

params = dict(
    # Antenna and atmosphere
    eta=1.,
    tau=0.,
    airmass=1.,
    # ON/OFF calibration
    tsky=TCMB,
    clip=True,
    # Output
    verbose=False,
)

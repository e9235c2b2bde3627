""" This sub-module contains the physical constants and default values used
throughout Tsys.

"""

import scipy.constants as sc


# Boltzmann constant, in units [J/K]
KB = 1.380469e-23

# Janskys per Joule, i.e., 1 Jy = 1e-26 W/m^2/Hz
JY_PER_J = 1e26

# Temperature of the cosmic microwave background (CMB), in units [K]
TCMB = 2.728

# Default reference frequency of the calibrator flux models, in units [Hz]
NU1 = 1 * sc.mega

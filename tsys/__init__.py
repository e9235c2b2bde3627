"""System Temperature from ON/OFF Calibration

Tsys is used to calculate the system temperature of a radio telescope from
power measurements taken ON and OFF a calibrator source. It includes
polynomial flux density models for calibrators, black body temperature/flux
conversions for a given antenna aperture, and the ON/OFF calibration algebra.

"""

import tsys.constants
import tsys.parameters
import tsys.misc

import tsys.fluxmodel
import tsys.aperture
import tsys.onoff

from tsys.constants import KB, JY_PER_J, TCMB, NU1
from tsys.fluxmodel import (model_flux, get_reference_frequency,
                            set_reference_frequency)
from tsys.aperture import apparent_flux, apparent_temperature
from tsys.onoff import (onoff_ratio, tcal_onoff, tsys_onoff,
                        tsys_onoff_from_flux)

__author__ = "Tsys developers"
__version__ = "0.1.0"

# -*- coding: utf-8 -*-
"""
    outrunnertools.conductor
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Copper wire properties and AWG gauges



"""
import logging
from collections import namedtuple
import numpy as np
from .model import InvalidParameter

logger = logging.getLogger(__name__)

RHO_CU = 1.68e-8  # resistivity of copper at 20°C, Ohm m
DENS_CU = 8960  # mass density of copper kg/m³
J_MAX = 5.0  # conservative current density A/mm²

# AWG to wire diameter in mm
AWG_DIAMETERS = {
    8: 3.264, 10: 2.588, 12: 2.053, 14: 1.628,
    16: 1.291, 18: 1.024, 20: 0.812, 22: 0.644,
    24: 0.511, 26: 0.405, 28: 0.321, 30: 0.255,
    32: 0.202, 34: 0.160, 36: 0.127, 38: 0.101}

WireProperties = namedtuple(
    'WireProperties',
    ['diameter',  # mm
     'area',  # mm²
     'current_capacity',  # A
     'resistance_per_meter',  # Ohm/m
     'mass_per_meter'])  # kg/m


def awg_to_diameter(awg):
    """returns the diameter in mm of a wire with AWG gauge *awg*

    Gauges not listed in the table are extrapolated with
    d = 0.127 mm * 92**((36 - awg)/39)
    """
    try:
        return AWG_DIAMETERS[awg]
    except KeyError:
        pass
    d = 0.127 * np.power(92, (36 - awg)/39)
    logger.debug("AWG %s not in table, extrapolated %f mm", awg, d)
    return float(d)


def wire_properties(diameter):
    """returns the properties of a round copper wire

    Args:
      diameter: wire diameter in mm
    """
    try:
        valid = diameter > 0 and np.isfinite(diameter)
    except TypeError:
        valid = False
    if not valid:
        raise InvalidParameter('wire_thickness', diameter,
                               'must be a positive number')
    area = np.pi*(diameter/2)**2  # mm²
    return WireProperties(
        diameter=diameter,
        area=area,
        current_capacity=area*J_MAX,
        resistance_per_meter=RHO_CU/(area*1e-6),
        mass_per_meter=area*1e-6*DENS_CU)

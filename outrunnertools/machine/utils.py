"""
  outrunnertools.machine.utils

  auxiliary module: empirical estimates
"""
import numpy as np
import logging
from ..model import InvalidParameter

logger = logging.getLogger(__name__)

KV_FACTOR = 1352  # empirical, calibrated on hobby outrunners
BREF = 1.2  # reference remanence (T) of KV_FACTOR
ETA_MAX = 0.96  # efficiency cap
NUM_PHASES = 3


def calculate_airgap(motor_diameter):
    """returns recommended airgap in mm

    Args:
      motor_diameter: motor diameter in mm
    """
    return 0.5 + motor_diameter/200*0.5


def calculate_kv(pole_count, turns_per_coil, slot_count, magnet_strength=BREF):
    """returns KV rating (RPM/V) of a 3 phase motor (inf without turns)

    Args:
      pole_count: number of poles
      turns_per_coil: number of turns per coil
      slot_count: number of slots
      magnet_strength: remanence of magnets (T)
    """
    if turns_per_coil < 0:
        raise InvalidParameter('turns_per_coil', turns_per_coil,
                               'must not be negative')
    if turns_per_coil == 0:
        return np.inf
    # winding type is not considered here
    turns_per_phase = turns_per_coil*slot_count/NUM_PHASES
    return KV_FACTOR/(pole_count*np.sqrt(turns_per_phase) *
                      (magnet_strength/BREF))


def calculate_efficiency(pole_count, lcm, turns_per_coil, max_turns_per_coil):
    """returns estimated efficiency (0 .. ETA_MAX)

    Args:
      pole_count: number of poles
      lcm: least common multiple of slots and poles
      turns_per_coil: number of turns per coil
      max_turns_per_coil: max. number of turns that fit into a slot
    """
    eta = 0.82
    eta += pole_count/40*0.05
    # smooth commutation
    eta += lcm/300*0.03
    if max_turns_per_coil > 0:
        eta += turns_per_coil/max_turns_per_coil*0.02
    return min(ETA_MAX, eta)


def phase_resistance(resistance_per_meter, turns_per_coil, slot_count,
                     turn_length=0.2):
    """returns phase resistance in Ohm

    Args:
      resistance_per_meter: wire resistance (Ohm/m)
      turns_per_coil: number of turns per coil
      slot_count: number of slots
      turn_length: average length of a turn (m)
    """
    return (resistance_per_meter*turns_per_coil *
            slot_count/NUM_PHASES*turn_length)


def estimated_weight(mass_per_meter, turns_per_coil, slot_count,
                     magnet_volume, pole_count, turn_length=0.2,
                     magnet_density=7.5e-3):
    """returns estimated weight of copper and magnets

    Args:
      mass_per_meter: wire mass per length (kg/m)
      turns_per_coil: number of turns per coil
      slot_count: number of slots
      magnet_volume: volume of a single magnet (mm³)
      pole_count: number of poles (magnets)
      turn_length: average length of a turn (m)
      magnet_density: g/mm³
    """
    copper = mass_per_meter*turns_per_coil*slot_count*turn_length
    magnets = magnet_volume*pole_count*magnet_density
    logger.debug("weight copper %f magnets %f", copper, magnets)
    return copper + magnets

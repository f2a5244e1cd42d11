"""general design of an outrunner BLDC motor

   Dimensions in mm, KV in RPM/V

"""
import datetime
import logging
from collections import namedtuple
import numpy as np
from ..conductor import wire_properties
from ..model import DesignParameters, MotorDesign
from ..windings import calculate_configuration, MIN_SLOT_PITCH
from .utils import (calculate_airgap, calculate_kv, calculate_efficiency,
                    phase_resistance, estimated_weight)

logger = logging.getLogger(__name__)

OUTRUNNER_DEFAULTS = dict(
    stator_ratio=0.7,  # stator outer diam / motor diam
    bore_ratio=0.5,  # stator inner / outer diam
    slot_ratio=0.7,  # slot width / slot pitch
    kq=0.45,  # winding fill factor (hand wound)
    rotor_ratio=0.75,  # rotor inner diam / motor diam
    magnet_gap=0.1,  # gap between magnets / arc length per pole
    magnet_fill=0.9,  # max magnet height / rotor thickness
    brem=1.2,  # remanence 1.2 T (N42)
    turn_length=0.2,  # average length of one turn (m)
    magnet_density=7.5e-3,  # g/mm³
    min_slot_pitch=MIN_SLOT_PITCH  # mm
)
"""default sizing parameters for outrunners"""

KV_WARN = 20  # KV deviation (%)

CoilDimensions = namedtuple(
    'CoilDimensions',
    ['stator_inner_diameter',
     'stator_outer_diameter',
     'slot_pitch',
     'slot_width',
     'slot_depth',
     'slot_area',
     'wire_area',
     'turns_per_coil',
     'max_turns_per_coil',
     'wire_resistance_per_meter',
     'mass_per_meter'])

MagnetParameters = namedtuple(
    'MagnetParameters',
    ['rotor_inner_diameter',
     'rotor_outer_diameter',
     'polar_angle',  # degrees
     'arc_length',
     'magnet_width',
     'magnet_height',
     'magnet_gap'])


def _set_defaults(par, defaults):
    for k in defaults:
        if k not in par:
            par[k] = defaults[k]


def _round(x):
    """round half up"""
    return int(np.floor(x + 0.5))


def calculate_coil_dimensions(motor_diameter, config, wire_diameter,
                              target_kv, **kwargs):
    """returns stator slot and coil dimensions

    Args:
      motor_diameter: motor outer diameter (mm)
      config: slot/pole combination with slots, poles and winding
      wire_diameter: wire diameter (mm)
      target_kv: target KV (RPM/V)
    """
    par = dict(kwargs)
    _set_defaults(par, OUTRUNNER_DEFAULTS)

    Dso = par['stator_ratio']*motor_diameter
    Dsi = par['bore_ratio']*Dso

    # trapezoidal slot
    Q = config.slots
    taus = np.pi*Dso/Q
    bns = par['slot_ratio']*taus
    hns = (Dso - Dsi)/2
    bns1 = bns*Dsi/Dso
    ans = (bns + bns1)/2*hns

    wire = wire_properties(wire_diameter)
    # physical limit
    max_turns = int(np.floor(ans*par['kq']/wire.area))

    # flux per pole includes unit conversion
    phi = par['brem']*1e-4
    w1 = 1/(target_kv*phi*config.poles/60)
    if config.winding == 'distributed':
        turns_per_phase = w1/(Q/3)
    else:
        turns_per_phase = w1/(Q/3*2)
    logger.debug("slot area %f mm² max turns %d turns/phase %f",
                 ans, max_turns, turns_per_phase)

    return CoilDimensions(
        stator_inner_diameter=Dsi,
        stator_outer_diameter=Dso,
        slot_pitch=taus,
        slot_width=bns,
        slot_depth=hns,
        slot_area=ans,
        wire_area=wire.area,
        turns_per_coil=min(max_turns, _round(turns_per_phase)),
        max_turns_per_coil=max_turns,
        wire_resistance_per_meter=wire.resistance_per_meter,
        mass_per_meter=wire.mass_per_meter)


def calculate_magnet_parameters(motor_diameter, pole_count,
                                magnet_width, magnet_height, **kwargs):
    """returns rotor and magnet dimensions

    Args:
      motor_diameter: motor outer diameter (mm)
      pole_count: number of poles (magnets)
      magnet_width: requested magnet width (mm)
      magnet_height: requested magnet height (mm)
    """
    par = dict(kwargs)
    _set_defaults(par, OUTRUNNER_DEFAULTS)

    Dri = par['rotor_ratio']*motor_diameter
    Dro = motor_diameter

    alphap = 360/pole_count
    arc = np.pi*Dri*alphap/360
    gap = par['magnet_gap']*arc
    hr = (Dro - Dri)/2

    return MagnetParameters(
        rotor_inner_diameter=Dri,
        rotor_outer_diameter=Dro,
        polar_angle=alphap,
        arc_length=arc,
        magnet_width=min(magnet_width, arc - gap),
        magnet_height=min(magnet_height, par['magnet_fill']*hr),
        magnet_gap=gap)


def outrunner(params, **kwargs) -> MotorDesign:
    """returns the design of an outrunner BLDC motor

    Args:
    params: dict or DesignParameters with
      wire_thickness: wire diameter (mm)
      magnet_width, magnet_height, magnet_thickness: magnet size (mm)
      min_diameter, max_diameter: diameter range (mm)
      target_kv: target KV (RPM/V)

    kwargs: (optional) overrides of OUTRUNNER_DEFAULTS

    Raises InvalidParameter
    """
    par = DesignParameters(params)
    kw = dict(kwargs)
    _set_defaults(kw, OUTRUNNER_DEFAULTS)

    diameter = (par.min_diameter + par.max_diameter)/2

    config = calculate_configuration(par.min_diameter, par.max_diameter,
                                     par.target_kv,
                                     min_slot_pitch=kw['min_slot_pitch'])

    coil = calculate_coil_dimensions(diameter, config, par.wire_thickness,
                                     par.target_kv, **kw)
    if coil.turns_per_coil < 1:
        logger.warning(
            "no turns per coil with %dS%dP: wire %.2f mm "
            "(max %d turns), target KV %.1f",
            config.slots, config.poles, par.wire_thickness,
            coil.max_turns_per_coil, par.target_kv)

    magnet = calculate_magnet_parameters(diameter, config.poles,
                                         par.magnet_width,
                                         par.magnet_height, **kw)

    airgap = calculate_airgap(diameter)

    kv = calculate_kv(config.poles, coil.turns_per_coil, config.slots,
                      kw['brem'])
    kv_deviation = abs((kv - par.target_kv)/par.target_kv*100)
    if kv_deviation > KV_WARN:
        logger.warning("estimated KV %.1f deviates %.1f %% from target %.1f",
                       kv, kv_deviation, par.target_kv)

    eta = calculate_efficiency(config.poles, config.lcm,
                               coil.turns_per_coil, coil.max_turns_per_coil)

    r1 = phase_resistance(coil.wire_resistance_per_meter,
                          coil.turns_per_coil, config.slots,
                          kw['turn_length'])
    weight = estimated_weight(
        coil.mass_per_meter, coil.turns_per_coil, config.slots,
        magnet.magnet_width*magnet.magnet_height*par.magnet_thickness,
        config.poles, kw['turn_length'], kw['magnet_density'])

    logger.info("%dS%dP D %.1f mm, %d turns, KV %.1f, eta %.3f",
                config.slots, config.poles, diameter,
                coil.turns_per_coil, kv, eta)

    return MotorDesign(
        motor_diameter=diameter,
        rotor_diameter=magnet.rotor_outer_diameter,
        rotor_inner_diameter=magnet.rotor_inner_diameter,
        stator_outer_diameter=coil.stator_outer_diameter,
        stator_inner_diameter=coil.stator_inner_diameter,
        airgap=airgap,
        slot_count=config.slots,
        pole_count=config.poles,
        winding_type=config.winding,
        lcm=config.lcm,
        cogging_factor=config.cogging_factor,
        pole_pitch=config.pole_pitch,
        slot_width=coil.slot_width,
        slot_depth=coil.slot_depth,
        slot_area=coil.slot_area,
        turns_per_coil=coil.turns_per_coil,
        max_turns_per_coil=coil.max_turns_per_coil,
        wire_diameter=par.wire_thickness,
        wire_area=coil.wire_area,
        magnet_width=magnet.magnet_width,
        magnet_height=magnet.magnet_height,
        magnet_thickness=par.magnet_thickness,
        magnet_arc_length=magnet.arc_length,
        magnet_gap=magnet.magnet_gap,
        estimated_kv=kv,
        target_kv=par.target_kv,
        kv_deviation=kv_deviation,
        efficiency=eta,
        phase_resistance=r1,
        estimated_weight=weight,
        timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat())


if __name__ == "__main__":
    # design example of a 35 mm outrunner
    r = outrunner(dict(wire_thickness=0.8,
                       magnet_width=10, magnet_height=15,
                       magnet_thickness=3,
                       min_diameter=30, max_diameter=40,
                       target_kv=800))

    # print results
    print("Configuration              {:>6}".format(
        "{}S{}P".format(r.slot_count, r.pole_count)))
    print("Motor diameter        [mm] {:10.2f}".format(r.motor_diameter))
    print("Stator outer diameter [mm] {:10.2f}".format(
        r.stator_outer_diameter))
    print("Turns per coil             {:10d}".format(r.turns_per_coil))
    print("Estimated KV       [RPM/V] {:10.2f}".format(r.estimated_kv))
    print("Efficiency                 {:10.3f}".format(r.efficiency))

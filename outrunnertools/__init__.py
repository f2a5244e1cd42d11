# -*- coding: utf-8 -*-
"""
    outrunnertools
    ~~~~~~~~~~~~~~

    Design calculator for outrunner brushless DC motors



"""
__title__ = 'outrunnertools'
__version__ = '0.3.0'
__author__ = 'outrunnertools contributors'
__license__ = 'BSD'
__copyright__ = 'Copyright 2026 outrunnertools contributors'

from .model import (DesignParameters, MotorDesign, DesignError,
                    InvalidParameter)
from .conductor import wire_properties, awg_to_diameter
from .windings import calculate_configuration, rank_configurations
from .machine.sizing import outrunner
from .report import Report, export_filename, to_json


def calculate_motor_design(params, **kwargs):
    """returns MotorDesign from dict *params*

    Args:
        params: dict with keys wire_thickness, magnet_width,
          magnet_height, magnet_thickness, min_diameter,
          max_diameter, target_kv
        kwargs: overrides of the sizing defaults
    """
    return outrunner(params, **kwargs)

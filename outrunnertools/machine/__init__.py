# -*- coding: utf-8 -*-
"""
    outrunnertools.machine
    ~~~~~~~~~~~~~~~~~~~~~~

    Analytical outrunner models

"""
from .sizing import (outrunner, calculate_coil_dimensions,
                     calculate_magnet_parameters, CoilDimensions,
                     MagnetParameters, OUTRUNNER_DEFAULTS)
from .utils import (calculate_airgap, calculate_kv, calculate_efficiency,
                    phase_resistance, estimated_weight)

# -*- coding: utf-8 -*-
"""
    outrunnertools.model
    ~~~~~~~~~~~~~~~~~~~~

    Managing design parameters and results



"""
import logging
from collections import namedtuple
import numpy as np

logger = logging.getLogger(__name__)

# input parameters of a design, lengths in mm, KV in RPM/V
PARAMETERS = ('wire_thickness',
              'magnet_width',
              'magnet_height',
              'magnet_thickness',
              'min_diameter',
              'max_diameter',
              'target_kv')

# parameter names used by the web frontend
ALIASES = {'wireThickness': 'wire_thickness',
           'magnetWidth': 'magnet_width',
           'magnetHeight': 'magnet_height',
           'magnetThickness': 'magnet_thickness',
           'minDiameter': 'min_diameter',
           'maxDiameter': 'max_diameter',
           'targetKV': 'target_kv',
           'targetKv': 'target_kv'}


class DesignError(Exception):
    pass


class InvalidParameter(DesignError, ValueError):
    """parameter *name* with *value* violates *constraint*"""

    def __init__(self, name, value, constraint):
        self.name = name
        self.value = value
        self.constraint = constraint
        super(InvalidParameter, self).__init__(
            "{} {}, got {!r}".format(name, constraint, value))


MotorDesign = namedtuple(
    'MotorDesign',
    [
        # general dimensions (mm)
        'motor_diameter',
        'rotor_diameter',
        'rotor_inner_diameter',
        'stator_outer_diameter',
        'stator_inner_diameter',
        'airgap',
        # slot/pole configuration
        'slot_count',
        'pole_count',
        'winding_type',
        'lcm',
        'cogging_factor',
        'pole_pitch',
        # stator slots and coils
        'slot_width',
        'slot_depth',
        'slot_area',
        'turns_per_coil',
        'max_turns_per_coil',
        'wire_diameter',
        'wire_area',
        # magnets
        'magnet_width',
        'magnet_height',
        'magnet_thickness',
        'magnet_arc_length',
        'magnet_gap',
        # performance estimates
        'estimated_kv',
        'target_kv',
        'kv_deviation',  # %
        'efficiency',
        'phase_resistance',  # Ohm
        'estimated_weight',
        'timestamp'])


class Model(object):
    def __init__(self, parameters):
        if isinstance(parameters, dict):
            for k in parameters.keys():
                setattr(self, k, parameters[k])

    def __getitem__(self, name):
        return getattr(self, name)

    def __str__(self):
        "return string format of this object"
        return repr(self.__dict__)

    def __repr__(self):
        "representation of this object"
        return self.__str__()


class DesignParameters(Model):
    """input constraints of an outrunner design

    Args:
      parameters: dict or DesignParameters. For example:
    ::

        {'wire_thickness': 0.8,
         'magnet_width': 10,
         'magnet_height': 15,
         'magnet_thickness': 3,
         'min_diameter': 30,
         'max_diameter': 40,
         'target_kv': 800}

    Raises InvalidParameter if a value is missing or out of range.
    """

    def __init__(self, parameters):
        if isinstance(parameters, Model):
            parameters = dict(parameters.__dict__)
        names = {ALIASES.get(k, k): k for k in parameters}
        ignored = [names[k] for k in names if k not in PARAMETERS]
        if ignored:
            logger.debug("ignore parameters %s", ignored)
        super(DesignParameters, self).__init__(
            {k: parameters[names[k]] for k in names if k in PARAMETERS})
        self.validate()

    def validate(self):
        for name in PARAMETERS:
            try:
                value = getattr(self, name)
            except AttributeError:
                raise InvalidParameter(name, None, 'is required')
            if isinstance(value, bool):
                raise InvalidParameter(name, value, 'must be a number')
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise InvalidParameter(name, value, 'must be a number')
            if not np.isfinite(value) or value <= 0:
                raise InvalidParameter(name, value,
                                       'must be a positive number')
            setattr(self, name, value)

        if self.min_diameter >= self.max_diameter:
            raise InvalidParameter(
                'min_diameter', self.min_diameter,
                'must be less than max_diameter ({})'.format(
                    self.max_diameter))
        logger.debug("parameters %s", self)

    def todict(self):
        """returns the input parameters as dict"""
        return {k: getattr(self, k) for k in PARAMETERS}

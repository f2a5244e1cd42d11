# -*- coding: utf-8 -*-
"""
    outrunnertools.parstudy
    ~~~~~~~~~~~~~~~~~~~~~~~

    Parameter variation of outrunner designs



"""
import logging
import numpy as np
from .model import DesignParameters, PARAMETERS
from .machine.sizing import outrunner

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ('target_kv', 'slot_count', 'pole_count',
                  'turns_per_coil', 'estimated_kv', 'efficiency')


def sweep(params, name, values, **kwargs):
    """returns list of designs, one for each value of parameter *name*

    Args:
      params: dict or DesignParameters
      name: name of varied input parameter
      values: list of values
      kwargs: overrides of the sizing defaults
    """
    if name not in PARAMETERS:
        raise ValueError("unknown parameter {}".format(name))
    base = DesignParameters(params).todict()
    designs = []
    for v in values:
        par = dict(base)
        par[name] = v
        logger.debug("%s = %s", name, v)
        designs.append(outrunner(par, **kwargs))
    return designs


def kv_sweep(params, start, stop, num=10, **kwargs):
    """returns list of designs with target KV from start to stop"""
    return sweep(params, 'target_kv',
                 np.linspace(start, stop, num).tolist(), **kwargs)


def get_report(designs, columns=REPORT_COLUMNS):
    """returns a list of header and value rows of designs"""
    rows = np.array([[getattr(d, c) for c in columns]
                     for d in designs],
                    dtype=float).reshape(-1, len(columns))
    return [list(columns)] + rows.tolist()

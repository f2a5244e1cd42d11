#!/usr/bin/env python
#
import pytest
from outrunnertools.model import (DesignParameters, InvalidParameter,
                                  DesignError, PARAMETERS)


@pytest.fixture
def params():
    return {'wireThickness': 0.8,
            'magnetWidth': 10,
            'magnetHeight': 15,
            'magnetThickness': 3,
            'minDiameter': 30,
            'maxDiameter': 40,
            'targetKV': 800}


def test_aliases(params):
    p = DesignParameters(params)
    assert p.wire_thickness == 0.8
    assert p['target_kv'] == 800
    assert sorted(p.todict()) == sorted(PARAMETERS)


def test_copy(params):
    p = DesignParameters(DesignParameters(params))
    assert p.todict() == DesignParameters(params).todict()


def test_numeric_strings(params):
    params['targetKV'] = '1200'
    assert DesignParameters(params).target_kv == 1200.0


def test_bool_is_rejected(params):
    params['magnetWidth'] = True
    with pytest.raises(InvalidParameter) as e:
        DesignParameters(params)
    assert e.value.constraint == 'must be a number'


def test_error_message(params):
    params['maxDiameter'] = -40
    with pytest.raises(DesignError) as e:
        DesignParameters(params)
    assert isinstance(e.value, ValueError)
    assert e.value.name == 'max_diameter'
    assert e.value.value == -40
    assert str(e.value) == 'max_diameter must be a positive number, got -40.0'


def test_unknown_names_are_ignored(params):
    params['validate'] = 1
    params['comment'] = 'prototype'
    p = DesignParameters(params)
    assert not hasattr(p, 'comment')
    assert p.todict()['target_kv'] == 800

import pytest


@pytest.fixture
def params():
    """constraints of a 35 mm outrunner"""
    return dict(wire_thickness=0.8,
                magnet_width=10,
                magnet_height=15,
                magnet_thickness=3,
                min_diameter=30,
                max_diameter=40,
                target_kv=800)

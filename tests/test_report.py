#!/usr/bin/env python
#
import json
import mako.exceptions
import pytest
import outrunnertools
import outrunnertools.report
from outrunnertools.windings import rank_configurations


@pytest.fixture(scope="module")
def design():
    return outrunnertools.calculate_motor_design(
        dict(wire_thickness=0.8,
             magnet_width=10,
             magnet_height=15,
             magnet_thickness=3,
             min_diameter=30,
             max_diameter=40,
             target_kv=800))


def test_export_filename(design):
    assert outrunnertools.export_filename(design) == 'bldc_motor_21S22P.svg'
    assert outrunnertools.export_filename(
        design, 'json') == 'bldc_motor_21S22P.json'


def test_fill_ratio(design):
    assert outrunnertools.report.fill_ratio(design) == pytest.approx(0.4)
    assert outrunnertools.report.fill_ratio(
        design._replace(turns_per_coil=0, max_turns_per_coil=0)) == 0


def test_to_json(design):
    d = json.loads(outrunnertools.to_json(design))
    assert d['slot_count'] == 21
    assert d['pole_count'] == 22
    assert d['winding_type'] == 'distributed'
    assert d['estimated_kv'] == pytest.approx(design.estimated_kv)
    assert d['timestamp'] == design.timestamp


def test_report(design):
    lines = outrunnertools.Report().render(design)
    assert lines[0] == '21S22P Outrunner BLDC Motor'
    assert lines[1] == '=' * len(lines[0])
    text = '\n'.join(lines)
    assert 'Turns per coil           4' in text
    assert 'Fill factor              40.0 %' in text
    assert 'Estimated KV             12 RPM/V' in text
    assert 'Note: The estimated KV differs' in text
    assert 'Alternative Configurations' not in text


def test_report_without_kv_note(design):
    text = '\n'.join(outrunnertools.Report().render(
        design._replace(kv_deviation=5.0)))
    assert 'Note:' not in text


def test_report_alternatives(design):
    alternatives = rank_configurations(30, 40, 800)[1:3]
    text = '\n'.join(outrunnertools.Report().render(
        design, alternatives=alternatives))
    assert 'Alternative Configurations' in text
    assert '24S22P' in text
    assert '15S14P' in text


def test_custom_template(design, tmp_path):
    (tmp_path / 'short.mako').write_text(
        '${design.slot_count}S${design.pole_count}P ${"%.2f" % fill_ratio}\n')
    r = outrunnertools.Report(templatedirs=[str(tmp_path)])
    assert r.render(design, templ='short')[0] == '21S22P 0.40'


def test_missing_template(design):
    with pytest.raises(mako.exceptions.TopLevelLookupException):
        outrunnertools.Report().render(design, templ='nonexisting')

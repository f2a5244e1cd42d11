#!/usr/bin/env python
#
import json
import pytest
import outrunnertools.cli


def test_json(capsys):
    assert outrunnertools.cli.main(['--json']) == 0
    d = json.loads(capsys.readouterr().out)
    assert d['motor_diameter'] == 35
    assert (d['slot_count'], d['pole_count']) == (21, 22)


def test_awg(capsys):
    assert outrunnertools.cli.main(['--awg', '20', '--json']) == 0
    d = json.loads(capsys.readouterr().out)
    assert d['wire_diameter'] == 0.812


def test_report(capsys):
    assert outrunnertools.cli.main(['-a', '2']) == 0
    out = capsys.readouterr().out
    assert out.startswith('21S22P Outrunner BLDC Motor')
    assert 'Alternative Configurations' in out


def test_export(tmp_path, capsys):
    assert outrunnertools.cli.main(['--export', str(tmp_path)]) == 0
    p = tmp_path / 'bldc_motor_21S22P.json'
    assert json.loads(p.read_text())['turns_per_coil'] == 4


def test_sweep(capsys):
    assert outrunnertools.cli.main(['--sweep', '800', '1600', '3']) == 0
    lines = capsys.readouterr().out.strip().split('\n')
    assert len(lines) == 4
    assert lines[0].split()[0] == 'target_kv'


def test_invalid_range(capsys):
    with pytest.raises(SystemExit) as e:
        outrunnertools.cli.main(['--min-diameter', '40',
                                 '--max-diameter', '30'])
    assert e.value.code == 2
    assert 'min_diameter must be less than max_diameter' in \
        capsys.readouterr().err


def test_without_turns(capsys):
    assert outrunnertools.cli.main(['--wire', '3', '--json']) == 0
    d = json.loads(capsys.readouterr().out)
    assert d['turns_per_coil'] == 0
    assert d['estimated_kv'] == float('inf')
    assert outrunnertools.cli.main(['--wire', '3']) == 0
    assert 'Estimated KV             inf RPM/V' in capsys.readouterr().out


def test_negative_alternatives(capsys):
    with pytest.raises(SystemExit) as e:
        outrunnertools.cli.main(['-a', '-1'])
    assert e.value.code == 2
    assert '--alternatives must not be negative' in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as e:
        outrunnertools.cli.main(['--version'])
    assert e.value.code == 0
    assert outrunnertools.__version__ in capsys.readouterr().out
    assert outrunnertools.__author__ == 'outrunnertools contributors'

import pytest

from smrt_gimbal import cli


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.gimbal_range == 5.0
    assert args.pitch == 1.0
    assert args.ticks == 50
    assert args.lock_at is None
    assert args.plot_dir is None


def test_main_runs_quietly(capsys):
    assert cli.main(['--quiet', '--ticks', '5', '--pitch', '0.5']) == 0
    out = capsys.readouterr().out
    assert 'GIMBAL SUMMARY' in out
    assert 'Completed 5 ticks' in out
    assert 'Final deflection: 2.5000 deg' in out


def test_main_lock_and_plots(tmp_path, capsys):
    assert cli.main(['-q', '--ticks', '8', '--lock-at', '4',
                     '--plot-dir', str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert 'Final mode: LOCKED' in out
    assert (tmp_path / 'gimbal_deflection.png').exists()


def test_main_invalid_range_exits():
    with pytest.raises(SystemExit) as exc:
        cli.main(['-q', '--gimbal-range', '-1'])
    assert exc.value.code == 1

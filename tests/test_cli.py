# tests/test_cli.py
import asyncio
import gc
import logging
import time

import pytest

from connmon import cli
from connmon.prober.fake import FakeProber


def interrupt(_seconds):
    raise KeyboardInterrupt


@pytest.mark.parametrize("port", ["0", "65536", "-3"])
def test_bad_port_exits_before_probing(port, monkeypatch, capsys):
    """Invalid ports are a usage error and no probe is attempted."""
    def fail_build(args):
        raise AssertionError("prober should not be built")

    monkeypatch.setattr(cli, "build_prober", fail_build)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--server", "127.0.0.1", "--port", port])
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert "--port" in captured.err
    assert "Starting continuous connection monitor" not in captured.out


def test_bad_interval_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--server", "h", "--port", "80", "--interval-seconds", "0"])
    assert exc_info.value.code == 2
    assert "--interval-seconds" in capsys.readouterr().err


def test_missing_required_args():
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--port", "80"])
    assert exc_info.value.code == 2


def test_ctrl_c_stops_quietly(monkeypatch, capsys):
    monkeypatch.setattr(time, "sleep", interrupt)
    code = cli.main(["--server", "example.com", "--port", "443", "--fake"])
    assert code == 130
    out = capsys.readouterr().out
    assert "Target: example.com:443" in out
    assert "Interval: 5 seconds" in out
    assert "[SUCCESS] Connected to example.com:443 in 12 ms" in out


def test_ctrl_c_during_connect_is_quiet(monkeypatch, capsys, caplog):
    """Interrupting an in-flight attempt exits 130 without asyncio complaining about pending tasks."""
    def interrupt_now():
        raise KeyboardInterrupt

    async def hang(host, port):
        asyncio.get_running_loop().call_later(0.05, interrupt_now)
        await asyncio.sleep(60)

    monkeypatch.setattr(asyncio, "open_connection", hang)
    code = cli.main(["--server", "192.0.2.1", "--port", "80"])
    gc.collect()

    assert code == 130
    captured = capsys.readouterr()
    assert "Monitor stopped." in captured.out
    assert "Task was destroyed" not in captured.err
    assert not [r for r in caplog.records if r.name == "asyncio" and r.levelno >= logging.ERROR]


def test_log_write_error_exit_code(tmp_path, capsys, caplog):
    code = cli.main(["--server", "h", "--port", "1", "--fake", "--log-file", str(tmp_path)])
    assert code == 1
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert [r.name for r in errors] == ["connmon.cli"]
    assert "cannot write to log file" in errors[0].getMessage()
    captured = capsys.readouterr()
    assert f"Logging output to: {tmp_path}" in captured.out
    assert "[SUCCESS] Connected to h:1" in captured.out


def test_log_file_written_through_cli(tmp_path, monkeypatch, capsys):
    log_path = tmp_path / "monitor.log"
    ticks = []

    def sleep_then_stop(seconds):
        ticks.append(seconds)
        if len(ticks) >= 5:
            raise KeyboardInterrupt

    monkeypatch.setattr(time, "sleep", sleep_then_stop)
    code = cli.main([
        "--server", "h", "--port", "22", "--interval-seconds", "3",
        "--log-file", str(log_path), "--fake",
    ])
    assert code == 130
    assert ticks == [3] * 5
    logged = log_path.read_text(encoding="utf-8").splitlines()
    assert len(logged) == 5
    out_lines = capsys.readouterr().out.splitlines()
    assert out_lines[6:11] == logged
    assert "[TIMEOUT]" in logged[3]
    assert "Error: [Errno 111] Connection refused" in logged[2]


def test_build_prober_fake():
    args = cli.build_argparser().parse_args(["--server", "h", "--port", "1", "--fake"])
    assert isinstance(cli.build_prober(args), FakeProber)

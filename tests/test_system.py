"""Tests for system apply actions. subprocess.run is always faked."""

import subprocess

import pytest

from nehv_lib.common import system


class FakeRun:
    """Records commands and fails the ones whose text contains a marker."""

    def __init__(self, fail_on=None, returncode=1, stderr="boom"):
        self.calls = []
        self.fail_on = fail_on
        self.returncode = returncode
        self.stderr = stderr

    def __call__(self, args, **kwargs):
        self.calls.append(args)
        if self.fail_on and self.fail_on in " ".join(args):
            return subprocess.CompletedProcess(args, self.returncode, stdout="", stderr=self.stderr)
        return subprocess.CompletedProcess(args, 0, stdout="ok\n", stderr="")


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(system.subprocess, "run", fake)
    return fake


class TestResolvConf:

    def test_single_server(self, tmp_path):
        path = tmp_path / "resolv.conf"
        ok, _ = system.write_resolv_conf(["8.8.8.8"], path)
        assert ok
        assert path.read_text() == "nameserver 8.8.8.8"

    def test_multiple_servers(self, tmp_path):
        path = tmp_path / "resolv.conf"
        system.write_resolv_conf(["8.8.8.8", "1.1.1.1"], path)
        assert path.read_text() == "nameserver 8.8.8.8\nnameserver 1.1.1.1"

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "resolv.conf"
        monkeypatch.setenv("RESOLV_CONF", str(path))
        ok, _ = system.write_resolv_conf(["9.9.9.9"])
        assert ok
        assert path.read_text() == "nameserver 9.9.9.9"

    def test_unwritable_path(self, tmp_path):
        ok, msg = system.write_resolv_conf(["8.8.8.8"], tmp_path / "missing" / "resolv.conf")
        assert not ok
        assert "resolv.conf" in msg


class TestRunCommand:

    def test_success(self, fake_run):
        assert system.run_command(["true"]) == (True, "ok")

    def test_failure_returns_stderr(self, monkeypatch):
        monkeypatch.setattr(system.subprocess, "run", FakeRun(fail_on="false"))
        assert system.run_command(["false"]) == (False, "boom")

    def test_failure_without_stderr(self, monkeypatch):
        monkeypatch.setattr(system.subprocess, "run", FakeRun(fail_on="false", returncode=2, stderr=""))
        assert system.run_command(["false"]) == (False, "exit status 2")

    def test_missing_binary(self, monkeypatch):
        def raise_missing(args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", args[0])
        monkeypatch.setattr(system.subprocess, "run", raise_missing)
        ok, _ = system.run_command(["nonexistent"])
        assert not ok

    def test_timeout(self, monkeypatch):
        def raise_timeout(args, **kwargs):
            raise subprocess.TimeoutExpired(args, kwargs.get("timeout"))
        monkeypatch.setattr(system.subprocess, "run", raise_timeout)
        ok, msg = system.run_command(["sleep", "60"], timeout=1)
        assert not ok
        assert "timed out" in msg


class TestServices:

    def test_restart_order(self, fake_run):
        ok, _ = system.restart_name_services()
        assert ok
        assert fake_run.calls == [
            ["sudo", "systemctl", "restart", "resolvconf.service"],
            ["sudo", "systemctl", "restart", "systemd-resolved.service"],
        ]

    def test_restart_stops_at_first_failure(self, monkeypatch):
        fake = FakeRun(fail_on="resolvconf.service")
        monkeypatch.setattr(system.subprocess, "run", fake)
        ok, msg = system.restart_name_services()
        assert not ok
        assert "resolvconf.service" in msg
        assert len(fake.calls) == 1

    def test_add_default_route(self, fake_run):
        ok, _ = system.add_default_route("192.168.1.254")
        assert ok
        assert fake_run.calls == [["sudo", "ip", "route", "add", "default", "via", "192.168.1.254"]]

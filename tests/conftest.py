"""
Shared test fixtures: a fake system so no real command ever runs.
"""

import subprocess
from pathlib import Path

import pytest

from pkglists.logsink import LogSink


class FakeSystem:
    """Stands in for subprocess.run and shutil.which."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.cwds: list = []
        self.installed = {'sudo', 'pacman', 'git', 'makepkg'}
        self.fail_on: str | None = None
        self.fail_code = 1
        self.makepkg_installs: str | None = 'paru'

    def run(self, cmd, cwd=None, **kwargs):
        cmd = list(cmd)
        self.calls.append(cmd)
        self.cwds.append(cwd)
        if self.fail_on is not None and self.fail_on in cmd:
            return subprocess.CompletedProcess(cmd, self.fail_code)
        if cmd[0] == 'makepkg' and self.makepkg_installs:
            self.installed.add(self.makepkg_installs)
        return subprocess.CompletedProcess(cmd, 0)

    def which(self, name, *args, **kwargs):
        if name in self.installed:
            return f'/usr/bin/{name}'
        return None

    def programs(self) -> list[str]:
        return [c[0] if c[0] != 'sudo' else c[1] for c in self.calls]


@pytest.fixture(autouse=True)
def fake_system(monkeypatch) -> FakeSystem:
    system = FakeSystem()
    monkeypatch.setattr('pkglists.runner.subprocess.run', system.run)
    monkeypatch.setattr('pkglists.runner.shutil.which', system.which)
    return system


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Point the default config file into tmp_path."""
    path = tmp_path / 'config' / 'config.yaml'
    monkeypatch.setattr('pkglists.constants.CONFIG_FILE', path)
    return path


@pytest.fixture
def sink(tmp_path: Path) -> LogSink:
    return LogSink(tmp_path / 'install-packages.log')


@pytest.fixture
def write_lists(tmp_path: Path):
    """Write pacman and paru list files under tmp_path/packages."""

    def _write(primary: str | None = None, secondary: str | None = None) -> Path:
        pkg_dir = tmp_path / 'packages'
        pkg_dir.mkdir(exist_ok=True)
        if primary is not None:
            (pkg_dir / 'pacman-packages.txt').write_text(primary)
        if secondary is not None:
            (pkg_dir / 'paru-packages.txt').write_text(secondary)
        return tmp_path

    return _write

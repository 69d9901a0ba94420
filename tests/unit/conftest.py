"""
conftest.py

Shared fixtures for unit tests.

The fake_sysfs fixture builds an ev3dev-style class tree under tmp_path:

    <root>/lego-port/port0/{address,driver_name,mode,modes,status}
    <root>/lego-sensor/sensor0/{address,driver_name,mode,modes,value0}
"""

from pathlib import Path

import pytest


class FakeSysfs:
    """Helper that creates lego-port and lego-sensor entries on disk."""

    def __init__(self, root: Path):
        self.root = root
        (root / "lego-port").mkdir(parents=True, exist_ok=True)
        (root / "lego-sensor").mkdir(parents=True, exist_ok=True)
        self._ports = 0
        self._sensors = 0

    @staticmethod
    def _write(directory: Path, attributes: dict[str, str]) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        for name, value in attributes.items():
            (directory / name).write_text(f"{value}\n")
        return directory

    def add_port(self, address="ev3-ports:in1", driver_name="legoev3-input-port",
                 mode="auto", modes="auto nxt-analog nxt-color nxt-i2c other-uart ev3-analog ev3-uart",
                 status="nxt-analog") -> Path:
        path = self.root / "lego-port" / f"port{self._ports}"
        self._ports += 1
        return self._write(path, {
            "address": address,
            "driver_name": driver_name,
            "mode": mode,
            "modes": modes,
            "status": status,
        })

    def add_sensor(self, address="ev3-ports:in1", driver_name="lego-nxt-sound",
                   mode="DB", modes="DB DBA", value0="42.5") -> Path:
        path = self.root / "lego-sensor" / f"sensor{self._sensors}"
        self._sensors += 1
        return self._write(path, {
            "address": address,
            "driver_name": driver_name,
            "mode": mode,
            "modes": modes,
            "value0": value0,
        })


@pytest.fixture
def fake_sysfs(tmp_path, monkeypatch):
    """
    Fake sysfs tree, installed as the default root through EV3_SYSFS_ROOT.
    """
    root = tmp_path / "sys" / "class"
    sysfs = FakeSysfs(root)
    monkeypatch.setenv("EV3_SYSFS_ROOT", str(root))
    return sysfs


class RecordingPort:
    """
    In-memory SensorPort that records every call made to it.
    """

    def __init__(self, driver_name="lego-nxt-sound", mode="DB", values=None):
        self.driver_name = driver_name
        self.mode = mode
        self.values = values if values is not None else {"value0": "42.5"}
        self.address = "in1"
        self.set_mode_calls: list[str] = []
        self.attribute_reads: list[str] = []

    def get_driver_name(self) -> str:
        return self.driver_name

    def get_mode(self) -> str:
        return self.mode

    def set_mode(self, mode: str) -> None:
        self.set_mode_calls.append(mode)
        self.mode = mode

    def get_attribute(self, name: str) -> str:
        self.attribute_reads.append(name)
        return self.values[name]


@pytest.fixture
def recording_port():
    return RecordingPort()


@pytest.fixture
def make_port():
    return RecordingPort

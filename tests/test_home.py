import pytest

from devices import SmartLight, SmartLock, SmartThermostat
from home import SmartHome, SmartHomeBuilder, DeviceNotRegistered, ModeHandlerFailure


class RecordingDevice(SmartLight):
    """Light that records every mode it is sent"""

    def __init__(self, device_id, log):
        super().__init__(device_id, device_id, "Test")
        self.log = log

    def apply_mode(self, mode):
        self.log.append((self.device_id, mode))
        super().apply_mode(mode)


class BrokenDevice(SmartLight):
    def apply_mode(self, mode):
        raise RuntimeError("relay stuck")


@pytest.fixture
def trio():
    light = SmartLight("light_001", "Light", "Living Room")
    lock = SmartLock("lock_001", "Lock", "Front Door")
    thermo = SmartThermostat("thermo_001", "Thermostat", "Hallway")
    return light, lock, thermo


def test_builder_is_fluent():
    b = SmartHomeBuilder()
    assert b.add_device(SmartLight("l1", "Light", "Hall")) is b


def test_empty_build():
    home = SmartHome.builder().build()
    assert len(home) == 0
    home.send_message("Sleep")


def test_broadcast_order_matches_registration():
    log = []
    ids = ["c", "a", "d", "b"]
    builder = SmartHome.builder()
    for i in ids:
        builder.add_device(RecordingDevice(i, log))
    home = builder.build()
    home.send_message("Sleep")
    assert log == [(i, "Sleep") for i in ids]
    assert [d.device_id for d in home] == ids


def test_duplicates_get_delivery_per_registration():
    log = []
    dev = RecordingDevice("dup", log)
    home = SmartHome.builder().add_device(dev).add_device(dev).build()
    home.send_message("Vacation")
    assert log == [("dup", "Vacation"), ("dup", "Vacation")]


def test_build_snapshot_is_not_retroactive():
    builder = SmartHome.builder().add_device(SmartLight("l1", "Light", "Hall"))
    home = builder.build()
    assert builder.is_built
    builder.add_device(SmartLock("k1", "Lock", "Door"))
    assert len(home) == 1

    again = builder.build()
    assert len(again) == 2
    assert again.devices[0] is home.devices[0]


def test_home_is_immutable():
    home = SmartHome.builder().build()
    with pytest.raises(AttributeError):
        home.devices = ()


def test_sleep_turns_light_off_idempotently():
    light = SmartLight("l1", "Light", "Hall")
    light.is_on = True
    home = SmartHome.builder().add_device(light).build()
    home.send_message("Sleep")
    assert light.get_state() is False
    home.send_message("Sleep")
    assert light.get_state() is False


def test_set_device_state_isolation(trio):
    light, lock, thermo = trio
    home = SmartHome.builder().add_device(light).add_device(lock).add_device(thermo).build()
    home.set_device_state(light, True)
    assert light.get_state() is True
    assert lock.get_state() is False
    assert thermo.get_state() == 20


def test_unregistered_device_is_rejected(trio):
    light, lock, thermo = trio
    home = SmartHome.builder().add_device(light).build()
    with pytest.raises(DeviceNotRegistered):
        home.set_device_state(lock, True)
    assert lock.get_state() is False


def test_lookup_is_by_identity_not_equality():
    registered = SmartLight("l1", "Light", "Hall")
    lookalike = SmartLight("l1", "Light", "Hall")
    home = SmartHome.builder().add_device(registered).build()
    with pytest.raises(DeviceNotRegistered):
        home.set_device_state(lookalike, True)
    assert lookalike.get_state() is False


def test_unknown_mode_changes_nothing(trio):
    light, lock, thermo = trio
    light.is_on = True
    home = SmartHome.builder().add_device(light).add_device(lock).add_device(thermo).build()
    home.send_message("Party")
    assert light.get_state() is True
    assert lock.get_state() is False
    assert thermo.get_state() == 20


def test_vacation_scenario(trio):
    light, lock, thermo = trio
    home = SmartHome.builder().add_device(light).add_device(lock).add_device(thermo).build()
    home.send_message("Vacation")
    assert light.get_state() is False
    assert lock.get_state() is True
    # eco setpoint
    assert thermo.get_state() == 16


def test_failure_does_not_stop_broadcast(trio):
    light, lock, thermo = trio
    light.is_on = True
    broken_a = BrokenDevice("broken_a", "Broken", "Attic")
    broken_b = BrokenDevice("broken_b", "Broken", "Cellar")
    home = (SmartHome.builder()
            .add_device(broken_a)
            .add_device(light)
            .add_device(broken_b)
            .add_device(lock)
            .add_device(thermo)
            .build())

    with pytest.raises(ModeHandlerFailure) as info:
        home.send_message("Vacation")

    err = info.value
    assert err.mode == "Vacation"
    assert [d for d, _ in err.failures] == [broken_a, broken_b]
    assert all(isinstance(e, RuntimeError) for _, e in err.failures)
    assert light.get_state() is False
    assert lock.get_state() is True
    assert thermo.get_state() == 16


def test_get_device_and_state(trio):
    light, lock, thermo = trio
    home = SmartHome.builder().add_device(light).add_device(thermo).build()
    assert home.get_device("thermo_001") is thermo
    home.set_device_state(thermo, 22)
    assert home.get_state("thermo_001") == 22
    with pytest.raises(DeviceNotRegistered, match="lock_001"):
        home.get_device("lock_001")


def test_wrong_type_propagates_without_change(trio):
    light, lock, thermo = trio
    home = SmartHome.builder().add_device(thermo).build()
    with pytest.raises(TypeError):
        home.set_device_state(thermo, "warm")
    assert thermo.get_state() == 20

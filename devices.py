"""devices"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from config import (
    DEVICE_DEFAULTS, LIGHT_POLICY, LOCK_POLICY, THERMOSTAT_POLICY,
    MODE_SLEEP, MODE_VACATION,
)


@dataclass(eq=False)
class SmartDevice(ABC):
    """A controllable unit with private state and its own mode policy.

    eq=False keeps identity comparison, the home looks devices up with `is`.
    """
    device_id: str
    name: str
    location: str
    device_type: str = field(default="GENERIC", init=False)

    @abstractmethod
    def get_state(self):
        pass

    @abstractmethod
    def set_state(self, value):
        pass

    @abstractmethod
    def apply_mode(self, mode):
        """React to a broadcast mode. Unknown modes must be a no-op."""
        pass


def _require_bool(device, value):
    if not isinstance(value, bool):
        raise TypeError(f"{device.device_type} state must be bool, got {type(value).__name__}")
    return value


@dataclass(eq=False)
class SmartLight(SmartDevice):
    _is_on: bool = field(default=DEVICE_DEFAULTS["LIGHT"]["is_on"], init=False)

    def __post_init__(self):
        self.device_type = "LIGHT"

    @property
    def is_on(self):
        return self._is_on

    @is_on.setter
    def is_on(self, value):
        self._is_on = _require_bool(self, value)

    def get_state(self):
        return self._is_on

    def set_state(self, value):
        self.is_on = value

    def apply_mode(self, mode):
        if mode in LIGHT_POLICY:
            self._is_on = LIGHT_POLICY[mode]


@dataclass(eq=False)
class SmartLock(SmartDevice):
    _is_locked: bool = field(default=DEVICE_DEFAULTS["LOCK"]["is_locked"], init=False)

    def __post_init__(self):
        self.device_type = "LOCK"

    @property
    def is_locked(self):
        return self._is_locked

    @is_locked.setter
    def is_locked(self, value):
        self._is_locked = _require_bool(self, value)

    def get_state(self):
        return self._is_locked

    def set_state(self, value):
        self.is_locked = value

    def lock(self):
        self._is_locked = True

    def unlock(self):
        self._is_locked = False

    def apply_mode(self, mode):
        if mode in LOCK_POLICY:
            self._is_locked = LOCK_POLICY[mode]


# thermostat has no range limits, any int goes
@dataclass(eq=False)
class SmartThermostat(SmartDevice):
    _degrees: int = field(default=DEVICE_DEFAULTS["THERMOSTAT"]["degrees"], init=False)

    def __post_init__(self):
        self.device_type = "THERMOSTAT"

    @property
    def degrees(self):
        return self._degrees

    @degrees.setter
    def degrees(self, value):
        # bool is an int subclass but True is not a temperature
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"THERMOSTAT state must be int, got {type(value).__name__}")
        self._degrees = value

    def get_state(self):
        return self._degrees

    def set_state(self, value):
        self.degrees = value

    def adjust_temperature(self, degrees):
        """Set an absolute temperature, as typed into the panel"""
        self.degrees = degrees

    def apply_mode(self, mode):
        if mode == MODE_SLEEP:
            self._degrees = min(self._degrees, THERMOSTAT_POLICY["sleep_setpoint"])
        elif mode == MODE_VACATION:
            self._degrees = THERMOSTAT_POLICY["eco_setpoint"]


# ============================================================================
# Device Factory - Create devices from configuration
# ============================================================================

def create_device(device_type: str, device_id: str, name: str, location: str, **kwargs):
    """Factory function to create devices by type"""
    device_type = device_type.upper()

    if device_type == "LIGHT":
        device = SmartLight(device_id, name, location)
        if "is_on" in kwargs:
            device.is_on = kwargs["is_on"]
        return device

    elif device_type == "LOCK":
        device = SmartLock(device_id, name, location)
        if "is_locked" in kwargs:
            device.is_locked = kwargs["is_locked"]
        return device

    elif device_type == "THERMOSTAT":
        device = SmartThermostat(device_id, name, location)
        if "degrees" in kwargs:
            device.degrees = kwargs["degrees"]
        return device

    else:
        raise ValueError(f"Unknown device type: {device_type}")

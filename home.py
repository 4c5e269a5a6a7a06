"""home controller + builder"""

from dataclasses import dataclass, field
from typing import List, Tuple

from devices import SmartDevice


class DeviceNotRegistered(LookupError):
    """Raised when the home is asked to touch a device it does not own"""

    def __init__(self, device):
        self.device = device
        label = device if isinstance(device, str) else getattr(device, "device_id", repr(device))
        super().__init__(f"Device not registered: {label}")


class ModeHandlerFailure(Exception):
    """One or more devices raised while handling a broadcast mode.

    Raised only after every device has been offered the mode. `failures`
    holds (device, exception) pairs in registration order.
    """

    def __init__(self, mode, failures):
        self.mode = mode
        self.failures = list(failures)
        names = ", ".join(f"{d.device_id} ({e})" for d, e in self.failures)
        super().__init__(f"Mode '{mode}' failed on {len(self.failures)} device(s): {names}")


@dataclass(frozen=True)
class SmartHome:
    """Closed set of devices with direct-set and broadcast operations.

    Not a state cache: every read goes to the device itself.
    """
    devices: Tuple[SmartDevice, ...] = ()

    @staticmethod
    def builder():
        return SmartHomeBuilder()

    def __iter__(self):
        return iter(self.devices)

    def __len__(self):
        return len(self.devices)

    def _is_registered(self, device):
        return any(d is device for d in self.devices)

    def get_device(self, device_id: str) -> SmartDevice:
        for d in self.devices:
            if d.device_id == device_id:
                return d
        raise DeviceNotRegistered(device_id)

    def get_state(self, device_id: str):
        return self.get_device(device_id).get_state()

    def set_device_state(self, device: SmartDevice, value):
        if not self._is_registered(device):
            raise DeviceNotRegistered(device)
        device.set_state(value)

    def send_message(self, mode: str):
        failures = []
        for d in self.devices:
            try:
                d.apply_mode(mode)
            except Exception as e:
                failures.append((d, e))
        if failures:
            raise ModeHandlerFailure(mode, failures)


@dataclass
class SmartHomeBuilder:
    _pending: List[SmartDevice] = field(default_factory=list, init=False)
    _built: bool = field(default=False, init=False)

    @property
    def is_built(self):
        return self._built

    def add_device(self, device: SmartDevice) -> "SmartHomeBuilder":
        # duplicates are allowed, they just get every broadcast twice
        self._pending.append(device)
        return self

    def build(self) -> SmartHome:
        self._built = True
        return SmartHome(devices=tuple(self._pending))

from config import PANEL


class InvalidInput(ValueError):
    """User typed something the panel cannot turn into a device value"""


def parse_temperature(text) -> int:
    """Parse a whole-number temperature from the panel's text field"""
    try:
        return int(str(text).strip())
    except ValueError:
        raise InvalidInput("Please enter a valid temperature (number).") from None


def light_label(is_on: bool) -> str:
    return "Light is " + ("ON" if is_on else "OFF")


def lock_label(is_locked: bool) -> str:
    return "Door is " + ("LOCKED" if is_locked else "UNLOCKED")


def thermostat_label(degrees: int) -> str:
    return f"Temperature: {degrees}{PANEL['temperature_unit']}"


LABELS = {
    "LIGHT": light_label,
    "LOCK": lock_label,
    "THERMOSTAT": thermostat_label,
}


def status_label(device) -> str:
    """Panel text for a device's current state"""
    fmt = LABELS.get(device.device_type)
    if fmt is None:
        return str(device.get_state())
    return fmt(device.get_state())

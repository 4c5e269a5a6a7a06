"""
SmartHome Configuration - Modes, Device Policies, Control Panel
"""

# ============================================================================
# Modes
# ============================================================================

MODE_SLEEP = "Sleep"
MODE_VACATION = "Vacation"

# Modes the panel offers buttons for. Devices ignore anything else.
KNOWN_MODES = (MODE_SLEEP, MODE_VACATION)

# ============================================================================
# Device Mode Policies
# Each device decides for itself how to react to a mode
# ============================================================================

LIGHT_POLICY = {
    MODE_SLEEP: False,         # lights off
    MODE_VACATION: False,      # lights off
}

LOCK_POLICY = {
    # Sleep is not listed: the door keeps whatever state it was left in
    MODE_VACATION: True,       # lock up
}

THERMOSTAT_POLICY = {
    "sleep_setpoint": 18,      # Sleep lowers to this, never raises
    "eco_setpoint": 16,        # Vacation always sets this
}

# ============================================================================
# Device Defaults
# ============================================================================

DEVICE_DEFAULTS = {
    "LIGHT": {"is_on": False},
    "LOCK": {"is_locked": False},
    "THERMOSTAT": {"degrees": 20},
}

# The home the control panel builds at startup, in registration order
DEFAULT_DEVICES = [
    {"device_id": "light_001", "device_type": "LIGHT", "name": "Smart Light", "location": "Living Room"},
    {"device_id": "thermo_001", "device_type": "THERMOSTAT", "name": "Smart Thermostat", "location": "Hallway"},
    {"device_id": "lock_001", "device_type": "LOCK", "name": "Smart Lock", "location": "Front Door"},
]

# ============================================================================
# Control Panel
# ============================================================================

PANEL = {
    "title": "Smart Home Control System",
    "host": "127.0.0.1",
    "port": 8000,
    "temperature_unit": "°C",
}

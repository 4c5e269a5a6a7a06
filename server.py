#!/usr/bin/env python3
"""SmartHome Control Panel - one route per button, state read back from the devices"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.requests import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from config import DEFAULT_DEVICES, KNOWN_MODES, PANEL
from devices import create_device
from home import SmartHome, DeviceNotRegistered, ModeHandlerFailure
from utils import InvalidInput, parse_temperature, status_label


# ============================================================================
# Data Models
# ============================================================================

class TemperatureInput(BaseModel):
    temperature: str | int | float


# ============================================================================
# Home Panel - owns the SmartHome, the routes only ever hold device ids
# ============================================================================

class HomePanel:
    def __init__(self):
        self.home: Optional[SmartHome] = None
        # role -> device id, so routes never keep a device object around
        self.handles: Dict[str, str] = {}

    def initialize_devices(self, config: Optional[List[dict]] = None):
        """Build the home from configuration, in listed order"""
        builder = SmartHome.builder()
        self.handles = {}
        for dev_config in config or DEFAULT_DEVICES:
            device = create_device(
                dev_config["device_type"],
                dev_config["device_id"],
                dev_config["name"],
                dev_config["location"],
                **dev_config.get("properties", {})
            )
            builder.add_device(device)
            self.handles.setdefault(device.device_type, device.device_id)
        self.home = builder.build()
        print(f"Loaded {len(self.home)} devices")

    def set_state(self, role: str, value):
        """Resolve a role through the home and set its state"""
        device_id = self.handles.get(role)
        if device_id is None:
            raise DeviceNotRegistered(role)
        self.home.set_device_state(self.home.get_device(device_id), value)

    def device_to_dict(self, dev) -> dict:
        return {
            "device_id": dev.device_id,
            "name": dev.name,
            "location": dev.location,
            "device_type": dev.device_type,
            "state": dev.get_state(),
            "label": status_label(dev),
        }

    def get_all_devices(self) -> List[dict]:
        return [self.device_to_dict(d) for d in self.home]


# Global panel
home_panel = HomePanel()


def _not_found(e: DeviceNotRegistered):
    return HTTPException(status_code=404, detail=str(e))


def _refreshed():
    return {"status": "ok", "devices": home_panel.get_all_devices()}


# ============================================================================
# FastAPI Application
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    home_panel.initialize_devices()
    print("SmartHome Control Panel Started")
    yield
    print("SmartHome Control Panel Stopped")


app = FastAPI(
    title=PANEL["title"],
    description="Control panel for a light, a thermostat and a door lock",
    version="1.0.0",
    lifespan=lifespan
)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


# ============================================================================
# Routes
# ============================================================================

@app.get("/", response_class=HTMLResponse)
async def panel(request: Request):
    """Main control panel page"""
    return templates.TemplateResponse(request, "panel.html", {
        "title": PANEL["title"],
        "devices": home_panel.get_all_devices(),
        "modes": KNOWN_MODES,
    })


@app.get("/api/devices")
async def get_devices():
    return {"devices": home_panel.get_all_devices()}


@app.get("/api/devices/{device_id}")
async def get_device(device_id: str):
    try:
        dev = home_panel.home.get_device(device_id)
    except DeviceNotRegistered as e:
        raise _not_found(e)
    return home_panel.device_to_dict(dev)


@app.post("/api/light/on")
async def light_on():
    try:
        home_panel.set_state("LIGHT", True)
    except DeviceNotRegistered as e:
        raise _not_found(e)
    return _refreshed()


@app.post("/api/light/off")
async def light_off():
    try:
        home_panel.set_state("LIGHT", False)
    except DeviceNotRegistered as e:
        raise _not_found(e)
    return _refreshed()


@app.post("/api/lock/lock")
async def lock_door():
    try:
        home_panel.set_state("LOCK", True)
    except DeviceNotRegistered as e:
        raise _not_found(e)
    return _refreshed()


@app.post("/api/lock/unlock")
async def unlock_door():
    try:
        home_panel.set_state("LOCK", False)
    except DeviceNotRegistered as e:
        raise _not_found(e)
    return _refreshed()


@app.post("/api/thermostat")
async def set_temperature(body: TemperatureInput):
    """Set the thermostat from the panel's text field"""
    try:
        degrees = parse_temperature(body.temperature)
    except InvalidInput as e:
        # stays on the panel side, the home never sees bad input
        raise HTTPException(status_code=400, detail=str(e))
    try:
        home_panel.set_state("THERMOSTAT", degrees)
    except DeviceNotRegistered as e:
        raise _not_found(e)
    return _refreshed()


@app.post("/api/modes/{mode}")
async def send_mode(mode: str):
    """Broadcast a mode to every device"""
    try:
        home_panel.home.send_message(mode)
    except ModeHandlerFailure as e:
        print(f"Mode error: {e}")
        raise HTTPException(status_code=500, detail={
            "message": str(e),
            "failures": [{"device_id": d.device_id, "error": str(err)} for d, err in e.failures],
            "devices": home_panel.get_all_devices(),
        })
    return _refreshed()


# ============================================================================
# Run Server
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=PANEL["host"], port=PANEL["port"])

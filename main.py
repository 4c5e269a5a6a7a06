#!/usr/bin/env python3
"""smarthome main"""

import uvicorn

from config import PANEL


def run():
    try:
        uvicorn.run("server:app", host=PANEL["host"], port=PANEL["port"])
    except KeyboardInterrupt:
        print("\nDone")


if __name__ == "__main__":
    run()

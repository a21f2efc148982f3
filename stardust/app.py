"""Command that runs the telemetry simulation until ENTER is pressed."""

from __future__ import annotations

import argparse
import sys
import threading

from stardust.logger import Level, log
from stardust.navigation import NavigationSubsystem
from stardust.threads import ThreadFactory


def main(argv: list[str] | None = None) -> int:
    """Start the navigation subsystem and stop it on a line from stdin."""
    parser = argparse.ArgumentParser(
        prog="stardust",
        description="Simulate spacecraft subsystem telemetry as space packets.",
    )
    parser.parse_args(argv)

    running = threading.Event()
    running.set()

    with ThreadFactory() as factory:
        factory.launch(NavigationSubsystem, running)
        log(Level.INFO, "Press ENTER to stop simulation...")
        sys.stdin.read(1)
        running.clear()
        log(Level.INFO, "All subsystems stopped. Exiting cleanly...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
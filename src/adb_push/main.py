#!/usr/bin/env python3
"""
ADB Push - Main Entry Point
Simple entry point to launch the drop-target application.
"""

import logging

from .gui.main_window import main as run_gui

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    run_gui()


if __name__ == "__main__":
    main()

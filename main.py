#!/usr/bin/env python

"""
Focus Timer Application - Main Entry Point

A Pomodoro timer living in the system tray. Each work and break interval is
stored as a JSON record, together with the applications that were in front
during work intervals.

Usage:
    python main.py
"""

import sys

from focustimer.i18n import detect_system_language, set_language
from focustimer.infra.config import configure_logging, get_settings


def main():
    """Main entry point"""
    settings = get_settings()
    configure_logging(settings.log_level)
    set_language(detect_system_language())

    from focustimer.ui import SystemTrayApp
    app = SystemTrayApp(settings)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())

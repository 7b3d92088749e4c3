#!/usr/bin/env python3
"""Launcher script for the log pattern check.

Lets the plugin run straight from a checkout, e.g. from a Nagios command
definition:

    check_logpattern.py -l /var/log/app.log -t ERROR -w 5 -c 10
"""

import sys
from pathlib import Path

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent / "src"))


def main():
    """Main entry point."""
    from logpattern.cli import main as plugin_main

    sys.exit(plugin_main())


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Thermometer — quick launcher.

Usage:
    python run_thermometer.py [options]

Run ``python run_thermometer.py --help`` for full options.
"""

from thermometer.app import main

if __name__ == "__main__":
    main()

"""
Thermometer
===========

An animated analog thermometer widget.

The mercury does not jump to a new temperature; it seeks it:

  - Velocity and steering force are both bounded
  - Far from the target the mercury moves at full speed
  - Within 15 degrees the desired speed ramps down, so it eases in
    and may bounce before it settles

The body, mercury column and the Celsius / Fahrenheit scales are laid
out in proportion to the widget size and recomputed only on resize.
"""

__version__ = "1.0.0"
__author__ = "Thermometer"

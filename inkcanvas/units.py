#!/usr/bin/env python3

"""
    This file is part of Ink Canvas.

    Ink Canvas (reads, renders and writes InkML digital ink)
    Copyright (c) 2017 Daniel Vorberg

    Ink Canvas is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    Ink Canvas is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with Ink Canvas.  If not, see <http://www.gnu.org/licenses/>.
"""

__author__ = "Daniel Vorberg"
__copyright__ = "Copyright (c) 2017, Daniel Vorberg"
__license__ = "GPL"


DPI = 150  # dots per inch of the drawing surface

_HIMETRIC_PER_INCH = 2540  # himetric = 1/100 mm

HIMETRIC_PER_UNIT = {
    "m": 100000,
    "cm": 1000,
    "mm": 100,
    "in": _HIMETRIC_PER_INCH,
    "pt": 35.27778,
    "pc": 424.3333}


def units_to_himetric(value, unit):
    """ converts a length given in unit to himetric

    Unknown units are passed through unchanged.

    Example:
        >>> units_to_himetric(2, "mm")
        200
        >>> units_to_himetric(3, "furlong")
        3
    """
    factor = HIMETRIC_PER_UNIT.get(unit)
    if factor is None:
        return value
    return value * factor


def himetric_to_units(value, unit):
    """ converts a length given in himetric to unit

    Unknown units are passed through unchanged.

    Example:
        >>> himetric_to_units(5080, "in")
        2.0
    """
    factor = HIMETRIC_PER_UNIT.get(unit)
    if factor is None:
        return value
    return value / factor


def pixel_to_himetric(pixel, dpi=DPI):
    """
    Example:
        >>> pixel_to_himetric(150, dpi=150)
        2540.0
    """
    return pixel * _HIMETRIC_PER_INCH / dpi


def himetric_to_pixel(himetric, dpi=DPI):
    """
    Example:
        >>> himetric_to_pixel(2540, dpi=300)
        300.0
    """
    return himetric * dpi / _HIMETRIC_PER_INCH


def sample_to_pixel(resolution, unit, dpi=DPI):
    """ the length of one sample of a channel in pixels

    Args:
        resolution (float): samples per unit
        unit (str): the physical unit of the channel

    Example:
        >>> sample_to_pixel(2, "in", dpi=150)
        75.0
    """
    return himetric_to_pixel(units_to_himetric(1 / resolution, unit), dpi)

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

import math
import warnings

import cairocffi as cairo

from .errors import InkStructureWarning
from .units import himetric_to_pixel


WIDTH_BOOST = 10  # brush widths are drawn ten times wider to be visible
DEFAULT_LINE_WIDTH = 1.
MARGIN = 10  # in pixel, around the ink on pdf and png pages

_COLORS = {
    "black": (0, 0, 0),
    "white": (1, 1, 1),
    "red": (1, 0, 0),
    "green": (0, 1, 0),
    "blue": (0, 0, 1)}


def parse_color(color):
    """ converts a color token ("#RRGGBB", "#RGB" or a name) to rgb

    Example:
        >>> parse_color("#FF0000")
        (1.0, 0.0, 0.0)
        >>> parse_color("blue")
        (0, 0, 1)
    """
    token = (color or "").strip().lower()
    if token in _COLORS:
        return _COLORS[token]
    digits = token[1:]
    if token.startswith("#") and len(digits) == 3:
        digits = "".join(2 * digit for digit in digits)
    if token.startswith("#") and len(digits) == 6:
        try:
            return tuple(int(digits[i: i + 2], 16) / 255 for i in (0, 2, 4))
        except ValueError:
            pass
    warnings.warn(f"unknown color {color}, black is used",
                  InkStructureWarning)
    return _COLORS["black"]


def pressure_width(width, force, f_factor, f_neutral):
    """ modulates a brush width by the force

    The width is unchanged at the neutral force (and for force 0).

    Example:
        >>> pressure_width(100, 768, f_factor=1/1024, f_neutral=512)
        125.0
        >>> pressure_width(100, 256, f_factor=1/1024, f_neutral=512)
        75.0
    """
    if force:
        width += width * ((force - f_neutral) * f_factor)
    return width


def line_width(width, dpi):
    """ the line width in pixel of a brush width in himetric """
    return himetric_to_pixel(width, dpi) * WIDTH_BOOST


def draw_trace(ctx, trace, context, brush, mins, ignore_pressure=False):
    """ draws a trace onto a (cairo) context

    The points are translated by mins, the minima of all ink, and scaled
    by the x_factor of the context in both directions. Unless
    ignore_pressure, every segment is stroked on its own with a width
    modulated by the mean force of its end points.

    Args:
        ctx: cairo context
        trace (Trace): the trace to draw
        context (Context): the context of the trace
        brush (Brush): the brush of the trace or None
        mins: the minimum of every channel

    Returns:
        True if the trace was drawn
    """
    trace_format = context.trace_format
    x, y = trace_format.index("X"), trace_format.index("Y")
    f = trace_format.index("F")
    if x is None or y is None:
        warnings.warn(f"context {context.id} has no X and Y channels, "
                      f"trace is not drawn", InkStructureWarning)
        return False
    # TODO: draw single points as dots
    if len(trace.table) < 2:
        return False
    points = [(float(row[x] - mins[x]), float(row[y] - mins[y]))
              for row in trace.table]

    ctx.save()
    ctx.scale(context.x_factor, context.x_factor)
    ctx.set_line_cap(cairo.LINE_CAP_ROUND)
    ctx.set_line_join(cairo.LINE_JOIN_ROUND)
    if brush is not None:
        ctx.set_source_rgb(*parse_color(brush.color))
        ctx.set_line_width(line_width(brush.width, context.dpi))
    else:
        ctx.set_source_rgb(*_COLORS["black"])
        ctx.set_line_width(DEFAULT_LINE_WIDTH)

    if ignore_pressure:
        ctx.new_path()
        ctx.move_to(*points[0])
        for point in points[1:]:
            ctx.line_to(*point)
        ctx.stroke()
    else:
        for i in range(1, len(points)):
            if brush is not None and f is not None:
                force = (trace.table[i - 1][f] + trace.table[i][f]) / 2
                width = pressure_width(brush.width, force,
                                       context.f_factor, context.f_neutral)
                ctx.set_line_width(line_width(width, context.dpi))
            ctx.new_path()
            ctx.move_to(*points[i - 1])
            ctx.line_to(*points[i])
            ctx.stroke()
    ctx.restore()
    return True


def draw_ink(ctx, ink, ignore_pressure=False):
    """ draws all traces of the ink onto a (cairo) context

    Traces with an undefined context are skipped, traces with an undefined
    brush are drawn with the default line.

    Returns:
        the number of drawn traces
    """
    drawn = 0
    for trace in ink.traces:
        context = ink.resolve_context(trace)
        if context is None:
            continue
        brush = ink.resolve_brush(trace)
        if draw_trace(ctx, trace, context, brush, ink.mins, ignore_pressure):
            drawn += 1
    return drawn


def ink_size(ink):
    """ the size (width, height) in pixel of the bounding box of the ink """
    width = height = 0
    for trace in ink.traces:
        context = ink.find_context(trace)
        if context is None:
            continue
        x = context.trace_format.index("X")
        y = context.trace_format.index("Y")
        if x is None or y is None or max(x, y) >= len(ink.statistics):
            continue
        factor = context.x_factor
        width = max(width, float(ink.maxs[x] - ink.mins[x]) * factor)
        height = max(height, float(ink.maxs[y] - ink.mins[y]) * factor)
    return width, height


def write_pdf(ink, filename, ignore_pressure=False, margin=MARGIN):
    """ draws the ink on a single pdf page """
    width, height = ink_size(ink)
    surface = cairo.PDFSurface(filename,
                               max(1, width + 2 * margin),
                               max(1, height + 2 * margin))
    ctx = cairo.Context(surface)
    ctx.translate(margin, margin)
    draw_ink(ctx, ink, ignore_pressure)
    ctx.show_page()
    surface.finish()


def write_png(ink, filename, ignore_pressure=False, margin=MARGIN):
    """ draws the ink on a white png image """
    width, height = ink_size(ink)
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32,
                                 max(1, math.ceil(width + 2 * margin)),
                                 max(1, math.ceil(height + 2 * margin)))
    ctx = cairo.Context(surface)
    ctx.set_source_rgb(1, 1, 1)
    ctx.paint()
    ctx.translate(margin, margin)
    draw_ink(ctx, ink, ignore_pressure)
    surface.write_to_png(filename)

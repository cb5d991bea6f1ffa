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

from .model import Trace
from .render import parse_color


FEEDBACK_COLOR = "#00FF00"
FEEDBACK_WIDTH = 2


class InkCapture:
    """Records the points of a pen (or mouse) as new traces of an ink

    The values of a point are given in the order of the channels of the
    context (X, Y, ... by default). If a (cairo) context ctx is given, the
    stroke is drawn while it is captured.

    Example:
        >>> from inkcanvas.model import Ink
        >>> ink = Ink()
        >>> capture = InkCapture(ink)
        >>> capture.pen_down(3, 4)
        >>> capture.pen_move(5, 4)
        >>> capture.pen_up(6, 2).table
        [[3, 4], [5, 4], [6, 2]]
        >>> ink.mins.tolist(), ink.maxs.tolist()
        ([3, 2], [6, 4])
    """

    def __init__(self, ink, context_ref=None, brush_ref=None, ctx=None):
        self.ink = ink
        self.context_ref = context_ref
        self.brush_ref = brush_ref
        self.ctx = ctx
        self.trace = None

    @property
    def active(self):
        return self.trace is not None

    def pen_down(self, *values):
        if self.active:
            self.pen_up()
        self.trace = Trace(context_ref=self.context_ref,
                           brush_ref=self.brush_ref)
        self.ink.add_trace(self.trace)
        self.ink.append_point(self.trace, values)
        if self.ctx is not None:
            self.ctx.new_path()
            self.ctx.set_source_rgb(*parse_color(FEEDBACK_COLOR))
            self.ctx.set_line_width(FEEDBACK_WIDTH)
            self.ctx.move_to(*values[:2])

    def pen_move(self, *values):
        """ adds a point to the current trace, ignored while the pen is up """
        if not self.active:
            return
        self.ink.append_point(self.trace, values)
        if self.ctx is not None:
            self.ctx.line_to(*values[:2])
            self.ctx.stroke()
            self.ctx.move_to(*values[:2])

    def pen_up(self, *values):
        """ finishes the current trace

        Returns:
            the finished Trace or None if the pen was not down
        """
        if not self.active:
            return None
        if values:
            self.pen_move(*values)
        trace, self.trace = self.trace, None
        return trace

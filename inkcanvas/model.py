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

import warnings
from collections import namedtuple

from . import codec
from .errors import InkStructureWarning, InkReferenceWarning
from .units import DPI, sample_to_pixel, units_to_himetric


Channel = namedtuple(
    'Channel', ['name', 'type', 'min', 'max', 'units', 'resolution'],
    defaults=("decimal", 0, None, None, 0))
ChannelProperty = namedtuple(
    'ChannelProperty', ['channel', 'name', 'value', 'units'])
BrushProperty = namedtuple('BrushProperty', ['name', 'value', 'units'])
Timestamp = namedtuple('Timestamp', ['id', 'time_string'])


def local_id(reference):
    """ strips the leading "#" of a reference

    Example:
        >>> local_id("#ctx0")
        'ctx0'
    """
    if reference is not None and reference.startswith("#"):
        return reference[1:]
    return reference


class TraceFormat:
    """The ordered channels of the points of a trace"""

    def __init__(self, id=None, channels=()):
        self.id = id
        self.channels = {channel.name: channel for channel in channels}

    def __len__(self):
        return len(self.channels)

    def __iter__(self):
        return iter(self.channels.values())

    def index(self, name):
        """ the column of the channel name or None

        Example:
            >>> DEFAULT_TRACE_FORMAT.index("Y"), DEFAULT_TRACE_FORMAT.index("F")
            (1, None)
        """
        for i, channel_name in enumerate(self.channels):
            if channel_name == name:
                return i
        return None


DEFAULT_TRACE_FORMAT = TraceFormat(channels=[Channel("X"), Channel("Y")])


def _refine_resolution(channel, channel_property):
    units = channel_property.units or ""
    if not units.startswith("1/"):
        warnings.warn(f"units of the resolution of channel {channel.name} "
                      f"are expected to be 1/unit, not '{units}'",
                      InkStructureWarning)
        return channel
    if units[2:] != channel.units:
        warnings.warn(f"units of the resolution of channel {channel.name} "
                      f"are expected to be 1/{channel.units}, not '{units}'",
                      InkStructureWarning)
        return channel
    return channel._replace(resolution=channel_property.value)


class InkSource:
    """The device which captured the ink

    The resolution channel properties refine the channels of the trace
    format, all channel properties are kept to be written again.
    """

    def __init__(self, id, trace_format, channel_properties=()):
        self.id = id
        self.channel_properties = list(channel_properties)
        channels = trace_format.channels
        for channel_property in self.channel_properties:
            if channel_property.name != "resolution":
                continue
            channel = channels.get(channel_property.channel)
            if channel is None:
                warnings.warn(f"channel property for unknown channel "
                              f"{channel_property.channel}",
                              InkStructureWarning)
                continue
            channels[channel.name] = _refine_resolution(channel,
                                                        channel_property)
        self.trace_format = trace_format


class Context:
    """The conditions under which traces were captured

    The scaling factors (x_factor, y_factor: pixel per sample; f_factor,
    f_neutral: map of the force channel) are derived from the ink source
    and recomputed whenever it is replaced.

    Example:
        >>> context = Context("ctx")
        >>> context.x_factor, context.f_factor, context.f_neutral
        (1, 1, 0.5)
    """

    def __init__(self, id=None, ink_source=None, timestamp=None, dpi=DPI):
        self.id = id
        self.timestamp = timestamp
        self.dpi = dpi
        self.ink_source = ink_source

    @property
    def ink_source(self):
        return self._ink_source

    @ink_source.setter
    def ink_source(self, ink_source):
        self._ink_source = ink_source
        self._compute_factors()

    @property
    def trace_format(self):
        if self.ink_source is None:
            return DEFAULT_TRACE_FORMAT
        return self.ink_source.trace_format

    def _compute_factors(self):
        self.x_factor = self.y_factor = 1
        self.f_factor, self.f_neutral = 1, .5
        if self.ink_source is None:
            return
        channels = self.trace_format.channels
        self.x_factor = self._pixel_factor(channels.get("X"), "X")
        self.y_factor = self._pixel_factor(channels.get("Y"), "Y")

        force = channels.get("F")
        if force is None:
            return
        if force.max is None or force.max == force.min:
            warnings.warn(f"force channel of context {self.id} has no range, "
                          f"pressure is not scaled", InkStructureWarning)
            return
        self.f_factor = 1 / (force.max - force.min)
        self.f_neutral = (force.max - force.min) / 2

    def _pixel_factor(self, channel, name):
        if channel is None:
            warnings.warn(f"context {self.id} has no channel {name}",
                          InkStructureWarning)
            return 1
        if not channel.resolution:
            warnings.warn(f"channel {name} of context {self.id} has no "
                          f"resolution", InkStructureWarning)
            return 1
        return sample_to_pixel(channel.resolution, channel.units, self.dpi)


def _interpret_color(brush, brush_property):
    brush.color = brush_property.value


def _interpret_width(brush, brush_property):
    try:
        value = float(brush_property.value)
    except (TypeError, ValueError):
        warnings.warn(f"width '{brush_property.value}' of brush {brush.id} "
                      f"is not a number", InkStructureWarning)
        return
    brush.width = units_to_himetric(value, brush_property.units)


# brush properties which change the appearance of the ink
BRUSH_PROPERTIES = {
    "color": _interpret_color,
    "width": _interpret_width}


class Brush:
    """The appearance of traces

    Example:
        >>> brush = Brush("pen", [BrushProperty("width", "0.5", "mm"),
        ...                       BrushProperty("tip", "ellipse", None)])
        >>> brush.width, brush.color, list(brush.properties)
        (50.0, '#000000', ['width', 'tip'])
    """

    def __init__(self, id, properties=()):
        self.id = id
        self.width = 10  # in himetric
        self.color = "#000000"
        self.properties = {}
        for brush_property in properties:
            self.add_property(brush_property)

    def add_property(self, brush_property):
        interpret = BRUSH_PROPERTIES.get(brush_property.name)
        if interpret is not None:
            interpret(self, brush_property)
        self.properties[brush_property.name] = brush_property


class Trace:
    """A stroke, its points are the rows of table in units of the device"""

    def __init__(self, table=None, id=None, context_ref=None,
                 brush_ref=None, time_offset=None):
        self.table = [] if table is None else table
        self.id = id
        self.context_ref = context_ref
        self.brush_ref = brush_ref
        self.time_offset = time_offset

    def __len__(self):
        return len(self.table)

    @classmethod
    def decode(cls, text, channel_count=None, **kwargs):
        """ returns the trace and the Statistics of its points """
        table, statistics = codec.decode(text, channel_count)
        return cls(table, **kwargs), statistics

    def encode(self):
        return codec.encode(self.table)


class Ink:
    """The digital ink of a document

    Besides the definitions and the traces, the ink holds the running
    minima, maxima, sums and counts of every channel over all points of
    all traces. The minima translate the ink to the origin of the surface.

    Example:
        >>> ink = Ink()
        >>> _ = ink.decode_trace("5 7,1 1", id="t0")
        >>> _ = ink.decode_trace("2 9")
        >>> ink.mins.tolist(), ink.maxs.tolist(), ink.counts.tolist()
        ([2, 7], [6, 9], [3, 3])
    """

    def __init__(self, dpi=DPI):
        self.dpi = dpi
        self.contexts = {}
        self.brushes = {}
        self.traces = []
        self.statistics = codec.Statistics()
        self.default_context = Context(dpi=dpi)

    @property
    def mins(self):
        return self.statistics.mins

    @property
    def maxs(self):
        return self.statistics.maxs

    @property
    def sums(self):
        return self.statistics.sums

    @property
    def counts(self):
        return self.statistics.counts

    @property
    def count(self):
        return self.statistics.count

    def add_context(self, context):
        self.contexts[context.id] = context

    def add_brush(self, brush):
        self.brushes[brush.id] = brush

    def add_trace(self, trace, statistics=None):
        if statistics is None:
            statistics = codec.Statistics.from_table(trace.table)
        self.traces.append(trace)
        self.statistics = self.statistics.merge(statistics)

    def decode_trace(self, text, **kwargs):
        """ decodes the text of a trace and adds the trace

        The number of channels is taken from the context of the trace (the
        default context without context reference). Only for an undefined
        context it is inferred from the first point.
        """
        trace = Trace(**kwargs)
        context = self.find_context(trace)
        channel_count = None if context is None else len(context.trace_format)
        trace.table, statistics = codec.decode(text, channel_count)
        self.add_trace(trace, statistics)
        return trace

    def append_point(self, trace, point):
        """ adds a point to the end of a trace

        The values are rounded to integers and fitted to the channels of
        the context of the trace.
        """
        point = [int(round(value)) for value in point]
        context = self.find_context(trace)
        if context is not None:
            point = codec.fit_point(point, len(context.trace_format),
                                    len(trace.table))
        trace.table.append(point)
        self.statistics = self.statistics.merge(
            codec.Statistics.from_table([point]))

    def find_context(self, trace):
        """ returns the context of the trace or None if it is not defined

        Traces without context reference use the default context.
        """
        if trace.context_ref is None:
            return self.default_context
        return self.contexts.get(local_id(trace.context_ref))

    def resolve_context(self, trace):
        """ like find_context but reports an undefined context """
        context = self.find_context(trace)
        if context is None:
            warnings.warn(f"context with xml:id='{trace.context_ref}' "
                          f"not found", InkReferenceWarning)
        return context

    def resolve_brush(self, trace):
        """ returns the brush of the trace or None """
        if trace.brush_ref is None:
            return None
        brush = self.brushes.get(local_id(trace.brush_ref))
        if brush is None:
            warnings.warn(f"brush with xml:id='{trace.brush_ref}' not found",
                          InkReferenceWarning)
        return brush

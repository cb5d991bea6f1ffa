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
import xml.etree.ElementTree as ET
from xml.dom import minidom

from .errors import InkStructureWarning
from .model import (Brush, BrushProperty, Channel, ChannelProperty, Context,
                    Ink, InkSource, Timestamp, TraceFormat)
from .units import DPI


NAMESPACE = "http://www.w3.org/2003/InkML"
_XML_ID = "{http://www.w3.org/XML/1998/namespace}id"

ET.register_namespace("inkml", NAMESPACE)


def _is(element, name):
    return element.tag in (name, f"{{{NAMESPACE}}}{name}")


def _iter(element, name):
    """ yields all descendants of element with the (InkML) tag name """
    for child in element.iter():
        if child is not element and _is(child, name):
            yield child


def _find(element, name):
    return next(_iter(element, name), None)


def _get_id(element):
    # some producers write "id" instead of "xml:id"
    id = element.get(_XML_ID)
    if id is None:
        id = element.get("id")
    return id


def _float(element, attribute, default=None):
    value = element.get(attribute)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        warnings.warn(f"attribute {attribute}='{value}' of "
                      f"{element.tag} is not a number", InkStructureWarning)
        return default


def _number(value):
    """
    Example:
        >>> _number(1000.0), _number(0.25), _number(3)
        ('1000', '0.25', '3')
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _read_channel(element):
    return Channel(name=element.get("name"),
                   type=element.get("type", "decimal"),
                   min=_float(element, "min", 0),
                   max=_float(element, "max"),
                   units=element.get("units"))


def _read_channel_property(element):
    value = _float(element, "value")
    if value is None:
        warnings.warn(f"channel property {element.get('name')} of channel "
                      f"{element.get('channel')} has no value",
                      InkStructureWarning)
        return None
    return ChannelProperty(channel=element.get("channel"),
                           name=element.get("name"),
                           value=value,
                           units=element.get("units"))


def _read_ink_source(element):
    trace_format_element = _find(element, "traceFormat")
    if trace_format_element is None:
        warnings.warn("traceFormat is required on inkSource",
                      InkStructureWarning)
        return None
    trace_format = TraceFormat(
        _get_id(trace_format_element),
        [_read_channel(channel)
         for channel in _iter(trace_format_element, "channel")])
    channel_properties = [
        _read_channel_property(channel_property)
        for channel_property in _iter(element, "channelProperty")]
    return InkSource(_get_id(element), trace_format,
                     [p for p in channel_properties if p is not None])


def _read_context(element, id, dpi):
    ink_source_element = _find(element, "inkSource")
    ink_source = None
    if ink_source_element is not None:
        ink_source = _read_ink_source(ink_source_element)

    timestamp_element = _find(element, "timestamp")
    timestamp = None
    if timestamp_element is not None:
        timestamp = Timestamp(_get_id(timestamp_element),
                              timestamp_element.get("timeString"))
    return Context(id, ink_source, timestamp, dpi=dpi)


def _read_brush(element, id):
    return Brush(id, [BrushProperty(name=prop.get("name"),
                                    value=prop.get("value"),
                                    units=prop.get("units"))
                      for prop in _iter(element, "brushProperty")])


def parse(root, dpi=DPI):
    """ reads the ink of an InkML element tree

    Args:
        root: the <ink> element
        dpi (int): resolution of the drawing surface

    Returns:
        Ink
    """
    ink = Ink(dpi)

    for element in _iter(root, "context"):
        id = _get_id(element)
        if id is None:
            # e.g. contexts of other vocabularies without namespace
            warnings.warn("context without xml:id is skipped",
                          InkStructureWarning)
            continue
        ink.add_context(_read_context(element, id, dpi))

    for element in _iter(root, "brush"):
        id = _get_id(element)
        if id is None:
            warnings.warn("brush requires xml:id", InkStructureWarning)
            continue
        ink.add_brush(_read_brush(element, id))

    for element in _iter(root, "trace"):
        ink.decode_trace(element.text or "",
                         id=_get_id(element),
                         context_ref=element.get("contextRef"),
                         brush_ref=element.get("brushRef"),
                         time_offset=element.get("timeOffset"))
    return ink


def fromstring(text, dpi=DPI):
    """ reads ink from the content of an InkML file

    Example:
        >>> ink = fromstring('<ink xmlns="http://www.w3.org/2003/InkML">'
        ...                  '<trace>0 0, 3 4, 1 1</trace></ink>')
        >>> ink.traces[0].table
        [[0, 0], [3, 4], [7, 9]]
    """
    return parse(ET.fromstring(text), dpi)


def read(filename, dpi=DPI):
    """ reads ink from an InkML file """
    return parse(ET.parse(filename).getroot(), dpi)


def _element(parent, tag_name, id=None, **attributes):
    tag = f"{{{NAMESPACE}}}{tag_name}"
    element = ET.Element(tag) if parent is None else ET.SubElement(parent, tag)
    if id is not None:
        element.set(_XML_ID, id)
    for key, value in attributes.items():
        if value is not None:
            element.set(key, str(value))
    return element


def _write_ink_source(parent, ink_source):
    element = _element(parent, "inkSource", id=ink_source.id)
    trace_format = ink_source.trace_format
    trace_format_element = _element(element, "traceFormat",
                                    id=trace_format.id)
    for channel in trace_format:
        _element(trace_format_element, "channel",
                 name=channel.name,
                 type=channel.type,
                 min=_number(channel.min) if channel.min else None,
                 max=None if channel.max is None else _number(channel.max),
                 units=channel.units)
    channel_properties = _element(element, "channelProperties")
    for channel_property in ink_source.channel_properties:
        _element(channel_properties, "channelProperty",
                 channel=channel_property.channel,
                 name=channel_property.name,
                 value=_number(channel_property.value),
                 units=channel_property.units)


def _write_context(parent, context):
    element = _element(parent, "context", id=context.id)
    if context.ink_source is not None:
        _write_ink_source(element, context.ink_source)
    if context.timestamp is not None:
        _element(element, "timestamp", id=context.timestamp.id,
                 timeString=context.timestamp.time_string)


def _write_brush(parent, brush):
    element = _element(parent, "brush", id=brush.id)
    for brush_property in brush.properties.values():
        _element(element, "brushProperty",
                 name=brush_property.name,
                 value=brush_property.value,
                 units=brush_property.units)


def to_element(ink):
    """ builds the InkML element tree of the ink

    Reference:
        https://www.w3.org/TR/InkML/
    """
    root = _element(None, "ink")
    root.append(ET.Comment("created by ink canvas"))
    definitions = _element(root, "definitions")
    for context in ink.contexts.values():
        _write_context(definitions, context)
    for brush in ink.brushes.values():
        _write_brush(definitions, brush)

    for trace in ink.traces:
        element = _element(root, "trace", id=trace.id,
                           contextRef=trace.context_ref,
                           brushRef=trace.brush_ref,
                           timeOffset=trace.time_offset)
        element.text = trace.encode()
    return root


def tostring(ink):
    return minidom.parseString(ET.tostring(to_element(ink))).toprettyxml()


def write(ink, filename):
    """Save ink to a inkml file

    Args:
        ink (Ink): the ink to save
        filename (str): filename to save (should end on ".inkml")

    Returns:
        None
    """
    with open(filename, "w") as f:
        f.write(tostring(ink))

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

import numpy as np

from .errors import InkDecodeWarning


_DIGITS = "0123456789"

# states of the packet scanner
_IDLE = 0  # no pending token
_NUMBER = 1  # accumulating digits
_SIGNED = 2  # a "-" was read, digits are expected


class Statistics:
    """Running per channel aggregates over decoded points

    The aggregates of a single trace are created with from_table and folded
    into the aggregates of the document with merge. Channels are matched by
    column index; aggregates of different width are merged column-wise and
    the surplus columns of the wider one are kept.

    Example:
        >>> stats = Statistics.from_table([[1, 5], [3, 2]])
        >>> stats.mins.tolist(), stats.maxs.tolist(), stats.count
        ([1, 2], [3, 5], 4)
        >>> stats = stats.merge(Statistics.from_table([[0, 9, 7]]))
        >>> stats.mins.tolist(), stats.counts.tolist()
        ([0, 2, 7], [3, 3, 1])
    """

    def __init__(self, mins=(), maxs=(), sums=(), counts=()):
        self.mins = np.array(mins, dtype=np.int64)
        self.maxs = np.array(maxs, dtype=np.int64)
        self.sums = np.array(sums, dtype=np.int64)
        self.counts = np.array(counts, dtype=np.int64)

    @classmethod
    def from_table(cls, table):
        if not table:
            return cls()
        values = np.array(table, dtype=np.int64)
        return cls(mins=values.min(axis=0),
                   maxs=values.max(axis=0),
                   sums=values.sum(axis=0),
                   counts=np.full(values.shape[1], values.shape[0]))

    def __len__(self):
        return len(self.counts)

    def __eq__(self, other):
        if not isinstance(other, Statistics):
            return NotImplemented
        return all(np.array_equal(a, b) for a, b in
                   zip(self._fields(), other._fields()))

    def __repr__(self):
        return (f"Statistics(mins={self.mins.tolist()}, "
                f"maxs={self.maxs.tolist()}, sums={self.sums.tolist()}, "
                f"counts={self.counts.tolist()})")

    def _fields(self):
        return self.mins, self.maxs, self.sums, self.counts

    @property
    def count(self):
        """the total number of decoded values"""
        return int(self.counts.sum())

    @property
    def means(self):
        return self.sums / self.counts

    def merge(self, other):
        """ returns the aggregates of both self and other """
        n = min(len(self), len(other))
        wider = self if len(self) >= len(other) else other

        def fold(function, mine, theirs, wide):
            return np.concatenate([function(mine[:n], theirs[:n]), wide[n:]])

        return Statistics(
            mins=fold(np.minimum, self.mins, other.mins, wider.mins),
            maxs=fold(np.maximum, self.maxs, other.maxs, wider.maxs),
            sums=fold(np.add, self.sums, other.sums, wider.sums),
            counts=fold(np.add, self.counts, other.counts, wider.counts))


def _parse_token(token):
    try:
        return int(token)
    except ValueError:
        warnings.warn(f"packet value '{token}' is not an integer, "
                      f"0 is assumed", InkDecodeWarning)
        return 0


def scan_packet(packet):
    """ splits a packet (the text of one point) into integers

    Every character which is not a digit separates two values. A "-" also
    starts the next value, hence "10-20" is read as two values.

    Example:
        >>> scan_packet(" 5 -3")
        [5, -3]
        >>> scan_packet("10-20")
        [10, -20]
        >>> scan_packet("'7 \\"-1")
        [7, -1]
    """
    values = []
    state, token = _IDLE, ""
    for char in packet:
        if char in _DIGITS:
            state, token = _NUMBER, token + char
            continue
        if state != _IDLE:
            values.append(_parse_token(token))
        if char == "-":
            state, token = _SIGNED, char
        else:
            state, token = _IDLE, ""
    if state != _IDLE:
        values.append(_parse_token(token))
    return values


def fit_point(values, channel_count, index):
    """ pads (with 0) or truncates the values of a point to channel_count

    Example:
        >>> fit_point([4], 3, index=0)
        [4, 0, 0]
    """
    if len(values) == channel_count:
        return values
    warnings.warn(f"point {index} has {len(values)} values but "
                  f"{channel_count} channels are expected", InkDecodeWarning)
    return (values + [0] * channel_count)[:channel_count]


def decode(text, channel_count=None):
    """ decodes the text of a trace

    The first point is absolute, the second one is the first derivative
    and every further point is the second derivative (InkML's default
    for compressed traces). This is done for every channel.

    Args:
        text (str): content of a <trace> element
        channel_count (int): number of channels of the trace format,
            by default the number of values of the first point

    Returns:
        table (list of list of int), Statistics of the table

    Example:
        >>> table, stats = decode("10 20,5 5,1 1,1 1")
        >>> table
        [[10, 20], [15, 25], [21, 31], [28, 38]]
        >>> stats.maxs.tolist()
        [28, 38]
    """
    packets = [packet for packet in text.split(",") if packet.strip()]
    points = [scan_packet(packet) for packet in packets]
    if not points:
        return [], Statistics()
    if channel_count is None:
        channel_count = len(points[0])

    table = []
    deltas = [0] * channel_count
    for i, values in enumerate(points):
        values = fit_point(values, channel_count, i)
        if i == 0:
            point = values
        else:
            if i == 1:
                deltas = values
            else:
                deltas = [delta + value for delta, value in zip(deltas, values)]
            point = [previous + delta
                     for previous, delta in zip(table[-1], deltas)]
        table.append(point)
    return table, Statistics.from_table(table)


def encode(table):
    """ writes the table of a trace as text

    The values are written absolute, the derivatives are not restored.
    Therefore decode only inverts encode for traces with up to one point.

    Example:
        >>> encode([[10, 20], [15, 25]])
        '10 20,15 25'
        >>> decode(encode([[10, 20], [15, 25]]))[0]
        [[10, 20], [25, 45]]
    """
    return ",".join(" ".join(str(value) for value in point)
                    for point in table)

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


class InkWarning(UserWarning):
    """Base class of all problems reported while reading or drawing ink

    None of them is fatal: the affected entity is skipped or defaulted
    and processing of the document continues.
    """


class InkStructureWarning(InkWarning):
    """A required element or attribute is missing or inconsistent"""


class InkReferenceWarning(InkWarning):
    """A trace refers to a context or brush which is not defined"""


class InkDecodeWarning(InkWarning):
    """A packet of a trace could not be decoded"""

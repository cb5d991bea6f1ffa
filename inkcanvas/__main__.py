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

import argparse
import os

from . import inkml, render
from .units import DPI

__author__ = "Daniel Vorberg"
__copyright__ = "Copyright (c) 2017, Daniel Vorberg"
__license__ = "GPL"


def convert(src, dst, *_, dpi=DPI, **kwargs):
    """ reads an InkML file and saves it as pdf, png or inkml
    """
    ink = inkml.read(src, dpi=dpi)
    file_type = os.path.splitext(dst)[1].lower()
    if file_type == ".pdf":
        render.write_pdf(ink, dst, **kwargs)
    elif file_type == ".png":
        render.write_png(ink, dst, **kwargs)
    elif file_type == ".inkml":
        inkml.write(ink, dst)
    else:
        raise ValueError("file type must be either pdf, png or inkml")
    return ink


def main():
    parser = argparse.ArgumentParser(description='Ink Canvas')
    parser.add_argument('src', type=str,
                        help='path to an inkml file')
    parser.add_argument('dst', type=str,
                        help='path to save (.pdf, .png or .inkml)')
    parser.add_argument("--dpi", type=float, default=DPI,
                        help="resolution of the drawing")
    parser.add_argument("--ignore_pressure", action="store_true")
    parser.add_argument("--margin", type=float, default=render.MARGIN)
    args = parser.parse_args()

    kwargs = {}
    if not args.dst.lower().endswith(".inkml"):
        kwargs = dict(ignore_pressure=args.ignore_pressure,
                      margin=args.margin)
    convert(args.src, args.dst, dpi=args.dpi, **kwargs)


if __name__ == "__main__":
    main()

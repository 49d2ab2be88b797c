#
#  This file is part of slnconv
#
#  Copyright (C) 2026 slnconv authors
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to
#  deal in the Software without restriction, including without limitation the
#  rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
#  sell copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
#  FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
#  IN THE SOFTWARE.
#

"""
Parsers of the solution and project manifests.

Use :func:`parse_solution` and :func:`parse_project` for manifests already
read into memory, or the ``*_file`` variants to read them from disk.
"""

from slnconv.parser.solution import parse_solution
from slnconv.parser.project import parse_project
from slnconv.parser.lines import Position
from slnconv.error import ParserError


def _read(filename):
    with open(filename, "rt", encoding="utf-8-sig") as f:
        try:
            return f.read()
        except UnicodeDecodeError as e:
            raise ParserError("cannot decode file: %s" % e, pos=Position(filename))


def parse_solution_file(filename):
    """
    Reads solution manifest from given file and returns parsed
    :class:`slnconv.model.SolutionRecord`.
    """
    return parse_solution(_read(filename), filename)


def parse_project_file(filename):
    """
    Reads project manifest from given file and returns parsed
    :class:`slnconv.model.ProjectRecord`.
    """
    return parse_project(_read(filename), filename)

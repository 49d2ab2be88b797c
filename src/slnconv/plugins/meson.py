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
Meson output format.
"""

import re

from slnconv.api import Formatter
from slnconv.model import TARGET_EXECUTABLE, LIBRARY_STATIC, LIBRARY_SHARED
from slnconv.plugins.cmake import posix_path, split_options
from slnconv.utils import filter_duplicates

_FUNCTIONS = {
    LIBRARY_STATIC: "static_library",
    LIBRARY_SHARED: "shared_library",
}


def quote(text):
    """
    Returns *text* as Meson string literal.

    >>> quote("main.cpp")
    "'main.cpp'"
    """
    return "'%s'" % text.replace("\\", "\\\\").replace("'", "\\'")


def variable_name(name):
    """Returns identifier usable as Meson variable holding the target."""
    var = re.sub(r'\W', '_', name).lower()
    if var[:1].isdigit():
        var = "_" + var
    return var


class MesonFormatter(Formatter):
    """
    Writes meson.build. Meson can't set options on individual files, so the
    options of all sources of a target are combined into its ``cpp_args``.
    """
    name = "meson"
    default_filename = "meson.build"

    def header(self, name):
        return "project(%s, 'cpp')\n" % quote(name)

    def target(self, statement):
        if statement.kind == TARGET_EXECUTABLE:
            func = "executable"
        else:
            func = _FUNCTIONS.get(statement.library_kind, "library")

        args = [quote(statement.name)]
        args += [quote(posix_path(s.path)) for s in statement.sources]

        cpp_args = list(filter_duplicates(opt for src in statement.sources
                                          for opt in split_options(src.options)))
        if cpp_args:
            args.append("cpp_args : [%s]" % ", ".join(quote(a) for a in cpp_args))

        out = ""
        if statement.dependencies:
            out += self.comment("depends on: %s" % ", ".join(statement.dependencies)) + "\n"
        out += "%s = %s(%s)\n" % (variable_name(statement.name), func, ", ".join(args))
        return out

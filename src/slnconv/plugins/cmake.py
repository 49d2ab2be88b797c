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
CMake output format.
"""

import re

from slnconv.api import Formatter
from slnconv.model import TARGET_EXECUTABLE, LIBRARY_STATIC, LIBRARY_SHARED

# options inherited from item definitions, meaningless outside of msbuild
_INHERITED_OPTIONS = re.compile(r'%\(\w+\)')
_NEEDS_QUOTING = re.compile(r'[\s"();#$]')

_LIBRARY_KEYWORDS = {
    LIBRARY_STATIC: "STATIC",
    LIBRARY_SHARED: "SHARED",
}


def quote(text):
    """
    Returns *text* as a single CMake argument, quoting it if needed.

    >>> quote("main.cpp")
    'main.cpp'
    >>> quote("my file.cpp")
    '"my file.cpp"'
    """
    if text and not _NEEDS_QUOTING.search(text):
        return text
    return '"%s"' % text.replace("\\", "\\\\").replace('"', '\\"')


def posix_path(path):
    return path.replace("\\", "/")


def split_options(options):
    """
    Returns list of individual compiler options in the AdditionalOptions
    string, without inherited values like ``%(AdditionalOptions)``.
    """
    if not options:
        return []
    return _INHERITED_OPTIONS.sub(" ", options).split()


class CMakeFormatter(Formatter):
    """
    Writes CMakeLists.txt with one ``add_executable()`` or ``add_library()``
    per target. Per-file compiler options are set with
    ``set_source_files_properties()`` and build order between targets with
    ``add_dependencies()``.
    """
    name = "cmake"
    default_filename = "CMakeLists.txt"

    #: Value used in the ``cmake_minimum_required()`` call. Targets without
    #: sources, which projects without ClCompile items produce, need 3.11.
    minimum_version = "3.11"

    def header(self, name):
        return ("cmake_minimum_required(VERSION %s)\n"
                "project(%s CXX)\n" % (self.minimum_version, quote(name)))

    def target(self, statement):
        sources = [posix_path(s.path) for s in statement.sources]

        args = [statement.name]
        if statement.kind == TARGET_EXECUTABLE:
            command = "add_executable"
        else:
            if statement.library_kind in _LIBRARY_KEYWORDS:
                args.append(_LIBRARY_KEYWORDS[statement.library_kind])
            command = "add_library"

        lines = ["%s(%s)" % (command, " ".join(quote(a) for a in args + sources))]

        for src, path in zip(statement.sources, sources):
            opts = split_options(src.options)
            if opts:
                lines.append('set_source_files_properties(%s PROPERTIES COMPILE_OPTIONS "%s")' %
                             (quote(path), ";".join(opts).replace('"', '\\"')))

        if statement.dependencies:
            lines.append("add_dependencies(%s)" %
                         " ".join(quote(a) for a in (statement.name,) + statement.dependencies))

        return "\n".join(lines) + "\n"

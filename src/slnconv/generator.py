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
Turns an assembled solution into a list of build statements, one per buildable
project, in the order the projects are declared in the solution.
"""

import ntpath
import logging

from slnconv.error import warning
from slnconv.model import BuildStatement, SourceEntry, TARGET_EXECUTABLE, TARGET_LIBRARY

logger = logging.getLogger("slnconv.generator")


def generate(assembled):
    """
    Returns list of :class:`slnconv.model.BuildStatement` for given
    :class:`slnconv.model.AssembledSolution`.

    Projects of unknown type are omitted with a warning. The assembled
    solution isn't modified.
    """
    buildable = set(p.identifier for p in assembled.projects
                    if p.target_type in (TARGET_EXECUTABLE, TARGET_LIBRARY))

    statements = []
    for prj in assembled.projects:
        if prj.identifier not in buildable:
            warning('project "%s" has unknown target type (ConfigurationType=%s), skipping it',
                    prj.name, prj.record.configuration_type, pos=prj.pos)
            continue
        deps = [assembled.get_project(d).name for d in prj.dependencies if d in buildable]
        library_kind = prj.record.library_kind if prj.target_type == TARGET_LIBRARY else None
        sources = [SourceEntry(solution_relative_path(prj.reference.path, s.path), s.options)
                   for s in prj.sources]
        logger.debug("%s target %s with %d sources", prj.target_type, prj.name, len(sources))
        statements.append(BuildStatement(prj.name, prj.target_type, sources,
                                         library_kind=library_kind,
                                         dependencies=deps))
    return statements


def solution_relative_path(project_path, source_path):
    """
    Returns path of a source file, given relative to the project manifest at
    *project_path*, as a path relative to the solution. Both use Windows
    syntax, as written in the manifests.

    >>> solution_relative_path(r"App\\App.vcxproj", r"src\\main.cpp")
    'App\\\\src\\\\main.cpp'
    """
    if ntpath.isabs(source_path):
        return source_path
    return ntpath.normpath(ntpath.join(ntpath.dirname(project_path), source_path))

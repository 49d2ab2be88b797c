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
Joins a parsed solution with its projects.

The assembler never touches storage itself: it is given a *loader*, a
callable taking a project path (as written in the solution) and returning the
manifest text. The loader signals a missing or unreadable project by raising
:exc:`IOError` or by returning :const:`None`.
"""

import logging

from slnconv.error import UnresolvedProject, DanglingReference, error_context
from slnconv.model import AssembledProject, AssembledSolution
from slnconv.parser import parse_project
from slnconv.parser.lines import Position

logger = logging.getLogger("slnconv.assembler")


def assemble(solution, loader):
    """
    Loads and parses all projects referenced by *solution* and returns
    :class:`slnconv.model.AssembledSolution`.

    Referential integrity is checked first: every project identifier used in
    the configuration mapping or in a dependency edge must be declared in the
    solution, otherwise :exc:`slnconv.error.DanglingReference` is raised.

    Assembly is all-or-nothing: if any project can't be loaded
    (:exc:`slnconv.error.UnresolvedProject`) or parsed
    (:exc:`slnconv.error.ParserError`), the exception propagates and no partial
    graph is returned.
    """
    logger.info("assembling solution %s", solution.name)
    check_references(solution)

    projects = []
    for ref in solution.projects:
        text = _load(ref, loader)
        logger.debug("parsing project %s from %s", ref.name, ref.path)
        with error_context(ref):
            record = parse_project(text, ref.path)
        deps = [e.target for e in solution.dependencies if e.source == ref.identifier]
        projects.append(AssembledProject(ref, record, deps))

    return AssembledSolution(solution, projects)


def check_references(solution):
    """
    Raises :exc:`slnconv.error.DanglingReference` if the solution refers to a
    project identifier it doesn't declare.
    """
    known = set(p.identifier for p in solution.projects)

    for identifier, key in solution.configurations:
        if identifier not in known:
            raise DanglingReference(identifier, 'configuration "%s"' % key,
                                    pos=solution.configuration_positions.get(
                                        (identifier, key), Position(solution.filename)))

    for edge in solution.dependencies:
        for endpoint in (edge.source, edge.target):
            if endpoint not in known:
                raise DanglingReference(endpoint, "dependency %s -> %s" % (edge.source, edge.target),
                                        pos=edge.pos)


def _load(ref, loader):
    try:
        text = loader(ref.path)
    except IOError as e:
        raise UnresolvedProject(ref, e.strerror or str(e))
    except UnicodeDecodeError as e:
        raise UnresolvedProject(ref, "cannot decode: %s" % e)
    if text is None:
        raise UnresolvedProject(ref, "not found")
    return text

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
This module contains helper classes for simple handling of errors. In
particular, the :exc:`Error` class keeps track of the position in the input
manifest where the error occurred or to which it relates to.
"""

import threading

import logging
logger = logging.getLogger("slnconv.error")


class Error(Exception):
    """
    Base class for all slnconv errors.

    When converted to string, the message is formatted in the usual way of
    compilers, as ``file:line: error``.

    .. attribute:: msg

        Error message to show to the user.

    .. attribute:: pos

        :class:`slnconv.parser.lines.Position` object with location of the
        error. May be :const:`None`.
    """
    def __init__(self, msg, pos=None):
        super(Error, self).__init__(msg)
        self.msg = msg
        self.pos = pos

    def __str__(self):
        if self.pos:
            return "%s: %s" % (self.pos, self.msg)
        else:
            return self.msg


class ParserError(Error):
    """
    Exception class for errors encountered while parsing solution or project
    manifests. The record being parsed is discarded, but callers processing
    several manifests may catch it and continue with the next one.
    """
    pass


class MalformedHeader(ParserError):
    """
    The first non-empty line of a solution doesn't name the solution.
    """
    pass


class MalformedSectionLine(ParserError):
    """
    A line inside a delimited section doesn't have the expected shape, or the
    section isn't terminated.
    """
    pass


class MalformedConfigLine(ParserError):
    """
    A configuration line of a project manifest is missing its condition or its
    configuration value.
    """
    pass


class AssemblyError(Error):
    """
    Base class for errors detected when joining a solution with its projects.
    Fatal for the whole solution.
    """
    pass


class UnresolvedProject(AssemblyError):
    """
    The loader couldn't provide the manifest of a referenced project.

    .. attribute:: reference

        The :class:`slnconv.model.ProjectReference` that couldn't be loaded.
    """
    def __init__(self, reference, detail=None):
        text = 'cannot load project "%s" from "%s"' % (reference.name, reference.path)
        if detail:
            text += ": %s" % detail
        super(UnresolvedProject, self).__init__(text, reference.pos)
        self.reference = reference


class DanglingReference(AssemblyError):
    """
    A dependency edge or configuration mapping names a project identifier that
    isn't declared in the solution.

    .. attribute:: identifier

        The unknown identifier.
    """
    def __init__(self, identifier, what, pos=None):
        text = "%s refers to undeclared project %s" % (what, identifier)
        super(DanglingReference, self).__init__(text, pos)
        self.identifier = identifier


class UnsupportedError(Error):
    """
    Exception class for errors when something is unsupported, e.g. unknown
    output format.
    """
    pass


class _LocalContextStack(threading.local):
    """
    Helper class for keeping track of :class:`error_context` instances.
    """
    stack = []

    def push(self, ctx):
        if not self.stack:
            self.stack = [ctx]
        else:
            self.stack.append(ctx)

    def pop(self):
        self.stack.pop()

    @property
    def pos(self):
        for c in reversed(self.stack):
            p = c.pos
            if p: return p
        return None


_context_stack = _LocalContextStack()


class error_context:
    """
    Error context for adding positional information to exceptions thrown
    without one. This happens e.g. when a project manifest fails to parse and
    the error should point at the solution line that referenced it if nothing
    better is known.

    Usage:

    .. code-block:: python

       with error_context(reference):
          ...do something that may throw...

    .. attribute:: pos

        :class:`slnconv.parser.lines.Position` object with location of the
        error. May be :const:`None`.
    """
    def __init__(self, context):
        self.context = context

    def __enter__(self):
        _context_stack.push(self)

    def __exit__(self, exc_type, exc_value, traceback):
        _context_stack.pop()
        if exc_value is not None:
            if isinstance(exc_value, Error) and exc_value.pos is None:
                exc_value.pos = self.pos

    @property
    def pos(self):
        c = self.context
        if hasattr(c, "pos"):
            return c.pos
        else:
            return None


def warning(msg, *args, **kwargs):
    """
    Logs a warning.

    The function takes position arguments similarly to logging module's
    functions. It also accepts optional *pos* argument with position
    information as :class:`slnconv.parser.lines.Position`.

    Uses active :class:`error_context` instances to decorate the warning with
    position information if not provided.

    Usage:

    .. code-block:: python

       slnconv.error.warning("project %s has unknown type", p.name, pos=p.pos)
    """
    text = msg % args
    e = {}
    try:
        e["pos"] = kwargs["pos"]
    except KeyError:
        e["pos"] = _context_stack.pos
    logger.warning(text, extra=e)

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
Records produced by the parsers and consumed by the assembler and generator.
"""

from collections import OrderedDict

from slnconv.utils import OrderedSet

TARGET_EXECUTABLE = "executable"
TARGET_LIBRARY    = "library"
TARGET_UNKNOWN    = "unknown"

LIBRARY_STATIC = "static"
LIBRARY_SHARED = "shared"

# ConfigurationType values -> (target type, library kind)
CONFIGURATION_TYPES = {
    "Application"    : (TARGET_EXECUTABLE, None),
    "StaticLibrary"  : (TARGET_LIBRARY, LIBRARY_STATIC),
    "DynamicLibrary" : (TARGET_LIBRARY, LIBRARY_SHARED),
}

# Kind of solution folders, as used in solution files
PROJECT_KIND_FOLDER = "{2150E333-8FDC-42A3-9474-1A3956D46DE8}"


class ProjectReference(object):
    """
    Project declared in a solution.

    .. attribute:: name

       Display name of the project.

    .. attribute:: path

       Path to the project manifest, relative to the solution and written the
       way the solution has it (i.e. usually with backslashes).

    .. attribute:: identifier

       GUID-like identifier of the project, including the braces.

    .. attribute:: kind

       GUID of the project type, as written in the declaration.

    .. attribute:: pos

       Position of the declaration in the solution.
    """
    def __init__(self, name, path, identifier, kind=None, pos=None):
        self.name = name
        self.path = path
        self.identifier = identifier
        self.kind = kind
        self.pos = pos

    def __eq__(self, other):
        if not isinstance(other, ProjectReference):
            return NotImplemented
        return (self.name == other.name and
                self.path == other.path and
                self.identifier == other.identifier and
                self.kind == other.kind)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "ProjectReference(%r, %r, %r)" % (self.name, self.path, self.identifier)


class DependencyEdge(object):
    """
    Build order dependency between two projects of a solution: *source* must
    be built after *target*.
    """
    def __init__(self, source, target, tag=None, pos=None):
        self.source = source
        self.target = target
        self.tag = tag
        self.pos = pos

    def _key(self):
        return (self.source, self.target)

    def __eq__(self, other):
        if not isinstance(other, DependencyEdge):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "DependencyEdge(%r, %r)" % (self.source, self.target)


class SolutionRecord(object):
    """
    Parsed solution manifest.

    .. attribute:: name

       Name of the solution (root project name).

    .. attribute:: projects

       List of :class:`ProjectReference`, in declaration order.

    .. attribute:: dependencies

       Ordered set of :class:`DependencyEdge`.

    .. attribute:: configurations

       Mapping of ``(identifier, key)`` pairs to configuration values, e.g.
       ``("{...}", "Debug|Win32.ActiveCfg") -> "Debug|Win32"``.

    .. attribute:: configuration_positions

       Mapping of the same pairs to the position of the line they come from.

    .. attribute:: dependency_tags

       Mapping of dependency key to its classification tag, for dependency
       lines that carry one.

    .. attribute:: variables

       Header variables, e.g. ``VisualStudioVersion``.

    .. attribute:: solution_configurations

       List of solution-level ``Config|Platform`` names.
    """
    def __init__(self, name=None, filename=None):
        self.name = name
        self.filename = filename
        self.projects = []
        self.dependencies = OrderedSet()
        self.configurations = OrderedDict()
        self.configuration_positions = {}
        self.dependency_tags = OrderedDict()
        self.variables = OrderedDict()
        self.solution_configurations = []

    @property
    def project_configurations(self):
        """
        Mapping of project identifier to its configuration value. When a
        project has several configuration lines, the last one wins.
        """
        result = OrderedDict()
        for (identifier, key), value in self.configurations.items():
            result[identifier] = value
        return result

    def configurations_for(self, identifier):
        """Returns ordered mapping of configuration keys to values for a project."""
        return OrderedDict((key, value)
                           for (ident, key), value in self.configurations.items()
                           if ident == identifier)

    def get_project(self, identifier):
        """
        Returns :class:`ProjectReference` with given identifier or None.
        """
        for p in self.projects:
            if p.identifier == identifier:
                return p
        return None

    def __eq__(self, other):
        if not isinstance(other, SolutionRecord):
            return NotImplemented
        return (self.name == other.name and
                self.projects == other.projects and
                list(self.dependencies) == list(other.dependencies) and
                self.configurations == other.configurations and
                self.dependency_tags == other.dependency_tags and
                self.variables == other.variables and
                self.solution_configurations == other.solution_configurations)

    def __ne__(self, other):
        return not self == other


class SourceEntry(object):
    """
    Source file of a project together with its extra compiler options (None
    if there are none).
    """
    def __init__(self, path, options=None):
        self.path = path
        self.options = options

    def __eq__(self, other):
        if not isinstance(other, SourceEntry):
            return NotImplemented
        return self.path == other.path and self.options == other.options

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "SourceEntry(%r, %r)" % (self.path, self.options)


class ProjectRecord(object):
    """
    Parsed project manifest.

    .. attribute:: configurations

       Mapping of configuration condition to configuration name.

    .. attribute:: properties

       Mapping of condition (or None for unconditional ones) to ordered
       mapping of property names to values.

    .. attribute:: sources

       Ordered mapping of source file paths to :class:`SourceEntry`.

    .. attribute:: target_type

       One of :const:`TARGET_EXECUTABLE`, :const:`TARGET_LIBRARY` or
       :const:`TARGET_UNKNOWN`.

    .. attribute:: configuration_type

       Raw value of ``ConfigurationType`` the target type was derived from.
    """
    def __init__(self, filename=None):
        self.filename = filename
        self.configurations = OrderedDict()
        self.properties = OrderedDict()
        self.sources = OrderedDict()
        self.target_type = TARGET_UNKNOWN
        self.configuration_type = None

    def add_source(self, entry):
        # duplicates overwrite the earlier entry, keeping its position
        self.sources[entry.path] = entry

    def set_property(self, condition, name, value):
        self.properties.setdefault(condition, OrderedDict())[name] = value

    def get_property(self, name, condition=None):
        try:
            return self.properties[condition][name]
        except KeyError:
            return None

    @property
    def library_kind(self):
        return CONFIGURATION_TYPES.get(self.configuration_type, (None, None))[1]

    def __eq__(self, other):
        if not isinstance(other, ProjectRecord):
            return NotImplemented
        return (self.configurations == other.configurations and
                self.properties == other.properties and
                list(self.sources.values()) == list(other.sources.values()) and
                self.target_type == other.target_type and
                self.configuration_type == other.configuration_type)

    def __ne__(self, other):
        return not self == other


class AssembledProject(object):
    """
    :class:`ProjectReference` joined with its loaded :class:`ProjectRecord`.

    Its own attributes can't be reassigned and :attr:`sources` and
    :attr:`dependencies` are tuples. :attr:`reference` and :attr:`record` are
    the parsed objects themselves, not copies; they are shared with the
    parser's results and must not be modified.
    """
    __slots__ = ("_reference", "_record", "_dependencies")

    def __init__(self, reference, record, dependencies=()):
        self._reference = reference
        self._record = record
        self._dependencies = tuple(dependencies)

    reference = property(lambda self: self._reference)
    record = property(lambda self: self._record)

    @property
    def dependencies(self):
        """Identifiers of projects this one depends on."""
        return self._dependencies

    @property
    def name(self):
        return self._reference.name

    @property
    def identifier(self):
        return self._reference.identifier

    @property
    def pos(self):
        return self._reference.pos

    @property
    def target_type(self):
        return self._record.target_type

    @property
    def sources(self):
        return tuple(self._record.sources.values())


class AssembledSolution(object):
    """
    Solution with all of its projects loaded.

    .. attribute:: solution

       The :class:`SolutionRecord` the graph was assembled from. This is the
       caller's object, not a copy, so it must not be modified afterwards.

    .. attribute:: projects

       Tuple of :class:`AssembledProject`, in declaration order.
    """
    __slots__ = ("_solution", "_projects")

    def __init__(self, solution, projects):
        self._solution = solution
        self._projects = tuple(projects)

    solution = property(lambda self: self._solution)
    projects = property(lambda self: self._projects)

    @property
    def name(self):
        return self._solution.name

    def get_project(self, identifier):
        for p in self._projects:
            if p.identifier == identifier:
                return p
        return None


class BuildStatement(object):
    """
    One target declaration of the generated build description.
    """
    def __init__(self, name, kind, sources, library_kind=None, dependencies=()):
        self.name = name
        self.kind = kind
        self.sources = tuple(sources)
        self.library_kind = library_kind
        self.dependencies = tuple(dependencies)

    def __repr__(self):
        return "BuildStatement(%r, %r, %r)" % (self.name, self.kind,
                                               [s.path for s in self.sources])

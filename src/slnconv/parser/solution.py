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
Parser of solution manifests (``.sln`` files).

The manifest is processed in sequential passes over a forward-only stream of
lines: the header, the project declarations (with their dependency sections)
and finally the ``Global`` block with configuration mappings.
"""

import os.path

import logging
logger = logging.getLogger("slnconv.parser")

from slnconv.error import MalformedHeader, MalformedSectionLine
from slnconv.model import SolutionRecord, ProjectReference, DependencyEdge, PROJECT_KIND_FOLDER
from slnconv.parser.lines import (
        LineStream, Position, quoted_fields, outer_quoted,
        SLN_SIGNATURE, COMMENT, HEADER_VAR,
        PROJECT_DECL, END_PROJECT, PROJECT_SECTION, END_PROJECT_SECTION,
        GLOBAL, END_GLOBAL, GLOBAL_SECTION, END_GLOBAL_SECTION,
        CONFIG_LINE, ASSIGNMENT_LINE, DEPENDENCY_LINE)


class SolutionParser(object):
    """
    Parses one solution manifest into :class:`slnconv.model.SolutionRecord`.
    Instances are single-use, call :meth:`parse` once.
    """
    def __init__(self, text, filename=None):
        self.filename = filename
        self.stream = LineStream(text, filename)
        self.record = SolutionRecord(filename=filename)

    def parse(self):
        self._parse_header()
        self._parse_declarations()
        self._parse_global()
        if self.record.name is None:
            self.record.name = self._fallback_name()
        logger.debug("parsed solution %s: %d projects, %d dependencies",
                     self.record.name, len(self.record.projects),
                     len(self.record.dependencies))
        return self.record

    # -- header --

    def _parse_header(self):
        s = self.stream
        while s.peek() is not None and s.peek().is_blank():
            s.next()
        line = s.peek()
        if line is None:
            raise MalformedHeader("empty solution, expected a header line with quoted name",
                                  pos=Position(self.filename, 1))

        if line.match(PROJECT_DECL):
            # no header at all, the solution starts with its first project
            return

        s.next()
        name = outer_quoted(line.text)
        if name is not None:
            self.record.name = name
        elif not line.match(SLN_SIGNATURE):
            raise MalformedHeader('expected quoted solution name on the first line, got "%s"' % line.text.strip(),
                                  pos=line.pos)

        while True:
            line = s.peek()
            if line is None or line.match(PROJECT_DECL) or line.match(GLOBAL):
                break
            m = line.match(HEADER_VAR)
            if m:
                self.record.variables[m.group("name")] = m.group("value")
            s.next()

    def _fallback_name(self):
        if self.filename:
            return os.path.splitext(os.path.basename(self.filename))[0]
        if self.record.projects:
            return self.record.projects[0].name
        raise MalformedHeader("cannot determine solution name: the header has no quoted name and there are no projects",
                              pos=Position(self.filename, 1))

    # -- project declarations --

    def _parse_declarations(self):
        s = self.stream
        while True:
            line = s.peek()
            if line is None or line.match(GLOBAL):
                break
            s.next()
            if line.match(PROJECT_DECL):
                self._parse_project(line)
            elif line.is_blank() or line.match(COMMENT):
                continue
            else:
                m = line.match(HEADER_VAR)
                if m:
                    self.record.variables[m.group("name")] = m.group("value")
                else:
                    logger.debug("%s: ignoring line \"%s\"", line.pos, line.text.strip())

    def _parse_project(self, decl):
        fields = quoted_fields(decl.text)
        if len(fields) < 4:
            raise MalformedSectionLine('invalid project declaration, expected Project("{kind}") = "name", "path", "{identifier}"',
                                       pos=decl.pos)
        kind, name, path, identifier = fields[:4]
        is_folder = kind.upper() == PROJECT_KIND_FOLDER

        s = self.stream
        while True:
            line = s.next()
            if line is None or line.match(PROJECT_DECL):
                raise MalformedSectionLine('missing EndProject for project "%s"' % name, pos=decl.pos)
            if line.match(END_PROJECT):
                break
            m = line.match(PROJECT_SECTION)
            if m:
                if m.group("name") == "ProjectDependencies" and not is_folder:
                    self._parse_dependencies(identifier, line)
                else:
                    self._skip_section(line, END_PROJECT_SECTION, "EndProjectSection")

        if is_folder:
            logger.debug("%s: skipping solution folder \"%s\"", decl.pos, name)
            return
        self.record.projects.append(ProjectReference(name, path, identifier, kind, pos=decl.pos))

    def _parse_dependencies(self, owner, start):
        for line in self._section_lines(start, END_PROJECT_SECTION, "EndProjectSection"):
            m = line.match(DEPENDENCY_LINE)
            if not m:
                raise MalformedSectionLine('invalid dependency line "%s", expected "{identifier} = {identifier}" optionally followed by "[tag]"' % line.text.strip(),
                                           pos=line.pos)
            target = m.group("value")
            tag = m.group("tag")
            self.record.dependencies.add(DependencyEdge(owner, target, tag, pos=line.pos))
            if tag is not None:
                self.record.dependency_tags[target] = tag

    # -- global section --

    def _parse_global(self):
        s = self.stream
        start = s.next()
        if start is None:
            return # no global section, nothing more to parse
        while True:
            line = s.next()
            if line is None:
                raise MalformedSectionLine("missing EndGlobal", pos=start.pos)
            if line.match(END_GLOBAL):
                break
            m = line.match(GLOBAL_SECTION)
            if not m:
                continue
            name = m.group("name")
            if name == "ProjectConfigurationPlatforms":
                self._parse_project_configurations(line)
            elif name == "SolutionConfigurationPlatforms":
                self._parse_solution_configurations(line)
            else:
                self._skip_section(line, END_GLOBAL_SECTION, "EndGlobalSection")

    def _parse_project_configurations(self, start):
        for line in self._section_lines(start, END_GLOBAL_SECTION, "EndGlobalSection"):
            m = line.match(CONFIG_LINE)
            if not m:
                raise MalformedSectionLine('invalid configuration line "%s", expected "{identifier}.<configuration> = <value>"' % line.text.strip(),
                                           pos=line.pos)
            key = (m.group("identifier"), m.group("key"))
            self.record.configurations[key] = m.group("value")
            self.record.configuration_positions[key] = line.pos

    def _parse_solution_configurations(self, start):
        for line in self._section_lines(start, END_GLOBAL_SECTION, "EndGlobalSection"):
            m = line.match(ASSIGNMENT_LINE)
            if not m:
                raise MalformedSectionLine('invalid solution configuration line "%s", expected "<configuration> = <configuration>"' % line.text.strip(),
                                           pos=line.pos)
            cfg = m.group("key")
            if cfg not in self.record.solution_configurations:
                self.record.solution_configurations.append(cfg)

    # -- helpers --

    def _section_lines(self, start, end_pattern, end_name):
        """
        Yields non-blank lines of the section opened by *start*, consuming
        its end marker too.
        """
        s = self.stream
        while True:
            line = s.next()
            if line is None:
                raise MalformedSectionLine("missing %s for the section" % end_name, pos=start.pos)
            if line.match(end_pattern):
                return
            if line.is_blank():
                continue
            yield line

    def _skip_section(self, start, end_pattern, end_name):
        for line in self._section_lines(start, end_pattern, end_name):
            pass


def parse_solution(text, filename=None):
    """
    Parses solution manifest given as string and returns
    :class:`slnconv.model.SolutionRecord`. The optional filename argument is
    used for error reporting and as solution name if the header doesn't
    provide one.
    """
    return SolutionParser(text, filename).parse()

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
Parser of native project manifests (``.vcxproj`` files).

Two independent scans are done over the lines of the manifest: one collects
configurations and per-configuration properties from ``<ItemDefinitionGroup>``
and ``<PropertyGroup>`` blocks, the other collects ``<ClCompile>`` source
entries with their additional compiler options.
"""

import logging
logger = logging.getLogger("slnconv.parser")

from slnconv.error import MalformedConfigLine, MalformedSectionLine, warning
from slnconv.model import ProjectRecord, SourceEntry, CONFIGURATION_TYPES, TARGET_UNKNOWN
from slnconv.parser.lines import (
        LineStream,
        ITEM_DEFINITION_GROUP, PROPERTY_GROUP,
        CONDITION_START, CONDITION, CONDITION_COMPARE,
        CONFIGURATION_START, CONFIGURATION, PROPERTY, ELEMENT_OPEN, ELEMENT_CLOSE,
        SELF_CLOSING, CLCOMPILE_OPEN, CLCOMPILE_CLOSE, INCLUDE_START, INCLUDE,
        ADDITIONAL_OPTIONS)


CONFIG_BLOCKS = [ITEM_DEFINITION_GROUP, PROPERTY_GROUP]


class ProjectParser(object):
    """
    Parses one project manifest into :class:`slnconv.model.ProjectRecord`.
    """
    def __init__(self, text, filename=None):
        self.filename = filename
        self.lines = LineStream(text, filename).lines
        self.record = ProjectRecord(filename=filename)

    def parse(self):
        self._scan_configurations()
        self._scan_sources()
        logger.debug("parsed project %s: type %s, %d sources",
                     self.filename, self.record.target_type, len(self.record.sources))
        return self.record

    # -- configurations --

    def _scan_configurations(self):
        lines = self.lines
        i = 0
        while i < len(lines):
            line = lines[i]
            markers = self._block_markers(line)
            if markers is None or SELF_CLOSING.search(line.text) or markers[1] in line.text:
                i += 1
                continue
            opener, closer = markers
            condition = self._condition(line)
            end = i + 1
            while end < len(lines) and closer not in lines[end].text:
                end += 1
            if end == len(lines):
                raise MalformedSectionLine('missing %s> for the block opened here' % closer, pos=line.pos)
            self._scan_config_block(lines[i+1:end], condition)
            i = end + 1

    def _block_markers(self, line):
        for markers in CONFIG_BLOCKS:
            if markers[0] in line.text:
                return markers
        return None

    def _condition(self, line):
        """
        Returns condition key of the line or None if it has no Condition
        attribute. Conditions of the usual ``'$(Configuration)|$(Platform)'==
        'Debug|Win32'`` form are keyed by their right-hand side.
        """
        if not line.search(CONDITION_START):
            return None
        m = line.search(CONDITION)
        if not m:
            raise MalformedConfigLine('unterminated Condition attribute, expected Condition="\'...\'"',
                                      pos=line.pos)
        cond = m.group("condition")
        cmp = CONDITION_COMPARE.match(cond)
        if cmp:
            return cmp.group("value")
        return cond.strip()

    def _scan_config_block(self, block, block_condition):
        record = self.record
        elements = []
        for line in block:
            own = self._condition(line)
            condition = own if own is not None else block_condition

            if line.search(CONFIGURATION_START):
                m = line.search(CONFIGURATION)
                if not m:
                    raise MalformedConfigLine('unterminated configuration, expected "<Configuration>name</Configuration>"',
                                              pos=line.pos)
                value = m.group("value").strip()
                if condition is None:
                    raise MalformedConfigLine('configuration "%s" has no condition, expected Condition="\'...\'" on the line or its group' % value,
                                              pos=line.pos)
                record.configurations[condition] = value
                continue

            m = line.match(ELEMENT_CLOSE)
            if m:
                if elements and elements[-1] == m.group("name"):
                    elements.pop()
                continue

            m = line.match(PROPERTY)
            if m:
                name = m.group("name")
                value = m.group("value").strip()
                record.set_property(condition, ".".join(elements + [name]), value)
                if name == "ConfigurationType" and not elements:
                    self._set_configuration_type(value, line)
                continue

            m = line.match(ELEMENT_OPEN)
            if m:
                elements.append(m.group("name"))

    def _set_configuration_type(self, value, line):
        record = self.record
        if record.configuration_type is None:
            record.configuration_type = value
            record.target_type = CONFIGURATION_TYPES.get(value, (TARGET_UNKNOWN, None))[0]
        elif record.configuration_type != value:
            warning('ignoring ConfigurationType "%s", project type was already set to "%s"',
                    value, record.configuration_type, pos=line.pos)

    # -- sources --

    def _scan_sources(self):
        lines = self.lines
        i = 0
        while i < len(lines):
            line = lines[i]
            i += 1
            if not line.search(CLCOMPILE_OPEN):
                continue
            path = self._include(line)
            if path is None:
                # compiler settings in item definitions, not a source file
                continue
            options = None
            if not SELF_CLOSING.search(line.text) and CLCOMPILE_CLOSE not in line.text:
                while True:
                    if i >= len(lines):
                        raise MalformedSectionLine('missing </ClCompile> for source "%s"' % path,
                                                   pos=line.pos)
                    inner = lines[i]
                    i += 1
                    if CLCOMPILE_CLOSE in inner.text:
                        break
                    if options is None:
                        m = inner.search(ADDITIONAL_OPTIONS)
                        if m:
                            options = m.group("options").strip()
            self.record.add_source(SourceEntry(path, options))

    def _include(self, line):
        if not line.search(INCLUDE_START):
            return None
        m = line.search(INCLUDE)
        if not m:
            raise MalformedSectionLine('unterminated Include attribute, expected <ClCompile Include="file">',
                                       pos=line.pos)
        return m.group("path")


def parse_project(text, filename=None):
    """
    Parses project manifest given as string and returns
    :class:`slnconv.model.ProjectRecord`. The optional filename argument
    allows specifying input file name for the purpose of errors reporting.
    """
    return ProjectParser(text, filename).parse()

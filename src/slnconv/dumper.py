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
Helpers for dumping slnconv records into human-readable form.
"""

from slnconv.converter import Converter


def dump_solution(solution):
    """
    Returns string with dumped, human-readable description of 'solution',
    which is an instance of slnconv.model.SolutionRecord.
    """
    out = "solution %s {\n" % solution.name
    if solution.variables:
        out += "  variables {\n"
        for name, value in solution.variables.items():
            out += "    %s = %s\n" % (name, value)
        out += "  }\n"
    if solution.solution_configurations:
        out += "  configurations {\n"
        out += _indent(_indent("\n".join(solution.solution_configurations)))
        out += "  }\n"
    for p in solution.projects:
        out += _indent(_dump_reference(solution, p))
    out += "}"
    return out


def dump_project_record(record):
    """
    Returns string with dumped, human-readable description of 'record', which
    is an instance of slnconv.model.ProjectRecord.
    """
    out = "%s {\n" % record.target_type
    if record.configuration_type:
        out += "  ConfigurationType = %s\n" % record.configuration_type
    for condition, config in record.configurations.items():
        out += "  configuration %s = %s\n" % (condition, config)
    if record.sources:
        out += "  sources {\n"
        out += _indent(_indent("\n".join(_dump_source(s) for s in record.sources.values())))
        out += "  }\n"
    out += "}"
    return out


def dump_assembled(assembled):
    """
    Returns string with dumped description of the whole
    slnconv.model.AssembledSolution.
    """
    out = "solution %s {\n" % assembled.name
    for p in assembled.projects:
        out += "  project %s {\n" % p.name
        if p.dependencies:
            names = [assembled.get_project(d).name for d in p.dependencies]
            out += "    depends = %s\n" % ", ".join(names)
        out += _indent(_indent(dump_project_record(p.record)))
        out += "  }\n"
    out += "}"
    return out


class DumpingConverter(Converter):
    """
    Converter that prints the assembled model instead of writing the build
    description.
    """
    def generate(self, filename):
        print(dump_assembled(self.assembled))


def _indent(text):
    lines = text.split("\n")
    out = ""
    for x in lines:
        if x != "":
            x = "  %s" % x
            out += "%s\n" % x
    return out


def _dump_reference(solution, ref):
    # use Unix filename syntax in the dumps even on Windows
    out = "project %s (%s) {\n" % (ref.name, ref.path.replace("\\", "/"))
    out += "  id = %s\n" % ref.identifier
    for key, value in solution.configurations_for(ref.identifier).items():
        out += "  %s = %s\n" % (key, value)
    deps = [e.target for e in solution.dependencies if e.source == ref.identifier]
    if deps:
        out += "  depends = %s\n" % ", ".join(deps)
    out += "}\n"
    return out


def _dump_source(source):
    out = source.path.replace("\\", "/")
    if source.options is not None:
        out += "\t{ AdditionalOptions = %s }" % source.options
    return out

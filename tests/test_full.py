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
Tests running the whole conversion on the sample solutions under
tests/projects, each of which has the expected outputs stored next to it in
files with ``.expected`` extension.
"""

import os, os.path
import logging
import shutil
import pytest
from glob import glob

import slnconv.io
from slnconv.converter import Converter
from slnconv.error import ParserError
from slnconv.parser import parse_solution_file
from slnconv.tool import main

projects_dir = os.path.join(os.path.dirname(__file__), "projects")


def solution_filenames():
    """
    This function returns the list of all .sln files under tests/projects
    directory.
    """
    return sorted(str(f) for f in glob("%s/*/*.sln" % projects_dir))


def expected_outputs(solution_file):
    """Yields (format, expected output file) pairs for the solution."""
    import slnconv.plugins
    from slnconv.api import Formatter
    d = os.path.dirname(solution_file)
    for fmt in Formatter.all():
        expected = os.path.join(d, fmt.default_filename + ".expected")
        if os.path.isfile(expected):
            yield fmt.name, expected


@pytest.fixture
def solution_copy(tmpdir):
    """Copy of the demo solution the tests may write into."""
    dest = tmpdir.join("demo")
    shutil.copytree(os.path.join(projects_dir, "demo"), str(dest))
    return dest


@pytest.mark.parametrize('solution_file', solution_filenames())
def test_full(tmpdir, solution_file):
    """
    Fully tests the conversion and compares the results with the expected
    outputs.
    """
    outputs = list(expected_outputs(solution_file))
    assert outputs, "no expected outputs for %s" % solution_file

    for fmt, expected_file in outputs:
        out = tmpdir.join(os.path.basename(expected_file)[:-len(".expected")])
        conv = Converter(fmt, output=str(out))
        conv.process_file(solution_file)

        with open(expected_file, "rt") as f:
            expected = f.read()
        assert out.read() == expected


def test_unknown_project_is_reported(caplog):
    conv = Converter("cmake")
    sln = os.path.join(projects_dir, "demo", "demo.sln")
    conv.assemble(parse_solution_file(sln), slnconv.io.FileLoader(os.path.dirname(sln)))
    text = conv.render()
    assert "Codegen" not in text
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) >= 1
    assert 'project "Codegen" has unknown target type' in warnings[0].getMessage()
    assert warnings[0].pos.line == 13


def test_tool_writes_default_output(solution_copy):
    assert main([str(solution_copy.join("demo.sln"))]) == 0
    expected = solution_copy.join("CMakeLists.txt.expected").read()
    assert solution_copy.join("CMakeLists.txt").read() == expected


def test_tool_meson_format(solution_copy, tmpdir):
    out = tmpdir.join("meson.build")
    assert main(["-f", "meson", "-o", str(out), str(solution_copy.join("demo.sln"))]) == 0
    assert out.read() == solution_copy.join("meson.build.expected").read()


def test_tool_dry_run(solution_copy):
    assert main(["--dry-run", str(solution_copy.join("demo.sln"))]) == 0
    assert not solution_copy.join("CMakeLists.txt").check()


def test_tool_dump_model(solution_copy, capsys):
    assert main(["--dump-model", str(solution_copy.join("demo.sln"))]) == 0
    out = capsys.readouterr().out
    assert out.startswith("solution demo {\n")
    assert "  project App {\n    depends = Core\n" in out
    assert "        src/window.cpp\t{ AdditionalOptions = /W4 %(AdditionalOptions) }\n" in out
    assert not solution_copy.join("CMakeLists.txt").check()


def test_tool_missing_project(solution_copy):
    solution_copy.join("Core", "Core.vcxproj").remove()
    assert main([str(solution_copy.join("demo.sln"))]) == 1
    assert not solution_copy.join("CMakeLists.txt").check()


def test_tool_missing_solution(tmpdir):
    assert main([str(tmpdir.join("nope.sln"))]) == 1


def test_undecodable_solution(tmpdir):
    sln = tmpdir.join("bad.sln")
    sln.write_binary(b'Project("{K}") = "Caf\xe9", "a.vcxproj", "{A}"\nEndProject\n')
    with pytest.raises(ParserError) as exc:
        parse_solution_file(str(sln))
    assert exc.value.pos.filename == str(sln)
    assert "cannot decode" in exc.value.msg
    assert main([str(sln), "--dry-run"]) == 1


def test_tool_undecodable_project(solution_copy):
    solution_copy.join("Core", "Core.vcxproj").write_binary(b"<Project>\n  <Caf\xe9 />\n</Project>\n")
    assert main([str(solution_copy.join("demo.sln"))]) == 1
    assert not solution_copy.join("CMakeLists.txt").check()


def test_tool_unknown_format(solution_copy):
    assert main(["-f", "ninja", str(solution_copy.join("demo.sln"))]) == 1


def test_tool_bad_usage():
    assert main([]) == 3
    assert main(["--diff-only", "--force", "x.sln"]) == 3

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
Tests of the project manifest parser.
"""

import logging

import pytest

from slnconv.error import MalformedConfigLine, MalformedSectionLine
from slnconv.model import (SourceEntry, TARGET_EXECUTABLE, TARGET_LIBRARY,
                           TARGET_UNKNOWN, LIBRARY_STATIC, LIBRARY_SHARED)
from slnconv.parser import parse_project

SAMPLE = """<?xml version="1.0" encoding="utf-8"?>
<Project DefaultTargets="Build" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <ItemGroup Label="ProjectConfigurations">
    <ProjectConfiguration Include="Debug|Win32">
      <Configuration>Debug</Configuration>
      <Platform>Win32</Platform>
    </ProjectConfiguration>
  </ItemGroup>
  <PropertyGroup Label="Globals">
    <ProjectGuid>{11111111-1111-1111-1111-111111111111}</ProjectGuid>
  </PropertyGroup>
  <PropertyGroup Condition="'$(Configuration)|$(Platform)'=='Debug|Win32'" Label="Configuration">
    <ConfigurationType>Application</ConfigurationType>
    <UseDebugLibraries>true</UseDebugLibraries>
  </PropertyGroup>
  <PropertyGroup Label="UserMacros" />
  <ItemDefinitionGroup Condition="'$(Configuration)|$(Platform)'=='Debug|Win32'">
    <Configuration>Debug</Configuration>
    <ClCompile>
      <WarningLevel>Level3</WarningLevel>
      <AdditionalOptions>/utf-8 %(AdditionalOptions)</AdditionalOptions>
    </ClCompile>
  </ItemDefinitionGroup>
  <ItemGroup>
    <ClCompile Include="main.cpp" />
    <ClCompile Include="source1.cpp">
      <AdditionalOptions>/std:c++20</AdditionalOptions>
    </ClCompile>
    <ClCompile Include="util\\strings.cpp">
      <PrecompiledHeader>NotUsing</PrecompiledHeader>
    </ClCompile>
    <ClInclude Include="main.h" />
  </ItemGroup>
</Project>
"""


def _project(type_line="", body=""):
    return ('<Project>\n'
            '  <PropertyGroup>\n'
            '%s'
            '  </PropertyGroup>\n'
            '%s'
            '</Project>\n') % (type_line, body)


def test_source_with_additional_options():
    prj = parse_project('<ItemGroup>\n'
                        '  <ClCompile Include="source1.cpp">\n'
                        '    <AdditionalOptions>/std:c++20</AdditionalOptions>\n'
                        '  </ClCompile>\n'
                        '</ItemGroup>\n')
    assert list(prj.sources.values()) == [SourceEntry("source1.cpp", "/std:c++20")]


def test_full_project():
    prj = parse_project(SAMPLE, "App.vcxproj")

    assert prj.target_type == TARGET_EXECUTABLE
    assert prj.configuration_type == "Application"
    assert prj.library_kind is None
    assert prj.configurations == {"Debug|Win32": "Debug"}

    assert list(prj.sources.values()) == [
        SourceEntry("main.cpp", None),
        SourceEntry("source1.cpp", "/std:c++20"),
        SourceEntry(r"util\strings.cpp", None),
    ]


def test_per_configuration_properties():
    prj = parse_project(SAMPLE, "App.vcxproj")
    assert prj.get_property("UseDebugLibraries", "Debug|Win32") == "true"
    assert prj.get_property("ClCompile.WarningLevel", "Debug|Win32") == "Level3"
    assert prj.get_property("ClCompile.AdditionalOptions", "Debug|Win32") == "/utf-8 %(AdditionalOptions)"
    assert prj.get_property("ProjectGuid") == "{11111111-1111-1111-1111-111111111111}"
    assert prj.get_property("WarningLevel", "Debug|Win32") is None
    assert prj.get_property("ConfigurationType", "Release|x64") is None


@pytest.mark.parametrize("value, target_type, library_kind", [
    ("Application",    TARGET_EXECUTABLE, None),
    ("StaticLibrary",  TARGET_LIBRARY,    LIBRARY_STATIC),
    ("DynamicLibrary", TARGET_LIBRARY,    LIBRARY_SHARED),
    ("Utility",        TARGET_UNKNOWN,    None),
])
def test_target_type(value, target_type, library_kind):
    prj = parse_project(_project("    <ConfigurationType>%s</ConfigurationType>\n" % value))
    assert prj.target_type == target_type
    assert prj.library_kind == library_kind


def test_missing_configuration_type():
    prj = parse_project(_project())
    assert prj.target_type == TARGET_UNKNOWN
    assert prj.configuration_type is None


def test_conflicting_configuration_type(caplog):
    prj = parse_project(_project("    <ConfigurationType>StaticLibrary</ConfigurationType>\n",
                                 '  <PropertyGroup Condition="\'$(Configuration)\'==\'Release\'">\n'
                                 '    <ConfigurationType>DynamicLibrary</ConfigurationType>\n'
                                 '  </PropertyGroup>\n'),
                        "Lib.vcxproj")
    assert prj.configuration_type == "StaticLibrary"
    assert prj.library_kind == LIBRARY_STATIC
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert 'ignoring ConfigurationType "DynamicLibrary"' in warnings[0].getMessage()
    assert warnings[0].pos.line == 6


def test_duplicate_sources_last_wins():
    prj = parse_project('<ItemGroup>\n'
                        '  <ClCompile Include="a.cpp">\n'
                        '    <AdditionalOptions>/O1</AdditionalOptions>\n'
                        '  </ClCompile>\n'
                        '  <ClCompile Include="b.cpp" />\n'
                        '  <ClCompile Include="a.cpp">\n'
                        '    <AdditionalOptions>/O2</AdditionalOptions>\n'
                        '  </ClCompile>\n'
                        '</ItemGroup>\n')
    assert list(prj.sources.values()) == [SourceEntry("a.cpp", "/O2"), SourceEntry("b.cpp")]


def test_only_first_additional_options_is_used():
    prj = parse_project('<ClCompile Include="a.cpp">\n'
                        '  <AdditionalOptions Condition="\'$(Configuration)\'==\'Debug\'">/Od</AdditionalOptions>\n'
                        '  <AdditionalOptions Condition="\'$(Configuration)\'==\'Release\'">/O2</AdditionalOptions>\n'
                        '</ClCompile>\n')
    assert prj.sources["a.cpp"].options == "/Od"


def test_configurations_keyed_by_block_condition():
    prj = parse_project('<ItemDefinitionGroup Condition="\'$(Configuration)|$(Platform)\'==\'Release|x64\'">\n'
                        '  <Configuration>Release</Configuration>\n'
                        '</ItemDefinitionGroup>\n'
                        '<ItemDefinitionGroup Condition="\'$(Configuration)|$(Platform)\'==\'Debug|x64\'">\n'
                        '  <Configuration>Debug</Configuration>\n'
                        '</ItemDefinitionGroup>\n')
    assert list(prj.configurations.items()) == [("Release|x64", "Release"), ("Debug|x64", "Debug")]


def test_configuration_without_condition():
    with pytest.raises(MalformedConfigLine) as exc:
        parse_project('<ItemDefinitionGroup>\n'
                      '  <Configuration>Debug</Configuration>\n'
                      '</ItemDefinitionGroup>\n', "x.vcxproj")
    assert exc.value.pos.line == 2
    assert exc.value.pos.filename == "x.vcxproj"


def test_unterminated_configuration():
    with pytest.raises(MalformedConfigLine) as exc:
        parse_project('<ItemDefinitionGroup Condition="\'$(Configuration)\'==\'Debug\'">\n'
                      '  <Configuration>Debug\n'
                      '</ItemDefinitionGroup>\n')
    assert exc.value.pos.line == 2


def test_unterminated_condition():
    with pytest.raises(MalformedConfigLine) as exc:
        parse_project('<ItemDefinitionGroup Condition="\'$(Configuration)\n'
                      '  <Configuration>Debug</Configuration>\n'
                      '</ItemDefinitionGroup>\n')
    assert exc.value.pos.line == 1


def test_unterminated_block():
    with pytest.raises(MalformedSectionLine) as exc:
        parse_project('<Project>\n'
                      '  <ItemDefinitionGroup Condition="\'$(Configuration)\'==\'Debug\'">\n'
                      '    <Configuration>Debug</Configuration>\n'
                      '</Project>\n')
    assert exc.value.pos.line == 2


def test_missing_clcompile_end():
    with pytest.raises(MalformedSectionLine) as exc:
        parse_project('<ItemGroup>\n'
                      '  <ClCompile Include="a.cpp">\n'
                      '    <AdditionalOptions>/O2</AdditionalOptions>\n'
                      '</ItemGroup>\n')
    assert exc.value.pos.line == 2


def test_unterminated_include():
    with pytest.raises(MalformedSectionLine) as exc:
        parse_project('<ItemGroup>\n'
                      '  <ClCompile Include="a.cpp />\n'
                      '</ItemGroup>\n')
    assert exc.value.pos.line == 2


def test_parsing_is_deterministic():
    assert parse_project(SAMPLE, "App.vcxproj") == parse_project(SAMPLE, "App.vcxproj")

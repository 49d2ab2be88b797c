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
Line-level helpers shared by the solution and project parsers.

Both manifest formats are handled line by line: each line is classified by
matching it against a small set of marker patterns and its fields are taken
from the patterns' named groups. Nothing here does index arithmetic on the raw
text, so a line of unexpected shape simply doesn't match.
"""

import re

UNICODE_BOM = "\ufeff"

# --- solution manifest markers ---

SLN_SIGNATURE       = re.compile(r'^\s*Microsoft Visual Studio Solution File\b')
COMMENT             = re.compile(r'^\s*#')
HEADER_VAR          = re.compile(r'^\s*(?P<name>[A-Za-z][\w.]*)\s*=\s*(?P<value>.*?)\s*$')
PROJECT_DECL        = re.compile(r'^\s*Project\(')
END_PROJECT         = re.compile(r'^\s*EndProject\s*$')
PROJECT_SECTION     = re.compile(r'^\s*ProjectSection\((?P<name>[^)]*)\)\s*(?:=\s*(?P<phase>\w+))?\s*$')
END_PROJECT_SECTION = re.compile(r'^\s*EndProjectSection\s*$')
GLOBAL              = re.compile(r'^\s*Global\s*$')
END_GLOBAL          = re.compile(r'^\s*EndGlobal\s*$')
GLOBAL_SECTION      = re.compile(r'^\s*GlobalSection\((?P<name>[^)]*)\)\s*(?:=\s*(?P<phase>\w+))?\s*$')
END_GLOBAL_SECTION  = re.compile(r'^\s*EndGlobalSection\s*$')

# {GUID}.Debug|Win32.ActiveCfg = Debug|Win32
CONFIG_LINE         = re.compile(r'^\s*(?P<identifier>[^.\s=]+)\.(?P<key>[^=]+?)\s*=\s*(?P<value>.*?)\s*$')
# Debug|Win32 = Debug|Win32
ASSIGNMENT_LINE     = re.compile(r'^\s*(?P<key>[^=]+?)\s*=\s*(?P<value>.*?)\s*$')
# {GUID} = {GUID}, optionally followed by [tag]
DEPENDENCY_LINE     = re.compile(r'^\s*(?P<key>[^=\[\]]+?)\s*=\s*(?P<value>[^=\[\]]+?)\s*'
                                 r'(?:\[(?P<tag>[^\[\]]*)\])?\s*$')

# --- project manifest markers ---

ITEM_DEFINITION_GROUP = ("<ItemDefinitionGroup", "</ItemDefinitionGroup")
PROPERTY_GROUP        = ("<PropertyGroup", "</PropertyGroup")

CONDITION_START   = re.compile(r'\bCondition="')
CONDITION         = re.compile(r'\bCondition="(?P<condition>[^"]*)"')
# '$(Configuration)|$(Platform)'=='Debug|Win32'
CONDITION_COMPARE = re.compile(r"^\s*'[^']*'\s*==\s*'(?P<value>[^']*)'\s*$")
CONFIGURATION_START = re.compile(r'<Configuration>')
CONFIGURATION     = re.compile(r'<Configuration>(?P<value>[^<]*)</Configuration>')
PROPERTY          = re.compile(r'^\s*<(?P<name>[A-Za-z_][\w.]*)(?:\s[^>]*)?>(?P<value>[^<]*)</(?P=name)>\s*$')
ELEMENT_OPEN      = re.compile(r'^\s*<(?P<name>[A-Za-z_][\w.]*)(?:\s[^>]*)?(?<!/)>\s*$')
ELEMENT_CLOSE     = re.compile(r'^\s*</(?P<name>[A-Za-z_][\w.]*)>\s*$')
SELF_CLOSING      = re.compile(r'/>\s*$')

CLCOMPILE_OPEN    = re.compile(r'<ClCompile(?=[\s>/]|$)')
CLCOMPILE_CLOSE   = "</ClCompile"
INCLUDE_START     = re.compile(r'\bInclude="')
INCLUDE           = re.compile(r'\bInclude="(?P<path>[^"]*)"')
ADDITIONAL_OPTIONS = re.compile(r'<AdditionalOptions(?:\s[^>]*)?>(?P<options>.*?)</AdditionalOptions>')


class Position(object):
    """
    Location of an error in input file.

    All of its attributes are optional and may be None. Convert the object
    to string to get human-readable output.

    .. attribute:: filename

       Name of the source file.

    .. attribute:: line

       Line number, starting at 1.
    """
    def __init__(self, filename=None, line=None):
        self.filename = filename
        self.line = line

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return (self.filename == other.filename and
                self.line == other.line)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.filename, self.line))

    def __bool__(self):
        return bool(self.filename) or self.line is not None

    def __repr__(self):
        return "Position(%r, %r)" % (self.filename, self.line)

    def __str__(self):
        hdr = []
        if self.filename:
            hdr.append(self.filename)
        if self.line is not None:
            hdr.append(str(self.line))
        return ":".join(hdr)


class Line(object):
    """
    One line of input together with its 1-based line number.
    """
    def __init__(self, number, text, filename=None):
        self.number = number
        self.text = text
        self.filename = filename

    @property
    def pos(self):
        return Position(self.filename, self.number)

    def is_blank(self):
        return not self.text.strip()

    def contains(self, marker):
        return marker in self.text

    def match(self, pattern):
        return pattern.match(self.text)

    def search(self, pattern):
        return pattern.search(self.text)

    def __str__(self):
        return self.text


class LineStream(object):
    """
    Forward-only cursor over the lines of a manifest. Parsing passes consume
    lines from it in order; there is no way to go back.
    """
    def __init__(self, text, filename=None):
        if text.startswith(UNICODE_BOM):
            text = text[len(UNICODE_BOM):]
        self.filename = filename
        self.lines = [Line(n, t, filename)
                      for n, t in enumerate(text.splitlines(), start=1)]
        self.index = 0

    def at_end(self):
        return self.index >= len(self.lines)

    def peek(self):
        """Returns the next line without consuming it, or None at the end."""
        if self.at_end():
            return None
        return self.lines[self.index]

    def next(self):
        """Consumes and returns the next line, or None at the end."""
        line = self.peek()
        if line is not None:
            self.index += 1
        return line

    def next_nonblank(self):
        while True:
            line = self.next()
            if line is None or not line.is_blank():
                return line

    def __iter__(self):
        while not self.at_end():
            yield self.next()

    @property
    def end_pos(self):
        return Position(self.filename, len(self.lines))


def quoted_fields(text):
    """
    Returns list of strings found between successive pairs of double quotes
    on the line. An unpaired trailing quote is ignored.

    >>> quoted_fields('Project("{A}") = "Name", "x.vcxproj", "{B}"')
    ['{A}', 'Name', 'x.vcxproj', '{B}']
    """
    parts = text.split('"')
    # pieces at odd indexes are inside quotes; drop an unterminated last one
    if len(parts) % 2 == 0:
        parts = parts[:-1]
    return parts[1::2]


def outer_quoted(text):
    """
    Returns the text strictly between the first and the last double quote on
    the line, or None if there are fewer than two quotes.
    """
    first = text.find('"')
    last = text.rfind('"')
    if first == -1 or first == last:
        return None
    return text[first + 1:last]

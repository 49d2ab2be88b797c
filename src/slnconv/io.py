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
Helpers for slnconv I/O: reading project manifests referenced by a solution
and writing the generated build description only when it changed.
"""

import os
import os.path
import sys
from difflib import unified_diff

import logging
logger = logging.getLogger("slnconv.io")


# Set to true to prevent any output from being written
dry_run = False

# Set to true to show diff with the existing file instead of updating it
diff_only = False

# Set to true to force writing of output files, even if they exist and would be
# unchanged. In other words, always touch output files.
force_output = False

# Number of created files
num_created = 0
# Number of modified files
num_modified = 0

EOL_WINDOWS = "win"
EOL_UNIX    = "unix"


class FileLoader(object):
    """
    Loader of project manifests from the filesystem, for use with
    :func:`slnconv.assembler.assemble`.

    Paths are interpreted relative to *basedir* (normally the directory of the
    solution) and may use either kind of slashes; solution files written on
    Windows use backslashes. Raises :exc:`IOError` if the file can't be read.
    """
    def __init__(self, basedir=None, charset="utf-8-sig"):
        self.basedir = basedir or os.curdir
        self.charset = charset

    def native_path(self, path):
        path = path.replace("\\", os.sep).replace("/", os.sep)
        return os.path.normpath(os.path.join(self.basedir, path))

    def __call__(self, path):
        filename = self.native_path(path)
        logger.debug("loading %s", filename)
        with open(filename, "rt", encoding=self.charset) as f:
            return f.read()


class OutputFile(object):
    """
    File to be written by slnconv.

    Example usage:

    ::

      f = io.OutputFile("CMakeLists.txt", io.EOL_UNIX)
      f.write(body)
      f.commit()

    Notice the need to explicitly call commit().
    """
    def __init__(self, filename, eol=EOL_UNIX, charset="utf-8"):
        """
        Creates output file.

        :param filename: Name of the output file. Should be either relative
                         to CWD or absolute; the latter is recommended.
        :param eol:      Line endings to use. One of EOL_WINDOWS and EOL_UNIX.
        :param charset:  Charset the text is encoded with.
        """
        self.filename = filename
        self.eol = eol
        self.charset = charset
        self.text = ""

    def write(self, text):
        """
        Appends text to the output. Note that the changes don't take effect
        until you call commit().
        """
        self.text += text

    def _encoded(self):
        text = self.text
        if self.eol == EOL_WINDOWS:
            text = text.replace("\n", "\r\n")
        return text.encode(self.charset)

    def commit(self):
        """
        Writes the file to disk, unless it already has the same content.
        Returns status character: ``A`` for added, ``U`` for updated, ``.``
        for unchanged and ``D`` when only a diff was shown.
        """
        data = self._encoded()
        try:
            rel_fn = os.path.relpath(self.filename)
        except ValueError:
            # This can happen under Windows if the filename is on a different
            # drive from the current directory.
            rel_fn = self.filename

        if not force_output:
            try:
                with open(self.filename, "rb") as f:
                    old = f.read()
            except IOError:
                old = None
            if old == data:
                status = "."
                logger.info("%s\t%s", status, rel_fn)
                return status
            if diff_only:
                old_lines = old.decode(self.charset, "replace").splitlines(True) if old is not None else []
                for line in unified_diff(old_lines,
                                         data.decode(self.charset).splitlines(True),
                                         os.path.normpath(os.path.join("old", self.filename)),
                                         os.path.normpath(os.path.join("new", self.filename))):
                    sys.stdout.write(line)
                return "D"
        else:
            old = None if not os.path.exists(self.filename) else b""

        global num_created, num_modified
        if old is None:
            status = "A"
            num_created += 1
        else:
            status = "U"
            num_modified += 1

        logger.info("%s\t%s", status, rel_fn)

        if dry_run:
            return status # nothing to do, just pretending to write output

        dirname = os.path.dirname(self.filename)
        if dirname and not os.path.isdir(dirname):
            os.makedirs(dirname)
        with open(self.filename, "wb") as f:
            f.write(data)
        return status

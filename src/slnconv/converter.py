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
This module contains the driver of slnconv, :class:`Converter`, which runs
all steps needed to turn a solution file into a build description.
"""

import os.path
import logging

from slnconv.api import Formatter, format_statements
from slnconv.assembler import assemble
from slnconv.generator import generate
from slnconv.io import FileLoader, OutputFile, EOL_UNIX
from slnconv.parser import parse_solution_file

logger = logging.getLogger("slnconv.converter")


class Converter(object):
    """
    The converter is responsible for doing everything necessary to translate
    a solution with its projects into the chosen build description format.

    :class:`Converter` provides both high-level interface for single-call
    usage (see :meth:`process_file`) and methods for the individual steps,
    which is what the test suite uses.

    .. attribute:: formatter

       :class:`slnconv.api.Formatter` used for output.

    .. attribute:: output

       Name of the output file. If :const:`None`, the formatter's default
       filename in the solution's directory is used.

    .. attribute:: solution

       Parsed :class:`slnconv.model.SolutionRecord`, once available.

    .. attribute:: assembled

       :class:`slnconv.model.AssembledSolution`, once available.
    """

    def __init__(self, format="cmake", output=None):
        self.formatter = Formatter.get_by_name(format)
        self.output = output
        self.solution = None
        self.assembled = None


    def process(self, solution, loader, outdir=None):
        """
        Converts already parsed solution and writes the output.

        :param solution: :class:`slnconv.model.SolutionRecord`.
        :param loader:   Callable returning project manifest text for a path,
                         see :func:`slnconv.assembler.assemble`.
        :param outdir:   Directory to put the output into if :attr:`output`
                         isn't set.
        """
        self.assemble(solution, loader)
        self.generate(self.output_filename(outdir))


    def assemble(self, solution, loader):
        """
        Loads projects of *solution* and sets :attr:`solution` and
        :attr:`assembled`.
        """
        self.solution = solution
        self.assembled = assemble(solution, loader)
        return self.assembled


    def process_file(self, filename):
        """
        Like :meth:`process()`, but reads the solution from *filename* and
        loads the projects from the filesystem, relative to it.
        """
        logger.info("processing %s", filename)
        basedir = os.path.dirname(os.path.abspath(filename))
        self.process(parse_solution_file(filename), FileLoader(basedir), basedir)


    def output_filename(self, outdir=None):
        if self.output:
            return self.output
        return os.path.join(outdir or os.curdir, self.formatter.default_filename)


    def statements(self):
        """Returns build statements for the assembled solution."""
        return generate(self.assembled)


    def render(self):
        """Returns the text of the build description."""
        return format_statements(self.formatter, self.assembled, self.statements())


    def generate(self, filename):
        """
        Writes the build description into *filename*.
        """
        logger.debug("generating %s output into %s", self.formatter.name, filename)
        f = OutputFile(filename, EOL_UNIX)
        f.write(self.render())
        f.commit()

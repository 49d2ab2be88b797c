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
Command line interface: ``slnconv [options] solution.sln``.
"""

import sys
import logging
from optparse import OptionParser, OptionGroup
from time import time

import colorama
from clint.textui import colored


class SlnconvFormatter(logging.Formatter):

    def __init__(self):
        logging.Formatter.__init__(self, fmt=logging.BASIC_FORMAT)
        self.format_warning = colored.yellow
        self.format_error = colored.red

    def format(self, record):
        level = record.levelno
        if level == logging.ERROR or level == logging.WARNING or level == logging.INFO:
            msg = ""
            if hasattr(record, "pos") and record.pos:
                msg = "%s: " % record.pos
            if level != logging.INFO:
                msg += "%s: " % record.levelname.lower()
            msg += record.getMessage()
            if level == logging.ERROR:
                msg = str(self.format_error(msg))
            elif level == logging.WARNING:
                msg = str(self.format_warning(msg))
            return msg
        else:
            return logging.Formatter.format(self, record)


logger = logging.getLogger()


class SlnconvOptionParser(OptionParser):
    def get_version(self):
        import slnconv.version
        return "slnconv %s" % slnconv.version.get_version()


def make_parser():
    # output formats get registered by importing the plugins
    import slnconv.plugins
    from slnconv.api import Formatter
    parser = SlnconvOptionParser(usage="%prog [options] solution.sln",
                                 version="slnconv")
    parser.add_option(
            "-f", "--format",
            action="store", dest="format", default="cmake",
            metavar="FORMAT",
            help="output format, one of: %s (default: %%default)" % ", ".join(Formatter.all_names()))
    parser.add_option(
            "-o", "--output",
            action="store", dest="output", default=None,
            metavar="FILE",
            help="write output to FILE instead of the format's default file next to the solution")
    parser.add_option(
            "-v", "--verbose",
            action="store_true", dest="verbose", default=False,
            help="show verbose output")
    parser.add_option(
            "", "--dry-run",
            action="store_true", dest="dry_run", default=False,
            help="don't write any files, just pretend to do it")
    parser.add_option(
            "", "--diff-only",
            action="store_true", dest="diff_only", default=False,
            help="only output diffs instead of modifying the files, implies --dry-run")
    parser.add_option(
            "", "--force",
            action="store_true", dest="force", default=False,
            help="touch output files even if they're unchanged")

    debug_group = OptionGroup(parser, "Debug Options")
    debug_group.add_option(
            "", "--debug",
            action="store_true", dest="debug", default=False,
            help="show debug log")
    debug_group.add_option(
            "", "--dump-model",
            action="store_true", dest="dump", default=False,
            help="dump solution's model to stdout instead of generating output")
    parser.add_option_group(debug_group)
    return parser


def setup_logging(log_level):
    # This is needed to initialize colored output on Windows.
    colorama.init()
    if not any(isinstance(h.formatter, SlnconvFormatter) for h in logger.handlers):
        log_handler = logging.StreamHandler()
        log_handler.setFormatter(SlnconvFormatter())
        logger.addHandler(log_handler)
    logger.setLevel(log_level)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = make_parser()
    options, args = parser.parse_args(argv)

    if len(args) != 1:
        sys.stderr.write("incorrect number of arguments, exactly 1 .sln required\n")
        return 3

    if options.diff_only and options.force:
        sys.stderr.write("--diff-only and --force option can't be used together\n")
        return 3

    if options.debug:
        log_level = logging.DEBUG
    elif options.verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    setup_logging(log_level)

    import slnconv.error
    import slnconv.io
    from slnconv.converter import Converter
    from slnconv.dumper import DumpingConverter

    try:
        start_time = time()
        slnconv.io.dry_run = options.dry_run or options.diff_only
        slnconv.io.diff_only = options.diff_only
        slnconv.io.force_output = options.force
        if options.dump:
            conv = DumpingConverter(options.format, options.output)
        else:
            conv = Converter(options.format, options.output)
        conv.process_file(args[0])
        logger.info("created files: %d, updated files: %d (time: %.1fs)",
                    slnconv.io.num_created, slnconv.io.num_modified, time() - start_time)

    except KeyboardInterrupt:
        if options.debug:
            raise
        else:
            return 2
    except IOError as e:
        if options.debug:
            raise
        else:
            logging.error(e)
            return 1
    except slnconv.error.Error as e:
        if options.debug:
            raise
        else:
            logging.error(e.msg, extra={"pos":e.pos})
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

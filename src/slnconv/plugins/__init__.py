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
Output formats shipped with slnconv. Every module in this package is imported
when the package is, so that the :class:`slnconv.api.Formatter` extensions it
defines get registered.
"""

import sys
import logging
__logger = logging.getLogger("slnconv.plugins")


def __find_all_plugins():
    """
    Finds all slnconv plugins and yields their module names.
    """
    import pkgutil
    for _, name, _ in pkgutil.walk_packages(__path__):
        yield name


# import all plugins:
__all__ = list(__find_all_plugins())
from . import *
assert __all__, "No plugins found - broken slnconv installation?"

__logger.debug("loaded plugins:")
for p in __all__:
    m = sys.modules["slnconv.plugins.%s" % p]
    __logger.debug("    %-25s (from %s)", m.__name__, m.__file__)

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
Extension points of slnconv. Output formats are implemented as
:class:`Formatter` extensions living in :mod:`slnconv.plugins`.
"""

from abc import ABCMeta, abstractmethod

from slnconv import error


# Metaclass used for all extensions in order to implement automatic
# extensions registration. For internal use only.
class _ExtensionMetaclass(ABCMeta):
    def __init__(cls, name, bases, dct):
        super(_ExtensionMetaclass, cls).__init__(name, bases, dct)

        if len(bases) > 1:
            assert bases[0] is Extension, "multiple inheritance only supported if first base class is Extension"

        # skip base classes, only register implementations:
        if name == "Extension":
            return
        if cls.__base__ is Extension:
            # initialize list of implementations for direct extensions:
            cls._implementations = {}
            return

        if cls.name is None:
            # This must be a helper class derived from a particular extension,
            # but not a fully implemented extension.
            return

        # for "normal" implementations of extensions, find the extension
        # type class (we need to handle the case of deriving from an existing
        # extension):
        base = cls.__base__
        while not base.__base__ is Extension:
            base = base.__base__
        if cls.name in base._implementations:
            existing = base._implementations[cls.name]
            raise RuntimeError("conflicting implementations for %s \"%s\": %s.%s and %s.%s" %
                               (base.__name__,
                                cls.name,
                                cls.__module__, cls.__name__,
                                existing.__module__, existing.__name__))
        base._implementations[cls.name] = cls



# instances of all already requested extensions, keyed by (type,name)
_extension_instances = {}


class Extension(metaclass=_ExtensionMetaclass):
    """
    Base class for all slnconv extensions.

    Extensions are singletons, there's always only one instance of given
    extension at runtime. Use the get() method called on appropriate extension
    type to obtain it. For example:

        cmake = Formatter.get("cmake")
        # ...do something with it...

    .. attribute:: name

       User-visible name of the extension. For output formats, this is what is
       given to the ``--format`` option.
    """

    @classmethod
    def get(cls, name=None):
        """
        This class method is used to get an instance of an extension. In can
        be used in one of two ways:

        1. When called on an extension type class with *name* argument, it
           returns instance of extension with given name and of the extension
           type on which this classmethod was called:

           >>> slnconv.api.Formatter.get("cmake")
               <slnconv.plugins.cmake.CMakeFormatter object at 0x2232950>

        2. When called without the *name* argument, it must be called on
           particular extension class and returns its (singleton) instance:

           >>> CMakeFormatter.get()
               <slnconv.plugins.cmake.CMakeFormatter object at 0x2232950>

        :param name: Name of the extension to read; this corresponds to
            class' "name" attribute. If not specified, then get() must be
            called on a extension, not extension base class.
        """
        if name is None:
            assert cls.name is not None, \
                   "get() can only be called on fully implemented extension"
            name = cls.name
            # find the extension base class:
            while not cls.__base__ is Extension:
                cls = cls.__base__
        else:
            assert cls.name is None, \
                   "get(name) can only be called on extension base class"

        key = (cls, name)
        if key not in _extension_instances:
            _extension_instances[key] = cls._implementations[name]()
        return _extension_instances[key]

    @classmethod
    def all(cls):
        """
        Returns iterator over instances of all implementations of this extension
        type.
        """
        for name in cls.all_names():
            yield cls.get(name)

    @classmethod
    def all_names(cls):
        """
        Returns names of all implementations of this extension type.
        """
        return sorted(cls._implementations.keys())

    name = None
    _implementations = {}


class Formatter(Extension):
    """
    Output format of the generated build description.

    The formatter turns :class:`slnconv.model.BuildStatement` objects into the
    syntax of a particular build tool. Only the statement-level syntax is its
    business; the statements themselves come from
    :func:`slnconv.generator.generate`.
    """

    def __str__(self):
        return "format %s" % self.name

    #: Name of the file the output is written to by default, created in the
    #: solution's directory.
    default_filename = None

    def comment(self, text):
        """
        Returns given (possibly multi-line) string formatted as a comment.
        """
        return "\n".join("# %s" % s for s in text.split("\n"))

    @abstractmethod
    def header(self, name):
        """
        Returns text put before all targets, e.g. project declaration.

        :param name: Name of the solution.
        """
        raise NotImplementedError

    @abstractmethod
    def target(self, statement):
        """
        Returns text declaring one target, possibly spanning several lines.

        :param statement: :class:`slnconv.model.BuildStatement` to format.
        """
        raise NotImplementedError

    @classmethod
    def get_by_name(cls, name):
        """
        Returns formatter called *name*.

        Throws :class:`slnconv.error.UnsupportedError` if there's no such
        output format.
        """
        import slnconv.plugins
        try:
            return cls.get(name)
        except KeyError:
            raise error.UnsupportedError('unknown output format "%s" (available: %s)' %
                                         (name, ", ".join(cls.all_names())))


def format_statements(formatter, solution, statements):
    """
    Returns complete output for *solution* (anything with ``name``, i.e.
    :class:`slnconv.model.SolutionRecord` or
    :class:`slnconv.model.AssembledSolution`) consisting of given statements
    formatted with *formatter*, as newline-joined directives ending with a
    newline.
    """
    parts = [formatter.header(solution.name)]
    parts += [formatter.target(s) for s in statements]
    # blocks are separated by a blank line
    return "\n\n".join(p.rstrip("\n") for p in parts if p) + "\n"

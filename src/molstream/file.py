# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molstream"
__author__ = "The molstream contributors"
__all__ = [
    "File",
    "TextFile",
    "InvalidFileError",
    "FormatMismatchError",
    "FormatUnsupportedError",
]

import abc
import copy
import io
from os import PathLike
from molstream.copyable import Copyable


class File(Copyable, metaclass=abc.ABCMeta):
    """
    Base class for all file classes.
    The constructor creates an empty file, that can be filled with data
    using the class specific setter methods.
    Conversely, the class method :func:`read()` reads a file from disk
    (or a file-like object from other sources).
    In order to write the instance content into a file the
    :func:`write()` method is used.
    """

    @classmethod
    @abc.abstractmethod
    def read(cls, file):
        """
        Parse a file (or file-like object).

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file : File
            An instance from the respective :class:`File` subclass
            representing the parsed file.
        """
        pass

    @abc.abstractmethod
    def write(self, file):
        """
        Write the contents of this :class:`File` object into a file.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        pass


class TextFile(File, metaclass=abc.ABCMeta):
    """
    Base class for all line based text files.
    When reading a file, the text content is saved as list of strings,
    one for each line.
    When writing a file, this list is written into the file.

    Attributes
    ----------
    lines : list
        List of string representing the lines in the text file.
        PROTECTED: Do not modify from outside.
    """

    def __init__(self):
        super().__init__()
        self.lines = []

    @classmethod
    def read(cls, file, *args, **kwargs):
        # File name
        if is_open_compatible(file):
            with open(file, "r") as f:
                lines = f.read().splitlines()
        # File object
        else:
            if not is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            lines = file.read().splitlines()
        file_object = cls(*args, **kwargs)
        file_object.lines = lines
        return file_object

    def write(self, file):
        """
        Write the contents of this object into a file
        (or file-like object).

        In contrast to most line based formats, no line break is
        appended after the last line, so that the file ends exactly
        with the last stored line.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        if is_open_compatible(file):
            with open(file, "w") as f:
                f.write("\n".join(self.lines))
        else:
            if not is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            file.write("\n".join(self.lines))

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone.lines = copy.copy(self.lines)

    def __str__(self):
        return "\n".join(self.lines)


class InvalidFileError(Exception):
    """
    Indicates that the file is not suitable for the requested action,
    either because the file does not contain the required data or
    because the file is malformed.
    """

    pass


class FormatMismatchError(InvalidFileError):
    """
    Indicates that the content of a file does not match the layout
    of the format it is parsed as, e.g. a required line is missing,
    a fixed-width field is not numeric or an element symbol is unknown.
    """

    pass


class FormatUnsupportedError(ValueError):
    """
    Indicates that a requested file format is not handled by the
    called function.
    """

    pass


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))

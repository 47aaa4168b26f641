# This source code is part of the molstream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "molstream"
__author__ = "The molstream contributors"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for all objects that can be deep-copied via
    :meth:`copy()`.

    A copy is made in two steps:
    :meth:`__copy_create__()` creates a fresh instance via the
    constructor, afterwards :meth:`__copy_fill__()` transfers the
    remaining state.
    Each subclass extends :meth:`__copy_fill__()` and calls the
    ``super()`` implementation first, so that state held by base
    classes is copied as well.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            An independent copy of this object.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new object of this class.

        Must be overridden, if the constructor requires parameters.

        Returns
        -------
        copy
            A freshly instantiated object of the same type as *self*.
        """
        return type(self)()

    def __copy_fill__(self, clone):
        """
        Copy the state of this object into `clone`.

        Parameters
        ----------
        clone
            The freshly instantiated copy of *self*.
        """
        pass

# -*- coding: utf-8 -*-
import os
import errno
import copy
import collections.abc


def mkdir_p(path):
    """ Creates directory (and parents) ; if exists does nothing """
    try:
        os.makedirs(path)
    except OSError as exc:
        if not (exc.errno == errno.EEXIST and os.path.isdir(path)):
            raise exc


class Protected_mapping(collections.abc.Mapping):
    def __init__(self, dic, key_func=None):
        """
A read-only dictionnary. Items are deep-copied on access, so that a caller
may modify the returned entry without altering the table.

Parameters
----------
dic : dict
    The wrapped dictionnary
key_func : callable | None
    If not None, keys are normalized through key_func before look-up
    (e.g. `fractalpaint.Algorithm_kind.from_str`)
"""
        self._dict = dic
        self._key_func = key_func

    def __getitem__(self, key):
        if self._key_func is not None:
            key = self._key_func(key)
        return copy.deepcopy(self._dict[key])

    def __contains__(self, key):
        if self._key_func is not None:
            try:
                key = self._key_func(key)
            except ValueError:
                return False
        return key in self._dict

    def __iter__(self):
        return iter(self._dict)

    def __len__(self):
        return len(self._dict)

    def __setitem__(self, key, value):
        raise RuntimeError("Attempt to modify a Protected_mapping")

    def __delitem__(self, key):
        raise RuntimeError("Attempt to modify a Protected_mapping")

"""Dynamic loader of libmagic using cFFI (ABI mode).

Module exports:
- lib - the dlopen-ed libmagic shared library,
- ffi - interface for manipulating C data in Python.

Raises ImportError when the shared library cannot be found or loaded.
"""

from cffi import FFI
from magikku.flags import Flags
from magikku.libmagic.cdef import make_cdef
from magikku.utils import get_library_path
import ctypes.util
import sys

__all__ = ["ffi", "lib"]


def _platform_lib_names():
    """Names of the shared library to try when it is not found on the path."""
    if sys.platform == "darwin":
        return ["libmagic.1.dylib", "libmagic.dylib"]
    if sys.platform == "win32":
        return ["libmagic-1.dll", "magic1.dll"]
    return ["libmagic.so.1", "libmagic.so"]


def _candidates():
    explicit = get_library_path()
    if explicit is not None:
        return [explicit]
    found = ctypes.util.find_library("magic")
    return ([found] if found else []) + _platform_lib_names()


def _load_libmagic():
    errors = []
    for candidate in _candidates():
        try:
            return ffi.dlopen(candidate)
        except OSError as e:
            errors.append(f"{candidate}: {e}")
    raise ImportError("Unable to load the libmagic shared library ("
                      + "; ".join(errors) + ")")


ffi = FFI()
ffi.cdef(make_cdef(Flags))
lib = _load_libmagic()

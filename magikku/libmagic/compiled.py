"""Module exports:
- lib - the compiled libmagic extension (contains callable references to the
  C functions declared in `cdef.h` and the MAGIC_* constants of <magic.h>),
- ffi - interface for manipulating C data in Python.

Raises ImportError when the extension was not built.
"""

from magikku import _libmagic

lib = _libmagic.lib
ffi = _libmagic.ffi

#!/usr/bin/env python3
"""
Builder of the compiled libmagic extension (cFFI API mode).
Used by setuptools through `cffi_modules`, can also be run manually.
"""
from cffi import FFI
import os
import runpy

location = os.path.dirname(os.path.abspath(__file__))

# The script is executed outside of the package, so the shared declarations
# and the flags are loaded directly from their files.
cdef = runpy.run_path(os.path.join(location, "cdef.py"))
flags = runpy.run_path(os.path.join(location, "..", "flags.py"))["Flags"]


def get_prefix_dirs():
    """
    Return include and library directories of a libmagic installation
    given by the `LIBMAGIC_PREFIX` environment variable (e.g. Homebrew).
    """
    prefix_var = "LIBMAGIC_PREFIX"
    if prefix_var not in os.environ:
        return [], []
    prefix = os.environ[prefix_var]
    return [f"{prefix}/include"], [f"{prefix}/lib"]


ffibuilder = FFI()
# Values of the flag constants are taken from <magic.h> by the compiler.
ffibuilder.cdef(cdef["make_cdef"](flags, from_header=True))

include_dirs, library_dirs = get_prefix_dirs()

ffibuilder.set_source(
    "magikku._libmagic", "#include <magic.h>",
    libraries=["magic"],
    include_dirs=include_dirs,
    library_dirs=library_dirs)

if __name__ == "__main__":
    ffibuilder.compile(verbose=True)

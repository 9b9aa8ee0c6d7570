"""
C declarations shared by the compiled and the dynamic libmagic bindings.
This module must not import anything from the magikku package since it is
also executed directly by the extension build script.
"""
import os

HEADER = os.path.join(os.path.dirname(os.path.abspath(__file__)), "cdef.h")


def get_c_declarations(header_filename=HEADER):
    """
    Extracts C declarations important for the cFFI module from the libmagic
    declarations header file.
    :param header_filename: Name of the header file
    """
    cdef_start = "// CFFI_DECLARATIONS_START\n"
    cdef_end = "// CFFI_DECLARATIONS_END\n"

    with open(header_filename, "r") as header_file:
        lines = header_file.readlines()
        start = lines.index(cdef_start) + 1
        end = lines.index(cdef_end)
        return "".join(lines[start:end])


def get_flag_declarations(flags, from_header):
    """
    Declarations of the MAGIC_* flag constants.
    :param flags: Flags enumeration to declare.
    :param from_header: Let the C compiler fill in the values from <magic.h>
        (API mode) instead of using the values of the enumeration (ABI mode).
    """
    return "".join(
        "#define {} {}\n".format(c_name,
                                 "..." if from_header else hex(value))
        for c_name, value in flags.c_names())


def make_cdef(flags, from_header=False):
    """Complete source for FFI.cdef()."""
    return get_c_declarations() + get_flag_declarations(flags, from_header)

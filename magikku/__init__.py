r"""File type identification using libmagic.

The magikku.Magic class provides a high level API to the libmagic library:

    >>> import magikku
    >>> with magikku.Magic() as m:
    ...     m.identify_buffer(b"\x01\x02\x03\x04")
    ...
    'data'

The implementation is either the compiled cFFI extension or the libmagic
shared library loaded at run time, depending on the installation. The name
of the binding in use is stored in `magikku.BINDING`.
"""
from magikku import binding
from magikku.convenience import (check_syntax_once, compile_once,
                                 default_database_path, identify_buffer_once,
                                 identify_file_once)
from magikku.errors import (ClosedHandleError, CompileError, DatabaseLoadError,
                            FlagError, InitializationError,
                            InvalidArgumentError, MagicError)
from magikku.flags import Flags
from magikku.magic import Magic

__version__ = "0.1.0"

BINDING = binding.ENGINE.name if binding.ENGINE is not None else None

__all__ = [
    "BINDING",
    "CompileError",
    "ClosedHandleError",
    "DatabaseLoadError",
    "FlagError",
    "Flags",
    "InitializationError",
    "InvalidArgumentError",
    "Magic",
    "MagicError",
    "check_syntax_once",
    "compile_once",
    "default_database_path",
    "identify_buffer_once",
    "identify_file_once",
]

"""Flags that can be passed to libmagic."""

from enum import IntFlag


class Flags(IntFlag):
    """
    Flags that can be passed when creating a Magic object or afterwards using
    Magic.flags. The values match the MAGIC_* constants of <magic.h> and are
    combined with '|'.
    """
    # No flags
    NONE = 0x000000
    # Turn on debugging
    DEBUG = 0x000001
    # Follow symlinks
    SYMLINK = 0x000002
    # Check inside compressed files
    COMPRESS = 0x000004
    # Look at the contents of devices
    DEVICES = 0x000008
    # Return the MIME type
    MIME_TYPE = 0x000010
    # Return all matches
    CONTINUE = 0x000020
    # Print warnings to stderr
    CHECK = 0x000040
    # Restore access time on exit
    PRESERVE_ATIME = 0x000080
    # Don't translate unprintable chars
    RAW = 0x000100
    # Handle ENOENT etc as real errors
    ERROR = 0x000200
    # Return the MIME encoding
    MIME_ENCODING = 0x000400
    # Alias for (MIME_TYPE | MIME_ENCODING)
    MIME = MIME_TYPE | MIME_ENCODING
    # Return the Apple creator and type
    APPLE = 0x000800
    # Don't check for compressed files
    NO_CHECK_COMPRESS = 0x001000
    # Don't check for tar files
    NO_CHECK_TAR = 0x002000
    # Don't check magic entries
    NO_CHECK_SOFT = 0x004000
    # Don't check application type
    NO_CHECK_APPTYPE = 0x008000
    # Don't check for elf details
    NO_CHECK_ELF = 0x010000
    # Don't check for text files
    NO_CHECK_TEXT = 0x020000
    # Don't check for cdf files
    NO_CHECK_CDF = 0x040000
    # Don't check tokens
    NO_CHECK_TOKENS = 0x100000
    # Don't check text encodings
    NO_CHECK_ENCODING = 0x200000
    # Alias for NO_CHECK_TEXT
    NO_CHECK_ASCII = NO_CHECK_TEXT

    @staticmethod
    def from_names(names):
        """
        Combine flags given by their names into a single value.
        Names are case-insensitive and may use '-' instead of '_'.
        :param names: Iterable of flag names.
        :return: The or-ed flags.
        """
        result = Flags.NONE
        for name in names:
            key = name.strip().upper().replace("-", "_")
            if key not in Flags.__members__:
                raise ValueError(f"unknown flag '{name}'")
            result |= Flags.__members__[key]
        return result

    @staticmethod
    def c_names():
        """
        Return pairs (C constant name, value) for all flags, including
        aliases and composites.
        """
        return [(f"MAGIC_{name}", int(value))
                for name, value in Flags.__members__.items()]

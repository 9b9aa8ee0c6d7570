"""
Python interface for the libmagic library.
"""
from magikku.flags import Flags
import os


def _to_c_path(ffi, path):
    """Converts an optional path (or colon-separated paths) into a C string."""
    if path is None:
        return ffi.NULL
    return os.fsencode(path)


def _from_c_string(ffi, cstring):
    """Converts a C string into Python, NULL is turned into None."""
    if cstring == ffi.NULL:
        return None
    return ffi.string(cstring).decode("utf-8", errors="replace")


class NativeEngine:
    """
    Primitive operations of the libmagic engine. Cookies returned by `open`
    are opaque for the users of the engine and must be passed to `close`
    exactly once.
    """
    name = None

    def open(self, flags):
        """Create a new cookie, None is returned on failure."""
        raise NotImplementedError

    def close(self, cookie):
        raise NotImplementedError

    def error(self, cookie):
        """Last error message of the cookie, None if there is none."""
        raise NotImplementedError

    def errno(self, cookie):
        raise NotImplementedError

    def file(self, cookie, path):
        """Description of the given file, None on failure."""
        raise NotImplementedError

    def buffer(self, cookie, data):
        """Description of the given bytes-like object, None on failure."""
        raise NotImplementedError

    def setflags(self, cookie, flags):
        raise NotImplementedError

    def check(self, cookie, sources):
        raise NotImplementedError

    def compile(self, cookie, sources):
        raise NotImplementedError

    def load(self, cookie, sources):
        raise NotImplementedError

    def getpath(self):
        """Default magic database path."""
        raise NotImplementedError

    def constants(self):
        """Values of the MAGIC_* constants known to the engine."""
        raise NotImplementedError


class CffiEngine(NativeEngine):
    """
    Engine backed by a cFFI library object. Both the compiled extension
    (API mode) and the dlopen-ed shared library (ABI mode) provide the same
    interface, so a single implementation serves both bindings.
    """
    def __init__(self, name, ffi, lib):
        self.name = name
        self.ffi = ffi
        self.lib = lib

    def __repr__(self):
        return f"<CffiEngine {self.name}>"

    def open(self, flags):
        cookie = self.lib.magic_open(flags)
        if cookie == self.ffi.NULL:
            return None
        return cookie

    def close(self, cookie):
        self.lib.magic_close(cookie)

    def error(self, cookie):
        return _from_c_string(self.ffi, self.lib.magic_error(cookie))

    def errno(self, cookie):
        return self.lib.magic_errno(cookie)

    def file(self, cookie, path):
        return _from_c_string(
            self.ffi, self.lib.magic_file(cookie, _to_c_path(self.ffi, path)))

    def buffer(self, cookie, data):
        # The length is passed explicitly, the buffer may contain zero bytes.
        view = memoryview(data)
        cbuffer = self.ffi.from_buffer(view)
        return _from_c_string(
            self.ffi, self.lib.magic_buffer(cookie, cbuffer, view.nbytes))

    def setflags(self, cookie, flags):
        return self.lib.magic_setflags(cookie, flags)

    def check(self, cookie, sources):
        return self.lib.magic_check(cookie, _to_c_path(self.ffi, sources))

    def compile(self, cookie, sources):
        return self.lib.magic_compile(cookie, _to_c_path(self.ffi, sources))

    def load(self, cookie, sources):
        return self.lib.magic_load(cookie, _to_c_path(self.ffi, sources))

    def getpath(self):
        return _from_c_string(self.ffi,
                              self.lib.magic_getpath(self.ffi.NULL, 0))

    def constants(self):
        return {name: getattr(self.lib, name)
                for name, _ in Flags.c_names()}

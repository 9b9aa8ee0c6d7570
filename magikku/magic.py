"""The libmagic data scanner handle."""
from collections.abc import Mapping
from magikku import binding
from magikku.errors import (ClosedHandleError, CompileError, DatabaseLoadError,
                            FlagError, InitializationError,
                            InvalidArgumentError, MagicError)
from magikku.flags import Flags
import os

# Keys recognized in the options of a new Magic object.
OPTIONS = ("flags", "database")
# Flags are passed to libmagic as a C int.
MAX_FLAGS = 0x7FFFFFFF


def _get_engine(engine):
    """Return the given engine or the engine chosen for the process."""
    if engine is not None:
        return engine
    if binding.ENGINE is None:
        reasons = "; ".join(f"{name}: {error}" for name, error
                            in binding.LOAD_ERRORS.items())
        raise InitializationError(f"libmagic is not available ({reasons})")
    return binding.ENGINE


def _check_flags(flags):
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise InvalidArgumentError(
            f"flags must be an integer, got {type(flags).__name__}")
    if flags < 0:
        raise InvalidArgumentError(f"flags must not be negative, got {flags}")
    if flags > MAX_FLAGS:
        raise InvalidArgumentError(f"flags do not fit a C int, got {flags:#x}")
    return int(flags)


def _check_path_string(path, what):
    """Reject strings that cannot be passed to libmagic as a C path."""
    if "\x00" in path:
        raise InvalidArgumentError(f"{what} must not contain a null byte")
    try:
        os.fsencode(path)
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f"{what} cannot be encoded: {e}")
    return path


def _check_sources(sources, what="database"):
    """
    Check that magic sources are None, a string or a path-like object.
    :return: The sources as a string or None.
    """
    if sources is None:
        return None
    if isinstance(sources, (str, os.PathLike)):
        sources = os.fspath(sources)
        if isinstance(sources, str):
            return _check_path_string(sources, what)
    raise InvalidArgumentError(
        f"{what} must be None or a string, got {type(sources).__name__}")


class Magic:
    """
    Represents a libmagic data scanner handle (magic cookie).

    The handle is opened on creation and must be released using `close`
    when it is not needed anymore. Magic objects are context managers that
    are closed on exit of the `with` block. A single object must not be
    used from multiple threads at once.
    """
    def __init__(self, options=None, flags=None, database=None, engine=None):
        """
        Initializes a new libmagic data scanner.
        :param options: Mapping with the "flags" and "database" keys or None
            for defaults.
        :param flags: Flags to magic (see Flags), or-ed together with '|'.
            Overrides the flags in options. Default: Flags.NONE
        :param database: Magic databases or uncompiled magic files separated
            by colons. Overrides the database in options. Default: the
            default system database.
        :param engine: Engine of the libmagic binding to use. Default: the
            binding selected when magikku was imported.
        """
        self.engine = None
        self._cookie = None
        self._closed = True
        self._flags = Flags.NONE

        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise InvalidArgumentError(
                f"options must be a mapping, got {type(options).__name__}")
        unknown = set(options) - set(OPTIONS)
        if unknown:
            raise InvalidArgumentError(
                "unknown options: " + ", ".join(sorted(map(str, unknown))))

        if flags is None:
            flags = options.get("flags")
        flags = Flags.NONE if flags is None else _check_flags(flags)
        if database is None:
            database = options.get("database")
        database = _check_sources(database)

        self.engine = _get_engine(engine)
        cookie = self.engine.open(flags)
        if cookie is None:
            raise InitializationError(
                f"magic_open({flags}) returned a null pointer")

        try:
            if self.engine.load(cookie, database) != 0:
                message = self.engine.error(cookie)
                raise DatabaseLoadError(
                    f"Error loading db: {database!r} {message or ''}".rstrip(),
                    self.engine.errno(cookie))
        except BaseException:
            # Nobody else owns the handle yet.
            self.engine.close(cookie)
            raise

        self._cookie = cookie
        self._closed = False
        self._flags = Flags(flags)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        # Handles that were never closed by their owner.
        if not getattr(self, "_closed", True):
            self.close()

    def __repr__(self):
        state = "closed" if self._closed else "open"
        return (f"<Magic {state} flags={int(self._flags):#x} "
                f"engine={getattr(self.engine, 'name', None)}>")

    @classmethod
    def default_database_path(cls, engine=None):
        """Returns the default magic database path."""
        return _get_engine(engine).getpath()

    def _get_cookie(self):
        """The native handle, ClosedHandleError is raised if it is closed."""
        if self._closed:
            raise ClosedHandleError(
                "This magic cookie is closed and can no longer be used")
        return self._cookie

    def close(self):
        """
        Close the libmagic data scanner handle when you are finished with it.
        Closing an already closed handle does nothing.
        """
        if not self._closed:
            self._closed = True
            cookie, self._cookie = self._cookie, None
            self.engine.close(cookie)

    @property
    def closed(self):
        return self._closed

    def is_closed(self):
        return self._closed

    def _last_error(self, cookie):
        return self.engine.error(cookie) or "unknown error"

    @property
    def errno(self):
        """Error number of the last error reported by libmagic."""
        return self.engine.errno(self._get_cookie())

    def identify_file(self, path):
        """
        Analyzes file contents against the magic database.
        :param path: The path to a file to inspect.
        :return: A textual description of the contents of the file.
        """
        cookie = self._get_cookie()
        if isinstance(path, os.PathLike):
            path = os.fspath(path)
        if not isinstance(path, str):
            raise InvalidArgumentError(
                f"path must be a string, got {type(path).__name__}")
        if not path:
            raise InvalidArgumentError("path must not be empty")
        os.stat(_check_path_string(path, "path"))

        result = self.engine.file(cookie, path)
        if result is None:
            message = self._last_error(cookie)
            errno = self.engine.errno(cookie)
            if errno:
                raise OSError(errno, message, path)
            raise MagicError(message)
        return result

    def identify_buffer(self, buffer):
        """
        Analyzes a byte buffer against the magic database.
        :param buffer: Bytes-like object (bytes, bytearray or memoryview).
        :return: A textual description of the contents of the buffer.
        """
        cookie = self._get_cookie()
        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                f"buffer must be a bytes-like object, "
                f"got {type(buffer).__name__}")

        result = self.engine.buffer(cookie, buffer)
        if result is None:
            raise MagicError(self._last_error(cookie),
                             self.engine.errno(cookie))
        return result

    def load_database(self, sources=None):
        """
        Used to load one or more magic databases. Previously loaded databases
        are replaced.
        :param sources: One or more file names separated by colons. If None,
            the default database is loaded. Uncompiled magic files are
            compiled on the fly, but no .mgc files are generated as with the
            compile method.
        :return: True
        :raises DatabaseLoadError: if an error occurred loading the database.
        """
        cookie = self._get_cookie()
        sources = _check_sources(sources)
        if self.engine.load(cookie, sources) != 0:
            raise DatabaseLoadError(
                f"Error loading db: {sources!r} {self._last_error(cookie)}",
                self.engine.errno(cookie))
        return True

    @property
    def flags(self):
        """Flags currently set on the handle."""
        self._get_cookie()
        return self._flags

    @flags.setter
    def flags(self, flags):
        self.set_flags(flags)

    def set_flags(self, flags):
        """
        Sets flags for the magic analyzer handle.
        :param flags: Flags to set for magic (see Flags), or-ed together with
            '|'. Using 0 will clear all flags.
        :raises FlagError: if libmagic does not accept the flags.
        """
        cookie = self._get_cookie()
        flags = _check_flags(flags)
        if self.engine.setflags(cookie, flags) < 0:
            raise FlagError(self._last_error(cookie),
                            self.engine.errno(cookie))
        self._flags = Flags(flags)

    def compile(self, sources=None):
        """
        Compiles magic files. This does not load the files, use
        load_database for that. Errors and warnings may be displayed on
        stderr.
        :param sources: A colon separated list of file names or a single
            file name. The compiled files are created in the current
            directory using the base name of each file with ".mgc" appended.
            A directory is compiled into a single .mgc file. None compiles
            the default database.
        :return: True
        :raises CompileError: if an error occurred.
        """
        cookie = self._get_cookie()
        sources = _check_sources(sources, "sources")
        if self.engine.compile(cookie, sources) != 0:
            raise CompileError(
                f"Error compiling {sources!r}: {self._last_error(cookie)}",
                self.engine.errno(cookie))
        return True

    def check_syntax(self, sources=None):
        """
        Checks the validity of magic files before compiling them. No files
        are written. Errors and warnings may be displayed on stderr.
        :param sources: A colon separated list of file names or a single
            file. None checks the default database.
        :return: Whether the check was successful.
        """
        cookie = self._get_cookie()
        sources = _check_sources(sources, "sources")
        return self.engine.check(cookie, sources) == 0

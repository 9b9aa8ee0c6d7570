"""Implementation of the magikku sub-commands."""
from magikku import binding
from magikku.config import Config, ConfigException
from magikku.errors import MagicError
from magikku.magic import Magic
from magikku.utils import compiled_db_name
import errno
import os
import sys


def _log(config, message):
    if config.verbosity:
        sys.stderr.write(message + "\n")


def _make_config(args):
    try:
        config = Config.from_args(args)
    except ConfigException as e:
        sys.stderr.write("Error: {}\n".format(str(e)))
        sys.exit(errno.EINVAL)
    _log(config, "Using the {} libmagic binding".format(
        binding.ENGINE.name if binding.ENGINE else "(none)"))
    _log(config, "Flags: {:#x}, database: {}".format(
        int(config.flags), config.database or "(default)"))
    return config


def _walk(path, recursive):
    """Yield the path and, if requested, everything below a directory."""
    yield path
    if recursive and os.path.isdir(path) and not os.path.islink(path):
        for entry in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, entry), recursive)


def identify_files(args):
    """Print the description of each file given on the command line."""
    config = _make_config(args)
    failed = False
    try:
        with Magic(config.as_options()) as magic:
            for path in args.paths:
                for file in _walk(path, args.recursive):
                    try:
                        print("{}: {}".format(file,
                                              magic.identify_file(file)))
                    except (OSError, MagicError) as e:
                        sys.stderr.write("Error: {}\n".format(str(e)))
                        failed = True
    except MagicError as e:
        sys.stderr.write("Error: {}\n".format(str(e)))
        return 1
    return 1 if failed else 0


def identify_buffer(args):
    """Print the description of data read from a file or stdin."""
    config = _make_config(args)
    if args.input and args.input != "-":
        try:
            with open(args.input, "rb") as input_file:
                data = input_file.read()
        except OSError as e:
            sys.stderr.write("Error: {}\n".format(str(e)))
            return 1
    else:
        data = sys.stdin.buffer.read()
    _log(config, "Read {} bytes".format(len(data)))
    try:
        with Magic(config.as_options()) as magic:
            print(magic.identify_buffer(data))
    except MagicError as e:
        sys.stderr.write("Error: {}\n".format(str(e)))
        return 1
    return 0


def compile_sources(args):
    """Compile magic sources into .mgc files in the current directory."""
    config = _make_config(args)
    try:
        with Magic(config.as_options()) as magic:
            magic.compile(args.sources)
    except MagicError as e:
        sys.stderr.write("Error: {}\n".format(str(e)))
        return 1
    if args.sources:
        for source in args.sources.split(":"):
            _log(config, "Created {}".format(compiled_db_name(source)))
    return 0


def check_sources(args):
    """Check syntax of magic sources, the exit status tells the result."""
    config = _make_config(args)
    try:
        with Magic(config.as_options()) as magic:
            valid = magic.check_syntax(args.sources)
    except MagicError as e:
        sys.stderr.write("Error: {}\n".format(str(e)))
        return 1
    print("{}: {}".format(args.sources or "default database",
                          "OK" if valid else "FAILED"))
    return 0 if valid else 1


def print_path(args):
    """Print the default magic database path."""
    _make_config(args)
    try:
        print(Magic.default_database_path())
    except MagicError as e:
        sys.stderr.write("Error: {}\n".format(str(e)))
        return 1
    return 0

"""
Convenience functions performing a single operation using a Magic object
which is created and closed just for that purpose.
"""
from magikku.magic import Magic


def identify_file_once(path, options=None, engine=None):
    """
    Identify a single file.
    :param path: The path to a file to inspect.
    :param options: Options of the Magic object (see Magic).
    """
    with Magic(options, engine=engine) as magic:
        return magic.identify_file(path)


def identify_buffer_once(buffer, options=None, engine=None):
    """
    Identify a single bytes-like object.
    :param buffer: The buffer to inspect.
    :param options: Options of the Magic object (see Magic).
    """
    with Magic(options, engine=engine) as magic:
        return magic.identify_buffer(buffer)


def compile_once(sources=None, options=None, engine=None):
    """Arguments are passed directly to Magic.compile."""
    with Magic(options, engine=engine) as magic:
        return magic.compile(sources)


def check_syntax_once(sources=None, options=None, engine=None):
    """Arguments are passed directly to Magic.check_syntax."""
    with Magic(options, engine=engine) as magic:
        return magic.check_syntax(sources)


def default_database_path(engine=None):
    """Returns the default magic database path."""
    return Magic.default_database_path(engine)

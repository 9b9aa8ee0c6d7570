import os

# Values accepted by the MAGIKKU_BINDING environment variable.
BINDINGS = ("compiled", "dynamic")
# Suffix libmagic appends to compiled database files.
COMPILED_DB_SUFFIX = ".mgc"


def get_binding_preference():
    """
    Return the binding requested in the `MAGIKKU_BINDING` environment
    variable, or None if the binding should be chosen automatically.
    """
    binding_var = "MAGIKKU_BINDING"
    if binding_var not in os.environ or not os.environ[binding_var]:
        return None
    binding = os.environ[binding_var].strip().lower()
    if binding not in BINDINGS:
        raise ValueError(f"{binding_var} must be one of {', '.join(BINDINGS)}"
                         f", got '{binding}'")
    return binding


def get_library_path():
    """
    Return the libmagic shared library specified in the `MAGIKKU_LIBRARY`
    environment variable, or None to search for it.
    """
    library_var = "MAGIKKU_LIBRARY"
    if library_var in os.environ and os.environ[library_var]:
        return os.environ[library_var]
    return None


def compiled_db_name(source):
    """
    Name of the compiled database file created from the given magic source
    (the base name of the source with the compiled database suffix).
    """
    return os.path.basename(os.path.normpath(source)) + COMPILED_DB_SUFFIX


def join_sources(sources):
    """
    Turn a list of database sources into the colon-separated form accepted
    by libmagic. Strings and None are returned unchanged.
    """
    if sources is None or isinstance(sources, str):
        return sources
    return ":".join(os.fspath(source) for source in sources)

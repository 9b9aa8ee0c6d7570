"""
Selection of the libmagic binding.

The compiled extension is preferred. If it is not available (it was not
built or cannot be imported), the shared library is loaded dynamically.
The selection happens once, when magikku is imported.
"""
from magikku.libmagic.engine import CffiEngine
from magikku.utils import get_binding_preference
import importlib

# Binding names and modules providing their `ffi` and `lib` objects,
# in the order of preference.
BINDING_MODULES = [
    ("compiled", "magikku.libmagic.compiled"),
    ("dynamic", "magikku.libmagic.dynamic"),
]


def load_engine(name):
    """
    Load the engine of a single binding.
    :param name: Name of the binding ("compiled" or "dynamic").
    :raises ImportError: if the binding is not available.
    """
    modules = dict(BINDING_MODULES)
    if name not in modules:
        raise ValueError(f"unknown binding '{name}'")
    module = importlib.import_module(modules[name])
    return CffiEngine(name, module.ffi, module.lib)


def select_engine(preference=None):
    """
    Choose the engine to be used by default.
    :param preference: Name of the only binding to try. None tries all of
        them in the order of preference.
    :return: Pair of the engine (None if no binding could be loaded) and
        a dictionary with the errors of the bindings that failed to load.
    """
    errors = {}
    for name, _ in BINDING_MODULES:
        if preference is not None and name != preference:
            continue
        try:
            return load_engine(name), errors
        except ImportError as e:
            errors[name] = str(e)
    return None, errors


def select_default_engine():
    """
    Choose the engine using the `MAGIKKU_BINDING` environment variable.
    An invalid value does not prevent importing magikku, it is reported as
    the load error and no engine is selected.
    """
    try:
        preference = get_binding_preference()
    except ValueError as e:
        return None, {"MAGIKKU_BINDING": str(e)}
    return select_engine(preference)


ENGINE, LOAD_ERRORS = select_default_engine()

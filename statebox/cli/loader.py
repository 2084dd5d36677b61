"""
Reducer loading for CLI commands.

References take the form "package.module:attr" or "path/to/file.py:attr".
"""

import importlib
import importlib.util
import os
from typing import Any, Callable

from ..core.errors import ConfigurationError, TypeMismatchError


def _load_module(module_ref: str) -> Any:
    if module_ref.endswith(".py") or os.sep in module_ref:
        if not os.path.exists(module_ref):
            raise ConfigurationError(f"Reducer file not found: {module_ref}")
        name = os.path.splitext(os.path.basename(module_ref))[0]
        spec = importlib.util.spec_from_file_location(name, module_ref)
        if spec is None or spec.loader is None:
            raise ConfigurationError(f"Cannot load reducer file: {module_ref}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    try:
        return importlib.import_module(module_ref)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import reducer module {module_ref!r}: {e}") from e


def load_reducer(ref: str) -> Callable[[Any, Any], Any]:
    """
    Resolve a reducer reference.

    Raises:
        ConfigurationError: If the reference is malformed or cannot be imported
        TypeMismatchError: If the target is not callable
    """
    module_ref, sep, attr = ref.rpartition(":")
    if not sep or not module_ref or not attr:
        raise ConfigurationError(f"Expected 'module:attr' or 'file.py:attr', got {ref!r}")

    module = _load_module(module_ref)
    try:
        reducer = getattr(module, attr)
    except AttributeError as e:
        raise ConfigurationError(f"{module_ref!r} has no attribute {attr!r}") from e

    if not callable(reducer):
        raise TypeMismatchError(f"Expected {ref!r} to be a reducer function.")
    return reducer

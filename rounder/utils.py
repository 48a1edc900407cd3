"""
Rounder utilities shared across the package.

Small formatting helpers for exception and warning messages, kept here to avoid
circular imports between the number, rounding and rendering modules.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes)


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Both `class_name(10)` and `class_name(int)` return 'int'. Builtins are never
    module-qualified.

    Examples:
        >>> class_name(1.5)
        'float'
        >>> from decimal import Decimal
        >>> class_name(Decimal, fully_qualified=True)
        'decimal.Decimal'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return cls.__module__ + "." + cls.__name__
    return cls.__name__


def fmt_type(obj: Any) -> str:
    """
    Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(list)
        '<list>'
    """
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any, *, max_repr: int = 80) -> str:
    """
    Format a value for exception messages.

    Strings and other primitives are shown as-is, everything else as a
    type-value pair. Long representations are truncated with an ellipsis.

    Examples:
        >>> fmt_value("1.2.3")
        "'1.2.3'"
        >>> fmt_value([1, 2])
        '<list: [1, 2]>'
    """
    try:
        repr_ = repr(obj)
    except Exception as e:
        repr_ = f"<{class_name(obj)} object (repr failed: {class_name(e)})>"

    if len(repr_) > max_repr:
        repr_ = repr_[:max(max_repr - 3, 1)] + "..."

    if type(obj) in PRIMITIVE_TYPES:
        return repr_
    return f"<{class_name(obj)}: {repr_}>"

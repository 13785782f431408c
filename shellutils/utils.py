"""
Shellutils utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel for “parameter not provided” without conflating with None.
  • Falsey, printable as "Unset", non-subclassable.

- MissingType / Missing
  • Singleton sentinel returned by lookups when nothing was found.
  • Distinct from None, which lookups use for “present without a value”.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

Stability and contract
- These utilities are re-exported via __all__; names not in __all__ are internal.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
    >>> bool(Missing), repr(Missing)
    (False, 'Missing')
"""
import functools
from typing import final

from rich.text import Text


@final
class UnsetType:
    """
    Internal sentinel type representing a parameter that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and singleton per process.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


@final
class MissingType:
    """
    Sentinel type for lookups that found nothing.

    Lookups over parsed arguments have three outcomes that callers must be able
    to tell apart:
    - a string: the option (or parameter) exists and carries a value;
    - None: the option exists but was given without a value (a boolean flag);
    - Missing: the option (or parameter) is not there at all.

    Compare by identity: `if arguments.value("o") is Missing: ...`.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Missing"

    def __rich__(self):
        """
        Rich protocol hook: a dim 'Missing' token.
        """
        return Text(repr(self), style="dim")

    def __reduce__(self):
        # Pickle by reference to the module-level singleton.
        return "Missing"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'MissingType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


Unset = UnsetType()
"""
Internal sentinel for “not provided”, used as a parameter default where None is meaningful.
"""

Missing = MissingType()
"""
Sentinel for “not found” lookup results (see MissingType).
"""


__all__ = (
    # Functions
    "coalesce",

    # Types
    "UnsetType",
    "MissingType",

    # Constants
    "Unset",
    "Missing",
)

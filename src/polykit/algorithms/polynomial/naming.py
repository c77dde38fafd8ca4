"""Variable naming scheme for polynomial variables.

Variables are identified by plain integers. An identifier packs a short
name (one to four characters from a fixed 30-symbol alphabet) together with
a positive index ``m`` so that indexed families such as ``x1, x2, ...`` share
the same base name.

Notes
-----
- The name part is a base-31 positional number whose digits are the
  alphabet offsets plus one, so the digit 0 marks an unused position.
- The encoded value is shifted left by one bit. The low bit is reserved for
  a trigonometric marker and is always 0 here.
- Identifier 0 is the "no variable" sentinel.

Layout::

    var = 2 * (name_part + max_name_part * (m - 1))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from polykit.algorithms.utils.exceptions import IdOverflowError, InvalidNameError

NO_VARIABLE = 0


@dataclass(frozen=True)
class NamingTable:
    """Immutable configuration of the variable naming scheme.

    Parameters
    ----------
    alphabet : str, default="@#_.abcdefghijklmnopqrstuvwxyz"
        Characters allowed in a variable name.
    max_name_length : int, default=4
        Maximum number of characters in a name.
    var_type_max : int, default=2**32 - 1
        Largest representable identifier.
    """
    alphabet: str = "@#_.abcdefghijklmnopqrstuvwxyz"
    max_name_length: int = 4
    var_type_max: int = 2**32 - 1
    radix: int = field(init=False)
    max_name_part: int = field(init=False)
    max_index: int = field(init=False)

    def __post_init__(self):
        radix = len(self.alphabet) + 1
        max_name_part = radix ** self.max_name_length
        object.__setattr__(self, "radix", radix)
        object.__setattr__(self, "max_name_part", max_name_part)
        object.__setattr__(self, "max_index", self.var_type_max // 2 // max_name_part)


NAMING = NamingTable()


def is_valid_variable_name(name: str, table: NamingTable = NAMING) -> bool:
    """Return whether *name* only uses characters from the naming alphabet."""
    if not isinstance(name, str) or len(name) < 1:
        return False
    return all(ch in table.alphabet for ch in name)


def variable_name_to_id(name: str, m: int = 1, table: NamingTable = NAMING) -> int:
    """Encode a variable name and index into an identifier.

    Parameters
    ----------
    name : str
        Base name, one to four characters of the naming alphabet.
    m : int, default=1
        Index within the family of variables sharing *name*.
    table : NamingTable, optional
        Naming configuration.

    Returns
    -------
    int
        Even, positive identifier.

    Raises
    ------
    InvalidNameError
        If *name* is empty or contains characters outside the alphabet, or if
        *m* is not positive.
    IdOverflowError
        If *name* is too long or *m* exceeds ``table.max_index``.
    """
    if not is_valid_variable_name(name, table):
        raise InvalidNameError(f"invalid variable name {name!r}")

    multiplier = 1
    name_part = 0
    for ch in reversed(name):
        offset = table.alphabet.index(ch)
        name_part += (offset + 1) * multiplier
        multiplier *= table.radix

    if name_part > table.max_name_part:
        raise IdOverflowError(f"name {name!r} exceeds max allowed")
    if m < 1:
        raise InvalidNameError(f"index must be > 0, got {m}")
    if m > table.max_index:
        raise IdOverflowError(f"index {m} exceeds max ID {table.max_index}")
    return 2 * (name_part + table.max_name_part * (m - 1))


def decode_variable_id(var: int, table: NamingTable = NAMING) -> Tuple[str, int]:
    """Inverse of :func:`variable_name_to_id`.

    Parameters
    ----------
    var : int
        Identifier produced by :func:`variable_name_to_id`.
    table : NamingTable, optional
        Naming configuration.

    Returns
    -------
    tuple
        ``(name, m)``.

    Raises
    ------
    InvalidNameError
        If *var* is not positive, has the reserved low bit set, or does not
        correspond to a canonical name.
    IdOverflowError
        If *var* lies beyond the representable range.
    """
    if var <= NO_VARIABLE or var % 2:
        raise InvalidNameError(f"invalid variable id {var}")
    m = var // 2 // table.max_name_part + 1
    if m > table.max_index:
        raise IdOverflowError(f"variable id {var} exceeds max ID")
    name_part = (var // 2) % table.max_name_part

    digits = []
    while name_part:
        name_part, digit = divmod(name_part, table.radix)
        if digit == 0:
            # a gap between used positions cannot come from an encoded name
            raise InvalidNameError(f"variable id {var} does not encode a name")
        digits.append(table.alphabet[digit - 1])
    if not digits:
        raise InvalidNameError(f"variable id {var} does not encode a name")
    return "".join(reversed(digits)), m


def id_to_variable_name(var: int, table: NamingTable = NAMING) -> str:
    """Render an identifier as ``name`` followed by its index, e.g. ``"x1"``."""
    name, m = decode_variable_id(var, table)
    return f"{name}{m}"


def split_variable_name(text: str, table: NamingTable = NAMING) -> Tuple[str, int]:
    """Split a rendered variable name into its base name and index.

    ``"x12"`` gives ``("x", 12)``; a name without a trailing number has
    index 1.

    Raises
    ------
    InvalidNameError
        If the base name is not valid.
    """
    stem = text.rstrip("0123456789")
    digits = text[len(stem):]
    if not is_valid_variable_name(stem, table):
        raise InvalidNameError(f"invalid variable name {text!r}")
    return stem, int(digits) if digits else 1

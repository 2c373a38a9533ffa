"""
Matrix input parsing.

Accepts text such as ``"4 3; 6 3"`` or ``"1/2, sqrt(2)\\n pi, -1"`` and
turns it into a float array.  Each entry is evaluated with SymPy so that
fractions and constants can be typed the way they appear on paper.
"""

import math
import re

import numpy as np
from sympy.parsing.sympy_parser import (
    parse_expr, standard_transformations, implicit_multiplication_application,
    convert_xor,
)

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)

_ROW_SPLIT = re.compile(r'\s*[;\n]\s*')


def _normalize_entry(text: str) -> str:
    s = text.strip()
    s = re.sub(r'√\s*([0-9.]+)', r'sqrt(\1)', s)
    s = s.replace('√', 'sqrt')
    s = s.replace('π', '(pi)')
    s = s.replace('−', '-')
    s = s.replace('^', '**')
    return s


def parse_entry(text: str) -> float:
    """Evaluate one matrix entry (``"3"``, ``"-1/3"``, ``"2pi"``) to a float."""
    s = _normalize_entry(text)
    if not s:
        raise ValueError("Empty matrix entry.")
    try:
        expr = parse_expr(s, transformations=TRANSFORMATIONS)
    except Exception as e:
        raise ValueError(f"Could not parse entry: '{text}'. Error: {e}")
    if getattr(expr, "free_symbols", None):
        names = ", ".join(sorted(str(v) for v in expr.free_symbols))
        raise ValueError(f"Entry '{text}' is not a number (contains {names}).")
    try:
        value = float(expr)
    except (TypeError, ValueError):
        raise ValueError(f"Entry '{text}' is not a real number.")
    if not math.isfinite(value):
        raise ValueError(f"Entry '{text}' is not finite.")
    return value


def _split_row(row: str) -> list[str]:
    if ',' in row:
        return [tok for tok in (t.strip() for t in row.split(',')) if tok]
    return row.split()


def parse_matrix(text: str) -> np.ndarray:
    """Parse rows separated by ``;`` or newlines into an (n, m) array.

    Entries are comma separated when the row has a comma, otherwise
    whitespace separated.
    """
    cleaned = text.strip().strip('[]')
    rows = [r for r in _ROW_SPLIT.split(cleaned) if r.strip()]
    if not rows:
        raise ValueError("Matrix cannot be empty.")
    values = [[parse_entry(tok) for tok in _split_row(r.strip('[] '))] for r in rows]
    widths = {len(r) for r in values}
    if len(widths) != 1:
        raise ValueError("All matrix rows must have the same number of entries.")
    return np.array(values, dtype=float)


def as_matrix(data, name: str = "A") -> np.ndarray:
    """Return *data* (text, nested lists or an array) as a 2-D float array.

    A 1-D input is treated as a single column.
    """
    if isinstance(data, str):
        arr = parse_matrix(data)
    else:
        try:
            arr = np.array(data, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{name} must be a rectangular numeric matrix. Error: {e}")
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional.")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must contain only finite values.")
    return arr

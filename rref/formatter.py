"""LaTeX rendering of a (possibly augmented) matrix."""

import numpy as np

# ── LaTeX tokens ───────────────────────────────────────────────────────
_OPEN = "\t\\left[\\begin{array}{"
_CLOSE = "\t\\end{array}\\right]\n"
_CELL_SEP = " & "
_ROW_END = " \\\\\n"
_AUGMENT_SEP = "|"
_ALIGN = "r"


def format_number(value: float, number_format: str = "%.3f") -> str:
    """Render one scalar with *number_format*.

    ``number_format`` is either printf style (``%.3f``) or a ``format()``
    spec (``.3f``).  Negative zero is rendered as zero.
    """
    value = float(value) + 0.0
    if "%" in number_format:
        return number_format % value
    return format(value, number_format)


def _column_spec(m: int, p: int) -> str:
    spec = _ALIGN * m
    if p > 0:
        spec += _AUGMENT_SEP + _ALIGN * p
    return spec


def render_matrix(A: np.ndarray, b: np.ndarray | None = None,
                  number_format: str = "%.3f") -> str:
    """Return the bracketed ``array`` block for ``[A|b]``.

    The column spec has one ``r`` per column of A, then a vertical bar and
    one ``r`` per column of b when b is given.  Nothing is mutated.
    """
    A = np.asarray(A, dtype=float)
    if b is not None and np.size(b) > 0:
        b = np.asarray(b, dtype=float)
        full = np.hstack([A, b])
        p = b.shape[1]
    else:
        full = A
        p = 0
    m = A.shape[1]

    lines = [_OPEN + _column_spec(m, p) + "}\n"]
    for row in full:
        cells = _CELL_SEP.join(format_number(v, number_format) for v in row)
        lines.append("\t\t" + cells + _ROW_END)
    lines.append(_CLOSE)
    return "".join(lines)

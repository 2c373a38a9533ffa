"""
LaTeX serialization of a Trace.

The document is a ``flalign`` block (requires amsmath) preceded by
``\\allowdisplaybreaks`` so long derivations can span several pages.
Each Step contributes its rendered matrix and a right-aligned annotation.
"""

import sys

from rref.formatter import format_number
from rref.steps import ELIMINATE, SCALE, SWAP, Step, Trace

PREAMBLE = "\\allowdisplaybreaks\n"
BEGIN = "\\begin{flalign}\n"
END = "\\end{flalign}\n"
ROW_BREAK = "\\\\"


def _row(index: int) -> str:
    return f"R_{{{index + 1}}}"


def operation_latex(op, number_format: str = "%.3f") -> str:
    """LaTeX for one RowOperation (``R_{2}=R_{2}-4.000\\cdot R_{1}``)."""
    if op.kind == SWAP:
        return f"{_row(op.target)}\\leftrightarrow {_row(op.source)}"
    if op.kind == SCALE:
        s = format_number(op.scale, number_format)
        return f"{_row(op.target)}={s}\\cdot {_row(op.target)}"
    if op.kind == ELIMINATE:
        if op.scale < 0:
            s = "+" + format_number(-op.scale, number_format)
        else:
            s = "-" + format_number(op.scale, number_format)
        return f"{_row(op.target)}={_row(op.target)}{s}\\cdot {_row(op.source)}"
    raise ValueError(f"Unknown row operation: '{op.kind}'")


def latex_annotation(step: Step, number_format: str = "%.3f") -> str:
    """The ``&&`` annotation for *step*, without the trailing row break."""
    if step.is_original:
        return "\t&&\\mbox{Original Matrix}"
    # combined eliminations always get the array block, even for one row
    if len(step.operations) == 1 and not step.combined:
        return "\t&& " + operation_latex(step.operations[0], number_format)
    lines = ["\t&&\\begin{array}{l}\n"]
    for op in step.operations:
        lines.append("\t\t" + operation_latex(op, number_format) + ROW_BREAK + "\n")
    lines.append("\t\\end{array}")
    return "".join(lines)


def iter_fragments(trace: Trace):
    """Yield the document text in write order."""
    number_format = trace.config.number_format
    yield PREAMBLE
    yield BEGIN
    last = len(trace) - 1
    for i, step in enumerate(trace):
        yield step.rendered
        # No row break after the last step: it would add an empty numbered line
        yield latex_annotation(step, number_format) + (ROW_BREAK if i != last else "") + "\n"
    yield END


def render_document(trace: Trace) -> str:
    return "".join(iter_fragments(trace))


def write_trace(trace: Trace, sink=None) -> None:
    """Write the document for *trace* to *sink* (default: standard output)."""
    if sink is None:
        sink = sys.stdout
    for fragment in iter_fragments(trace):
        sink.write(fragment)

"""
rref-latex — Entry point.

Reduce a matrix from the command line and print the LaTeX derivation.
"""

import sys

from rref.cli import main


if __name__ == "__main__":
    sys.exit(main())

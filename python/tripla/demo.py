"""Interactive console demo.

Asks for matrix dimensions, fills a random sparse-ish matrix and prints it in
dense form, in triplet form and as the transposed triplet form.
"""
import logging
import sys

from ._runtime import get_log_level
from .creation import encode, random_matrix
from .display import format_dense, format_triplets
from .manipulation import transpose

logger = logging.getLogger(__name__)

PROMPT = "enter the row and column of matrix: "


def read_dimensions(stdin, stdout):
    """Prompt until two non-negative integers are read.

    Returns ``None`` when input ends first.
    """
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        try:
            rows, cols = (int(p) for p in line.split())
        except ValueError:
            logger.warning("expected two integers, got %r", line.strip())
            continue
        if rows < 0 or cols < 0:
            logger.warning("dimensions must be non-negative, got %d %d", rows, cols)
            continue
        return rows, cols


def run(stdin=None, stdout=None, rng=None) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    dims = read_dimensions(stdin, stdout)
    if dims is None:
        print(file=stdout)
        logger.warning("no dimensions given, aborting")
        return 0
    rows, cols = dims
    matrix = random_matrix(rows, cols, rng=rng)
    print("element of the matrix is", file=stdout)
    if matrix.size:
        print(format_dense(matrix), file=stdout)
    triplets = encode(matrix, rows, cols)
    print("triplet form of sparse matrix", file=stdout)
    print(format_triplets(triplets), file=stdout)
    print("transpose of the triplet form matrix", file=stdout)
    print(format_triplets(transpose(triplets)), file=stdout)
    return 0


def main() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s: %(message)s")
    raise SystemExit(run())


if __name__ == "__main__":
    main()

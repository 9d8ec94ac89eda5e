"""Jacobi iteration for steady-state heat on a rectangular plate."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

import numpy as np

ROWS = 3000
COLUMNS = 3000
MAX_ITERATIONS = 3000
MAX_TEMP_ERROR = 0.01
INITIAL_ERROR = 100.0


@dataclass
class JacobiResult:
    """Final plate, the number of iterations run and the last maximum change."""

    plate: np.ndarray
    iterations: int
    error: float


def initial_plate(rows: int = ROWS, columns: int = COLUMNS) -> np.ndarray:
    """Build the plate with its fixed boundary.

    The plate has ``rows + 2`` by ``columns + 2`` cells. The left and top edges
    are held at zero; the right and bottom edges rise linearly towards 100.
    """
    if rows < 1 or columns < 1:
        raise ValueError(f"plate needs at least one interior row and column, got {rows}x{columns}")
    plate = np.zeros((rows + 2, columns + 2))
    plate[:, columns + 1] = (100.0 / rows) * np.arange(rows + 2)
    plate[rows + 1, :] = (100.0 / columns) * np.arange(columns + 2)
    return plate


def jacobi_step(plate: np.ndarray) -> np.ndarray:
    """Return a new plate whose interior is the mean of each cell's four neighbours."""
    if plate.ndim != 2 or min(plate.shape) < 3:
        raise ValueError("plate must be a 2-D array of at least 3x3 cells")
    updated = plate.copy()
    updated[1:-1, 1:-1] = 0.25 * (
        plate[2:, 1:-1] + plate[:-2, 1:-1] + plate[1:-1, 2:] + plate[1:-1, :-2]
    )
    return updated


def run_jacobi(
    rows: int = ROWS,
    columns: int = COLUMNS,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = MAX_TEMP_ERROR,
) -> JacobiResult:
    """Iterate until the largest change is within ``tolerance`` or the limit is hit."""
    plate = initial_plate(rows, columns)
    error = INITIAL_ERROR
    iteration = 1
    while error > tolerance and iteration <= max_iterations:
        updated = jacobi_step(plate)
        error = float(np.max(np.abs(updated[1:-1, 1:-1] - plate[1:-1, 1:-1])))
        plate = updated
        iteration += 1
    return JacobiResult(plate=plate, iterations=iteration - 1, error=error)


def main(argv: list[str] | None = None) -> int:
    """Run the plate simulation and report the final error."""
    parser = argparse.ArgumentParser(
        prog="numlab-jacobi", description="Jacobi heat iteration on a plate."
    )
    parser.add_argument("--rows", type=int, default=ROWS)
    parser.add_argument("--columns", type=int, default=COLUMNS)
    parser.add_argument("--iterations", type=int, default=MAX_ITERATIONS)
    parser.add_argument("--tolerance", type=float, default=MAX_TEMP_ERROR)
    args = parser.parse_args(argv)
    try:
        result = run_jacobi(args.rows, args.columns, args.iterations, args.tolerance)
    except ValueError as exc:
        print(f"Erro: {exc}")
        return 1
    print(f"\n Erro maximo na iteracao {result.iterations} era {result.error:f}")
    return 0
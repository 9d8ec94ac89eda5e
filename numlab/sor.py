"""Red-black successive over-relaxation for heat spreading from a point source."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SorConfig:
    """Grid size, relaxation factor, temperatures and heat-source position."""

    size: int = 1022
    max_iterations: int = 4098
    omega: float = 0.5
    initial_temp: float = 20.0
    border_temp: float = 20.0
    source_temp: float = 100.0
    source_row: int = 800
    source_column: int = 800

    def __post_init__(self) -> None:
        if self.size < 3:
            raise ValueError(f"grid size must be at least 3, got {self.size}")
        if self.max_iterations < 0:
            raise ValueError("max_iterations must not be negative")
        if not (0 <= self.source_row < self.size and 0 <= self.source_column < self.size):
            raise ValueError(
                f"heat source ({self.source_row}, {self.source_column}) lies outside "
                f"a {self.size}x{self.size} grid"
            )


@dataclass
class SorResult:
    """Latest grid, iterations run, largest change between the last two grids, and time."""

    grid: np.ndarray
    iterations: int
    error: float
    seconds: float


def initial_grid(config: SorConfig | None = None) -> np.ndarray:
    """Build the starting grid: fixed border, uniform interior and the heat source."""
    config = config or SorConfig()
    grid = np.full((config.size, config.size), config.border_temp, dtype=float)
    grid[1:-1, 1:-1] = config.initial_temp
    grid[config.source_row, config.source_column] = config.source_temp
    return grid


def relaxed_value(
    current: np.ndarray, previous: np.ndarray, row: int, column: int, omega: float
) -> float:
    """Relaxed update of one cell.

    The cell above and to the left are read from ``current``, the cells below
    and to the right and the cell itself from ``previous``.
    """
    average = 0.25 * (
        previous[row + 1, column]
        + current[row - 1, column]
        + previous[row, column + 1]
        + current[row, column - 1]
    )
    old = previous[row, column]
    return float(old + omega * (average - old))


def _phase_masks(config: SorConfig) -> tuple[np.ndarray, np.ndarray]:
    rows = np.arange(1, config.size - 1)[:, None]
    columns = np.arange(1, config.size - 1)[None, :]
    red = (rows + columns) % 2 == 0
    black = ~red
    row, column = config.source_row - 1, config.source_column - 1
    if 0 <= row < config.size - 2 and 0 <= column < config.size - 2:
        red[row, column] = False
        black[row, column] = False
    return red, black


def _relax_phase(
    current: np.ndarray, previous: np.ndarray, mask: np.ndarray, omega: float
) -> None:
    old = previous[1:-1, 1:-1]
    average = 0.25 * (
        previous[2:, 1:-1] + current[:-2, 1:-1] + previous[1:-1, 2:] + current[1:-1, :-2]
    )
    updated = old + omega * (average - old)
    current[1:-1, 1:-1][mask] = updated[mask]


def sor_sweep(current: np.ndarray, previous: np.ndarray, config: SorConfig) -> None:
    """Update ``current`` in place: red cells first, then black cells.

    Red cells (row + column even) only read black neighbours and the other
    way round, so each phase can be computed in one pass. The heat source
    is never updated.
    """
    expected = (config.size, config.size)
    if current.shape != expected or previous.shape != expected:
        raise ValueError(f"grids must have shape {expected}")
    red, black = _phase_masks(config)
    _relax_phase(current, previous, red, config.omega)
    _relax_phase(current, previous, black, config.omega)


def run_sor(config: SorConfig | None = None) -> SorResult:
    """Run the configured number of sweeps and measure the final change."""
    config = config or SorConfig()
    start = time.perf_counter()
    previous = initial_grid(config)
    current = previous.copy()
    for _ in range(config.max_iterations):
        sor_sweep(current, previous, config)
        current, previous = previous, current
    error = float(np.max(np.abs(current[1:-1, 1:-1] - previous[1:-1, 1:-1])))
    seconds = time.perf_counter() - start
    return SorResult(
        grid=previous, iterations=config.max_iterations, error=error, seconds=seconds
    )


def main(argv: list[str] | None = None) -> int:
    """Run the heat simulation and report the final error and time."""
    defaults = SorConfig()
    parser = argparse.ArgumentParser(
        prog="numlab-sor", description="Red-black SOR heat simulation."
    )
    parser.add_argument("--size", type=int, default=defaults.size)
    parser.add_argument("--iterations", type=int, default=defaults.max_iterations)
    parser.add_argument("--omega", type=float, default=defaults.omega)
    parser.add_argument("--source-row", type=int, default=defaults.source_row)
    parser.add_argument("--source-column", type=int, default=defaults.source_column)
    args = parser.parse_args(argv)
    try:
        config = SorConfig(
            size=args.size,
            max_iterations=args.iterations,
            omega=args.omega,
            source_row=args.source_row,
            source_column=args.source_column,
        )
    except ValueError as exc:
        print(f"Erro: {exc}")
        return 1
    result = run_sor(config)
    print("Simulação concluída!")
    print(f"Tamanho do grid: {config.size} x {config.size}")
    print(f"Número máximo de iterações: {config.max_iterations}")
    print(f"Depois de {result.iterations} iterações, o erro foi: {result.error:.15f}")
    print(f"Tempo de execução: {result.seconds:.15f} segundos")
    return 0
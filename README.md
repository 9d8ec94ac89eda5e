# numlab

A handful of classic numerical experiments. Each can be used as a library
function and as a command:

- **Prime counting** with the sieve of Eratosthenes, in an odd-only form,
  a cache-blocked form and a full-table form (`numlab.sieve`).
- **Jacobi iteration** on a heated plate until the largest change falls
  within a tolerance (`numlab.jacobi`).
- **Gauss–Seidel with successive over-relaxation (SOR)** using a red/black
  checkerboard update and a fixed point heat source (`numlab.sor`).
- **Mandelbrot set** escape-time computation, rendered to an image file
  (`numlab.mandelbrot`).

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

```
numlab-sieve 1000000
numlab-jacobi
numlab-sor
numlab-mandelbrot
```

The commands print their summaries in Portuguese. Pass `--help` to any
command to see its options.

- `numlab-sieve [n] [--variant {odd,blocked,full}] [--block-size SIZE]`
  counts primes and prints the count and the time taken. The `odd` and
  `blocked` variants count primes up to and including `n` and also print
  the throughput and the size of the sieve table; `blocked` prints the
  block size too. The `full` variant counts primes strictly below `n` and
  requires `n > 2`. Without `n` the limit is 1,000,000,000, which needs
  about a gigabyte of memory for the table.
- `numlab-jacobi [--rows R] [--columns C] [--iterations N] [--tolerance T]`
  runs the plate iteration (default 3000 × 3000 interior cells, at most
  3000 iterations, tolerance 0.01) and prints the iteration count and the
  last maximum change.
- `numlab-sor [--size S] [--iterations N] [--omega W] [--source-row R] [--source-column C]`
  runs a fixed number of red/black sweeps (default a 1022 × 1022 grid,
  4098 sweeps, relaxation factor 0.5, source at (800, 800)) and prints the
  change between the last two grids and the time taken.
- `numlab-mandelbrot [--width W] [--height H] [--max-iter N] [--draw-at K] [--mode {mono,tiled}] [--output PATH]`
  renders the set on a white background and saves it (default
  `mandelbrot.png`, 800 × 800, 100 iterations). Pixels whose escape count
  equals `--draw-at` are drawn: black in `mono` mode, coloured by their
  100 × 100 tile in `tiled` mode.

A command returns exit status 1 and prints an error when its arguments are
out of range.

## Library use

```python
from numlab.sieve import count_primes, count_primes_full, run

count_primes(100)        # 25: primes up to and including 100
count_primes_full(100)   # 25: primes below 100
report = run(1_000_000, "blocked")
print(report.primes, report.seconds, report.throughput, report.memory_mb)
```

```python
from numlab.jacobi import run_jacobi

result = run_jacobi(rows=50, columns=50, max_iterations=500, tolerance=0.01)
print(result.iterations, result.error)
```

```python
from numlab.sor import SorConfig, run_sor

config = SorConfig(size=64, max_iterations=200, source_row=32, source_column=32)
result = run_sor(config)
print(result.iterations, result.error, result.seconds)
```

```python
from numlab.mandelbrot import View, escape_time, iteration_grid, render_image

escape_time(0.0, 0.0, 100)   # 100: the point never escapes
grid = iteration_grid(View(width=200, height=200))
render_image(View(), mode="tiled").save("set.png")
```

| Module               | Functions and classes                                                                                       |
|----------------------|-------------------------------------------------------------------------------------------------------------|
| `numlab.sieve`       | `odd_count`, `odd_sieve`, `count_primes`, `count_primes_blocked`, `count_primes_full`, `run`, `SieveReport` |
| `numlab.jacobi`      | `initial_plate`, `jacobi_step`, `run_jacobi`, `JacobiResult`                                                |
| `numlab.sor`         | `initial_grid`, `relaxed_value`, `sor_sweep`, `run_sor`, `SorConfig`, `SorResult`                           |
| `numlab.mandelbrot`  | `escape_time`, `iteration_grid`, `wave_palette`, `fixed_palette`, `tile_color_index`, `render_image`, `View` |

Invalid arguments (a limit that is too small, a grid with no interior, a
heat source outside the grid, an unknown variant or mode) raise
`ValueError`.

## What it does not do

- The Mandelbrot renderer writes an image file; it does not open a window
  or draw on screen.
- Work runs in a single process using NumPy array operations; there is no
  option to choose a number of threads.
- `wave_palette` builds a sine-wave colour table, but no rendering mode
  uses it.

## Requirements

Python 3.10 or later, with NumPy and Pillow.
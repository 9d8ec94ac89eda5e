"""Prime counting with the sieve of Eratosthenes.

Three variants are offered:

* ``odd``: the table holds only the odd numbers from 3 up to ``n``
  (index ``k`` stands for ``2k + 3``); primes up to and including ``n``
  are counted.
* ``blocked``: the same odd-only table, with multiples struck out in
  cache-sized blocks.
* ``full``: a table entry for every number below ``n``; primes strictly
  below ``n`` are counted.
"""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass

import numpy as np

DEFAULT_N = 1_000_000_000
CACHE_SIZE = 32768
VARIANTS = ("odd", "blocked", "full")


@dataclass(frozen=True)
class SieveReport:
    """Outcome of one timed sieve run."""

    variant: str
    n: int
    primes: int
    seconds: float
    memory_bytes: int
    block_size: int | None = None

    @property
    def throughput(self) -> float:
        """Primes found per second."""
        if self.seconds <= 0:
            return math.inf
        return self.primes / self.seconds

    @property
    def memory_mb(self) -> float:
        """Size of the sieve table in mebibytes."""
        return self.memory_bytes / (1024.0 * 1024.0)


def _max_odd(n: int) -> int:
    return n - 1 if n % 2 == 0 else n


def odd_count(n: int) -> int:
    """Number of odd numbers from 3 up to ``n``."""
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    return (_max_odd(n) - 1) // 2


def _odd_candidates(n: int):
    """Yield the odd numbers from 3 up to the integer square root of ``n``."""
    return range(3, math.isqrt(n) + 1, 2)


def odd_sieve(n: int) -> np.ndarray:
    """Return the odd-only sieve table: entry ``k`` tells whether ``2k + 3`` is prime."""
    sieve = np.ones(odd_count(n), dtype=bool)
    for i in _odd_candidates(n):
        index = (i - 3) // 2
        if index >= sieve.size or not sieve[index]:
            continue
        sieve[(i * i - 3) // 2 :: i] = False
    return sieve


def count_primes(n: int) -> int:
    """Count the primes up to and including ``n``."""
    return int(np.count_nonzero(odd_sieve(n))) + 1


def count_primes_blocked(n: int, block_size: int = CACHE_SIZE) -> int:
    """Count the primes up to and including ``n``, striking multiples block by block."""
    if block_size < 1:
        raise ValueError(f"block size must be positive, got {block_size}")
    sieve = np.ones(odd_count(n), dtype=bool)
    max_odd = _max_odd(n)
    for i in _odd_candidates(n):
        index = (i - 3) // 2
        if index >= sieve.size or not sieve[index]:
            continue
        span = block_size * 2 * i
        for block_start in range(i * i, max_odd + 1, span):
            block_end = min(block_start + span, max_odd)
            sieve[(block_start - 3) // 2 : (block_end - 3) // 2 + 1 : i] = False
    return int(np.count_nonzero(sieve)) + 1


def count_primes_full(n: int) -> int:
    """Count the primes strictly below ``n`` with a table entry for every number."""
    if n <= 2:
        raise ValueError("n must be greater than 2")
    is_prime = np.ones(n, dtype=bool)
    is_prime[:2] = False
    for i in _odd_candidates(n):
        if is_prime[i]:
            is_prime[i * i :: 2 * i] = False
    return 1 + int(np.count_nonzero(is_prime[3::2]))


def run(n: int = DEFAULT_N, variant: str = "odd", block_size: int = CACHE_SIZE) -> SieveReport:
    """Run one sieve variant and time it."""
    if variant not in VARIANTS:
        raise ValueError(f"unknown variant {variant!r}; expected one of {', '.join(VARIANTS)}")
    start = time.perf_counter()
    if variant == "odd":
        primes = count_primes(n)
        memory = odd_count(n)
    elif variant == "blocked":
        primes = count_primes_blocked(n, block_size)
        memory = odd_count(n)
    else:
        primes = count_primes_full(n)
        memory = n
    seconds = time.perf_counter() - start
    return SieveReport(
        variant=variant,
        n=n,
        primes=primes,
        seconds=seconds,
        memory_bytes=memory,
        block_size=block_size if variant == "blocked" else None,
    )


def _print_report(report: SieveReport) -> None:
    if report.variant == "full":
        print(f"Total de primos encontrados: {report.primes}")
        print(f"Tempo total de execução: {report.seconds:.3f} segundos")
        return
    print(
        f"Total de primos: {report.primes} | "
        f"Tempo total do algoritmo: {report.seconds:.3f} segundos"
    )
    print(f"Throughput: {report.throughput:.2f} números/segundo")
    print(f"Eficiência de memória: {report.memory_mb:.2f} MB")
    if report.block_size is not None:
        print(f"Tamanho do bloco: {report.block_size} elementos")


def main(argv: list[str] | None = None) -> int:
    """Count primes from the command line."""
    parser = argparse.ArgumentParser(
        prog="numlab-sieve", description="Count primes with the sieve of Eratosthenes."
    )
    parser.add_argument("n", nargs="?", type=int, default=None, help="upper limit")
    parser.add_argument("--variant", choices=VARIANTS, default="odd")
    parser.add_argument("--block-size", type=int, default=CACHE_SIZE)
    args = parser.parse_args(argv)

    n = DEFAULT_N if args.n is None else args.n
    if args.variant == "full":
        if args.n is None:
            print(f"Sem parâmetros, assumindo n = {DEFAULT_N}")
        elif n <= 2:
            print("Erro: n deve ser maior que 2")
            return 1
        print(f"Executando crivo para n = {n}")

    try:
        report = run(n, args.variant, args.block_size)
    except (ValueError, MemoryError) as exc:
        print(f"Erro: {exc}")
        return 1
    _print_report(report)
    return 0
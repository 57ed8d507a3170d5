"""
Parallel complexity enumeration for counting_components.

For a fixed signed permutation, every coprime pair (m, n) with
m + n <= complexity is an independent piece of work: one full component
count for the multicurve surgered from m copies of δ and n copies of γ.
The pairs are known before any tracing starts, so they are handed to a
worker pool as a flat batch and the results are reassembled by label.

COMPLEXITY:
- One pair costs O(n + k*m) steps of the surgery transition
- The number of pairs up to complexity c grows like 3c²/π²
"""

from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple
import logging
import os
import time

from .numeric import coprime_pairs
from .permutation import SignedPermutation
from .tracer import count_components_with_orientability

_logger = logging.getLogger(__name__)

Pair = Tuple[int, int]
Counts = Tuple[int, int]


@dataclass(frozen=True)
class EnumerationResult:
    """
    Component counts for every coprime (m, n) up to a complexity.

    Attributes:
        complexity: Bound on m + n
        rows: ((m, n), (two_sided, one_sided)) in enumeration order
    """
    complexity: int
    rows: Tuple[Tuple[Pair, Counts], ...]

    def pairs(self) -> List[Pair]:
        return [pair for pair, _ in self.rows]

    def as_dict(self) -> Dict[Pair, Counts]:
        return dict(self.rows)

    def two_sided_pairs(self) -> List[Pair]:
        """Pairs whose multicurve has no one-sided component."""
        return [pair for pair, (_, one_sided) in self.rows if one_sided == 0]

    def to_list(self) -> List[Tuple[Pair, Counts]]:
        return list(self.rows)

    def __iter__(self) -> Iterator[Tuple[Pair, Counts]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


def _count_pair(perm: SignedPermutation, m: int, n: int) -> Tuple[Pair, Counts]:
    """Work item run by each worker. Module level so process pools can pickle it."""
    return (m, n), count_components_with_orientability(perm, m, n)


class ComplexityEnumerator:
    """
    Runs the component count over all coprime (m, n) pairs in parallel.

    Threads are the default. Pass use_processes=True to run on a process
    pool instead, which sidesteps the GIL for large complexities.
    """

    def __init__(self, num_workers: int = None, use_processes: bool = False):
        """
        Initialize the enumerator.

        Args:
            num_workers: Number of workers (default: CPU count)
            use_processes: Use a ProcessPoolExecutor instead of threads
        """
        self.num_workers = num_workers or os.cpu_count() or 4
        self.use_processes = use_processes
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {self.num_workers}")

    def _executor(self):
        if self.use_processes:
            return ProcessPoolExecutor(max_workers=self.num_workers)
        return ThreadPoolExecutor(max_workers=self.num_workers)

    def count_all(self, perm: SignedPermutation, complexity: int) -> EnumerationResult:
        """
        Count two- and one-sided components for every coprime (m, n)
        with m + n <= complexity.
        """
        pairs = list(coprime_pairs(complexity))
        if not pairs:
            return EnumerationResult(complexity, ())

        start = time.perf_counter()
        results: Dict[Pair, Counts] = {}

        with self._executor() as executor:
            futures = {
                executor.submit(_count_pair, perm, m, n): (m, n)
                for m, n in pairs
            }
            for future in as_completed(futures):
                pair, counts = future.result()
                _logger.debug("(m, n)=%s: two_sided=%d one_sided=%d", pair, counts[0], counts[1])
                results[pair] = counts

        elapsed = (time.perf_counter() - start) * 1000
        _logger.info(
            "evaluated %d pairs up to complexity %d on %d %s in %.2fms",
            len(pairs), complexity, self.num_workers,
            "processes" if self.use_processes else "threads", elapsed,
        )
        return EnumerationResult(complexity, tuple((pair, results[pair]) for pair in pairs))

    def two_sided(self, perm: SignedPermutation, complexity: int) -> List[Pair]:
        """Pairs up to the complexity whose multicurve is entirely two-sided."""
        return self.count_all(perm, complexity).two_sided_pairs()


def count_components_upto_complexity(perm: SignedPermutation, complexity: int,
                                     num_workers: Optional[int] = None) -> List[Tuple[Pair, Counts]]:
    """
    Component counts for all coprime (m, n) with m + n <= complexity.

    Returns:
        [((m, n), (two_sided, one_sided)), ...]
    """
    return ComplexityEnumerator(num_workers).count_all(perm, complexity).to_list()


def two_sided_multicurves_upto_complexity(perm: SignedPermutation, complexity: int,
                                          num_workers: Optional[int] = None) -> List[Pair]:
    """All coprime (m, n) with m + n <= complexity giving only two-sided components."""
    return ComplexityEnumerator(num_workers).two_sided(perm, complexity)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    perm = SignedPermutation((1, 2, 0), frozenset({1}))
    print(f"Surgery enumeration for {perm}")
    print("=" * 60)

    for (m, n), (two_sided, one_sided) in count_components_upto_complexity(perm, 8):
        print(f"  m={m:2d} n={n:2d}: {two_sided} two-sided, {one_sided} one-sided")

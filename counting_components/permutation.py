"""
Signed permutation representation for counting_components.

A signed permutation records how a two-sided curve δ and a curve γ meet:
`perm` says which crossing each strand returns to, and `flips` marks the
strands that come back with reversed local orientation.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple
import operator

from .errors import InvalidEncoding


def _as_index(value, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidEncoding(f"{what}: expected an integer, got {type(value).__name__}") from None


@dataclass(frozen=True)
class SignedPermutation:
    """
    A permutation of {0, ..., k-1} together with a set of flipped indices.

    Instances are immutable and hashable, so a single one can be shared by
    every worker of an enumeration without locking.

    Attributes:
        perm: Images of 0..k-1 under the permutation
        flips: Indices whose strand returns with reversed orientation
    """
    perm: Tuple[int, ...]
    flips: FrozenSet[int] = frozenset()
    _inverse: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        perm = tuple(_as_index(v, "Invalid permutation") for v in self.perm)
        k = len(perm)

        inverse = [k] * k
        for index, value in enumerate(perm):
            if value < 0 or value >= k or inverse[value] != k:
                raise InvalidEncoding(f"Invalid permutation: {list(perm)}")
            inverse[value] = index

        flips = frozenset(_as_index(v, "Invalid flip set") for v in self.flips)
        for value in flips:
            if value < 0 or value >= k:
                raise InvalidEncoding(f"Invalid flip set: {sorted(flips)} for permutation of size {k}")

        object.__setattr__(self, "perm", perm)
        object.__setattr__(self, "flips", flips)
        object.__setattr__(self, "_inverse", tuple(inverse))

    @classmethod
    def identity(cls, k: int, flips: Iterable[int] = ()) -> 'SignedPermutation':
        """The identity pattern on k crossings."""
        return cls(tuple(range(k)), frozenset(flips))

    @property
    def k(self) -> int:
        """Geometric intersection number."""
        return len(self.perm)

    def _check(self, i: int) -> int:
        i = _as_index(i, "Invalid index")
        if i < 0 or i >= len(self.perm):
            raise InvalidEncoding(f"Index {i} out of range for permutation of size {len(self.perm)}")
        return i

    def apply(self, i: int) -> int:
        return self.perm[self._check(i)]

    def pull_back(self, i: int) -> int:
        """Preimage of i under the permutation."""
        return self._inverse[self._check(i)]

    def is_flipped(self, i: int) -> bool:
        return self._check(i) in self.flips

    def __call__(self, i: int) -> Tuple[int, int]:
        """
        Follow strand i back through the permutation.

        Returns:
            (preimage of i, 1 if strand i is flipped else 0)
        """
        i = self._check(i)
        return self._inverse[i], 1 if i in self.flips else 0

    def __len__(self) -> int:
        return len(self.perm)

    def __repr__(self) -> str:
        parts = []
        for i, image in enumerate(self._inverse):
            sign = "-" if i in self.flips else ""
            parts.append(f"{i} -> {sign}{image}")
        return "[" + ", ".join(parts) + "]"

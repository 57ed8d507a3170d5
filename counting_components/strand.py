"""
Strand addressing for counting_components.

A strand is one arc of the surgered diagram. There are two kinds:

- Transverse(crossing): an arc running across the copies of δ
- PermutationDirection(track, replica): an arc following the permutation
  along one of its tracks, on a given replica

For m copies of δ, n copies of γ and k crossings the valid strands are
Transverse(0..n-1) and PermutationDirection(0..k-1, 0..m-1). StrandSpace
numbers them densely: transverse strands first, then permutation-direction
strands in (track, replica) order.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator, Tuple
import operator

from .errors import InvalidEncoding, OutOfRangeStrand


_KIND_ALIASES = {
    "t": "transverse",
    "transverse": "transverse",
    "p": "permutation",
    "permutation": "permutation",
}


def _check_index(value, name: str) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise InvalidEncoding(f"Strand {name} must be an integer, got {type(value).__name__}") from None
    if value < 0:
        raise InvalidEncoding(f"Strand {name} must be non-negative, got {value}")
    return value


@total_ordering
class Strand:
    """
    Base class of the two strand kinds.

    Strands order all transverse strands before all permutation-direction
    strands, then by their indices.
    """
    __slots__ = ()

    def sort_key(self) -> Tuple[int, int, int]:
        raise NotImplementedError

    def __lt__(self, other):
        if not isinstance(other, Strand):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @staticmethod
    def create(kind: str, primary_index: int, secondary_index: int = 0) -> 'Strand':
        """
        Build a strand from a kind name and indices.

        Args:
            kind: "transverse" / "t" or "permutation" / "p"
            primary_index: crossing (transverse) or track (permutation)
            secondary_index: replica, only for permutation strands; must be
                0 for transverse strands
        """
        resolved = _KIND_ALIASES.get(kind) if isinstance(kind, str) else None
        if resolved == "transverse":
            if secondary_index != 0:
                raise InvalidEncoding(
                    f"Transverse strands take a single index, got replica {secondary_index!r}"
                )
            return Transverse(primary_index)
        if resolved == "permutation":
            return PermutationDirection(primary_index, secondary_index)
        raise InvalidEncoding(f"Invalid strand type {kind!r}: only 't' and 'p' allowed")


@dataclass(frozen=True)
class Transverse(Strand):
    """Arc crossing the copies of δ at the given position."""
    crossing: int

    def __post_init__(self):
        object.__setattr__(self, "crossing", _check_index(self.crossing, "crossing"))

    def sort_key(self) -> Tuple[int, int, int]:
        return (0, self.crossing, 0)

    def __repr__(self) -> str:
        return f"Transverse({self.crossing})"


@dataclass(frozen=True)
class PermutationDirection(Strand):
    """Arc following permutation track `track` on copy `replica`."""
    track: int
    replica: int

    def __post_init__(self):
        object.__setattr__(self, "track", _check_index(self.track, "track"))
        object.__setattr__(self, "replica", _check_index(self.replica, "replica"))

    def sort_key(self) -> Tuple[int, int, int]:
        return (1, self.track, self.replica)

    def __repr__(self) -> str:
        return f"PermutationDirection({self.track}, {self.replica})"


@dataclass(frozen=True)
class StrandSpace:
    """
    All strands of one (m, n, k) instance and their dense addresses.

    Attributes:
        delta_copies: m, number of parallel copies of δ
        gamma_copies: n, number of parallel copies of γ
        crossings: k, size of the signed permutation
    """
    delta_copies: int
    gamma_copies: int
    crossings: int

    def __post_init__(self):
        for name in ("delta_copies", "gamma_copies"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.crossings, int) or self.crossings < 0:
            raise ValueError(f"crossings must be a non-negative integer, got {self.crossings!r}")

    @property
    def permutation_span(self) -> int:
        """Number of permutation-direction strands, k * m."""
        return self.crossings * self.delta_copies

    @property
    def size(self) -> int:
        return self.gamma_copies + self.permutation_span

    def contains(self, strand: Strand) -> bool:
        if isinstance(strand, Transverse):
            return strand.crossing < self.gamma_copies
        if isinstance(strand, PermutationDirection):
            return strand.track < self.crossings and strand.replica < self.delta_copies
        return False

    def validate(self, strand: Strand) -> Strand:
        if not self.contains(strand):
            raise OutOfRangeStrand(
                f"{strand!r} is not a strand for m={self.delta_copies}, "
                f"n={self.gamma_copies}, k={self.crossings}",
                strand,
            )
        return strand

    def index_of(self, strand: Strand) -> int:
        self.validate(strand)
        if isinstance(strand, Transverse):
            return strand.crossing
        return self.gamma_copies + self.absolute_position(strand)

    def strand_at(self, index: int) -> Strand:
        if index < 0 or index >= self.size:
            raise OutOfRangeStrand(f"Address {index} out of range for strand space of size {self.size}", index)
        if index < self.gamma_copies:
            return Transverse(index)
        return self.from_absolute(index - self.gamma_copies)

    def absolute_position(self, strand: PermutationDirection) -> int:
        """Position of a permutation-direction strand among all k * m of them."""
        return self.delta_copies * strand.track + strand.replica

    def from_absolute(self, position: int) -> PermutationDirection:
        track, replica = divmod(position, self.delta_copies)
        return PermutationDirection(track, replica)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Strand]:
        for index in range(self.size):
            yield self.strand_at(index)

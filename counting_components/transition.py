"""
Surgery transition for counting_components.

After surgery every crossing between a copy of δ and a copy of γ is
resolved by turning left with respect to a fixed direction on γ. Following
the resulting curve from one strand to the next gives a permutation of the
strand space. This module computes that permutation one step at a time.

With N = k * m permutation-direction strands:

- PermutationDirection(t, r): if t is flipped the replica is reflected
  (r -> m - 1 - r) and the step counts one orientation flip. The track is
  pulled back through the permutation and the strand advances n positions
  along the k * m permutation-direction positions. Running off the end
  lands on a transverse strand, counted from the far side.
- Transverse(i): advances N positions along the n transverse strands, and
  running off the end lands on a permutation-direction strand counted from
  the near side.
"""

from typing import Tuple

from .permutation import SignedPermutation
from .strand import Strand, StrandSpace
from .errors import OutOfRangeStrand


class SurgeryTransition:
    """
    The next-strand map for one (perm, m, n) instance.

    The map is a bijection of the strand space and depends only on its
    constructor arguments. Orientation flips are reported alongside each
    step but not stored.
    """

    def __init__(self, perm: SignedPermutation, m: int, n: int):
        self.perm = perm
        self.space = StrandSpace(m, n, perm.k)
        self._m = m
        self._n = n
        self._span = self.space.permutation_span

    @property
    def size(self) -> int:
        return self.space.size

    def step(self, strand: Strand) -> Tuple[Strand, bool]:
        """
        Follow the surgered curve from `strand` to the next strand.

        Returns:
            (next_strand, flipped)

        Raises:
            OutOfRangeStrand: if `strand` is not part of this instance
        """
        index, flipped = self.step_index(self.space.index_of(strand))
        return self.space.strand_at(index), flipped

    def step_index(self, index: int) -> Tuple[int, bool]:
        """Same as step() on dense addresses."""
        m, n, span = self._m, self._n, self._span

        if index < 0 or index >= n + span:
            raise OutOfRangeStrand(f"Address {index} out of range for strand space of size {n + span}", index)

        if index < n:
            # Transverse strand
            if index + span < n:
                return index + span, False
            return n + (n - index - 1), False

        track, replica = divmod(index - n, m)
        flipped = track in self.perm.flips
        if flipped:
            replica = m - replica - 1

        position = m * self.perm.pull_back(track) + replica
        if position + n < span:
            return n + position + n, flipped
        return span - position - 1, flipped

    def __call__(self, strand: Strand) -> Strand:
        return self.step(strand)[0]

    def __repr__(self) -> str:
        return f"SurgeryTransition(perm={self.perm!r}, m={self._m}, n={self._n})"


def get_next_major_strand(perm: SignedPermutation, m: int, n: int, strand: Strand) -> Strand:
    """
    Next strand reached from `strand` on the multicurve obtained by surgering
    m copies of δ with n copies of γ.

    Raises:
        OutOfRangeStrand: if `strand` does not exist for (m, n, len(perm))
    """
    return SurgeryTransition(perm, m, n).step(strand)[0]

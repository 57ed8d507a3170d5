"""
Component tracing for counting_components.

The surgery transition is a permutation of the strand space, so its cycles
are exactly the components of the surgered multicurve. A component is
two-sided when an even number of orientation flips is met going once
around it, and one-sided otherwise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple
import logging

import numpy as np

from .errors import InconsistentTransition
from .permutation import SignedPermutation
from .strand import Strand, Transverse
from .transition import SurgeryTransition

_logger = logging.getLogger(__name__)


class Sidedness(Enum):
    TWO_SIDED = 0
    ONE_SIDED = 1


@dataclass(frozen=True)
class Component:
    """
    One closed curve of the surgered multicurve.

    Attributes:
        start: Strand the trace started from
        length: Number of strands in the cycle
        flips: Orientation flips met going once around
    """
    start: Strand
    length: int
    flips: int

    @property
    def sidedness(self) -> Sidedness:
        return Sidedness.ONE_SIDED if self.flips % 2 else Sidedness.TWO_SIDED

    @property
    def is_two_sided(self) -> bool:
        return self.sidedness is Sidedness.TWO_SIDED


class ComponentTracer:
    """
    Partitions the strand space of one (perm, m, n) instance into cycles.

    Each tracer owns its visited arena, so separate tracers never share
    mutable state. A tracer is meant to be used for one full traversal;
    call reset() to start over.
    """

    def __init__(self, perm: SignedPermutation, m: int, n: int):
        self.transition = SurgeryTransition(perm, m, n)
        self.space = self.transition.space
        self.visited = np.zeros(self.space.size, dtype=bool)

    def reset(self):
        self.visited[:] = False

    def _trace(self, start: int) -> Tuple[int, int]:
        """Walk the cycle through address `start`, marking it visited."""
        size = self.space.size
        step = self.transition.step_index

        self.visited[start] = True
        length = 1
        flips = 0
        current, flipped = step(start)
        flips += flipped

        while current != start:
            if self.visited[current] or length >= size:
                _logger.error(
                    "cycle from %r revisited %r before closing (m=%d, n=%d)",
                    self.space.strand_at(start), self.space.strand_at(current),
                    self.space.delta_copies, self.space.gamma_copies,
                )
                raise InconsistentTransition(
                    f"Trace from {self.space.strand_at(start)!r} reached "
                    f"{self.space.strand_at(current)!r} twice without closing",
                    start=self.space.strand_at(start),
                    at=self.space.strand_at(current),
                )
            self.visited[current] = True
            length += 1
            current, flipped = step(current)
            flips += flipped

        return length, flips

    def trace_from(self, strand: Strand) -> Component:
        """
        Trace the component containing `strand`.

        Raises:
            ValueError: if `strand` was already traced by this tracer
        """
        start = self.space.index_of(strand)
        if self.visited[start]:
            raise ValueError(f"{strand!r} was already traced; call reset() first")
        length, flips = self._trace(start)
        return Component(strand, length, flips)

    def components(self) -> Iterator[Component]:
        """Yield every not yet visited component, in address order of their first strand."""
        for start in range(self.space.size):
            if self.visited[start]:
                continue
            length, flips = self._trace(start)
            component = Component(self.space.strand_at(start), length, flips)
            _logger.debug("component %r: length=%d flips=%d", component.start, length, flips)
            yield component

    def count(self) -> Tuple[int, int]:
        """
        Classify every component.

        Returns:
            (two_sided, one_sided)
        """
        two_sided = 0
        one_sided = 0
        for component in self.components():
            if component.is_two_sided:
                two_sided += 1
            else:
                one_sided += 1
        return two_sided, one_sided


def count_components_with_orientability(perm: SignedPermutation, m: int, n: int) -> Tuple[int, int]:
    """
    Count the components of the multicurve obtained by surgering m copies
    of δ with n copies of γ.

    Returns:
        (two_sided, one_sided)
    """
    return ComponentTracer(perm, m, n).count()


def _component_through_origin(perm: SignedPermutation, m: int, n: int) -> Tuple[Component, int]:
    tracer = ComponentTracer(perm, m, n)
    return tracer.trace_from(Transverse(0)), tracer.space.size


def has_one_component(perm: SignedPermutation, m: int, n: int) -> bool:
    """True when the surgered multicurve is connected."""
    component, size = _component_through_origin(perm, m, n)
    return component.length == size


def single_component_sidedness(perm: SignedPermutation, m: int, n: int) -> Optional[Sidedness]:
    """
    Sidedness of the surgered curve when it is connected.

    Returns None if the multicurve has more than one component.
    """
    component, size = _component_through_origin(perm, m, n)
    if component.length != size:
        return None
    return component.sidedness

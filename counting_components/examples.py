"""
Examples demonstrating counting_components usage.

Run with: python -m counting_components.examples
"""

import logging

from counting_components.permutation import SignedPermutation
from counting_components.strand import Transverse
from counting_components.transition import get_next_major_strand
from counting_components.tracer import (
    ComponentTracer,
    count_components_with_orientability,
    has_one_component,
    single_component_sidedness,
)
from counting_components.enumerator import (
    ComplexityEnumerator,
    two_sided_multicurves_upto_complexity,
)


def example_single_crossing():
    """One crossing, with and without an orientation flip."""
    print("=" * 60)
    print("Example 1: Single Crossing")
    print("=" * 60)

    for flips in (frozenset(), frozenset({0})):
        perm = SignedPermutation((0,), flips)
        counts = count_components_with_orientability(perm, 1, 1)
        print(f"Pattern {perm}: (two-sided, one-sided) = {counts}")
        print(f"Connected: {has_one_component(perm, 1, 1)}, sidedness: {single_component_sidedness(perm, 1, 1)}")
    print()


def example_walk_strands():
    """Following the surgered curve strand by strand."""
    print("=" * 60)
    print("Example 2: Walking the Strands")
    print("=" * 60)

    perm = SignedPermutation((1, 2, 0), frozenset({1}))
    m, n = 2, 1

    strand = Transverse(0)
    path = [strand]
    while True:
        strand = get_next_major_strand(perm, m, n, strand)
        if strand == path[0]:
            break
        path.append(strand)

    print(f"Pattern {perm}, m={m}, n={n}")
    print(" -> ".join(repr(s) for s in path))
    print()


def example_components():
    """Listing every component of one multicurve."""
    print("=" * 60)
    print("Example 3: Components")
    print("=" * 60)

    perm = SignedPermutation((1, 0), frozenset({0}))
    tracer = ComponentTracer(perm, 3, 2)
    for component in tracer.components():
        print(f"  from {component.start!r}: length {component.length}, {component.sidedness.name}")
    print()


def example_enumeration():
    """Sweeping all coprime (m, n) up to a complexity."""
    print("=" * 60)
    print("Example 4: Complexity Enumeration")
    print("=" * 60)

    perm = SignedPermutation((1, 2, 0), frozenset({1}))
    result = ComplexityEnumerator().count_all(perm, 7)

    for (m, n), (two_sided, one_sided) in result:
        print(f"  m={m} n={n}: {two_sided} two-sided, {one_sided} one-sided")
    print(f"All two-sided: {two_sided_multicurves_upto_complexity(perm, 7)}")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    example_single_crossing()
    example_walk_strands()
    example_components()
    example_enumeration()

# physics_engine.py

"""
Physics update engine.

Advances a ParticleSystem by exactly one tick under a set of universe
constants. The engine keeps no state of its own: everything it needs is the
system passed in and the constants value for this tick. Randomness is never
used while stepping, so identical inputs give identical results.

A step runs four phases in order:
1. Cosmological force: push away from (or pull toward) the domain center.
2. Pairwise forces: gravity plus fine-structure clumping, or pure repulsion.
3. Explicit Euler integration, one unit of time per tick.
4. Boundary reflection with damping.
"""

import math
import numpy as np
import numba
from collections import namedtuple
from constants import (
    BASELINE_CONSTANT,
    BOUNDS_DAMPING,
    CLUMPING_STRENGTH,
    COSMOLOGICAL_SCALE,
    GRAVITY_CONSTANT,
    INTERACTION_RANGE,
    MIN_INTERACTION_DIST_SQ,
    REPULSION_THRESHOLD,
)

_INTERACTION_RANGE_SQ = INTERACTION_RANGE * INTERACTION_RANGE


class UniverseConstants(namedtuple('UniverseConstants', ['cosmological', 'higgs_mass', 'fine_structure'],
                                   defaults=(BASELINE_CONSTANT, BASELINE_CONSTANT, BASELINE_CONSTANT))):
    """
    The three tunable factors driving the simulation. 1.0 is the neutral
    baseline for each.

    - cosmological: > 1.0 expands away from the center, < 1.0 contracts.
    - higgs_mass: linear scale on pairwise gravity.
    - fine_structure: clumping strength, peaks at 1.0; above 1.2 the pairwise
      force becomes pure repulsion.
    """
    __slots__ = ()

    @classmethod
    def from_config(cls, section):
        """Builds constants from a config dict, using the baseline for missing keys."""
        section = section or {}
        return cls(
            cosmological=float(section.get('cosmological', BASELINE_CONSTANT)),
            higgs_mass=float(section.get('higgs_mass', BASELINE_CONSTANT)),
            fine_structure=float(section.get('fine_structure', BASELINE_CONSTANT)),
        )


# --- JIT-Compiled Force Functions ---
# Compiled by Numba in nopython mode; they operate only on NumPy arrays and
# scalars. fastmath is left off so the threshold comparisons stay exact.

@numba.jit(nopython=True)
def fine_structure_effect(fine_structure):
    """Triangular response: 1.0 at fine_structure == 1.0, 0.0 at 0 and 2, negative beyond."""
    return 1.0 - abs(1.0 - fine_structure)


@numba.jit(nopython=True)
def is_interacting(dist_sq):
    """True if a pair at this squared distance exchanges force."""
    return dist_sq >= MIN_INTERACTION_DIST_SQ and dist_sq < _INTERACTION_RANGE_SQ


@numba.jit(nopython=True)
def _pair_force_jit(dx, dy, dist_sq, higgs_mass, fine_structure):
    dist = math.sqrt(dist_sq)
    ux = dx / dist
    uy = dy / dist

    gravity_force = (GRAVITY_CONSTANT / dist_sq) * higgs_mass
    fx = ux * gravity_force
    fy = uy * gravity_force

    # Hard switch: above the threshold gravity is inverted and clumping is dropped.
    if fine_structure > REPULSION_THRESHOLD:
        return -fx, -fy

    clumping_force = (1.0 / dist) * fine_structure_effect(fine_structure) * CLUMPING_STRENGTH
    return fx + ux * clumping_force, fy + uy * clumping_force


@numba.jit(nopython=True)
def pairwise_force(dx, dy, higgs_mass, fine_structure):
    """
    Force on particle i from particle j, where (dx, dy) = pos_j - pos_i.
    Particle j receives the negation. Returns (0.0, 0.0) for pairs outside
    the interaction window.
    """
    dist_sq = dx * dx + dy * dy
    if not is_interacting(dist_sq):
        return 0.0, 0.0
    return _pair_force_jit(dx, dy, dist_sq, higgs_mass, fine_structure)


@numba.jit(nopython=True)
def _apply_pairwise_forces_jit(positions, velocities, higgs_mass, fine_structure):
    """
    Numba-accelerated O(n^2) pairwise pass. Each unordered pair is visited
    once, ascending i then ascending j > i. Velocities are updated in place
    as pairs are processed; positions are only read.
    """
    n = positions.shape[0]
    for i in range(n):
        p1_x = positions[i, 0]
        p1_y = positions[i, 1]
        for j in range(i + 1, n):
            dx = positions[j, 0] - p1_x
            dy = positions[j, 1] - p1_y
            dist_sq = dx * dx + dy * dy

            if not is_interacting(dist_sq):
                continue

            fx, fy = _pair_force_jit(dx, dy, dist_sq, higgs_mass, fine_structure)

            # Newton's third law: equal and opposite.
            velocities[i, 0] += fx
            velocities[i, 1] += fy
            velocities[j, 0] -= fx
            velocities[j, 1] -= fy


def apply_cosmological_force(positions, velocities, center, cosmological):
    """
    Vectorized expansion/contraction. The push is proportional to each
    particle's offset from the center and is exactly zero at the baseline.
    """
    velocities += (positions - center) * (cosmological - 1.0) * COSMOLOGICAL_SCALE


def apply_pairwise_forces(positions, velocities, higgs_mass, fine_structure):
    _apply_pairwise_forces_jit(positions, velocities, float(higgs_mass), float(fine_structure))


def integrate(positions, velocities):
    """Explicit Euler with a unit time step."""
    positions += velocities


def reflect_at_bounds(positions, velocities, bounds):
    """
    Vectorized boundary reflection. Each axis is handled independently: a
    particle outside [0, bound] has that velocity component multiplied by
    BOUNDS_DAMPING and its position clamped back into range.
    """
    for axis in range(2):
        bound = bounds[axis]
        coords = positions[:, axis]
        out_mask = (coords < 0) | (coords > bound)
        velocities[out_mask, axis] *= BOUNDS_DAMPING
        positions[out_mask, axis] = np.clip(coords[out_mask], 0.0, bound)


def step(system, constants: UniverseConstants):
    """
    Advances `system` by one tick under `constants`, mutating it in place.

    Data Contract:
    - Inputs:
        - system (ParticleSystem): The state to advance. Not retained.
        - constants (UniverseConstants): Any object with cosmological,
          higgs_mass and fine_structure attributes.
    - Outputs: None.
    - Side Effects: Updates system.velocities and system.positions.
    - Invariants: Every position lies within [0, width] x [0, height]
      afterwards. Constants are not validated; non-finite values propagate.
    """
    positions = system.positions
    velocities = system.velocities

    apply_cosmological_force(positions, velocities, system.center, constants.cosmological)
    apply_pairwise_forces(positions, velocities, constants.higgs_mass, constants.fine_structure)
    integrate(positions, velocities)
    reflect_at_bounds(positions, velocities, system.bounds)


def snapshot(system) -> np.ndarray:
    """Read-only (n, 2) copy of particle positions for a renderer."""
    positions = system.positions.copy()
    positions.setflags(write=False)
    return positions

# particle_system.py

import numbers
import logging
import numpy as np
from collections import namedtuple
from particle import Particle
import constants

logger = logging.getLogger("universe_sim")

# The (width, height) of the rectangular simulation domain.
Bounds = namedtuple('Bounds', ['width', 'height'])


class InvalidArgumentError(ValueError):
    """Raised for a negative particle count or non-positive bounds."""


def _validate_count(count):
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise InvalidArgumentError(f"Particle count must be an integer, got {count!r}.")
    if count < 0:
        raise InvalidArgumentError(f"Particle count must be non-negative, got {count}.")
    return int(count)


def _validate_bounds(bounds):
    try:
        width, height = bounds
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Bounds must be a (width, height) pair, got {bounds!r}.") from None

    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidArgumentError(f"Bounds {name} must be a real number, got {value!r}.")
        # NaN fails this comparison as well.
        if not value > 0:
            raise InvalidArgumentError(f"Bounds {name} must be positive, got {value}.")
    return Bounds(float(width), float(height))


class ParticleSystem:
    """
    Holds the state of all particles in the simulation using NumPy arrays.

    This class only stores and initializes state; all motion is computed by
    physics_engine.step(), which mutates the arrays in place.

    Data Contract:
    - Inputs:
        - num_particles (int): The number of particles to create (>= 0).
        - bounds (tuple): The (width, height) of the simulation area (> 0).
        - rng (np.random.Generator): Random source for initial velocities.
          A fresh unseeded generator is used if omitted.
    - Outputs: None. This class holds mutable state.
    - Side Effects: Manages the lifecycle of all particle data.
    - Invariants: positions and velocities have shape (n, 2), masses has
      shape (n,), all float64. Particle order is stable between resets.
    """
    def __init__(self, num_particles: int, bounds: tuple, rng: np.random.Generator = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.positions = np.zeros((0, 2), dtype=float)
        self.velocities = np.zeros((0, 2), dtype=float)
        self.masses = np.zeros(0, dtype=float)
        self.bounds = np.array(_validate_bounds(bounds), dtype=float)
        self.reset(num_particles, bounds)

    @property
    def num_particles(self) -> int:
        return self.positions.shape[0]

    def __len__(self):
        return self.num_particles

    @property
    def center(self) -> np.ndarray:
        """The geometric center of the current bounds."""
        return self.bounds / 2.0

    @property
    def particles(self) -> list:
        """Per-particle views in iteration order."""
        return [Particle(self, i) for i in range(self.num_particles)]

    def reset(self, count: int, bounds: tuple):
        """
        Discards all particles and creates `count` new ones at the center of
        `bounds`, each with velocity components drawn uniformly from
        [-INITIAL_SPEED, +INITIAL_SPEED] ("Big Bang" dispersal).

        Raises InvalidArgumentError for a negative/non-integer count or
        non-positive bounds. The existing state is untouched on error.
        """
        count = _validate_count(count)
        new_bounds = _validate_bounds(bounds)

        self.bounds = np.array(new_bounds, dtype=float)
        self.positions = np.tile(self.center, (count, 1))
        self.velocities = self.rng.uniform(
            -constants.INITIAL_SPEED, constants.INITIAL_SPEED, (count, 2)
        )
        self.masses = np.full(count, constants.PARTICLE_MASS, dtype=float)

        logger.info(
            f"ParticleSystem reset with {count} particles in "
            f"{new_bounds.width:g}x{new_bounds.height:g} bounds."
        )

    def resize(self, bounds: tuple):
        """
        Updates the bounds without touching particle positions. Particles left
        outside the new bounds are corrected by the next step's boundary pass.
        """
        new_bounds = _validate_bounds(bounds)
        self.bounds = np.array(new_bounds, dtype=float)
        logger.info(f"Bounds resized to {new_bounds.width:g}x{new_bounds.height:g}.")

    def get_total_kinetic_energy(self):
        """
        Calculates the total kinetic energy of the system.
        KE = sum(0.5 * m * v^2)
        """
        vel_sq = np.sum(self.velocities**2, axis=1)
        return float(np.sum(0.5 * self.masses * vel_sq))

    def get_rms_spread(self):
        """
        Root-mean-square distance of all particles from the domain center.
        Grows under expansion and shrinks under contraction.
        """
        if self.num_particles == 0:
            return 0.0
        offsets = self.positions - self.center
        return float(np.sqrt(np.mean(np.sum(offsets**2, axis=1))))


def initialize(particle_count: int, bounds: tuple, rng: np.random.Generator = None) -> ParticleSystem:
    """Creates a ParticleSystem of `particle_count` particles inside `bounds`."""
    return ParticleSystem(particle_count, bounds, rng)

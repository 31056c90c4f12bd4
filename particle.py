# particle.py

import numpy as np


class Particle:
    """
    Represents a single particle in the simulation.

    The particle data itself lives in the owning ParticleSystem's NumPy arrays
    (Structure of Arrays). A Particle is a lightweight view onto one index of
    those arrays, so reading and assigning its attributes reads and writes the
    system state directly.

    Data Contract:
    - Inputs:
        - system (ParticleSystem): The system that owns the particle data.
        - index (int): The particle's position in the system's ordering.
    - Invariants: The view is only meaningful while index < len(system).
    """
    __slots__ = ('_system', '_index')

    def __init__(self, system, index: int):
        self._system = system
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def position(self) -> np.ndarray:
        """Writable (x, y) view into the system's positions array."""
        return self._system.positions[self._index]

    @position.setter
    def position(self, value):
        self._system.positions[self._index] = value

    @property
    def velocity(self) -> np.ndarray:
        """Writable (vx, vy) view into the system's velocities array."""
        return self._system.velocities[self._index]

    @velocity.setter
    def velocity(self, value):
        self._system.velocities[self._index] = value

    @property
    def mass(self) -> float:
        return float(self._system.masses[self._index])

    def __repr__(self):
        x, y = self.position
        vx, vy = self.velocity
        return f"Particle(index={self._index}, pos=({x:.2f}, {y:.2f}), vel=({vx:.3f}, {vy:.3f}), mass={self.mass})"

# particle_engine/managers/particle_pool.py


class Particle:
    """A single pooled particle. Mutated in place; never shared between lists."""

    __slots__ = ('x', 'y', 'vx', 'vy', 'mass', 'age', 'lifetime', 'bounce', 'variant')

    def __init__(self):
        self.x = 0.0
        self.y = 0.0
        self.vx = 0.0
        self.vy = 0.0
        self.mass = 0.0
        self.age = 0.0
        self.lifetime = 0.0
        self.bounce = 0.0
        self.variant = 0

    def __repr__(self):
        return (f"Particle(x={self.x:.2f}, y={self.y:.2f}, vx={self.vx:.2f}, vy={self.vy:.2f}, "
                f"age={self.age:.3f}/{self.lifetime:.3f})")


class ParticlePool:
    """
    Free-list of retired particles. Any emitter may acquire from or release to
    it; entries carry no identity.
    """

    def __init__(self):
        self._free = []
        self.allocated = 0  # records ever created by this pool

    def __len__(self):
        return len(self._free)

    def acquire(self) -> Particle:
        if self._free:
            return self._free.pop()
        self.allocated += 1
        return Particle()

    def release(self, particle: Particle):
        self._free.append(particle)

    def clear(self):
        """Drops every free record. Live particles are unaffected."""
        self.allocated -= len(self._free)
        self._free.clear()


# Shared by every emitter that isn't handed its own pool. Single-threaded use only.
DEFAULT_POOL = ParticlePool()

# particle_engine/managers/particle_emitter.py
"""
Particle emitter: spawns pooled particles from a rectangular region and
integrates them each frame.

Every stochastic attribute is configured as a base value plus a spread, and
sampled as ``base + spread * random()``. The older range-tuple style
(``velocity=[base, spread]``) is converted by from_range_options().
"""
import math
import random

from particle_engine.core.errors import ConfigurationError
from particle_engine.managers.particle_pool import DEFAULT_POOL, ParticlePool
from particle_engine.utils.math_utils import MathUtils

# Attributes sampled per particle, each with a matching "<name>_spread" field
SAMPLED_ATTRIBUTES = ('velocity', 'angle', 'mass', 'lifetime', 'bounce')

EMITTER_DEFAULTS = {
    'x': 0.0,                 # left of the spawn area
    'y': 0.0,                 # top of the spawn area
    'width': 0.0,
    'height': 0.0,
    'floor': math.inf,        # particles bounce when they pass below this y
    'frequency': 1.0,         # particles per second
    'velocity': 0.0,          # pixels per second
    'velocity_spread': 0.0,
    'angle': 0.0,             # radians
    'angle_spread': 0.0,
    'mass': 0.0,              # downward acceleration multiplier
    'mass_spread': 0.0,
    'lifetime': 0.0,          # seconds
    'lifetime_spread': 0.0,
    'bounce': 0.0,            # restitution, 0-1
    'bounce_spread': 0.0,
}

CONFIG_FIELDS = frozenset(EMITTER_DEFAULTS) | {'variants'}

# Range-tuple aliases from the older configuration style
RANGE_ALIASES = {'life': 'lifetime'}

# Absorbs float drift when the clock lands a hair under a whole emission period
_CLOCK_EPSILON = 1e-9


def _validate_variants(variants):
    if not variants:
        raise ConfigurationError("Emitter needs at least one sprite variant.")
    variants = [list(sequence) for sequence in variants]
    for index, sequence in enumerate(variants):
        if not sequence:
            raise ConfigurationError(f"Sprite variant {index} is empty.")
    return variants


def _validate_number(key, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"Emitter field '{key}' must be a number, got {value!r}")
    # floor may be +inf (no floor); every other field has to be finite
    if math.isnan(value) or (key != 'floor' and math.isinf(value)):
        raise ConfigurationError(f"Emitter field '{key}' must be finite, got {value!r}")
    return value


def from_range_options(options: dict) -> dict:
    """
    Converts range-tuple options ({'velocity': [50, 10], 'sprites': [...]}) to the
    canonical base + spread form ({'velocity': 50, 'velocity_spread': 10, 'variants': [[...]]}).
    Scalars are kept as bases with no spread.
    """
    converted = {}
    for key, value in options.items():
        key = RANGE_ALIASES.get(key, key)
        if key == 'sprites':
            if 'variants' in options:
                raise ConfigurationError("Give either 'sprites' or 'variants', not both.")
            converted['variants'] = [list(value)]
        elif key in SAMPLED_ATTRIBUTES and isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ConfigurationError(f"Range for '{key}' must be [base, spread], got {value!r}")
            converted[key], converted[f'{key}_spread'] = value
        else:
            converted[key] = value
    return converted


def to_range_options(emitter) -> dict:
    """Inverse of from_range_options() for a live emitter (single-variant emitters keep 'sprites')."""
    options = {key: getattr(emitter, key) for key in ('x', 'y', 'width', 'height', 'floor', 'frequency')}
    for name in SAMPLED_ATTRIBUTES:
        options[name] = [getattr(emitter, name), getattr(emitter, f'{name}_spread')]
    if len(emitter.variants) == 1:
        options['sprites'] = list(emitter.variants[0])
    else:
        options['variants'] = [list(sequence) for sequence in emitter.variants]
    return options


class ParticleEmitter:
    """
    Owns a configuration and the list of its live particles.

    `pool` defaults to the shared DEFAULT_POOL; `rng` is any object with a
    random() method (defaults to the random module).
    """

    def __init__(self, options: dict, pool: ParticlePool = None, rng=None):
        if 'variants' not in options:
            raise ConfigurationError("Emitter options must include 'variants'.")

        self.pool = pool if pool is not None else DEFAULT_POOL
        self.rng = rng if rng is not None else random
        self.particles = []
        self.clock = 0.0

        for key, value in EMITTER_DEFAULTS.items():
            setattr(self, key, value)
        self.variants = []
        self.configure(options)

    @classmethod
    def from_ranges(cls, options: dict, pool: ParticlePool = None, rng=None):
        """Builds an emitter from range-tuple style options."""
        return cls(from_range_options(options), pool=pool, rng=rng)

    def __repr__(self):
        return (f"ParticleEmitter(x={self.x}, y={self.y}, frequency={self.frequency}, "
                f"particles={len(self.particles)})")

    @property
    def particle_count(self) -> int:
        return len(self.particles)

    def configure(self, partial: dict = None, **changes):
        """
        Shallow-merges configuration fields. Particles, the emission clock and
        any in-flight state are left alone.
        """
        updates = dict(partial or {}, **changes)

        unknown = set(updates) - CONFIG_FIELDS
        if unknown:
            raise ConfigurationError(f"Unknown emitter fields: {', '.join(sorted(unknown))}")

        if 'variants' in updates:
            updates['variants'] = _validate_variants(updates['variants'])
        for key, value in updates.items():
            if key != 'variants':
                _validate_number(key, value)

        for key, value in updates.items():
            setattr(self, key, value)

    def _sample(self, name: str) -> float:
        return getattr(self, name) + getattr(self, f'{name}_spread') * self.rng.random()

    def emit(self):
        """Spawns exactly one particle and returns it."""
        particle = self.pool.acquire()
        velocity = self._sample('velocity')
        angle = self._sample('angle')
        particle.x = self.x + self.width * self.rng.random()
        particle.y = self.y + self.height * self.rng.random()
        particle.vx = math.cos(angle) * velocity
        particle.vy = math.sin(angle) * velocity
        particle.mass = self._sample('mass')
        particle.lifetime = self._sample('lifetime')
        particle.bounce = self._sample('bounce')
        particle.age = 0.0
        particle.variant = min(int(self.rng.random() * len(self.variants)), len(self.variants) - 1)
        self.particles.append(particle)
        return particle

    def emit_burst(self, count: int):
        for _ in range(count):
            self.emit()

    def update(self, dt: float):
        """Advances the emitter by `dt` milliseconds."""
        seconds = dt / 1000

        # A non-positive frequency means no automatic emission; don't bank time either.
        if self.frequency > 0:
            seconds_per_particle = 1 / self.frequency
            self.clock += seconds
            while self.clock >= seconds_per_particle - _CLOCK_EPSILON:
                self.clock -= seconds_per_particle
                self.emit()

        alive = []
        for particle in self.particles:
            particle.x += particle.vx * seconds
            particle.y += particle.vy * seconds
            particle.vy += particle.mass * seconds
            particle.age += seconds
            if particle.y > self.floor:
                particle.vy *= -particle.bounce
                particle.y = self.floor

            if particle.age < particle.lifetime:
                alive.append(particle)
            else:
                self.pool.release(particle)
        self.particles = alive

    def render(self, draw):
        """Calls draw(sprite, x, y) for every live particle. Does not mutate state."""
        last_variant = len(self.variants) - 1
        for particle in self.particles:
            sequence = self.variants[min(particle.variant, last_variant)]
            progress = particle.age / particle.lifetime if particle.lifetime > 0 else 1.0
            index = MathUtils.clamp(math.floor(progress * len(sequence)), 0, len(sequence) - 1)
            draw(sequence[index], particle.x, particle.y)

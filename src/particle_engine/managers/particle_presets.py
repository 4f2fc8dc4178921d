# particle_engine/managers/particle_presets.py
"""
Named emitter presets, one per interactive demo. Each preset holds the emitter
options (sprites referenced by name so presets survive a JSON round trip) and,
optionally, the canvas size the demo is meant to run at.
"""
import copy
import math

from particle_engine.core.errors import ConfigurationError
from particle_engine.core.sprite_atlas import SPRITES, resolve_variants
from particle_engine.managers.particle_emitter import ParticleEmitter, from_range_options

DEFAULT_CANVAS = {'width': 100, 'height': 100}

PRESETS = {
    "velocity": {
        'canvas': {'width': 100, 'height': 30},
        'emitter': {
            'x': 10, 'y': 5, 'frequency': 1,
            'velocity': 50, 'velocity_spread': 0,
            'lifetime': 3,
            'variants': [["blue_circle"]],
        },
    },
    "angle": {
        'emitter': {
            'x': 50, 'y': 50, 'frequency': 5,
            'velocity': 50, 'velocity_spread': 10,
            'angle_spread': math.pi / 2,
            'lifetime': 5,
            'variants': [["blue_circle"]],
        },
    },
    "mass": {
        'emitter': {
            'x': 20, 'y': 50, 'frequency': 5,
            'velocity': 50, 'mass': 30, 'mass_spread': 0,
            'lifetime': 3,
            'variants': [["blue_circle"]],
        },
    },
    "position": {
        'emitter': {
            'x': 25, 'y': 25, 'width': 50, 'height': 50, 'frequency': 5,
            'velocity': 3, 'angle_spread': math.pi * 2,
            'lifetime': 3,
            'variants': [["blue_circle"]],
        },
    },
    "frequency": {
        'emitter': {
            'x': 50, 'y': 50, 'frequency': 10,
            'velocity': 10, 'angle_spread': math.pi * 2,
            'lifetime': 3,
            'variants': [["blue_circle"]],
        },
    },
    "burst": {
        'emitter': {
            'x': 50, 'y': 50, 'frequency': 0,
            'velocity': 10, 'angle_spread': math.pi * 2,
            'lifetime': 3,
            'variants': [["blue_circle"]],
        },
    },
    "sprite": {
        'emitter': {
            'x': 50, 'y': 90, 'frequency': 10,
            'velocity': 20, 'velocity_spread': -5,
            'mass': 5,
            'angle': math.pi * 1.5 - 0.2, 'angle_spread': 0.4,
            'lifetime': 3,
            'variants': [
                ["smoke_1", "smoke_2", "smoke_3", "smoke_4"],
                ["smoke_3", "smoke_4"],
            ],
        },
    },
    "fountain": {
        'emitter': {
            'x': 48, 'y': 80, 'width': 4, 'frequency': 20,
            'velocity': 60, 'velocity_spread': 20,
            'angle': math.pi * 1.5 - 0.3, 'angle_spread': 0.6,
            'mass': 80, 'mass_spread': 20,
            'lifetime': 4, 'lifetime_spread': 1,
            'bounce': 0.4, 'bounce_spread': 0.3,
            'floor': 95,
            'variants': [["blue_circle"]],
        },
    },
}


def list_presets():
    return sorted(PRESETS)


def register_preset(name: str, preset: dict):
    """
    Adds or replaces a preset. Accepts {'emitter': {...}, 'canvas': {...}} or a bare
    emitter options dict, in either configuration style.
    """
    if 'emitter' not in preset:
        preset = {'emitter': preset}
    emitter_options = from_range_options(preset['emitter'])
    if 'variants' not in emitter_options:
        raise ConfigurationError(f"Preset '{name}' has no sprite variants.")
    PRESETS[name] = {'canvas': dict(preset.get('canvas', {})), 'emitter': emitter_options}


def _lookup(name: str) -> dict:
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown preset '{name}'. Available: {', '.join(list_presets())}") from None


def get_preset(name: str, overrides: dict = None, sprites=SPRITES) -> dict:
    """Returns emitter options for a preset with sprite names resolved."""
    options = copy.deepcopy(_lookup(name)['emitter'])
    options.update(overrides or {})
    options['variants'] = resolve_variants(options['variants'], sprites)
    return options


def get_canvas_size(name: str):
    canvas = dict(DEFAULT_CANVAS, **_lookup(name).get('canvas', {}))
    return canvas['width'], canvas['height']


def create_emitter(name: str, overrides: dict = None, pool=None, rng=None) -> ParticleEmitter:
    return ParticleEmitter(get_preset(name, overrides), pool=pool, rng=rng)

# tests/particle_presets_test.py
import json
import math
import os
import sys
import tempfile
import unittest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from particle_engine import startup
from particle_engine.core.engine_config import EngineConfig
from particle_engine.core.errors import ConfigurationError
from particle_engine.core.sprite_atlas import SPRITES
from particle_engine.managers import particle_presets
from particle_engine.managers.particle_pool import ParticlePool


class ParticlePresetsTest(unittest.TestCase):

    def tearDown(self):
        particle_presets.PRESETS.pop('custom', None)

    def test_every_preset_builds_an_emitter(self):
        for name in particle_presets.list_presets():
            emitter = particle_presets.create_emitter(name, pool=ParticlePool())
            emitter.update(250)
            self.assertTrue(emitter.variants, name)

    def test_sprite_preset_has_two_smoke_variants(self):
        options = particle_presets.get_preset('sprite')
        self.assertEqual(len(options['variants']), 2)
        self.assertEqual(options['variants'][1], [SPRITES["smoke_3"], SPRITES["smoke_4"]])
        self.assertEqual(options['velocity_spread'], -5)

    def test_burst_preset_does_not_emit_on_its_own(self):
        emitter = particle_presets.create_emitter('burst', pool=ParticlePool())
        emitter.update(5000)
        self.assertEqual(emitter.particle_count, 0)

    def test_overrides_and_isolation(self):
        options = particle_presets.get_preset('angle', {'x': 10})
        self.assertEqual(options['x'], 10)
        self.assertEqual(particle_presets.get_preset('angle')['x'], 50)
        self.assertAlmostEqual(options['angle_spread'], math.pi / 2)

    def test_canvas_size(self):
        self.assertEqual(particle_presets.get_canvas_size('velocity'), (100, 30))
        self.assertEqual(particle_presets.get_canvas_size('angle'), (100, 100))

    def test_unknown_preset(self):
        with self.assertRaises(ConfigurationError):
            particle_presets.get_preset('nope')

    def test_register_range_style_preset(self):
        particle_presets.register_preset('custom', {
            'x': 5, 'velocity': [40, 5], 'life': [2, 1], 'sprites': ['blue_circle'],
        })
        emitter = particle_presets.create_emitter('custom', pool=ParticlePool())
        self.assertEqual(emitter.velocity, 40)
        self.assertEqual(emitter.velocity_spread, 5)
        self.assertEqual(emitter.lifetime, 2)
        self.assertEqual(emitter.variants, [[SPRITES["blue_circle"]]])

    def test_register_preset_without_sprites(self):
        with self.assertRaises(ConfigurationError):
            particle_presets.register_preset('custom', {'emitter': {'x': 1}})

    def test_settings_presets_registered_at_startup(self):
        with tempfile.TemporaryDirectory() as tmp:
            config_file = os.path.join(tmp, "settings.json")
            with open(config_file, "w", encoding="utf-8") as f:
                json.dump({"presets": {
                    "custom": {"canvas": {"height": 40}, "emitter": {"frequency": 3, "variants": [["smoke_1"]]}},
                    "broken": {"emitter": {"frequency": 3}},
                }}, f)
            startup._register_user_presets(EngineConfig(config_file))

        self.assertEqual(particle_presets.get_canvas_size("custom"), (100, 40))
        self.assertEqual(particle_presets.get_preset("custom")["variants"], [[SPRITES["smoke_1"]]])
        self.assertNotIn("broken", particle_presets.list_presets())


if __name__ == '__main__':
    unittest.main()

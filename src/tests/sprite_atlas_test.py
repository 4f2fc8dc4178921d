# tests/sprite_atlas_test.py
import os
import sys
import tempfile
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pygame

from particle_engine.core.canvas import Canvas, StaticCanvas, create_canvas
from particle_engine.core.errors import ConfigurationError
from particle_engine.core.sprite_atlas import (
    ATLAS_SIZE, SPRITES, Sprite, SpriteAtlas, resolve_sprite, resolve_variants,
)


class SpriteAtlasTest(unittest.TestCase):

    def setUp(self):
        pygame.init()

    def tearDown(self):
        pygame.quit()

    def test_missing_atlas_falls_back_to_procedural(self):
        atlas = SpriteAtlas.load('/nonexistent/particles.png')
        self.assertEqual(atlas.size, ATLAS_SIZE)
        self.assertIsNone(atlas.path)

    def test_load_saved_atlas(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'particles.png')
            pygame.image.save(SpriteAtlas.procedural().image, path)
            atlas = SpriteAtlas.load(path)
            self.assertEqual(atlas.path, path)
            self.assertEqual(atlas.size, ATLAS_SIZE)

    def test_procedural_atlas_paints_every_sprite(self):
        atlas = SpriteAtlas.procedural()
        for name, sprite in SPRITES.items():
            center = (sprite.x + sprite.w // 2, sprite.y + sprite.h // 2)
            self.assertGreater(atlas.image.get_at(center).a, 0, name)

    def test_resolve_sprite_forms(self):
        expected = SPRITES["smoke_2"]
        self.assertIs(resolve_sprite(expected), expected)
        self.assertEqual(resolve_sprite("smoke_2"), expected)
        self.assertEqual(resolve_sprite({"x": 8, "y": 4, "w": 8, "h": 8}), expected)
        self.assertEqual(resolve_sprite([8, 4, 8, 8]), expected)

    def test_resolve_variants(self):
        variants = resolve_variants([["smoke_1", "smoke_2"], ["blue_circle"]])
        self.assertEqual(variants, [[SPRITES["smoke_1"], SPRITES["smoke_2"]], [SPRITES["blue_circle"]]])
        self.assertIsInstance(variants[0][0], Sprite)

    def test_unknown_sprite_name(self):
        with self.assertRaises(ConfigurationError):
            resolve_variants([["nope"]])


class CanvasTest(unittest.TestCase):

    def test_create_canvas(self):
        self.assertIsInstance(create_canvas(10, 20, 2), Canvas)
        static = create_canvas(10, 20, 2, static=True)
        self.assertIsInstance(static, StaticCanvas)
        self.assertEqual((static.width, static.height), (10, 20))

    def test_bounding_rect_follows_mount_position(self):
        canvas = Canvas(10, 20, scale=3)
        canvas.mount(pygame.Surface((100, 100)), position=(5, 6))
        self.assertEqual(canvas.get_bounding_rect(), pygame.Rect(5, 6, 30, 60))

    def test_present_without_host_is_noop(self):
        canvas = Canvas(10, 10, scale=2)
        canvas.clear()
        canvas.present()
        self.assertIsNone(canvas.host)

    def test_non_positive_dimensions_rejected(self):
        for size in ((0, 10, 3), (10, 0, 3), (10, 10, 0), (-5, 10, 1)):
            with self.assertRaises(ConfigurationError):
                create_canvas(*size)
            with self.assertRaises(ConfigurationError):
                create_canvas(*size, static=True)


if __name__ == '__main__':
    unittest.main()

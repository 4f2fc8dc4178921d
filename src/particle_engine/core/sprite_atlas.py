# particle_engine/core/sprite_atlas.py
"""
Sprite atlas handling.

The engine only ever sees Sprite rectangles (pixel offsets into a shared atlas
image). The atlas image itself is loaded here, with a procedural stand-in when
the file is missing so demos still show something.
"""
import os
from typing import NamedTuple

import pygame

from particle_engine.core.errors import ConfigurationError
from particle_engine.utils.color import Color
from particle_engine.utils.file_utils import FileUtils


class Sprite(NamedTuple):
    """Source rectangle inside the atlas image."""
    x: int
    y: int
    w: int
    h: int


SPRITES = {
    "blue_circle": Sprite(0, 0, 4, 4),
    "smoke_1": Sprite(0, 4, 8, 8),
    "smoke_2": Sprite(8, 4, 8, 8),
    "smoke_3": Sprite(16, 4, 8, 8),
    "smoke_4": Sprite(24, 4, 8, 8),
}

ATLAS_SIZE = (32, 12)


def resolve_sprite(sprite, sprites=SPRITES) -> Sprite:
    """Accepts a Sprite, a sprite name or an (x, y, w, h) sequence."""
    if isinstance(sprite, Sprite):
        return sprite
    if isinstance(sprite, str):
        try:
            return sprites[sprite]
        except KeyError:
            raise ConfigurationError(f"Unknown sprite: {sprite!r}") from None
    if isinstance(sprite, dict):
        return Sprite(sprite["x"], sprite["y"], sprite["w"], sprite["h"])
    if len(sprite) == 4:
        return Sprite(*sprite)
    raise ConfigurationError(f"Cannot interpret sprite: {sprite!r}")


def resolve_variants(variants, sprites=SPRITES):
    """Converts variants read from JSON (lists of sprite names) into Sprite sequences."""
    return [[resolve_sprite(sprite, sprites) for sprite in sequence] for sequence in variants]


class SpriteAtlas:
    """Wraps the atlas image that sprite rectangles point into."""

    def __init__(self, image: pygame.Surface, path: str = None):
        self.image = image
        self.path = path

    @property
    def size(self):
        return self.image.get_size()

    @classmethod
    def load(cls, path: str):
        """Loads the atlas image, falling back to the procedural atlas on failure."""
        if not path or not os.path.exists(path):
            FileUtils.log_error(f"Sprite atlas not found: {path}. Using procedural atlas.")
            return cls.procedural()

        try:
            image = pygame.image.load(path)
        except pygame.error as e:
            FileUtils.log_error(f"Pygame failed to load sprite atlas {path}: {e}")
            return cls.procedural()

        # convert_alpha() needs a display mode
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()

        FileUtils.log_message(f"Loaded sprite atlas: {path}")
        return cls(image, path)

    @classmethod
    def procedural(cls):
        """Paints the built-in sprites onto a transparent surface."""
        image = pygame.Surface(ATLAS_SIZE, pygame.SRCALPHA)
        image.fill(Color.clear().to_rgba())

        circle = SPRITES["blue_circle"]
        pygame.draw.circle(image, Color(80, 140, 255).to_rgba(),
                           (circle.x + circle.w // 2, circle.y + circle.h // 2), circle.w // 2)

        # Smoke puffs grow and fade over the sequence
        for i in range(4):
            sprite = SPRITES[f"smoke_{i + 1}"]
            center = (sprite.x + sprite.w // 2, sprite.y + sprite.h // 2)
            color = Color.gray().with_alpha(220 - i * 50)
            pygame.draw.circle(image, color.to_rgba(), center, 1 + i)

        return cls(image)

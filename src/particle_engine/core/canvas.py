# particle_engine/core/canvas.py
import pygame

from particle_engine.core.errors import ConfigurationError
from particle_engine.utils.file_utils import FileUtils


class StaticCanvas:
    """
    Dimension-only stand-in for contexts without a drawing surface. Layout code
    can still read width/height and bounds.
    """

    is_static = True

    def __init__(self, width: int, height: int, scale: int = 1):
        if width <= 0 or height <= 0 or scale <= 0:
            raise ConfigurationError(f"Canvas needs a positive size and scale, got {width}x{height} at x{scale}")
        self.width = width
        self.height = height
        self.scale = scale
        self.host = None
        self.position = (0, 0)

    @property
    def display_size(self):
        return (self.width * self.scale, self.height * self.scale)

    def get_bounding_rect(self) -> pygame.Rect:
        return pygame.Rect(self.position, self.display_size)

    def mount(self, host, position=(0, 0)):
        if host is None:
            return
        self.host = host
        self.position = tuple(position)


class Canvas(StaticCanvas):
    """
    Backing surface at simulation resolution, upscaled by an integer factor
    when presented onto the host surface.
    """

    is_static = False

    def __init__(self, width: int, height: int, scale: int = 3, background=None):
        super().__init__(width, height, scale)
        self.surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self.background = background.to_rgba() if background is not None else (0, 0, 0, 0)

    def clear(self):
        self.surface.fill(self.background)

    def blit(self, image: pygame.Surface, source, dest):
        """Copies the `source` (x, y, w, h) rectangle of `image` to `dest` on the backing surface."""
        self.surface.blit(image, dest, pygame.Rect(source))

    def present(self):
        """Draws the backing surface onto the host, nearest-neighbour scaled."""
        if self.host is None:
            return
        if self.scale == 1:
            self.host.blit(self.surface, self.position)
        else:
            self.host.blit(pygame.transform.scale(self.surface, self.display_size), self.position)


def create_canvas(width: int, height: int, scale: int = 3, static: bool = False, background=None):
    """Returns a drawing Canvas, or a StaticCanvas when no surface is wanted or available."""
    if static:
        return StaticCanvas(width, height, scale)
    try:
        return Canvas(width, height, scale, background)
    except pygame.error as e:
        FileUtils.log_warning(f"Drawing surface unavailable ({e}). Using static canvas.")
        return StaticCanvas(width, height, scale)

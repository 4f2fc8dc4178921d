# particle_engine/managers/particle_system.py
import math

from particle_engine.core.canvas import create_canvas
from particle_engine.core.frame_scheduler import ClockFrameScheduler, FrameScheduler
from particle_engine.core.sprite_atlas import SpriteAtlas
from particle_engine.utils.file_utils import FileUtils


class ParticleSystem:
    """
    Owns a set of emitters, a pixel-art canvas and the per-frame loop that
    updates and renders them.
    """

    def __init__(self, width: int = 100, height: int = 100, emitters=None, scale: int = 3,
                 scheduler: FrameScheduler = None, atlas: SpriteAtlas = None,
                 static: bool = False, background=None):
        self.emitters = list(emitters or [])
        self.scale = scale
        self.canvas = create_canvas(width, height, scale, static=static, background=background)
        self.scheduler = scheduler if scheduler is not None else ClockFrameScheduler()
        self.atlas = atlas
        self.active = False

        self._last_frame_time = None
        self._chain = 0  # bumps on every start()/stop() so stale callbacks die

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    @property
    def particle_count(self) -> int:
        return sum(emitter.particle_count for emitter in self.emitters)

    def set_emitters(self, emitters):
        """Replaces the emitter collection as a whole."""
        self.emitters = list(emitters)

    # --- Frame Loop ---

    def start(self):
        """Begins the update/render loop. No-op if already running."""
        if self.active:
            return
        self.active = True
        self._chain += 1
        self._last_frame_time = None
        chain = self._chain

        def tick(current_frame_time):
            if not self.active or chain != self._chain:
                return
            # Schedule first so a slow frame doesn't stall the chain
            self.scheduler.request_frame(tick)

            if self._last_frame_time is None:
                self._last_frame_time = current_frame_time
            dt = current_frame_time - self._last_frame_time
            self._last_frame_time = current_frame_time
            self.update(dt)
            self.render()

        self.scheduler.request_frame(tick)

    def stop(self):
        """Halts the loop. Particles and emitter clocks are preserved."""
        if not self.active:
            return
        self.active = False
        self._chain += 1

    def on_focus(self):
        """
        Host regained focus after being backgrounded: treat the next frame as the
        first one so the whole gap isn't integrated in a single step.
        """
        self._last_frame_time = None

    # --- Simulation ---

    def update(self, dt: float):
        """Advances every emitter by `dt` milliseconds, in list order."""
        for emitter in self.emitters:
            emitter.update(dt)

    def render(self):
        """Clears the canvas and draws every emitter's particles."""
        if self.canvas.is_static:
            return

        if self.atlas is None:
            FileUtils.log_warning("ParticleSystem has no sprite atlas. Using procedural atlas.")
            self.atlas = SpriteAtlas.procedural()

        image = self.atlas.image
        canvas = self.canvas

        def draw(sprite, x, y):
            sx, sy, sw, sh = sprite
            dx = math.floor(x - sw / 2)
            dy = math.floor(y - sh / 2)
            canvas.blit(image, (sx, sy, sw, sh), (dx, dy))

        canvas.clear()
        for emitter in self.emitters:
            emitter.render(draw)
        canvas.present()

    # --- Host Integration ---

    def mount(self, host, position=(0, 0)):
        """Attaches the canvas to a host surface. No-op for a missing host."""
        self.canvas.mount(host, position)

    def map_coords(self, screen_x: float, screen_y: float):
        """Converts host-space pointer coordinates into simulation coordinates."""
        bounds = self.canvas.get_bounding_rect()
        scale_x = self.canvas.width / bounds.width
        scale_y = self.canvas.height / bounds.height
        x = (screen_x - bounds.x) * scale_x
        y = (screen_y - bounds.y) * scale_y
        return (x, y)

# particle_engine/main.py
import sys

import pygame

from particle_engine import startup
from particle_engine.core.errors import ConfigurationError
from particle_engine.core.frame_scheduler import ClockFrameScheduler
from particle_engine.core.sprite_atlas import SpriteAtlas
from particle_engine.managers.particle_presets import create_emitter, get_canvas_size, list_presets
from particle_engine.managers.particle_system import ParticleSystem
from particle_engine.utils.color import Color
from particle_engine.utils.file_utils import FileUtils


class DemoRunner:
    """
    Runs one preset in a pygame window.

    Mouse: drag to move the emitter (click to burst for frequency-0 presets).
    SPACE pauses/resumes the loop, ESC quits.
    """

    def __init__(self, screen: pygame.Surface, system: ParticleSystem, scheduler: ClockFrameScheduler,
                 background: Color, burst_count: int = 5):
        self.screen = screen
        self.system = system
        self.scheduler = scheduler
        self.background = background
        self.burst_count = burst_count
        self.dragging = False

    @property
    def emitter(self):
        return self.system.emitters[0]

    def handle_event(self, event) -> bool:
        """Returns False when the demo should exit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                if self.system.active:
                    self.system.stop()
                else:
                    self.system.start()
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.system.on_focus()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = self.system.map_coords(*event.pos)
            if self.emitter.frequency <= 0:
                self.emitter.configure(x=x, y=y)
                self.emitter.emit_burst(self.burst_count)
            else:
                self.dragging = True
                self.emitter.configure(x=x, y=y)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            x, y = self.system.map_coords(*event.pos)
            self.emitter.configure(x=x, y=y)
        return True

    def draw_frame(self):
        self.screen.fill(self.background.to_rgb())
        # Fires the system's tick (update + render + present onto the screen)
        self.scheduler.run_frame()
        if not self.system.active:
            # Paused: keep showing the frozen particles
            self.system.render()

    def run(self):
        running = True
        self.system.start()

        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break

            self.draw_frame()
            pygame.display.flip()

        self.system.stop()
        FileUtils.log_message(f"Demo loop stopped ({self.system.particle_count} particles live).")


def main(argv=None):
    """
    Main entry point for the particle demo.
    Usage: particle-demo [preset]
    """
    argv = sys.argv[1:] if argv is None else argv
    config = startup.init_engine_environment()

    display = config.display_settings
    preset_name = argv[0] if argv else config.demo_settings.get('preset', 'angle')

    try:
        emitter = create_emitter(preset_name)
    except ConfigurationError as e:
        FileUtils.log_error(str(e))
        print(f"Available presets: {', '.join(list_presets())}")
        return 1

    width, height = get_canvas_size(preset_name)
    scale = display.get('scale', 3)
    background = Color.from_hex(display.get('background_color', '#1e1e1e'))

    pygame.init()
    try:
        screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(f"{display.get('window_title', 'Particle Playground')} - {preset_name}")

        scheduler = ClockFrameScheduler(display.get('target_fps', 60))
        system = ParticleSystem(
            width=width,
            height=height,
            emitters=[emitter],
            scale=scale,
            scheduler=scheduler,
            atlas=SpriteAtlas.load(config.asset_settings.get('sprite_atlas')),
        )
        system.mount(screen)

        runner = DemoRunner(screen, system, scheduler, background,
                            burst_count=config.demo_settings.get('burst_count', 5))
        runner.run()
    finally:
        pygame.quit()
        FileUtils.log_message("Particle demo shut down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

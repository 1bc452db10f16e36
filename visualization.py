# visualization.py
"""
Handles the visualization of the particle simulation using Pygame.

The Visualizer is a pure rendering sink: it reads Frame snapshots and
never modifies particle or boundary state.
"""
import logging
import math
import pygame
from constants import (
    BACKGROUND_COLOR, BOUNDARY_COLOR, BOUNDARY_LINE_WIDTH,
    MIN_DRAW_RADIUS, UI_BACKGROUND_ALPHA, UI_FONT_NAME, UI_FONT_SIZE,
    UI_PANEL_WIDTH, WINDOW_TITLE
)
from typing import Any, Dict, Optional

# Forward reference for type hinting to avoid a hard import cycle
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from simulation import Frame


# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, vis_params: Optional[dict] = None, sim_params: Optional[dict] = None):
#     - Inputs:
#       - vis_params: "visualization" section of config.json
#         ("width", "height", "fps", optional "background_color",
#         "boundary_color").
#       - sim_params: "simulation_parameters" section, shown in the UI panel.
#     - Side Effects: Initializes Pygame and creates a display surface.
#
#   - handle_events(self) -> bool:
#     - Outputs: False if the user has quit (window close or ESC).
#
#   - draw(self, frame: Frame, stats: Optional[dict] = None) -> None:
#     - Side Effects: Renders particles, the boundary ring and the UI panel,
#       then presents the frame. Caps the frame rate when "fps" > 0.

class Visualizer:
    """
    Renders simulation frames and polls the window for quit requests.
    """
    def __init__(self, vis_params: Optional[dict] = None, sim_params: Optional[dict] = None):
        """
        Initializes Pygame and the display window.
        """
        pygame.init()
        pygame.font.init()

        vis_params = vis_params if vis_params is not None else {}

        width = int(vis_params.get('width', 2000)) + UI_PANEL_WIDTH
        height = int(vis_params.get('height', 1333))
        self.screen = pygame.display.set_mode((width, height))

        # The simulation area is the total width minus the UI panel
        self.sim_width = width - UI_PANEL_WIDTH
        self.sim_height = height

        self.sim_surface = pygame.Surface((self.sim_width, self.sim_height))
        self.ui_panel_surface = pygame.Surface((UI_PANEL_WIDTH, self.sim_height), pygame.SRCALPHA)
        self.ui_panel_surface.fill((40, 40, 40, UI_BACKGROUND_ALPHA))

        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.fps = int(vis_params.get('fps', 0))

        self.background_color = pygame.Color(*vis_params.get('background_color', BACKGROUND_COLOR))
        self.boundary_color = pygame.Color(*vis_params.get('boundary_color', BOUNDARY_COLOR))

        try:
            self.font_main = pygame.font.SysFont(UI_FONT_NAME, UI_FONT_SIZE)
            self.font_main_bold = pygame.font.SysFont(UI_FONT_NAME, UI_FONT_SIZE, bold=True)
        except pygame.error:
            logging.warning(f"{UI_FONT_NAME} font not found, falling back to default sans-serif.")
            self.font_main = pygame.font.SysFont(None, UI_FONT_SIZE + 4)
            self.font_main_bold = pygame.font.SysFont(None, UI_FONT_SIZE + 4, bold=True)

        # --- UI Color Palette ---
        self.text_color_key = (200, 200, 200)
        self.text_color_value = (255, 255, 255)
        self.param_box_color = (60, 60, 60, 160)
        self.param_box_spacing = 4

        self.sim_params = sim_params if sim_params is not None else {}
        self.frames_drawn = 0

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def handle_events(self) -> bool:
        """
        Drains the event queue.

        Returns:
            bool: False if the simulation should exit, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Shutting down visualizer.")
                return False
        return True

    def draw(self, frame: "Frame", stats: Optional[Dict[str, Any]] = None) -> None:
        """
        Draws one frame: particles, the boundary ring and the UI panel.
        """
        self.sim_surface.fill(self.background_color)

        skipped = 0
        for snap in frame.particles:
            x, y = snap.position
            radius = max(MIN_DRAW_RADIUS, int(snap.radius))
            # Diverged or escaped particles cannot be rasterized.
            if not self._on_surface(x, y, radius):
                skipped += 1
                continue
            pygame.draw.circle(self.sim_surface, snap.color, (int(x), int(y)), radius)

        if skipped:
            logging.debug(f"Skipped {skipped} particles outside the drawable area.")

        boundary = frame.boundary
        cx, cy = boundary.center
        if math.isfinite(cx) and math.isfinite(cy) and boundary.radius > 0:
            pygame.draw.circle(
                self.sim_surface,
                self.boundary_color,
                (int(cx), int(cy)),
                int(boundary.radius),
                BOUNDARY_LINE_WIDTH
            )

        self.screen.blit(self.sim_surface, (0, 0))

        self.screen.blit(self.ui_panel_surface, (self.sim_width, 0))
        entries = dict(self.sim_params)
        entries["tick"] = frame.tick
        entries["fps"] = self.clock.get_fps()
        if stats:
            entries.update(stats)
        self._draw_parameters(entries)

        pygame.display.flip()
        self.frames_drawn += 1

        if self.fps > 0:
            self.clock.tick(self.fps)
        else:
            self.clock.tick()

    def _on_surface(self, x: float, y: float, radius: float) -> bool:
        """True if a disc at (x, y) can touch the simulation surface."""
        if not (math.isfinite(x) and math.isfinite(y)):
            return False
        return -radius <= x <= self.sim_width + radius and -radius <= y <= self.sim_height + radius

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, float):
            return f"{value:.3f}" if abs(value) < 1 else f"{value:.1f}"
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v) for v in value)
        return str(value)

    def _draw_parameters(self, entries: Dict[str, Any]) -> int:
        """
        Renders key/value entries as one-line rows in the UI panel.

        Returns the number of rows drawn. Entries without a value are left out.
        """
        param_name_map = {
            "particle_count": "Particle Count",
            "ring_radius": "Ring Radius",
            "boundary_radius": "Boundary Radius",
            "particle_radius": "Particle Radius",
            "delta_time": "Delta Time",
            "fps": "FPS",
        }

        box_padding = 8
        row_height = self.font_main.get_linesize() + box_padding * 2
        panel_x = self.sim_width + 20
        panel_width = UI_PANEL_WIDTH - 40
        key_right_x = panel_x + panel_width // 2 - 10
        value_left_x = panel_x + panel_width // 2 + 10

        rows = 0
        current_y = 20
        for key, value in entries.items():
            if value is None:
                continue
            display_key = param_name_map.get(key, key.replace('_', ' ').title())

            box_rect = pygame.Rect(panel_x, current_y, panel_width, row_height)
            pygame.draw.rect(self.screen, self.param_box_color, box_rect, border_radius=6)

            key_surf = self.font_main_bold.render(display_key, True, self.text_color_key)
            value_surf = self.font_main.render(self._format_value(value), True, self.text_color_value)
            self.screen.blit(key_surf, key_surf.get_rect(topright=(key_right_x, current_y + box_padding)))
            self.screen.blit(value_surf, value_surf.get_rect(topleft=(value_left_x, current_y + box_padding)))

            current_y += row_height + self.param_box_spacing
            rows += 1
        return rows

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()

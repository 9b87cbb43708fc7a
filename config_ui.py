# config_ui.py

"""
Configuration Mode

A small fixed-size settings editor with shape toggle buttons, a threshold
slider, a live preview cell, and Save / Cancel buttons. Widget logic only
needs pygame.Rect and pygame events, so it can be exercised without a display.
"""

import logging
from dataclasses import replace

import numpy as np
import pygame

import constants
from cell import Cell
from renderer import build_drawable, draw_drawable, shape_points
from settings import Shape, ScreensaverConfig, clamp_threshold, save_settings

logger = logging.getLogger("hex_saver")

SAVE = "save"
CANCEL = "cancel"


class Button:
    def __init__(self, rect, label: str):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.selected = False

    def hit(self, pos) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        fill = constants.ACCENT if self.selected else constants.GREY
        pygame.draw.rect(surface, fill, self.rect, border_radius=4)
        text = font.render(self.label, True, constants.CONFIG_TEXT)
        surface.blit(text, text.get_rect(center=self.rect.center))


class Slider:
    """
    Horizontal slider over [0, 1].
    Clicking inside the track jumps to that value; dragging keeps following the
    mouse, even outside the track, until the button is released.
    """
    def __init__(self, rect, value: float = 0.0):
        self.rect = pygame.Rect(rect)
        self.value = clamp_threshold(value)
        self.dragging = False

    def value_at(self, x: float) -> float:
        return clamp_threshold((x - self.rect.left) / self.rect.width)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event changed the value."""
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.rect.collidepoint(event.pos):
            self.dragging = True
        elif not (event.type == pygame.MOUSEMOTION and self.dragging):
            return False

        new_value = self.value_at(event.pos[0])
        changed = new_value != self.value
        self.value = new_value
        return changed

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(surface, constants.GREY, self.rect, border_radius=3)
        filled = self.rect.copy()
        filled.width = int(round(self.rect.width * self.value))
        pygame.draw.rect(surface, constants.ACCENT, filled, border_radius=3)
        knob_x = self.rect.left + filled.width
        pygame.draw.circle(surface, constants.WHITE, (knob_x, self.rect.centery), self.rect.height)


class ConfigEditor:
    """
    Holds an editable copy of the settings and the widgets that change it.

    Data Contract:
    - Inputs:
        - config (ScreensaverConfig): The settings to start from. Not mutated.
        - rng (np.random.Generator): Colors for the preview cell.
    - Invariants: self.config always reflects the widget state.
    """
    PREVIEW_CENTER = (345, 150)

    def __init__(self, config: ScreensaverConfig, rng: np.random.Generator):
        self.config = replace(config)

        self.hexagon_button = Button((20, 75, 120, 36), "Hexagon")
        self.heart_button = Button((150, 75, 120, 36), "Heart")
        self.slider = Slider((20, 165, 250, 12), config.threshold)
        self.save_button = Button((20, 240, 110, 36), "Save")
        self.cancel_button = Button((150, 240, 110, 36), "Cancel")
        self._sync_shape_buttons()

        self.preview = Cell(self.PREVIEW_CENTER, constants.CELL_RADIUS, rng)

    def _sync_shape_buttons(self):
        self.hexagon_button.selected = self.config.shape is Shape.HEXAGON
        self.heart_button.selected = self.config.shape is Shape.HEART

    def handle_event(self, event: pygame.event.Event):
        """
        Applies one input event.
        - Outputs: SAVE, CANCEL, or None while editing continues.
        """
        if event.type == pygame.QUIT:
            return CANCEL
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return CANCEL
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return SAVE
            return None

        if self.slider.handle_event(event):
            self.config.threshold = self.slider.value
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.hexagon_button.hit(event.pos):
                self.config.shape = Shape.HEXAGON
                self._sync_shape_buttons()
            elif self.heart_button.hit(event.pos):
                self.config.shape = Shape.HEART
                self._sync_shape_buttons()
            elif self.save_button.hit(event.pos):
                return SAVE
            elif self.cancel_button.hit(event.pos):
                return CANCEL
        return None

    def update(self, dt: float):
        self.preview.update(dt)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, time: float):
        surface.fill(constants.CONFIG_BG)

        title = font.render("Screensaver settings", True, constants.CONFIG_TEXT)
        surface.blit(title, (20, 15))
        surface.blit(font.render("Shape", True, constants.CONFIG_TEXT), (20, 50))
        threshold_label = f"Threshold: {self.config.threshold:.2f}"
        surface.blit(font.render(threshold_label, True, constants.CONFIG_TEXT), (20, 135))

        for button in (self.hexagon_button, self.heart_button, self.save_button, self.cancel_button):
            button.draw(surface, font)
        self.slider.draw(surface)

        # --- Live preview: the outline is always shown, the fill pulses ---
        outline = shape_points(self.config.shape, self.preview.position, self.preview.radius)
        pygame.draw.polygon(surface, constants.GREY, np.rint(outline).astype(int).tolist(), 1)
        drawable = build_drawable(self.preview, time, self.config)
        if drawable is not None:
            draw_drawable(surface, drawable)


def run_config_mode(screen: pygame.Surface, config: ScreensaverConfig, rng: np.random.Generator,
                    clock: pygame.time.Clock, path: str = None) -> ScreensaverConfig:
    """
    Runs the settings editor until the user saves or cancels.

    - Outputs: ScreensaverConfig - The saved settings, or the original ones if
      the editor was cancelled.
    - Side Effects: Writes the settings file on Save (failures are logged only).
    """
    editor = ConfigEditor(config, rng)
    font = pygame.font.SysFont("consolas", constants.CONFIG_FONT_SIZE)
    time = 0.0

    while True:
        for event in pygame.event.get():
            result = editor.handle_event(event)
            if result == SAVE:
                logger.info(f"Saving settings: {editor.config}")
                save_settings(editor.config, path)
                return editor.config
            if result == CANCEL:
                logger.info("Settings editor cancelled.")
                return config

        dt = clock.tick(constants.FPS) / 1000.0
        time += dt
        editor.update(dt)
        editor.draw(screen, font, time)
        pygame.display.flip()

# session.py

import logging
from enum import Enum

import pygame

logger = logging.getLogger("hex_saver")


class Mode(Enum):
    SCREENSAVER = "screensaver"
    CONFIGURE = "configure"
    PREVIEW = "preview"
    DEBUG = "debug"


# Windows passes these as "/s", "/c:1234", "/p 5678"; other hosts use dashes.
_MODE_PREFIXES = (
    (("/c", "-c"), Mode.CONFIGURE),
    (("/s", "-s"), Mode.SCREENSAVER),
    (("/p", "-p"), Mode.PREVIEW),
)


def parse_mode(argv) -> Mode:
    """
    Selects the run mode from the first command-line argument (argv excludes
    the program name). Matching is by prefix and case-insensitive; anything
    unrecognised runs the windowed debug mode.
    """
    if not argv:
        return Mode.DEBUG

    arg = argv[0].lower()
    for prefixes, mode in _MODE_PREFIXES:
        if arg.startswith(prefixes):
            return mode
    return Mode.DEBUG


class ActivityMonitor:
    """
    Decides when user activity ends a screensaver session.

    The session ends on an Escape key press, on any mouse button press, or on
    the second mouse-motion event. The first motion event is only recorded,
    since hosts commonly deliver one spurious motion sample when the window
    appears.
    """
    def __init__(self):
        self.motion_events = 0

    def should_exit(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
        if event.type == pygame.MOUSEBUTTONDOWN:
            return True
        if event.type == pygame.MOUSEMOTION:
            self.motion_events += 1
            if self.motion_events == 1:
                logger.debug(f"First mouse motion at {event.pos} tolerated.")
                return False
            return True
        return False


def debug_should_exit(event: pygame.event.Event) -> bool:
    """Debug mode only stops on window close or Escape."""
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE

# main.py

import logging
import sys

import numpy as np
import pygame

import constants
import logger_setup
from app_config import load_app_config
from config_ui import run_config_mode
from session import ActivityMonitor, Mode, debug_should_exit, parse_mode
from settings import load_settings
from tiling_system import TilingSystem

# Get the application's dedicated logger
logger = logging.getLogger("hex_saver")


def run_screensaver_loop(tiling_system, screen, clock, config, should_exit):
    """
    The frame loop shared by screensaver and debug modes.

    - Inputs:
        - tiling_system (TilingSystem): The cells to animate.
        - screen (pygame.Surface): The display surface.
        - clock (pygame.time.Clock): Frame pacing.
        - config (ScreensaverConfig): Shape and threshold, read-only here.
        - should_exit (callable): Maps a pygame event to True when the session ends.
    - Outputs: int - Number of frames rendered.
    """
    # --- Loop Setup ---
    running = True
    frame = 0
    time = 0.0

    while running:
        # Event handling
        for event in pygame.event.get():
            if should_exit(event):
                logger.info(f"Session ending on {pygame.event.event_name(event.type)} after {time:.1f}s.")
                running = False
                break
        if not running:
            break

        # --- Animation Update ---
        dt = clock.tick(constants.FPS) / 1000.0
        time += dt
        tiling_system.update(dt)

        # --- Drawing ---
        screen.fill(constants.BLACK)
        drawn = tiling_system.draw(screen, time, config)
        pygame.display.flip()

        # --- Logging (throttled) ---
        if frame % constants.LOG_EVERY_FRAMES == 0:
            logger.debug(f"Frame={frame}, Time={time:.2f}s, FPS={clock.get_fps():.1f}, Drawn={drawn}")
        frame += 1

    return frame


def main(argv=None):
    """
    Entry point. Selects the run mode from the command line and runs it.
    Returns the process exit status.
    """
    if argv is None:
        argv = sys.argv[1:]
    mode = parse_mode(argv)

    # --- Setup ---
    app_config = load_app_config()
    logger_setup.setup_logging(app_config)
    logger.info(f"Application starting in {mode.value} mode (argv={argv}).")

    if mode is Mode.PREVIEW:
        logger.info("Preview mode is not rendered. Exiting.")
        return 0

    config = load_settings()
    logger.info(f"Loaded settings: shape={config.shape.value}, threshold={config.threshold:.3f}")

    # Initialize the master random number generator (RNG). A null seed is unseeded.
    rng = np.random.default_rng(app_config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {app_config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    clock = pygame.time.Clock()

    if mode is Mode.CONFIGURE:
        screen = pygame.display.set_mode((constants.CONFIG_WIDTH, constants.CONFIG_HEIGHT))
        pygame.display.set_caption(constants.CONFIG_TITLE)
        run_config_mode(screen, config, rng, clock)
        logger.info("Application shutting down.")
        pygame.quit()
        return 0

    if mode is Mode.SCREENSAVER:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        pygame.mouse.set_visible(False)
        should_exit = ActivityMonitor().should_exit
    else:
        screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
        should_exit = debug_should_exit
    pygame.display.set_caption(constants.TITLE)

    tiling_system = TilingSystem(
        bounds=screen.get_size(),
        cell_radius=float(app_config['engine']['cell_radius']),
        rng=rng,
    )

    frames = run_screensaver_loop(tiling_system, screen, clock, config, should_exit)

    logger.info(f"Rendered {frames} frames. Application shutting down.")
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())

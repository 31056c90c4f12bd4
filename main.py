# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from particle_system import initialize
from physics_engine import UniverseConstants, step, snapshot

# Get the application's dedicated logger
logger = logging.getLogger("universe_sim")


def draw_particles(screen, trail_surface, positions):
    """Fades the previous frame and draws each particle as a small white dot."""
    screen.blit(trail_surface, (0, 0))
    for x, y in positions:
        pygame.draw.circle(screen, constants.WHITE, (x, y), constants.PARTICLE_DRAW_RADIUS)


def make_trail_surface(size):
    trail_surface = pygame.Surface(size, pygame.SRCALPHA)
    trail_surface.fill(constants.TRAIL_EFFECT_COLOR)
    return trail_surface


def run_simulation_loop(particle_system, universe_constants, default_constants, particle_count, log_interval, screen, clock):
    """
    The caller-owned scheduling loop: one physics step per rendered frame.

    Controls:
    - SPACE: start / pause stepping.
    - R: reset the particles and the constants to their configured defaults.
    - Window resize: updates the simulation bounds.
    """
    trail_surface = make_trail_surface(screen.get_size())
    running = True
    paused = False
    tick = 0

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                trail_surface = make_trail_surface((event.w, event.h))
                particle_system.resize((event.w, event.h))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    paused = not paused
                    logger.info("Simulation paused." if paused else "Simulation started.")
                elif event.key == pygame.K_r:
                    universe_constants = default_constants
                    particle_system.reset(particle_count, screen.get_size())
                    tick = 0
                    logger.info(f"Simulation reset to defaults: {universe_constants}")

        if not paused:
            step(particle_system, universe_constants)

            # --- Diagnostics (throttled) ---
            if tick % log_interval == 0:
                logger.debug(
                    f"Tick={tick}, "
                    f"Particles={len(particle_system)}, "
                    f"Kinetic={particle_system.get_total_kinetic_energy():.3f}, "
                    f"RMSSpread={particle_system.get_rms_spread():.2f}"
                )
            tick += 1

        draw_particles(screen, trail_surface, snapshot(particle_system))
        pygame.display.flip()
        clock.tick(constants.FPS)


def main():
    """
    Main function to initialize and run the simulation.
    """
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)
    sim_config = config['simulation']
    log_interval = config.get('diagnostics', {}).get('log_interval_ticks', 100)

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    default_constants = UniverseConstants.from_config(sim_config.get('constants'))

    particle_count = sim_config.get('particle_count', constants.DEFAULT_PARTICLE_COUNT)
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    particle_system = initialize(
        particle_count,
        (constants.WIDTH, constants.HEIGHT),
        rng=rng,
    )

    run_simulation_loop(
        particle_system, default_constants, default_constants,
        particle_count, log_interval, screen, clock
    )

    logger.info("Application shutting down.")
    pygame.quit()

if __name__ == "__main__":
    main()

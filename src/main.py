"""Entry point and frame loop."""
from __future__ import annotations
import argparse
import json
import sys

import pygame

from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TITLE, HEADING_POLL_INTERVAL,
    GraphConfig, load_config,
)
from .core.events import EventBus, HeadingChangedEvent, BounceEvent, TeardownEvent
from .core.graph import RandomDirectionGraph
from .core.host import monotonic_ms
from .core.scheduler import PeriodicTimer
from .logging_setup import get_logger, setup_logging
from .ui.controls import SpeedSlider
from .ui.input import InputHandler, InputAction
from .ui.paint import Color
from .ui.surface import PygameSurface

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="random-graph", description=TITLE)
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Initial window width")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Initial window height")
    parser.add_argument("--config", help="JSON file with graph options")
    parser.add_argument("--duration", type=float, help="Retention window in ms")
    parser.add_argument("--line-width", type=float, help="Main stroke width in pixels")
    parser.add_argument("--line-color", help="Accent colour as #rrggbb")
    parser.add_argument("--no-controls", action="store_true", help="Hide the speed slider")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def resolve_config(args: argparse.Namespace) -> GraphConfig:
    """Merge the optional config file with command line overrides."""
    config = load_config(args.config) if args.config else GraphConfig()
    overrides = config.to_dict()
    if args.duration is not None:
        overrides['retention_window'] = args.duration
    if args.line_width is not None:
        overrides['line_width'] = args.line_width
    if args.line_color is not None:
        overrides['line_color'] = args.line_color
    if args.no_controls:
        overrides['show_controls'] = False
    return GraphConfig.from_dict(overrides)


def subscribe_logging(event_bus: EventBus) -> None:
    """Mirror graph events into the log."""
    events_logger = get_logger("events")

    def on_heading(event: HeadingChangedEvent) -> None:
        events_logger.debug("t=%.0f heading %s, next in %.0f ms", event.time, event.direction, event.interval)

    def on_bounce(event: BounceEvent) -> None:
        events_logger.debug("t=%.0f bounce at %s", event.time, event.position)

    def on_teardown(event: TeardownEvent) -> None:
        events_logger.info("Graph stopped")

    event_bus.subscribe(HeadingChangedEvent, on_heading)
    event_bus.subscribe(BounceEvent, on_bounce)
    event_bus.subscribe(TeardownEvent, on_teardown)


def main(argv: list[str] | None = None) -> int:
    """Run the graph in a pygame window until the user quits."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper(), args.log_file)

    try:
        config = resolve_config(args)
    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        logger.error("Could not load configuration: %s", e)
        return 2
    logger.info("Loaded configuration: %s", config)

    try:
        accent = Color.from_hex(config.line_color)
    except ValueError as e:
        logger.error("Invalid line colour: %s", e)
        return 2

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    except pygame.error as e:
        logger.error("Could not open a display: %s", e)
        pygame.quit()
        return 1
    pygame.display.set_caption(TITLE)
    pygame.key.set_repeat(300, 30)
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 22)

    screen_w, screen_h = screen.get_size()
    # The trail lives on its own canvas so the slider panel isn't ghosted
    canvas = pygame.Surface((screen_w, screen_h))

    event_bus = EventBus()
    subscribe_logging(event_bus)

    graph = RandomDirectionGraph(
        screen_w, screen_h, config,
        clock=monotonic_ms,
        surface=PygameSurface(canvas),
        event_bus=event_bus,
    )

    slider = SpeedSlider(accent=accent, visible=config.show_controls)
    slider.on_change(graph.on_speed_input)
    input_handler = InputHandler(slider)

    heading_timer = PeriodicTimer(HEADING_POLL_INTERVAL, graph.on_heading_poll, monotonic_ms())

    def on_resize(width: int, height: int) -> None:
        nonlocal screen, canvas
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        # A fresh canvas drops the ghosted history, like resizing an HTML canvas
        canvas = pygame.Surface((width, height))
        graph.attach_surface(PygameSurface(canvas))
        graph.on_resize(width, height)

    def on_quit() -> None:
        heading_timer.cancel()
        graph.teardown()

    input_handler.register_callback(InputAction.RESIZE, on_resize)
    input_handler.register_callback(InputAction.QUIT, on_quit)

    running = True
    while running:
        running = input_handler.process_events(pygame.event.get())
        if not running or not graph.alive:
            break

        now = monotonic_ms()
        heading_timer.update(now)
        graph.on_frame_tick(now)

        screen.blit(canvas, (0, 0))
        slider.draw(screen, font)
        pygame.display.flip()
        clock.tick(FPS)

    # Both calls are idempotent, so quitting via the QUIT action is fine too
    on_quit()
    pygame.quit()
    logger.info("Application shutting down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""main entrypoint for robomaze"""
from __future__ import annotations

import argparse
import logging
import os
import random
import sys

import rich

from rich.logging import RichHandler

from .controllers import CONTROLLERS, load_controllers
from .execution import EngineStatus, PolledEngine, ThreadedEngine
from .front import ConsoleRenderer, heading, log_level, size
from .generators import GENERATORS, load_generators

_logger = logging.getLogger(__package__)

LOG_LEVEL_ENV = 'ROBOMAZE_LOG_LEVEL'


def __setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=rich.get_console(), rich_tracebacks=True, show_path=False)],
    )


def __generate(args: argparse.Namespace):
    generator = GENERATORS[args.generator](rng=random.Random(args.seed))
    if args.size is not None:
        generator.set_options(args.size)
        if generator.options != args.size:
            _logger.warning("%s: ignored size %s, using %s", generator.name, args.size, generator.options)
    maze = generator.generate_maze()
    _logger.info("generated a %dx%d maze with %s", maze.width, maze.height, generator.name)
    return maze


def __build_generation_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-g', '--generator',
        choices=sorted(GENERATORS),
        default='gapped-prim',
        help="The maze generator. (default: %(default)s)",
    )
    parser.add_argument(
        '-s', '--size',
        type=size,
        help="The maze size as WIDTHxHEIGHT, interpreted by the generator. (default: the generator's default)",
    )
    parser.add_argument(
        '--seed',
        type=int,
        help="Seed for the generator's random source. (default: random)",
    )


def main():
    """
    The main entrypoint for robomaze, generates a maze based on commandline
    arguments and either draws it or runs a controller through it.
    """
    load_controllers()
    load_generators()

    parser = argparse.ArgumentParser(
        description="Robot in a procedurally generated maze.",
    )
    parser.add_argument(
        '--log-level',
        type=log_level,
        default=os.environ.get(LOG_LEVEL_ENV, 'WARNING'),
        help=f"The logging level. (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    subparsers = parser.add_subparsers(
        title='subcommands',
        dest='main_action',
        required=True,
    )

    generate = subparsers.add_parser(
        'generate',
        help="Generate a maze and draw it.",
        description="Generate a maze and draw it.",
    )
    __build_generation_args(generate)

    run = subparsers.add_parser(
        'run',
        help="Generate a maze and run a controller through it.",
        description="Generate a maze and run a controller through it.",
    )
    __build_generation_args(run)
    run.add_argument(
        '-c', '--controller',
        choices=sorted(CONTROLLERS),
        default='Right Wall Follower',
        help="The controller that drives the robot. (default: %(default)s)",
    )
    run.add_argument(
        '-d', '--delay',
        type=float,
        default=0.05,
        help="Seconds to wait after each tick. (default: %(default)s)",
    )
    run.add_argument(
        '--heading',
        type=heading,
        help="The robot's starting heading. (default: south)",
    )
    run.add_argument(
        '--threaded',
        action='store_true',
        help="Run the controller on a worker thread.",
    )
    run.add_argument(
        '--no-live',
        dest='live',
        action='store_false',
        help="Only draw the end result.",
    )

    args = parser.parse_args()
    __setup_logging(args.log_level)

    maze = __generate(args)

    match args.main_action:
        case 'generate':
            rich.get_console().print(maze.render(), highlight=False)
        case 'run':
            controller = CONTROLLERS[args.controller]()
            engine_class = ThreadedEngine if args.threaded else PolledEngine
            engine = engine_class(controller, maze)
            if args.heading is not None:
                engine.set_heading(args.heading)
            engine.delay = args.delay
            try:
                status = ConsoleRenderer(engine, live=args.live).run()
            except KeyboardInterrupt:
                status = engine.status
            except Exception:  # pylint: disable=broad-exception-caught
                rich.get_console().print_exception(show_locals=True)
                sys.exit(1)
            if status is not EngineStatus.FINISHED:
                print(f"robomaze: stopped before reaching the goal ({status.name.lower()})", file=sys.stderr)
                sys.exit(1)


if __name__ == '__main__':
    main()

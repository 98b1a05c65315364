"""Command line entry point for the fractal viewer."""

import os
from argparse import ArgumentParser

from .settings import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    ESCAPE_RADIUS,
    MAX_ITER,
    SNAPSHOT_DIR,
    log,
    set_verbose,
)


def build_parser():
    parser = ArgumentParser(prog='fractalviewer',
                            description='Interactive Mandelbrot/Julia set viewer.')

    parser.add_argument('--width', type=int, dest='width', metavar='WIDTH',
                        default=DEFAULT_WIDTH, help='image width in pixels')
    parser.add_argument('--height', type=int, dest='height', metavar='HEIGHT',
                        default=DEFAULT_HEIGHT, help='image height in pixels')
    parser.add_argument('--max-iter', type=int, dest='max_iter', metavar='MAX_ITER',
                        default=MAX_ITER, help='iteration cap before a point counts as inside')
    parser.add_argument('--escape-radius', type=float, dest='escape_radius',
                        metavar='RADIUS', default=ESCAPE_RADIUS,
                        help='escape threshold on |z|')
    parser.add_argument('--snapshot-dir', type=str, dest='snapshot_dir', metavar='DIR',
                        default=SNAPSHOT_DIR, help='directory for images saved with S')
    parser.add_argument('--snapshot', type=str, dest='snapshot', metavar='PATH',
                        help='render the initial view to PATH (PNG) and exit without a window')
    parser.add_argument('--julia', type=float, nargs=2, dest='julia', metavar=('RE', 'IM'),
                        help='with --snapshot, render the Julia set of c = RE + IM*i')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print render timings and view changes')

    return parser


def render_snapshot(args):
    """Render one frame without opening a window and save it."""
    from dataclasses import replace

    from .renderer import render
    from .snapshot import save_snapshot
    from .view import Julia, initial_state

    state = initial_state()
    if args.julia is not None:
        state = replace(state, mode=Julia(*args.julia))

    log(f"Rendering {args.width}x{args.height} {state.mode.name}")
    rgb = render(state, args.width, args.height, args.max_iter, args.escape_radius)
    directory, filename = os.path.split(args.snapshot)
    return save_snapshot(rgb, state.mode, directory or '.', filename)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    if args.width < 2 or args.height < 2:
        parser.error('--width and --height must be at least 2')
    if args.max_iter < 1:
        parser.error('--max-iter must be positive')
    if args.escape_radius <= 0:
        parser.error('--escape-radius must be positive')
    if args.julia is not None and args.snapshot is None:
        parser.error('--julia requires --snapshot')

    if args.snapshot:
        render_snapshot(args)
        return 0

    from .app import run
    run(args.width, args.height, args.max_iter, args.escape_radius, args.snapshot_dir)
    return 0

#!/usr/bin/env python3
"""
RayForge - demo programs for the ray tracer math core

Main entry point for running the demos.
"""

import argparse
import math
import sys
import time
from pathlib import Path

from rayforge.matrix import Matrix
from rayforge.shapes import Sphere
from rayforge.canvas import Canvas
from rayforge.transforms import scaling, rotation_z, shearing
from rayforge.renderer import Renderer, RenderSettings
from rayforge.demos import default_launch, simulate, draw_clock


SPHERE_VARIANTS = {
    'plain': lambda: Matrix.identity(4),
    'squash-y': lambda: scaling(1, 0.5, 1),
    'squash-x': lambda: scaling(0.5, 1, 1),
    'rotate': lambda: rotation_z(math.pi / 4) @ scaling(0.5, 1, 1),
    'skew': lambda: shearing(1, 0, 0, 0, 0, 0) @ scaling(0.5, 1, 1),
}


def run_projectiles() -> int:
    """Print the projectile's position at every tick."""
    proj, env = default_launch()
    for n, state in enumerate(simulate(proj, env)):
        print(f"[{n}]: {state.position}")
    return 0


def run_clock(args: argparse.Namespace) -> int:
    """Draw the hour marks of a clock face."""
    canvas = draw_clock(Canvas(args.width, args.height))
    save(canvas, args.output or 'output/clock.png')
    return 0


def run_sphere(args: argparse.Namespace) -> int:
    """Render a sphere silhouette."""
    settings = RenderSettings(
        width=args.width,
        height=args.height,
        num_threads=args.threads
    )

    print(f"\nRender Settings:")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Threads: {settings.num_threads}")
    print(f"  Variant: {args.variant}")

    sphere = Sphere(SPHERE_VARIANTS[args.variant]())
    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    print("\nRendering...")
    start_time = time.time()

    canvas = renderer.render(sphere)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    if elapsed > 0:
        print(f"  Rays per second: {(settings.width * settings.height) / elapsed:.0f}")

    save(canvas, args.output or 'output/sphere.png')
    return 0


def save(canvas: Canvas, output: str) -> None:
    # Ensure output directory exists
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    print(f"\nSaving to: {output}")
    canvas.save(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='RayForge - ray tracer math core demos',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --demo projectiles
  python main.py --demo clock --output clock.png
  python main.py --demo sphere --variant skew --width 512 --height 512
        '''
    )

    parser.add_argument('--demo', type=str, default='sphere', choices=['sphere', 'clock', 'projectiles'],
                        help='Demo to run (default: sphere)')
    parser.add_argument('--width', type=int, default=256, help='Image width (default: 256)')
    parser.add_argument('--height', type=int, default=256, help='Image height (default: 256)')
    parser.add_argument('--threads', type=int, default=0, help='Number of threads (0=auto)')
    parser.add_argument('--variant', type=str, default='plain', choices=sorted(SPHERE_VARIANTS),
                        help='Sphere transform (default: plain)')
    parser.add_argument('--output', type=str, default=None, help='Output filename')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.demo == 'projectiles':
        return run_projectiles()

    # Print header
    print("=" * 60)
    print("RayForge")
    print("=" * 60)

    if args.demo == 'clock':
        status = run_clock(args)
    else:
        status = run_sphere(args)

    print("\nDone!")
    return status


if __name__ == '__main__':
    sys.exit(main())

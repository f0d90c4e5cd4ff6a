"""
MANDELSCAPE COMMAND LINE
========================

Usage:
    python -m mandelscape.cli view                         # Interactive viewer
    python -m mandelscape.cli view --profile perspective
    python -m mandelscape.cli stats --frames 30            # Headless timing + metrics
    python -m mandelscape.cli stats -P flat --max-iter 30
"""

import argparse
import logging
import time

from .core.metrics import compute_frame_metrics
from .core.profiles import DEFAULT_PROFILE, PROFILES, get_profile
from .interactive.state import FRAME_INTERVAL_MS, FrameLoop

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Animated pseudo-3D Mandelbrot point cloud')
    parser.add_argument('mode', nargs='?', choices=['view', 'stats'], default='view',
                        help='Interactive viewer or headless stats (default: view)')

    parser.add_argument('--profile', '-P', choices=list(PROFILES.keys()), default=DEFAULT_PROFILE,
                        help=f'Visual profile (default: {DEFAULT_PROFILE})')
    parser.add_argument('--max-iter', '-i', type=int,
                        help='Override iteration cap')
    parser.add_argument('--lattice', '-n', type=int,
                        help='Override lattice size (points per side)')
    parser.add_argument('--projection', choices=['orthographic', 'perspective'],
                        help='Override projection mode')

    parser.add_argument('--frames', '-f', type=int, default=30,
                        help='Frames to render in stats mode (default: 30)')
    parser.add_argument('--start', type=float, default=0.0,
                        help='Start time in ms for stats mode (default: 0)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def profile_from_args(args):
    overrides = {}
    if args.max_iter is not None:
        overrides['max_iter'] = args.max_iter
    if args.lattice is not None:
        overrides['lattice_size'] = args.lattice
    if args.projection is not None:
        overrides['projection'] = args.projection
    return get_profile(args.profile, **overrides)


def run_stats(profile, frames: int, start: float = 0.0):
    """Render frames on a simulated 33 ms clock and log timing and metrics."""
    loop = FrameLoop(profile, start_time=start)
    elapsed = []

    for i in range(frames):
        t = start + i * FRAME_INTERVAL_MS
        t0 = time.perf_counter()
        batch = loop.tick(t)
        elapsed.append(time.perf_counter() - t0)

        m = compute_frame_metrics(batch.cloud, profile)
        logger.info(f"  frame {i:3d} t={t:7.0f}ms region={m.region} "
                    f"interior={m.interior_fraction:.3f} escape={m.mean_escape:.3f} "
                    f"islands={m.island_count} ({elapsed[-1] * 1000:.1f} ms)")

    mean_ms = 1000 * sum(elapsed) / max(len(elapsed), 1)
    logger.info(f"Rendered {frames} frames of {profile.n_points} points, "
                f"mean {mean_ms:.1f} ms/frame (budget {FRAME_INTERVAL_MS} ms)")
    return mean_ms


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    profile = profile_from_args(args)

    if args.mode == 'stats':
        logger.info("=" * 70)
        logger.info(f"MANDELSCAPE STATS - profile '{profile.name}'")
        logger.info("=" * 70)
        run_stats(profile, args.frames, args.start)
        return

    from .interactive.viewer import MandelscapeViewer
    MandelscapeViewer(profile).run()


if __name__ == '__main__':
    main()

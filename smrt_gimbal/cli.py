"""
SMRT Gimbal - CLI

Runs a scripted gimbal scenario on an upright vehicle with one nozzle
below the center of mass, prints a summary and optionally writes plots.
"""

import argparse
import logging
import os
import sys

from .config import GimbalConfig
from .main import constant_demand, run_simulation
from .types import ControlDemand
from .vehicle import create_default_vehicle

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="SMRT thrust-vectoring gimbal scenario",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--gimbal-range", type=float, default=5.0,
                        help="Maximum nozzle deflection (degrees)")
    parser.add_argument("--pitch", type=float, default=1.0, help="Pitch demand")
    parser.add_argument("--yaw", type=float, default=0.0, help="Yaw demand")
    parser.add_argument("--roll", type=float, default=0.0, help="Roll demand")
    parser.add_argument("--ticks", type=int, default=50, help="Number of ticks to run")
    parser.add_argument("--nozzle-offset", type=float, default=5.0,
                        help="Distance from center of mass to nozzle (m)")
    parser.add_argument("--lock-at", type=int, default=None,
                        help="Tick at which to lock the gimbal")
    parser.add_argument("--clamp", action="store_true",
                        help="Clamp control inputs to [-1, 1]")
    parser.add_argument("--plot-dir", type=str, default=None,
                        help="Directory to write plots into")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Suppress verbose output")
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution flow."""
    args = parse_args(argv)

    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    try:
        config = GimbalConfig(gimbal_range=args.gimbal_range,
                              clamp_control_input=args.clamp,
                              validate=True, verbose=not args.quiet)
        vehicle = create_default_vehicle(nozzle_offset=args.nozzle_offset)
        demand = ControlDemand(args.pitch, args.yaw, args.roll)
        commands = {args.lock_at: 'lock'} if args.lock_at is not None else None

        controller, log, reason = run_simulation(
            vehicle, config, schedule=constant_demand(demand),
            n_ticks=args.ticks, commands=commands)

        print("\n" + "=" * 60)
        print("GIMBAL SUMMARY")
        print("=" * 60)
        print(f"Termination reason: {reason}")
        print(f"Final mode: {controller.mode.name}")
        if len(log) > 0:
            print(f"Final deflection: {log.deflection_deg[-1]:.4f} deg "
                  f"(range {config.gimbal_range} deg)")
            print(f"Saturated: {log.saturated[-1]}")
        print("=" * 60 + "\n")

        if args.plot_dir and len(log) > 0:
            from .plotting import generate_all_plots
            plot_dir = os.path.abspath(args.plot_dir)
            logger.info(f"Generating plots in {plot_dir}")
            for path in generate_all_plots(log, config.gimbal_range, plot_dir):
                print(f"Wrote {path}")

    except Exception as e:
        logger.error(f"Gimbal run failed: {e}", exc_info=True)
        print(f"\n[ERROR] Gimbal run failed: {e}")
        sys.exit(1)

    return 0


if __name__ == "__main__":
    main()

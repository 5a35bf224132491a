"""Main entry point for the Dipole Antenna Adjuster command line."""
import argparse
import json
import sys
import traceback
from typing import List, Optional
from loguru import logger

from calculator import ValidationError, adjust, calculate
from report import describe_error, error_to_dict, format_result, result_to_dict
from settings import Settings, SettingsError, load_settings

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dipole-adjuster",
        description="Half-wave dipole cut lengths and resonance adjustment",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    vf_help = f"Velocity factor of the element wire (default {settings.default_velocity_factor})"

    calc = subparsers.add_parser("calc", help="Dipole and branch lengths for a frequency")
    calc.add_argument("--target", required=True, help="Design frequency in MHz")
    calc.add_argument("--vf", default=str(settings.default_velocity_factor), help=vf_help)
    calc.add_argument("--json", action="store_true", help="Print full-precision JSON")

    adj = subparsers.add_parser("adjust", help="Branch change to move resonance to a target")
    adj.add_argument("--measured", required=True, help="Measured resonant frequency in MHz")
    adj.add_argument("--target", required=True, help="Wanted resonant frequency in MHz")
    adj.add_argument("--vf", default=str(settings.default_velocity_factor), help=vf_help)
    adj.add_argument("--json", action="store_true", help="Print full-precision JSON")

    chart = subparsers.add_parser("chart", help="Cut chart across a frequency range or band")
    chart.add_argument("--band", help="Preset band name, e.g. 20m")
    chart.add_argument("--start", type=float, help="Start frequency in MHz")
    chart.add_argument("--stop", type=float, help="Stop frequency in MHz")
    chart.add_argument("--points", type=int, default=settings.chart_points,
                       help=f"Number of sweep points (default {settings.chart_points})")
    chart.add_argument("--vf", default=str(settings.default_velocity_factor), help=vf_help)
    chart.add_argument("--plot", metavar="PATH", help="Also save a PNG chart to PATH")

    subparsers.add_parser("bands", help="List band presets and cable velocity factors")
    return parser


def _print_result(result, settings: Settings, as_json: bool) -> int:
    if isinstance(result, ValidationError):
        logger.warning(f"Rejected input: {result.kind.value} {[f.value for f in result.fields]}")
        if as_json:
            print(json.dumps(error_to_dict(result), indent=2))
        else:
            print(f"Error: {describe_error(result)}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if as_json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        print("\n".join(format_result(result, settings)))
    return EXIT_OK


def _run_chart(args, settings: Settings) -> int:
    from band_chart import BandCutChart, ChartError, frequency_sweep
    from presets import BandPresets

    if args.band and (args.start is not None or args.stop is not None):
        print("Error: chart takes either --band or --start/--stop, not both", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        chart = BandCutChart(args.vf)
        if args.band:
            band = BandPresets.get_band(args.band)
            start, stop = band.lower_mhz, band.upper_mhz
            title = f"{band.name} half-wave dipole (VF {chart.velocity_factor:.2f})"
        elif args.start is not None and args.stop is not None:
            start, stop = args.start, args.stop
            title = None
        else:
            print("Error: chart needs --band or both --start and --stop", file=sys.stderr)
            return EXIT_INVALID_INPUT

        sweep = chart.calculate_sweep(frequency_sweep(start, stop, args.points))
        print(chart.render_table(sweep, settings.length_decimals))

        if args.plot:
            path = chart.plot_sweep(sweep, args.plot, title=title)
            print(f"\nChart saved to {path}")
        return EXIT_OK

    except ChartError as e:
        message = str(e)
    except KeyError as e:
        message = e.args[0]
    logger.warning(f"Chart request rejected: {message}")
    print(f"Error: {message}", file=sys.stderr)
    return EXIT_INVALID_INPUT


def _run_bands(settings: Settings) -> int:
    from presets import BandPresets, CABLE_VELOCITY_FACTORS

    print(f"{'Band':<6} {'Edges (MHz)':<20} {'Center':>9} {'λ/2 (m)':>9} {'λ/4 (m)':>9}")
    for band in BandPresets.get_all_bands().values():
        cut = band.cut_lengths(settings.default_velocity_factor)
        edges = f"{band.lower_mhz:.3f}-{band.upper_mhz:.3f}"
        print(f"{band.name:<6} {edges:<20} {band.center_mhz:>9.3f} "
              f"{cut.full_dipole_length_m:>9.3f} {cut.branch_length_m:>9.3f}")

    print("\nCable velocity factors:")
    for name, vf in CABLE_VELOCITY_FACTORS.items():
        print(f"  {name:<20} {vf:.2f}")
    return EXIT_OK


def run(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """Parse arguments and dispatch; returns the process exit code."""
    settings = settings or load_settings()
    args = build_parser(settings).parse_args(argv)
    logger.debug(f"Command: {args.command}")

    if args.command == "calc":
        return _print_result(calculate(args.target, args.vf), settings, args.json)
    if args.command == "adjust":
        return _print_result(adjust(args.measured, args.target, args.vf), settings, args.json)
    if args.command == "chart":
        return _run_chart(args, settings)
    return _run_bands(settings)


def main():
    """Application entry point with comprehensive error handling."""
    try:
        from core import setup_logging
        settings = load_settings()
        setup_logging(settings)
        logger.info("Starting Dipole Antenna Adjuster")
        sys.exit(run(settings=settings))

    except SettingsError as e:
        print(f"Configuration error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    except ImportError as e:
        logger.critical(f"Import error: {str(e)}")
        print(f"Error: Missing required modules. Please install dependencies: {str(e)}")
        print("Run: pip install -e .")
        sys.exit(EXIT_FAILURE)

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        print("\nApplication interrupted by user.")
        sys.exit(EXIT_OK)

    except Exception as e:
        logger.critical(f"Unexpected application error: {str(e)}")
        logger.critical(traceback.format_exc())
        print(f"An unexpected error occurred: {str(e)}")
        print("Check the log file 'dipole_adjuster.log' for more details.")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()

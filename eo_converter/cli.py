"""
Command-line interface for EO Converter.

Converts one CCNS4 exterior orientation log into a projected orientation file.
"""

import argparse
import sys
import logging
import traceback
from typing import List, Optional

from .config import ConversionConfig
from .pipeline import OrientationConverter
from .utils import ConversionError
from . import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog='eo-converter',
        description="Project the camera positions of a CCNS4 exterior orientation log into UTM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert flight.eo, writing the result to flight
  eo-converter flight

  # Write the result to a separate file
  eo-converter flight flight_utm.txt

  # Skip the zone prompt by forcing the target system
  eo-converter flight --epsg 32630

  # Report the zones found without writing anything
  eo-converter flight --validate-only
        """
    )

    # Input/output arguments
    parser.add_argument(
        'path',
        help='Orientation log path without extension (reads <path>.eo)'
    )
    parser.add_argument(
        'output',
        nargs='?',
        help='Output file (default: <path>)'
    )

    # Configuration arguments
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration file path (JSON format)'
    )

    parser.add_argument(
        '--save-config',
        type=str,
        help='Save current configuration to file'
    )

    # Conversion parameters
    parser.add_argument(
        '--epsg',
        type=int,
        help='Target EPSG code; skips the interactive zone selection'
    )

    parser.add_argument(
        '--source-epsg',
        type=int,
        help='EPSG code of the log coordinates (default: 4326)'
    )

    parser.add_argument(
        '--extension', '-e',
        type=str,
        help='Extension of the orientation log (default: .eo)'
    )

    parser.add_argument(
        '--validate-only',
        action='store_true',
        help='Parse the log and report its zones without writing output'
    )

    # Logging and debugging
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except errors'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def setup_logging(verbose: bool = False, debug: bool = False, quiet: bool = False):
    """Configure logging based on command line arguments."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def create_config_from_args(args: argparse.Namespace) -> ConversionConfig:
    """Create ConversionConfig from command line arguments."""
    # Start with config file if provided
    if args.config:
        config = ConversionConfig.from_file(args.config)
    else:
        config = ConversionConfig()

    # Override with command line arguments
    if args.epsg is not None:
        config.target_epsg = args.epsg

    if args.source_epsg is not None:
        config.source_epsg = args.source_epsg

    if args.extension is not None:
        config.input_extension = args.extension

    if args.verbose or args.debug:
        config.verbose = True

    # Re-run validation on the overridden values
    return config.copy()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.verbose, args.debug, args.quiet)
    logger = logging.getLogger('eo_converter.cli')

    try:
        config = create_config_from_args(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    try:
        # Save configuration if requested
        if args.save_config:
            config.to_file(args.save_config)
            logger.info(f"Configuration saved to: {args.save_config}")

        converter = OrientationConverter(config)

        # Handle validate only option
        if args.validate_only:
            records = converter.load_records(args.path)
            zones = converter.selector.summarize(records)
            print(f"Validation complete. Found {len(records)} orientation records.")
            for epsg_code, count in zones.items():
                name = converter.coordinate_converter.lookup_name(int(epsg_code))
                print(f"  EPSG:{epsg_code} {name}: {count} records")
            return 0

        results = converter.run(args.path, args.output)

        if not args.quiet:
            print(f"Converted {results['record_count']} records to "
                  f"EPSG:{results['epsg_code']} ({results['crs_name']})")
            print(f"Output file: {results['output_file']}")

        return 0

    except KeyboardInterrupt:
        print("\nConversion interrupted by user", file=sys.stderr)
        return 130

    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        if args.debug:
            traceback.print_exc()
        return e.exit_code

    except OSError as e:
        logger.error(f"Conversion failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

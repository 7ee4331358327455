"""
Command line entry point for the SolidWorks macros.

Usage:
    python -m solid_adapter_solidworks simplify model.SLDPRT --keep 3000
    python -m solid_adapter_solidworks import-stp model.stp
    python -m solid_adapter_solidworks draw flange
"""

import argparse
import logging
import sys

from solid_canonical import (
    MacroConfig,
    MacroError,
    RetryPolicy,
    load_config,
    setup_logging,
)

from .connection import SolidWorksSession
from .flanges import DrawComplexFlange, DrawFlange, DrawWeldNeckFlange
from .runs import ImportStpRun, SimplifyPartRun

logger = logging.getLogger(__name__)

DRAW_MACROS = {
    "flange": DrawFlange,
    "complex-flange": DrawComplexFlange,
    "weld-neck-flange": DrawWeldNeckFlange,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m solid_adapter_solidworks",
        description="SolidWorks automation macros.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m solid_adapter_solidworks simplify big.SLDPRT --keep 500
    python -m solid_adapter_solidworks simplify big.SLDPRT --max-save-attempts 3
    python -m solid_adapter_solidworks import-stp plant.stp
    python -m solid_adapter_solidworks --config macro.json draw flange
        """
    )

    parser.add_argument(
        '--config', type=str, default=None,
        help='JSON config file; command line flags override its values'
    )
    parser.add_argument(
        '--hidden', action='store_true',
        help='Run SolidWorks without showing its window'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-file', type=str, default=None,
        help='Also write logs to this file'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    simplify = subparsers.add_parser('simplify', help='Keep only the most significant bodies of a part')
    simplify.add_argument('path', nargs='?', default=None, help='Source .SLDPRT (default: target_path from config)')
    simplify.add_argument('--keep', type=int, default=None, help='Number of bodies to keep (default: 3000)')
    simplify.add_argument(
        '--max-save-attempts', type=int, default=None,
        help='Give up saving after this many attempts (default: retry forever)'
    )
    simplify.add_argument('--save-delay', type=float, default=None, help='Seconds between save attempts')

    import_stp = subparsers.add_parser('import-stp', help='Import a STEP file as an assembly')
    import_stp.add_argument('path', help='Source .stp/.step file')
    import_stp.add_argument('--max-save-attempts', type=int, default=None)
    import_stp.add_argument('--save-delay', type=float, default=None)

    draw = subparsers.add_parser('draw', help='Model a parametric flange in a new part')
    draw.add_argument('macro', choices=sorted(DRAW_MACROS))

    return parser


def resolve_config(args: argparse.Namespace) -> MacroConfig:
    """Load the config file (if any) and apply command line overrides."""
    config = load_config(args.config) if args.config else MacroConfig()

    if args.hidden:
        config.visible = False
    if getattr(args, 'keep', None) is not None:
        config.keep_count = args.keep
    if getattr(args, 'path', None):
        config.target_path = args.path

    attempts = getattr(args, 'max_save_attempts', None)
    delay = getattr(args, 'save_delay', None)
    if attempts is not None or delay is not None:
        current = config.save_retry
        config.save_retry = RetryPolicy(
            max_attempts=attempts if attempts is not None else current.max_attempts,
            delay=delay if delay is not None else current.delay,
            backoff=current.backoff,
        )
    return config


def build_macro(args: argparse.Namespace, config: MacroConfig, session: SolidWorksSession):
    if args.command == 'simplify':
        if not config.target_path:
            raise MacroError("No source part given. Pass a path or set target_path in the config file.")
        return SimplifyPartRun(session, config.target_path, config.keep_count, config.save_retry)
    if args.command == 'import-stp':
        return ImportStpRun(session, config.target_path, config.save_retry)
    return DRAW_MACROS[args.macro](session, config.plane_names)


def main(argv=None, session: SolidWorksSession | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = resolve_config(args)
        session = session or SolidWorksSession()
        print("Connecting to SolidWorks...")
        session.set_visible(config.visible)
        build_macro(args, config, session).run()
    except (MacroError, ImportError, ValueError) as e:
        logger.debug("Macro failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nDone!")
    return 0

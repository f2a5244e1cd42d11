"""
    outrunnertools.cli
    ~~~~~~~~~~~~~~~~~~

    Design an outrunner motor from the command line



"""
import io
import logging
import os
import sys
from .conductor import awg_to_diameter
from .machine.sizing import outrunner
from .model import InvalidParameter
from .parstudy import kv_sweep, get_report
from .report import Report, export_filename, to_json
from .windings import rank_configurations

logger = logging.getLogger(__name__)


def main(argv=None):
    # Parse command line arguments.
    parser = _get_parser()
    args = parser.parse_args(argv)
    if args.alternatives < 0:
        parser.error("--alternatives must not be negative")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(message)s')

    wire = args.wire
    if args.awg is not None:
        wire = awg_to_diameter(args.awg)
        logger.info("AWG %d: wire diameter %.3f mm", args.awg, wire)

    params = dict(wire_thickness=wire,
                  magnet_width=args.magnet_width,
                  magnet_height=args.magnet_height,
                  magnet_thickness=args.magnet_thickness,
                  min_diameter=args.min_diameter,
                  max_diameter=args.max_diameter,
                  target_kv=args.kv)
    try:
        if args.sweep:
            start, stop, num = args.sweep
            rows = get_report(kv_sweep(params, start, stop, int(num)))
            print(' '.join('{:>14}'.format(h) for h in rows[0]))
            for r in rows[1:]:
                print(' '.join('{:14.3f}'.format(x) for x in r))
            return 0
        design = outrunner(params)
    except InvalidParameter as e:
        parser.error(str(e))

    if args.json:
        print(to_json(design))
    else:
        alternatives = []
        if args.alternatives:
            alternatives = rank_configurations(
                args.min_diameter, args.max_diameter,
                args.kv)[1:args.alternatives + 1]
        print('\n'.join(Report().render(design,
                                        alternatives=alternatives)))

    if args.export:
        filename = os.path.join(args.export, export_filename(design, 'json'))
        with io.open(filename, 'w', encoding='utf-8') as f:
            f.write(to_json(design))
        logger.info("design written to %s", filename)
    return 0


def _get_parser():
    """Parse input options."""
    import argparse
    from . import __version__

    parser = argparse.ArgumentParser(
        description=("Design an outrunner BLDC motor."))

    wire = parser.add_mutually_exclusive_group()
    wire.add_argument(
        "--wire",
        "-w",
        type=float,
        help="wire diameter in mm",
        default=0.8,
    )
    wire.add_argument(
        "--awg",
        type=int,
        help="wire gauge (AWG), replaces --wire",
        default=None,
    )

    parser.add_argument(
        "--magnet-width",
        type=float,
        help="magnet width in mm",
        default=10.0,
    )

    parser.add_argument(
        "--magnet-height",
        type=float,
        help="magnet height in mm",
        default=15.0,
    )

    parser.add_argument(
        "--magnet-thickness",
        type=float,
        help="magnet thickness in mm",
        default=3.0,
    )

    parser.add_argument(
        "--min-diameter",
        type=float,
        help="minimum motor diameter in mm",
        default=30.0,
    )

    parser.add_argument(
        "--max-diameter",
        type=float,
        help="maximum motor diameter in mm",
        default=40.0,
    )

    parser.add_argument(
        "--kv",
        "-k",
        type=float,
        help="target KV in RPM/V",
        default=800.0,
    )

    parser.add_argument(
        "--alternatives",
        "-a",
        type=int,
        help="number of alternative configurations to list",
        default=0,
    )

    parser.add_argument(
        "--json",
        action='store_true',
        help="print design as JSON")

    parser.add_argument(
        "--export",
        "-o",
        type=str,
        help="directory to write the design JSON file to",
        default=None,
    )

    parser.add_argument(
        "--sweep",
        nargs=3,
        type=float,
        metavar=('START', 'STOP', 'NUM'),
        help="print designs for NUM target KV values from START to STOP",
        default=None,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action='store_true',
        help="debug output")

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}, Python {}".format(__version__, sys.version),
        help="display version information",
    )

    return parser


if __name__ == "__main__":
    sys.exit(main())

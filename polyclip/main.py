#!/usr/bin/env python3
"""
polyclip command line.

Paths are passed as text literals ("0,0 10,0 10,10 0,10") and results are
printed in the same format, one path per line.

Usage:
    polyclip --classify 5 5 --path "0,0 10,0 10,10 0,10"
    polyclip --trim --path "0,0 5,0 10,0 10,10 0,10"
    polyclip --trim --open --path "0,0 5,0 10,0"
    polyclip --bounds --path "0,0 10,0" --path "-5,3 2,8"
    polyclip --boolean union --path "0,0 10,0 10,10 0,10" --clip "5,5 15,5 15,15 5,15"
    polyclip --inflate 2 --join miter --path "0,0 10,0 10,10 0,10"
    polyclip --float --precision 3 --inflate 0.5 --path "0,0 1.5,0 1.5,1.5"
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import CONFIG
from .core.bounding_box import get_bounds_paths
from .core.geometry import ClipperError, Point64, PointD, precision_scale, scale_path_to_int
from .core.point_in_polygon import point_in_polygon
from .core.trim import trim_collinear, trim_collinear_d
from .engine.boolean import ClipType, FillRule, boolean_op, boolean_op_d
from .engine.offset import EndType, JoinType, inflate_paths, inflate_paths_d
from .utils.path_parser import make_path, make_path_d, path_to_string, paths_to_string

logger = logging.getLogger(__name__)


# =============================================================================
# LOGGING
# =============================================================================

def setup_logging(verbose: bool = False) -> None:
    """
    Configure console logging for the command line.

    Args:
        verbose: Enable DEBUG level logging
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    root_logger.addHandler(console_handler)


# =============================================================================
# HELPERS
# =============================================================================

def _read_paths(texts: Optional[List[str]], use_float: bool) -> list:
    parse = make_path_d if use_float else make_path
    return [parse(text) for text in (texts or [])]


def _enum_arg(enum_cls, name: str):
    return enum_cls[name.upper().replace('-', '_')]


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_classify(args) -> int:
    """Classify one point against the first --path."""
    paths = _read_paths(args.path, args.float)
    if not paths:
        logger.error("--classify needs a --path")
        return 2
    polygon = paths[0]

    x_text, y_text = args.classify
    if args.float:
        # classify exactly in the integer domain
        scale = precision_scale(args.precision)
        pt = scale_path_to_int([PointD(float(x_text), float(y_text))], scale)[0]
        polygon = scale_path_to_int(polygon, scale)
    else:
        pt = Point64(int(x_text), int(y_text))

    result = point_in_polygon(pt, polygon)
    print(result.name)
    return 0


def cmd_trim(args) -> int:
    """Trim collinear vertices from every --path."""
    for path in _read_paths(args.path, args.float):
        if args.float:
            trimmed = trim_collinear_d(path, args.precision, args.open)
        else:
            trimmed = trim_collinear(path, args.open)
        print(path_to_string(trimmed))
    return 0


def cmd_bounds(args) -> int:
    """Print left top right bottom of all --path points."""
    rect = get_bounds_paths(_read_paths(args.path, args.float))
    print(f"{rect.left} {rect.top} {rect.right} {rect.bottom}")
    return 0


def cmd_boolean(args) -> int:
    """Boolean operation of --path subjects against --clip paths."""
    clip_type = _enum_arg(ClipType, args.boolean)
    fill_rule = _enum_arg(FillRule, args.fill_rule)
    subjects = _read_paths(args.path, args.float)
    clips = _read_paths(args.clip, args.float)

    if args.float:
        result = boolean_op_d(clip_type, fill_rule, subjects, clips, args.precision)
    else:
        result = boolean_op(clip_type, fill_rule, subjects, clips)

    if result:
        print(paths_to_string(result))
    return 0


def cmd_inflate(args) -> int:
    """Offset every --path by DELTA."""
    join_type = _enum_arg(JoinType, args.join)
    end_type = _enum_arg(EndType, args.end)
    paths = _read_paths(args.path, args.float)

    if args.float:
        result = inflate_paths_d(paths, args.inflate, join_type, end_type,
                                 args.miter_limit, args.precision)
    else:
        result = inflate_paths(paths, args.inflate, join_type, end_type,
                               args.miter_limit)

    if result:
        print(paths_to_string(result))
    return 0


# =============================================================================
# MAIN
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='polyclip',
        description='Exact polygon primitives: containment, trimming, bounds, clipping, offsetting',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    # Commands (mutually exclusive)
    cmd_group = parser.add_mutually_exclusive_group(required=True)
    cmd_group.add_argument('--classify', nargs=2, metavar=('X', 'Y'), help='Classify a point')
    cmd_group.add_argument('--trim', action='store_true', help='Remove collinear vertices')
    cmd_group.add_argument('--bounds', action='store_true', help='Bounding rect of all paths')
    cmd_group.add_argument('--boolean', choices=[c.name.lower() for c in ClipType],
                           help='Boolean operation')
    cmd_group.add_argument('--inflate', type=float, metavar='DELTA', help='Offset paths by DELTA')

    # Inputs
    parser.add_argument('--path', action='append', metavar='TEXT', help='Subject path (repeatable)')
    parser.add_argument('--clip', action='append', metavar='TEXT', help='Clip path (repeatable)')
    parser.add_argument('--open', action='store_true', help='Treat paths as open polylines (--trim)')

    # Domain
    parser.add_argument('--float', action='store_true', help='Floating coordinates')
    parser.add_argument('--precision', type=int, default=CONFIG.precision.default_precision,
                        help='Decimal precision for --float')

    # Engine options
    parser.add_argument('--fill-rule', default='non_zero',
                        choices=[r.name.lower() for r in FillRule], help='Fill rule')
    parser.add_argument('--join', default='miter',
                        choices=[j.name.lower() for j in JoinType], help='Join type (--inflate)')
    parser.add_argument('--end', default='polygon',
                        choices=[e.name.lower() for e in EndType], help='End type (--inflate)')
    parser.add_argument('--miter-limit', type=float, default=CONFIG.offset.miter_limit,
                        help='Miter limit (--inflate)')

    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.classify:
        command = cmd_classify
    elif args.trim:
        command = cmd_trim
    elif args.bounds:
        command = cmd_bounds
    elif args.boolean:
        command = cmd_boolean
    else:
        command = cmd_inflate

    try:
        return command(args)
    except ClipperError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())

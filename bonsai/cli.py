import argparse
from typing import Optional

from bonsai.plant.branch import GrowthConfig
from bonsai.terminal import DriverOptions

DESCRIPTION = 'bonsai is a beautifully random bonsai tree generator.'


def _non_negative(kind: str, convert):
    def parse(value: str):
        try:
            number = convert(value)
        except ValueError:
            raise argparse.ArgumentTypeError('invalid {0}: {1!r}'.format(kind, value)) from None
        if number < 0:
            raise argparse.ArgumentTypeError('invalid {0}: {1!r}'.format(kind, value))
        return number

    return parse


def _leaves(value: str) -> list[str]:
    return [leaf for leaf in value.split(',') if leaf]


def build_parser(defaults: Optional[dict] = None) -> argparse.ArgumentParser:
    """
    Option surface of the terminal program. ``defaults`` comes from the
    ``[bonsai]`` table of config.toml and replaces the built in defaults.
    """
    base = GrowthConfig()
    defaults = defaults or {}
    parser = argparse.ArgumentParser(prog='bonsai', description=DESCRIPTION)
    parser.add_argument('-l', '--live', action='store_true', default=defaults.get('live', False),
                        help='live mode: show each step of growth')
    parser.add_argument('-t', '--time', dest='time_step', type=_non_negative('step time', float),
                        default=defaults.get('time_step', base.time_step),
                        help='in live mode, wait TIME secs between steps of growth [default: %(default).2f]')
    parser.add_argument('-i', '--infinite', action='store_true', default=defaults.get('infinite', False),
                        help='infinite mode: keep growing trees')
    parser.add_argument('-w', '--wait', dest='time_wait', type=_non_negative('wait time', float),
                        default=defaults.get('time_wait', 4.0),
                        help='in infinite mode, wait TIME between each tree generation [default: %(default).2f]')
    parser.add_argument('-S', '--screensaver', action='store_true', default=defaults.get('screensaver', False),
                        help='screensaver mode; equivalent to -li and quit on any keypress')
    parser.add_argument('-m', '--message', default=defaults.get('message'),
                        help='attach message next to the tree')
    parser.add_argument('-b', '--base', dest='base_type', type=int, choices=(0, 1, 2),
                        default=defaults.get('base', 1),
                        help='ascii-art plant base to use, 0 is none')
    parser.add_argument('-c', '--leaf', dest='leaves', type=_leaves,
                        default=defaults.get('leaves', list(base.leaves)),
                        help='list of comma-delimited strings randomly chosen for leaves')
    parser.add_argument('-M', '--multiplier', type=_non_negative('multiplier', int),
                        default=defaults.get('multiplier', base.multiplier),
                        help='branch multiplier; higher -> more branching (1-20) [default: %(default)s]')
    parser.add_argument('-L', '--life', dest='life_start', type=_non_negative('initial life', int),
                        default=defaults.get('life', base.life_start),
                        help='life; higher -> more growth (0-200) [default: %(default)s]')
    parser.add_argument('-p', '--print', dest='print_tree', action='store_true', default=defaults.get('print', False),
                        help='print tree to terminal when finished')
    parser.add_argument('-s', '--seed', type=_non_negative('seed', int), default=defaults.get('seed', 0),
                        help='seed random number generator, 0 picks one from the clock')
    parser.add_argument('-W', '--save', nargs='?', const='', default=None, metavar='FILE',
                        help='save progress to FILE [default: $XDG_CACHE_HOME/bonsai or ~/.cache/bonsai]')
    parser.add_argument('-C', '--load', nargs='?', const='', default=None, metavar='FILE',
                        help='load progress from FILE [default: $XDG_CACHE_HOME/bonsai or ~/.cache/bonsai]')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='increase output verbosity')
    return parser


def to_options(args: argparse.Namespace) -> tuple[GrowthConfig, DriverOptions]:
    live = args.live or args.screensaver
    infinite = args.infinite or args.screensaver
    # The screensaver keeps its place between runs unless told otherwise.
    save = args.save is not None or args.screensaver
    load = args.load is not None or args.screensaver
    load_path = args.load or None
    save_path = args.save or None

    config = GrowthConfig(
        life_start=args.life_start,
        multiplier=args.multiplier,
        leaves=args.leaves,
        time_step=args.time_step,
        live=live,
        screensaver=args.screensaver,
        seed=args.seed,
    )
    options = DriverOptions(
        infinite=infinite,
        time_wait=args.time_wait,
        print_tree=args.print_tree,
        base_type=args.base_type,
        message=args.message,
        load=load,
        save=save,
        load_path=load_path,
        save_path=save_path,
    )
    return config.validate(), options


def parse(argv=None, defaults: Optional[dict] = None) -> tuple[GrowthConfig, DriverOptions, int]:
    args = build_parser(defaults).parse_args(argv)
    config, options = to_options(args)
    return config, options, args.verbose

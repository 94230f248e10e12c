import logging
import pathlib
import sys

import bonsai as bonsai_global
from bonsai import cli, terminal
from bonsai.plant.branch import ConfigError
from bonsai.util import config

LOG_FORMAT = '[{asctime}] [{levelname:<7}] {name}: {message}'


def setup_logging(verbosity: int = 0):
    level = logging.WARNING
    if verbosity == 1 or bonsai_global.config.get('debug', False):
        level = logging.INFO
    if verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        style='{',
        filename=bonsai_global.config.get('log_file'),
    )


def run_terminal(argv=None):
    growth_config, options, verbosity = cli.parse(argv, bonsai_global.config.section('bonsai'))
    setup_logging(verbosity)
    screen = terminal.run(growth_config, options)
    if options.print_tree and screen is not None:
        terminal.print_screen(screen)


def run_bot():
    from bonsai.bot import BonsaiBot

    setup_logging()
    bot = BonsaiBot()
    bot.run()


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    bonsai_global.config = config.Config(pathlib.Path('config.toml'))
    try:
        if argv[:1] == ['bot']:
            run_bot()
        else:
            run_terminal(argv)
    except ConfigError as error:
        print('error: {0}'.format(error), file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Main entry point into Schoolbook's codebase.
"""

import logging
import sys
import traceback

from schoolbook.cli.argparse_main import build_main_parser
from schoolbook.config.configfile import initialize_config
from schoolbook.log_formatter import setup_logging


LOG = logging.getLogger("schoolbook")


def main():
    """
    Entry point for the Schoolbook command-line interface (CLI) operations.

    This function sets up the argument parser, loads the configuration, initializes
    logging, and executes the appropriate function based on the provided command.
    Any exception raised by the command is logged and turned into exit code 1.
    """
    parser = build_main_parser()
    if len(sys.argv) == 1:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args()

    config = initialize_config(args.config)
    log_level = args.level or config.logging.level
    setup_logging(logger=LOG, log_level=log_level.upper(), colors=config.logging.colors)

    try:
        args.func(args)
        # pylint complains that this exception is too broad - being at the literal top of the program stack, it's ok.
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(1)

    sys.exit()


if __name__ == "__main__":
    main()

##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
The command line interface for Schoolbook.

Modules:
    argparse_main: Builds the main `ArgumentParser`.
    commands: The commands registered with the main parser.
"""

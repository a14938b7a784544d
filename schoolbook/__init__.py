##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Schoolbook: an active-record style mapper for a small school database.

This module contains the source code for Schoolbook.
"""

__version__ = "0.3.0"
VERSION = __version__

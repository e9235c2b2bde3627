""" This sub-package contains miscellaneous utilities for printing to the
terminal. """

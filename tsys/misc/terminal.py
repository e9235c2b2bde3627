""" This sub-module contains functions for printing calibration results to
the terminal.

"""


def cprint(text, color=None):
    """ Print text to the terminal, optionally in color.

    Args:
        text (str): text to print
        color (str): color/style name, one of the keys in ``COLORS``, or
            ``None`` for plain text

    """

    if color is None:
        print(text)
        return

    if color.upper() not in COLORS:
        raise ValueError("Color not recognized: {}".format(color))
    print(COLORS[color.upper()] + text + COLORS['ENDC'])


def header(header_string, color='HEADER'):
    """ Print a header, underlined with dashes.

    Args:
        header_string (str): header to print
        color (str): color to print in

    """

    cprint(header_string + ":", color)
    cprint("-" * (len(header_string) + 1))


def pvalf(name, val, units='', comment=''):
    """ Print name, value (fixed-point notation) and units.

    Args:
        name (str): variable name
        val (float): variable value
        units (str): variable units (optional)
        comment (str): comment (optional)

    Returns:
        str: the line that was printed

    """

    return _print_value("\t{0:12s} = {1:10.3f}", name, val, units, comment)


def pvale(name, val, units='', comment=''):
    """ Print name, value (scientific notation) and units.

    Args:
        name (str): variable name
        val (float): variable value
        units (str): variable units (optional)
        comment (str): comment (optional)

    Returns:
        str: the line that was printed

    """

    return _print_value("\t{0:12s} = {1:10.3e}", name, val, units, comment)


def _print_value(fmt, name, val, units, comment):

    line = fmt.format(name, float(val))
    if units != '':
        line += '  [' + units + ']'
    if comment != '':
        line += '  # ' + comment
    cprint(line)

    return line


# Colors for the terminal ----------------------------------------------------

COLORS = {
    'CYAN': '\033[36m',
    'MAGENTA': '\033[35m',
    'GREEN': '\033[92m',
    'YELLOW': '\033[93m',
    'RED': '\033[91m',
    'HEADER': '\033[95m',
    'WARNING': '\033[93m',
    'BOLD': '\033[1m',
    'ENDC': '\033[0m',
}

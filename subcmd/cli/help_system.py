"""
Help system module for subcmd.
Builds the usage banner and the list of available commands.
"""

DEFAULT_PROGRAM_NAME = 'subcmd'
DEFAULT_USAGE = 'usage: {program} [--version] [--help] <command> [<args>]'


def format_usage(usage=None, program_name=None):
    """
    Substitute the program name into a usage template.

    Args:
        usage (str): Usage template, may contain "{program}"
        program_name (str): Name shown in place of "{program}"

    Returns:
        str: The usage banner
    """
    template = usage or DEFAULT_USAGE
    return template.replace('{program}', program_name or DEFAULT_PROGRAM_NAME)


def build_help_lines(usage, command_names):
    """
    Build the help text, one entry per line written to the sink.

    The banner carries a trailing newline so a blank line separates it
    from the command list.

    Args:
        usage (str): The already formatted usage banner
        command_names (iterable): Registered command names

    Returns:
        list: Lines of help text
    """
    lines = [usage + "\n", "Available commands are:"]
    for name in sorted(command_names):
        lines.append(f"    {name}")
    return lines

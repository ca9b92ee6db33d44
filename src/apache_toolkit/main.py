"""apache-toolkit main public entry point."""
from typing import List
from typing import Optional

from apache_toolkit._internal import main as internal_main


def main(cli_args: Optional[List[str]] = None) -> Optional[int]:
    """Run apache-toolkit.

    :param cli_args: command line to apache-toolkit, defaults to ``sys.argv[1:]``
    :type cli_args: `list` of `str`

    :returns: value for `sys.exit` about the exit status
    :rtype: `int` or `None`

    """
    return internal_main.main(cli_args)

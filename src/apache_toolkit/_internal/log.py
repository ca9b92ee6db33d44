"""Logging utilities for apache-toolkit.

Use `pre_arg_parse_setup` before the command line is parsed and
`post_arg_parse_setup` once it is. The first one configures a quiet
terminal logger and buffers every record in memory; the second one sets
the terminal verbosity requested by the user and, when a logs directory
is configured, sends the buffered records and all later ones to a
rotating log file.

"""
import functools
import logging
import logging.handlers
import os
import sys
import traceback
from types import TracebackType
from typing import Optional
from typing import Tuple
from typing import Type

from apache_toolkit import configuration
from apache_toolkit import errors
from apache_toolkit._internal import constants

# Logging format
CLI_FMT = "%(message)s"
FILE_FMT = "%(asctime)s:%(levelname)s:%(name)s:%(message)s"


logger = logging.getLogger(__name__)


def pre_arg_parse_setup() -> None:
    """Setup logging before command line arguments are parsed.

    Terminal logging is setup using `constants.QUIET_LOGGING_LEVEL`.
    Every record is also buffered in memory until `post_arg_parse_setup`
    decides where it goes. `sys.excepthook` is replaced so fatal errors
    are reported as one line messages.

    """
    memory_handler = MemoryHandler()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(CLI_FMT))
    stream_handler.setLevel(constants.QUIET_LOGGING_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # send all records to handlers
    root_logger.addHandler(memory_handler)
    root_logger.addHandler(stream_handler)

    sys.excepthook = functools.partial(
        post_arg_parse_except_hook,
        debug='--debug' in sys.argv,
        quiet='--quiet' in sys.argv or '-q' in sys.argv)


def post_arg_parse_setup(config: configuration.NamespaceConfig) -> None:
    """Setup logging after command line arguments are parsed.

    This function assumes `pre_arg_parse_setup` was called earlier and
    the root logging configuration has not been modified.

    :param apache_toolkit.configuration.NamespaceConfig config: Configuration object

    """
    root_logger = logging.getLogger()
    memory_handler: Optional[MemoryHandler] = None
    stderr_handler: Optional[logging.Handler] = None
    for handler in root_logger.handlers:
        if isinstance(handler, MemoryHandler):
            memory_handler = handler
        elif isinstance(handler, logging.StreamHandler):
            stderr_handler = handler
    msg = 'Previously configured logging handlers have been removed!'
    assert memory_handler is not None and stderr_handler is not None, msg

    root_logger.removeHandler(memory_handler)
    if config.logs_dir:
        file_handler, file_path = setup_log_file_handler(
            config, constants.LOG_FILE_NAME, FILE_FMT)
        root_logger.addHandler(file_handler)
        memory_handler.setTarget(file_handler)
        memory_handler.flush(force=True)
        logger.debug("Saving debug log to %s", file_path)
    memory_handler.close()

    if config.quiet:
        level = constants.QUIET_LOGGING_LEVEL
    else:
        level = constants.DEFAULT_LOGGING_LEVEL - config.verbose_count * 10
    stderr_handler.setLevel(level)
    logger.debug('Root logging level set at %d', level)

    sys.excepthook = functools.partial(
        post_arg_parse_except_hook, debug=config.debug, quiet=config.quiet)


def setup_log_file_handler(config: configuration.NamespaceConfig, logfile: str,
                           fmt: str) -> Tuple[logging.Handler, str]:
    """Setup file debug logging.

    :param apache_toolkit.configuration.NamespaceConfig config: Configuration object
    :param str logfile: basename for the log file
    :param str fmt: logging format string

    :returns: file handler and absolute path to the log file
    :rtype: tuple

    """
    log_file_path = os.path.join(config.logs_dir, logfile)
    try:
        os.makedirs(config.logs_dir, mode=0o700, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=2 ** 20,
            backupCount=config.max_log_backups)
    except IOError as error:
        raise errors.Error("Unable to write the log file: {0}".format(error))
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler, log_file_path


class MemoryHandler(logging.handlers.MemoryHandler):
    """Buffers logging messages in memory until the buffer is flushed.

    This differs from `logging.handlers.MemoryHandler` in that flushing
    only happens when flush(force=True) is called.

    """
    def __init__(self, target: Optional[logging.Handler] = None,
                 capacity: int = 10000) -> None:
        # capacity doesn't matter because should_flush() is overridden
        super().__init__(capacity, target=target)

    def flush(self, force: bool = False) -> None:  # pylint: disable=arguments-differ
        """Flush the buffer if force=True.

        If force=False, this call is a noop.

        :param bool force: True if the buffer should be flushed.

        """
        if force:
            super().flush()

    def shouldFlush(self, record: logging.LogRecord) -> bool:
        """Never auto-flush the buffer."""
        return False


def post_arg_parse_except_hook(exc_type: Type[BaseException], exc_value: BaseException,
                               trace: TracebackType, debug: bool, quiet: bool) -> None:
    """Logs fatal exceptions and reports them to the user.

    If debug is True, the full exception and traceback is shown to the
    user, otherwise, it is suppressed. sys.exit is always called with a
    nonzero status.

    :param type exc_type: type of the raised exception
    :param BaseException exc_value: raised exception
    :param traceback trace: traceback of where the exception was raised
    :param bool debug: True if the traceback should be shown to the user
    :param bool quiet: True if running in quiet mode

    """
    exc_info = (exc_type, exc_value, trace)
    if debug or not issubclass(exc_type, Exception):
        if exc_type is KeyboardInterrupt:
            logger.error('Exiting due to user request.')
            sys.exit(1)
        logger.error('Exiting abnormally:', exc_info=exc_info)
    else:
        logger.debug('Exiting abnormally:', exc_info=exc_info)
        if issubclass(exc_type, errors.Error):
            logger.error(str(exc_value))
        else:
            logger.error('An unexpected error occurred:')
            output = traceback.format_exception_only(exc_type, exc_value)
            logger.error(''.join(output).rstrip())
    if not quiet:
        logger.error('Re-run with -v for more details.')
    sys.exit(1)

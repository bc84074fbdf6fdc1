import logging
import sys


class Log:
    """Centralized logging for uploads and text extraction."""

    _logger: logging.Logger = logging.getLogger("docupload")
    _include_traces: bool = True

    @classmethod
    def configure(cls, log_level: str, include_traces: bool = True) -> None:
        """Set level and stdout handler.

        include_traces controls whether failure() attaches full tracebacks;
        production deployments turn it off and log the message only.
        """
        cls._logger.setLevel(log_level.upper())
        cls._include_traces = include_traces
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def failure(cls, message: str, exc: BaseException, **kwargs: object) -> None:
        """Log a failed operation, with traceback unless traces are disabled."""
        exc_info = exc if cls._include_traces else None
        cls._logger.error(f"{message}: {exc}", exc_info=exc_info, extra=kwargs)

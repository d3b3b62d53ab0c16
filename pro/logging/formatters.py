"""Logging formatters for the pro CLI."""

import logging


class StreamFormatter(logging.Formatter):
    """Formatter that keeps stdout announcements verbatim.

    Records tagged ``stream="stdout"`` are progress lines for the user and
    are emitted untouched, as are other INFO records. Debug, warning and error
    records are labelled with their level, e.g. ``Warning: ...``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, labelling diagnostics by level.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message
        """
        msg = super().format(record)

        if getattr(record, "stream", None) == "stdout" or record.levelno == logging.INFO:
            return msg

        return f"{record.levelname.capitalize()}: {msg}"

import logging

_CONFIGURED = False


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger once per process.

    Streamlit reruns the script on every interaction, so repeated calls only
    update the level.
    """
    global _CONFIGURED

    package_logger = logging.getLogger("localcoin")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not _CONFIGURED:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)
        package_logger.propagate = False

        # Adjust logging levels for external libraries to reduce verbosity
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("watchdog").setLevel(logging.WARNING)
        _CONFIGURED = True

    return package_logger

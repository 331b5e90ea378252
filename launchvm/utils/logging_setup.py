import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Log every HTTP request and response at INFO
NOISY_LOGGERS = (
    "azure",
    "msal",
    "urllib3",
)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )
    if not verbose:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

import logging

from travelglass.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    # requests logs every connection at DEBUG; keep it quiet with the Ollama backend
    logging.getLogger("urllib3").setLevel(logging.WARNING)

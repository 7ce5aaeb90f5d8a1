"""Process entrypoint: load settings from the environment and serve with uvicorn."""
import logging

from pydantic import ValidationError

from greeter.config import get_settings
from greeter.main import configure_logging, create_app
from greeter.server import build_server

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration (check PORT and LOG_LEVEL): {e}")
        raise SystemExit(1) from e

    configure_logging(settings.log_level)
    build_server(create_app(settings), settings).run()


if __name__ == "__main__":
    main()

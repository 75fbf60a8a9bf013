"""Run the shared Fibonacci cursor server."""

import logging
from typing import List, Optional

import uvicorn

from .access import SharedCursor
from .config import ServerConfig, parse_args
from .server import create_app

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the HTTP server around one shared cursor."""
    cfg = ServerConfig.from_args(parse_args(argv))
    logging.basicConfig(
        level=cfg.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = create_app(SharedCursor(lock_timeout=cfg.lock_timeout))
    logger.info(f"Serving shared Fibonacci cursor on {cfg.host}:{cfg.port}")
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())


if __name__ == "__main__":
    main()

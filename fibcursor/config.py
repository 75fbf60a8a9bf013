"""Configuration for the fibcursor server."""

from dataclasses import dataclass
import argparse
import math
import os
from typing import List, Optional


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}")
    if not math.isfinite(timeout) or timeout < 0:
        raise argparse.ArgumentTypeError(f"timeout must be a finite non-negative number: {value!r}")
    return timeout


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments or provided list."""
    parser = argparse.ArgumentParser(description="Shared Fibonacci cursor server")
    parser.add_argument(
        "--host",
        default=os.getenv("FIBCURSOR_HOST", "0.0.0.0"),
        help="Interface to bind",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("FIBCURSOR_PORT", "8080")),
        help="Port to bind",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("FIBCURSOR_LOG_LEVEL", "INFO"),
        help="Logging level",
    )
    parser.add_argument(
        "--lock-timeout",
        type=_optional_float,
        default=os.getenv("FIBCURSOR_LOCK_TIMEOUT"),
        help="Seconds to wait for the cursor lock (default: wait forever)",
    )
    return parser.parse_args(args)


@dataclass
class ServerConfig:
    """Settings for one server process."""

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    lock_timeout: Optional[float] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ServerConfig":
        return cls(
            host=args.host,
            port=args.port,
            log_level=args.log_level.upper(),
            lock_timeout=args.lock_timeout,
        )

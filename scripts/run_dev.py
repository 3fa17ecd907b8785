"""Development entry point for the travel pace server."""

import os

from app import create_app
from common.logging import get_logger

logger = get_logger("run_dev")


def _resolve_port() -> int:
    value = os.getenv("TRAVEL_PACE_PORT") or os.getenv("PORT") or "5001"
    try:
        return int(value)
    except ValueError as exc:
        raise SystemExit(
            f"Invalid port '{value}'. Set TRAVEL_PACE_PORT to a number."
        ) from exc


if __name__ == "__main__":
    app = create_app()
    port = _resolve_port()
    logger.info("starting travel pace server on port %s", port)
    app.run(host="0.0.0.0", port=port, debug=False)

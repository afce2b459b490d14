"""Run the API with uvicorn on the configured port.

Usage:
    python -m backend.serve
"""
import logging
import sys

import uvicorn

from backend.core import config


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL)
    try:
        config.validate_runtime_config()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
    logging.getLogger(__name__).info('Server API is running on port %s', config.PORT)
    uvicorn.run("backend.main:app", host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    main()

"""Serve the motif/tradition query API: python -m motif_neighbors"""

import argparse
import dataclasses
import logging
import sys

import uvicorn

from .api import create_app
from .config import configure_logging, load_settings
from .dataset import load_dataset
from .errors import MotifQueryError

logger = logging.getLogger("motif_neighbors")


def main(argv=None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Motif/tradition nearest-neighbour API")
    parser.add_argument("--data-dir", default=settings.data_dir)
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    settings = dataclasses.replace(
        settings,
        data_dir=args.data_dir,
        host=args.host,
        port=args.port,
        log_level=args.log_level.upper(),
    )
    configure_logging(settings.log_level)

    issues = settings.validate()
    if issues:
        for issue in issues:
            logger.error("Configuration: %s", issue)
        return 2

    try:
        dataset = load_dataset(settings.data_dir)
    except MotifQueryError as e:
        logger.error("Failed to load dataset: %s", e)
        return 1

    app = create_app(dataset=dataset, settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())

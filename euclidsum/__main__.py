"""Command-line entry point: ``python -m euclidsum``."""

import logging
import os

from .comparison import DistanceComparator
from .config import Settings
from .scenarios import POINT_A, POINT_B, vector_scenarios


def main() -> int:
    """Run the built-in scenarios and print the report."""
    logging.basicConfig(
        level=os.environ.get("EUCLIDSUM_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    settings = Settings.from_env()
    comparator = DistanceComparator(settings)
    comparator.run(POINT_A, POINT_B, vector_scenarios(settings.vector_length))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Command-line estimator that calls the classifier directly."""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from food_estimator.app_logging import configure_logging
from food_estimator.containers import AppContainer, build_container
from food_estimator.services.estimator import EstimatorStatus, format_result


def main(
    argv: Sequence[str] | None = None, container: AppContainer | None = None
) -> int:
    """Estimate calories and protein for the food in an image file."""
    parser = argparse.ArgumentParser(
        prog="food-estimator",
        description="Food Calorie & Protein Estimator",
    )
    parser.add_argument("image", nargs="?", type=Path, help="path to an image file")
    args = parser.parse_args(argv)
    configure_logging()
    return asyncio.run(_run(args.image, container or build_container()))


async def _run(image_path: Path | None, container: AppContainer) -> int:
    estimator = container.estimator_client()
    try:
        image_bytes = image_path.read_bytes() if image_path else None
    except OSError as exc:
        await container.close_resources()
        print(f"Cannot read image: {exc}", file=sys.stderr)
        return 1
    try:
        status = await estimator.submit(image_bytes)
    finally:
        await container.close_resources()
    if status is EstimatorStatus.SUCCESS and estimator.result is not None:
        print(format_result(estimator.result))
        return 0
    print(estimator.error, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())

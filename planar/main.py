"""Demonstration program for the Vector2 value type."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

from pydantic import ValidationError

from planar import config
from planar.schema import DemoSettings
from planar.structs.vector2 import ImmutableFieldError, Vector2


logger = logging.getLogger(__name__)


def run_demo(settings: DemoSettings) -> Dict:
    vector = settings.start.to_vector()
    logger.info("vector created at timestamp %s", vector.w)
    logger.info("vector.x value is %s", vector.x)

    try:
        logger.info("changing vector.x value to 100")
        vector.x = 100
    except ImmutableFieldError as exc:
        logger.warning("%s", exc)
        logger.info("vector.x value change denied")

    normalized = vector.normalize()
    trend = Vector2.trend(vector)
    logger.info("vector %s normalized is %s and trend is %s", vector, normalized, trend)

    ahead = vector.forward(settings.forward)
    ahead_distance = Vector2.distance(vector, ahead)
    logger.info("vector forward %s units is %s, distance %s", settings.forward, ahead, ahead_distance)

    behind = vector.forward(-settings.backward)
    behind_distance = Vector2.distance(vector, behind)
    angle = Vector2.angle(behind, Vector2.ORIGIN)
    logger.info("vector backward %s units is %s, distance %s", settings.backward, behind, behind_distance)
    logger.info("angle between %s and ORIGIN is %s", behind, angle)

    pivot = settings.pivot.to_vector()
    shifted = vector.shift(pivot)
    shifted_distance = Vector2.distance(vector, shifted)
    logger.info("vector shifted at pivot %s is %s, distance %s", pivot, shifted, shifted_distance)

    return {
        "vector": vector,
        "normalized": normalized,
        "trend": trend,
        "ahead": ahead,
        "ahead_distance": ahead_distance,
        "behind": behind,
        "behind_distance": behind_distance,
        "angle": angle,
        "pivot": pivot,
        "shifted": shifted,
        "shifted_distance": shifted_distance,
    }


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Exercise the planar Vector2 type.")
    parser.add_argument("--x", type=float, default=config.DEFAULT_START_X, help="Start vector x coordinate.")
    parser.add_argument("--y", type=float, default=config.DEFAULT_START_Y, help="Start vector y coordinate.")
    parser.add_argument("--forward", type=float, default=config.DEFAULT_FORWARD, help="Distance to move forward.")
    parser.add_argument("--backward", type=float, default=config.DEFAULT_BACKWARD, help="Distance to move backward.")
    parser.add_argument("--pivot-x", type=float, default=config.DEFAULT_PIVOT_X, help="Shift pivot x coordinate.")
    parser.add_argument("--pivot-y", type=float, default=config.DEFAULT_PIVOT_Y, help="Shift pivot y coordinate.")
    parser.add_argument("--log-level", type=str, default=config.DEFAULT_LOG_LEVEL, help="Logging level.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        settings = DemoSettings(
            start={"x": args.x, "y": args.y},
            forward=args.forward,
            backward=args.backward,
            pivot={"x": args.pivot_x, "y": args.pivot_y},
            log_level=args.log_level.upper(),
        )
    except ValidationError as exc:
        logging.basicConfig(level=logging.ERROR, format="%(levelname)s %(name)s: %(message)s")
        logger.error("invalid settings: %s", exc)
        return 2

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    run_demo(settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Populate the database with randomly generated Systems for development."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from contextlib import suppress

from model_repository.db import database, schemas
from model_repository.services import SYSTEM_PROFILE, EntityService, ResponseCode


logger = logging.getLogger("model_repository.scripts.seed_systems")


# Access SessionLocal dynamically so tests can swap the session factory
SessionLocal = lambda: database.SessionLocal()

_ORGANIZATIONS = ["Acme", "Globex", "Initech", "Umbrella", "Hooli"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the repository with random Systems")
    parser.add_argument(
        "--count",
        type=int,
        default=20,
        help="Number of Systems to create (default: 20)",
    )
    parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="Do not delete the Systems already stored before seeding",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible data",
    )
    return parser.parse_args(argv)


def build_system(index: int, rng: random.Random) -> schemas.SystemRequest:
    """Half of the generated Systems are virtual, the rest get coordinates."""
    if index % 2:
        location = schemas.Location(virtual_location=f"https://system-{index}.example.com")
    else:
        location = schemas.Location(
            geo_location=schemas.GeoLocation(
                latitude=round(rng.uniform(-89.0, 89.0), 6) or 1.0,
                longitude=round(rng.uniform(-179.0, 179.0), 6) or 1.0,
            )
        )
    return schemas.SystemRequest(
        name=f"System-{index}-{rng.randrange(16**6):06x}",
        description=f"Generated System number {index}",
        location=location,
        organization=rng.choice(_ORGANIZATIONS),
        additional_information=[{"generated": True}, f"batch-{index // 10}"],
    )


def seed(count: int, keep_existing: bool = False, rng: random.Random | None = None) -> int:
    rng = rng or random.Random()
    session = SessionLocal()
    try:
        service = EntityService(session, SYSTEM_PROFILE)
        if not keep_existing:
            cleared = service.delete_all()
            logger.info("Existing Systems cleared: %s", cleared.code.value)

        created = 0
        for index in range(count):
            result = service.create(build_system(index, rng))
            if result.code is ResponseCode.SUCCESS:
                created += 1
            else:
                logger.warning("System %s not created: %s", index, result.message)
        logger.info("Seeded %s of %s Systems", created, count)
        return created
    finally:
        with suppress(Exception):
            session.close()


def main(argv: list[str] | None = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    if args.count < 0:
        print("--count must be zero or positive.", file=sys.stderr)
        return 1
    created = seed(args.count, keep_existing=args.keep_existing, rng=random.Random(args.seed))
    print(f"Created {created} Systems.")
    return 0 if created == args.count else 1


if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())

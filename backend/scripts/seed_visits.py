"""Generate realistic fake page visits for development and demos.

Writes straight to the event store so visits can be spread over past days.

Usage:
    python -m scripts.seed_visits [--count 5000] [--days 30]
"""

import argparse
import asyncio
import random
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from vitrine.analytics.events import VisitEvent
from vitrine.core.config import settings
from vitrine.services.event_service import SqlEventStore

PAGES = [
    ("/", 30),
    ("/produtos", 20),
    ("/favoritos", 10),
    ("/perfil", 8),
    ("/auth", 8),
    ("/loja/1", 6),
    ("/loja/2", 5),
    ("/loja/3", 4),
    ("/admin", 3),
    ("/admin/logs", 2),
    ("/sobre", 2),
    ("/contato", 2),
]

DEVICES = [
    ("desktop", 45),
    ("mobile", 40),
    ("tablet", 10),
    (None, 5),
]


def generate_visits(count: int, days: int) -> list[VisitEvent]:
    """Generate a list of fake visits over the last ``days`` days."""
    now = datetime.now(timezone.utc)
    start = now - timedelta(days=days)

    page_names = [p[0] for p in PAGES]
    page_weights = [p[1] for p in PAGES]
    device_names = [d[0] for d in DEVICES]
    device_weights = [d[1] for d in DEVICES]

    visits = []
    for _ in range(count):
        visits.append(
            VisitEvent(
                path=random.choices(page_names, weights=page_weights, k=1)[0],
                timestamp=start + timedelta(seconds=random.randint(0, days * 86400)),
                session_duration=random.randint(5, 900) if random.random() > 0.1 else None,
                device_type=random.choices(device_names, weights=device_weights, k=1)[0],
            )
        )
    return visits


async def seed(count: int, days: int) -> int:
    engine = create_async_engine(settings.DATABASE_URL)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    visits = sorted(generate_visits(count, days), key=lambda v: v.timestamp)
    async with session_factory() as session:
        store = SqlEventStore(session)
        for visit in visits:
            await store.append(visit)
        await session.commit()

    await engine.dispose()
    return len(visits)


def main():
    parser = argparse.ArgumentParser(description="Seed page visits")
    parser.add_argument("--count", type=int, default=1000, help="Number of visits")
    parser.add_argument("--days", type=int, default=30, help="Days of history")
    args = parser.parse_args()

    print(f"Generating {args.count} visits over {args.days} days...")
    total = asyncio.run(seed(args.count, args.days))
    print(f"Done! Seeded {total} visits.")


if __name__ == "__main__":
    main()

"""Initialize database tables and sample ideas."""

import argparse
import asyncio

from backend.app.db.base import engine, async_session, Base
# Import all models to register them
from backend.app.models import User, Idea, Comment, Upvote  # noqa: F401
from backend.app.services.seed import seed_sample_ideas


async def init_db(reset: bool = False, seed: bool = True):
    """Create all database tables, optionally dropping existing ones first."""
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    print("Database tables created successfully!")

    if seed:
        inserted = await seed_sample_ideas(async_session)
        print(f"Inserted {inserted} sample ideas")

    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="Drop all tables first (deletes data)")
    parser.add_argument("--no-seed", action="store_true", help="Do not insert sample ideas")
    args = parser.parse_args()
    asyncio.run(init_db(reset=args.reset, seed=not args.no_seed))

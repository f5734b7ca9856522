#!/usr/bin/env python3
"""Create the subscriptions table and report its row count.

Safe to run multiple times (existing tables are left alone).
"""

import asyncio
import sys
import os

# Add backend to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import func, select

from app.newsletter.infrastructure.db.models import Base, SubscriptionModel
from app.newsletter.infrastructure.db.session import (
    dispose_engine,
    get_async_session_local,
    get_engine,
)


async def init_db() -> None:
    """Create missing tables, then check the connection."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("✓ Tables created")

    session_factory = get_async_session_local()
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(SubscriptionModel))
        print(f"✓ subscriptions: {result.scalar()} rows")

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(init_db())

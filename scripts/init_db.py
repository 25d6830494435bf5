#!/usr/bin/env python3
"""
Create the transactions and users tables, optionally seeding demo accounts.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --seed 1:500.00 --seed 2:42.10
    DATABASE_URL=sqlite+aiosqlite:///./bank.db python scripts/init_db.py --seed 1:100

Arguments:
    --seed: user_id:balance pair, may be repeated. Existing users are left untouched.
"""
import argparse
import asyncio
import os
import sys
from decimal import Decimal

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dotenv import load_dotenv

load_dotenv()

from infrastructure.db.database import AsyncSessionLocal, create_schema, engine
from domain.entities import User
from infrastructure.db.models import UserModel


def parse_seed(value: str) -> tuple[int, Decimal]:
    """Parse a user_id:balance pair."""
    try:
        user_id, balance = value.split(":", 1)
        return int(user_id), Decimal(balance)
    except (ValueError, ArithmeticError) as e:
        raise argparse.ArgumentTypeError(f"invalid seed {value!r}, expected user_id:balance") from e


async def main(seeds: list[tuple[int, Decimal]]) -> None:
    await create_schema(engine)
    print(f"Schema ready on {engine.url.render_as_string(hide_password=True)}")

    async with AsyncSessionLocal() as session:
        for user_id, balance in seeds:
            if await session.get(UserModel, user_id) is not None:
                print(f"  user {user_id} already exists, skipped")
                continue
            session.add(UserModel.from_domain(User(id=user_id, balance=balance)))
            print(f"  user {user_id} created with balance {balance}")
        await session.commit()

    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the bank schema")
    parser.add_argument("--seed", action="append", type=parse_seed, default=[],
                        help="user_id:balance pair to insert (repeatable)")
    args = parser.parse_args()
    asyncio.run(main(args.seed))

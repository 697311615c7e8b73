import asyncio

from sqlalchemy.ext.asyncio import create_async_engine

from pluginhub.config import settings
from pluginhub.db.models import Base

async def reset_database():
    """Drop and recreate all document store tables."""
    database_url = settings.DATABASE_URL
    print(f"Connecting to {database_url.split('@')[-1]} ...")
    engine = create_async_engine(database_url)

    async with engine.begin() as conn:
        print("Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)
        print("Creating all tables...")
        await conn.run_sync(Base.metadata.create_all)

    await engine.dispose()

    print("Database has been reset successfully!")
    print("Run 'python run.py' to start the application.")

if __name__ == "__main__":
    confirm = input("This will DELETE ALL DATA in the database. Are you sure? (y/n): ")
    if confirm.lower() == 'y':
        asyncio.run(reset_database())
    else:
        print("Operation cancelled.")

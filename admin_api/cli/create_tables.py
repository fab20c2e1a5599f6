# admin_api/cli/create_tables.py
import asyncio
import click

from admin_api.core.config import get_settings
from admin_api.database import Base, Database

# Import the models so they're registered with the Base
from admin_api.models.product import Product
from admin_api.models.order import Order


async def _create_tables(db: Database):
    try:
        async with db.engine.begin() as conn:
            # Creates only the tables that don't exist yet
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await db.dispose()


@click.command("create-tables")
@click.option("--echo", is_flag=True, help="Log the emitted DDL.")
def create_tables(echo):
    """Create the products and orders tables if they are missing."""
    settings = get_settings()
    db = Database.from_config(settings.database_config(), echo=echo)
    asyncio.run(_create_tables(db))
    click.echo("All tables created successfully!")


if __name__ == "__main__":
    create_tables()

import click

from .errors import CircleDataError
from .schema import init_schema
from .seed import initialize_database, seed_database

def register_commands(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create the circles and members tables if they are missing."""
        try:
            created = init_schema()
        except CircleDataError as exc:
            raise click.ClickException(str(exc))
        if created:
            click.echo(f"Created tables: {', '.join(created)}")
        else:
            click.echo("Schema already up to date")

    @app.cli.command("seed-db")
    @click.option("--force", is_flag=True, help="Insert seed rows even if circles exist.")
    def seed_db_command(force):
        """Insert the initial circles and members."""
        try:
            inserted = seed_database(force=force)
        except CircleDataError as exc:
            raise click.ClickException(str(exc))
        click.echo("Seed data inserted" if inserted else "Database already seeded, nothing to do")

    @app.cli.command("bootstrap-db")
    def bootstrap_db_command():
        """Create the schema and load the seed data."""
        try:
            inserted = initialize_database()
        except CircleDataError as exc:
            raise click.ClickException(str(exc))
        click.echo("Database ready" + ("" if inserted else " (seed skipped)"))

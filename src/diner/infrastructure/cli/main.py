import click

from diner.infrastructure.bootstrap import configure_logging, ordering_session


@click.command()
def cli() -> None:
    """Diner — interactive restaurant ordering console."""
    configure_logging()
    ordering_session().run()

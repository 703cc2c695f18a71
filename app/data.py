"""
Maintenance command for the products store.

Usage:
    python -m app.data --clear
"""
import typer

from app.database import Database

cli = typer.Typer(add_completion=False, help="Products store maintenance")


def clear_db(database: Database) -> None:
    """Drop and recreate every table, then exit the process."""
    try:
        database.reset()
    except Exception as e:
        typer.echo(f"{e}", err=True)
        raise typer.Exit(code=1)
    finally:
        database.disconnect()

    typer.echo("¡Datos eliminados correctamente!")
    raise typer.Exit(code=0)


@cli.command()
def main(
    clear: bool = typer.Option(False, "--clear", help="Destroy and recreate the whole schema"),
):
    if clear:
        clear_db(Database())


if __name__ == "__main__":
    cli()

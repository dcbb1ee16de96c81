# cli.py
import click

from gateway_api.config.settings import get_settings


@click.group()
def cli():
    """CLI commands for running and inspecting the gateway"""
    pass


@cli.command()
def show_config():
    """Show current configuration (secrets masked)"""
    settings = get_settings()

    click.echo("Current Configuration:")
    for key, value in settings.masked_dict().items():
        click.echo(f"  {key}: {value}")


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True, help="Interface to bind")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on")
def serve(host, port):
    """Run the gateway with uvicorn"""
    import uvicorn

    from gateway_api.main import create_app

    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    cli()

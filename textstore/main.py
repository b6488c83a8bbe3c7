import click

from .client import send_command
from .server import Server


@click.group()
def cli():
    """Text command server over a shared in-memory file store."""


@cli.command()
@click.option('--host', default='127.0.0.1', envvar='TEXTSTORE_HOST', show_default=True,
              help='The host to bind to.')
@click.option('--port', default=5566, envvar='TEXTSTORE_PORT', show_default=True,
              help='The port to listen on.')
def serve(host, port):
    """Starts the file store server."""
    server = Server(host=host, port=port)
    server.bind()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("Shutting down...")


@cli.command()
@click.option('--host', default='127.0.0.1', envvar='TEXTSTORE_HOST', show_default=True,
              help='The server host.')
@click.option('--port', default=5566, envvar='TEXTSTORE_PORT', show_default=True,
              help='The server port.')
@click.argument('command', nargs=-1, required=True)
def send(host, port, command):
    """Sends COMMAND to a running server and prints the reply."""
    try:
        lines = send_command(' '.join(command), host=host, port=port)
    except OSError as e:
        raise click.ClickException(f"cannot reach {host}:{port}: {e}")
    for line in lines:
        click.echo(line)


if __name__ == '__main__':
    cli()

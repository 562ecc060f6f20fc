import inspect
import logging
import os.path
import sys

import click

from commands.d1.export import convert_sql_to_sqlite
from modules.config import Config
from modules.log import get_logger

logging.basicConfig(level=logging.INFO)

if not hasattr(sys.modules[__name__], '__file__'):
    __file__ = inspect.getfile(inspect.currentframe())


@click.command(help='Load an existing SQL dump (e.g. from wrangler d1 export) into a SQLite database file')
@click.option('-f', '--file', 'sql_file', type=click.Path(exists=True, dir_okay=False), required=True, help='SQL dump file')
@click.option('-s', '--sqlite', type=str, default=None, help='SQLite file path (defaults to the dump name with .sqlite extension)')
@click.option('-e', '--env-file', type=str, default=None, help='Environment file')
@click.option('-c', '--config-file', type=str, default=None, help='Config file')
@click.option('-l', '--log-file', type=str, default=None, help='Additionally write the log to this file')
def cli(sql_file, sqlite, env_file, config_file, log_file):
    Config.use(env_file, config_file)
    get_logger(log_file)
    sqlite = sqlite or os.path.splitext(sql_file)[0] + ".sqlite"

    click.secho(f'Converting SQL dump to SQLite file: {sql_file} -> {sqlite}', fg='blue')

    try:
        convert_sql_to_sqlite(sql_file, sqlite)
    except Exception as e:
        click.secho(f'Error during conversion: {e}', fg='red', err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()

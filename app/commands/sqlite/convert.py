import inspect
import logging
import os.path
import re
import sys

import click

from modules.config import Config
from modules.disk_utils import file_size
from modules.sqlite_api import dump_sqlite_to_sql, dump_sqlite_with_cli

logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)

if not hasattr(sys.modules[__name__], '__file__'):
    __file__ = inspect.getfile(inspect.currentframe())


@click.command(help='Convert a SQLite database file to SQL for D1 import')
@click.option('-f', '--file', 'sqlite_file', type=click.Path(exists=True, dir_okay=False), required=True, help='SQLite database file (.sqlite or .sqlite3)')
@click.option('-o', '--output', type=str, default=None, help='Output SQL file path')
@click.option('-e', '--env-file', type=str, default=None, help='Environment file')
@click.option('-c', '--config-file', type=str, default=None, help='Config file')
def cli(sqlite_file, output, env_file, config_file):
    Config.use(env_file, config_file)
    output = output or default_output(sqlite_file)

    click.secho(f'Converting SQLite database to SQL: {sqlite_file} -> {output}', fg='blue')

    try:
        convert_sqlite_to_sql(sqlite_file, output)
    except Exception as e:
        click.secho(f'Error during conversion: {e}', fg='red', err=True)
        sys.exit(1)

    click.secho(f'Conversion completed successfully! ({file_size(output)})', fg='green')
    click.secho('Note: You may need to edit the output SQL file to be compatible with D1:', fg='yellow')
    click.secho('1. Remove `BEGIN TRANSACTION` and `COMMIT;` from the file', fg='yellow')
    click.secho('2. Remove any _cf_KV table creation statements', fg='yellow')


def default_output(sqlite_file):
    return f"./{re.sub(r'[.](sqlite|sqlite3|db)$', '', os.path.basename(sqlite_file))}.sql"


def convert_sqlite_to_sql(sqlite_file, sql_file):
    try:
        return dump_sqlite_to_sql(sqlite_file, sql_file)
    except Exception as e:
        log.warning(f"Failed to dump {sqlite_file} in process, falling back to command line sqlite3: {e}")
        return dump_sqlite_with_cli(sqlite_file, sql_file)


if __name__ == '__main__':
    cli()

import inspect
import logging
import sys
import time

import click

from modules.config import Config, minimum_free_space
from modules.disk_utils import check_disk_full, file_size, remove_file
from modules.log import get_logger
from modules.sqlite_api import load_sql_into_sqlite, load_sql_with_cli
from modules.wrangler_api import d1_export, d1_export_command

logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)

if not hasattr(sys.modules[__name__], '__file__'):
    __file__ = inspect.getfile(inspect.currentframe())


@click.command(help='Export a Cloudflare D1 database as SQLite database file')
@click.argument('database_arg', metavar='[DATABASE]', required=False)
@click.option('-d', '--database', type=str, default=None, help='D1 database name')
@click.option('-t', '--table', type=str, default=None, help='Specific table name to export (optional)')
@click.option('-o', '--output', type=str, default=None, help='Output file path for temporary SQL file (will be deleted after conversion)')
@click.option('-s', '--sqlite', type=str, default=None, help='SQLite file path (defaults to export_<database>.sqlite)')
@click.option('--local', default=False, is_flag=True, help='Use local database instead of remote')
@click.option('--no-data', default=False, is_flag=True, help='Export schema only (no data)')
@click.option('--no-schema', default=False, is_flag=True, help='Export data only (no schema)')
@click.option('--preserve-sql', default=False, is_flag=True, help='Preserve the intermediate SQL file after conversion')
@click.option('-e', '--env-file', type=str, default=None, help='Environment file')
@click.option('-c', '--config-file', type=str, default=None, help='Config file')
@click.option('-l', '--log-file', type=str, default=None, help='Additionally write the log to this file')
def cli(database_arg, database, table, output, sqlite, local, no_data, no_schema, preserve_sql, env_file, config_file, log_file):
    Config.use(env_file, config_file)
    get_logger(log_file)

    database = database_arg or database
    if not database:
        raise click.UsageError("D1 database name is required")

    if no_data and no_schema:
        raise click.UsageError("--no-data and --no-schema can not be used together")

    output = output or f"./temp_export_{database}_{int(time.time() * 1000)}.sql"
    sqlite = sqlite or f"./export_{database}.sqlite"

    if check_disk_full(output, sqlite, minimum=minimum_free_space()):
        click.secho(f"Warning: running low on disk space, need at least {minimum_free_space()}", fg='yellow')

    click.secho('Exporting D1 database...', fg='blue')
    click.secho(" ".join(d1_export_command(database, output, not local, table, no_data, no_schema)), dim=True)

    try:
        d1_export(database, output, not local, table, no_data, no_schema)
    except (IOError, ValueError) as e:
        click.secho(f'Error during export: {e}', fg='red', err=True)
        sys.exit(1)

    click.secho('Export completed successfully!', fg='green')
    click.secho(f'Converting SQL export to SQLite file: {sqlite}', fg='blue')

    try:
        convert_sql_to_sqlite(output, sqlite)
    except Exception as e:
        log.error(f"failed to convert {output} to {sqlite}", exc_info=1)
        click.secho(f'Error during conversion: {e}', fg='red', err=True)
        sys.exit(1)

    if not preserve_sql:
        click.secho(f'Removing temporary SQL file: {output}', dim=True)
        remove_file(output)
        click.secho('SQLite export completed! Temporary SQL file has been deleted.', fg='green')
    else:
        click.secho('SQLite export completed! SQL file has been preserved as requested.', fg='green')


def convert_sql_to_sqlite(sql_file, sqlite_file):
    try:
        result = load_sql_into_sqlite(sql_file, sqlite_file)
        if result.failed > 0:
            click.secho(f'Warning: {result.failed} of {result.total} statements failed, see the log for details', fg='yellow')

        click.secho(f'Conversion completed! SQLite file ({file_size(sqlite_file)}) saved to: {sqlite_file}', fg='green')
        return result
    except Exception as e:
        click.secho(f'Error during SQLite conversion: {e}', fg='red', err=True)
        click.secho('Falling back to sqlite3 command line...', fg='yellow')

        load_sql_with_cli(sql_file, sqlite_file)
        click.secho(f'Conversion completed with fallback method! SQLite file saved to: {sqlite_file}', fg='green')
        return None


if __name__ == '__main__':
    cli()

import logging

from modules.config import wrangler_command
from modules.shell import execute_checked, split_command

log = logging.getLogger(__name__)


#
# WRANGLER Bash API
#

def d1_export_command(database, output, remote=True, table=None, no_data=False, no_schema=False, wrangler=None):
    if no_data and no_schema:
        raise ValueError("Only one of no data or no schema can be provided, otherwise nothing gets exported")

    command = split_command(wrangler if wrangler is not None else wrangler_command())
    command += ["d1", "export", database]

    # remote is the default, local only when explicitly asked for
    if remote:
        command.append("--remote")

    if table is not None:
        command.append(f"--table={table}")

    command.append(f"--output={output}")

    if no_data:
        command.append("--no-data")

    if no_schema:
        command.append("--no-schema")

    return command


def d1_export(database, output, remote=True, table=None, no_data=False, no_schema=False, wrangler=None):
    command = d1_export_command(database, output, remote, table, no_data, no_schema, wrangler)
    log.info(f"export d1 database {database} ({'remote' if remote else 'local'}) to {output}")

    std = execute_checked(*command)
    log.info(std)
    return output

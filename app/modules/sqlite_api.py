import logging
import math
import os
import sqlite3
from contextlib import closing
from dataclasses import dataclass, field
from typing import List, Tuple
from urllib.request import pathname2url

import pandas as pd

from modules.config import sqlite_command, statement_preview
from modules.shell import execute_checked
from modules.sql_splitter import split_sql_statements

log = logging.getLogger(__name__)

user_tables_query = r"SELECT name, sql FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite\_%' ESCAPE '\'"
schema_objects_query = r"SELECT type, name, sql FROM sqlite_master WHERE type IN ('index', 'view', 'trigger') AND sql IS NOT NULL AND name NOT LIKE 'sqlite\_%' ESCAPE '\'"


@dataclass
class LoadResult:
    executed: int = 0
    failed: int = 0
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def total(self):
        return self.executed + self.failed


#
# SQL -> SQLite
#

def execute_statements(connection, statements, preview=None) -> LoadResult:
    """
    Executes every statement on its own. A failing statement is logged and skipped, it never aborts
    the remaining batch.
    """
    preview = preview if preview is not None else statement_preview()
    result = LoadResult()

    for statement in statements:
        if not statement.strip():
            continue

        try:
            connection.execute(statement)
            result.executed += 1
        except (sqlite3.Error, sqlite3.Warning) as e:
            log.warning(f"Failed to execute statement: {statement[:preview]}...")
            log.warning(f"Error: {e}")
            result.failed += 1
            result.failures.append((statement[:preview], str(e)))

    return result


def load_sql_into_sqlite(sql_file, sqlite_file, preview=None) -> LoadResult:
    if os.path.exists(sqlite_file):
        log.warning(f"SQLite file already exists, overwriting: {sqlite_file}")
        os.unlink(sqlite_file)

    os.makedirs(os.path.dirname(os.path.abspath(sqlite_file)), exist_ok=True)

    with open(sql_file, encoding='utf-8') as f:
        statements = split_sql_statements(f.read())

    log.info(f"load {len(statements)} statements from {sql_file} into {sqlite_file}")

    # autocommit mode, the transaction is handled explicitly
    connection = sqlite3.connect(sqlite_file, isolation_level=None)
    try:
        connection.execute("BEGIN TRANSACTION;")
        result = execute_statements(connection, statements, preview)

        # a dump may carry its own COMMIT
        if connection.in_transaction:
            connection.execute("COMMIT;")

        connection.execute("VACUUM;")
    finally:
        connection.close()

    log.info(f"executed {result.executed} of {result.total} statements, {result.failed} failed")
    return result


def load_sql_with_cli(sql_file, sqlite_file):
    log.info(f"load {sql_file} into {sqlite_file} using the {sqlite_command()} command line")
    execute_checked(sqlite_command(), sqlite_file, "VACUUM;")

    with open(sql_file, encoding='utf-8') as f:
        execute_checked(sqlite_command(), sqlite_file, stdin=f)

    return sqlite_file


#
# SQLite -> SQL
#

def sql_literal(value):
    if value is None:
        return 'NULL'
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and math.isinf(value):
        # sqlite reads an overflowing literal back as infinity
        return "9e999" if value > 0 else "-9e999"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"X'{bytes(value).hex()}'"

    return f"'{value}'"


def sql_identifier(name):
    return '"' + name.replace('"', '""') + '"'


def iter_table_statements(connection, table_name, create_sql):
    yield f"{create_sql};\n\n"

    # rows come from the cursor, pandas would turn integer columns holding NULL into floats
    cursor = connection.execute(f"SELECT * FROM {sql_identifier(table_name)}")
    columns = ", ".join(sql_identifier(c[0]) for c in cursor.description)

    has_rows = False
    for row in cursor:
        has_rows = True
        values = ", ".join(sql_literal(v) for v in row)
        yield f"INSERT INTO {sql_identifier(table_name)} ({columns}) VALUES ({values});\n"

    if has_rows:
        yield "\n"


def dump_sqlite_to_sql(sqlite_file, sql_file):
    if not os.path.exists(sqlite_file):
        raise IOError(f"SQLite file not found: {sqlite_file}")

    uri = f"file:{pathname2url(os.path.abspath(sqlite_file))}?mode=ro"
    with closing(sqlite3.connect(uri, uri=True)) as connection:
        tables = pd.read_sql(user_tables_query, connection)
        schema_objects = pd.read_sql(schema_objects_query, connection)
        log.info(f"dump {len(tables)} tables and {len(schema_objects)} indexes, views and triggers from {sqlite_file} to {sql_file}")
        os.makedirs(os.path.dirname(os.path.abspath(sql_file)), exist_ok=True)

        with open(sql_file, 'w', encoding='utf-8') as f:
            for _, table in tables.iterrows():
                f.writelines(iter_table_statements(connection, table['name'], table['sql']))

            # indexes, views and triggers once all tables exist
            for _, schema_object in schema_objects.iterrows():
                f.write(f"{schema_object['sql']};\n\n")

    return sql_file


def dump_sqlite_with_cli(sqlite_file, sql_file):
    log.info(f"dump {sqlite_file} to {sql_file} using the {sqlite_command()} command line")
    std = execute_checked(sqlite_command(), sqlite_file, ".dump")

    with open(sql_file, 'w', encoding='utf-8') as f:
        f.write(std)

    return sql_file

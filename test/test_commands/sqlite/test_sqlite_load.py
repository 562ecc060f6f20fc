import logging
import sqlite3
import tempfile
from contextlib import closing
from unittest import TestCase

from click.testing import CliRunner

from commands.sqlite.load import cli


class TestSqliteLoad(TestCase):

    def test_load(self):
        with tempfile.TemporaryDirectory() as dir:
            with open(f"{dir}/findb.sql", 'w') as f:
                f.write("CREATE TABLE t (a TEXT);\nINSERT INTO t VALUES ('x;y');\nINSERT INTO nope VALUES (1);\n")

            result = CliRunner().invoke(cli, ["-f", f"{dir}/findb.sql"])

            self.assertEqual(0, result.exit_code, result.output)
            self.assertIn("1 of 3 statements failed", result.output)
            with closing(sqlite3.connect(f"{dir}/findb.sqlite")) as connection:
                self.assertListEqual([("x;y",)], connection.execute("SELECT a FROM t").fetchall())

    def test_missing_file(self):
        result = CliRunner().invoke(cli, ["-f", "/nonexistent/findb.sql"])
        self.assertEqual(2, result.exit_code)

    def test_load_with_log_file(self):
        with tempfile.TemporaryDirectory() as dir:
            with open(f"{dir}/findb.sql", 'w') as f:
                f.write("INSERT INTO nope VALUES (1);\n")

            handlers = list(logging.getLogger('').handlers)
            try:
                result = CliRunner().invoke(cli, ["-f", f"{dir}/findb.sql", "-s", f"{dir}/out.sqlite", "-l", f"{dir}/load.log"])
            finally:
                for handler in logging.getLogger('').handlers:
                    if handler not in handlers:
                        handler.close()
                        logging.getLogger('').removeHandler(handler)

            self.assertEqual(0, result.exit_code, result.output)
            with open(f"{dir}/load.log") as f:
                self.assertIn("no such table: nope", f.read())

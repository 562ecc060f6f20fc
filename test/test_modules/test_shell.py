from unittest import TestCase

from modules.shell import execute_shell, execute_checked, split_command


class TestShell(TestCase):

    def test_split_command(self):
        self.assertListEqual(["npx", "wrangler@latest"], split_command("npx wrangler@latest"))
        self.assertListEqual(["my tool", "x"], split_command(["my tool", "x"]))

    def test_execute_shell(self):
        rc, out, err = execute_shell("echo", "hello")
        self.assertEqual(0, rc)
        self.assertEqual("hello\n", out)

    def test_execute_shell_with_input(self):
        rc, out, err = execute_shell("cat", input="a;b")
        self.assertEqual((0, "a;b"), (rc, out))

    def test_execute_checked_raises(self):
        self.assertEqual("ok\n", execute_checked("echo", "ok"))
        with self.assertRaises(IOError):
            execute_checked("false")

from inspect import cleandoc
import subprocess
import unittest

from svclib.plumbing.common import command, CommandUnavailable, Result, State

from .plumbing import (collect_all, collect_pair, collect_unchanged, default, success, success_value,
                       unchanged)


class TestResult(unittest.TestCase):

    maxDiff = None

    def test_state_default(self):
        self.assertEqual(default().state, State.unchanged)

    def test_state_unchanged(self):
        self.assertEqual(unchanged().state, State.unchanged)

    def test_state_success(self):
        self.assertEqual(success().state, State.success)

    def test_state_parts_unchanged(self):
        self.assertEqual(collect_unchanged().state, State.unchanged)

    def test_state_parts_success(self):
        self.assertEqual(collect_pair().state, State.success)

    def test_state_parts_value(self):
        self.assertEqual(collect_all().state, State.success)

    def test_value_unset(self):
        with self.assertRaises(ValueError):
            success().value

    def test_value_set(self):
        self.assertEqual(success_value("test").value, "test")

    def test_value_collected(self):
        self.assertEqual(collect_all().value, "test")

    def test_caller_inspect(self):
        self.assertEqual(default().caller, "tests.plumbing:default")

    def test_caller_custom(self):
        self.assertEqual(Result(caller=default).caller, "tests.plumbing:default")

    def test_truthy_unchanged(self):
        self.assertFalse(unchanged())

    def test_truthy_success(self):
        self.assertTrue(success())

    def test_collect(self):
        result = collect_pair()
        self.assertEqual(result.parts[0].caller, "tests.plumbing:unchanged")
        self.assertEqual(result.parts[1].caller, "tests.plumbing:success")

    def test_repr(self):
        self.assertEqual(repr(success_value("test")), "Result(State.success, 'test')")

    def test_str(self):
        self.assertEqual(str(collect_all()), cleandoc("""
        tests.plumbing:collect_all: success 'test'
            tests.plumbing:unchanged: unchanged
            tests.plumbing:success: success
            tests.plumbing:success_value: success 'test'
        """))

    def test_str_no_value(self):
        self.assertEqual(str(collect_pair()), cleandoc("""
        tests.plumbing:collect_pair: success
            tests.plumbing:unchanged: unchanged
            tests.plumbing:success: success
        """))


class TestCommand(unittest.TestCase):

    def test_args(self):
        self.assertEqual(command(["echo", "left", "right"], output=True).stdout, b"left right\n")

    def test_input(self):
        self.assertEqual(command(["cat"], input_="input", output=True).stdout, b"input")

    def test_failure(self):
        with self.assertRaises(subprocess.CalledProcessError):
            command(["false"])

    def test_failure_unchecked(self):
        self.assertEqual(command(["false"], check=False).returncode, 1)

    def test_missing(self):
        with self.assertRaises(CommandUnavailable) as ctx:
            command(["/nonexistent/svclib-test"])
        self.assertEqual(ctx.exception.filename, "/nonexistent/svclib-test")

    def test_missing_is_file_not_found(self):
        with self.assertRaises(FileNotFoundError):
            command(["/nonexistent/svclib-test"])


if __name__ == "__main__":
    unittest.main()

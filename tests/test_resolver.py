import os
import tempfile
import unittest

from myshell.ast_tree import CommandKind
from myshell.resolver import BUILTIN_NAMES, CommandResolver


def make_executable(directory, name, mode=0o755):
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        f.write("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


class TestCommandResolver(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.first = os.path.join(self.temp_dir.name, "first")
        self.second = os.path.join(self.temp_dir.name, "second")
        os.mkdir(self.first)
        os.mkdir(self.second)
        env = {"PATH": os.pathsep.join([self.first, "", self.second])}
        self.resolver = CommandResolver(env)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_builtins(self):
        for name in ("cd", "pwd", "exit", "type", "history", "echo"):
            self.assertIn(name, BUILTIN_NAMES)
            resolved = self.resolver.resolve([name, "arg"])
            self.assertIs(resolved.kind, CommandKind.BUILTIN)
            self.assertEqual(resolved.args, ["arg"])

    def test_builtin_wins_over_path(self):
        make_executable(self.first, "pwd")
        self.assertIs(self.resolver.resolve(["pwd"]).kind, CommandKind.BUILTIN)

    def test_first_directory_wins(self):
        make_executable(self.second, "tool")
        expected = make_executable(self.first, "tool")
        resolved = self.resolver.resolve(["tool", "-x"])
        self.assertIs(resolved.kind, CommandKind.EXTERNAL)
        self.assertEqual(resolved.path, expected)
        self.assertEqual(resolved.name, "tool")
        self.assertEqual(resolved.args, ["-x"])

    def test_non_executable_is_skipped(self):
        make_executable(self.first, "tool", mode=0o644)
        expected = make_executable(self.second, "tool")
        self.assertEqual(self.resolver.find_executable("tool"), expected)

    def test_directory_is_not_a_command(self):
        os.mkdir(os.path.join(self.first, "subdir"))
        self.assertIsNone(self.resolver.find_executable("subdir"))

    def test_not_found(self):
        resolved = self.resolver.resolve(["nonexistentcmd123"])
        self.assertIs(resolved.kind, CommandKind.NOT_FOUND)
        self.assertEqual(resolved.name, "nonexistentcmd123")
        self.assertEqual(resolved.path, "")

    def test_empty_path(self):
        resolver = CommandResolver({})
        self.assertEqual(resolver.search_path(), [])
        self.assertIs(resolver.resolve(["ls"]).kind, CommandKind.NOT_FOUND)

    def test_name_with_slash_is_not_searched(self):
        path = make_executable(self.temp_dir.name, "script")
        resolved = self.resolver.resolve([path])
        self.assertIs(resolved.kind, CommandKind.EXTERNAL)
        self.assertEqual(resolved.path, path)
        self.assertIsNone(self.resolver.find_executable(path + "-missing"))

    def test_empty_command(self):
        with self.assertRaises(ValueError):
            self.resolver.resolve([])


if __name__ == "__main__":
    unittest.main()

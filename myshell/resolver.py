import os
from typing import Dict, List, Optional
from myshell.ast_tree import Builtin, CommandKind, ResolvedCommand

BUILTIN_NAMES = tuple(b.value for b in Builtin)


def is_builtin(name: str) -> bool:
    return name in BUILTIN_NAMES


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


class CommandResolver:
    """
    Clase que decide si un comando es builtin o hay que buscarlo en el PATH.
    """

    def __init__(self, env: Optional[Dict[str, str]] = None) -> None:
        self.env = env if env is not None else os.environ

    def search_path(self) -> List[str]:
        path_env = self.env.get("PATH", "")
        return [d for d in path_env.split(os.pathsep) if d]

    def find_executable(self, name: str) -> Optional[str]:
        if not name:
            return None

        if "/" in name:
            return os.path.abspath(name) if _is_executable(name) else None

        for directory in self.search_path():
            candidate = os.path.join(directory, name)
            if _is_executable(candidate):
                return os.path.abspath(candidate)
        return None

    def resolve(self, tokens: List[str]) -> ResolvedCommand:
        if not tokens:
            raise ValueError("cannot resolve an empty command")

        name, args = tokens[0], tokens[1:]
        if is_builtin(name):
            return ResolvedCommand(CommandKind.BUILTIN, name, args)

        path = self.find_executable(name)
        if path is None:
            return ResolvedCommand(CommandKind.NOT_FOUND, name, args)
        return ResolvedCommand(CommandKind.EXTERNAL, name, args, path)

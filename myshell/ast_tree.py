from enum import Enum, auto
from typing import List, Optional


class RedirectionSpec:
    """
    Clase que representa la redireccion de salida de un comando.
    """
    def __init__(self, target_path: str = "", append: bool = False) -> None:
        self.target_path = target_path
        self.append = append if target_path else False

    def __bool__(self) -> bool:
        return bool(self.target_path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RedirectionSpec):
            return NotImplemented
        return (self.target_path, self.append) == (other.target_path, other.append)

    def __repr__(self) -> str:
        return f"RedirectionSpec({self.target_path!r}, append={self.append})"


class Command:
    """
    Clase que representa un comando en el AST.
    """
    def __init__(
        self,
        args: List[str],
        redirect: Optional[RedirectionSpec] = None,
    ) -> None:
        self.args = args
        self.redirect = redirect if redirect else RedirectionSpec()

    def __repr__(self) -> str:
        return f"Command({self.args}, {self.redirect})"


class CommandKind(Enum):
    BUILTIN = auto()
    EXTERNAL = auto()
    NOT_FOUND = auto()


class ResolvedCommand:
    """
    Clase que representa un comando ya resuelto: builtin, ejecutable externo
    o no encontrado.
    """
    def __init__(
        self, kind: CommandKind, name: str, args: List[str], path: str = ""
    ) -> None:
        self.kind = kind
        self.name = name
        self.args = args
        self.path = path

    def __repr__(self) -> str:
        return f"ResolvedCommand({self.kind.name}, {self.name!r}, {self.args}, path={self.path!r})"


class ExecutionOutcome:
    def __init__(self, exit_status: int, message: Optional[str] = None) -> None:
        self.exit_status = exit_status
        self.message = message

    def __repr__(self) -> str:
        return f"ExecutionOutcome(exit_status=({self.exit_status}), message=({self.message}))"


class Builtin(Enum):
    ECHO = "echo"
    CD = "cd"
    PWD = "pwd"
    EXIT = "exit"
    TYPE = "type"
    HISTORY = "history"

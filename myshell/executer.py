import os
import subprocess
import sys
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, TextIO
from myshell.ast_tree import (
    Builtin,
    CommandKind,
    ExecutionOutcome,
    RedirectionSpec,
    ResolvedCommand,
)
from myshell.resolver import CommandResolver, is_builtin

HISTORY_SIZE = 50
NOT_FOUND_STATUS = 127
# Estado usado cuando el hijo no arranca o muere por una senal.
FAILURE_STATUS = 1

COLORS = {
    "RESET": "\033[0m",
    "RED": "\033[91m",
    "GREEN": "\033[92m",
    "YELLOW": "\033[93m",
    "CYAN": "\033[96m",
}


def color(text: str, color_name: str, stream: TextIO) -> str:
    isatty = getattr(stream, "isatty", None)
    if not isatty or not isatty():
        return text
    return f"{COLORS.get(color_name, '')}{text}{COLORS['RESET']}"


def spawn_process(
    path: str,
    argv: List[str],
    stdout: Optional[TextIO],
    stderr: Optional[TextIO],
    env: Dict[str, str],
) -> int:
    """
    Lanza un ejecutable externo y espera a que termine.

    ``stdout``/``stderr`` en None significa heredar los de la shell. Lanza
    OSError si el proceso no se puede crear.
    """
    process = subprocess.Popen(
        argv,
        executable=path,
        stdout=stdout,
        stderr=stderr,
        env=env,
    )
    process.wait()
    if process.returncode < 0:
        return FAILURE_STATUS
    return process.returncode


class ShellContext:
    """
    Clase que agrupa el estado de la sesion y las capacidades que usa el
    ejecutor, para poder sustituirlas en las pruebas.
    """
    def __init__(
        self,
        env: Optional[Dict[str, str]] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        chdir: Callable[[str], None] = os.chdir,
        getcwd: Callable[[], str] = os.getcwd,
        spawn: Callable[..., int] = spawn_process,
        exit: Callable[[int], None] = sys.exit,
    ) -> None:
        self.env = env if env is not None else os.environ.copy()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.history: Deque[str] = deque(maxlen=HISTORY_SIZE)
        self.chdir = chdir
        self.getcwd = getcwd
        self.spawn = spawn
        self.exit = exit

    def home(self) -> str:
        return self.env.get("HOME") or os.path.expanduser("~")


class CommandExecutor:
    """
    Clase que representa el ejecutor de comandos.
    """
    def __init__(self, context: Optional[ShellContext] = None) -> None:
        self.context = context or ShellContext()
        self.resolver = CommandResolver(self.context.env)
        self.last_return_code = 0
        self.builtins = {
            Builtin.ECHO: self._builtin_echo,
            Builtin.CD: self._builtin_cd,
            Builtin.PWD: self._builtin_pwd,
            Builtin.EXIT: self._builtin_exit,
            Builtin.TYPE: self._builtin_type,
            Builtin.HISTORY: self._builtin_history,
        }

    def execute(
        self, resolved: ResolvedCommand, redirect: Optional[RedirectionSpec] = None
    ) -> ExecutionOutcome:
        redirect = redirect or RedirectionSpec()
        try:
            if resolved.kind is CommandKind.BUILTIN:
                handler = self.builtins[Builtin(resolved.name)]
                outcome = handler(resolved.args, redirect)
            elif resolved.kind is CommandKind.EXTERNAL:
                outcome = self._spawn_process(resolved, redirect)
            else:
                outcome = self._not_found(resolved.name)
        except Exception as e:
            outcome = self._error(f"Error executing command: {e}")

        self.last_return_code = outcome.exit_status
        return outcome

    def _write(self, text: str) -> None:
        print(text, file=self.context.stdout, flush=True)

    def _error(self, message: str, status: int = FAILURE_STATUS) -> ExecutionOutcome:
        stream = self.context.stderr
        print(color(message, "RED", stream), file=stream, flush=True)
        return ExecutionOutcome(status, message)

    def _not_found(self, name: str) -> ExecutionOutcome:
        message = f"{name}: command not found"
        self._write(message)
        return ExecutionOutcome(NOT_FOUND_STATUS, message)

    def _open_redirect(self, redirect: RedirectionSpec) -> TextIO:
        return open(redirect.target_path, "a" if redirect.append else "w")

    def _spawn_process(
        self, resolved: ResolvedCommand, redirect: RedirectionSpec
    ) -> ExecutionOutcome:
        output = None
        if redirect:
            try:
                output = self._open_redirect(redirect)
            except OSError as e:
                return self._error(f"Cannot open file: {e}")

        try:
            self.context.stdout.flush()
            self.context.stderr.flush()
            status = self.context.spawn(
                resolved.path,
                [resolved.name] + resolved.args,
                output,
                output,
                self.context.env,
            )
            return ExecutionOutcome(status)
        except OSError as e:
            return self._error(f"{resolved.name}: {e.strerror or e}")
        finally:
            if output is not None:
                output.close()

    def _builtin_echo(self, args: List[str], redirect: RedirectionSpec) -> ExecutionOutcome:
        text = " ".join(args)
        if not redirect:
            self._write(text)
            return ExecutionOutcome(0)

        try:
            with self._open_redirect(redirect) as f:
                f.write(text + "\n")
        except OSError as e:
            return self._error(f"Cannot open file: {e}")
        return ExecutionOutcome(0)

    def _builtin_cd(self, args: List[str], redirect: RedirectionSpec) -> ExecutionOutcome:
        if not args or args[0] == "~":
            new_dir = self.context.home()
        else:
            new_dir = args[0]
        shown = args[0] if args else new_dir

        try:
            self.context.chdir(new_dir)
        except FileNotFoundError:
            return self._error(f"cd: {shown}: No such file or directory")
        except NotADirectoryError:
            return self._error(f"cd: {shown}: Not a directory")
        except OSError as e:
            return self._error(f"cd: {shown}: {e.strerror or e}")
        return ExecutionOutcome(0)

    def _builtin_pwd(self, args: List[str], redirect: RedirectionSpec) -> ExecutionOutcome:
        try:
            self._write(self.context.getcwd())
        except OSError as e:
            return self._error(f"pwd: {e.strerror or e}")
        return ExecutionOutcome(0)

    def _builtin_exit(self, args: List[str], redirect: RedirectionSpec) -> ExecutionOutcome:
        self.context.exit(0)
        return ExecutionOutcome(0)

    def _builtin_type(self, args: List[str], redirect: RedirectionSpec) -> ExecutionOutcome:
        if not args:
            return self._error("type: missing operand")

        name = args[0]
        if is_builtin(name):
            self._write(f"{name} is a shell builtin")
            return ExecutionOutcome(0)

        path = self.resolver.find_executable(name)
        if path is None:
            message = f"{name}: not found"
            self._write(message)
            return ExecutionOutcome(FAILURE_STATUS, message)

        self._write(f"{name} is {path}")
        return ExecutionOutcome(0)

    def _builtin_history(self, args: List[str], redirect: RedirectionSpec) -> ExecutionOutcome:
        entries = list(self.context.history)
        start = 0
        if args and args[0].isdigit():
            start = max(len(entries) - int(args[0]), 0)

        for i, cmd in enumerate(entries[start:], start + 1):
            self._write(f"{i:5}  {cmd}")
        return ExecutionOutcome(0)

    def add_to_history(self, command: str) -> None:
        command = command.strip()
        history = self.context.history
        if command and (not history or command != history[-1]):
            history.append(command)

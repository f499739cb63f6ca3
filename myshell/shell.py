#!/usr/bin/env python3
from typing import Optional
from myshell.ast_tree import ExecutionOutcome
from myshell.executer import CommandExecutor, ShellContext, color
from myshell.lexer import ShellLexer
from myshell.parser import ShellParser

PROMPT = "$ "


class Shell:
    """
    Bucle interactivo: muestra el prompt, lee una linea y la ejecuta.
    """
    def __init__(self, context: Optional[ShellContext] = None) -> None:
        self.context = context or ShellContext()
        self.lexer = ShellLexer()
        self.executor = CommandExecutor(self.context)

    def prompt(self) -> str:
        return color(PROMPT, "GREEN", self.context.stdout)

    def run_line(self, line: str) -> Optional[ExecutionOutcome]:
        line = line.strip()
        if not line:
            return None

        self.executor.add_to_history(line)

        tokens = self.lexer.tokenize(line)
        try:
            cmd = ShellParser(tokens).parse()
        except SyntaxError as e:
            stderr = self.context.stderr
            print(color(f"Error parsing command: {e}", "RED", stderr), file=stderr, flush=True)
            return ExecutionOutcome(2, str(e))

        if not cmd.args:
            return None

        resolved = self.executor.resolver.resolve(cmd.args)
        return self.executor.execute(resolved, cmd.redirect)

    def read_line(self) -> str:
        stdout = self.context.stdout
        stdout.write(self.prompt())
        stdout.flush()
        line = self.context.stdin.readline()
        if not line:
            raise EOFError("EOF")
        return line

    def run(self) -> None:
        while True:
            try:
                line = self.read_line()
            except EOFError as e:
                stderr = self.context.stderr
                print(f"\n{e}", file=stderr, flush=True)
                self.context.exit(1)

            self.run_line(line)


def main() -> None:
    Shell().run()


if __name__ == "__main__":
    main()

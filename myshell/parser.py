from typing import List, Tuple
from myshell.ast_tree import Command, RedirectionSpec

# Operadores que esperan el archivo de salida en el token siguiente.
BARE_OPERATORS = (">", "1>", ">>")


def is_redirect_token(token: str) -> bool:
    return token in BARE_OPERATORS or token.startswith(">")


class ShellParser:
    """
    Clase que representa el parser de la shell.

    Solo separa la primera redireccion de salida del resto del comando;
    cualquier otro token se pasa tal cual como argumento.
    """

    def __init__(self, tokens: List[str]) -> None:
        self.tokens = list(tokens)
        self.pos = 0

    def parse(self) -> Command:
        args, target, append = self.extract_redirection()
        return Command(args, RedirectionSpec(target, append))

    def extract_redirection(self) -> Tuple[List[str], str, bool]:
        while self.pos < len(self.tokens):
            token = self.peek()
            if is_redirect_token(token):
                args = self.tokens[: self.pos]
                target, append = self.parse_redirect()
                return args, target, append
            self.consume_any()

        return self.tokens, "", False

    def parse_redirect(self) -> Tuple[str, bool]:
        token = self.consume_any()

        if token in BARE_OPERATORS:
            if self.pos >= len(self.tokens):
                raise SyntaxError("missing output file")
            return self.consume_any(), token == ">>"

        # Forma pegada: el resto del token es el archivo, siempre truncando.
        return token[1:], False

    def peek(self) -> str:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else ""

    def consume_any(self) -> str:
        token = self.tokens[self.pos]
        self.pos += 1
        return token


def extract_redirection(tokens: List[str]) -> Tuple[List[str], str, bool]:
    return ShellParser(tokens).extract_redirection()

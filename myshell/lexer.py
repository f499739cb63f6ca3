from typing import List

# Dentro de comillas dobles la barra solo escapa estos caracteres.
DOUBLE_QUOTE_ESCAPABLE = ("\\", "$", '"', "\n")


class ShellLexer:
    """
    Clase que representa el lexer de la shell.

    Parte una linea en palabras respetando comillas simples, comillas dobles
    y la barra invertida. Nunca falla: una comilla sin cerrar se trata como
    si siguiera abierta hasta el final de la linea.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.tokens: List[str] = []
        self.current_token = ""
        self.in_double_quote = False
        self.in_single_quote = False
        self.escape_next = False

    def tokenize(self, line: str) -> List[str]:
        self.reset()

        i = 0
        while i < len(line):
            char = line[i]

            if self.escape_next:
                self.current_token += char
                self.escape_next = False
                i += 1
                continue

            if char == "\\":
                if self.in_single_quote:
                    self.current_token += char
                elif self.in_double_quote:
                    if i + 1 < len(line) and line[i + 1] in DOUBLE_QUOTE_ESCAPABLE:
                        self.escape_next = True
                    else:
                        self.current_token += char
                else:
                    self.escape_next = True
                i += 1
                continue

            if char == '"':
                if self.in_single_quote:
                    self.current_token += char
                else:
                    self.in_double_quote = not self.in_double_quote
                i += 1
                continue

            if char == "'":
                if self.in_double_quote:
                    self.current_token += char
                else:
                    self.in_single_quote = not self.in_single_quote
                i += 1
                continue

            if char == " " and not (self.in_single_quote or self.in_double_quote):
                self.add_token()
                i += 1
                continue

            self.current_token += char
            i += 1

        self.add_token()
        return self.tokens

    def add_token(self) -> None:
        if self.current_token:
            self.tokens.append(self.current_token)
            self.current_token = ""


def tokenize(line: str) -> List[str]:
    return ShellLexer().tokenize(line)

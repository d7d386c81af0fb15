"""
Expresión estructurada que se muestra en el display.

La expresión se guarda como una secuencia de tokens (números y operadores)
en vez de como texto, para no tener que volver a leer el display en cada
pulsación. El texto del display se obtiene uniendo los tokens con espacios.
"""

from core.arithmetic import parse_number, reduce


class NumberToken:
    """Número en construcción, guardado tal y como se ha tecleado ("3.", "-", "-3")."""

    def __init__(self, text):
        self.text = text

    def value(self):
        """Valor numérico, o None si el texto aún no es un número completo."""
        return parse_number(self.text)

    def __eq__(self, other):
        return isinstance(other, NumberToken) and other.text == self.text

    def __repr__(self):
        return f"NumberToken({self.text!r})"


class OperatorToken:
    """Operador ya confirmado dentro de la expresión."""

    def __init__(self, symbol):
        self.symbol = symbol

    @property
    def text(self):
        return self.symbol

    def __eq__(self, other):
        return isinstance(other, OperatorToken) and other.symbol == self.symbol

    def __repr__(self):
        return f"OperatorToken({self.symbol!r})"


# ============================================================================
# CLASE: Expression
# Propósito: Secuencia ordenada de tokens de la expresión
# Responsabilidades:
#   - Renderizar el texto del display ("5 × -3")
#   - Dar acceso al último segmento numérico
#   - Recalcular el acumulador a partir de los tokens (izquierda a derecha)
# ============================================================================
class Expression:
    """
    Expresión del display como lista de tokens.

    Invariantes:
        - Nunca está vacía tras reset(): contiene al menos NumberToken("0")
        - Números y operadores alternan; un operador nunca es el primer token
    """

    def __init__(self, tokens=None):
        self.tokens = list(tokens) if tokens else [NumberToken("0")]

    def reset(self, text="0"):
        """Sustituye toda la expresión por un único número."""
        self.tokens = [NumberToken(text)]

    def render(self):
        """Texto del display: tokens separados por un espacio."""
        return " ".join(token.text for token in self.tokens)

    def __len__(self):
        return len(self.render())

    def __eq__(self, other):
        return isinstance(other, Expression) and other.tokens == self.tokens

    def __repr__(self):
        return f"Expression({self.render()!r})"

    @property
    def last_token(self):
        return self.tokens[-1] if self.tokens else None

    def ends_with_operator(self):
        return isinstance(self.last_token, OperatorToken)

    def last_number_token(self):
        """Último token si es un número, None si la expresión acaba en operador."""
        token = self.last_token
        return token if isinstance(token, NumberToken) else None

    def last_number(self):
        """
        Valor del último segmento numérico.

        Returns:
            float | None: None si acaba en operador o el segmento está incompleto
        """
        token = self.last_number_token()
        return token.value() if token else None

    def append_number(self, text):
        self.tokens.append(NumberToken(text))

    def append_operator(self, symbol):
        self.tokens.append(OperatorToken(symbol))

    def replace_last(self, token):
        self.tokens[-1] = token

    def remove_last_char(self, whole_token=False):
        """
        Borra el último carácter visible.

        Un operador se borra entero; un número pierde su último carácter y
        desaparece si queda vacío. Si la expresión se queda sin tokens vuelve
        a "0".

        Args:
            whole_token (bool): Borrar el último token completo (ej: "Error")
        """
        token = self.tokens.pop()
        if not whole_token and isinstance(token, NumberToken) and len(token.text) > 1:
            self.tokens.append(NumberToken(token.text[:-1]))
        if not self.tokens:
            self.reset()

    def pending_state(self):
        """
        Recalcula acumulador y operador pendiente desde los tokens.

        Reduce de izquierda a derecha todos los números situados antes del
        último operador, igual que si se hubieran vuelto a pulsar.

        Returns:
            tuple: (acumulador, operador) o (None, None) si no hay operador.
            Si algún número confirmado es incompleto devuelve (None, None).
        """
        accumulator = None
        operator = None
        last_index = len(self.tokens) - 1
        for index, token in enumerate(self.tokens):
            if isinstance(token, OperatorToken):
                operator = token.symbol
                continue
            # El número tras el último operador aún no está confirmado
            if index == last_index and operator is not None:
                break
            value = token.value()
            if value is None:
                return None, None
            if accumulator is None:
                accumulator = value
            elif operator is not None:
                accumulator = reduce(accumulator, value, operator)
        if operator is None:
            return None, None
        return accumulator, operator

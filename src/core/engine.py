"""
Motor de expresiones de la calculadora.

Este módulo contiene el estado de la calculadora (CalculatorState) y el
motor (ExpressionEngine) que lo modifica en respuesta a las pulsaciones del
teclado. La capa de presentación sólo llama a las intenciones y vuelve a
leer los dos textos del display.
"""

from enum import Enum

from config.settings import CalculatorConfig
from core.arithmetic import OPERATORS, SUBTRACT, format_number, reduce
from core.expression import Expression, NumberToken, OperatorToken


DIGIT_TOKENS = tuple("0123456789") + (".",)


class Phase(Enum):
    """Fase de entrada de la calculadora."""

    FRESH = "fresh"                        # Estado inicial o tras C
    ENTERING = "entering"                  # Tecleando un número
    OPERATOR_PENDING = "operator_pending"  # La expresión acaba en operador
    CALCULATED = "calculated"              # Se acaba de pulsar "="


class CalculatorState:
    """
    Registro único con todo el estado de la calculadora.

    Atributos:
        - expression: Expresión en construcción (tokens)
        - history_line: Expresión anterior seguida de " =" ("7 + 2 =")
        - accumulator: Operando izquierdo acumulado (float o None)
        - pending_operator: Operador que espera segundo operando
        - phase: Fase de entrada (Phase)
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Vuelve al estado inicial: display "0" y nada pendiente."""
        self.expression = Expression()
        self.history_line = ""
        self.accumulator = None
        self.pending_operator = None
        self.phase = Phase.FRESH

    def __eq__(self, other):
        if not isinstance(other, CalculatorState):
            return NotImplemented
        return (self.expression == other.expression
                and self.history_line == other.history_line
                and self.accumulator == other.accumulator
                and self.pending_operator == other.pending_operator
                and self.phase == other.phase)

    def __repr__(self):
        return (f"CalculatorState({self.expression.render()!r}, "
                f"history={self.history_line!r}, acc={self.accumulator!r}, "
                f"op={self.pending_operator!r}, phase={self.phase.name})")


# ============================================================================
# CLASE: ExpressionEngine
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir la expresión dígito a dígito
#   - Encadenar operadores reduciendo de izquierda a derecha
#   - Evaluar, borrar, retroceder y calcular porcentajes
#   - Publicar los dos textos del display (historial y expresión actual)
# ============================================================================
class ExpressionEngine:
    """
    Motor de expresiones con evaluación estricta de izquierda a derecha.

    Modelo de operación:
        1. Usuario teclea dígitos → se acumulan en el último número
        2. Usuario pulsa operador → el número se guarda en el acumulador
           (o se reduce con el operador pendiente) y el operador se muestra
        3. Usuario pulsa = → se reduce el último número y se muestra el
           resultado; la expresión pasa a la línea de historial

    Ninguna intención lanza excepciones por errores de dominio: la división
    entre cero y el desborde se muestran como texto ("Error",
    "Error: Desborde"). Cada intención devuelve True si cambió el estado.
    """

    def __init__(self, state=None, config=None):
        """
        Inicializa el motor.

        Args:
            state (CalculatorState): Estado a modificar (opcional, se crea uno)
            config (CalculatorConfig): Límites y textos de error (opcional)
        """
        self.state = state if state else CalculatorState()
        self.config = config if config else CalculatorConfig()

    # ========================================================================
    # TEXTOS DEL DISPLAY
    # ========================================================================
    @property
    def history_line(self):
        return self.state.history_line

    @property
    def current_expression(self):
        return self.state.expression.render()

    def is_error(self):
        """True si el display muestra un marcador de error o infinito."""
        return self.current_expression in self._markers()

    def is_result(self):
        return self.state.phase == Phase.CALCULATED

    # ========================================================================
    # INTENCIONES
    # ========================================================================
    def enter_digit(self, token):
        """
        Añade un dígito o el punto decimal al número actual.

        Args:
            token (str): "0".."9" o "."

        Returns:
            bool: True si se añadió, False si se rechazó (segundo punto
            decimal en el mismo número o expresión en su longitud máxima)

        Raises:
            ValueError: Si token no es un dígito ni "."

        Comportamiento:
            - Tras "=": empieza una expresión nueva y borra el historial
            - Número "0": el dígito lo sustituye ("0" → "7")
            - Tras un operador: empieza un número nuevo ("5 +" → "5 + 3")
            - Resto: se añade al número actual ("12" → "123")
        """
        if token not in DIGIT_TOKENS:
            raise ValueError(f"Dígito no válido: {token!r}")

        state = self.state
        expression = state.expression
        current = expression.last_number_token()

        if state.phase == Phase.CALCULATED or (current and current.text in self._markers()):
            state.reset()
            state.expression.reset(self._start_number(token))
            state.phase = Phase.ENTERING
            return True

        if expression.ends_with_operator():
            text = self._start_number(token)
            if not self._fits(1 + len(text)):
                return False
            expression.append_number(text)
            state.phase = Phase.ENTERING
            return True

        if token == ".":
            if "." in current.text:
                return False
            text = current.text + "." if current.text not in ("", "-") else current.text + "0."
        elif current.text in ("0", "-0"):
            text = current.text[:-1] + token
        else:
            text = current.text + token

        if not self._fits(len(text) - len(current.text)):
            return False

        expression.replace_last(NumberToken(text))
        state.phase = Phase.ENTERING
        return True

    def enter_operator(self, op):
        """
        Añade un operador a la expresión.

        Args:
            op (str): "+", "-", "×" o "÷"

        Returns:
            bool: True si se añadió o sustituyó, False si se ignoró

        Raises:
            ValueError: Si op no es un operador conocido

        Comportamiento:
            1. Hay número completo al final: se guarda como acumulador, o se
               reduce con el operador pendiente (el display no se reescribe)
               y se añade " op" ("7" → "7 +")
            2. La expresión ya acaba en operador: "-" inicia un número
               negativo ("5 ×" → "5 × -"), otro operador sustituye al último
            3. Estado inicial y "-": número negativo ("0" → "-")
            4. Resto (ej: display "Error"): se ignora
        """
        if op not in OPERATORS:
            raise ValueError(f"Operador no válido: {op!r}")

        state = self.state
        expression = state.expression

        # Caso 3: el "0" inicial no es un operando, es un display vacío
        if state.phase == Phase.FRESH and op == SUBTRACT:
            expression.reset(SUBTRACT)
            state.phase = Phase.ENTERING
            return True

        # Caso 1: operador tras un número completo
        number = expression.last_number()
        if number is not None:
            if not self._fits(1 + len(op)):
                return False
            if state.accumulator is None:
                state.accumulator = number
            elif state.pending_operator is not None:
                state.accumulator = reduce(state.accumulator, number, state.pending_operator)
            expression.append_operator(op)
            state.pending_operator = op
            state.phase = Phase.OPERATOR_PENDING
            return True

        # Caso 2: dos operadores seguidos
        if expression.ends_with_operator():
            if op == SUBTRACT:
                if not self._fits(1 + len(SUBTRACT)):
                    return False
                expression.append_number(SUBTRACT)
                state.phase = Phase.ENTERING
            else:
                expression.replace_last(OperatorToken(op))
                state.pending_operator = op
            return True

        return False

    def evaluate(self):
        """
        Calcula el resultado (tecla =).

        Returns:
            bool: True si se calculó, False si no hay número que evaluar

        Proceso:
            1. Reduce acumulador y último número con el operador pendiente
               (o toma el número tal cual si nunca se pulsó un operador)
            2. La expresión pasa al historial seguida de " ="
            3. El resultado formateado sustituye a la expresión

        Ejemplos:
            "7 + 2"  → historial "7 + 2 =", display "9"
            "9 ÷ 0"  → display "Error"
            "3."     → historial "3 =", display "3"
        """
        state = self.state
        expression = state.expression
        number = expression.last_number()
        if number is None:
            return False

        if state.accumulator is not None and state.pending_operator is not None:
            result = reduce(state.accumulator, number, state.pending_operator)
            history = f"{expression.render()} ="
        else:
            result = number
            history = f"{format_number(number, self.config)} ="

        state.history_line = history
        expression.reset(format_number(result, self.config))
        state.accumulator = None
        state.pending_operator = None
        state.phase = Phase.CALCULATED
        return True

    def clear(self):
        """Borra todo el estado (tecla C)."""
        self.state.reset()
        return True

    def backspace(self):
        """
        Borra el último carácter (tecla ⌫).

        Comportamiento:
            - Tras "=": equivale a clear()
            - Un operador se borra entero; un número pierde su último dígito
            - Si no queda nada el display vuelve a "0"
            - Acumulador y operador pendiente se recalculan desde los tokens
              que quedan, así siempre corresponden a la expresión visible
        """
        state = self.state
        if state.phase == Phase.CALCULATED:
            return self.clear()
        if state.phase == Phase.FRESH:
            return False

        expression = state.expression
        current = expression.last_number_token()
        expression.remove_last_char(whole_token=bool(current and current.text in self._markers()))
        state.accumulator, state.pending_operator = expression.pending_state()

        if expression.ends_with_operator():
            state.phase = Phase.OPERATOR_PENDING
        elif expression.render() == "0":
            state.phase = Phase.FRESH
        else:
            state.phase = Phase.ENTERING
        return True

    def percentage(self):
        """
        Convierte el último número en porcentaje (tecla %).

        Returns:
            bool: False si no hay número al final de la expresión

        Ejemplos:
            "8"      → "0.08"
            "50 + 8" → "50 + 0.08" (el acumulador no cambia)

        No termina la entrada: se puede seguir tecleando tras el resultado.
        """
        state = self.state
        expression = state.expression
        number = expression.last_number()
        if number is None:
            return False

        text = format_number(number / 100, self.config)
        if not self._fits(len(text) - len(expression.last_number_token().text)):
            return False

        # Con un único número el token reemplazado es toda la expresión
        expression.replace_last(NumberToken(text))
        state.phase = Phase.ENTERING
        return True

    # ========================================================================
    # AUXILIARES
    # ========================================================================
    def _markers(self):
        return (self.config.error_text, self.config.infinity_text, self.config.overflow_text)

    def _fits(self, extra):
        # extra: caracteres que la intención va a añadir al display
        return len(self.state.expression) + extra <= self.config.max_expression_length

    @staticmethod
    def _start_number(token):
        # Un número que empieza por punto se muestra como "0."
        return "0." if token == "." else token

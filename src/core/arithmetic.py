"""
Aritmética de la calculadora y formateo de resultados.

Funciones puras (sin estado) compartidas por el motor de expresiones:
reducción de dos operandos, lectura de números tecleados y formateo para
el display.
"""

import math
import re

from config.settings import CalculatorConfig


# Glifos de operador tal y como aparecen en el display
ADD = "+"
SUBTRACT = "-"
MULTIPLY = "×"
DIVIDE = "÷"
OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)

# Sólo lo que el teclado puede producir: signo opcional, dígitos, un punto
_NUMBER_RE = re.compile(r"^-?(\d+\.?\d*|\.\d+)$")

_DEFAULT_CONFIG = CalculatorConfig()


def reduce(a, b, op):
    """
    Aplica un operador a dos operandos.

    Args:
        a (float): Operando izquierdo (acumulador)
        b (float): Operando derecho
        op (str): Uno de "+", "-", "×", "÷"

    Returns:
        float: Resultado. Dividir entre cero devuelve NaN en vez de lanzar,
        y el NaN se propaga por las operaciones siguientes.

    Raises:
        ValueError: Si op no es un operador conocido
    """
    if op == ADD:
        return a + b
    if op == SUBTRACT:
        return a - b
    if op == MULTIPLY:
        return a * b
    if op == DIVIDE:
        if b == 0:
            return math.nan
        return a / b
    raise ValueError(f"Operador desconocido: {op!r}")


def parse_number(text):
    """
    Convierte el texto de un segmento numérico en float.

    Returns:
        float | None: None si el texto no es un número completo
        (ej: "-", ".", "Error", "Infinito")
    """
    if not text or not _NUMBER_RE.match(text):
        return None
    return float(text)


def format_number(number, config=None):
    """
    Formatea un número para el display.

    Args:
        number (float): Valor a mostrar
        config (CalculatorConfig): Límites y textos de error (opcional)

    Returns:
        str: Texto del display

    Formateo:
        - NaN → "Error" (división entre cero)
        - ±inf → "Infinito"
        - Máximo 7 decimales, sin ceros finales ni separador de miles
          (2.0 → "2", 1/3 → "0.3333333")
        - Más de 15 caracteres → "Error: Desborde"
    """
    config = config if config else _DEFAULT_CONFIG

    if math.isnan(number):
        return config.error_text
    if math.isinf(number):
        return config.infinity_text

    text = f"{number:.{config.max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"

    if len(text) > config.max_display_length:
        return config.overflow_text
    return text

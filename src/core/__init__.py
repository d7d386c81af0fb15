"""
Módulo core con la lógica principal de la calculadora.
Contiene el motor de expresiones, su estado y la aritmética compartida.
"""

from .arithmetic import format_number, parse_number, reduce
from .engine import CalculatorState, ExpressionEngine, Phase
from .expression import Expression, NumberToken, OperatorToken

__all__ = [
    'ExpressionEngine', 'CalculatorState', 'Phase',
    'Expression', 'NumberToken', 'OperatorToken',
    'reduce', 'format_number', 'parse_number',
]

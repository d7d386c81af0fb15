"""
Módulo de configuración de la calculadora.
Contiene los límites del motor y las preferencias de la ventana.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']

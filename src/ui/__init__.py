"""
Módulo de interfaz de usuario.
Contiene el renderizador de UI y la distribución del teclado.
"""

from .keypad import Button, Keypad
from .renderer import UIRenderer

__all__ = ['UIRenderer', 'Keypad', 'Button']

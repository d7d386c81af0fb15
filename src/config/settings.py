"""
Configuración de la calculadora.

Este módulo centraliza los límites del motor de expresiones, los textos de
error del display y las preferencias visuales de la ventana del teclado.
"""

# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración centralizada de la calculadora
# Responsabilidades:
#   - Límites de entrada y de formateo (longitud, decimales)
#   - Textos mostrados para errores de dominio
#   - Dimensiones y colores de la ventana del teclado
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora y de su ventana.

    Grupos de opciones:
        - Motor: longitud máxima de la expresión y del resultado formateado
        - Textos de error: división entre cero, infinito, desborde
        - Ventana: tamaño, márgenes y paleta BGR de los botones
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # MOTOR DE EXPRESIONES
        # ====================================================================
        self.max_expression_length = 30     # Caracteres máximos de la expresión
        self.max_fraction_digits = 7        # Decimales máximos del resultado
        self.max_display_length = 15        # Caracteres máximos del resultado

        # ====================================================================
        # TEXTOS DE ERROR (se muestran, nunca se lanzan)
        # ====================================================================
        self.error_text = "Error"               # División entre cero (NaN)
        self.infinity_text = "Infinito"         # Magnitud infinita
        self.overflow_text = "Error: Desborde"  # Resultado demasiado largo

        # ====================================================================
        # VENTANA DEL TECLADO
        # ====================================================================
        self.window_name = "Calculadora"
        self.window_width = 480
        self.window_height = 800
        self.padding = 16                   # Margen exterior en píxeles
        self.button_spacing = 10            # Separación entre botones
        self.display_height = 220           # Alto de la zona de display
        self.feedback_duration = 20         # Frames que dura un mensaje

        # Paleta BGR (OpenCV)
        self.background_color = (32, 32, 32)
        self.number_color = (66, 66, 66)
        self.operator_color = (0, 160, 255)
        self.special_color = (97, 97, 97)
        self.equals_color = (99, 30, 233)
        self.text_color = (255, 255, 255)
        self.history_color = (211, 211, 211)

    def get_button_color(self, kind):
        """
        Retorna el color de fondo de un botón según su tipo.

        Args:
            kind (str): "number", "operator", "special" o "equals"
        """
        colors = {
            "number": self.number_color,
            "operator": self.operator_color,
            "special": self.special_color,
            "equals": self.equals_color,
        }
        return colors.get(kind, self.number_color)

    def get_keypad_area(self):
        """
        Calcula el rectángulo disponible para la rejilla de botones.

        Returns:
            tuple: (x, y, ancho, alto) en píxeles
        """
        x = self.padding
        y = self.padding + self.display_height
        w = self.window_width - 2 * self.padding
        h = self.window_height - y - self.padding
        return x, y, w, h

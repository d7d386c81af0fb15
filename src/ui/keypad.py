"""
Distribución del teclado de la calculadora.

Define los 19 botones, su posición en la rejilla y la búsqueda del botón
bajo un punto de la ventana (clic del ratón).
"""

from collections import namedtuple

from config.settings import CalculatorConfig


# label: texto del botón; intent: id de la intención que dispara
# kind: tipo visual ("number", "operator", "special", "equals")
# span: columnas que ocupa
Button = namedtuple("Button", ["label", "intent", "kind", "span"])

# Rejilla de 5 filas x 4 columnas; el "0" ocupa dos columnas
KEYPAD_ROWS = [
    [Button("C", "clear_all", "special", 1),
     Button("⌫", "backspace", "special", 1),
     Button("%", "percent", "special", 1),
     Button("÷", "divide", "operator", 1)],
    [Button("7", "num_7", "number", 1),
     Button("8", "num_8", "number", 1),
     Button("9", "num_9", "number", 1),
     Button("×", "multiply", "operator", 1)],
    [Button("4", "num_4", "number", 1),
     Button("5", "num_5", "number", 1),
     Button("6", "num_6", "number", 1),
     Button("-", "subtract", "operator", 1)],
    [Button("1", "num_1", "number", 1),
     Button("2", "num_2", "number", 1),
     Button("3", "num_3", "number", 1),
     Button("+", "add", "operator", 1)],
    [Button("0", "num_0", "number", 2),
     Button(".", "decimal", "number", 1),
     Button("=", "equal", "equals", 1)],
]

COLUMNS = 4

# Las fuentes Hershey de OpenCV sólo dibujan ASCII
ASCII_LABELS = {"÷": "/", "×": "x", "⌫": "<-"}


def ascii_text(text):
    """Sustituye los glifos no ASCII por equivalentes dibujables."""
    for glyph, replacement in ASCII_LABELS.items():
        text = text.replace(glyph, replacement)
    return text


class Keypad:
    """
    Rejilla de botones colocada en la zona inferior de la ventana.

    Las posiciones se calculan una sola vez a partir de la configuración:
    cada botón recibe un rectángulo (x, y, ancho, alto) en píxeles.
    """

    def __init__(self, config=None):
        self.config = config if config else CalculatorConfig()
        self.buttons = self._layout()

    def _layout(self):
        area_x, area_y, area_w, area_h = self.config.get_keypad_area()
        gap = self.config.button_spacing
        cell_w = (area_w - gap * (COLUMNS - 1)) / COLUMNS
        cell_h = (area_h - gap * (len(KEYPAD_ROWS) - 1)) / len(KEYPAD_ROWS)

        placed = []
        for row_index, row in enumerate(KEYPAD_ROWS):
            column = 0
            y = area_y + row_index * (cell_h + gap)
            for button in row:
                x = area_x + column * (cell_w + gap)
                w = cell_w * button.span + gap * (button.span - 1)
                placed.append((button, (int(x), int(y), int(w), int(cell_h))))
                column += button.span
        return placed

    def button_at(self, x, y):
        """
        Busca el botón que contiene el punto (x, y).

        Returns:
            Button | None: None si el punto cae entre botones o fuera del teclado
        """
        for button, (bx, by, bw, bh) in self.buttons:
            if bx <= x < bx + bw and by <= y < by + bh:
                return button
        return None

    def rect_of(self, intent):
        """Rectángulo del botón con la intención dada (para resaltarlo)."""
        for button, rect in self.buttons:
            if button.intent == intent:
                return rect
        return None

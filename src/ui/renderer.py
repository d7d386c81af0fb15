"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja la calculadora sobre un
lienzo de numpy con OpenCV. Sólo lee el estado del motor; nunca lo modifica.
"""

import cv2
import numpy as np

from config.settings import CalculatorConfig
from ui.keypad import ascii_text


# ============================================================================
class UIRenderer:
    """
    Renderizador de la ventana de la calculadora.

    Componentes visuales:
        1. Línea de historial: expresión anterior ("7 + 2 =")
        2. Display principal: expresión en construcción o resultado
        3. Teclado: rejilla de 19 botones
        4. Feedback: mensaje temporal (ej: "Error" al dividir entre cero)
    """

    def __init__(self, config=None):
        """
        Inicializa el renderizador.

        Args:
            config (CalculatorConfig): Tamaño de ventana y paleta (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.width = self.config.window_width
        self.height = self.config.window_height
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback

    def new_canvas(self):
        """Lienzo BGR vacío con el color de fondo."""
        canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        canvas[:] = self.config.background_color
        return canvas

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto la de la configuración)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_duration

    def draw_display(self, img, engine):
        """
        Dibuja historial y expresión actual, alineados a la derecha.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            engine (ExpressionEngine): Motor con el estado actual

        Colores del display:
            - Blanco: Expresión en construcción
            - Verde: Resultado de cálculo
            - Rojo: Error, desborde o infinito

        Tamaños dinámicos:
            - Textos cortos (<10 caracteres): Fuente 2.0
            - Textos largos: se reduce hasta que quepa en el ancho
        """
        pad = self.config.padding
        right = self.width - pad * 2

        history = ascii_text(engine.history_line)
        if history:
            self._put_right(img, history, right, pad + 60, 0.9,
                            self.config.history_color, 2)

        display = ascii_text(engine.current_expression)
        color = self.config.text_color
        if engine.is_error():
            color = (100, 100, 255)  # Rojo
        elif engine.is_result():
            color = (100, 255, 100)  # Verde

        font_scale = 2.0 if len(display) < 10 else 1.4
        max_w = self.width - pad * 4
        while font_scale > 0.6 and self._text_width(display, font_scale, 3) > max_w:
            font_scale -= 0.1
        self._put_right(img, display, right, pad + self.config.display_height - 40,
                        font_scale, color, 3)

    def draw_keypad(self, img, keypad, pressed=None):
        """
        Dibuja la rejilla de botones.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            keypad (Keypad): Distribución de botones
            pressed (str): Intención del botón recién pulsado (se resalta)
        """
        for button, (x, y, w, h) in keypad.buttons:
            color = self.config.get_button_color(button.kind)
            if button.intent == pressed:
                color = tuple(min(255, c + 60) for c in color)
            cv2.rectangle(img, (x, y), (x + w, y + h), color, -1)

            label = ascii_text(button.label)
            scale = 1.2 if len(label) == 1 else 0.9
            (tw, th), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_DUPLEX, scale, 2)
            cv2.putText(img, label, (x + (w - tw) // 2, y + (h + th) // 2),
                        cv2.FONT_HERSHEY_DUPLEX, scale, self.config.text_color, 2)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal sobre el display.

        Efecto:
            - Desaparece con fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 10.0, 1.0)

            x, y = self.config.padding * 2, self.config.padding + 30
            overlay = img.copy()
            cv2.rectangle(overlay, (x - 10, y - 25), (x + 260, y + 10), (40, 40, 40), -1)
            cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, ascii_text(self.feedback_msg), (x, y),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)

    def render(self, engine, keypad, pressed=None):
        """Dibuja un frame completo y lo devuelve."""
        img = self.new_canvas()
        self.draw_display(img, engine)
        self.draw_keypad(img, keypad, pressed)
        self.draw_feedback(img)
        return img

    @staticmethod
    def _text_width(text, scale, thickness):
        return cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, scale, thickness)[0][0]

    def _put_right(self, img, text, right, baseline, scale, color, thickness):
        x = int(right - self._text_width(text, scale, thickness))
        cv2.putText(img, text, (x, int(baseline)),
                    cv2.FONT_HERSHEY_DUPLEX, scale, color, thickness)

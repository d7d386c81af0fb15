"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp: abre la ventana, traduce clics
y teclas a intenciones y las envía al motor de expresiones.
"""

import cv2

from config.settings import CalculatorConfig
from core.arithmetic import ADD, DIVIDE, MULTIPLY, SUBTRACT
from core.engine import ExpressionEngine
from ui.keypad import Keypad
from ui.renderer import UIRenderer


# Teclas del teclado físico → id de intención
KEY_BINDINGS = {
    ord("."): "decimal",
    ord(","): "decimal",
    ord("+"): "add",
    ord("-"): "subtract",
    ord("*"): "multiply",
    ord("x"): "multiply",
    ord("/"): "divide",
    ord("="): "equal",
    13: "equal",            # Enter
    10: "equal",            # Enter (Linux)
    ord("%"): "percent",
    ord("c"): "clear_all",
    8: "backspace",         # Backspace
    127: "backspace",       # Backspace (macOS)
}
KEY_BINDINGS.update({ord(str(d)): f"num_{d}" for d in range(10)})

OPERATOR_INTENTS = {
    "add": ADD,
    "subtract": SUBTRACT,
    "multiply": MULTIPLY,
    "divide": DIVIDE,
}


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - ExpressionEngine: Estado y lógica aritmética
        - Keypad: Distribución de botones y búsqueda por posición
        - UIRenderer: Renderizado de la ventana
        - CalculatorApp: Coordinador y loop principal

    La aplicación es un observador: tras cada intención vuelve a leer el
    historial y la expresión del motor para dibujarlos.
    """

    def __init__(self, config=None, engine=None):
        """
        Inicializa la aplicación sin abrir todavía la ventana.

        Args:
            config (CalculatorConfig): Configuración (opcional)
            engine (ExpressionEngine): Motor a usar (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.engine = engine if engine else ExpressionEngine(config=self.config)
        self.keypad = Keypad(self.config)
        self.ui = UIRenderer(self.config)

        self.pressed = None       # Último botón pulsado (se resalta)
        self.pressed_timer = 0    # Frames restantes de resaltado

    def process(self, intent):
        """
        Envía una intención al motor y muestra feedback.

        Args:
            intent (str): Id de la intención ("num_5", "decimal", "add",
                "subtract", "multiply", "divide", "equal", "percent",
                "clear_all", "backspace")

        Returns:
            bool: True si el motor cambió de estado

        Raises:
            ValueError: Si el id de intención no existe
        """
        # ====================================================================
        # NÚMEROS (0-9) Y PUNTO DECIMAL
        # ====================================================================
        if intent.startswith("num_"):
            changed = self.engine.enter_digit(intent.split("_")[1])
        elif intent == "decimal":
            changed = self.engine.enter_digit(".")

        # ====================================================================
        # OPERADORES (+ - × ÷)
        # ====================================================================
        elif intent in OPERATOR_INTENTS:
            changed = self.engine.enter_operator(OPERATOR_INTENTS[intent])

        # ====================================================================
        # IGUAL (=): Calcular resultado
        # ====================================================================
        elif intent == "equal":
            changed = self.engine.evaluate()
            if changed and self.engine.is_error():
                self.ui.show_feedback(self.engine.current_expression, (100, 100, 255))

        # ====================================================================
        # CONTROL: porcentaje, borrar todo, retroceso
        # ====================================================================
        elif intent == "percent":
            changed = self.engine.percentage()
        elif intent == "clear_all":
            changed = self.engine.clear()
            self.ui.show_feedback("TODO BORRADO", (255, 50, 50))
        elif intent == "backspace":
            changed = self.engine.backspace()
        else:
            raise ValueError(f"Intención desconocida: {intent!r}")

        self.pressed = intent
        self.pressed_timer = 6
        return changed

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: un clic izquierdo pulsa el botón bajo el cursor."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        button = self.keypad.button_at(x, y)
        if button:
            self.process(button.intent)

    def handle_key(self, key):
        """
        Procesa una tecla devuelta por cv2.waitKey.

        Returns:
            bool: False si la tecla pide salir (ESC o 'q')
        """
        if key == 27 or key == ord("q"):
            return False
        intent = KEY_BINDINGS.get(key)
        if intent:
            self.process(intent)
        return True

    def frame(self):
        """Dibuja el frame actual y avanza el resaltado del botón pulsado."""
        img = self.ui.render(self.engine, self.keypad, self.pressed)
        if self.pressed_timer > 0:
            self.pressed_timer -= 1
            if self.pressed_timer == 0:
                self.pressed = None
        return img

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Dibujar frame (display + teclado + feedback)
            2. Mostrar frame y procesar input de teclado
            3. Los clics llegan por on_mouse entre frames
            4. Repetir hasta ESC o 'q'
        """
        print("\n" + "="*50)
        print("CALCULADORA")
        print("="*50)
        print("\nRaton: pulsa los botones del teclado")
        print("Teclado: 0-9 . + - * / % Enter(=) Backspace c(borrar)")
        print("\nPresiona ESC o 'q' para salir")
        print("="*50 + "\n")

        cv2.namedWindow(self.config.window_name)
        cv2.setMouseCallback(self.config.window_name, self.on_mouse)

        # ====================================================================
        # BUCLE PRINCIPAL - una intención se procesa entera antes del frame
        # ====================================================================
        while True:
            cv2.imshow(self.config.window_name, self.frame())

            key = cv2.waitKey(30) & 0xFF
            if key != 0xFF and not self.handle_key(key):
                break

            # Ventana cerrada con el botón de la barra de título
            if cv2.getWindowProperty(self.config.window_name, cv2.WND_PROP_VISIBLE) < 1:
                break

        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")

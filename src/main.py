# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
"""
Calculadora de teclado.

Ejecución:
    python3 src/main.py      (o el comando `calculadora` tras instalar)

Requisitos:
    - Python 3.9+
    - opencv-python
    - numpy
"""

from app.calculator_app import CalculatorApp


def main():
    """
    Crea la aplicación y ejecuta el bucle principal.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Muestra el error y el traceback completo
    """
    try:
        app = CalculatorApp()
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()

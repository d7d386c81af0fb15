"""Tests de la capa de presentación: teclado, renderizador y aplicación."""

import pytest

cv2 = pytest.importorskip("cv2")

from app.calculator_app import CalculatorApp, KEY_BINDINGS  # noqa: E402
from config.settings import CalculatorConfig  # noqa: E402
from core.engine import ExpressionEngine  # noqa: E402
from ui.keypad import KEYPAD_ROWS, Keypad, ascii_text  # noqa: E402
from ui.renderer import UIRenderer  # noqa: E402


def center(rect):
    x, y, w, h = rect
    return x + w // 2, y + h // 2


# --- Teclado ---

def test_keypad_has_nineteen_buttons():
    keypad = Keypad()
    assert len(keypad.buttons) == 19
    assert sum(len(row) for row in KEYPAD_ROWS) == 19


def test_every_button_is_found_at_its_center():
    keypad = Keypad()
    for button, rect in keypad.buttons:
        assert keypad.button_at(*center(rect)) == button


def test_zero_button_spans_two_columns():
    keypad = Keypad()
    zero = keypad.rect_of("num_0")
    one = keypad.rect_of("num_1")
    assert zero[2] > 2 * one[2]
    assert keypad.button_at(zero[0] + zero[2] - 2, zero[1] + 2).intent == "num_0"


def test_click_outside_keypad_finds_nothing():
    keypad = Keypad()
    assert keypad.button_at(5, 5) is None


def test_ascii_text_replaces_glyphs():
    assert ascii_text("8 ÷ 2 × 3") == "8 / 2 x 3"
    assert ascii_text("⌫") == "<-"


# --- Renderizador ---

def test_render_returns_canvas_of_configured_size():
    config = CalculatorConfig()
    engine = ExpressionEngine(config=config)
    engine.enter_digit("7")
    img = UIRenderer(config).render(engine, Keypad(config))
    assert img.shape == (config.window_height, config.window_width, 3)
    assert img.dtype.name == "uint8"


def test_render_draws_something_on_background():
    config = CalculatorConfig()
    img = UIRenderer(config).render(ExpressionEngine(config=config), Keypad(config))
    background = img[0, 0].tolist()
    assert background == list(config.background_color)
    assert (img != img[0, 0]).any()


def test_feedback_timer_counts_down():
    renderer = UIRenderer()
    renderer.show_feedback("Error", duration=2)
    img = renderer.new_canvas()
    renderer.draw_feedback(img)
    renderer.draw_feedback(img)
    assert renderer.feedback_timer == 0


# --- Aplicación ---

@pytest.fixture
def app():
    return CalculatorApp()


def test_process_routes_intents_to_engine(app):
    for intent in ("num_7", "add", "num_2", "equal"):
        app.process(intent)
    assert app.engine.current_expression == "9"
    assert app.engine.history_line == "7 + 2 ="


def test_process_all_operator_intents(app):
    for intent in ("num_8", "divide", "num_2", "multiply", "num_3", "subtract",
                   "num_4", "add", "num_1", "equal"):
        app.process(intent)
    assert app.engine.current_expression == "9"


def test_process_control_intents(app):
    for intent in ("num_5", "decimal", "num_5", "percent"):
        app.process(intent)
    assert app.engine.current_expression == "0.055"
    app.process("backspace")
    assert app.engine.current_expression == "0.05"
    app.process("clear_all")
    assert app.engine.current_expression == "0"
    assert app.ui.feedback_msg == "TODO BORRADO"


def test_division_by_zero_shows_feedback(app):
    for intent in ("num_9", "divide", "num_0", "equal"):
        app.process(intent)
    assert app.ui.feedback_msg == "Error"


def test_unknown_intent_raises(app):
    with pytest.raises(ValueError):
        app.process("sqrt")
    assert app.pressed is None
    assert app.pressed_timer == 0


def test_mouse_click_presses_button(app):
    x, y = center(app.keypad.rect_of("num_4"))
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, x, y, 0, None)
    assert app.engine.current_expression == "4"
    app.on_mouse(cv2.EVENT_MOUSEMOVE, x, y, 0, None)
    assert app.engine.current_expression == "4"


def test_keyboard_bindings(app):
    for key in "12*3":
        assert app.handle_key(ord(key)) is True
    app.handle_key(13)
    assert app.engine.current_expression == "36"
    assert KEY_BINDINGS[ord("/")] == "divide"


def test_escape_and_q_quit(app):
    assert app.handle_key(27) is False
    assert app.handle_key(ord("q")) is False


def test_pressed_button_highlight_expires(app):
    app.process("num_1")
    assert app.pressed == "num_1"
    for _ in range(6):
        app.frame()
    assert app.pressed is None

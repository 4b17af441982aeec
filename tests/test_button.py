from splendor.button import ButtonState, Design, UIButton, default_designs
from splendor.colliders import EventType, MouseButton, MouseEvent
from splendor.sound import SoundType


class RecordingSounds:
    def __init__(self):
        self.played = []

    def play_sfx(self, sound_type):
        self.played.append(sound_type)


def make_button(**kwargs):
    return UIButton(0, 0, 400, 125, **kwargs)


def test_default_label_and_initial_state():
    button = make_button()
    assert button.state is ButtonState.NONE
    assert button.design.text.text == "Button"
    assert button.design == default_designs()[0]


def test_default_designs_are_fresh_copies():
    first = default_designs()
    first[0].text.text = "changed"
    assert default_designs()[0].text.text == "Button"


def test_mouse_enter_then_leave():
    sounds = RecordingSounds()
    button = make_button(sounds=sounds)
    button.handle_event(MouseEvent(EventType.MOUSE_MOVED, 10, 10))
    assert button.state is ButtonState.HOVER
    assert button.design == button.hover_design
    assert sounds.played == [SoundType.OVER_SFX]
    button.handle_event(MouseEvent(EventType.MOUSE_MOVED, 1000, 1000))
    assert button.state is ButtonState.NONE
    assert button.design == button.none_design


def test_click_and_release_cycle():
    sounds = RecordingSounds()
    button = make_button(sounds=sounds)
    button.handle_event(MouseEvent(EventType.MOUSE_BUTTON_PRESSED, 5, 5, MouseButton.LEFT))
    assert button.state is ButtonState.PRESS
    assert button.design == button.press_design
    assert sounds.played[-1] is SoundType.BUTTON_SFX
    button.handle_event(MouseEvent(EventType.MOUSE_BUTTON_RELEASED, 5, 5, MouseButton.LEFT))
    assert button.state is ButtonState.RELEASE
    assert button.design == button.hover_design


def test_right_click_does_nothing():
    button = make_button()
    button.handle_event(MouseEvent(EventType.MOUSE_BUTTON_PRESSED, 5, 5, MouseButton.RIGHT))
    assert button.state is ButtonState.NONE


def test_click_outside_ignored():
    button = make_button()
    button.handle_event(MouseEvent(EventType.MOUSE_BUTTON_PRESSED, 500, 5, MouseButton.LEFT))
    assert button.state is ButtonState.NONE


def test_change_text_reaches_every_design():
    button = make_button()
    button.change_text("Back to Main Menu")
    for state in (ButtonState.NONE, ButtonState.HOVER, ButtonState.PRESS):
        button.switch_state(state)
        assert button.design.text.text == "Back to Main Menu"


def test_switch_to_release_keeps_design():
    button = make_button()
    button.switch_state(ButtonState.PRESS)
    button.switch_state(ButtonState.RELEASE)
    assert button.state is ButtonState.RELEASE
    assert button.design == button.press_design


def test_custom_designs_are_copied():
    custom = Design()
    button = make_button(none=custom)
    custom.text.text = "mutated"
    assert button.design.text.text == Design().text.text


def test_design_property_is_a_copy():
    button = make_button()
    shown = button.design
    shown.text.text = "other"
    assert button.design.text.text == "Button"
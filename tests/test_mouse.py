import pytest

from olafengine.mouse import MouseButton, MouseState


def test_defaults():
    state = MouseState()
    assert state.position == (0.0, 0.0)
    assert state.scroll == (0.0, 0.0)
    assert not any(state.is_pressed(b) for b in MouseButton)


def test_all_buttons_together_are_all_pressed():
    flags = 0
    for button in MouseButton:
        flags |= button
    state = MouseState()
    state.update((0, 0), (0, 0), flags)
    assert all(state.is_pressed(b) for b in MouseButton)
    state.update((0, 0), (0, 0), 0)
    assert not any(state.is_pressed(b) for b in MouseButton)


def test_lowest_bit_is_left_click():
    state = MouseState()
    state.update((0, 0), (0, 0), 1)
    assert state.is_pressed(MouseButton.LEFT)
    assert state.left_clicked is True
    assert not state.right_clicked


def test_update_sets_position_and_delta():
    state = MouseState()
    state.update((12.5, 40), (-3, 2.25), 0)
    assert state.position == (12.5, 40.0)
    assert (state.x, state.y) == (12.5, 40.0)
    assert state.delta == (-3.0, 2.25)
    assert (state.delta_x, state.delta_y) == (-3.0, 2.25)


@pytest.mark.parametrize(
    "button, attr",
    [
        (MouseButton.LEFT, "left_clicked"),
        (MouseButton.RIGHT, "right_clicked"),
        (MouseButton.MIDDLE, "middle_clicked"),
        (MouseButton.X1, "x1_clicked"),
        (MouseButton.X2, "x2_clicked"),
    ],
)
def test_single_button(button, attr):
    state = MouseState()
    state.update((0, 0), (0, 0), button)
    assert state.is_pressed(button)
    assert getattr(state, attr) is True
    others = [b for b in MouseButton if b is not button]
    assert not any(state.is_pressed(b) for b in others)


def test_combined_buttons():
    state = MouseState()
    state.update((0, 0), (0, 0), MouseButton.LEFT | MouseButton.X2)
    assert state.left_clicked and state.x2_clicked
    assert not state.right_clicked


def test_scroll_set_and_clear():
    state = MouseState()
    state.set_scroll(1.5, -2)
    assert state.scroll == (1.5, -2.0)
    assert (state.scroll_x, state.scroll_y) == (1.5, -2.0)
    state.clear_scroll()
    assert state.scroll == (0.0, 0.0)


def test_update_leaves_scroll_alone():
    state = MouseState()
    state.set_scroll(0.5, 0.75)
    state.update((1, 1), (0, 0), 0)
    assert state.scroll == (0.5, 0.75)
from arcadebox.geometry import Rect
from arcadebox.states import GameState, menu_buttons, select_state


def test_menu_has_a_button_for_every_game():
    states = [button.state for button in menu_buttons()]
    assert len(states) == len(set(states))
    assert set(states) == set(GameState) - {GameState.MENU}


def test_menu_labels_in_order():
    labels = [button.label for button in menu_buttons()]
    assert labels[0] == "1.Tetris"
    assert labels[-1] == "8.Super Mario"
    assert "3. Space Invaders" in labels


def test_first_button_geometry():
    assert menu_buttons()[0].rect == Rect(70, 90, 200, 50)


def test_click_inside_each_button_selects_its_state():
    for button in menu_buttons():
        assert select_state(button.rect.x + 1, button.rect.y + 1) is button.state


def test_buttons_do_not_overlap():
    buttons = menu_buttons()
    for i, first in enumerate(buttons):
        for second in buttons[i + 1:]:
            assert not first.rect.intersects(second.rect)


def test_click_outside_selects_nothing():
    assert select_state(0, 0) is None
    assert select_state(600, 450) is None
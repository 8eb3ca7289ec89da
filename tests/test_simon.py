import random

from arcadebox.geometry import Rect
from arcadebox.scores import HighScore, read_highscore, write_highscore
from arcadebox.simon import Simon, SimonBox


def make_game(seed=1, **kwargs):
    return Simon(rng=random.Random(seed), **kwargs)


def test_box_brightens_to_full_red_and_fades_back():
    box = SimonBox(Rect(0, 0, 10, 10), (255, 0, 0))
    rest = box.color
    box.brighten()
    assert box.color[0] == 255
    assert box.color[1:] == (0, 0)
    previous = box.color[0]
    box.fade()
    assert box.color[0] < previous
    for _ in range(300):
        box.fade()
    assert box.color == rest


def test_resting_colour_is_dimmer_than_source():
    box = SimonBox(Rect(0, 0, 10, 10), (255, 255, 0))
    assert 0 < box.color[0] < 255
    assert box.color[0] == box.color[1]
    assert box.color[2] == 0


def test_new_game_has_one_instruction_and_shows_it():
    game = make_game()
    assert len(game.instructions) == 1
    assert game.demonstrating
    assert game.tick(0.5) is None
    shown = game.tick(0.5)
    assert shown == game.instructions[0]
    assert not game.demonstrating


def test_press_ignored_during_demonstration():
    game = make_game()
    assert game.press(0) is None
    assert game.moves == []


def test_correct_sequence_scores_and_grows():
    game = make_game()
    game.tick(1.0)
    assert game.press(game.instructions[0]) is True
    assert game.score == 1
    assert len(game.instructions) == 2
    assert game.moves == []
    assert game.demonstrating


def test_partial_correct_sequence_waits_for_more():
    game = make_game()
    game.tick(1.0)
    game.press(game.instructions[0])
    for _ in game.instructions:
        game.tick(1.0)
    assert not game.demonstrating
    assert game.press(game.instructions[0]) is True
    assert game.moves == [game.instructions[0]]
    assert game.score == 1


def test_wrong_press_resets():
    game = make_game()
    game.tick(1.0)
    game.press(game.instructions[0])
    for _ in game.instructions:
        game.tick(1.0)
    wrong = (game.instructions[0] + 1) % 4
    assert game.press(wrong) is False
    assert game.score == 0
    assert len(game.instructions) == 1
    assert game.moves == []
    assert game.demonstrating


def test_box_at_finds_each_box():
    game = make_game()
    for index, box in enumerate(game.boxes):
        assert game.box_at(box.rect.x + 1, box.rect.y + 1) == index
    assert game.box_at(0, 0) is None


def test_boxes_form_a_grid_without_overlap():
    game = make_game()
    rects = [box.rect for box in game.boxes]
    assert rects[0] == Rect(100, 40, 200, 200)
    for i, first in enumerate(rects):
        for second in rects[i + 1:]:
            assert not first.intersects(second)


def test_tick_persists_new_highscore(tmp_path):
    path = tmp_path / "hs.txt"
    write_highscore(path, 0)
    game = make_game(highscore=HighScore(path))
    game.tick(1.0)
    game.press(game.instructions[0])
    game.tick(0.0)
    assert read_highscore(path) == 1
    assert game.highscore.value == 1
from unittest.mock import MagicMock

from retrosnake.audio import Sounds
from retrosnake.game import FOOD_EATEN, ROUND_OVER


def test_attach_plays_sounds_on_events(game):
    eat, wall = MagicMock(), MagicMock()
    Sounds(eat=eat, wall=wall).attach(game)

    game.food.position = (7, 9)
    game.update()
    eat.play.assert_called_once_with()
    wall.play.assert_not_called()

    game.game_over()
    wall.play.assert_called_once_with()


def test_missing_sounds_are_silent(game):
    Sounds().attach(game)
    game.food.position = (7, 9)
    game.update()
    game.game_over()
    assert game.score == 0


def test_subscribed_to_named_events(game):
    game.subscribe = MagicMock()
    sounds = Sounds()
    sounds.attach(game)
    game.subscribe.assert_any_call(FOOD_EATEN, sounds.play_eat)
    game.subscribe.assert_any_call(ROUND_OVER, sounds.play_wall)


def test_load_with_missing_files_logs_and_continues(tmp_path, caplog):
    sounds = Sounds.load(tmp_path)
    assert sounds.eat is None
    assert sounds.wall is None
    assert caplog.text

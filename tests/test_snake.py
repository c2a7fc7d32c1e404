from retrosnake.grid import DOWN, UP
from retrosnake.snake import Snake


def test_starts_as_three_segments_facing_right():
    snake = Snake()
    assert list(snake.body) == [(6, 9), (5, 9), (4, 9)]
    assert snake.direction == (1, 0)
    assert snake.head == (6, 9)
    assert snake.tail() == [(5, 9), (4, 9)]


def test_move_keeps_length():
    snake = Snake()
    snake.move()
    assert list(snake.body) == [(7, 9), (6, 9), (5, 9)]


def test_move_with_pending_growth_keeps_tail_once():
    snake = Snake()
    snake.pending_growth = True
    snake.move()
    assert list(snake.body) == [(7, 9), (6, 9), (5, 9), (4, 9)]
    assert snake.pending_growth is False

    snake.move()
    assert len(snake.body) == 4


def test_move_does_not_check_bounds():
    snake = Snake()
    snake.direction = UP
    for _ in range(10):
        snake.move()
    assert snake.head == (6, -1)


def test_accepts_any_direction_including_reversal():
    snake = Snake()
    snake.direction = (-1, 0)
    snake.move()
    assert snake.head == (5, 9)


def test_reset_restores_start_state():
    snake = Snake()
    snake.direction = DOWN
    snake.pending_growth = True
    snake.move()
    snake.move()
    snake.reset()
    assert list(snake.body) == [(6, 9), (5, 9), (4, 9)]
    assert snake.direction == (1, 0)
    assert snake.pending_growth is False


def test_draw_paints_every_segment_head_first():
    snake = Snake()
    painted = []
    snake.draw(painted.append)
    assert painted == [(6, 9), (5, 9), (4, 9)]

from .food import Food
from .game import FOOD_EATEN, ROUND_OVER, Game, Stage
from .snake import Snake
from .timing import TickGate

__all__ = ["Food", "Game", "Stage", "Snake", "TickGate", "FOOD_EATEN", "ROUND_OVER"]

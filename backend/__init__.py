from .board import Empty, Mine, MinesweeperBoard, generate_board
from .game import GameSession, Outcome

__all__ = ['Empty', 'Mine', 'MinesweeperBoard', 'generate_board', 'GameSession', 'Outcome']

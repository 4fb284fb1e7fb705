from unittest import TestCase, main

import numpy as np

from tilemerge.core.gameboard import latent_state
from tilemerge.core.gamemove import can_move, illegal_moves, legal_moves, legal_moves_mask
from tilemerge.core.types import Direction


class TestGameMove(TestCase):
    def test_illegal_moves(self):
        """
        Test if illegal moves are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(illegal_moves(board), [Direction.LEFT])

    def test_legal_moves(self):
        """
        Test if legal moves are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_moves(board), [Direction.UP, Direction.RIGHT, Direction.DOWN])

    def test_can_move(self):
        """A tile in the top right corner can only go left and down."""
        board = np.array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertTrue(can_move(board, Direction.LEFT))
        self.assertTrue(can_move(board, Direction.DOWN))
        self.assertFalse(can_move(board, Direction.UP))
        self.assertFalse(can_move(board, Direction.RIGHT))

    def test_empty_board(self):
        """Nothing can move on an empty board."""
        board = np.zeros((4, 4), dtype=np.int64)
        self.assertEqual(legal_moves_mask(board), (False, False, False, False))

    def test_mask_matches_transitions(self):
        """A move is legal exactly when applying it records a transition."""
        rng = np.random.default_rng(3)
        for _ in range(300):
            board = rng.choice([0, 2, 4, 8], size=(4, 4), p=[0.3, 0.3, 0.2, 0.2])
            mask = legal_moves_mask(board)
            for direction in Direction:
                _, _, transitions = latent_state(board, direction)
                self.assertEqual(mask[direction.code], bool(transitions), msg=f'{direction}\n{board}')


if __name__ == '__main__':
    main()

from unittest import TestCase, main

from numpy import array

from tileslide.core.direction import Direction, traversal_order
from tileslide.core.gamemove import can_collapse, legal_directions


class TestGameMove(TestCase):
    def test_illegal_directions(self):
        """
        Test if blocked directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertFalse(can_collapse(board, Direction.LEFT))

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_merge_only(self):
        """
        A full board with one equal pair can only move along that pair's line.
        """
        board = array([[2, 2, 4, 8], [16, 32, 64, 128], [256, 512, 1024, 2048], [4096, 8192, 16384, 32768]])
        self.assertEqual(set(legal_directions(board)), {Direction.LEFT, Direction.RIGHT})

    def test_locked_board(self):
        """
        No direction is legal on a locked board.
        """
        board = array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertEqual(legal_directions(board), [])


class TestTraversalOrder(TestCase):
    def test_covers_every_cell(self):
        """
        Every position is visited exactly once, never out of range.
        """
        for size in range(2, 7):
            every_cell = {(x, y) for x in range(size) for y in range(size)}
            for direction in Direction:
                order = traversal_order(direction, size)
                self.assertEqual(len(order), size * size)
                self.assertEqual(set(order), every_cell)

    def test_destination_edge_first(self):
        """
        Each line starts at the destination edge.
        """
        self.assertEqual(traversal_order(Direction.DOWN, 4)[:4], ((0, 3), (0, 2), (0, 1), (0, 0)))
        self.assertEqual(traversal_order(Direction.UP, 4)[:4], ((0, 0), (0, 1), (0, 2), (0, 3)))
        self.assertEqual(traversal_order(Direction.LEFT, 4)[:4], ((0, 0), (1, 0), (2, 0), (3, 0)))
        self.assertEqual(traversal_order(Direction.RIGHT, 4)[:4], ((3, 0), (2, 0), (1, 0), (0, 0)))

    def test_lines_in_order(self):
        """
        A line of movement is finished before the next one starts.
        """
        order = traversal_order(Direction.DOWN, 3)
        self.assertEqual([y for _, y in order], [2, 1, 0, 2, 1, 0, 2, 1, 0])
        self.assertEqual([x for x, _ in order], [0, 0, 0, 1, 1, 1, 2, 2, 2])
        order = traversal_order(Direction.RIGHT, 3)
        self.assertEqual([x for x, _ in order], [2, 1, 0, 2, 1, 0, 2, 1, 0])
        self.assertEqual([y for _, y in order], [0, 0, 0, 1, 1, 1, 2, 2, 2])

    def test_vectors(self):
        """
        Each direction carries its unit step.
        """
        self.assertEqual(Direction.UP.vector, (0, -1))
        self.assertEqual(Direction.DOWN.vector, (0, 1))
        self.assertEqual(Direction.LEFT.vector, (-1, 0))
        self.assertEqual(Direction.RIGHT.vector, (1, 0))


if __name__ == '__main__':
    main()

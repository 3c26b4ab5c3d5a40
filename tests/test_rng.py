import unittest

from tetris_rng import LCG_M, draw, entropy_seed, next_piece_index, spawn_piece
from tetris_piece import TETROMINOES


class RngTests(unittest.TestCase):
    def test_draw_from_zero(self):
        value, seed = draw(0)
        self.assertEqual(seed, 1013904223)
        self.assertEqual(value, 1013904223 / 2 ** 32)

    def test_index_sequence_is_reproducible(self):
        seed = 0
        got = []
        for _ in range(5):
            i, seed = next_piece_index(seed)
            got.append(i)
        self.assertEqual(got, [1, 1, 5, 4, 2])
        self.assertEqual(seed, 1649599747)

    def test_values_stay_in_range(self):
        seed = 12345
        for _ in range(1000):
            value, seed = draw(seed)
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 1.0)
            self.assertTrue(0 <= seed < LCG_M)

    def test_spawn_piece_anchor_and_catalog(self):
        piece, seed = spawn_piece(0)
        self.assertEqual((piece.x, piece.y), (4, 0))
        self.assertEqual(piece.shape, TETROMINOES[1].shape)
        self.assertEqual(piece.color, 2)
        self.assertEqual(seed, 1013904223)

    def test_same_seed_same_piece(self):
        self.assertEqual(spawn_piece(987654321), spawn_piece(987654321))

    def test_entropy_seed_range(self):
        self.assertTrue(0 <= entropy_seed() < LCG_M)


if __name__ == "__main__":
    unittest.main()

import unittest

from tetris_piece import PIECE_NAMES, SHAPES, TETROMINOES, Piece, rotate_cw


class CatalogTests(unittest.TestCase):
    def test_seven_pieces_with_distinct_colors(self):
        self.assertEqual(len(TETROMINOES), 7)
        self.assertEqual([p.color for p in TETROMINOES], [1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(PIECE_NAMES, ("O", "I", "T", "L", "J", "S", "Z"))

    def test_catalog_anchor(self):
        for p in TETROMINOES:
            self.assertEqual((p.x, p.y), (4, -1))

    def test_shapes_are_minimal_bounding_boxes(self):
        for name, shape in SHAPES.items():
            self.assertTrue(any(shape[0]), name)
            self.assertTrue(any(shape[-1]), name)
            self.assertTrue(any(row[0] for row in shape), name)
            self.assertTrue(any(row[-1] for row in shape), name)
            self.assertEqual(sum(map(sum, shape)), 4, name)

    def test_cells_are_absolute(self):
        p = Piece(SHAPES["T"], 3, 2, 5)
        self.assertEqual(sorted(p.cells()), [(2, 6), (3, 5), (3, 6), (4, 6)])

    def test_moved_returns_new_piece(self):
        p = TETROMINOES[0]
        q = p.moved(1, 2)
        self.assertEqual((q.x, q.y), (5, 1))
        self.assertEqual((p.x, p.y), (4, -1))


class RotationTests(unittest.TestCase):
    EXPECTED = {
        "O": ((1, 1), (1, 1)),
        "I": ((1,), (1,), (1,), (1,)),
        "T": ((1, 0), (1, 1), (1, 0)),
        "L": ((1, 1), (0, 1), (0, 1)),
        "J": ((0, 1), (0, 1), (1, 1)),
        "S": ((0, 1), (1, 1), (1, 0)),
        "Z": ((1, 0), (1, 1), (0, 1)),
    }

    def test_rotate_each_catalog_shape(self):
        for name, expected in self.EXPECTED.items():
            self.assertEqual(rotate_cw(SHAPES[name]), expected, name)

    def test_dimensions_swap(self):
        shape = ((1, 1, 1), (1, 0, 0))
        rotated = rotate_cw(shape)
        self.assertEqual((len(rotated), len(rotated[0])), (3, 2))

    def test_four_turns_is_identity(self):
        for shape in SHAPES.values():
            r = shape
            for _ in range(4):
                r = rotate_cw(r)
            self.assertEqual(r, shape)


if __name__ == "__main__":
    unittest.main()

from falling_blocks.game import CATALOG, Cell, TetrominoType, next_piece
from falling_blocks.game.pieces import is_rotatable
from falling_blocks.game.rng import M


def test_catalog_has_seven_four_cell_shapes():
    assert len(CATALOG) == 7
    for piece in CATALOG:
        assert len(piece) == 4
        assert len({(c.x, c.y) for c in piece}) == 4
        assert len({c.kind for c in piece}) == 1


def test_catalog_order_and_spawn_cells():
    kinds = [piece[0].kind for piece in CATALOG]
    assert kinds == [
        TetrominoType.O, TetrominoType.I, TetrominoType.J, TetrominoType.L,
        TetrominoType.S, TetrominoType.Z, TetrominoType.T,
    ]
    assert {(c.x, c.y) for c in CATALOG[0]} == {(4, -2), (5, -2), (4, -1), (5, -1)}
    for piece in CATALOG:
        assert all(c.y < 0 for c in piece)
        assert all(0 <= c.x < 10 for c in piece)


def test_next_piece_uses_scaled_seed():
    assert next_piece(0) is CATALOG[0]
    assert next_piece(M - 1) is CATALOG[6]


def test_only_square_is_not_rotatable():
    assert not is_rotatable(CATALOG[0])
    assert all(is_rotatable(p) for p in CATALOG[1:])
    assert not is_rotatable(())


def test_cell_helpers():
    cell = Cell(1, 2, TetrominoType.I)
    assert cell.colour == "blue"
    assert cell.shifted(1, -1) == Cell(2, 1, TetrominoType.I)
    assert cell == Cell(1, 2, TetrominoType.I)

import pytest

from blockfall.block import Block, GridBBox, GridPosition, bounding_box

HORIZONTAL = [(0, 0), (0, 1), (0, 2), (0, 3)]
VERTICAL = [(0, 1), (1, 1), (2, 1), (3, 1)]


def make_bar():
    return Block(2, [HORIZONTAL, VERTICAL], 3)


def test_bounding_box_of_cells():
    box = bounding_box([GridPosition(2, 5), GridPosition(4, 1), (3, 3)])
    assert box == GridBBox(GridPosition(2, 1), GridPosition(4, 5))


def test_bounding_box_empty_raises():
    with pytest.raises(ValueError):
        bounding_box([])


def test_block_without_rotations_raises():
    with pytest.raises(ValueError):
        Block(1, [], 1)


def test_current_cells_follow_offset():
    block = make_bar()
    block.move(4, -1)
    assert block.current_cells() == [GridPosition(r - 1, c + 4) for r, c in HORIZONTAL]
    assert block.offset == GridPosition(-1, 4)


def test_bbox_follows_offset():
    block = make_bar()
    block.move(3, 2)
    assert block.bbox() == bounding_box(block.current_cells())


def test_rotate_cycles_through_states():
    block = make_bar()
    block.rotate()
    assert block.current_cells() == [GridPosition(r, c) for r, c in VERTICAL]
    block.rotate()
    assert block.current_cells() == [GridPosition(r, c) for r, c in HORIZONTAL]


def test_rotate_left_undoes_rotate():
    block = make_bar()
    before = block.current_cells()
    block.rotate()
    block.rotate_left()
    assert block.current_cells() == before
    block.rotate_left()
    assert block.rotation_state == block.rotation_count - 1


def test_reset_offset():
    block = make_bar()
    block.move(5, 7)
    block.reset_offset()
    assert block.offset == GridPosition(0, 0)


def test_copy_is_independent():
    block = make_bar()
    clone = block.copy()
    clone.move(1, 1)
    clone.rotate()
    clone.color_id = 8
    assert block.offset == GridPosition(0, 0)
    assert block.rotation_state == 0
    assert block.color_id == 3
    assert clone.block_id == block.block_id
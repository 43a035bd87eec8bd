import pytest

from blockfall.block import Block, GridPosition
from blockfall.factory import BlockFactory


def prototypes():
    return [Block(i, [[(0, 0), (0, 1)]], i) for i in range(7)]


def test_same_seed_gives_same_sequence():
    first = BlockFactory(prototypes(), 42)
    second = BlockFactory(prototypes(), 42)
    assert [first.generate().block_id for _ in range(30)] == [
        second.generate().block_id for _ in range(30)
    ]


def test_every_prototype_is_eventually_generated():
    factory = BlockFactory(prototypes(), 7)
    ids = {factory.generate().block_id for _ in range(500)}
    assert ids == set(range(7))


def test_generated_blocks_are_copies():
    protos = prototypes()
    factory = BlockFactory(protos[:1], 1)
    block = factory.generate()
    block.move(3, 3)
    assert protos[0].offset == GridPosition(0, 0)
    assert factory.generate().offset == GridPosition(0, 0)


def test_empty_prototypes_raise():
    with pytest.raises(ValueError):
        BlockFactory([], 1)
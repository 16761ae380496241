import pytest

from pathstar.planning.target import target_is_reached


@pytest.mark.parametrize("target, position, expected", [
    ((3, 3), (3, 3), True),
    ((3, 3), (3, 2), False),
    ((3, 3), (2, 3), False),
    ((3, None), (3, 0), True),
    ((3, None), (3, 99), True),
    ((3, None), (2, 3), False),
    ((None, 4), (0, 4), True),
    ((None, 4), (4, 0), False),
    ((None, None), (7, 1), True),
    ((0, 0), (0, 0), True),
])
def test_target_is_reached(target, position, expected):
    assert target_is_reached(target, position) is expected

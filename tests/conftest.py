import pytest

from npuzzle.search.bfs import distance_table


@pytest.fixture(scope="session")
def dist2():
    return distance_table(2)


@pytest.fixture(scope="session")
def dist3():
    # 181440 reachable states; built once for the whole session
    return distance_table(3)


@pytest.fixture(scope="session")
def dist3_snail():
    return distance_table(3, "snail")

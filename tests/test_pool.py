from collapse_grid import BOMB
from collapse_pool import Tile, TilePool


def drain(pool):
    out = []
    while True:
        t = pool.next_tile()
        if t is None:
            return out
        out.append(t)


def test_pool_hands_out_every_tile_once():
    pool = TilePool(30, seed=1)
    tiles = drain(pool)
    assert len(tiles) == 30
    assert sorted(t.index for t in tiles) == list(range(30))
    assert pool.remaining == 0
    assert pool.next_tile() is None


def test_codes_are_colors_or_bombs():
    pool = TilePool(500, n_colors=2, bomb_chance=0.1, seed=3)
    codes = {t.code for t in pool.tiles}
    assert codes <= {1, 2, BOMB}
    assert pool.bombs > 0


def test_no_bombs_when_chance_is_zero():
    pool = TilePool(200, bomb_chance=0.0, seed=3)
    assert pool.bombs == 0


def test_same_seed_same_sequence():
    a = drain(TilePool(50, seed=42))
    b = drain(TilePool(50, seed=42))
    assert a == b


def test_reset_rewinds_with_same_tiles():
    pool = TilePool(40, seed=5)
    first = drain(pool)
    pool.reset()
    assert pool.remaining == 40
    second = drain(pool)
    assert sorted(first, key=lambda t: t.index) == sorted(second, key=lambda t: t.index)
    assert isinstance(second[0], Tile)
    assert len(pool) == 40

CONFIG = {
    "WIDTH": 12,
    "HEIGHT": 16,
    "N_LINES": 100,
    "MIN_GROUP": 3,
    "BOMB_RANGE": 3,
    "N_COLORS": 3,
    "BOMB_CHANCE": 1 / 300,
    "TIME_LAPSE_MS": 160,
    "GRAVITY_LAPSE_MS": 33,
    "TIME_LAPSE_PAUSE_MS": 500,
    "TILE_SIZE": 25,
    "GAP": 10,
    "MARGIN": 20,
    "PANEL_W": 220,
    "SEED": None,
}

# key -> minimum allowed value
_LIMITS = {
    "WIDTH": 2,
    "HEIGHT": 1,
    "N_LINES": 0,
    "MIN_GROUP": 1,
    "BOMB_RANGE": 0,
    "N_COLORS": 1,
    "TIME_LAPSE_MS": 0,
    "GRAVITY_LAPSE_MS": 0,
    "TIME_LAPSE_PAUSE_MS": 0,
    "TILE_SIZE": 1,
    "GAP": 0,
    "MARGIN": 0,
    "PANEL_W": 0,
}


def make_config(**overrides) -> dict:
    """Copy of CONFIG with overrides applied; raises ValueError on bad values."""
    unknown = set(overrides) - set(CONFIG)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
    cfg = dict(CONFIG)
    cfg.update(overrides)
    for key, lo in _LIMITS.items():
        if cfg[key] < lo:
            raise ValueError(f"{key} must be >= {lo}, got {cfg[key]}")
    if cfg["N_COLORS"] > 3:
        raise ValueError(f"N_COLORS must be <= 3, got {cfg['N_COLORS']}")
    if not 0.0 <= cfg["BOMB_CHANCE"] <= 1.0:
        raise ValueError(f"BOMB_CHANCE must be within [0, 1], got {cfg['BOMB_CHANCE']}")
    return cfg

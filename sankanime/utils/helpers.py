"""Helper functions for sankanime."""


def qtip_id(anime_id: str) -> str:
    """Qtip wants the numeric tail of a slug id: 'one-piece-100' -> '100'."""
    return str(anime_id).split("-")[-1]

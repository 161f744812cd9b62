from typing import Optional

from domain.entities import Rating


def map_trakt_rating(rating: Optional[float]) -> Optional[Rating]:
    # Trakt rates 1-10: 8-10 up, 5-7 meh, 1-4 down
    if not rating or rating <= 0:
        return None
    if rating >= 8:
        return Rating.UP
    if rating >= 5:
        return Rating.MEH
    return Rating.DOWN

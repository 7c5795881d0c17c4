import math
from typing import Optional

from discovery.core.config import WORDS_PER_MINUTE


def calculate_reading_time(body: Optional[str], words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """
    Estimate reading time in whole minutes, rounded up.

    Words are whitespace-separated tokens. An empty body reads in 0 minutes.
    """
    if not body or not body.strip():
        return 0
    words = len(body.split())
    return math.ceil(words / max(words_per_minute, 1))

import re
from typing import Iterable, List, Set, Tuple

_PART_RE = re.compile(r"^E(\d+)(?:-(\d+))?$")


def _runs(episodes: Iterable[int]) -> List[Tuple[int, int]]:
    runs = []
    for number in sorted(set(episodes)):
        if runs and number == runs[-1][1] + 1:
            runs[-1] = (runs[-1][0], number)
        else:
            runs.append((number, number))
    return runs


def format_episode_range(episodes: Iterable[int]) -> str:
    """
    Collapse episode numbers into runs of consecutive integers.

    {1, 2, 3, 5, 7, 8} -> "E1-3, E5, E7-8". Order and duplicates in the
    input do not matter.
    """
    return ", ".join(
        f"E{start}" if start == end else f"E{start}-{end}"
        for start, end in _runs(episodes)
    )


def parse_episode_range(text: str) -> Set[int]:
    """Expand a string produced by format_episode_range back into episode numbers."""
    episodes: Set[int] = set()
    if not text.strip():
        return episodes
    for part in text.split(","):
        match = _PART_RE.match(part.strip())
        if not match:
            raise ValueError(f"Invalid episode range part: {part.strip()!r}")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        if end < start:
            raise ValueError(f"Episode range runs backwards: {part.strip()!r}")
        episodes.update(range(start, end + 1))
    return episodes

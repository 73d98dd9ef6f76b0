"""Rank thresholds and computation.

Both tables are sorted by ascending ``min_xp`` and start at 0.
"""

from __future__ import annotations

from collections.abc import Sequence

from progression.gamification.schemas import Rank, RankInfo

RANK_THRESHOLDS: list[Rank] = [
    Rank(name="Void Initiate", min_xp=0, icon="\U0001f464"),
    Rank(name="Void Explorer", min_xp=100, icon="\U0001f50d"),
    Rank(name="Rust Apprentice", min_xp=500, icon="\U0001f980"),
    Rank(name="Builder", min_xp=1500, icon="\U0001f528"),
    Rank(name="Deployer", min_xp=5000, icon="\U0001f680"),
    Rank(name="Architect", min_xp=10000, icon="\U0001f3d7"),
    Rank(name="Void Commander", min_xp=20000, icon="\u2b50"),
    Rank(name="Void Master", min_xp=50000, icon="\U0001f451"),
    Rank(name="Leviathan", min_xp=100000, icon="\U0001f409"),
]

# Skill constellation levels, driven by skill-node XP only.
CONSTELLATION_LEVELS: list[Rank] = [
    Rank(name="Cadet", min_xp=0, icon="\U0001f331"),
    Rank(name="Astronaut", min_xp=500, icon="\U0001f680"),
    Rank(name="Pilot", min_xp=1500, icon="\u2708"),
    Rank(name="Commander", min_xp=3000, icon="\u2b50"),
    Rank(name="Admiral", min_xp=5000, icon="\U0001f396"),
    Rank(name="Legend", min_xp=7000, icon="\U0001f451"),
]


def compute_rank(total_xp: int, thresholds: Sequence[Rank] = RANK_THRESHOLDS) -> RankInfo:
    """Current rank, next rank and percent progress toward it.

    At the top rank ``next`` is None and progress is 100.
    """
    current = thresholds[0]
    next_rank: Rank | None = None
    # XP below the first threshold still reads as the first rank
    for rank in thresholds[1:]:
        if rank.min_xp <= total_xp:
            current = rank
        else:
            next_rank = rank
            break

    if next_rank is None:
        return RankInfo(current=current, next=None, progress=100.0)

    span = next_rank.min_xp - current.min_xp
    progress = (total_xp - current.min_xp) / span * 100
    return RankInfo(current=current, next=next_rank, progress=min(max(progress, 0.0), 100.0))

from domain.entities import History, MediaType, WatchEntry, YearGroup

M = MediaType.MOVIE
TV = MediaType.SHOW

# Hand-curated log, most recent year first
WATCH_HISTORY: History = [
    YearGroup(
        year=2025,
        entries=(
            WatchEntry(864, M, "Cool Runnings"),
            WatchEntry(1438, TV, "The Wire S1E9-11"),
            WatchEntry(249522, TV, "Beast Games S1"),
            # "Life in Yakult" not found on TMDB
            WatchEntry(95396, TV, "Severance S2E1"),
            WatchEntry(95396, TV, "Severance S2E2"),
            WatchEntry(864, M, "Cool Runnings (rewatch)"),
            WatchEntry(249522, TV, "Beast Games E5"),
            WatchEntry(95396, TV, "Severance S2E3"),
            # "Grammys" and "Superbowl" are not on TMDB (live events)
            WatchEntry(974576, M, "Conclave"),
            WatchEntry(249522, TV, "Beast Games (continued)"),
            WatchEntry(95396, TV, "Severance S2E4"),
            WatchEntry(974576, M, "Conclave (rewatch)"),
            WatchEntry(1013850, M, "A Real Pain"),
            WatchEntry(95396, TV, "Severance S2E5-8"),
            WatchEntry(489, M, "Good Will Hunting"),
            # "Hadestown" is a Broadway show, not on TMDB
            WatchEntry(228878, TV, "Common Side Effects E1"),
            # "We Live In Time" - need to verify if this is the movie
            WatchEntry(95396, TV, "Severance S2E9"),
            WatchEntry(95396, TV, "Severance S2E10"),
            WatchEntry(95396, TV, "Severance S2E10 (rewatch)"),
            # "Pick of the litter" - unclear which title this refers to
            WatchEntry(1064213, M, "Anora"),
            WatchEntry(111803, TV, "White Lotus S3E6-E8"),
            WatchEntry(549509, M, "The Brutalist"),
            # "Pick of the Litter" mentioned again
            WatchEntry(14658, TV, "Survivor S48"),
            WatchEntry(1104, TV, "Mad Men S1E1"),
            WatchEntry(100088, TV, "The Last of Us S2E1-3"),
            WatchEntry(204284, TV, "The Rehearsal S2E1-2"),
            WatchEntry(100088, TV, "TLOU S2E4-5"),
            WatchEntry(250307, TV, "The Pitt E1-3"),
            WatchEntry(250307, TV, "The Pitt E4-15"),
            WatchEntry(204284, TV, "The Rehearsal S2E4"),
            WatchEntry(93241, TV, "Uzumaki E4"),
            WatchEntry(1104, TV, "Mad Men S1E2"),
            WatchEntry(661539, M, "A Complete Unknown"),
            WatchEntry(823219, M, "Flow (cat left boat)"),
            WatchEntry(157744, TV, "1923 E1"),
            WatchEntry(9614, M, "Happy Gilmore (halfway)"),
            WatchEntry(247767, TV, "The Studio E1-3"),
            WatchEntry(1078605, M, "Weapons"),
            WatchEntry(247767, TV, "The Studio E4"),
            WatchEntry(247619, TV, "Overcompensating"),
            WatchEntry(552524, M, "Lilo & Stitch (new)"),
            WatchEntry(253941, TV, "The Paper E1-2"),
            WatchEntry(1429, TV, "Attack on Titan S1"),
            WatchEntry(1018, M, "Mulholland Drive"),
            WatchEntry(14658, TV, "Survivor S49E1-4"),
            WatchEntry(1429, TV, "Attack on Titan S2E1-3"),
            WatchEntry(60573, TV, "Silicon Valley S1E1-7"),
            WatchEntry(4586, TV, "Gilmore Girls S1E1"),
            WatchEntry(75656, M, "Now You See Me (halfway)"),
            WatchEntry(1429, TV, "Attack on Titan S2E4-12"),
            WatchEntry(95730, TV, "Love on the Spectrum S3E3"),
            WatchEntry(225171, TV, "Pluribus E1-3"),
            WatchEntry(1278719, M, "Desire: The Carl Craig Story"),
            WatchEntry(152601, M, "Her"),
            WatchEntry(1429, TV, "Attack on Titan S3E1-"),
        ),
    ),
]

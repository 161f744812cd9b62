from typing import List

from domain.entities import History, MediaType, WatchEntry


def get_entries_by_year(history: History, year: int) -> List[WatchEntry]:
    for group in history:
        if group.year == year:
            return list(group.entries)
    return []


def get_movie_entries_with_notes(history: History, year: int) -> List[WatchEntry]:
    return [
        e
        for e in get_entries_by_year(history, year)
        if e.media_type == MediaType.MOVIE and e.notes
    ]


def get_tv_show_entries_with_notes(history: History, year: int) -> List[WatchEntry]:
    return [
        e
        for e in get_entries_by_year(history, year)
        if e.media_type == MediaType.SHOW and e.notes
    ]


def _unique_ids(entries: List[WatchEntry]) -> List[int]:
    return list(dict.fromkeys(e.media_id for e in entries))


def get_movie_ids_by_year(history: History, year: int) -> List[int]:
    return _unique_ids(get_movie_entries_with_notes(history, year))


def get_tv_show_ids_by_year(history: History, year: int) -> List[int]:
    return _unique_ids(get_tv_show_entries_with_notes(history, year))


def get_all_years(history: History) -> List[int]:
    return [group.year for group in history]

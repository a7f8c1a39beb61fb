"""
Pytest fixtures and configuration for the test suite.

Builds a small reference catalog (songs, albums, users, playlists) with
fixed ids so expected values can be written out by hand in tests.
"""

import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path

import pytest

# Add project root to path so tests can import melodex package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from melodex.domain import Album, Genre, Playlist, Song, User  # noqa: E402
from tests.factories import make_song  # noqa: E402


@dataclass
class Catalog:
    """Reference catalog shared by analytics tests."""

    songs: list[Song]
    albums: list[Album]
    users: list[User]
    playlists: list[Playlist]

    def song(self, song_id: str) -> Song:
        return next(song for song in self.songs if song.id == song_id)

    def album(self, title: str) -> Album:
        return next(album for album in self.albums if album.title == title)

    def user(self, username: str) -> User:
        return next(user for user in self.users if user.username == username)


def _build_songs() -> list[Song]:
    return [
        make_song("s0", "Bohemian Rhapsody", {"Queen"}, "5:55", 1975, Genre.ROCK, plays=1_500_000, popularity=95.0),
        make_song("s1", "Stairway to Heaven", {"Led Zeppelin"}, "8:02", 1971, Genre.ROCK, plays=1_200_000, popularity=93.5),
        make_song(
            "s2", "Nothing Else Matters", {"Metallica"}, "6:28", 1991, Genre.METAL, {Genre.ROCK}, 900_000, 89.0
        ),
        make_song("s3", "Billie Jean", {"Michael Jackson"}, "4:54", 1982, Genre.POP, {Genre.RNB}, 1_400_000, 94.0),
        make_song("s4", "Shape of You", {"Ed Sheeran"}, "3:53", 2017, Genre.POP, plays=2_000_000, popularity=92.0),
        make_song("s5", "Lose Yourself", {"Eminem"}, "5:26", 2002, Genre.HIP_HOP, plays=1_100_000, popularity=91.0),
        make_song(
            "s6", "Sicko Mode", {"Travis Scott", "Drake"}, "5:12", 2018, Genre.HIP_HOP, plays=950_000, popularity=88.0
        ),
        make_song("s7", "Strobe", {"deadmau5"}, "10:37", 2009, Genre.ELECTRONIC, plays=500_000, popularity=85.0),
        make_song("s8", "Take Five", {"Dave Brubeck"}, "5:24", 1959, Genre.JAZZ, plays=700_000, popularity=88.5),
        make_song(
            "s9", "Moonlight Sonata", {"Ludwig van Beethoven"}, "15:00", 1801, Genre.CLASSICAL, plays=850_000,
            popularity=92.3,
        ),
        make_song(
            "s10", "Blinding Lights", {"The Weeknd"}, "3:20", 2020, Genre.POP, {Genre.ELECTRONIC}, 2_200_000, 96.7
        ),
        make_song("s11", "Dance Monkey", {"Tones and I"}, "3:29", 2019, Genre.POP, plays=2_100_000, popularity=95.3),
        make_song("s12", "Heat Waves", {"Glass Animals"}, "3:58", 2020, Genre.INDIE, {Genre.POP}, 1_750_000, 93.6),
        make_song(
            "s13", "Under Pressure", {"Queen", "David Bowie"}, "4:08", 1981, Genre.ROCK, plays=1_300_000,
            popularity=90.0,
        ),
        make_song(
            "s14", "Collab Track", {"Drake", "The Weeknd", "Travis Scott"}, "4:00", 2021, Genre.HIP_HOP,
            {Genre.RNB}, 400_000, 80.0,
        ),
    ]


@pytest.fixture
def catalog() -> Catalog:
    """Create the reference catalog with plays, favorites and playlists."""
    songs = _build_songs()
    by_id = {song.id: song for song in songs}

    albums = [
        Album("A Night at the Opera", "Queen", 1975, Genre.ROCK, [by_id["s0"]]),
        Album("Thriller", "Michael Jackson", 1982, Genre.POP, [by_id["s3"]]),
        Album("Divide", "Ed Sheeran", 2017, Genre.POP, [by_id["s4"]]),
        Album("ASTROWORLD", "Travis Scott", 2018, Genre.HIP_HOP, [by_id["s6"]]),
        Album("Hits of 2020", "Various Artists", 2020, Genre.POP, [by_id["s10"], by_id["s12"]], is_compilation=True),
        Album("Empty Sessions", "Nobody", 2015, Genre.JAZZ, []),
    ]
    album_by_title = {album.title: album for album in albums}

    rock_fan = User("rockfan123", "rock@example.com", date(2018, 3, 15), {Genre.ROCK, Genre.METAL}, "US", True)
    rock_fan.add_favorite_album(album_by_title["A Night at the Opera"])
    for song_id, plays in (("s0", 150), ("s1", 120), ("s2", 85), ("s13", 75)):
        rock_fan.play_song(song_id, plays)

    pop_fan = User("popgirl", "pop@example.com", date(2019, 7, 22), {Genre.POP, Genre.ELECTRONIC}, "CA", True)
    pop_fan.add_favorite_album(album_by_title["Divide"])
    for song_id, plays in (("s3", 110), ("s4", 180), ("s10", 190), ("s11", 145)):
        pop_fan.play_song(song_id, plays)

    diverse = User(
        "musiclover", "diverse@example.com", date(2020, 1, 5), {Genre.JAZZ, Genre.CLASSICAL, Genre.POP}, "UK", False
    )
    for song_id, plays in (("s3", 95), ("s8", 85), ("s9", 110)):
        diverse.play_song(song_id, plays)

    rapper = User("rapgod", "hiphop@example.com", date(2017, 9, 18), {Genre.HIP_HOP, Genre.RNB}, "US", False)
    rapper.add_favorite_album(album_by_title["ASTROWORLD"])
    for song_id, plays in (("s5", 200), ("s6", 170), ("s3", 65)):
        rapper.play_song(song_id, plays)

    newbie = User("newbie2023", "new@example.com", date(2023, 1, 2), {Genre.INDIE}, "AU", False)

    users = [rock_fan, pop_fan, diverse, rapper, newbie]

    rock_classics = Playlist("Rock Classics", rock_fan.id, True, "The best rock songs")
    for song_id in ("s0", "s1", "s13"):
        rock_classics.add_song(by_id[song_id])
    metal = Playlist("Metal Favorites", rock_fan.id)
    metal.add_song(by_id["s2"])
    pop_hits = Playlist("Pop Hits", pop_fan.id, True)
    for song_id in ("s3", "s4", "s10", "s11"):
        pop_hits.add_song(by_id[song_id])
    jazz = Playlist("Jazz Night", diverse.id)
    jazz.add_song(by_id["s8"])

    return Catalog(songs=songs, albums=albums, users=users, playlists=[rock_classics, metal, pop_hits, jazz])

"""Unit tests for the Song entity."""

from datetime import timedelta

import pytest

from melodex.domain import Genre, Song
from melodex.helpers.exceptions import EntityValidationError


def _song(**overrides) -> Song:
    fields = {
        "title": "Take Five",
        "artists": {"Dave Brubeck"},
        "duration": timedelta(minutes=5, seconds=24),
        "release_year": 1959,
        "primary_genre": Genre.JAZZ,
    }
    fields.update(overrides)
    return Song(**fields)


class TestSongConstruction:
    """Tests for Song construction and validation."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """New songs start unplayed with zero popularity and a generated id."""
        song = _song()

        assert song.play_count == 0
        assert song.popularity == 0.0
        assert song.secondary_genres == frozenset()
        assert song.id

    @pytest.mark.unit
    def test_generated_ids_are_unique(self) -> None:
        """Each song without an explicit id gets its own."""
        assert _song().id != _song().id

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field", ["title", "artists", "duration", "release_year", "primary_genre", "play_count", "popularity"]
    )
    def test_required_fields(self, field: str) -> None:
        """A missing required field should be rejected by name."""
        with pytest.raises(EntityValidationError, match=field):
            _song(**{field: None})

    @pytest.mark.unit
    def test_blank_title_rejected(self) -> None:
        """A whitespace-only title should be rejected."""
        with pytest.raises(EntityValidationError):
            _song(title="   ")

    @pytest.mark.unit
    def test_single_artist_string_is_one_name(self) -> None:
        """A bare string names one artist rather than one artist per character."""
        assert _song(artists="Queen").artists == frozenset({"Queen"})

    @pytest.mark.unit
    def test_blank_artist_string_rejected(self) -> None:
        """A blank single-artist string is rejected like a blank title."""
        with pytest.raises(EntityValidationError, match="artists"):
            _song(artists="  ")

    @pytest.mark.unit
    def test_needs_at_least_one_artist(self) -> None:
        """An empty artist collection should be rejected."""
        with pytest.raises(EntityValidationError, match="at least one artist"):
            _song(artists=set())

    @pytest.mark.unit
    def test_negative_duration_rejected(self) -> None:
        """A negative duration should be rejected."""
        with pytest.raises(EntityValidationError, match="duration"):
            _song(duration=timedelta(seconds=-1))

    @pytest.mark.unit
    def test_negative_play_count_rejected(self) -> None:
        """A negative play count should be rejected."""
        with pytest.raises(EntityValidationError, match="play_count"):
            _song(play_count=-5)

    @pytest.mark.unit
    @pytest.mark.parametrize(("given", "stored"), [(-10.0, 0.0), (150.0, 100.0), (42.5, 42.5)])
    def test_popularity_is_clamped(self, given: float, stored: float) -> None:
        """Popularity outside 0-100 should be clamped into range."""
        assert _song(popularity=given).popularity == stored

    @pytest.mark.unit
    def test_artist_collection_is_copied(self) -> None:
        """Mutating the caller's set should not change the song."""
        artists = {"Queen"}
        song = _song(artists=artists)
        artists.add("David Bowie")

        assert song.artists == frozenset({"Queen"})


class TestSongBehavior:
    """Tests for Song mutators and derived values."""

    @pytest.mark.unit
    def test_all_genres_includes_primary(self) -> None:
        """All genres should combine the primary and secondary genres."""
        song = _song(primary_genre=Genre.METAL, secondary_genres={Genre.ROCK})

        assert song.all_genres == frozenset({Genre.METAL, Genre.ROCK})

    @pytest.mark.unit
    def test_increment_play_count(self) -> None:
        """Increments default to one and accumulate."""
        song = _song(play_count=10)

        song.increment_play_count()
        song.increment_play_count(5)

        assert song.play_count == 16

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_increment_ignored(self, count: int) -> None:
        """Zero or negative increments should leave the count unchanged."""
        song = _song(play_count=10)

        song.increment_play_count(count)

        assert song.play_count == 10

    @pytest.mark.unit
    def test_update_popularity_clamps(self) -> None:
        """Updated popularity should be clamped like the constructor value."""
        song = _song()

        song.update_popularity(250.0)

        assert song.popularity == 100.0

    @pytest.mark.unit
    def test_has_artist(self) -> None:
        """Artist lookup should match exact names only."""
        song = _song(artists={"Queen", "David Bowie"})

        assert song.has_artist("Queen")
        assert not song.has_artist("Freddie Mercury")

    @pytest.mark.unit
    def test_equality_is_by_id(self) -> None:
        """Two songs with the same id are the same song."""
        first = _song(song_id="same", title="One")
        second = _song(song_id="same", title="Two")

        assert first == second
        assert len({first, second}) == 1
        assert first != _song(title="One")

import pytest

from bacon_number.dataset import MovieRecord
from bacon_number.graph import Actor, GraphBuilder, Movie


@pytest.mark.unit
class TestGraphBuilder:
    """Tests for building the movie and actor indexes."""

    def test_counts(self, sample_graph, sample_lines):
        stats = sample_graph.stats

        assert stats.records == len(sample_lines)
        assert stats.skipped == 0
        assert stats.movies == 6
        assert stats.actors == 10
        assert stats.appearances == 15
        assert len(sample_graph.movies) == 6
        assert len(sample_graph.actors) == 10

    def test_indexes_sized_to_record_count(self, sample_graph, sample_lines):
        assert sample_graph.movies.size == len(sample_lines)
        assert sample_graph.actors.size == len(sample_lines)

    def test_movie_keeps_cast_order(self, sample_graph):
        movie = sample_graph.get_movie("Apollo 13 (1995)")

        assert movie == Movie(
            name="Apollo 13 (1995)",
            cast=["Hanks, Tom", "Bacon, Kevin", "Paxton, Bill", "Sinise, Gary"],
        )

    def test_filmography_in_record_order(self, sample_graph):
        actor = sample_graph.get_actor("Hanks, Tom")

        assert actor == Actor(name="Hanks, Tom", filmography=["Apollo 13 (1995)", "Forrest Gump (1994)"])

    def test_unknown_names(self, sample_graph):
        assert sample_graph.get_actor("Streep, Meryl") is None
        assert sample_graph.get_movie("Footloose (1984)") is None
        assert not sample_graph.has_actor("Streep, Meryl")

    def test_accepts_movie_records_and_token_lists(self):
        graph = GraphBuilder().build([
            MovieRecord(name="Diner (1982)", cast=["Bacon, Kevin", "Rourke, Mickey"]),
            ["Footloose (1984)", "Bacon, Kevin", "Singer, Lori"],
        ])

        assert graph.get_actor("Bacon, Kevin").filmography == ["Diner (1982)", "Footloose (1984)"]
        assert graph.stats.actors == 3

    def test_trailing_empty_tokens_trimmed(self):
        graph = GraphBuilder().build([["Diner (1982)", "Bacon, Kevin", "", " "]])

        assert graph.get_movie("Diner (1982)").cast == ["Bacon, Kevin"]
        assert graph.stats.actors == 1

    def test_blank_records_skipped(self):
        graph = GraphBuilder().build_from_lines(["", "Diner (1982)/Bacon, Kevin", "\n", "   "])

        assert graph.stats.records == 4
        assert graph.stats.skipped == 3
        assert graph.stats.movies == 1

    def test_empty_input(self):
        graph = GraphBuilder().build([])

        assert graph.movies.size == 1
        assert len(graph.actors) == 0

    def test_duplicate_cast_member_not_deduplicated(self):
        graph = GraphBuilder().build_from_lines(["Multiplicity (1996)/Keaton, Michael/Keaton, Michael"])

        assert graph.get_movie("Multiplicity (1996)").cast == ["Keaton, Michael", "Keaton, Michael"]
        assert graph.get_actor("Keaton, Michael").filmography == ["Multiplicity (1996)", "Multiplicity (1996)"]
        assert graph.stats.actors == 1
        assert graph.stats.appearances == 2

    def test_duplicate_movie_name_newest_wins(self):
        graph = GraphBuilder().build_from_lines(["Heat/Pacino, Al", "Heat/Kilmer, Val"])

        assert graph.stats.movies == 2
        assert graph.get_movie("Heat").cast == ["Kilmer, Val"]

    def test_raw_strings_rejected(self):
        with pytest.raises(TypeError):
            GraphBuilder().build(["Diner (1982)/Bacon, Kevin"])

    def test_legacy_keys_merge_colliding_actors(self):
        graph = GraphBuilder(strict_keys=False).build_from_lines(["M1/aA/X", "M2/BB/Y"])

        assert graph.stats.actors == 3
        assert graph.get_actor("BB").name == "aA"
        assert graph.get_actor("aA").filmography == ["M1", "M2"]

    def test_strict_keys_keep_colliding_actors_apart(self):
        graph = GraphBuilder(strict_keys=True).build_from_lines(["M1/aA/X", "M2/BB/Y"])

        assert graph.stats.actors == 4
        assert graph.get_actor("BB").filmography == ["M2"]

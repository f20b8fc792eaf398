"""Integration tests verifying the complete pipeline behavior."""

import io
import sys
from unittest.mock import patch

from loguru import logger
import pytest

from subgrampy.__main__ import main
from subgrampy.core import Config, build_candidate_pool, count_candidates, generate_subsets
from subgrampy.matching import finalize, match_all, match_subsets
from subgrampy.processing import run_pipeline, solve


@pytest.fixture
def cat_dictionary(tmp_path):
    """Word list file for the 'cat' scenario, in arbitrary case."""
    dict_file = tmp_path / "it.dic"
    dict_file.write_text("TAC\nat\ncat\nAct\n")
    return dict_file


class TestSolve:
    """End-to-end scenarios through the library entry point."""

    def test_finds_all_words_for_cat(self) -> None:
        """Letters 'cat' find every dictionary anagram and sub-anagram."""
        assert solve("cat", ["act", "at", "cat", "tac"], jobs=2) == ["act", "at", "cat", "tac"]

    def test_repeated_letters_and_single_letter_words(self) -> None:
        """Letters 'aab' find 'aa' once and never the single letter 'a'."""
        assert solve("aab", ["a", "aa", "ab", "ba"], jobs=2) == ["aa", "ab", "ba"]

    def test_repeated_runs_are_identical(self) -> None:
        """Two runs over the same inputs give the same ordered result."""
        dictionary = sorted(["art", "rat", "star", "rats", "tsar", "arts", "sat", "tar", "ta"])
        assert solve("stars", dictionary, jobs=2) == solve("stars", dictionary, jobs=2)

    def test_no_word_shorter_than_two(self) -> None:
        """Single letters are never found even when in the dictionary."""
        assert min(len(w) for w in solve("tea", ["a", "at", "e", "eat", "t", "tea"], jobs=1)) >= 2

    def test_validates_letters(self) -> None:
        """Invalid input is rejected before matching."""
        with pytest.raises(ValueError):
            solve("x", ["x"])

    def test_repeated_word_from_many_subsets_counted_once(self) -> None:
        """A word repeated fifty times on top of its own pool appears once."""
        candidates = ["sat"] * 50 + build_candidate_pool("stats")
        words, count = finalize(match_all(candidates, ["sat"], jobs=4, chunk_size=5))
        assert (words, count) == (["sat"], 1)


class TestLargeInput:
    """Runs over the largest accepted input."""

    @pytest.mark.slow
    def test_ten_distinct_letters_with_empty_dictionary(self) -> None:
        """Millions of candidates against an empty dictionary find nothing."""
        subsets = generate_subsets("abcdefghij")
        result = match_subsets(subsets, [], jobs=4, total=count_candidates(subsets))
        assert finalize(result) == ([], 0)


class TestRunPipeline:
    """Pipeline runs with a dictionary file."""

    def test_returns_sorted_words(self, cat_dictionary) -> None:
        """The pipeline finds the words of the 'cat' scenario."""
        config = Config(letters="cat", dictionary=str(cat_dictionary), jobs=1)
        result = run_pipeline(config, stream=io.StringIO())
        assert result.words == ["act", "at", "cat", "tac"]

    def test_reports_candidate_count(self, cat_dictionary) -> None:
        """The pipeline reports how many candidates it tested."""
        config = Config(letters="cat", dictionary=str(cat_dictionary), jobs=1)
        assert run_pipeline(config, stream=io.StringIO()).candidate_count == 12

    def test_prints_grid_without_short_words(self, cat_dictionary) -> None:
        """Two-letter words are counted but hidden from the grid."""
        config = Config(letters="cat", dictionary=str(cat_dictionary), jobs=2)
        stream = io.StringIO()
        run_pipeline(config, stream=stream)
        assert stream.getvalue().startswith("act\tcat\ttac\n\nTotal words found: 4\n")

    def test_prints_elapsed_time(self, cat_dictionary) -> None:
        """The run time is always printed after the total."""
        config = Config(letters="cat", dictionary=str(cat_dictionary), jobs=1)
        stream = io.StringIO()
        run_pipeline(config, stream=stream)
        assert stream.getvalue().splitlines()[-1].startswith("Time elapsed: ")

    def test_chunk_size_reaches_matcher(self, cat_dictionary) -> None:
        """The configured chunk size bounds the matcher tasks."""
        config = Config(letters="cat", dictionary=str(cat_dictionary), jobs=1, chunk_size=3)
        with patch(
            "subgrampy.processing.stages.matching.match_subsets", wraps=match_subsets
        ) as spy:
            run_pipeline(config, stream=io.StringIO())
        assert spy.call_args.kwargs["chunk_size"] == 3

    def test_prompts_when_letters_missing(self, cat_dictionary) -> None:
        """Without configured letters the user is asked until the input is valid."""
        answers = iter(["c4t", "CAT"])
        config = Config(dictionary=str(cat_dictionary), jobs=1)
        result = run_pipeline(config, input_func=lambda _: next(answers), stream=io.StringIO())
        assert result.letters == "cat"

    def test_missing_dictionary_aborts(self, tmp_path) -> None:
        """A missing dictionary file aborts the run."""
        config = Config(letters="cat", dictionary=str(tmp_path / "missing.dic"), jobs=1)
        with pytest.raises(FileNotFoundError):
            run_pipeline(config, stream=io.StringIO())


@pytest.fixture
def restore_logger():
    """Point loguru back at stderr after main() reconfigured it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.usefixtures("restore_logger")
class TestCommandLine:
    """Runs through the console entry point."""

    def test_main_prints_total(self, cat_dictionary, monkeypatch, capsys) -> None:
        """The CLI prints the word count to stdout."""
        monkeypatch.setattr(
            "sys.argv", ["subgrampy", "-l", "cat", "--dictionary", str(cat_dictionary), "-j", "1"]
        )
        main()
        assert "Total words found: 4" in capsys.readouterr().out

    def test_main_rejects_bad_letters(self, monkeypatch) -> None:
        """Invalid letters on the command line exit with a usage error."""
        monkeypatch.setattr("sys.argv", ["subgrampy", "-l", "ab"])
        with pytest.raises(SystemExit):
            main()

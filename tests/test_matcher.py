"""
Matcher: exact short-circuit, length and boundary pruning, distance bands,
corpus-order tie breaking. Uses small synthetic corpora.
"""

import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import passcore.matcher as matcher
from passcore.corpus import CorpusIndex
from passcore.matcher import MatchKind, boundary_candidates, classify, normalize


def test_normalize_trims_and_lowercases():
    assert normalize("  PassWord\t") == "password"
    assert normalize("password") == "password"
    assert normalize("") == ""
    assert normalize("   ") == ""
    assert normalize("ПАРОЛЬ") == "пароль"


def test_normalize_lowercases_titlecase_letters():
    # U+01C5 is neither upper nor lower, but lowers to U+01C6
    assert normalize("ǅabcdef") == "ǆabcdef"
    assert normalize("ǅabcdef") == "ǅabcdef".strip().lower()


def test_titlecase_input_matches_entry_exactly():
    index = CorpusIndex.from_lines(["ǅabcdef"])
    assert classify(normalize("ǅabcdef"), index).kind is MatchKind.EXACT


def test_normalize_is_idempotent():
    for p in ["  Abc ", "xyz", "MiXeD Case ", "\tTAB\n"]:
        once = normalize(p)
        assert normalize(once) == once


def test_exact_match():
    index = CorpusIndex.from_lines(["letmein", "password"])
    result = classify("password", index)
    assert result.kind is MatchKind.EXACT
    assert result.distance == 0


def test_exact_skips_distance_work(monkeypatch):
    index = CorpusIndex.from_lines(["passwore", "password"])

    def boom(*_args):
        raise AssertionError("distance computed before exact check")

    monkeypatch.setattr(matcher, "bounded_levenshtein", boom)
    assert classify("password", index).kind is MatchKind.EXACT


def test_close_match_within_two_edits():
    index = CorpusIndex.from_lines(["admin@123"])
    result = classify("admin@321", index)
    assert result.kind is MatchKind.CLOSE
    assert result.distance == 2
    assert result.entry.normalized == "admin@123"


def test_near_match_three_or_four_edits():
    index = CorpusIndex.from_lines(["dragonfly"])
    result = classify("dragxxxly", index)
    assert result.kind is MatchKind.NEAR
    assert result.distance == 3


def test_distant_when_nothing_nearby():
    index = CorpusIndex.from_lines(["password", "123456", "qwerty"])
    assert classify("zq!v8#lmk0", index).kind is MatchKind.DISTANT


def test_length_spread_prunes_candidates():
    # Four deletions away, and also outside the length window
    index = CorpusIndex.from_lines(["abcdefgh"])
    assert list(boundary_candidates("abcd", index)) == []
    assert classify("abcd", index).kind is MatchKind.DISTANT


def test_boundary_filter_skips_distance(monkeypatch):
    # Two substitutions away, but shares neither boundary character
    index = CorpusIndex.from_lines(["abcdefgh"])
    calls = []
    real = matcher.bounded_levenshtein

    def spy(a, b, cutoff):
        calls.append((a, b))
        return real(a, b, cutoff)

    monkeypatch.setattr(matcher, "bounded_levenshtein", spy)
    assert classify("xbcdefgy", index).kind is MatchKind.DISTANT
    assert calls == []


def test_boundary_filter_accepts_either_end():
    index = CorpusIndex.from_lines(["abcdefgh", "zzzzzzzh", "azzzzzzz", "qqqqqqqq"])
    got = [e.normalized for e in boundary_candidates("abcdefgx", index)]
    assert got == ["abcdefgh", "azzzzzzz"]
    got = [e.normalized for e in boundary_candidates("xbcdefgh", index)]
    assert got == ["abcdefgh", "zzzzzzzh"]


def test_empty_input_has_no_candidates():
    index = CorpusIndex.from_lines(["a", "ab", "abc"])
    assert classify("", index).kind is MatchKind.DISTANT


def test_empty_input_matches_empty_entry_exactly():
    index = CorpusIndex.from_lines(["abc", ""])
    assert classify("", index).kind is MatchKind.EXACT


def test_first_close_candidate_in_corpus_order_wins():
    # Both within two edits; the first line wins even though the second is closer
    index = CorpusIndex.from_lines(["sunshine12", "sunshine1"])
    result = classify("sunshine", index)
    assert result.kind is MatchKind.CLOSE
    assert result.entry.normalized == "sunshine12"
    assert result.distance == 2


def test_close_band_beats_earlier_near_candidate():
    index = CorpusIndex.from_lines(["monkeyxyz", "monkey12"])
    result = classify("monkey1", index)
    assert result.kind is MatchKind.CLOSE
    assert result.entry.normalized == "monkey12"


def test_first_near_candidate_kept():
    index = CorpusIndex.from_lines(["tigerxyz", "tigerabc"])
    result = classify("tiger", index)
    assert result.kind is MatchKind.NEAR
    assert result.entry.normalized == "tigerxyz"

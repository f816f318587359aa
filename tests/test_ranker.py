import types

import pytest

import config
from banglish_search import FuzzyMatcher, Ranker, Tokenizer
from banglish_search.models import CatalogRecord, ScoredCandidate


@pytest.fixture
def ranker():
    return Ranker(config)


def score(ranker, tokenizer, name, query):
    return ranker.score(name, query, tokenizer.expand_query(query))


def test_phrase_and_token_hit(ranker, tokenizer):
    assert score(ranker, tokenizer, "Bangla Sahitya", "bangla") == 70
    assert score(ranker, tokenizer, "Bangla Sahitya", "bangla sahitya") == 90


def test_unrelated_name_scores_zero(ranker, tokenizer):
    assert score(ranker, tokenizer, "English Grammar", "bangla") == 0


def test_token_counts_once(ranker, tokenizer):
    assert score(ranker, tokenizer, "Bangla Bangla", "bangla") == 70


def test_phrase_bonus_is_the_only_difference(ranker, tokenizer):
    in_order = score(ranker, tokenizer, "Bangla Sahitya", "bangla sahitya")
    reversed_ = score(ranker, tokenizer, "Sahitya Bangla", "bangla sahitya")
    assert in_order - reversed_ == config.PHRASE_BONUS


def test_phonetic_variant_hits(ranker, tokenizer):
    assert score(ranker, tokenizer, "কবিতা সমগ্র", "kobita") == 20
    assert score(ranker, tokenizer, "আমার বাঙ্লা বই", "bangla") == 20


def test_fuzzy_hit_for_misspelled_token(ranker, tokenizer):
    assert score(ranker, tokenizer, "Humayun Ahmed", "humayn") == 10
    assert score(ranker, tokenizer, "Humayun Ahmed", "humayun ahmd") == 30


def test_fuzzy_needs_long_query():
    cfg = types.SimpleNamespace(**{k: getattr(config, k) for k in dir(config) if k.isupper()})
    cfg.FUZZY_MIN_QUERY_LENGTH = 10
    ranker = Ranker(cfg)
    tokenizer = Tokenizer(cfg)
    assert ranker.score("Humayun Ahmed", "humayn", tokenizer.expand_query("humayn")) == 0


def test_rank_is_stable_and_truncates(ranker):
    def cand(i, s):
        return ScoredCandidate(record=CatalogRecord(id=i, name=str(i)), name=str(i), score=s)

    ranked = ranker.rank([cand(1, 20), cand(2, 70), cand(3, 20), cand(4, 20)], topk=3)
    assert [c.record.id for c in ranked] == [2, 1, 3]


class TestFuzzyMatcher:
    def setup_method(self):
        self.fuzzy = FuzzyMatcher(config)

    def test_close_terms(self):
        assert self.fuzzy.is_close("humayn", "humayun")
        assert self.fuzzy.is_close("bangla", "bangle")

    def test_distance_threshold(self):
        assert not self.fuzzy.is_close("bangla", "bongle")

    def test_short_terms_never_match(self):
        assert not self.fuzzy.is_close("abc", "abd")
        assert not self.fuzzy.is_close("abcd", "abc")

    def test_find_match_scans_words(self):
        assert self.fuzzy.find_match(["ahmd", "আহ্ম্দ"], ["humayun", "ahmed"]) == ("ahmd", "ahmed")
        assert self.fuzzy.find_match(["xyzw"], ["humayun", "ahmed"]) is None

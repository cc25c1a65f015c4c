from universe.search import MAX_SUGGESTIONS, search_faq, suggested_questions


def test_keyword_match_ranks_first():
    hits = search_faq("charging")
    assert hits.iloc[0]["question"].startswith("The robot is docked but not charging")
    assert hits.iloc[0]["category"] == "power"


def test_no_match_and_blank_query():
    assert search_faq("zzzz-nothing").empty
    assert search_faq("   ").empty


def test_suggestions_are_capped_and_exclude_best_answer():
    best = search_faq("charging").iloc[0]["question"]
    out = suggested_questions("charging")
    assert 0 < len(out) <= MAX_SUGGESTIONS
    assert best not in out
    assert len(out) == len(set(out))


def test_suggestions_without_hits_fall_back_to_first_questions():
    assert len(suggested_questions("zzzz-nothing")) == MAX_SUGGESTIONS

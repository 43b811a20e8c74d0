import pytest

from contactform.core.spam_filter import (
    contains_spam_keyword, contains_spam_phrase, has_excessive_urls,
    has_repeated_characters, is_suspected_spam, SPAM_CHECKS
)


@pytest.mark.parametrize("message", [
    "Free bitcoin for everyone",
    "CRYPTO is the future",
    "A great Investment opportunity",
    "Need a loan?",
    "Best casino in town",
    "online gambling",
])
def test_keyword_flags_whole_words(message, settings):
    assert contains_spam_keyword(message, settings)


@pytest.mark.parametrize("message", [
    "Our loans department",
    "cryptography lecture",
    "bitcoins",
    "Just a normal question about your services.",
])
def test_keyword_ignores_partial_words(message, settings):
    assert not contains_spam_keyword(message, settings)


@pytest.mark.parametrize("message", [
    "Click here to win",
    "please VISIT NOW",
    "Act now!",
    "only for a limited time",
])
def test_phrase_flags_case_insensitive(message, settings):
    assert contains_spam_phrase(message, settings)


def test_phrase_needs_whole_phrase(settings):
    assert not contains_spam_phrase("click the button here", settings)
    assert not contains_spam_phrase("the timeline is limited", settings)


def test_three_urls_flagged(settings):
    message = "See http://a.example.com and https://b.example.com and http://c.example.com"
    assert has_excessive_urls(message, settings)


def test_adjacent_urls_flagged(settings):
    assert has_excessive_urls("http://a.dehttp://b.dehttps://c.de", settings)


def test_two_urls_not_flagged(settings):
    assert not has_excessive_urls("My site: https://example.com, old one: http://example.org", settings)


def test_bare_scheme_not_counted(settings):
    assert not has_excessive_urls("http:// http:// http://", settings)


def test_repeated_characters_threshold(settings):
    assert has_repeated_characters("a" * 12, settings)
    assert has_repeated_characters("wow" + "!" * 11, settings)
    assert not has_repeated_characters("a" * 10, settings)


def test_visit_now_bitcoin_any_case(settings):
    for message in ["Visit now for free bitcoin!!!", "VISIT NOW FOR FREE BITCOIN!!!", "visit now for free bitcoin!!!"]:
        assert is_suspected_spam(message, settings)


def test_clean_message(settings):
    assert not is_suspected_spam("Hello, I'd like to connect.", settings)


def test_checks_are_independent(settings):
    assert len(SPAM_CHECKS) == 4
    message = "x" * 15
    assert [check(message, settings) for check in SPAM_CHECKS] == [False, False, False, True]


def test_thresholds_follow_settings(settings):
    custom = settings.model_copy(update={"max_url_count": 2, "repeated_char_threshold": 5, "spam_keywords": ["seo"]})
    assert has_excessive_urls("http://a.de http://b.de", custom)
    assert has_repeated_characters("aaaaa", custom)
    assert contains_spam_keyword("Cheap SEO services", custom)
    assert not contains_spam_keyword("free bitcoin", custom)


def test_empty_term_lists_never_match(settings):
    custom = settings.model_copy(update={"spam_keywords": [], "spam_phrases": []})
    assert not contains_spam_keyword("bitcoin", custom)
    assert not contains_spam_phrase("click here", custom)


@pytest.mark.parametrize("message", ["cryptoä", "äbitcoinö", "Günstige Casinoüberraschung"])
def test_word_boundaries_are_ascii(message, settings):
    assert is_suspected_spam(message, settings)


def test_phrase_next_to_umlaut(settings):
    assert contains_spam_phrase("Jetzt click hereü", settings)

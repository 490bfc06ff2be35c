from __future__ import annotations

from newsagency import EmailSubscriber, MobileAppSubscriber, News, Priority


def test_email_default_construction():
    sub = EmailSubscriber("Eve", "eve@example.com")
    assert sub.interests == frozenset({"general"})
    assert sub.min_priority is Priority.NORMAL
    assert sub.subscriber_id == "email:eve@example.com"
    assert str(sub) == "EmailSubscriber[Eve]"


def test_email_sports_subscriber_filters_by_category():
    carol = EmailSubscriber("Carol", "carol@work.com", {"sports"}, Priority.NORMAL)
    assert not carol.accepts(News("t", "c", "technology", Priority.URGENT))
    assert carol.accepts(News("t", "c", "sports", Priority.NORMAL))


def test_email_breaking_passes_normal_threshold():
    alice = EmailSubscriber("Alice", "alice@example.com", {"politics", "technology"}, Priority.NORMAL)
    assert alice.accepts(News("t", "c", "technology", Priority.BREAKING))


def test_email_threshold_rejects_less_severe_items():
    sub = EmailSubscriber("Ed", "ed@example.com", {"general"}, Priority.URGENT)
    assert sub.accepts(News("t", "c", "world", Priority.BREAKING))
    assert sub.accepts(News("t", "c", "world", Priority.URGENT))
    assert not sub.accepts(News("t", "c", "world", Priority.NORMAL))


def test_interests_are_matched_case_insensitively():
    sub = EmailSubscriber("Ed", "ed@example.com", {"Technology"})
    assert sub.accepts(News("t", "c", "TECHNOLOGY"))


def test_email_render(capsys):
    alice = EmailSubscriber("Alice Johnson", "alice@example.com", {"technology"})
    news = News("Chips", "c", "technology", Priority.URGENT)
    alice.update(news)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "EMAIL To: Alice Johnson <alice@example.com>"
    assert out[1] == "      Subject: URGENT: Chips"
    assert out[2] == f"      {news}"
    assert out[3] == ""


def test_update_is_silent_when_filter_rejects(capsys):
    carol = EmailSubscriber("Carol", "carol@work.com", {"sports"})
    carol.update(News("t", "c", "technology"))
    assert capsys.readouterr().out == ""


def test_mobile_filters_by_interest_regardless_of_priority():
    dave = MobileAppSubscriber("user_456", "def456uvw123", {"technology"})
    assert not dave.accepts(News("t", "c", "sports", Priority.BREAKING))
    assert dave.accepts(News("t", "c", "technology", Priority.NORMAL))
    assert dave.accepts(News("t", "c", "technology", Priority.BREAKING))


def test_mobile_empty_interests_default_to_general():
    sub = MobileAppSubscriber("u1", "token", set())
    assert sub.interests == frozenset({"general"})
    assert sub.accepts(News("t", "c", "anything"))


def test_mobile_render_truncates_token(capsys):
    bob = MobileAppSubscriber("user_789", "abc123xyz789")
    news = News("t", "c")
    bob.update(news)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "PUSH User user_789 (Device: abc123xy...)"
    assert out[1] == f"     {news}"


def test_mobile_short_token_shown_whole(capsys):
    MobileAppSubscriber("u2", "abc").update(News("t", "c"))
    assert "(Device: abc...)" in capsys.readouterr().out


def test_identity_is_derived_from_fields():
    assert MobileAppSubscriber("user_789", "x").subscriber_id == "mobile:user_789"
    assert MobileAppSubscriber("user_789", "other-device").subscriber_id == "mobile:user_789"


def test_email_empty_categories_default_to_general():
    sub = EmailSubscriber("Eve", "eve@example.com", set(), Priority.NORMAL)
    assert sub.interests == frozenset({"general"})
    assert sub.accepts(News("t", "c", "weather"))

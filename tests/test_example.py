from __future__ import annotations

import example
from newsagency import NewsAgency


def _sections(out: str) -> dict:
    sections = {}
    current = None
    for line in out.splitlines():
        if line in ("BREAKING NEWS", "SPORTS NEWS", "TECHNOLOGY NEWS"):
            current = line
            sections[current] = []
        elif current is not None:
            sections[current].append(line)
    return {k: "\n".join(v) for k, v in sections.items()}


def test_scenario_notifies_expected_subscribers(capsys):
    count = example.run(NewsAgency("GNN"), example.build_subscribers())
    out = capsys.readouterr().out
    sections = _sections(out)

    breaking = sections["BREAKING NEWS"]
    assert "PUSH User user_789" in breaking
    assert "Alice Johnson" not in breaking
    assert "Carol Davis" not in breaking
    assert "user_456" not in breaking

    sports = sections["SPORTS NEWS"]
    assert "PUSH User user_789" in sports
    assert "EMAIL To: Carol Davis <carol@work.com>" in sports
    assert "Alice Johnson" not in sports
    assert "user_456" not in sports

    tech = sections["TECHNOLOGY NEWS"]
    assert "EMAIL To: Alice Johnson <alice@example.com>" in tech
    assert "PUSH User user_456 (Device: def456uv...)" in tech
    assert "user_789" not in tech
    assert "Carol Davis" not in tech

    assert "[UNSUBSCRIBED] MobileAppSubscriber[user_789] left GNN" in out
    assert count == 3
    assert out.rstrip().endswith("Active subscribers: 3")


def test_main_uses_configured_agency_name(monkeypatch, capsys):
    monkeypatch.setenv("NEWS_AGENCY_NAME", "Test Wire")
    example.main()
    assert "[SUBSCRIBED] EmailSubscriber[Alice Johnson] to Test Wire" in capsys.readouterr().out

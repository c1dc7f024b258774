"""Tests for quiz grading, share links and table of contents."""

from urllib.parse import parse_qs, urlparse

import pytest

from src.common.models import QuizQuestion
from src.content.features import build_share_links, extract_table_of_contents, grade_quiz


# --- Quiz ---


@pytest.fixture
def quiz() -> list[QuizQuestion]:
    return [
        QuizQuestion(q="What does a call give?", options=["Right to buy", "Right to sell"], answer=0),
        QuizQuestion(q="Theta measures?", options=["Price", "Time decay", "Volatility"], answer=1),
        QuizQuestion(q="Nifty has how many stocks?", options=["30", "50"], answer=1),
    ]


class TestGradeQuiz:
    def test_all_correct(self, quiz):
        result = grade_quiz(quiz, {0: 0, 1: 1, 2: 1})
        assert result.score == 3
        assert result.percentage == 100
        assert result.correct == [True, True, True]

    def test_partial_and_unanswered(self, quiz):
        result = grade_quiz(quiz, {0: 1, 1: 1})
        assert result.score == 1
        assert result.answered == 2
        assert result.correct == [False, True, False]
        assert result.percentage == 33

    def test_share_text(self, quiz):
        result = grade_quiz(quiz, {0: 0})
        assert result.share_text() == "I scored 1/3 on the stock market quiz!"

    def test_no_answers(self, quiz):
        with pytest.raises(ValueError):
            grade_quiz(quiz, {})

    def test_unknown_question(self, quiz):
        with pytest.raises(ValueError, match="unknown"):
            grade_quiz(quiz, {5: 0})


# --- Share links ---


class TestShareLinks:
    def test_twitter(self):
        links = build_share_links(
            "Options & Greeks", "https://niveshmarg.in/posts/greeks/", ["option-greeks", "nifty"]
        )
        query = parse_qs(urlparse(links.twitter).query)
        assert query["text"] == ["Options & Greeks"]
        assert query["url"] == ["https://niveshmarg.in/posts/greeks/"]
        assert query["hashtags"] == ["optiongreeks,nifty"]

    def test_encoding_matches_encode_uri_component(self):
        links = build_share_links("It's (really) simple!", "https://x.in/a b")
        assert "It's%20(really)%20simple!" in links.reddit
        assert "https%3A%2F%2Fx.in%2Fa%20b" in links.facebook

    def test_to_dict(self):
        links = build_share_links("T", "https://x.in/")
        assert set(links.to_dict()) == {"twitter", "facebook", "linkedin", "reddit"}


# --- Table of contents ---


class TestTableOfContents:
    BODY = (
        "Intro paragraph.\n\n"
        "## What is an option?\n\n"
        "Text.\n\n"
        "## Calls and puts {#calls-puts}\n\n"
        "### Premium\n\n"
        "#### Too deep\n\n"
        "## Risk management\n"
    )

    def test_entries(self):
        toc = extract_table_of_contents(self.BODY)
        assert [(e.text, e.level) for e in toc] == [
            ("What is an option?", 2),
            ("Calls and puts", 2),
            ("Premium", 3),
            ("Risk management", 2),
        ]

    def test_ids(self):
        toc = extract_table_of_contents(self.BODY)
        assert toc[0].id == "heading-0"
        assert toc[1].id == "calls-puts"
        assert toc[3].id == "heading-3"

    def test_too_few_headings(self):
        assert extract_table_of_contents("## One\n\n## Two\n") == []
        assert len(extract_table_of_contents("## One\n\n## Two\n", min_headings=2)) == 2

"""Tests for the prompt composer."""

import pytest

from src.config.constants import Phase
from src.services.verdict.composer import (
    ImagePart,
    TextPart,
    compose_analysis,
    compose_verdict,
)
from src.services.verdict.errors import InvalidInput
from src.services.verdict.models import ImageAttachment, IntakeRequest, Question, VerdictRequest

from tests.sample_payloads import DATING_QUESTIONS, TRADES_QUESTIONS

PNG = ImageAttachment(data=b"\x89PNG fake", media_type="image/png")


def _verdict_request(questions, answers, **extra):
    return VerdictRequest(
        subject="fix a leaky faucet",
        questions=[Question(**q) for q in questions],
        answers=answers,
        **extra,
    )


# ==========================================
#  ANALYZE PHASE
# ==========================================


def test_analysis_contains_subject(trades):
    payload = compose_analysis(trades, IntakeRequest(subject="fix a leaky faucet"))
    assert payload.phase is Phase.ANALYZE
    assert payload.system == trades.system_prompt
    assert "fix a leaky faucet" in payload.text
    assert payload.parts == (TextPart(payload.text),)


def test_analysis_is_pure(trades):
    intake = IntakeRequest(
        subject="replace a light switch",
        experience="beginner",
        motivations=("save_money", "learn"),
        images=(PNG,),
    )
    assert compose_analysis(trades, intake) == compose_analysis(trades, intake)


def test_analysis_maps_known_enum_keys(trades):
    intake = IntakeRequest(subject="x", experience="handy", motivations=("save_money",))
    text = compose_analysis(trades, intake).text
    assert "is comfortable with most weekend projects" in text
    assert "wants to save money" in text


def test_analysis_passes_unknown_enum_keys_verbatim(trades):
    intake = IntakeRequest(subject="x", experience="wizard", motivations=("boredom",))
    text = compose_analysis(trades, intake).text
    assert "wizard" in text
    assert "boredom" in text


def test_analysis_without_profile_omits_section(trades):
    text = compose_analysis(trades, IntakeRequest(subject="x")).text
    assert "About them" not in text


def test_analysis_images_precede_text(dating):
    gif = ImageAttachment(data=b"GIF89a", media_type="image/gif")
    payload = compose_analysis(dating, IntakeRequest(subject="he texts at 2am", images=(PNG, gif)))
    assert payload.parts[:2] == (
        ImagePart(data=PNG.data, media_type="image/png"),
        ImagePart(data=b"GIF89a", media_type="image/gif"),
    )
    assert isinstance(payload.parts[-1], TextPart)
    assert payload.image_count == 2
    assert "2 photos" in payload.text


def test_analysis_images_only(trades):
    payload = compose_analysis(trades, IntakeRequest(subject="", images=(PNG,)))
    assert payload.image_count == 1
    assert "see the attached photos" in payload.text


@pytest.mark.parametrize("subject", ["", "   ", "\n"])
def test_analysis_rejects_empty_input(trades, subject):
    with pytest.raises(InvalidInput):
        compose_analysis(trades, IntakeRequest(subject=subject))


def test_analysis_rejects_too_many_images(trades):
    intake = IntakeRequest(subject="x", images=(PNG,) * (trades.max_images + 1))
    with pytest.raises(InvalidInput):
        compose_analysis(trades, intake)


def test_dating_allows_more_images_than_trades(dating, trades):
    assert dating.max_images > trades.max_images
    intake = IntakeRequest(subject="x", images=(PNG,) * dating.max_images)
    assert compose_analysis(dating, intake).image_count == dating.max_images


# ==========================================
#  VERDICT PHASE
# ==========================================


def test_verdict_renders_answers(trades):
    request = _verdict_request(TRADES_QUESTIONS, [True, False, "yes", "No", "Y"])
    payload = compose_verdict(trades, request)
    assert payload.phase is Phase.VERDICT
    assert f"Q: {TRADES_QUESTIONS[0]['q']}\nA: Yes" in payload.text
    assert f"Q: {TRADES_QUESTIONS[1]['q']}\nA: No" in payload.text
    assert payload.text.count("A: Yes") == 3
    assert '"DIY" or "PRO"' in payload.text


def test_verdict_includes_prior_analysis(trades):
    request = _verdict_request(
        TRADES_QUESTIONS,
        [True] * 5,
        situation_type="PLUMBING",
        observations=["old compression valve"],
        first_take="Classic.",
    )
    text = compose_verdict(trades, request).text
    assert "Category: PLUMBING" in text
    assert "- old compression valve" in text
    assert "Your first take: Classic." in text


def test_verdict_rejects_mismatched_lengths(trades):
    request = _verdict_request(TRADES_QUESTIONS, [True, True, False, True])
    with pytest.raises(InvalidInput) as exc_info:
        compose_verdict(trades, request)
    assert "4 answers for 5 questions" in exc_info.value.message


@pytest.mark.parametrize("questions,answers", [([], []), (TRADES_QUESTIONS, [])])
def test_verdict_rejects_missing_questions_or_answers(trades, questions, answers):
    with pytest.raises(InvalidInput):
        compose_verdict(trades, _verdict_request(questions, answers))


def test_verdict_rejects_empty_subject(trades):
    request = VerdictRequest(
        subject="  ",
        questions=[Question(**q) for q in TRADES_QUESTIONS],
        answers=[True] * 5,
    )
    with pytest.raises(InvalidInput):
        compose_verdict(trades, request)


def test_verdict_rejects_non_binary_answer(trades):
    request = _verdict_request(TRADES_QUESTIONS, [True, True, "maybe", True, True])
    with pytest.raises(InvalidInput):
        compose_verdict(trades, request)


def test_choice_verdict_accepts_option_strings(dating):
    request = _verdict_request(DATING_QUESTIONS, ["Never", "Rarely", "Sometimes", "Always", "Never"])
    text = compose_verdict(dating, request).text
    assert "A: Sometimes" in text
    assert '"MIXED_SIGNALS"' in text


@pytest.mark.parametrize("bad", ["Occasionally", True])
def test_choice_verdict_rejects_unknown_option(dating, bad):
    request = _verdict_request(DATING_QUESTIONS, ["Never", bad, "Never", "Never", "Never"])
    with pytest.raises(InvalidInput):
        compose_verdict(dating, request)


def test_verdict_is_pure(dating):
    request = _verdict_request(DATING_QUESTIONS, ["Always"] * 5)
    assert compose_verdict(dating, request) == compose_verdict(dating, request)

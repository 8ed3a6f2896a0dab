"""Letter record building and persistence, below the HTTP layer."""

import logging

import pytest

from heartkemy.core.errors import InvalidCoordinate, NotFoundError, ValidationError
from heartkemy.core.geo import Coordinate
from heartkemy.models.emotion import LetterEmotion
from heartkemy.models.letter import Letter
from heartkemy.services import letter_service
from heartkemy.services.letter_service import build_letter_record, coordinate_or_default, send_letter

CITY_HALL = Coordinate(37.5665, 126.9780)
NORTH = Coordinate(37.5765, 126.9780)


def _build(**overrides):
    kwargs = dict(
        from_user_id="user-demo-1",
        to_user_id="user-demo-2",
        origin=CITY_HALL,
        destination=NORTH,
        subject="안부",
        content="가" * 20,
        emotion_ids=["emotion-warm-1"],
    )
    kwargs.update(overrides)
    return build_letter_record(**kwargs)


def test_build_derives_distance_and_duration():
    record = _build()
    assert record.distance_km == pytest.approx(1.112, abs=0.001)
    assert record.flight_duration_sec == (record.distance_km / 20) * 3600
    assert record.flight_duration_display == "약 4분"


def test_content_of_19_characters_is_rejected_and_20_accepted():
    with pytest.raises(ValidationError):
        _build(content="가" * 19)
    assert _build(content="가" * 20).content == "가" * 20


def test_blank_subject_is_rejected():
    with pytest.raises(ValidationError):
        _build(subject="   ")


def test_missing_recipient_is_rejected():
    with pytest.raises(ValidationError):
        _build(to_user_id="")


def test_more_than_three_emotions_is_rejected():
    with pytest.raises(ValidationError):
        _build(emotion_ids=["a", "b", "c", "d"])


def test_duplicate_emotions_collapse_before_the_cap():
    record = _build(emotion_ids=["a", "b", "a", "c", "b"])
    assert record.emotion_ids == ["a", "b", "c"]


def test_self_letter_at_same_place_has_zero_flight():
    record = _build(to_user_id="user-demo-1", destination=CITY_HALL)
    assert record.distance_km == 0
    assert record.flight_duration_sec == 0
    assert record.flight_duration_display == "약 0분"


def test_client_reported_distance_is_ignored_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="heartkemy.services.letter_service"):
        record = _build(reported_distance_km=9999.0, reported_duration_sec=1.0)
    assert record.distance_km == pytest.approx(1.112, abs=0.001)
    assert "Client-reported distance" in caplog.text
    assert "Client-reported flight duration" in caplog.text


def test_matching_client_values_are_not_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="heartkemy.services.letter_service"):
        _build(reported_distance_km=1.112, reported_duration_sec=200.15)
    assert caplog.text == ""


def test_coordinate_or_default_falls_back_to_city_hall():
    assert coordinate_or_default(None, None) == CITY_HALL
    assert coordinate_or_default(35.0, 129.0) == Coordinate(35.0, 129.0)
    with pytest.raises(ValidationError):
        coordinate_or_default(35.0, None)
    with pytest.raises(InvalidCoordinate):
        coordinate_or_default(95.0, 0.0)


def test_send_letter_persists_computed_values_and_tags(seeded_db):
    record = _build(emotion_ids=["emotion-warm-1", "emotion-comfort-1"])
    letter = send_letter(seeded_db, record)

    stored = seeded_db.query(Letter).filter(Letter.id == letter.id).one()
    assert stored.distance_km == record.distance_km
    assert stored.flight_duration_sec == record.flight_duration_sec
    assert (stored.to_latitude, stored.to_longitude) == (NORTH.lat, NORTH.lng)
    assert stored.is_read is False
    assert stored.is_replied is False
    assert sorted(e.id for e in stored.emotions) == ["emotion-comfort-1", "emotion-warm-1"]


def test_send_letter_keeps_letter_when_tagging_fails(seeded_db, caplog):
    record = _build(emotion_ids=["emotion-warm-1", "no-such-emotion"])
    with caplog.at_level(logging.ERROR, logger="heartkemy.services.emotion_links"):
        letter = send_letter(seeded_db, record)

    assert seeded_db.query(Letter).filter(Letter.id == letter.id).count() == 1
    assert seeded_db.query(LetterEmotion).filter(LetterEmotion.letter_id == letter.id).count() == 0
    assert "Emotion link insert failed" in caplog.text


def test_send_letter_to_unknown_user_stores_nothing(seeded_db):
    with pytest.raises(NotFoundError):
        send_letter(seeded_db, _build(to_user_id="ghost"))
    assert seeded_db.query(Letter).count() == 0


def test_open_letter_marks_read_once(seeded_db):
    letter = send_letter(seeded_db, _build())

    # The sender opening it does not count as reading
    opened = letter_service.open_letter(seeded_db, letter.id, "user-demo-1")
    assert opened.is_read is False

    opened = letter_service.open_letter(seeded_db, letter.id, "user-demo-2")
    assert opened.is_read is True
    first_read_at = opened.read_at
    assert first_read_at is not None

    again = letter_service.open_letter(seeded_db, letter.id, "user-demo-2")
    assert again.read_at == first_read_at


def test_open_letter_hides_it_from_third_parties(seeded_db):
    letter = send_letter(seeded_db, _build())
    with pytest.raises(NotFoundError):
        letter_service.open_letter(seeded_db, letter.id, "user-demo-3")

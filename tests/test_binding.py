from datetime import date
from decimal import Decimal

from mvcmovie.binding import FormView, bind_form, parse_id, submitted_id, validate_form
from mvcmovie.models import ACTOR_BIND_FIELDS, MOVIE_BIND_FIELDS, ActorForm, MovieForm


def test_bind_form_keeps_only_allowed_fields():
    submission = {"title": "Ghostbusters", "genre": "Comedy", "is_admin": "true", "price": "9.99"}
    assert bind_form(submission, MOVIE_BIND_FIELDS) == {
        "title": "Ghostbusters", "genre": "Comedy", "price": "9.99"
    }


def test_bind_form_drops_blank_values():
    bound = bind_form({"title": "Ghostbusters", "rating": "", "release_date": ""}, MOVIE_BIND_FIELDS)
    assert bound == {"title": "Ghostbusters"}


def test_validate_form_converts_types():
    form, errors = validate_form(MovieForm, {
        "title": "Ghostbusters", "genre": "Comedy", "price": "9.99", "release_date": "1984-06-08"
    })
    assert errors == []
    assert form.price == Decimal("9.99")
    assert form.release_date == date(1984, 6, 8)
    assert form.rating is None


def test_validate_form_reports_each_bad_field():
    form, errors = validate_form(MovieForm, {"title": "Ghostbusters", "price": "cheap"})
    assert form is None
    assert {e.field for e in errors} == {"genre", "price"}


def test_validate_actor_form():
    form, errors = validate_form(ActorForm, bind_form({"age": "abc", "first_name": "Bill"}, ACTOR_BIND_FIELDS))
    assert form is None
    assert {e.field for e in errors} == {"age", "last_name"}


def test_submitted_id():
    assert submitted_id({"id": "7"}) == 7
    assert submitted_id({"id": "seven"}) is None
    assert submitted_id({}) is None


def test_empty_form_lists_every_allowed_field():
    view = FormView.empty(ACTOR_BIND_FIELDS)
    assert view.form == {name: None for name in ACTOR_BIND_FIELDS}
    assert view.errors == []


def test_parse_id_rejects_values_outside_the_key_range():
    assert parse_id("9223372036854775807") == 2 ** 63 - 1
    assert parse_id("9223372036854775808") is None
    assert parse_id("-9223372036854775809") is None
    assert parse_id("abc") is None
    assert parse_id(None) is None

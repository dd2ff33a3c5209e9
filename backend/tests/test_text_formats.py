from sqlmodel import Session, select

from cms.filters import FALLBACK_FORMAT, install_default_formats
from cms.models.filter_format import FilterFormat


def test_default_format_is_lowest_weight(text_formats):
    assert text_formats.default_format_id() == "basic_html"


def test_lighter_format_becomes_default(text_formats, session: Session):
    session.add(FilterFormat(format="full_html", name="Full HTML", weight=-5))
    session.commit()

    assert text_formats.default_format_id() == "full_html"


def test_weight_ties_are_broken_by_machine_name(text_formats, session: Session):
    session.add(FilterFormat(format="aaa_html", name="AAA", weight=0))
    session.commit()

    assert text_formats.default_format_id() == "aaa_html"


def test_disabled_formats_are_skipped(text_formats, session: Session):
    basic = session.get(FilterFormat, "basic_html")
    basic.status = False
    session.add(basic)
    session.commit()

    assert text_formats.default_format_id() == "plain_text"
    assert [f.format for f in text_formats.list_formats()] == ["plain_text"]
    assert len(text_formats.list_formats(include_disabled=True)) == 2


def test_fallback_when_no_formats_exist(text_formats, session: Session):
    for text_format in session.exec(select(FilterFormat)).all():
        session.delete(text_format)
    session.commit()

    assert text_formats.default_format_id() == FALLBACK_FORMAT


def test_install_default_formats_is_idempotent(session: Session):
    install_default_formats(session)
    install_default_formats(session)

    formats = session.exec(select(FilterFormat)).all()
    assert sorted(f.format for f in formats) == ["basic_html", "plain_text"]

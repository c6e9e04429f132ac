import json
import math
from datetime import date

import pytest

from app.core.errors import CourseNotFoundError, GradingPeriodNotFoundError
from app.db.init_db import score_text, seed_db
from app.models.classwork import ClassworkRecord
from app.repositories.json_store import JsonClassworkStore, JsonCourseLookup, JsonGradingPeriods
from app.repositories.sql_store import SqlClassworkStore, SqlCourseLookup, SqlGradingPeriods
from app.services.classwork import ClassworkService
from app.services.dates import parse_date, period_interval, to_epoch_ms
from tests.helpers import ms

DAY_MS = 24 * 60 * 60 * 1000


def test_iso_and_us_dates_agree():
    assert to_epoch_ms("2018-09-04") == ms(2018, 9, 4)
    assert to_epoch_ms("09/04/2018") == ms(2018, 9, 4)
    assert to_epoch_ms(date(2018, 9, 4)) == ms(2018, 9, 4)


def test_timezone_offsets_are_respected():
    assert to_epoch_ms("2018-09-04T02:00:00+02:00") == ms(2018, 9, 4)


def test_unparseable_dates_are_nan():
    assert math.isnan(to_epoch_ms("not-a-date"))
    assert math.isnan(to_epoch_ms(""))
    assert parse_date(None) is None


def test_period_interval_covers_whole_days():
    interval = period_interval("2018-08-27", "2018-10-26")
    assert interval.start == ms(2018, 8, 27)
    assert interval.end == ms(2018, 10, 27) - 1
    assert interval.end - interval.start == 61 * DAY_MS - 1


def test_json_course_lookup():
    lookup = JsonCourseLookup({"ENG101": {"name": "English I", "category": {"Test": 0.7}}})
    course = lookup.get_course("ENG101")
    assert course.name == "English I"
    assert course.category == {"Test": 0.7}

    with pytest.raises(CourseNotFoundError):
        lookup.get_course("HIS100")


def test_json_periods_without_key_search_every_set():
    periods = JsonGradingPeriods(
        {
            "2017-2018": [{"index": "1", "start": "2017-08-28", "end": "2017-10-27"}],
            "2018-2019": [{"index": "2", "start": "2018-10-29", "end": "2019-01-18"}],
        }
    )
    assert periods.get_grading_period_time("2", None).start == ms(2018, 10, 29)
    assert periods.get_grading_period_time("1", None).start == ms(2017, 8, 28)

    with pytest.raises(GradingPeriodNotFoundError):
        periods.get_grading_period_time("1", "2018-2019")


def test_sql_classwork_store_keeps_export_order(db):
    record = SqlClassworkStore(db).get_student("111111")
    rows = record["classwork"]

    assert [r["assignment"] for r in rows][:3] == ["Essay 1", "Unit Test", "Worksheet"]
    # scores are kept as text
    assert rows[1]["score"] == "65"
    assert rows[2]["score"] == ""
    assert rows[3]["score"] == "M"


def test_sql_classwork_store_unknown_student(db):
    assert SqlClassworkStore(db).get_student("999999") is None


def test_sql_course_lookup(db):
    course = SqlCourseLookup(db).get_course("MTH2010A1")
    assert course.name == "Algebra II"
    assert course.category == {"Classwork": 0.4, "Quiz": 0.6}

    with pytest.raises(CourseNotFoundError):
        SqlCourseLookup(db).get_course("HIS100")


def test_sql_grading_periods(db):
    periods = SqlGradingPeriods(db)

    interval = periods.get_grading_period_time("1", "2018-2019")
    assert interval.start == ms(2018, 8, 27)
    assert interval.end == ms(2018, 10, 27) - 1

    assert periods.get_grading_period_time("2", None).start == ms(2018, 10, 29)

    with pytest.raises(GradingPeriodNotFoundError):
        periods.get_grading_period_time("3", "2018-2019")


def test_sql_and_json_stores_enrich_the_same(db, service):
    sql_service = ClassworkService(
        store=SqlClassworkStore(db),
        courses=SqlCourseLookup(db),
        periods=SqlGradingPeriods(db),
    )

    assert sql_service.enrich_all("111111") == service.enrich_all("111111")
    assert sql_service.alerts("111111", "1", "2018-2019") == service.alerts(
        "111111", "1", "2018-2019"
    )


@pytest.mark.parametrize(
    "text",
    [
        "Sep 5, 2018",
        "September 5, 2018",
        "2018-9-5",
        "9/5/2018",
        "2018-09-05T00:00:00Z",
        "Wed Sep 05 2018",
    ],
)
def test_free_form_dates_parse(text):
    assert to_epoch_ms(text) == ms(2018, 9, 5)


def test_free_form_due_date_lands_in_its_period(db):
    db.query(ClassworkRecord).delete()
    db.add(
        ClassworkRecord(
            student_id="111111",
            position=0,
            course="ENG101   - English I",
            date_assign="Aug 29, 2018",
            date_due="Sep 5, 2018",
            assignment="Essay 1",
            category="Homework",
            score="55",
            comment="",
        )
    )
    db.commit()

    sql_service = ClassworkService(
        store=SqlClassworkStore(db),
        courses=SqlCourseLookup(db),
        periods=SqlGradingPeriods(db),
    )

    assert [e.assignment for e in sql_service.by_course("111111", "1", "2018-2019")["ENG101"]] == [
        "Essay 1"
    ]
    assert len(sql_service.alerts("111111", "1", "2018-2019")) == 1


@pytest.mark.parametrize(
    "raw, stored",
    [(None, ""), (True, "1"), (False, "0"), (95, "95"), ("M", "M"), ("", "")],
)
def test_score_text(raw, stored):
    assert score_text(raw) == stored


def test_null_and_boolean_scores_match_across_stores(db, tmp_path):
    data = {
        "444444": {
            "classwork": [
                {
                    "course": "ENG101   - English I",
                    "dateAssign": "2018-08-29",
                    "dateDue": "2018-09-05",
                    "assignment": "Essay 1",
                    "category": "Homework",
                    "score": None,
                    "comment": None,
                },
                {
                    "course": "ENG101   - English I",
                    "dateAssign": "2018-09-10",
                    "dateDue": "2018-09-12",
                    "assignment": "Journal",
                    "category": "Homework",
                    "score": True,
                    "comment": "",
                },
            ]
        }
    }
    (tmp_path / "classwork.json").write_text(json.dumps(data), encoding="utf-8")

    db.query(ClassworkRecord).delete()
    db.commit()
    seed_db(db, tmp_path)

    sql_service = ClassworkService(
        store=SqlClassworkStore(db),
        courses=SqlCourseLookup(db),
        periods=SqlGradingPeriods(db),
    )
    json_service = ClassworkService(
        store=JsonClassworkStore(data),
        courses=SqlCourseLookup(db),
        periods=SqlGradingPeriods(db),
    )

    sql_work = sql_service.enrich_all("444444")
    assert sql_work == json_service.enrich_all("444444")
    assert sql_work[0].score is None
    assert sql_work[0].comment == ""
    assert sql_work[1].score == 1

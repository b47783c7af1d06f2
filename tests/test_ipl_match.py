import io

import pytest

from ipl_match import GoogleSearch, IplMatch, MobileApp, TVDisplay


@pytest.fixture
def viewers():
    out = io.StringIO()
    tv = TVDisplay("Star Sports", stream=out)
    app = MobileApp("JioCinema", stream=out)
    search = GoogleSearch(stream=out)
    return out, tv, app, search


def _drain(out):
    lines = out.getvalue().splitlines()
    out.seek(0)
    out.truncate()
    return lines


def test_match_scenario(viewers):
    out, tv, app, search = viewers
    match = IplMatch()
    match.register(tv)
    match.register(app)
    match.register(search)

    match.update_match_score("CSK: 150/3 IN 18 OVERS")
    assert _drain(out) == [
        "Star Sports on TV: Match Update - CSK: 150/3 IN 18 OVERS",
        "JioCinema Mobile App: Match Update - CSK: 150/3 IN 18 OVERS",
        "GoogleSearch: Match Update - CSK: 150/3 IN 18 OVERS",
    ]

    match.update_match_score("CSK: 180/4 IN 20 OVERS")
    assert _drain(out) == [
        "Star Sports on TV: Match Update - CSK: 180/4 IN 20 OVERS",
        "JioCinema Mobile App: Match Update - CSK: 180/4 IN 20 OVERS",
        "GoogleSearch: Match Update - CSK: 180/4 IN 20 OVERS",
    ]

    match.unregister(search)
    match.update_match_score("CSK WON BY 20 RUNS")
    assert _drain(out) == [
        "Star Sports on TV: Match Update - CSK WON BY 20 RUNS",
        "JioCinema Mobile App: Match Update - CSK WON BY 20 RUNS",
    ]
    assert match.match_status == "CSK WON BY 20 RUNS"


def test_second_unregister_changes_nothing(viewers):
    out, tv, app, search = viewers
    match = IplMatch()
    for viewer in (tv, app, search):
        match.register(viewer)

    match.unregister(search)
    match.unregister(search)
    match.update_match_score("CSK WON BY 20 RUNS")

    assert len(_drain(out)) == 2
    assert match.listeners == (tv, app)


def test_viewers_with_same_label_are_distinct_subscribers():
    out = io.StringIO()
    first, second = TVDisplay("Star Sports", stream=out), TVDisplay("Star Sports", stream=out)
    match = IplMatch()
    match.register(first)
    match.register(second)

    match.unregister(second)

    assert match.listeners == (first,)
    assert match.listeners[0] is first


def test_viewers_default_to_stdout(capsys):
    match = IplMatch()
    match.register(GoogleSearch())
    match.update_match_score("RCB: 12/0 IN 1 OVER")

    assert capsys.readouterr().out == "GoogleSearch: Match Update - RCB: 12/0 IN 1 OVER\n"


def test_blank_viewer_label_is_rejected():
    with pytest.raises(ValueError):
        TVDisplay("   ")
    with pytest.raises(ValueError):
        MobileApp("")


def test_viewer_labels_are_stored_cleaned():
    out = io.StringIO()
    tv = TVDisplay("  Star Sports ", stream=out)
    app = MobileApp(" JioCinema", stream=out)
    assert tv.viewer_name == "Star Sports"
    assert app.app_name == "JioCinema"

    tv.update("CSK: 1/0")
    app.update("CSK: 1/0")
    assert out.getvalue().splitlines() == [
        "Star Sports on TV: Match Update - CSK: 1/0",
        "JioCinema Mobile App: Match Update - CSK: 1/0",
    ]

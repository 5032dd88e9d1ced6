import src.weather_icons as wi


def test_icon_emoji_known_and_fallback():
    assert wi.icon_emoji("WbSunny") == "☀️"
    assert wi.icon_emoji("Help") == "❔"


def test_render_condition_icon_size_and_color():
    html = wi.render_condition_icon("Thunderstorm", size=40, color="#9C27B0")

    assert html.startswith("<span")
    assert "⛈️" in html
    assert "font-size:32px" in html
    assert "line-height:40px" in html
    assert "color:#9C27B0" in html


def test_render_condition_icon_without_color():
    assert "color:" not in wi.render_condition_icon("Cloud")

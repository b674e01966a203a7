import pytest

from routemap.models.selection import ColorSelection
from routemap.models.stop import Color, Stop


@pytest.fixture
def stops():
    return [Stop(id=i, name=f"Stop {i}", lat=0.0, lng=float(i)) for i in range(1, 5)]


def test_defaults():
    selection = ColorSelection()
    assert selection.active_color == Color.RED
    assert not selection.select_mode
    assert selection.selected_ids == frozenset()


@pytest.mark.parametrize("initial", [set(), {1}, {1, 2, 3}])
@pytest.mark.parametrize("stop_id", [1, 4])
def test_double_toggle_restores_selection(initial, stop_id):
    selection = ColorSelection()
    for i in initial:
        selection.toggle(i)
    before = selection.selected_ids

    selection.toggle(stop_id)
    selection.toggle(stop_id)

    assert selection.selected_ids == before


def test_toggle_reports_membership():
    selection = ColorSelection()
    assert selection.toggle(2) is True
    assert selection.toggle(2) is False


def test_apply_recolors_only_selected(stops):
    selection = ColorSelection()
    selection.toggle(1)
    selection.toggle(3)
    selection.set_active_color("blue")

    result = selection.apply(stops)

    assert [s.color for s in result] == [Color.BLUE, Color.WHITE, Color.BLUE, Color.WHITE]
    assert result[1] is stops[1]
    assert selection.selected_ids == frozenset()


def test_apply_with_empty_selection(stops):
    selection = ColorSelection()
    result = selection.apply(stops)
    assert result == stops
    assert selection.selected_ids == frozenset()


def test_select_mode_toggle_keeps_selection():
    selection = ColorSelection()
    selection.toggle_select_mode()
    selection.toggle(2)
    assert selection.toggle_select_mode() is False
    assert selection.selected_ids == frozenset({2})


def test_set_active_color_without_selection():
    selection = ColorSelection()
    assert selection.set_active_color("Purple") == Color.PURPLE
    assert selection.selected_ids == frozenset()


@pytest.mark.parametrize("color", ["orange", "", "#ff0000"])
def test_rejects_colors_outside_palette(color):
    selection = ColorSelection()
    with pytest.raises(ValueError):
        selection.set_active_color(color)
    assert selection.active_color == Color.RED


def test_palette_is_closed():
    assert {c.value for c in Color} == {"white", "red", "blue", "green", "yellow", "purple"}


def test_stop_color_is_coerced_into_palette():
    assert Stop(id=1, name="Stop 1", lat=0.0, lng=0.0, color="Blue").color == Color.BLUE
    with pytest.raises(ValueError):
        Stop(id=1, name="Stop 1", lat=0.0, lng=0.0, color="orange")

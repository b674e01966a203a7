from routemap.main import handle_command, parse_args, run_console


def test_parse_args_defaults():
    args = parse_args([])
    assert args.count == 35
    assert args.seed is None
    assert not args.debug


def test_parse_args_values():
    args = parse_args(['--count', '12', '--seed', '4', '--debug'])
    assert args.count == 12
    assert args.seed == 4
    assert args.debug


def test_drop_click_sort_flow(session):
    assert "Set a start point" in handle_command(session, "sort")
    assert "use 'drop' first" in handle_command(session, "click 0 0")

    handle_command(session, "drop")
    assert "start 0.00000, 0.00000" in handle_command(session, "click 0 0")

    output = handle_command(session, "sort")
    assert "Starting Point" in output
    assert [s.id for s in session.stops] == [1, 3, 2]


def test_color_flow(session):
    assert handle_command(session, "select") == "Color mode on"
    assert "selected (1 selected)" in handle_command(session, "stop 1")
    assert handle_command(session, "color blue") == "Active color: blue"
    assert handle_command(session, "apply") == "Applied blue to 1 stops"
    assert session.get_stop(1).color.value == "blue"
    assert handle_command(session, "select") == "Color mode off"


def test_stop_outside_select_mode_shows_name(session):
    assert handle_command(session, "stop 2") == "Stop 2"
    assert session.selected_ids == frozenset()


def test_bad_input_is_reported(session):
    assert handle_command(session, "color orange").startswith("Error:")
    assert handle_command(session, "click a b").startswith("Error:")
    assert handle_command(session, "click 1") == "Usage: click LAT LNG"
    assert handle_command(session, "stop") == "Usage: stop ID"
    assert handle_command(session, "select") == "Color mode on"
    assert handle_command(session, "stop 42") == "No stop with id 42"
    assert handle_command(session, "fly").startswith("Unknown command")
    assert handle_command(session, "   ") == ""


def test_map_to_unwritable_path_is_reported(session, tmp_path):
    output = handle_command(session, f"map {tmp_path}")
    assert output.startswith("Error:")
    assert handle_command(session, "select") == "Color mode on"


def test_non_finite_click_keeps_drop_pending(session):
    handle_command(session, "drop")
    assert handle_command(session, "click nan 0").startswith("Error:")
    assert session.drop_pending
    assert session.start_point is None


def test_regen_and_map(session, tmp_path):
    handle_command(session, "drop")
    handle_command(session, "click 0 0")
    assert "no start point" in handle_command(session, "regen")

    output_file = tmp_path / "demo.html"
    assert str(output_file) in handle_command(session, f"map {output_file}")
    assert output_file.exists()


def test_run_console_stops_on_quit(session, capsys):
    lines = iter(["drop", "click 0 0", "sort", "quit", "regen"])
    run_console(session, input_func=lambda prompt: next(lines))
    out = capsys.readouterr().out
    assert "Starting Point" in out
    assert session.start_point == (0.0, 0.0)


def test_run_console_stops_on_eof(session):
    def _eof(prompt):
        raise EOFError

    run_console(session, input_func=_eof)

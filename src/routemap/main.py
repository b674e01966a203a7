import sys
import argparse
import logging

from .config import DEFAULT_STOP_COUNT, OUTPUT_MAP
from .models.session_state import SessionState
from .models.stop import Color
from .utils.map_visualizer import MapVisualizer
from .utils.route_summary import create_route_summary, format_route_summary
from .utils.stop_generator import StopGenerator

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  drop            wait for the next click to place the start point
  click LAT LNG   click the map at LAT, LNG
  sort            sort stops by distance from the start point
  regen           regenerate stops (clears start point and selection)
  select          toggle color mode
  stop ID         click stop ID (toggles selection in color mode)
  color NAME      set the active color ({palette})
  apply           apply the active color to the selected stops
  list            show the stops in route order
  map [PATH]      write the map to html
  help            show this message
  quit            exit""".format(palette=", ".join(c.value for c in Color))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Courier route map demo')
    parser.add_argument('--count', type=int, default=DEFAULT_STOP_COUNT,
                      help='Number of stops to generate')
    parser.add_argument('--seed', type=int, default=None,
                      help='Random seed for a reproducible stop layout')
    parser.add_argument('--output', default=OUTPUT_MAP,
                      help='Path of the html map written by the map command')
    parser.add_argument('--debug', action='store_true',
                      help='Enable debug logging')
    return parser.parse_args(argv)


def describe_state(session: SessionState) -> str:
    flags = []
    if session.drop_pending:
        flags.append("waiting for start point click")
    if session.select_mode:
        flags.append(f"color mode, {session.active_color.value}, {len(session.selected_ids)} selected")
    start = session.start_point
    start_text = f"start {start[0]:.5f}, {start[1]:.5f}" if start else "no start point"
    return f"{len(session.stops)} stops, {start_text}" + (f" ({'; '.join(flags)})" if flags else "")


def handle_command(session: SessionState, line: str, output_file: str = OUTPUT_MAP) -> str:
    """Run one console command against the session and return the text to show"""
    parts = line.strip().split()
    if not parts:
        return ""
    command, args = parts[0].lower(), parts[1:]

    try:
        if command == 'help':
            return HELP_TEXT
        if command == 'drop':
            session.request_drop_mode()
            return "Click the map to set the start point"
        if command == 'click':
            if len(args) != 2:
                return "Usage: click LAT LNG"
            position = (float(args[0]), float(args[1]))
            if session.map_clicked(position):
                return describe_state(session)
            return "Nothing to do (use 'drop' first to place the start point)"
        if command == 'sort':
            if session.request_sort():
                return format_route_summary(create_route_summary(session), session)
            return "Set a start point before sorting"
        if command == 'regen':
            session.request_regenerate()
            return describe_state(session)
        if command == 'select':
            session.toggle_select_mode()
            return "Color mode on" if session.select_mode else "Color mode off"
        if command == 'stop':
            if len(args) != 1:
                return "Usage: stop ID"
            stop_id = int(args[0])
            if not session.select_mode:
                stop = session.get_stop(stop_id)
                return stop.display_name if stop else f"No stop with id {stop_id}"
            if session.stop_clicked(stop_id):
                state = "selected" if stop_id in session.selected_ids else "deselected"
                return f"Stop id {stop_id} {state} ({len(session.selected_ids)} selected)"
            return f"No stop with id {stop_id}"
        if command == 'color':
            if len(args) != 1:
                return "Usage: color NAME"
            color = session.set_active_color(args[0])
            return f"Active color: {color.value}"
        if command == 'apply':
            count = session.apply_color()
            return f"Applied {session.active_color.value} to {count} stops"
        if command == 'list':
            return format_route_summary(create_route_summary(session), session)
        if command == 'map':
            path = args[0] if args else output_file
            return f"Map written to {MapVisualizer(session).generate_map(path)}"
    except (ValueError, OSError) as e:
        return f"Error: {e}"

    return f"Unknown command: {command} (type 'help')"


def run_console(session: SessionState, output_file: str = OUTPUT_MAP, input_func=input) -> None:
    print(HELP_TEXT)
    print(describe_state(session))
    while True:
        try:
            line = input_func("\nroutemap> ")
        except EOFError:
            break
        if line.strip().lower() in ('quit', 'exit'):
            break
        response = handle_command(session, line, output_file)
        if response:
            print(response)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger('routemap').setLevel(logging.DEBUG)

    try:
        session = SessionState(StopGenerator(args.seed), stop_count=args.count)
        logger.info(f"Generated {len(session.stops)} stops")
        run_console(session, args.output)

    except KeyboardInterrupt:
        logger.info("\nSession interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

import pandas as pd
from tabulate import tabulate

from ..models.route_optimizer import route_length

SUMMARY_COLUMNS = [
    'Stop Number', 'Name', 'Category', 'Color', 'Latitude', 'Longitude', 'Selected'
]


def create_route_summary(session) -> pd.DataFrame:
    """List view of the session: start point first (when set), then stops in current order"""
    rows = []
    start = session.start_point
    if start is not None:
        rows.append({
            'Stop Number': 'Starting Point',
            'Name': '-',
            'Category': '-',
            'Color': '-',
            'Latitude': start[0],
            'Longitude': start[1],
            'Selected': '',
        })

    selected = session.selected_ids
    for stop in session.stops:
        rows.append({
            'Stop Number': stop.label if stop.label is not None else '-',
            'Name': stop.name,
            'Category': stop.color.legend or stop.category,
            'Color': stop.color.value,
            'Latitude': stop.lat,
            'Longitude': stop.lng,
            'Selected': '*' if stop.id in selected else '',
        })

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def format_route_summary(df: pd.DataFrame, session=None) -> str:
    table = tabulate(df, headers='keys', tablefmt='grid', showindex=False, floatfmt='.5f')
    if session is not None and session.is_sorted:
        length = route_length(session.stops, session.start_point)
        table += f"\nRoute length: {length:.4f} deg over {len(session.stops)} stops"
    return table

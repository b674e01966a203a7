import folium
from typing import List
import logging
import os

from ..config import FLAG_ICON_SIZE, FLAG_ICON_URL, MAP_CENTER, MAP_ZOOM, OUTPUT_MAP
from ..models.stop import CATEGORY_LEGEND, Color, Stop

logger = logging.getLogger(__name__)


class MapVisualizer:
    def __init__(self, session):
        self.session = session

    def create_base_map(self) -> folium.Map:
        return folium.Map(location=list(MAP_CENTER), zoom_start=MAP_ZOOM)

    def generate_stop_icon(self, stop: Stop, selected: bool) -> folium.DivIcon:
        """Round marker filled with the stop color, showing the route label once sorted"""
        text_color = "black" if stop.color == Color.WHITE else "white"
        shadow = "0 0 0 3px rgba(0,0,0,0.5)" if selected else "none"
        return folium.DivIcon(
            icon_size=(24, 24),
            icon_anchor=(12, 12),
            html=f"""
                <div style='
                    width: 24px;
                    height: 24px;
                    border-radius: 50%;
                    border: 2px solid black;
                    display: flex;
                    align-items: center;
                    justify-content: center;
                    font-size: 12px;
                    font-weight: bold;
                    background-color: {stop.color.value};
                    color: {text_color};
                    box-shadow: {shadow};'
                >{stop.label or ""}</div>
            """,
        )

    def generate_tooltip(self, stop: Stop) -> str:
        legend = stop.color.legend
        return f"""
            <b>{stop.display_name}</b><br>
            {stop.name} ({stop.category})<br>
            Color: {stop.color.value}{f" - {legend}" if legend else ""}<br>
            Coordinates: {stop.lat:.5f}, {stop.lng:.5f}
        """

    def draw_route(self, map_obj: folium.Map, stops: List[Stop]):
        """Connect the start point to the stops in route order"""
        start = self.session.start_point
        if start is None or not stops:
            return
        folium.PolyLine(
            locations=[list(start)] + [[stop.lat, stop.lng] for stop in stops],
            color="gray",
            weight=2,
            opacity=0.6,
            dash_array="5, 10",
        ).add_to(map_obj)

    def add_legend(self, map_obj: folium.Map):
        rows = "".join(
            f"""
            <div style="display: flex; align-items: center; margin-bottom: 4px;">
                <div style="width: 12px; height: 12px; border-radius: 50%; border: 1px solid gray;
                            margin-right: 8px; background-color: {color.value};"></div>
                <span>{label}</span>
            </div>"""
            for color, label in CATEGORY_LEGEND.items()
        )
        legend_html = f"""
        <div style="position: fixed; bottom: 30px; left: 30px; z-index: 1000; background: white;
                    padding: 10px; border-radius: 6px; box-shadow: 0 1px 4px rgba(0,0,0,0.3);
                    font-size: 12px;">
            <b>Color Logic</b>
            {rows}
        </div>
        """
        map_obj.get_root().html.add_child(folium.Element(legend_html))

    def build_map(self) -> folium.Map:
        stops = list(self.session.stops)
        selected = self.session.selected_ids
        route_map = self.create_base_map()

        start = self.session.start_point
        if start is not None:
            folium.Marker(
                location=list(start),
                icon=folium.CustomIcon(FLAG_ICON_URL, icon_size=FLAG_ICON_SIZE),
                tooltip="Start Point",
            ).add_to(route_map)

        if self.session.is_sorted:
            self.draw_route(route_map, stops)

        for stop in stops:
            folium.Marker(
                location=[stop.lat, stop.lng],
                icon=self.generate_stop_icon(stop, stop.id in selected),
                tooltip=self.generate_tooltip(stop),
                popup=folium.Popup(stop.display_name),
            ).add_to(route_map)

        self.add_legend(route_map)
        return route_map

    def generate_map(self, output_file: str = OUTPUT_MAP) -> str:
        """Render the current session and save it as html"""
        try:
            route_map = self.build_map()
            output_dir = os.path.dirname(os.path.abspath(output_file))
            os.makedirs(output_dir, exist_ok=True)
            route_map.save(output_file)
            logger.info(f"Generated map: {output_file}")
            return output_file
        except Exception as e:
            logger.error(f"Failed to generate map: {e}")
            raise

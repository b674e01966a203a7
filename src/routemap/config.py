import os

# Area centers (latitude, longitude) the synthetic stops cluster around
AREA_CENTERS = [
    (40.144, -75.115),
    (40.177, -75.106),
    (40.1785, -75.129),
]
STOP_JITTER = 0.015  # degrees, each axis
DEFAULT_STOP_COUNT = 35
DEFAULT_CATEGORY = "residential"
DEFAULT_ACTIVE_COLOR = "red"

# Map configuration
MAP_CENTER = (40.155, -75.12)
MAP_ZOOM = 12
FLAG_ICON_URL = "https://cdn-icons-png.flaticon.com/512/684/684908.png"
FLAG_ICON_SIZE = (32, 32)

# Output paths
BASE_DIR = os.getcwd()
OUTPUT_DIR = os.path.join(BASE_DIR, "output")
OUTPUT_MAP = os.path.join(OUTPUT_DIR, "route_map.html")

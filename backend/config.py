from pathlib import Path

CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"

# ==============================
# TICKER PERIODS (seconds)
# ==============================
DASHBOARD_TICK_SECONDS = 5.0
LIVE_MAP_TICK_SECONDS = 8.0
CAMERA_FEED_TICK_SECONDS = 2.0
ANALYSIS_TICK_SECONDS = 1.0
UPLOAD_TICK_SECONDS = 0.2

# Upper bound on ticks applied in one catch-up after a long idle tab.
MAX_CATCH_UP_TICKS = 500

# ==============================
# TIMED ACTIONS (seconds)
# ==============================
OPTIMIZATION_SECONDS = 3.0
CHALLAN_ISSUE_SECONDS = 2.0
RETRAIN_SECONDS = 5.0
ANALYSIS_SECONDS = 8.0
UPLOAD_SECONDS = 2.0

# ==============================
# METRIC FLOORS
# ==============================
PENDING_VIOLATIONS_FLOOR = 20
JUNCTION_VEHICLES_FLOOR = 10
AVG_WAIT_FLOOR = 20
THROUGHPUT_FLOOR = 200

UPLOAD_DIR = "uploads"
VIDEO_EXTENSIONS = ("mp4", "avi", "mkv", "mov", "wmv")
MAX_UPLOAD_MB = 500

import os

TRUTHY = ("1", "true", "yes", "on")


def env_flag(name, default=False):
    """Read a boolean switch like DEBUG=1 / DEBUG=true from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


DEBUG = env_flag("DEBUG")

# ------------------
# VISUALIZER CONFIG (JSON-serializable)
# ------------------
# Callers can override keys in place, e.g. VISUALIZER_CONFIG["interval_ms"] = 400
VISUALIZER_CONFIG = {
    "interval_ms": 800,            # delay between animation frames
    "figure_size": (8, 3),
    "node_color": "#1f6f8b",
    "highlight_color": "#f4c430",
    "deleted_color": "#e05252",
    # same palette as the pointer tags in the manim scene
    "pointer_colors": {
        "current": "#ffd54a",
        "prev": "#ff7eb6",
        "next": "#4ea3ff",
        "slow": "#ff9f43",
        "fast": "#8c7ae6",
    },
    "default_pointer_color": "#dddddd",
    "log_file": "run.log",
    "timing_csv": "timing.csv",
    "manim_quality": "low_quality",  # or "high_quality" (1080p, 60fps)
}


def pointer_color(name):
    return VISUALIZER_CONFIG["pointer_colors"].get(name, VISUALIZER_CONFIG["default_pointer_color"])

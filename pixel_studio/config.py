"""
Configuration and Constants for Pixel Studio

"""

# ==========================================
# 📐 CANVAS
# ==========================================
GRID_SIZES = (16, 32, 64)
DEFAULT_GRID_SIZE = 32

# ==========================================
# 🖌️ TOOLS
# ==========================================
BRUSH_SIZES = (1, 2, 3)
DEFAULT_BRUSH_SIZE = 1
DEFAULT_COLOR = "#000000"

# ==========================================
# 🎨 PALETTE
# ==========================================
PALETTE = (
    "#000000", "#FFFFFF", "#F44336", "#4CAF50",
    "#2196F3", "#FFEB3B", "#FF9800", "#9C27B0",
    "#E91E63", "#795548", "#9E9E9E", "#00BCD4",
    "#CDDC39", "#3F51B5", "#009688", "#FFC107",
)
MAX_RECENT_COLORS = 8

# ==========================================
# ⏪ HISTORY
# ==========================================
MAX_HISTORY = 50

# ==========================================
# 💾 EXPORT
# ==========================================
EXPORT_RESOLUTION = 512
EXPORT_BACKGROUND = "#FFFFFF"

CONFIG_FILE = "config.json"
CONFIG_ENV_VAR = "PIXEL_STUDIO_CONFIG"

"""
Configuration and Constants for Pixel Studio

"""

# ==========================================
# 📐 GRID
# ==========================================
DEFAULT_GRID_SIZE = 32

# ==========================================
# 🖌️ TOOLS
# ==========================================
DEFAULT_COLOR = "#6366F1"
DEFAULT_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 16

# Colour token that stands for "no pixel here"
TRANSPARENT = "transparent"

# ==========================================
# 🔍 VIEW
# ==========================================
DEFAULT_ZOOM = 100
MIN_ZOOM = 100  # Below this the scaled canvas no longer covers the viewport
MAX_ZOOM = 1000

# ==========================================
# ↩️ HISTORY
# ==========================================
MAX_HISTORY = 50

# ==========================================
# 💾 FILES
# ==========================================
FILE_VERSION = "1.0"
SPRITESHEET_MAX_COLUMNS = 5

"""Layout constants and color definitions."""

# Timing
FPS = 60
HOST_HZ = 240  # how often the host loop polls the frame governor

# Layout dimensions
SCREEN_W = 640
SCREEN_H = 500
GRID_SIZE = 50
POINT_RADIUS = 8
TANGENT_DOT_RADIUS = 4
POINTER_RADIUS = 15
DASH = 5
HUD_PAD = 10
LINE_H = 20

# Slider steps (keyboard replaces the HTML sliders)
COEFFICIENT_STEP = 0.05

# Colors
BG_COLOR = (0, 10, 20)
CURVE_COLOR = (0, 180, 219)
CONTROL_POINT_COLOR = (255, 64, 129)
TANGENT_COLOR = (255, 204, 0)
END_POINT_COLOR = (76, 175, 80)
GRID_COLOR = (255, 255, 255, 13)
CONTROL_LINE_COLOR = (255, 255, 255, 77)
POINTER_FILL = (255, 64, 129, 77)
OUTLINE_COLOR = (255, 255, 255)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (128, 222, 234)
WARNING_BG = (255, 64, 129, 230)

CURVE_WIDTH = 4
TANGENT_WIDTH = 2

# FPS band -> HUD color
FPS_BAND_COLORS: dict[str, tuple[int, int, int]] = {
    "low": (255, 64, 129),
    "good": (76, 175, 80),
    "high": (255, 204, 0),
}

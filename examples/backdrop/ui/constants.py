"""Window, timing and HUD constants."""

# Window
WIDTH, HEIGHT = 1024, 640
TITLE = "lumen backdrop"
FPS = 60

# Scenes selectable with the number keys
SCENES = ["grid", "particles", "swarm", "stars"]

# HUD
HUD_COLOR = (200, 200, 220)
HUD_SHADOW = (0, 0, 0)
HUD_FONT = "monospace"
HUD_FONT_SIZE = 14

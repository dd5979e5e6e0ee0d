# viz/renderer_colors.py
BG = (24, 28, 40)
GRID = (36, 42, 58)
FOOD = (220, 60, 60)
HEAD = (120, 230, 120)
BODY = (60, 170, 80)
TEXT = (235, 235, 235)

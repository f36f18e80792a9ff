from ..colors import ColorValue

RED = ColorValue.from_rgb(1.0, 0.0, 0.0)
GREEN = ColorValue.from_rgb(0.0, 1.0, 0.0)
BLUE = ColorValue.from_rgb(0.0, 0.0, 1.0)
CYAN = ColorValue.from_rgb(0.0, 1.0, 1.0)
MAGENTA = ColorValue.from_rgb(1.0, 0.0, 1.0)
YELLOW = ColorValue.from_rgb(1.0, 1.0, 0.0)
BLACK = ColorValue.from_rgb(0.0, 0.0, 0.0)
WHITE = ColorValue.from_rgb(1.0, 1.0, 1.0)

# unit RGB -> (hue [0, 1), saturation, value)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (1 / 3, 1.0, 1.0),
    (0.0, 0.0, 1.0): (2 / 3, 1.0, 1.0),
    (1.0, 1.0, 0.0): (1 / 6, 1.0, 1.0),
    (0.0, 1.0, 1.0): (0.5, 1.0, 1.0),
    (1.0, 0.0, 1.0): (5 / 6, 1.0, 1.0),
    (1.0, 0.5, 0.0): (1 / 12, 1.0, 1.0),
    (0.5, 0.25, 0.75): (0.75, 2 / 3, 0.75),
    (0.2, 0.4, 0.4): (0.5, 0.5, 0.4),
    (0.6, 0.3, 0.45): (11 / 12, 0.5, 0.6),
    (0.25, 0.5, 0.0): (0.25, 1.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
}

# unit RGB -> (cyan, magenta, yellow, black)
samples_rgb_cmyk = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0, 0.0),
    (0.0, 1.0, 0.0): (1.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0): (1.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.0, 0.5),
    (0.8, 0.4, 0.2): (0.0, 0.4, 0.6, 0.2),
    (0.25, 0.5, 0.75): (0.5, 0.25, 0.0, 0.25),
}

# packed 0xAARRGGBB -> 8-bit (a, r, g, b)
samples_argb = {
    0x00000000: (0, 0, 0, 0),
    0xFFFFFFFF: (255, 255, 255, 255),
    0x80FF0000: (128, 255, 0, 0),
    0xFF00FF00: (255, 0, 255, 0),
    0x7F123456: (127, 0x12, 0x34, 0x56),
}

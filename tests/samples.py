# (r, g, b) bytes -> (hue degrees, saturation, lightness)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (204, 204, 255): (240.0, 1.0, 0.9),
    (100, 149, 237): (218.54, 0.7919, 0.6608),
    (128, 0, 0): (0.0, 1.0, 128 / 510),
    (255, 128, 0): (30.12, 1.0, 0.5),
}

# hex text -> (r, g, b)
samples_hex = {
    "#FF0000": (255, 0, 0),
    "FF0000": (255, 0, 0),
    "F00": (255, 0, 0),
    "#f00": (255, 0, 0),
    "#800080": (128, 0, 128),
    "112233": (17, 34, 51),
    "#abc": (170, 187, 204),
    "#AbCdEf": (171, 205, 239),
    "#FF000080": (255, 0, 0),
    "#f008": (255, 0, 0),
}

# A coarse grid over the byte cube, used for round trips
grid_rgb = [
    (r, g, b)
    for r in range(0, 256, 17)
    for g in range(0, 256, 17)
    for b in range(0, 256, 17)
]

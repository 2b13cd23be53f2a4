#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/data/pantone.py

# Subset of Pantone Coated (C) swatches: (code, name, hex)
PANTONE_COLORS = [
    # Yellows
    ("PMS 100 C", "Yellow", "#F6E200"),
    ("PMS 102 C", "Yellow", "#FCE300"),
    ("PMS 107 C", "Yellow", "#F9E526"),
    ("PMS 108 C", "Yellow", "#FEDB00"),
    ("PMS 109 C", "Yellow", "#FFD100"),
    ("PMS 113 C", "Yellow", "#FBD760"),
    ("PMS 116 C", "Yellow", "#FFCD00"),
    ("PMS 123 C", "Yellow", "#FFC72C"),
    ("PMS 130 C", "Yellow-Orange", "#F2A900"),
    ("PMS 3955 C", "Neon Yellow", "#F3F315"),
    ("PMS 7405 C", "Muted Yellow", "#E2B73E"),

    # Oranges
    ("PMS 137 C", "Orange", "#FFA300"),
    ("PMS 144 C", "Orange", "#ED8B00"),
    ("PMS 151 C", "Orange", "#FF8200"),
    ("PMS 158 C", "Orange", "#E87722"),
    ("PMS 165 C", "Orange", "#FF671F"),
    ("PMS 1665 C", "Orange", "#DC4405"),
    ("PMS 172 C", "Red-Orange", "#FA4616"),
    ("PMS 716 C", "Bright Orange", "#EA7600"),

    # Reds
    ("PMS 179 C", "Red", "#E03C31"),
    ("PMS 1788 C", "Red", "#EE2737"),
    ("PMS 185 C", "Red", "#E4002B"),
    ("PMS 186 C", "Red", "#C8102E"),
    ("PMS 199 C", "Red", "#D50032"),
    ("PMS 200 C", "Red", "#BA0C2F"),
    ("PMS 201 C", "Red", "#9D2235"),
    ("PMS 202 C", "Dark Red", "#862633"),
    ("PMS 485 C", "Red", "#DA291C"),
    ("PMS 703 C", "Pastel Red", "#A64B4F"),
    ("PMS 7621 C", "Brick Red", "#AB2328"),

    # Pinks / Magentas
    ("PMS 212 C", "Pink", "#F55274"),
    ("PMS 219 C", "Rubine Red", "#DA1884"),
    ("PMS 226 C", "Magenta", "#D70075"),
    ("PMS 232 C", "Rhodamine Red", "#EE3C96"),
    ("PMS Process Magenta C", "Magenta", "#EC008C"),
    ("PMS 707 C", "Light Pink", "#F9A3A9"),
    ("PMS 7425 C", "Deep Pink", "#B04A6C"),

    # Purples
    ("PMS 239 C", "Purple", "#D8248E"),
    ("PMS 259 C", "Purple", "#6D2077"),
    ("PMS 266 C", "Purple", "#753BBD"),
    ("PMS 268 C", "Purple", "#582C83"),
    ("PMS 273 C", "Purple", "#38215B"),
    ("PMS 513 C", "Violet", "#94459A"),
    ("PMS 7671 C", "Indigo Purple", "#5B4F95"),

    # Blues
    ("PMS 280 C", "Navy Blue", "#012169"),
    ("PMS 286 C", "Royal Blue", "#0033A0"),
    ("PMS 293 C", "Blue", "#003DA5"),
    ("PMS 299 C", "Sky Blue", "#00A3E0"),
    ("PMS 300 C", "Blue", "#005EB8"),
    ("PMS 306 C", "Process Blue", "#00B5E2"),
    ("PMS 312 C", "Blue", "#009CDE"),
    ("PMS 533 C", "Navy", "#1F2A44"),
    ("PMS 541 C", "Blue", "#003C71"),
    ("PMS 647 C", "Blue", "#22557F"),
    ("PMS 279 C", "Cornflower", "#418FDE"),
    ("PMS 7455 C", "Periwinkle", "#455898"),
    ("PMS Process Cyan C", "Cyan", "#009EE3"),

    # Teals / Aquas
    ("PMS 320 C", "Teal", "#009DA5"),
    ("PMS 327 C", "Teal", "#00857D"),
    ("PMS 3258 C", "Mint", "#49C5B1"),
    ("PMS 7710 C", "Dark Teal", "#00857D"),

    # Greens
    ("PMS 347 C", "Green", "#009A44"),
    ("PMS 354 C", "Bright Green", "#00B140"),
    ("PMS 361 C", "Green", "#43B02A"),
    ("PMS 368 C", "Lime Green", "#78BE20"),
    ("PMS 375 C", "Green", "#97D700"),
    ("PMS 382 C", "Yellow-Green", "#BAD80A"),
    ("PMS 340 C", "Teal Green", "#00965E"),
    ("PMS 342 C", "Forest Green", "#006A4E"),
    ("PMS 350 C", "Deep Green", "#2C5234"),
    ("PMS 7482 C", "Light Green", "#00AD5F"),
    ("PMS 7488 C", "Grass Green", "#6CC24A"),
    ("PMS 7738 C", "Dark Forest", "#1A4B2D"),
    ("PMS 357 C", "Olive Drab", "#21412D"),
    ("PMS 575 C", "Olive", "#67823A"),
    ("PMS 583 C", "Chartreuse", "#A2B025"),
    ("PMS 555 C", "Dark Green", "#206C49"),

    # Browns / Tans / Earth
    ("PMS 448 C", "Drab", "#4A412A"),
    ("PMS 469 C", "Brown", "#623412"),
    ("PMS 476 C", "Dark Brown", "#4E3629"),
    ("PMS 729 C", "Tan", "#BFA07A"),
    ("PMS 7502 C", "Beige", "#CEB888"),
    ("PMS 7532 C", "Taupe", "#5B4C3A"),
    ("PMS 4625 C", "Espresso", "#4F2C1D"),

    # Grays / Blacks / Metallics
    ("PMS 420 C", "Light Gray", "#C7C9C7"),
    ("PMS 421 C", "Gray", "#B2B4B2"),
    ("PMS 424 C", "Gray", "#707372"),
    ("PMS 425 C", "Dark Gray", "#54585A"),
    ("PMS Cool Gray 1 C", "Cool Gray", "#D9D9D6"),
    ("PMS Cool Gray 5 C", "Cool Gray", "#B1B3B3"),
    ("PMS Cool Gray 11 C", "Cool Gray", "#53565A"),
    ("PMS Warm Gray 1 C", "Warm Gray", "#D7D2CB"),
    ("PMS Warm Gray 5 C", "Warm Gray", "#ACA39A"),
    ("PMS Warm Gray 11 C", "Warm Gray", "#6E6259"),
    ("PMS Process Black C", "Black", "#2E2925"),
    ("PMS Black 6 C", "Black", "#101820"),
    ("PMS 871 C", "Gold", "#84754E"),
    ("PMS 877 C", "Silver", "#8A8D8F"),

    # More specific shades
    ("PMS 5625 C", "Sage", "#6E8574"),
    ("PMS 7545 C", "Slate", "#425563"),
    ("PMS 7605 C", "Sand", "#D6C4B1"),
    ("PMS 2001 C", "Neon Orange", "#FFA35F"),
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/data/paints.py

# Golden Heavy Body Acrylics: (name, hex)
# Hex values approximate the masstone of a dried drawdown on white.
GOLDEN_HEAVY_BODY_ACRYLICS = [
    # Whites / Blacks / Grays
    ("Titanium White", "#F4F4F0"),
    ("Zinc White", "#EEEEEA"),
    ("Titan Buff", "#E3D7BF"),
    ("Carbon Black", "#1C1C1C"),
    ("Mars Black", "#232221"),
    ("Bone Black", "#2A2826"),
    ("Neutral Gray N5", "#777777"),
    ("Neutral Gray N7", "#ABABAA"),
    ("Payne's Gray", "#36404A"),
    ("Graphite Gray", "#4C4E50"),

    # Yellows
    ("Hansa Yellow Light", "#F9E72C"),
    ("Hansa Yellow Medium", "#F8D81C"),
    ("Hansa Yellow Opaque", "#F6CC1F"),
    ("Cadmium Yellow Primrose", "#F7E64A"),
    ("Cadmium Yellow Light", "#F7D21C"),
    ("Cadmium Yellow Medium", "#F5BA11"),
    ("Cadmium Yellow Dark", "#F09E0E"),
    ("Diarylide Yellow", "#F0B810"),
    ("Nickel Azo Yellow", "#C49A1A"),
    ("Yellow Ochre", "#C6922D"),
    ("Naples Yellow Hue", "#EBCB88"),
    ("Raw Sienna", "#A86A2C"),

    # Oranges
    ("Pyrrole Orange", "#F0561E"),
    ("Cadmium Orange", "#EE7418"),
    ("Hansa Yellow Orange", "#F4A216"),
    ("Vat Orange", "#E45A1E"),
    ("Transparent Pyrrole Orange", "#E0451F"),
    ("Indian Yellow Hue", "#D9861A"),

    # Reds
    ("Cadmium Red Light", "#E53A23"),
    ("Cadmium Red Medium", "#D3261F"),
    ("Cadmium Red Dark", "#A81E21"),
    ("Pyrrole Red Light", "#E8362A"),
    ("Pyrrole Red", "#D21F26"),
    ("Naphthol Red Light", "#E02E2F"),
    ("Naphthol Red Medium", "#C81E2E"),
    ("Alizarin Crimson Hue", "#7E1B2C"),
    ("Permanent Maroon", "#6B1C26"),
    ("Red Oxide", "#8A3B27"),

    # Pinks / Magentas
    ("Quinacridone Magenta", "#8E1E4E"),
    ("Quinacridone Red", "#C51F4B"),
    ("Quinacridone Crimson", "#A11F3A"),
    ("Quinacridone Violet", "#6F1E45"),
    ("Primary Magenta", "#D6257F"),
    ("Light Magenta", "#E98CBC"),

    # Purples / Violets
    ("Dioxazine Purple", "#3B1F4E"),
    ("Ultramarine Violet", "#4F3C7F"),
    ("Cobalt Violet Hue", "#7A4F9E"),
    ("Medium Violet", "#6A4A96"),

    # Blues
    ("Ultramarine Blue", "#233A8E"),
    ("Cobalt Blue", "#1F4C9C"),
    ("Cerulean Blue Chromium", "#2B7BB9"),
    ("Manganese Blue Hue", "#1D8CC4"),
    ("Phthalo Blue (Green Shade)", "#0F2F5C"),
    ("Phthalo Blue (Red Shade)", "#14285E"),
    ("Prussian Blue Hue", "#1B2A3F"),
    ("Primary Cyan", "#009ED8"),
    ("Indanthrene Blue", "#1E2748"),
    ("Light Ultramarine Blue", "#8DA2D4"),

    # Teals / Turquoises
    ("Cobalt Teal", "#3DB8A8"),
    ("Cobalt Turquoise", "#1D8F94"),
    ("Teal", "#007C7A"),
    ("Turquois (Phthalo)", "#00657A"),

    # Greens
    ("Phthalo Green (Blue Shade)", "#0F4A3C"),
    ("Phthalo Green (Yellow Shade)", "#0E5D3D"),
    ("Permanent Green Light", "#3C9A3C"),
    ("Chromium Oxide Green", "#5A7042"),
    ("Green Gold", "#9A8A1E"),
    ("Hooker's Green Hue", "#2E4A2A"),
    ("Sap Green Permanent", "#445A1F"),
    ("Viridian Green Hue", "#1F6E5A"),
    ("Light Green (Yellow Shade)", "#A6CE5A"),
    ("Terre Verte", "#5D6E55"),

    # Earths / Browns
    ("Burnt Sienna", "#7A3520"),
    ("Burnt Umber", "#4A3023"),
    ("Burnt Umber Light", "#6B4630"),
    ("Raw Umber", "#4E4030"),
    ("Van Dyke Brown Hue", "#3A2A20"),
    ("Transparent Red Iron Oxide", "#8E3A1E"),
    ("Transparent Yellow Iron Oxide", "#B7742A"),
    ("Yellow Oxide", "#C98F32"),
    ("Sienna Brown", "#7C4A2E"),
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for hex -> Lab conversion cache
LRU_CACHE_SIZE = 1024

# Standard Scaling Constants
RGB_MAX = 255.0                    # 8-bit color depth limit
XYZ_SCALING = 100.0                # Linear RGB is scaled to [0, 100] before the XYZ matrix
EXP_2 = 2                          # Square power

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# sRGB to XYZ Matrix, 4-digit rows (Source: EasyRGB, Observer 2 deg, Illuminant D65)
M_SRGB_XYZ_X = (0.4124, 0.3576, 0.1805)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126, 0.7152, 0.0722)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193, 0.1192, 0.9505)  # Coefficients for Z coordinate calculation

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_CUBE_ROOT_EXP = 1.0 / 3.0      # Power exponent of the non-linear segment
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# YIQ Luma (Source: W3C "Techniques For Accessibility Evaluation And Repair Tools")
YIQ_R = 299                        # Red weight
YIQ_G = 587                        # Green weight
YIQ_B = 114                        # Blue weight
YIQ_DIVISOR = 1000.0               # Weights sum to 1000
YIQ_THRESHOLD = 128                # Luma at or above this takes dark text

# Overlay text colors
TEXT_DARK = "#000000"
TEXT_LIGHT = "#FFFFFF"

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_WORKERS = 32                   # Upper bound for parallel enrichment threads
MAX_RANK = 100                     # Maximum number of ranked matches per catalog
DEFAULT_RANK = 1                   # Ranked matches shown by 'match' when -n is omitted

PAINT_CATALOG_LABEL = "paint"
INK_CATALOG_LABEL = "pantone"

OUTPUT_FORMATS = ["json", "prettyjson", "text"]
CATALOG_FORMATS = ["text", "json", "prettyjson"]

# ==========================================
# CLI UI & Data Structures
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"

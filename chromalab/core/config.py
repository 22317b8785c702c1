#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/core/config.py

from types import MappingProxyType

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
CHANNEL_MAX = 255                  # Largest integer channel value
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
PERCENT = 100.0                    # Divisor to convert percentage values to fractions

# Hex representation
HEX_PREFIX = "#"

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# Relative Luminance (Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance)
WCAG_LINEAR_TH = 0.03928           # Legacy WCAG 2.x threshold for the linear segment
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound of the ratio (identical luminance)
WCAG_MAX_RATIO = 21.0              # Upper bound of the ratio (black on white)
WCAG_LUMINANCE_OFFSET = 0.05       # Flare term in the (L + 0.05) contrast formula
READABLE_TEXT_LUMINANCE = 0.4      # Above this background luminance, black text reads better

# Contrast correction search over integer HSL lightness percentages
FIX_LIGHTNESS_MIN = 0
FIX_LIGHTNESS_MAX = 100

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),   # Long-wavelength (L) response
    (0.2119034982, 0.6806995451, 0.1073969566),   # Medium-wavelength (M) response
    (0.0883024619, 0.2817188376, 0.6299787005),   # Short-wavelength (S) response
)

# LMS' to Lab matrix (perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),  # Green-red opponent (a)
    (0.0259040371, 0.7827717662, -0.8086757660),  # Blue-yellow opponent (b)
)

# Lab to LMS' matrix (inverse stage part 1)
M2_OKLAB_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS to linear sRGB matrix (inverse stage part 2)
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# OKLCH clamps used by generated palettes
OKLCH_L_MIN = 0.0
OKLCH_L_MAX = 1.0
OKLCH_C_MIN = 0.0
OKLCH_C_MAX = 0.4

# ==========================================
# Blending
# ==========================================

MESH_EPSILON = 0.01                # Softening term in inverse-distance weights
PIGMENT_STEPS_PER_GAP = 3          # Default intermediates inserted by pigment blend
STOP_POSITION_MIN = 0.0
STOP_POSITION_MAX = 100.0
MESH_GRID_SIZES = (2, 3)

# Default anchor colours for new mesh fields, row-major
MESH_DEFAULT_COLOURS = MappingProxyType({
    2: ("#3b82f6", "#8b5cf6", "#10b981", "#f59e0b"),
    3: (
        "#3b82f6", "#8b5cf6", "#ec4899",
        "#10b981", "#6366f1", "#f59e0b",
        "#06b6d4", "#84cc16", "#ef4444",
    ),
})

# ==========================================
# Harmony & Shades
# ==========================================

# Hue offsets in degrees relative to the base hue, in output order
HARMONY_ANGLES = MappingProxyType({
    "complementary": (0.0, 180.0),
    "analogous": (-30.0, 0.0, 30.0),
    "triadic": (0.0, 120.0, 240.0),
    "split-complementary": (0.0, 150.0, 210.0),
    "tetradic": (0.0, 90.0, 180.0, 270.0),
    "monochromatic": (0.0,),
    "double-complementary": (0.0, 60.0, 180.0, 240.0),
    "compound": (0.0, 30.0, 180.0, 210.0),
    "pentadic": (0.0, 72.0, 144.0, 216.0, 288.0),
    "analogous-accent": (-30.0, 0.0, 30.0, 180.0),
    "golden": (0.0, 137.5, 275.0),
    "near-complementary": (0.0, 165.0),
})

HARMONY_DESCRIPTIONS = MappingProxyType({
    "complementary": "two colours opposite on the colour wheel",
    "analogous": "three colours adjacent on the wheel",
    "triadic": "three colours evenly spaced (120° apart)",
    "split-complementary": "base colour plus two adjacent to its complement",
    "tetradic": "four colours evenly spaced (90° apart)",
    "monochromatic": "single hue with varying lightness",
    "double-complementary": "two complementary pairs forming a rectangle",
    "compound": "analogous colours plus their complements",
    "pentadic": "five colours evenly spaced (72° apart)",
    "analogous-accent": "analogous colours with a complementary accent",
    "golden": "colours spaced by the golden angle (137.5°)",
    "near-complementary": "slightly off-complement for softer contrast",
})

# Monochromatic targets; None stands for the base colour's own lightness
MONO_LIGHTNESS = (0.85, 0.70, None, 0.40, 0.25)
MONO_PASTEL_TH = 0.7               # Above this lightness chroma is halved
MONO_PASTEL_CHROMA = 0.5

# Design-token shade scale: level -> OKLCH lightness
SHADE_ANCHORS = MappingProxyType({
    50: 0.97,
    100: 0.93,
    200: 0.87,
    300: 0.78,
    400: 0.66,
    500: 0.55,
    600: 0.47,
    700: 0.40,
    800: 0.33,
    900: 0.27,
    950: 0.20,
})
SHADE_LEVELS = tuple(SHADE_ANCHORS)
SHADE_LIGHT_MAX_LEVEL = 100        # Levels at or below are chroma-compressed as tints
SHADE_DARK_MIN_LEVEL = 900         # Levels at or above are chroma-compressed as shades
SHADE_LIGHT_CHROMA = 0.3
SHADE_DARK_CHROMA = 0.6

# ==========================================
# Color Vision Deficiency
# ==========================================

# Simulation matrices on plain (non-linearised) RGB (Source: Machado, Oliveira & Fernandes, 2009)
CB_MATRICES = MappingProxyType({
    "normal": (
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    ),
    "protanopia": (
        (0.567, 0.433, 0.0),         # Red-blind (L-cone absent)
        (0.558, 0.442, 0.0),
        (0.0, 0.242, 0.758),
    ),
    "deuteranopia": (
        (0.625, 0.375, 0.0),         # Green-blind (M-cone absent)
        (0.7, 0.3, 0.0),
        (0.0, 0.3, 0.7),
    ),
    "tritanopia": (
        (0.95, 0.05, 0.0),           # Blue-blind (S-cone absent)
        (0.0, 0.433, 0.567),
        (0.0, 0.475, 0.525),
    ),
    "protanomaly": (
        (0.817, 0.183, 0.0),
        (0.333, 0.667, 0.0),
        (0.0, 0.125, 0.875),
    ),
    "deuteranomaly": (
        (0.8, 0.2, 0.0),
        (0.258, 0.742, 0.0),
        (0.0, 0.142, 0.858),
    ),
    "tritanomaly": (
        (0.967, 0.033, 0.0),
        (0.0, 0.733, 0.267),
        (0.0, 0.183, 0.817),
    ),
    "achromatopsia": (
        (0.299, 0.587, 0.114),       # Rec. 601 luma on every channel
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
    ),
    "achromatomaly": (
        (0.618, 0.320, 0.062),
        (0.163, 0.775, 0.062),
        (0.163, 0.320, 0.516),
    ),
})

# name, description, severity
CB_INFO = MappingProxyType({
    "normal": ("Normal Vision", "no colour vision deficiency", "none"),
    "protanopia": ("Protanopia", "red-blind, cannot perceive red light", "full"),
    "deuteranopia": ("Deuteranopia", "green-blind, cannot perceive green light", "full"),
    "tritanopia": ("Tritanopia", "blue-blind, cannot perceive blue light", "full"),
    "protanomaly": ("Protanomaly", "red-weak, reduced sensitivity to red", "partial"),
    "deuteranomaly": ("Deuteranomaly", "green-weak, reduced sensitivity to green", "partial"),
    "tritanomaly": ("Tritanomaly", "blue-weak, reduced sensitivity to blue", "partial"),
    "achromatopsia": ("Achromatopsia", "total colour blindness, sees only grayscale", "full"),
    "achromatomaly": ("Achromatomaly", "partial colour blindness, reduced colour perception", "partial"),
})

# ==========================================
# Palette Strategies
# ==========================================

MIN_PALETTE_SIZE = 2
MAX_PALETTE_SIZE = 11
DEFAULT_PALETTE_SIZE = 5

# Random pleasant base for colour-theory strategies (L, C, H ranges)
BASE_L_RANGE = (0.4, 0.75)
BASE_C_RANGE = (0.08, 0.2)
BASE_H_RANGE = (0.0, 360.0)

ANALOGOUS_SPREAD = 40.0            # Total hue spread of analogous palettes
COMPLEMENT_HUE_JITTER = 15.0
HARMONY_HUE_JITTER = 10.0
NARROW_L_JITTER = 0.1
WIDE_L_JITTER = 0.15
C_JITTER = 0.05

MONO_STRATEGY_C_RANGE = (0.1, 0.2)
MONO_STRATEGY_L_RANGE = (0.3, 0.85)
MONO_STRATEGY_EDGE_LOW = 0.4       # Chroma is reduced outside [EDGE_LOW, EDGE_HIGH]
MONO_STRATEGY_EDGE_HIGH = 0.75
MONO_STRATEGY_EDGE_CHROMA = 0.7

EXTEND_HUE_STEP = (20.0, 40.0)     # Hue advance when appending a colour
EXTEND_L_JITTER = 0.1

CATEGORY_TITLES = MappingProxyType({
    "random": "Random",
    "color-theory": "Color Theory",
    "shade": "Shade Ramps",
    "mood": "Moods",
    "era": "Decades & Eras",
    "nature": "Nature & Scenes",
    "cultural": "Art & Culture",
})

# ==========================================
# CLI UI & Data Structures
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
MAX_STEPS = 1000                   # Upper bound for gradient steps
DEFAULT_STEPS = 10
MAX_SEED = 999_999_999_999_999_999

# Keys used to extract and format technical color data
TECH_INFO_KEYS = [
    'rgb',
    'linear',
    'hsl',
    'oklab',
    'oklch',
    'luminance',
    'contrast',
]

# Output formats for the 'convert' command
FORMAT_ALIASES = MappingProxyType({
    'hex': 'hex',
    'rgb': 'rgb',
    'linear': 'linear',
    'srgblinear': 'linear',
    'hsl': 'hsl',
    'oklab': 'oklab',
    'oklch': 'oklch',
})
INPUT_FORMATS = ('hex', 'rgb')

# ANSI Terminal Styling
MSG_BOLD_COLORS = MappingProxyType({
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
})

MSG_COLORS = MappingProxyType({
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
})

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"

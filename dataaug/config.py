"""
Global augmentation presets.
Edit values once here; the preset table and the driver import them.
"""

# Geometric
ROTATION_ANGLES = tuple(range(30, 361, 30))   # degrees, 30 .. 360
ZOOM_FACTORS    = (1.2, 1.5, 2.0)             # centre crop 1/f, resize back
TRANSLATE_PX    = 50                          # shift for left/right/up/down

# Colour & contrast
RGB_SHIFT       = 30                          # added to one channel at a time
HSV_PRESET      = (15, 1.2, 1.2)              # hue shift, sat mult, val mult
CLAHE_CLIP      = 4.0                         # contrast-limit
CLAHE_TILEGR    = (8, 8)
CONTRAST_ALPHA  = 1.5
GAMMA           = 0.5
BRIGHTNESS_BETA = 50

# Filters & compression
BLUR_KSIZE      = 5
MEDIAN_KSIZE    = 5                           # must be odd
JPEG_QUALITY    = 50                          # in-memory lossy round-trip

# Output
OUTPUT_EXT      = ".jpg"
OUTPUT_QUALITY  = 95                          # OpenCV's default JPEG quality

# Palettes are ordered darkest (densest ink) first.
PALETTE = "@%#*+=-:. "

# Block elements: full, dark shade, medium shade, light shade, blank
BLOCKS = "█▓▒░ "

# Longer ASCII ramp for smoother gradients
DETAILED = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

CHARSETS = {
    "standard": PALETTE,
    "blocks": BLOCKS,
    "detailed": DETAILED,
}

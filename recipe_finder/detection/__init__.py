"""
Ingredient detection from photos.

Responsibilities:
- Validate uploads before any decode attempt.
- Decode and render images onto a fixed-size canvas.
- Reduce the canvas to a coarse color histogram.
- Map the histogram to candidate catalog ingredients via a fixed pattern table.
"""

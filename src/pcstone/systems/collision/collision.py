"""
collision.py
------------
Axis-aligned bounding box overlap tests.

Coordinates are truncated to whole pixels before comparing, so sub-pixel
differences never decide a hit. Boxes that only touch along an edge do
not overlap.
"""


def overlaps(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Return True if box A and box B overlap."""
    ax, ay, aw, ah = int(ax), int(ay), int(aw), int(ah)
    bx, by, bw, bh = int(bx), int(by), int(bw), int(bh)
    return (
        ax < bx + bw and ax + aw > bx and
        ay < by + bh and ay + ah > by
    )


def entities_overlap(a, b) -> bool:
    """Overlap test for any two objects exposing x, y, width and height."""
    return overlaps(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)

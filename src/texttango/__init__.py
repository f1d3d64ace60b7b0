"""TextTango - Turn two texts into one 3D-printable solid.

TextTango extrudes the glyphs of two strings, turns them 45 degrees apart and
intersects them position by position, so the printed object reads as the
first text from one diagonal and the second text from the other.

Example:
    $ texttango YES NO --font Roboto-Bold.ttf -o yes_no.stl

This will create yes_no.stl with a base plate under the letters.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

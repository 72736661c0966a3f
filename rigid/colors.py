r"""
This module provides conversions from the HSV (hue, saturation, value) color space to RGB.

The conversion follows the closed form chroma/sector formula:

.. math::
    C = V S \qquad H' = \frac{H}{60^\circ} \qquad X = C\left(1 - \left|H' \bmod 2 - 1\right|\right) \qquad m = V - C

where the RGB triple is :math:`(C, X, 0)`, :math:`(X, C, 0)`, :math:`(0, C, X)`, :math:`(0, X, C)`, :math:`(X, 0, C)`
or :math:`(C, 0, X)` for the sector :math:`\lfloor H'\rfloor = 0, \ldots, 5`, with :math:`m` added to every
component.  Hue is given in degrees and wraps around, so 360 is the same as 0.  Saturation, value, the RGB components
and alpha are all in the range :math:`[0, 1]`.
"""

from typing import NamedTuple

import numpy as np

from rigid._typing import DOUBLE_ARRAY


class HSV(NamedTuple):
    """
    A color in the HSV color space
    """

    h: float
    """
    The hue in degrees
    """

    s: float
    """
    The saturation
    """

    v: float
    """
    The value
    """

    def to_rgb(self) -> DOUBLE_ARRAY:
        """
        Returns the color as an RGB array.  See :func:`hsv_to_rgb`.
        """

        return hsv_to_rgb(self.h, self.s, self.v)


class HSVA(NamedTuple):
    """
    A color in the HSV color space with an alpha (opacity) channel
    """

    h: float
    s: float
    v: float
    a: float

    @classmethod
    def from_hsv(cls, hsv: HSV, a: float) -> 'HSVA':
        """
        Adds an alpha channel to an HSV color
        """

        return cls(hsv.h, hsv.s, hsv.v, a)

    @property
    def hsv(self) -> HSV:
        """
        The color without the alpha channel
        """

        return HSV(self.h, self.s, self.v)

    def to_rgba(self) -> DOUBLE_ARRAY:
        """
        Returns the color as an RGBA array.  See :func:`hsva_to_rgba`.
        """

        return hsva_to_rgba(self.h, self.s, self.v, self.a)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> DOUBLE_ARRAY:
    """
    Converts an HSV color into RGB.

    :param hue: The hue in degrees
    :param saturation: The saturation in [0, 1]
    :param value: The value in [0, 1]
    :return: The red, green, and blue components as a 3 element array
    """

    chroma = value * saturation

    sector = np.mod(hue, 360.0) / 60.0

    # the second largest component
    x = chroma * (1 - abs(np.mod(sector, 2.0) - 1))

    if sector < 1:
        rgb = [chroma, x, 0]
    elif sector < 2:
        rgb = [x, chroma, 0]
    elif sector < 3:
        rgb = [0, chroma, x]
    elif sector < 4:
        rgb = [0, x, chroma]
    elif sector < 5:
        rgb = [x, 0, chroma]
    else:
        rgb = [chroma, 0, x]

    # match the value by adding the same amount to each component
    return np.array(rgb, dtype=np.float64) + (value - chroma)


def hsva_to_rgba(hue: float, saturation: float, value: float, alpha: float) -> DOUBLE_ARRAY:
    """
    Converts an HSVA color into RGBA.  The alpha channel is passed through unchanged.

    :param hue: The hue in degrees
    :param saturation: The saturation in [0, 1]
    :param value: The value in [0, 1]
    :param alpha: The alpha in [0, 1]
    :return: The red, green, blue, and alpha components as a 4 element array
    """

    return np.hstack([hsv_to_rgb(hue, saturation, value), alpha])


def rgb_to_hsv(red: float, green: float, blue: float) -> HSV:
    """
    Converts an RGB color into HSV.

    Grays (including black) have no defined hue and are returned with a hue of 0.  Black is also returned with a
    saturation of 0.

    :param red: The red component in [0, 1]
    :param green: The green component in [0, 1]
    :param blue: The blue component in [0, 1]
    :return: The color as an :class:`HSV` with the hue in [0, 360)
    """

    value = max(red, green, blue)
    chroma = value - min(red, green, blue)

    if chroma == 0:
        hue = 0.0
    elif value == red:
        hue = 60.0 * float(np.mod((green - blue) / chroma, 6.0))
    elif value == green:
        hue = 60.0 * ((blue - red) / chroma + 2)
    else:
        hue = 60.0 * ((red - green) / chroma + 4)

    saturation = 0.0 if value == 0 else chroma / value

    return HSV(float(hue), float(saturation), float(value))

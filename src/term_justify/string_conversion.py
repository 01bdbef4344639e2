"""Format python values as svg attribute strings.

:author: Shay Hill
:created: 2026-10-19

Numbers are rounded to six digits after the decimal point. Attribute names may
be given as python keywords: ``font_size`` becomes ``font-size`` and a trailing
underscore is stripped (``class_`` becomes ``class``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import svg_path_data
from lxml import etree

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from term_justify.attrib_hints import ElemAttrib


def format_number(num: float | str, resolution: int | None = 6) -> str:
    """Format a number into an svg-readable float string.

    :param num: number to format (string or float)
    :param resolution: number of digits after the decimal point, defaults to 6.
        None to match behavior of `str(num)`.
    :return: shortest string representation of the rounded number
    """
    return svg_path_data.format_number(num, resolution=resolution)


def _fix_key(key: str) -> str:
    """Translate a python keyword into an svg attribute name."""
    return key.rstrip("_").replace("_", "-")


def _format_val(val: ElemAttrib) -> str:
    """Translate a python value into an svg attribute value."""
    if val is None:
        return "none"
    if isinstance(val, (int, float)):
        return format_number(val)
    return val


def format_attr_dict(**attributes: ElemAttrib) -> dict[str, str]:
    """Create a dict of svg attributes from keyword arguments.

    :param attributes: element attribute names and values.
    :return: dict of attributes, each key a valid svg attribute name, each value a str

        >>> format_attr_dict(font_size=16.0, class_="word", fill=None)
        {'font-size': '16', 'class': 'word', 'fill': 'none'}
    """
    return {_fix_key(k): _format_val(v) for k, v in attributes.items()}


def set_attributes(elem: EtreeElement, **attributes: ElemAttrib) -> None:
    """Set name: value items as element attributes. Make every value a string.

    :param elem: element to receive element.set(keyword, str(value)) calls
    :param attributes: element attribute names and values. A 'text' keyword sets
        the element text.
    :effects: updates ``elem``
    """
    attr_dict = format_attr_dict(**attributes)
    if "text" in attr_dict:
        elem.text = attr_dict.pop("text")
    for key, val in attr_dict.items():
        elem.set(key, val)


def svg_tostring(xml: EtreeElement, **tostring_kwargs: str | bool | None) -> bytes:
    """Contents of svg file with optional xml declaration.

    :param xml: root node of your svg geometry
    :param tostring_kwargs: keyword arguments to etree.tostring. With
        xml_declaration=True, encoding defaults to "UTF-8".
    :return: bytestring of svg file contents
    """
    tostring_kwargs["pretty_print"] = tostring_kwargs.get("pretty_print", True)
    if tostring_kwargs.get("xml_declaration"):
        tostring_kwargs["encoding"] = tostring_kwargs.get("encoding", "UTF-8")
    as_bytes = etree.tostring(etree.ElementTree(xml), **tostring_kwargs)  # type: ignore
    return cast("bytes", as_bytes)

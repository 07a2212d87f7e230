"""Document tree for chart markup.

The SVG is drawn with svgwrite and embedded raw in a dominate HTML tree,
which is rendered once. Legend labels and values are escaped by dominate;
the SVG and the CSS are inserted verbatim.
"""

from collections.abc import Sequence

import svgwrite
from dominate import tags
from dominate.dom_tag import dom_tag
from dominate.util import raw

from slicewise.core.models import ChartConfig, Series, SlicePath

from .colors import neutral_colors
from .formatting import format_value

# Layout shared by every legend item; colours are added per position
LEGEND_ITEM_RULE = (
    "ul li {display:flex;justify-content:space-between;gap:1.5rem;width:100%;"
    "position:relative;left:-1rem;list-style:none}"
)


def svg_drawing(config: ChartConfig, slices: Sequence[SlicePath]) -> svgwrite.Drawing:
    """Draw the <svg>, falling back to a neutral disc without slices."""
    # Validation off: svgwrite's SVG 1.1 colour checks reject hsl()
    drawing = svgwrite.Drawing(size=(config.size, config.size), profile="full", debug=False)
    drawing.attribs["viewBox"] = f"0 0 {config.size} {config.size}"
    drawing.attribs["style"] = "aspect-ratio:1"

    if not slices:
        drawing.add(drawing.circle(center=("50%", "50%"), r="50%", fill=neutral_colors.EMPTY_FILL))
    for chart_slice in slices:
        drawing.add(drawing.path(d=chart_slice.d, fill=chart_slice.fill))

    return drawing


def svg_element(config: ChartConfig, slices: Sequence[SlicePath]) -> raw:
    return raw(svg_drawing(config, slices).tostring())


def legend_css(palette: Sequence[str]) -> str:
    rules = [LEGEND_ITEM_RULE]
    rules.extend(f"ul li:nth-child({position}) {{color:{colour}}}" for position, colour in enumerate(palette, 1))
    return " ".join(rules)


def style_element(palette: Sequence[str]) -> tags.style | None:
    """Build the <style> block colouring legend items, or None for an empty palette."""
    if not palette:
        return None
    return tags.style(raw(legend_css(palette)))


def legend_element(series: Series) -> tags.ul | None:
    """Build the legend list, one item per caller-supplied entry.

    Labelled entries show label and value in two spans; positional entries
    show the bare value.
    """
    entries = series.legend_entries
    if not entries:
        return None

    legend = tags.ul()
    for entry in entries:
        value = format_value(entry.value)
        if entry.label is None:
            legend.add(tags.li(value))
        else:
            legend.add(tags.li(tags.span(entry.label), tags.span(value)))
    return legend


def wrapper_element(config: ChartConfig, *children: dom_tag | None) -> tags.div:
    """Wrap chart parts in the flex container, skipping missing parts."""
    container = tags.div(
        style=f"display:flex;flex-direction:{config.direction.value};gap:{config.gap}px;align-items:center"
    )
    for child in children:
        if child is not None:
            container.add(child)
    return container


def to_html(element: dom_tag) -> str:
    """Render a node on one line."""
    return element.render(pretty=False)

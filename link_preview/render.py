from collections.abc import Mapping
from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape

from link_preview.schemas import Layout, PreviewState
from link_preview.services.metadata import DEFAULT_THEME


@lru_cache()
def get_environment() -> Environment:
    return Environment(
        loader=PackageLoader("link_preview", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_card(
    state: PreviewState,
    layout: Layout | str = Layout.VERTICAL,
    strings: Mapping[str, str] | None = None,
    rtl: bool = False,
) -> str:
    """Render ``state`` as an HTML fragment; all values are escaped."""
    template = get_environment().get_template("card.html.j2")
    return template.render(
        state=state,
        layout=Layout(layout).value,
        strings=strings or {},
        rtl=rtl,
        default_accent=DEFAULT_THEME,
    )

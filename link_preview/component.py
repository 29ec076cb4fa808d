import asyncio
import logging
from typing import Any, Optional

from link_preview.i18n import Localizer
from link_preview.render import render_card
from link_preview.schemas import Layout, PreviewState
from link_preview.services.metadata import MetadataService

logger = logging.getLogger(__name__)


class LinkPreviewCard:
    """`link-preview-card`: owns one PreviewState and refetches when href changes.

    Only the most recently requested URL may write to the state. A new
    fetch cancels the one it supersedes, and a late result from an older
    fetch is discarded by sequence number.
    """

    tag = "link-preview-card"
    reactive_properties = ("href", "layout", "locale")

    def __init__(
        self,
        service: MetadataService,
        localizer: Optional[Localizer] = None,
        layout: Layout | str = Layout.VERTICAL,
        locale: Optional[str] = None,
    ) -> None:
        self.service = service
        self.localizer = localizer
        self.state = PreviewState()
        self.href = ""
        self.layout = Layout(layout)
        self.locale = locale
        self._sequence = 0
        self._task: Optional[asyncio.Task[PreviewState]] = None

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    def request_update(self, **props: Any) -> set[str]:
        """Assign reactive properties and run :meth:`updated` with the changed names."""
        changed: set[str] = set()
        for name, value in props.items():
            if name not in self.reactive_properties:
                raise AttributeError(f"{self.tag} has no reactive property {name!r}")
            if name == "layout":
                value = Layout(value)
            if getattr(self, name) != value:
                setattr(self, name, value)
                changed.add(name)
        if changed:
            self.updated(changed)
        return changed

    def updated(self, changed: set[str]) -> Optional["asyncio.Task[PreviewState]"]:
        if "href" in changed and self.href:
            return self.fetch_data(self.href)
        return None

    def fetch_data(self, link: str) -> "asyncio.Task[PreviewState]":
        """Start loading ``link``; the state is marked loading before this returns.

        Must be called from a running event loop. Awaiting the returned
        task yields the state once the fetch settles; a superseded task
        is cancelled.
        """
        self._sequence += 1
        sequence = self._sequence
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling superseded preview fetch for %s", self.state.source_url)
            self._task.cancel()

        self.state.source_url = link
        self.state.is_loading = True
        self._task = asyncio.get_running_loop().create_task(self._load(link, sequence))
        return self._task

    async def wait(self) -> PreviewState:
        """Wait until the latest fetch, including any that supersede it, settles."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        if self._task is not None and not self._task.cancelled():
            self._task.result()
        return self.state

    async def _load(self, link: str, sequence: int) -> PreviewState:
        try:
            result = await self.service.fetch_and_normalize(link)
            if sequence == self._sequence:
                self.state = result
            else:
                logger.debug("Discarding stale preview for %s", link)
        finally:
            if sequence == self._sequence:
                self.state.is_loading = False
        return self.state

    def render(self) -> str:
        strings: dict[str, str] = {}
        rtl = False
        if self.localizer is not None:
            strings = self.localizer.strings(self.locale)
            rtl = self.localizer.is_rtl(self.locale)
        return render_card(self.state, self.layout, strings, rtl=rtl)

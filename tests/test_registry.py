import pytest

import link_preview
from link_preview.component import LinkPreviewCard
from link_preview.registry import ElementRegistry


def test_register_defines_card_explicitly():
    registry = ElementRegistry()
    assert LinkPreviewCard.tag not in registry

    link_preview.register(registry)

    assert registry.get("link-preview-card") is LinkPreviewCard
    assert registry.tags == ["link-preview-card"]


def test_duplicate_definition_rejected():
    registry = ElementRegistry()
    link_preview.register(registry)
    with pytest.raises(ValueError):
        link_preview.register(registry)


def test_unknown_tag():
    with pytest.raises(LookupError):
        ElementRegistry().get("missing-element")


def test_create_instantiates_element(make_service, json_handler):
    registry = ElementRegistry()
    link_preview.register(registry)

    card = registry.create(
        "link-preview-card", service=make_service(json_handler({})), layout="horizontal"
    )

    assert isinstance(card, LinkPreviewCard)
    assert card.layout.value == "horizontal"

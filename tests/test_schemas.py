"""Tests for block and page models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from notion2md.schemas import Block, BlockKind, ImageResource, PageRef, rich_text_to_plain


class TestBlockKind:
    """Tests for BlockKind.parse."""

    def test_known_type(self) -> None:
        assert BlockKind.parse("numbered_list_item") is BlockKind.NUMBERED_LIST_ITEM

    def test_unsupported_tag_is_kept_apart(self) -> None:
        assert BlockKind.parse("unsupported") is BlockKind.UNSUPPORTED

    def test_unknown_type_maps_to_other(self) -> None:
        assert BlockKind.parse("child_page") is BlockKind.OTHER
        assert BlockKind.parse("synced_block") is BlockKind.OTHER

    def test_none_maps_to_other(self) -> None:
        assert BlockKind.parse(None) is BlockKind.OTHER


class TestBlockFromApi:
    """Tests for Block.from_api."""

    def test_parses_paragraph(self) -> None:
        """Payload is the object stored under the type key."""
        block = Block.from_api(
            {
                "object": "block",
                "id": "b1",
                "parent": {"type": "block_id", "block_id": "p1"},
                "has_children": True,
                "type": "paragraph",
                "paragraph": {
                    "rich_text": [
                        {"type": "text", "plain_text": "Hello, "},
                        {"type": "text", "plain_text": "world"},
                    ]
                },
            }
        )

        assert block.id == "b1"
        assert block.kind is BlockKind.PARAGRAPH
        assert block.has_children is True
        assert block.parent_id == "p1"
        assert block.text == "Hello, world"

    def test_page_parent(self) -> None:
        block = Block.from_api(
            {
                "id": "b1",
                "parent": {"type": "page_id", "page_id": "page-9"},
                "type": "divider",
                "divider": {},
            }
        )
        assert block.parent_id == "page-9"
        assert block.has_children is False

    def test_missing_type_is_unsupported(self) -> None:
        block = Block.from_api({"id": "b1"})
        assert block.kind is BlockKind.UNSUPPORTED

    def test_legacy_text_key(self) -> None:
        block = Block.from_api(
            {"id": "b1", "type": "quote", "quote": {"text": [{"plain_text": "old"}]}}
        )
        assert block.text == "old"

    def test_is_frozen(self) -> None:
        block = Block(id="b1", type="divider")
        with pytest.raises(ValidationError):
            block.type = "paragraph"


class TestRichText:
    """Tests for rich text reduction."""

    def test_falls_back_to_text_content(self) -> None:
        runs = [{"type": "text", "text": {"content": "raw"}}, {"plain_text": "!"}]
        assert rich_text_to_plain(runs) == "raw!"

    def test_empty(self) -> None:
        assert rich_text_to_plain(None) == ""
        assert rich_text_to_plain([]) == ""


class TestImageResource:
    """Tests for decoding the image lookup response."""

    def test_file_url(self) -> None:
        resource = ImageResource.model_validate(
            {
                "object": "block",
                "id": "img",
                "type": "image",
                "image": {"caption": [], "type": "file", "file": {"url": "https://x/y.png"}},
            }
        )
        assert resource.url == "https://x/y.png"

    def test_external_url(self) -> None:
        resource = ImageResource.model_validate(
            {"image": {"type": "external", "external": {"url": "https://cdn/z.png"}}}
        )
        assert resource.url == "https://cdn/z.png"

    def test_missing_image_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            ImageResource.model_validate({"object": "block", "id": "img"})


class TestPageRef:
    """Tests for PageRef immutability."""

    def test_is_frozen(self) -> None:
        ref = PageRef(id="p1", title="Roadmap")
        with pytest.raises(ValidationError):
            ref.title = "Other"

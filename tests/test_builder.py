"""メッセージ組み立てのテスト"""

from itertools import product

import pytest

from slon.builder import build_attachment, build_blocks, build_message
from slon.slack.blocks import (
    SlackContextBlock,
    SlackFieldsSectionBlock,
    SlackHeaderBlock,
    SlackMarkdownText,
    SlackPlainText,
    SlackTextSectionBlock,
)
from slon.slack.exceptions import ConfigurationError


class TestBuildBlocks:
    """build_blocks関数のテスト"""

    def test_all_blocks_in_fixed_order(self) -> None:
        """header → message → fields → footer の順に並ぶこと"""
        blocks = build_blocks(header="Deploy", message="shipped", fields=["a", "b"], footer="by ci")

        assert blocks == [
            SlackHeaderBlock(text=SlackPlainText(text="Deploy", emoji=True)),
            SlackTextSectionBlock(text=SlackMarkdownText(text="shipped")),
            SlackFieldsSectionBlock(fields=[SlackMarkdownText(text="a"), SlackMarkdownText(text="b")]),
            SlackContextBlock(elements=[SlackMarkdownText(text="by ci")]),
        ]

    @pytest.mark.parametrize(
        ("has_header", "has_message", "has_fields", "has_footer"),
        [combo for combo in product([True, False], repeat=4) if any(combo)],
    )
    def test_present_inputs_are_kept_in_order(
        self, has_header: bool, has_message: bool, has_fields: bool, has_footer: bool
    ) -> None:
        """指定された入力だけが順序通りにブロックになること"""
        blocks = build_blocks(
            header="h" if has_header else None,
            message="m" if has_message else None,
            fields=["f"] if has_fields else None,
            footer="b" if has_footer else None,
        )

        expected = [
            block_type
            for block_type, present in [
                (SlackHeaderBlock, has_header),
                (SlackTextSectionBlock, has_message),
                (SlackFieldsSectionBlock, has_fields),
                (SlackContextBlock, has_footer),
            ]
            if present
        ]
        assert [type(block) for block in blocks] == expected

    def test_fields_keep_input_order(self) -> None:
        """フィールドが入力順に1つのsectionにまとまること"""
        blocks = build_blocks(fields=["*env*: prod", "*region*: us", "*by*: ci"])

        assert len(blocks) == 1
        assert isinstance(blocks[0], SlackFieldsSectionBlock)
        assert [field.text for field in blocks[0].fields] == ["*env*: prod", "*region*: us", "*by*: ci"]

    def test_empty_string_counts_as_present(self) -> None:
        """空文字列も指定ありとして扱うこと"""
        blocks = build_blocks(message="")
        assert blocks == [SlackTextSectionBlock(text=SlackMarkdownText(text=""))]

    @pytest.mark.parametrize("fields", [None, []])
    def test_no_inputs_raises(self, fields: list[str] | None) -> None:
        """入力が何もない場合にConfigurationErrorになること"""
        with pytest.raises(ConfigurationError, match="At least one of header, footer, message and fields is required"):
            build_blocks(fields=fields)


class TestBuildAttachment:
    """build_attachment関数のテスト"""

    def test_known_color_is_resolved(self) -> None:
        """既知の色名がHEX値に解決されること"""
        attachment = build_attachment(message="hello", color="danger")
        assert attachment.color == "#a30100"

    def test_unknown_color_passes_through(self) -> None:
        """未知の色はそのまま使われること"""
        attachment = build_attachment(message="hello", color="#123456")
        assert attachment.color == "#123456"

    def test_no_color(self) -> None:
        """色の指定がない場合はcolorを出力しないこと"""
        attachment = build_attachment(message="hello")
        assert attachment.color is None
        assert "color" not in attachment.model_dump(exclude_none=True)


class TestBuildMessage:
    """build_message関数のテスト"""

    def test_deploy_scenario(self) -> None:
        """header・message・colorから1つのアタッチメントが作られること"""
        request = build_message(header="Deploy", message="v1.2.3 shipped", color="good")

        assert len(request.attachments) == 1
        attachment = request.attachments[0]
        assert attachment.color == "#2eb886"
        assert attachment.blocks == [
            SlackHeaderBlock(text=SlackPlainText(text="Deploy", emoji=True)),
            SlackTextSectionBlock(text=SlackMarkdownText(text="v1.2.3 shipped")),
        ]

    def test_sender_options(self) -> None:
        """channel・username・icon_emojiが設定されること"""
        request = build_message(message="hello", channel="#general", username="bot", icon_emoji=":robot_face:")

        assert request.channel == "#general"
        assert request.username == "bot"
        assert request.icon_emoji == ":robot_face:"

    def test_no_blocks_raises(self) -> None:
        """ブロックがない場合はConfigurationErrorになること"""
        with pytest.raises(ConfigurationError):
            build_message(channel="#general", color="good")
